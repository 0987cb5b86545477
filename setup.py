"""Packaging for actionlimits.

Declares the runtime stack (PyYAML for limits files, pydantic for the limits
schema), the test extra and the actionlimits console script.
"""

from setuptools import find_packages, setup

setup(
    name="actionlimits",
    version="0.1.0",
    description="Validated resource limits for action definitions",
    python_requires=">=3.11",
    packages=find_packages(include=["actionlimits", "actionlimits.*"]),
    install_requires=[
        "pydantic>=2.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "hypothesis>=6.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "actionlimits=actionlimits.cli.main:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
