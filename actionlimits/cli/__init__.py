"""
Command-line interface for action limits.

Usage:
    actionlimits check 384
    actionlimits resolve action.yaml --format json
    actionlimits range
"""

from actionlimits.cli.main import main
from actionlimits.cli.output import BufferedOutput, ConsoleOutput, OutputWriter

__all__ = [
    "main",
    "ConsoleOutput",
    "BufferedOutput",
    "OutputWriter",
]
