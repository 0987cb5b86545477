from importlib.metadata import PackageNotFoundError, version

from .config import ActionLimits, load_limits, load_limits_file
from .exceptions import ConfigError, InvalidArgumentError, LimitError, MalformedValueError
from .memory import (
    MAX_MEMORY,
    MIN_MEMORY,
    STD_MEMORY,
    MemoryLimit,
    create,
    default,
    deserialize,
    serialize,
)
from .normalizer import ArgNormalizer

# Version is read from package metadata
try:
    __version__ = version("actionlimits")
except PackageNotFoundError:
    # Package not installed, use fallback (development mode)
    __version__ = "0.1.0-dev"

# Explicit public API
__all__ = [
    # Version
    "__version__",
    # Memory limit
    "MemoryLimit",
    "MIN_MEMORY",
    "MAX_MEMORY",
    "STD_MEMORY",
    "default",
    "create",
    "serialize",
    "deserialize",
    # Normalizer interface
    "ArgNormalizer",
    # Config
    "ActionLimits",
    "load_limits",
    "load_limits_file",
    # Exceptions
    "LimitError",
    "InvalidArgumentError",
    "MalformedValueError",
    "ConfigError",
]
