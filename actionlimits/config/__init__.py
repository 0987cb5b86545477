"""
Limits configuration package.

This module provides:
- ActionLimits schema for the limits section of an action definition
- Loaders for limits from mappings and YAML files
- Environment variable overrides for individual limits
"""

from .constants import DEFAULT_ENV_PREFIX, DEFAULT_SECTION, MAX_CONFIG_SIZE_BYTES
from .loader import collect_env_overrides, load_limits, load_limits_file
from .schemas import ActionLimits, validate_limits

__all__ = [
    # Schema
    "ActionLimits",
    "validate_limits",
    # Loaders
    "load_limits",
    "load_limits_file",
    "collect_env_overrides",
    # Constants
    "DEFAULT_ENV_PREFIX",
    "DEFAULT_SECTION",
    "MAX_CONFIG_SIZE_BYTES",
]
