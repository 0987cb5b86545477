"""
Configuration-related constants and resource limits.
"""

# Maximum limits file size (10MB) to prevent DoS attacks
MAX_CONFIG_SIZE_BYTES = 10 * 1024 * 1024

# Key of the limits section in an action definition file
DEFAULT_SECTION = "limits"

# Prefix for environment variable overrides (e.g. ACTIONLIMITS_MEMORY=384)
DEFAULT_ENV_PREFIX = "ACTIONLIMITS_"
