"""
Loading of action limits from mappings and YAML files.

The loaders implement the collaborator side of the limits contract: raw
values are deserialized, absent fields are replaced by their defaults, and
every failure surfaces as ConfigError so an action definition can be
rejected as a whole.

Environment Variable Override Format:
    <PREFIX><FIELD>=value

Examples:
    ACTIONLIMITS_MEMORY=384
"""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from pydantic import ValidationError

from actionlimits.exceptions import ConfigError

from .constants import DEFAULT_ENV_PREFIX, DEFAULT_SECTION, MAX_CONFIG_SIZE_BYTES
from .schemas import ActionLimits

_lg = logging.getLogger(__name__)


def _check_file_size(path: Path) -> None:
    """Check file size limit to prevent DoS attacks."""
    file_size = os.path.getsize(path)
    if file_size > MAX_CONFIG_SIZE_BYTES:
        raise ConfigError(
            f"limits file is {file_size} bytes, exceeding maximum size of "
            f"{MAX_CONFIG_SIZE_BYTES} bytes",
            path=path,
        )


def _read_yaml(path: Path) -> Any:
    """
    Parse a YAML limits file.

    Raises:
        ConfigError: If the file cannot be read, is too large, is not
            UTF-8 or is not valid YAML
    """
    try:
        _check_file_size(path)
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError("invalid YAML in limits file", path=path) from e
    except UnicodeDecodeError as e:
        raise ConfigError("limits file is not valid UTF-8", path=path) from e
    except OSError as e:
        raise ConfigError(
            f"cannot read limits file: {e.strerror or e}", path=path
        ) from e


def _extract_section(document: Any, section: str, path: Path) -> dict[str, Any]:
    """Get the limits section of a parsed document as a fresh dict."""
    if document is None:
        return {}
    if not isinstance(document, Mapping):
        raise ConfigError("limits file must contain a mapping", path=path)

    data = document.get(section)
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ConfigError(
            f"section '{section}' must be a mapping", path=path, section=section
        )
    return dict(data)


def _convert_env_value(value: str) -> Any:
    """
    Convert an environment variable string using YAML scalar rules.

    "384" becomes an int, "256.5" a float and anything else stays a string,
    so the limit deserializers see the same types a YAML file would give them.
    """
    try:
        return yaml.safe_load(value)
    except yaml.YAMLError:
        return value


def collect_env_overrides(env_prefix: str = DEFAULT_ENV_PREFIX) -> dict[str, Any]:
    """
    Collect limit overrides from environment variables.

    Only variables naming a known limit field are considered, so unrelated
    variables sharing the prefix are ignored.

    Args:
        env_prefix: Prefix for environment variables

    Returns:
        Dictionary of field name to converted value
    """
    overrides = {}
    for field_name in ActionLimits.model_fields:
        env_key = f"{env_prefix}{field_name.upper()}"
        if env_key in os.environ:
            overrides[field_name] = _convert_env_value(os.environ[env_key])
    return overrides


def load_limits(
    data: Mapping[str, Any] | None, lg: logging.Logger | None = None
) -> ActionLimits:
    """
    Validate the limits section of an action definition.

    Args:
        data: The raw limits section, or None if the definition has none
        lg: Logger to use (defaults to this module's logger)

    Returns:
        Validated ActionLimits, with defaults for absent fields

    Raises:
        ConfigError: If a limit is malformed or a key is unknown
    """
    lg = lg or _lg
    raw = dict(data) if data is not None else {}

    for field_name in ActionLimits.model_fields:
        if field_name not in raw:
            lg.debug("limit not set, using default", extra={"limit": field_name})

    try:
        return ActionLimits.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(_describe(e)) from e


def load_limits_file(
    fname: str | Path,
    section: str = DEFAULT_SECTION,
    env_prefix: str = DEFAULT_ENV_PREFIX,
    enable_env_overrides: bool = True,
    lg: logging.Logger | None = None,
) -> ActionLimits:
    """
    Load the limits section of a YAML action definition.

    Args:
        fname: Path to the YAML file
        section: Key of the limits section (default: 'limits')
        env_prefix: Prefix for environment variable overrides
        enable_env_overrides: Whether to apply environment variable overrides
        lg: Logger to use (defaults to this module's logger)

    Returns:
        Validated ActionLimits

    Raises:
        ConfigError: If the file cannot be read, is too large, is not
            valid UTF-8 YAML, has a malformed section or carries an
            invalid limit
    """
    lg = lg or _lg
    path = Path(fname).resolve()

    data = _extract_section(_read_yaml(path), section, path)
    lg.debug("loaded limits file", extra={"path": str(path), "section": section})

    if enable_env_overrides:
        overrides = collect_env_overrides(env_prefix)
        for key, value in overrides.items():
            lg.debug("limit overridden from environment", extra={"limit": key})
        data.update(overrides)

    try:
        return load_limits(data, lg=lg)
    except ConfigError as e:
        raise ConfigError(e.message, path=path) from e.__cause__


def _describe(error: ValidationError) -> str:
    """Flatten a pydantic ValidationError into a one-line message."""
    parts = []
    for item in error.errors():
        loc = ".".join(str(p) for p in item["loc"])
        ctx_error = item.get("ctx", {}).get("error")
        msg = str(ctx_error) if ctx_error is not None else item["msg"]
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts)
