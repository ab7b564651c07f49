"""Environment helpers."""

import os
from typing import Optional

from psl_common.exceptions import ConfigurationError

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def get_env(key: str, default: Optional[str] = None, required: bool = False) -> str:
    """
    Get environment variable with optional default and required flag.

    Args:
        key: Environment variable name
        default: Default value if not found
        required: If True, raise error if not found and no default

    Returns:
        Environment variable value

    Raises:
        ConfigurationError: If required=True and variable not found
    """
    value = os.getenv(key, default)

    if required and value is None:
        raise ConfigurationError(
            f"Required environment variable '{key}' not found", {"field": key}
        )

    return value or ""


def get_bool_env(key: str, default: Optional[bool] = None) -> Optional[bool]:
    """
    Read a boolean flag from the environment.

    Returns ``default`` when the variable is unset or blank.

    Raises:
        ConfigurationError: If the value is not a recognised boolean
    """
    raw = get_env(key).strip().lower()
    if not raw:
        return default
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"Invalid boolean value for '{key}'", {"field": key, "value": raw}
    )
