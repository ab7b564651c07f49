"""Common utilities shared by the suffix list packages."""

from psl_common.logging import setup_logging
from psl_common.exceptions import (
    PublicSuffixException,
    InvalidInputError,
    MalformedInputError,
    MalformedListError,
    NoSuffixFoundError,
    NoRootDomainError,
    ConfigurationError,
)
from psl_common.utils import get_env, get_bool_env
from psl_common import constants

__all__ = [
    "setup_logging",
    "PublicSuffixException",
    "InvalidInputError",
    "MalformedInputError",
    "MalformedListError",
    "NoSuffixFoundError",
    "NoRootDomainError",
    "ConfigurationError",
    "get_env",
    "get_bool_env",
    "constants",
]
