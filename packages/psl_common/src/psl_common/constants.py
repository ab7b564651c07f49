"""Limits, markers and environment names."""

from typing import Final

# Name limits (dotted text form; 253 characters is 255 octets on the wire)
MAX_DOMAIN_LENGTH: Final[int] = 253
MAX_LABEL_LENGTH: Final[int] = 63
# Raw input bound for names with non-ASCII text, checked before IDNA mapping
MAX_DOMAIN_INPUT_LENGTH: Final[int] = 1024

# Email limits
MAX_EMAIL_LENGTH: Final[int] = 254
MAX_EMAIL_LOCAL_LENGTH: Final[int] = 64

# Label separators recognised by IDNA in addition to "."
LABEL_SEPARATORS: Final[tuple] = ("。", "．", "｡")

# Suffix list format
COMMENT_PREFIX: Final[str] = "//"
WILDCARD_PREFIX: Final[str] = "*."
EXCEPTION_PREFIX: Final[str] = "!"
WILDCARD_LABEL: Final[str] = "*"
BEGIN_ICANN_MARKER: Final[str] = "===BEGIN ICANN DOMAINS==="
END_ICANN_MARKER: Final[str] = "===END ICANN DOMAINS==="
BEGIN_PRIVATE_MARKER: Final[str] = "===BEGIN PRIVATE DOMAINS==="
END_PRIVATE_MARKER: Final[str] = "===END PRIVATE DOMAINS==="

# Bundled list snapshot (package data of psl_core)
BUNDLED_LIST_PACKAGE: Final[str] = "psl_core"
BUNDLED_LIST_RESOURCE: Final[str] = "data/public_suffix_list.dat"

# Environment overrides
ENV_LIST_PATH: Final[str] = "PSL_LIST_PATH"
ENV_INCLUDE_PRIVATE: Final[str] = "PSL_INCLUDE_PRIVATE"
ENV_KNOWN_SUFFIXES_ONLY: Final[str] = "PSL_KNOWN_SUFFIXES_ONLY"
ENV_PREFER_PRIVATE: Final[str] = "PSL_PREFER_PRIVATE"
ENV_LOG_LEVEL: Final[str] = "PSL_LOG_LEVEL"

# Service Defaults
DEFAULT_LOG_LEVEL: Final[str] = "INFO"
