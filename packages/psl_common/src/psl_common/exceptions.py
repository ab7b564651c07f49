"""Custom exceptions for suffix list parsing and domain classification."""

from typing import Optional, Dict, Any


class PublicSuffixException(Exception):
    """Base exception for all suffix list errors.

    Attributes:
        message: Error message
        context: Additional context about the error
        original_error: Original exception if this wraps another error
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        """Initialize exception with context.

        Args:
            message: Error message
            context: Additional context (e.g., domain, line_number)
            original_error: Original exception if wrapping
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.original_error = original_error

    def __str__(self) -> str:
        """String representation with context."""
        base = self.message
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base = f"{base} ({ctx_str})"
        if self.original_error:
            base = f"{base} [caused by: {type(self.original_error).__name__}: {self.original_error}]"
        return base


class InvalidInputError(PublicSuffixException):
    """Raised when a domain name cannot be split into labels.

    Common context fields:
        - domain: The rejected input
        - reason: Why it was rejected (empty, name too long, empty label, ...)
    """

    pass


class MalformedInputError(InvalidInputError):
    """Raised when a domain name cannot be decoded or IDNA-encoded.

    Common context fields:
        - domain: The rejected input
        - label: The label that failed to encode
    """

    pass


class MalformedListError(PublicSuffixException):
    """Raised when suffix list source text is structurally broken.

    Common context fields:
        - line_number: Line number where parsing failed
        - line: The offending line
    """

    pass


class NoSuffixFoundError(PublicSuffixException):
    """Raised in known-suffixes-only mode when no rule matches.

    Common context fields:
        - domain: The classified domain
    """

    pass


class NoRootDomainError(PublicSuffixException):
    """Raised when a domain is itself a public suffix.

    Common context fields:
        - domain: The classified domain
        - suffix: The matched public suffix
    """

    pass


class ConfigurationError(PublicSuffixException):
    """Raised when configuration is invalid.

    Common context fields:
        - config_path: Path to config file
        - field: Invalid field name
    """

    pass
