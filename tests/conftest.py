"""Pytest configuration and fixtures for end-to-end tests."""

from fixtures.sample_lists import (
    bundled_list,
    bundled_classifier,
    icann_only_classifier,
    sample_domains,
)

__all__ = [
    "bundled_list",
    "bundled_classifier",
    "icann_only_classifier",
    "sample_domains",
]
