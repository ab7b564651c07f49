"""Schemas package."""

from psl_schemas.rule import Rule, RuleKind, Section
from psl_schemas.config import ClassifierConfig
from psl_schemas.result import ClassificationResult, RootDomain, EmailAddress

__all__ = [
    "Rule",
    "RuleKind",
    "Section",
    "ClassifierConfig",
    "ClassificationResult",
    "RootDomain",
    "EmailAddress",
]
