"""Suffix list rule model."""

from enum import Enum
from typing import Tuple
from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator


class Section(str, Enum):
    """Suffix list section a rule was declared in."""

    ICANN = "icann"
    PRIVATE = "private"


class RuleKind(str, Enum):
    """Rule kinds, ordered by precedence at equal match length."""

    PLAIN = "plain"
    WILDCARD = "wildcard"
    EXCEPTION = "exception"


class Rule(BaseModel):
    """A single public suffix rule.

    ``labels`` holds the concrete labels of the rule, left to right, in
    ASCII-compatible form and without the ``*.`` or ``!`` markers. A
    wildcard rule ``*.ck`` is stored as ``labels=("ck",)`` with
    ``kind=WILDCARD``; an exception rule ``!www.ck`` as
    ``labels=("www", "ck")`` with ``kind=EXCEPTION``.
    """

    labels: Tuple[str, ...] = Field(..., description="Concrete labels, left to right")
    kind: RuleKind = Field(default=RuleKind.PLAIN, description="plain, wildcard or exception")
    section: Section = Field(default=Section.ICANN, description="icann or private")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "labels": ["www", "ck"],
                "kind": "exception",
                "section": "icann",
            }
        },
    )

    @field_validator("labels")
    @classmethod
    def _check_labels(cls, labels: Tuple[str, ...]) -> Tuple[str, ...]:
        if not labels:
            raise ValueError("rule must have at least one label")
        for label in labels:
            if not label:
                raise ValueError("rule contains an empty label")
            if "*" in label or "!" in label or "." in label:
                raise ValueError(f"invalid rule label: {label!r}")
        return labels

    @model_validator(mode="after")
    def _check_exception_length(self) -> "Rule":
        if self.kind is RuleKind.EXCEPTION and len(self.labels) < 2:
            raise ValueError("exception rule must have at least two labels")
        return self

    @property
    def root(self) -> str:
        """Trailing label the rule is indexed under."""
        return self.labels[-1]

    @property
    def pattern(self) -> Tuple[str, ...]:
        """Labels matched by the rule, with ``*`` standing in for the wildcard."""
        if self.kind is RuleKind.WILDCARD:
            return ("*",) + self.labels
        return self.labels

    @property
    def length(self) -> int:
        """Number of trailing domain labels the rule matches."""
        return len(self.pattern)

    @property
    def suffix_length(self) -> int:
        """Number of trailing labels that form the public suffix on a match."""
        if self.kind is RuleKind.EXCEPTION:
            return len(self.labels) - 1
        return self.length

    def __str__(self) -> str:
        text = ".".join(self.labels)
        if self.kind is RuleKind.WILDCARD:
            return f"*.{text}"
        if self.kind is RuleKind.EXCEPTION:
            return f"!{text}"
        return text
