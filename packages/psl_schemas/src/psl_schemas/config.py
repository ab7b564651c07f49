"""Classifier configuration model."""

from pydantic import BaseModel, Field, ConfigDict


class ClassifierConfig(BaseModel):
    """Options accepted by every classification query."""

    include_private_suffixes: bool = Field(
        default=True, description="Let PRIVATE section rules participate in matching"
    )
    known_suffixes_only: bool = Field(
        default=False,
        description="Fail with NoSuffixFoundError instead of using the one-label default rule",
    )
    prefer_private: bool = Field(
        default=True,
        description="Pick the PRIVATE rule when both sections declare the same rule",
    )

    model_config = ConfigDict(frozen=True)
