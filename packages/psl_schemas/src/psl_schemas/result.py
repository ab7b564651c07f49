"""Classification result models."""

from typing import Optional, Union
from ipaddress import IPv4Address, IPv6Address
from pydantic import BaseModel, Field, ConfigDict, model_validator

from psl_schemas.rule import Section


class ClassificationResult(BaseModel):
    """Decomposition of a domain into subdomain, root domain and public suffix.

    All names are lower-cased, without a trailing dot, and reported in the
    form they were given in (Unicode labels stay Unicode, punycode stays
    punycode).
    """

    domain: str = Field(..., description="Normalized input (e.g., www.example.co.uk)")
    suffix: str = Field(..., description="Public suffix (e.g., co.uk)")
    root: Optional[str] = Field(
        default=None, description="Registrable domain (e.g., example.co.uk), None for a bare suffix"
    )
    subdomain: str = Field(default="", description="Labels left of the root domain (e.g., www)")
    section: Optional[Section] = Field(
        default=None, description="Section of the winning rule, None when no rule matched"
    )
    rule: Optional[str] = Field(
        default=None, description="Winning rule in list syntax (e.g., !www.ck)"
    )

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "domain": "www.example.co.uk",
                "suffix": "co.uk",
                "root": "example.co.uk",
                "subdomain": "www",
                "section": "icann",
                "rule": "co.uk",
            }
        },
    )

    @model_validator(mode="after")
    def _check_reconstruction(self) -> "ClassificationResult":
        if self.root is None:
            if self.subdomain or self.domain != self.suffix:
                raise ValueError("a bare suffix has no subdomain")
            return self
        if not self.root.endswith("." + self.suffix):
            raise ValueError("root domain must end with the public suffix")
        rebuilt = f"{self.subdomain}.{self.root}" if self.subdomain else self.root
        if rebuilt != self.domain:
            raise ValueError("subdomain, root and suffix must rebuild the domain")
        return self

    @property
    def known_suffix(self) -> bool:
        """True when an explicit list rule matched."""
        return self.rule is not None

    @property
    def is_suffix(self) -> bool:
        return self.root is None

    @property
    def registrable_label(self) -> Optional[str]:
        if self.root is None:
            return None
        return self.root[: -(len(self.suffix) + 1)]

    @property
    def is_icann(self) -> bool:
        return self.section is Section.ICANN

    @property
    def is_private(self) -> bool:
        return self.section is Section.PRIVATE


class RootDomain(BaseModel):
    """Registrable domain of a classified name."""

    name: str = Field(..., description="Registrable domain (e.g., example.co.uk)")
    suffix: str = Field(..., description="Public suffix (e.g., co.uk)")
    section: Optional[Section] = Field(default=None, description="Section of the winning rule")

    model_config = ConfigDict(frozen=True)

    @property
    def label(self) -> str:
        return self.name[: -(len(self.suffix) + 1)]

    def __str__(self) -> str:
        return self.name


class EmailAddress(BaseModel):
    """An email address split into local part and host."""

    local: str = Field(..., description="Local part, quotes preserved")
    host: str = Field(..., description="Host part as written (domain or [IP] literal)")
    ip: Optional[Union[IPv4Address, IPv6Address]] = Field(
        default=None, description="Address of an IP literal host"
    )
    domain: Optional[ClassificationResult] = Field(
        default=None, description="Classification of a domain host"
    )

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.local}@{self.host}"
