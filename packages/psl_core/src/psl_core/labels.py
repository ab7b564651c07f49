"""Domain name normalization and label splitting."""

from dataclasses import dataclass
from typing import Tuple, Union

import idna

from psl_common import InvalidInputError, MalformedInputError
from psl_common.constants import (
    LABEL_SEPARATORS,
    MAX_DOMAIN_INPUT_LENGTH,
    MAX_DOMAIN_LENGTH,
    MAX_LABEL_LENGTH,
)


@dataclass(frozen=True, slots=True)
class SplitName:
    """A normalized domain name.

    ``labels`` keeps each label in the form it was given (lower-cased), and
    ``ascii_labels`` holds the ASCII-compatible form used for matching.
    Both are ordered left to right.
    """

    labels: Tuple[str, ...]
    ascii_labels: Tuple[str, ...]

    @property
    def name(self) -> str:
        return ".".join(self.labels)

    @property
    def ascii_name(self) -> str:
        return ".".join(self.ascii_labels)

    def __len__(self) -> int:
        return len(self.labels)


def to_ascii_label(label: str) -> str:
    """
    Convert one lower-cased label to its ASCII-compatible form.

    ASCII labels are returned unchanged; anything else goes through IDNA
    with UTS #46 mapping.

    Raises:
        UnicodeError: If the label cannot be IDNA-encoded
    """
    if label.isascii():
        return label
    return idna.encode(label, uts46=True).decode("ascii")


def split_labels(domain: Union[str, bytes]) -> SplitName:
    """
    Normalize a domain name and split it into labels.

    Args:
        domain: Domain name, optionally with a single trailing dot

    Returns:
        SplitName with display and ASCII labels

    Raises:
        InvalidInputError: If the name is empty, too long, or has an empty
            or oversized label
        MalformedInputError: If the name cannot be decoded or IDNA-encoded

    Examples:
        >>> split_labels("WWW.Example.COM.").labels
        ('www', 'example', 'com')
        >>> split_labels("食狮.中国").ascii_labels
        ('xn--85x722f', 'xn--fiqs8s')
    """
    if isinstance(domain, bytes):
        try:
            domain = domain.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedInputError(
                "Domain is not valid UTF-8", {"domain": domain}, e
            ) from e

    if not domain:
        raise InvalidInputError("Domain is empty", {"domain": domain, "reason": "empty"})

    # Pre-filter; the real limit applies to the ASCII-compatible form below.
    # UTS #46 mapping may drop characters from non-ASCII text.
    limit = MAX_DOMAIN_LENGTH + 1 if domain.isascii() else MAX_DOMAIN_INPUT_LENGTH
    if len(domain) > limit:
        raise InvalidInputError(
            "Domain name too long",
            {"domain": domain[:32] + "...", "reason": "name_too_long"},
        )

    name = domain
    for separator in LABEL_SEPARATORS:
        name = name.replace(separator, ".")
    name = name.lower()

    if name.endswith("."):
        name = name[:-1]
    if not name:
        raise InvalidInputError("Domain is empty", {"domain": domain, "reason": "empty"})

    labels = tuple(name.split("."))
    ascii_labels = []

    for label in labels:
        if not label:
            raise InvalidInputError(
                "Domain contains an empty label",
                {"domain": domain, "reason": "empty_label"},
            )
        try:
            ascii_label = to_ascii_label(label)
        except UnicodeError as e:
            raise MalformedInputError(
                "Label cannot be IDNA-encoded", {"domain": domain, "label": label}, e
            ) from e
        if len(ascii_label) > MAX_LABEL_LENGTH:
            raise InvalidInputError(
                "Label too long",
                {"domain": domain, "label": label, "reason": "label_too_long"},
            )
        ascii_labels.append(ascii_label)

    if len(".".join(ascii_labels)) > MAX_DOMAIN_LENGTH:
        raise InvalidInputError(
            "Domain name too long", {"domain": domain, "reason": "name_too_long"}
        )

    return SplitName(labels=labels, ascii_labels=tuple(ascii_labels))
