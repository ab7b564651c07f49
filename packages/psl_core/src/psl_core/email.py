"""Email address splitting."""

from ipaddress import IPv4Address, IPv6Address
from typing import Optional, Tuple

from psl_common import InvalidInputError
from psl_common.constants import MAX_EMAIL_LENGTH, MAX_EMAIL_LOCAL_LENGTH
from psl_schemas import ClassifierConfig, EmailAddress
from psl_core.api import default_classifier
from psl_core.classifier import DomainClassifier

_IPV6_TAG = "ipv6:"


def _invalid(message: str, address: str, reason: str) -> InvalidInputError:
    return InvalidInputError(message, {"address": address, "reason": reason})


def _split_address(address: str) -> Tuple[str, str]:
    if address.startswith('"'):
        escaped = False
        for index in range(1, len(address)):
            char = address[index]
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                break
        else:
            raise _invalid("Email has an unclosed quotation mark", address, "quote_unclosed")

        local, rest = address[: index + 1], address[index + 1 :]
        if not rest.startswith("@"):
            raise _invalid("Email address has no at sign", address, "no_at_sign")
        return local, rest[1:]

    local, at, host = address.rpartition("@")
    if not at:
        raise _invalid("Email address has no at sign", address, "no_at_sign")
    return local, host


def parse_email_address(
    address: str,
    classifier: Optional[DomainClassifier] = None,
    config: Optional[ClassifierConfig] = None,
) -> EmailAddress:
    """
    Split an email address and classify its host.

    The host is either an IP literal (``[192.0.2.1]``, ``[IPv6:2001:db8::1]``)
    or a domain name classified against the suffix list.

    Args:
        address: Email address
        classifier: Classifier for domain hosts; the default one when omitted
        config: Overrides the classifier's configuration

    Returns:
        EmailAddress

    Raises:
        InvalidInputError: If the address cannot be split or its host is invalid
        NoSuffixFoundError: If the host has no known suffix in known_suffixes_only mode
    """
    if len(address.encode("utf-8")) > MAX_EMAIL_LENGTH:
        raise _invalid("Email too long", address, "email_too_long")

    local, host = _split_address(address)

    if not local:
        raise _invalid("Email address has no user part", address, "no_user_part")
    if not host:
        raise _invalid("Email address has no host part", address, "no_host_part")
    if len(local.encode("utf-8")) > MAX_EMAIL_LOCAL_LENGTH:
        raise _invalid("Email local part too long", address, "email_local_too_long")

    if host.startswith("[") and host.endswith("]"):
        literal = host[1:-1]
        try:
            if literal.lower().startswith(_IPV6_TAG):
                ip = IPv6Address(literal[len(_IPV6_TAG) :])
            else:
                ip = IPv4Address(literal)
        except ValueError as e:
            raise InvalidInputError(
                "Email has an invalid ip address",
                {"address": address, "reason": "invalid_ip_addr"},
                e,
            ) from e
        return EmailAddress(local=local, host=host, ip=ip)

    if "[" in host or "]" in host:
        raise _invalid("Email host has a malformed ip address literal", address, "invalid_ip_addr")

    if classifier is None:
        classifier = default_classifier()

    return EmailAddress(local=local, host=host, domain=classifier.classify(host, config))
