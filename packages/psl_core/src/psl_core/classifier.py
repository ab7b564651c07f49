"""Domain classification into subdomain, root domain and public suffix."""

from typing import Optional, Union

import structlog

from psl_common import NoRootDomainError
from psl_schemas import ClassificationResult, ClassifierConfig, RootDomain
from psl_core.labels import SplitName, split_labels
from psl_core.matcher import Match, RuleMatcher
from psl_core.suffix_list import SuffixList

logger = structlog.get_logger()

DomainInput = Union[str, bytes]


class DomainClassifier:
    """Classifier bound to one suffix list.

    Holds no mutable state; one instance can serve any number of threads.
    """

    def __init__(self, suffix_list: SuffixList, config: Optional[ClassifierConfig] = None):
        """
        Initialize domain classifier.

        Args:
            suffix_list: Rule set to classify against
            config: Default configuration, overridable per call
        """
        self.config = config or ClassifierConfig()
        self.matcher = RuleMatcher(suffix_list, self.config)

    @property
    def suffix_list(self) -> SuffixList:
        return self.matcher.suffix_list

    def classify(
        self, domain: DomainInput, config: Optional[ClassifierConfig] = None
    ) -> ClassificationResult:
        """
        Split a domain into subdomain, root domain and public suffix.

        Args:
            domain: Domain name, str or UTF-8 bytes
            config: Overrides the classifier's configuration for this call

        Returns:
            ClassificationResult for the normalized domain

        Raises:
            InvalidInputError: If the domain cannot be split into labels
            MalformedInputError: If the domain cannot be decoded or IDNA-encoded
            NoSuffixFoundError: If no rule matched and known_suffixes_only is set

        Examples:
            >>> classifier.classify("www.example.co.uk").root
            'example.co.uk'
        """
        name = split_labels(domain)
        match = self.matcher.match(name.ascii_labels, config)
        result = _compose(name, match)

        logger.debug(
            "Domain classified",
            domain=result.domain,
            suffix=result.suffix,
            rule=result.rule,
        )

        return result

    def is_suffix(
        self, domain: DomainInput, config: Optional[ClassifierConfig] = None
    ) -> bool:
        """True if the whole domain is a public suffix."""
        return self.classify(domain, config).is_suffix

    def root_domain(
        self, domain: DomainInput, config: Optional[ClassifierConfig] = None
    ) -> RootDomain:
        """
        Get the registrable domain.

        Raises:
            NoRootDomainError: If the domain is itself a public suffix
        """
        result = self.classify(domain, config)
        if result.root is None:
            raise NoRootDomainError(
                "Domain is a public suffix", {"domain": result.domain, "suffix": result.suffix}
            )
        return RootDomain(name=result.root, suffix=result.suffix, section=result.section)


def _compose(name: SplitName, match: Match) -> ClassificationResult:
    labels = name.labels
    split_at = len(labels) - match.suffix_length
    suffix = ".".join(labels[split_at:])

    if split_at == 0:
        root = None
        subdomain = ""
    else:
        root = ".".join(labels[split_at - 1 :])
        subdomain = ".".join(labels[: split_at - 1])

    return ClassificationResult(
        domain=name.name,
        suffix=suffix,
        root=root,
        subdomain=subdomain,
        section=match.section,
        rule=str(match.rule) if match.rule is not None else None,
    )
