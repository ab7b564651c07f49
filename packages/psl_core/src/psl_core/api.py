"""Module-level queries against the default suffix list."""

from functools import lru_cache
from typing import Optional

from psl_schemas import ClassificationResult, ClassifierConfig, RootDomain
from psl_core.classifier import DomainClassifier, DomainInput
from psl_core.loader import default_suffix_list
from psl_core.settings import load_settings


@lru_cache(maxsize=1)
def default_classifier() -> DomainClassifier:
    """Classifier over the default suffix list, configured from settings."""
    return DomainClassifier(default_suffix_list(), load_settings().classifier_config())


def classify(domain: DomainInput, config: Optional[ClassifierConfig] = None) -> ClassificationResult:
    return default_classifier().classify(domain, config)


def is_suffix(domain: DomainInput, config: Optional[ClassifierConfig] = None) -> bool:
    return default_classifier().is_suffix(domain, config)


def root_domain(domain: DomainInput, config: Optional[ClassifierConfig] = None) -> RootDomain:
    return default_classifier().root_domain(domain, config)
