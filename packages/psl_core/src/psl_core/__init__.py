"""
Public suffix list matching.

Splits domain names into subdomain, registrable (root) domain and public
suffix using the rules of a public suffix list.

    >>> from psl_core import classify
    >>> result = classify("www.example.co.uk")
    >>> result.subdomain, result.root, result.suffix
    ('www', 'example.co.uk', 'co.uk')
"""

__version__ = "0.1.0"

from psl_core.labels import SplitName, split_labels, to_ascii_label
from psl_core.suffix_list import SuffixList, SuffixListBuilder, suffix_list_from_rules
from psl_core.parser import SuffixListParser, load_suffix_list, parse_suffix_list
from psl_core.matcher import Match, RuleMatcher
from psl_core.classifier import DomainClassifier
from psl_core.settings import Settings, load_settings
from psl_core.loader import SuffixListGate, bundled_suffix_list, default_suffix_list
from psl_core.api import classify, default_classifier, is_suffix, root_domain
from psl_core.email import parse_email_address

__all__ = [
    "SplitName",
    "split_labels",
    "to_ascii_label",
    "SuffixList",
    "SuffixListBuilder",
    "suffix_list_from_rules",
    "SuffixListParser",
    "load_suffix_list",
    "parse_suffix_list",
    "Match",
    "RuleMatcher",
    "DomainClassifier",
    "Settings",
    "load_settings",
    "SuffixListGate",
    "bundled_suffix_list",
    "default_suffix_list",
    "classify",
    "default_classifier",
    "is_suffix",
    "root_domain",
    "parse_email_address",
]
