"""Shared fixtures for psl_core tests."""

import pytest

from psl_core import DomainClassifier, parse_suffix_list

SAMPLE_LIST = """
// Sample list

// ===BEGIN ICANN DOMAINS===

// uk
uk
co.uk

// ck
*.ck
!www.ck

com

// jp
jp
*.kawasaki.jp
!city.kawasaki.jp

// xn--fiqs8s
中国

// ===END ICANN DOMAINS===
// ===BEGIN PRIVATE DOMAINS===

// GitHub
github.io

// Blogger
blogspot.co.uk

// CentralNic
uk.com

// ===END PRIVATE DOMAINS===
"""


@pytest.fixture
def sample_list_content():
    return SAMPLE_LIST


@pytest.fixture
def suffix_list():
    return parse_suffix_list(SAMPLE_LIST, source_name="sample")


@pytest.fixture
def classifier(suffix_list):
    return DomainClassifier(suffix_list)
