"""Tests for the rule matcher."""

import pytest

from psl_common import InvalidInputError, NoSuffixFoundError
from psl_schemas import ClassifierConfig, Rule, RuleKind, Section
from psl_core import RuleMatcher, suffix_list_from_rules


@pytest.fixture
def matcher(suffix_list):
    return RuleMatcher(suffix_list)


# ==================== Longest Match Tests ====================


def test_longest_plain_match(matcher):
    """Test co.uk wins over uk."""
    match = matcher.match(("example", "co", "uk"))

    assert match.suffix_length == 2
    assert match.rule == Rule(labels=("co", "uk"))
    assert match.known is True
    assert match.section is Section.ICANN


def test_single_label_match(matcher):
    """Test a one-label rule."""
    match = matcher.match(("example", "com"))

    assert match.suffix_length == 1
    assert str(match.rule) == "com"


def test_private_rule_is_longer(matcher):
    """Test a longer PRIVATE rule wins when private rules are included."""
    match = matcher.match(("foo", "blogspot", "co", "uk"))

    assert match.suffix_length == 3
    assert match.section is Section.PRIVATE


# ==================== Wildcard / Exception Tests ====================


def test_wildcard_match(matcher):
    """Test *.ck claims any label left of ck."""
    match = matcher.match(("foo", "ck"))

    assert match.suffix_length == 2
    assert match.rule.kind is RuleKind.WILDCARD


def test_wildcard_needs_a_label(matcher):
    """Test *.ck does not match ck alone."""
    match = matcher.match(("ck",))

    assert match.suffix_length == 1
    assert match.rule is None


def test_exception_beats_wildcard(matcher):
    """Test !www.ck moves the boundary back to ck."""
    match = matcher.match(("www", "ck"))

    assert match.suffix_length == 1
    assert match.rule.kind is RuleKind.EXCEPTION


def test_exception_with_subdomain(matcher):
    """Test an exception applies below its own labels."""
    match = matcher.match(("a", "b", "city", "kawasaki", "jp"))

    assert match.suffix_length == 2
    assert str(match.rule) == "!city.kawasaki.jp"


def test_wildcard_beats_plain_at_same_length():
    """Test a wildcard outranks a plain rule of equal length."""
    matcher = RuleMatcher(
        suffix_list_from_rules(
            [
                Rule(labels=("bar", "foo")),
                Rule(labels=("foo",), kind=RuleKind.WILDCARD),
            ]
        )
    )

    match = matcher.match(("x", "bar", "foo"))

    assert match.suffix_length == 2
    assert match.rule.kind is RuleKind.WILDCARD


def test_exception_beats_longer_rule():
    """Test exceptions prevail even when a longer rule matches."""
    matcher = RuleMatcher(
        suffix_list_from_rules(
            [
                Rule(labels=("ck",), kind=RuleKind.WILDCARD),
                Rule(labels=("www", "ck"), kind=RuleKind.EXCEPTION),
                Rule(labels=("www", "ck"), kind=RuleKind.WILDCARD),
            ]
        )
    )

    match = matcher.match(("a", "www", "ck"))

    assert match.suffix_length == 1
    assert match.rule.kind is RuleKind.EXCEPTION


# ==================== Default Rule Tests ====================


def test_default_rule(matcher):
    """Test unknown TLDs fall back to the last label."""
    match = matcher.match(("example", "zz"))

    assert match.suffix_length == 1
    assert match.rule is None
    assert match.known is False
    assert match.section is None


def test_known_suffixes_only(suffix_list):
    """Test strict mode refuses to guess."""
    matcher = RuleMatcher(suffix_list, ClassifierConfig(known_suffixes_only=True))

    with pytest.raises(NoSuffixFoundError):
        matcher.match(("example", "zz"))


def test_empty_labels(matcher):
    """Test an empty label sequence is invalid."""
    with pytest.raises(InvalidInputError):
        matcher.match(())


# ==================== Section Filtering Tests ====================


def test_exclude_private(matcher):
    """Test PRIVATE rules drop out when excluded."""
    config = ClassifierConfig(include_private_suffixes=False)

    match = matcher.match(("foo", "blogspot", "co", "uk"), config)

    assert match.suffix_length == 2
    assert match.section is Section.ICANN


def test_exclude_private_falls_back(matcher):
    """Test the default rule still applies with private rules excluded."""
    config = ClassifierConfig(include_private_suffixes=False)

    match = matcher.match(("foo", "github", "io"), config)

    assert match.suffix_length == 1
    assert match.rule is None


def test_exclude_private_strict(matcher):
    """Test strict mode with private rules excluded."""
    config = ClassifierConfig(include_private_suffixes=False, known_suffixes_only=True)

    with pytest.raises(NoSuffixFoundError):
        matcher.match(("foo", "github", "io"), config)


@pytest.mark.parametrize(
    "prefer_private,expected",
    [
        (True, Section.PRIVATE),
        (False, Section.ICANN),
    ],
)
def test_section_preference(prefer_private, expected):
    """Test the configured section wins when both declare a rule."""
    matcher = RuleMatcher(
        suffix_list_from_rules(
            [
                Rule(labels=("appspot", "com"), section=Section.ICANN),
                Rule(labels=("appspot", "com"), section=Section.PRIVATE),
            ]
        ),
        ClassifierConfig(prefer_private=prefer_private),
    )

    match = matcher.match(("app", "appspot", "com"))

    assert match.suffix_length == 2
    assert match.section is expected
