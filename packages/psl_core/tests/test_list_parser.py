"""Tests for the suffix list parser."""

import pytest

from psl_common import ConfigurationError, MalformedListError
from psl_schemas import Rule, RuleKind, Section
from psl_core import SuffixListParser, load_suffix_list, parse_suffix_list


def wrap(body: str, section: str = "ICANN") -> str:
    """Helper to put rule lines inside a section."""
    return f"// ===BEGIN {section} DOMAINS===\n{body}\n// ===END {section} DOMAINS===\n"


# ==================== Valid Content Tests ====================


def test_parse_sections(sample_list_content):
    """Test rules are tagged with their section."""
    suffix_list = SuffixListParser("sample").parse(sample_list_content)

    assert Rule(labels=("co", "uk")) in suffix_list
    assert Rule(labels=("github", "io"), section=Section.PRIVATE) in suffix_list
    assert Rule(labels=("ck",), kind=RuleKind.WILDCARD) in suffix_list
    assert Rule(labels=("www", "ck"), kind=RuleKind.EXCEPTION) in suffix_list


def test_parse_skips_comments_and_blank_lines():
    """Test comments and blank lines produce no rules."""
    content = wrap("// comment\n\ncom\n   \n// net\norg")

    suffix_list = parse_suffix_list(content)

    assert len(suffix_list) == 2


def test_parse_unicode_rule():
    """Test Unicode rules are stored in ASCII-compatible form."""
    suffix_list = parse_suffix_list(wrap("中国\n公司.cn"))

    assert Rule(labels=("xn--fiqs8s",)) in suffix_list
    assert Rule(labels=("xn--55qx5d", "cn")) in suffix_list


def test_parse_case_normalization():
    """Test rules are lower-cased."""
    suffix_list = parse_suffix_list(wrap("CO.UK"))

    assert Rule(labels=("co", "uk")) in suffix_list


def test_parse_first_token_only():
    """Test text after whitespace on a rule line is ignored."""
    suffix_list = parse_suffix_list(wrap("com  trailing words"))

    assert list(suffix_list) == [Rule(labels=("com",))]


def test_parse_bytes_with_bom():
    """Test UTF-8 bytes with a byte order mark are accepted."""
    content = "\ufeff" + wrap("com")

    suffix_list = parse_suffix_list(content.encode("utf-8"))

    assert len(suffix_list) == 1


def test_parse_duplicate_rules():
    """Test exact duplicates are skipped."""
    suffix_list = parse_suffix_list(wrap("com\ncom"))

    assert len(suffix_list) == 1


def test_parse_both_sections():
    """Test a rule may appear in both sections."""
    content = wrap("com") + wrap("com", "PRIVATE")

    suffix_list = parse_suffix_list(content)

    assert len(suffix_list) == 2


# ==================== Malformed Content Tests ====================


def test_rule_outside_section():
    """Test rules outside BEGIN/END markers fail the whole parse."""
    content = "com\n" + wrap("net")

    with pytest.raises(MalformedListError, match="outside of any section") as exc_info:
        parse_suffix_list(content)

    assert exc_info.value.context["line_number"] == 1


def test_rule_after_section_end():
    """Test a rule after the last END marker is outside any section."""
    content = wrap("net") + "org\n"

    with pytest.raises(MalformedListError, match="outside of any section"):
        parse_suffix_list(content)


def test_conflicting_rules():
    """Test plain and exception declarations of one sequence conflict."""
    with pytest.raises(MalformedListError, match="both plain and exception"):
        parse_suffix_list(wrap("*.ck\nwww.ck\n!www.ck"))


@pytest.mark.parametrize(
    "rule",
    ["foo.*.com", "*.*.com", "*", "!com", "co..uk", "!*.ck", "*com"],
)
def test_invalid_rules(rule):
    """Test malformed rule lines are rejected."""
    with pytest.raises(MalformedListError, match="Invalid rule"):
        parse_suffix_list(wrap(rule))


def test_unencodable_rule():
    """Test rules IDNA refuses are rejected."""
    with pytest.raises(MalformedListError, match="IDNA"):
        parse_suffix_list(wrap("☃"))


def test_undecodable_bytes():
    """Test encoding errors are malformed lists."""
    with pytest.raises(MalformedListError, match="UTF-8"):
        parse_suffix_list(wrap("com").encode("utf-8") + b"\xff\n")


@pytest.mark.parametrize("content", ["", "   \n\n", wrap("// nothing here")])
def test_no_rules(content):
    """Test content without rules is rejected."""
    with pytest.raises(MalformedListError):
        parse_suffix_list(content)


def test_unclosed_section():
    """Test a section without END marker is rejected."""
    with pytest.raises(MalformedListError, match="never closed"):
        parse_suffix_list("// ===BEGIN ICANN DOMAINS===\ncom\n")


def test_nested_section():
    """Test a section cannot open inside another."""
    content = "// ===BEGIN ICANN DOMAINS===\n// ===BEGIN PRIVATE DOMAINS===\ncom\n"

    with pytest.raises(MalformedListError, match="inside another section"):
        parse_suffix_list(content)


def test_mismatched_section_end():
    """Test END must close the open section."""
    content = "// ===BEGIN ICANN DOMAINS===\ncom\n// ===END PRIVATE DOMAINS===\n"

    with pytest.raises(MalformedListError, match="does not match"):
        parse_suffix_list(content)


# ==================== File Loading Tests ====================


def test_load_suffix_list(tmp_path, sample_list_content):
    """Test loading a list from disk."""
    list_file = tmp_path / "public_suffix_list.dat"
    list_file.write_text(sample_list_content, encoding="utf-8")

    suffix_list = load_suffix_list(list_file)

    assert len(suffix_list) == 12


def test_load_missing_file(tmp_path):
    """Test a missing list file is a configuration error."""
    with pytest.raises(ConfigurationError, match="cannot be read"):
        load_suffix_list(tmp_path / "missing.dat")
