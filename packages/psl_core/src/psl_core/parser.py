"""Public suffix list format parser."""

from pathlib import Path
from typing import Optional, Tuple, Union

import structlog
from pydantic import ValidationError

from psl_common import ConfigurationError, MalformedListError
from psl_common.constants import (
    BEGIN_ICANN_MARKER,
    BEGIN_PRIVATE_MARKER,
    COMMENT_PREFIX,
    END_ICANN_MARKER,
    END_PRIVATE_MARKER,
    EXCEPTION_PREFIX,
    WILDCARD_PREFIX,
)
from psl_schemas import Rule, RuleKind, Section
from psl_core.labels import to_ascii_label
from psl_core.suffix_list import SuffixList, SuffixListBuilder

logger = structlog.get_logger()

_BEGIN_MARKERS = {
    BEGIN_ICANN_MARKER: Section.ICANN,
    BEGIN_PRIVATE_MARKER: Section.PRIVATE,
}
_END_MARKERS = {
    END_ICANN_MARKER: Section.ICANN,
    END_PRIVATE_MARKER: Section.PRIVATE,
}


class SuffixListParser:
    """Parser for the public suffix list text format.

    Example format:
        // ===BEGIN ICANN DOMAINS===
        uk
        co.uk
        *.ck
        !www.ck
        // ===END ICANN DOMAINS===
        // ===BEGIN PRIVATE DOMAINS===
        github.io
        // ===END PRIVATE DOMAINS===
    """

    def __init__(self, source_name: str = "<string>"):
        """
        Initialize suffix list parser.

        Args:
            source_name: Name of the list source, used in log and error context
        """
        self.source_name = source_name

    def parse(self, content: Union[str, bytes]) -> SuffixList:
        """
        Parse suffix list content.

        The whole source is read before a SuffixList is created, so a
        failure never leaves a partially built list behind.

        Args:
            content: Raw list text, or UTF-8 bytes

        Returns:
            Populated SuffixList

        Raises:
            MalformedListError: If the content is not a valid suffix list
        """
        if isinstance(content, bytes):
            try:
                content = content.decode("utf-8-sig")
            except UnicodeDecodeError as e:
                raise MalformedListError(
                    "Suffix list is not valid UTF-8", {"source": self.source_name}, e
                ) from e

        if not content or not content.strip():
            raise MalformedListError("Empty suffix list content", {"source": self.source_name})

        logger.info(
            "Parsing suffix list",
            source=self.source_name,
            content_length=len(content),
        )

        builder = SuffixListBuilder()
        section: Optional[Section] = None
        lines = content.splitlines()

        for line_number, line in enumerate(lines, start=1):
            line = line.strip()

            if not line:
                continue

            if line.startswith(COMMENT_PREFIX):
                section = self._apply_marker(
                    line[len(COMMENT_PREFIX) :].strip(), section, line_number
                )
                continue

            if section is None:
                raise MalformedListError(
                    "Rule outside of any section",
                    {"source": self.source_name, "line_number": line_number, "line": line},
                )

            builder.add(self._parse_rule(line, section, line_number), line_number)

        if section is not None:
            raise MalformedListError(
                "Section is never closed",
                {"source": self.source_name, "section": section.value},
            )

        suffix_list = builder.build()
        if not len(suffix_list):
            raise MalformedListError("Suffix list contains no rules", {"source": self.source_name})

        logger.info(
            "Suffix list parsing complete",
            source=self.source_name,
            total_lines=len(lines),
            duplicates=builder.duplicates,
            **suffix_list.stats(),
        )

        return suffix_list

    def _apply_marker(
        self, comment: str, section: Optional[Section], line_number: int
    ) -> Optional[Section]:
        if comment in _BEGIN_MARKERS:
            if section is not None:
                raise MalformedListError(
                    "Section opened inside another section",
                    {"source": self.source_name, "line_number": line_number, "open": section.value},
                )
            return _BEGIN_MARKERS[comment]

        if comment in _END_MARKERS:
            if section is not _END_MARKERS[comment]:
                raise MalformedListError(
                    "Section end does not match the open section",
                    {
                        "source": self.source_name,
                        "line_number": line_number,
                        "open": section.value if section else None,
                    },
                )
            return None

        return section

    def _parse_rule(self, line: str, section: Section, line_number: int) -> Rule:
        # Only the first whitespace-separated token is the rule
        token = line.split()[0]
        context = {"source": self.source_name, "line_number": line_number, "line": line}

        kind, body = _split_kind(token)
        labels = body.lower().split(".")
        if any(not label or "*" in label or "!" in label for label in labels):
            raise MalformedListError("Invalid rule", context)

        try:
            ascii_labels = tuple(to_ascii_label(label) for label in labels)
        except UnicodeError as e:
            raise MalformedListError("Rule label cannot be IDNA-encoded", context, e) from e

        try:
            return Rule(labels=ascii_labels, kind=kind, section=section)
        except ValidationError as e:
            raise MalformedListError("Invalid rule", context, e) from e


def _split_kind(token: str) -> Tuple[RuleKind, str]:
    if token.startswith(EXCEPTION_PREFIX):
        return RuleKind.EXCEPTION, token[len(EXCEPTION_PREFIX) :]
    if token.startswith(WILDCARD_PREFIX):
        return RuleKind.WILDCARD, token[len(WILDCARD_PREFIX) :]
    return RuleKind.PLAIN, token


def parse_suffix_list(content: Union[str, bytes], source_name: str = "<string>") -> SuffixList:
    """Convenience function to parse suffix list text."""
    return SuffixListParser(source_name).parse(content)


def load_suffix_list(path: Union[str, Path]) -> SuffixList:
    """
    Read and parse a suffix list file.

    Args:
        path: Path to a public_suffix_list.dat style file

    Returns:
        Populated SuffixList

    Raises:
        ConfigurationError: If the file cannot be read
        MalformedListError: If the file is not a valid suffix list
    """
    list_file = Path(path)

    try:
        content = list_file.read_bytes()
    except OSError as e:
        raise ConfigurationError(
            "Suffix list file cannot be read", {"config_path": str(list_file)}, e
        ) from e

    return SuffixListParser(str(list_file)).parse(content)
