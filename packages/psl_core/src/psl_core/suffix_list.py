"""In-memory public suffix rule set."""

from types import MappingProxyType
from typing import Dict, Iterable, List, Optional, Tuple

import structlog

from psl_common import MalformedListError
from psl_schemas import Rule, RuleKind, Section

logger = structlog.get_logger()

Pattern = Tuple[str, ...]


class SuffixList:
    """Immutable rule set indexed by trailing label.

    Each root label maps to the patterns rooted there, and each pattern
    maps to the rules declaring it, keyed by kind. Instances are built by
    :class:`SuffixListBuilder` and never change afterwards, so one instance
    can be shared between threads without locking.
    """

    __slots__ = ("_index", "_max_length", "_size")

    def __init__(
        self,
        index: Dict[str, Dict[Pattern, Dict[RuleKind, Tuple[Rule, ...]]]],
        max_length: Dict[str, int],
    ):
        self._index = MappingProxyType(
            {
                root: MappingProxyType(
                    {pattern: MappingProxyType(kinds) for pattern, kinds in patterns.items()}
                )
                for root, patterns in index.items()
            }
        )
        self._max_length = MappingProxyType(dict(max_length))
        self._size = sum(
            len(rules)
            for patterns in index.values()
            for kinds in patterns.values()
            for rules in kinds.values()
        )

    def __len__(self) -> int:
        return self._size

    def __iter__(self):
        for patterns in self._index.values():
            for kinds in patterns.values():
                for rules in kinds.values():
                    yield from rules

    def __contains__(self, rule: object) -> bool:
        if not isinstance(rule, Rule):
            return False
        return rule in self.lookup(rule.pattern, rule.kind)

    def max_length(self, root: str) -> int:
        """Longest rule rooted at ``root``, 0 if there is none."""
        return self._max_length.get(root, 0)

    def lookup(self, pattern: Pattern, kind: RuleKind) -> Tuple[Rule, ...]:
        """
        Find the rules of one kind declaring exactly ``pattern``.

        Args:
            pattern: Labels left to right, ``*`` in front for wildcard rules
            kind: Rule kind to look up

        Returns:
            Matching rules, at most one per section
        """
        if not pattern:
            return ()
        patterns = self._index.get(pattern[-1])
        if patterns is None:
            return ()
        kinds = patterns.get(pattern)
        if kinds is None:
            return ()
        return kinds.get(kind, ())

    def roots(self) -> List[str]:
        return sorted(self._index)

    def stats(self) -> Dict[str, int]:
        """
        Count rules per section and kind.

        Returns:
            Dictionary like {"total": 3, "icann_plain": 2, "private_plain": 1}
        """
        counts = {"total": 0}
        for section in Section:
            for kind in RuleKind:
                counts[f"{section.value}_{kind.value}"] = 0
        for rule in self:
            counts["total"] += 1
            counts[f"{rule.section.value}_{rule.kind.value}"] += 1
        return counts


class SuffixListBuilder:
    """Collects rules and publishes them as a :class:`SuffixList`."""

    def __init__(self):
        self._index: Dict[str, Dict[Pattern, Dict[RuleKind, List[Rule]]]] = {}
        self._max_length: Dict[str, int] = {}
        self.duplicates = 0

    def add(self, rule: Rule, line_number: Optional[int] = None) -> bool:
        """
        Add a rule.

        Exact duplicates within a section are skipped. A label sequence
        declared both as a plain and as an exception rule is a conflict.

        Args:
            rule: Rule to add
            line_number: Source line, for error context

        Returns:
            True if the rule was added, False if it was a duplicate

        Raises:
            MalformedListError: On conflicting declarations
        """
        patterns = self._index.setdefault(rule.root, {})
        kinds = patterns.setdefault(rule.pattern, {})

        conflicting = {
            RuleKind.PLAIN: RuleKind.EXCEPTION,
            RuleKind.EXCEPTION: RuleKind.PLAIN,
        }.get(rule.kind)
        if conflicting is not None and kinds.get(conflicting):
            raise MalformedListError(
                "Rule declared as both plain and exception",
                {"rule": str(rule), "line_number": line_number},
            )

        rules = kinds.setdefault(rule.kind, [])
        if any(existing.section is rule.section for existing in rules):
            self.duplicates += 1
            logger.debug(
                "Duplicate rule skipped",
                rule=str(rule),
                section=rule.section.value,
                line_number=line_number,
            )
            return False

        rules.append(rule)
        self._max_length[rule.root] = max(self._max_length.get(rule.root, 0), rule.length)
        return True

    def extend(self, rules: Iterable[Rule]) -> "SuffixListBuilder":
        for rule in rules:
            self.add(rule)
        return self

    def build(self) -> SuffixList:
        index = {
            root: {
                pattern: {kind: tuple(rules) for kind, rules in kinds.items() if rules}
                for pattern, kinds in patterns.items()
            }
            for root, patterns in self._index.items()
        }
        return SuffixList(index, self._max_length)


def suffix_list_from_rules(rules: Iterable[Rule]) -> SuffixList:
    """Build a SuffixList straight from Rule objects."""
    return SuffixListBuilder().extend(rules).build()