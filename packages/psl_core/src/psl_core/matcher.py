"""Longest-match rule selection over a suffix list."""

from dataclasses import dataclass
from typing import Optional, Sequence

from psl_common import InvalidInputError, NoSuffixFoundError
from psl_common.constants import WILDCARD_LABEL
from psl_schemas import ClassifierConfig, Rule, RuleKind, Section
from psl_core.suffix_list import SuffixList


@dataclass(frozen=True, slots=True)
class Match:
    """Outcome of matching a label sequence.

    ``suffix_length`` is the number of trailing labels forming the public
    suffix. ``rule`` is None when the one-label default rule applied.
    """

    suffix_length: int
    rule: Optional[Rule] = None

    @property
    def known(self) -> bool:
        return self.rule is not None

    @property
    def section(self) -> Optional[Section]:
        return self.rule.section if self.rule is not None else None


class RuleMatcher:
    """Finds the prevailing rule for a domain.

    Candidates are trailing label sequences of increasing length. An
    exception rule always prevails and moves the suffix boundary one label
    to the right of the exception. Otherwise the longest plain or wildcard
    match wins, a wildcard beating a plain rule of the same length. When
    nothing matches, the last label alone is the suffix unless
    ``known_suffixes_only`` is set.
    """

    def __init__(self, suffix_list: SuffixList, config: Optional[ClassifierConfig] = None):
        self.suffix_list = suffix_list
        self.config = config or ClassifierConfig()

    def match(self, labels: Sequence[str], config: Optional[ClassifierConfig] = None) -> Match:
        """
        Match ASCII labels against the suffix list.

        Args:
            labels: ASCII labels, left to right
            config: Overrides the matcher's configuration for this call

        Returns:
            Match describing the public suffix

        Raises:
            InvalidInputError: If labels is empty
            NoSuffixFoundError: If no rule matched and known_suffixes_only is set
        """
        config = config or self.config
        if not labels:
            raise InvalidInputError("No labels to match", {"reason": "empty"})

        labels = tuple(labels)
        limit = min(len(labels), self.suffix_list.max_length(labels[-1]))
        exception: Optional[Rule] = None
        best: Optional[Rule] = None

        for length in range(1, limit + 1):
            candidate = labels[-length:]

            found = self._select(candidate, RuleKind.EXCEPTION, config)
            if found is not None:
                exception = found

            if length > 1:
                found = self._select(
                    (WILDCARD_LABEL,) + candidate[1:], RuleKind.WILDCARD, config
                )
                if found is None:
                    found = self._select(candidate, RuleKind.PLAIN, config)
            else:
                found = self._select(candidate, RuleKind.PLAIN, config)

            if found is not None:
                best = found

        if exception is not None:
            return Match(exception.suffix_length, exception)
        if best is not None:
            return Match(best.suffix_length, best)

        if config.known_suffixes_only:
            raise NoSuffixFoundError(
                "No suffix rule matches", {"domain": ".".join(labels)}
            )
        return Match(1)

    def _select(
        self, pattern: Sequence[str], kind: RuleKind, config: ClassifierConfig
    ) -> Optional[Rule]:
        rules = self.suffix_list.lookup(tuple(pattern), kind)
        if not config.include_private_suffixes:
            rules = tuple(rule for rule in rules if rule.section is Section.ICANN)
        if not rules:
            return None
        if len(rules) == 1:
            return rules[0]

        preferred = Section.PRIVATE if config.prefer_private else Section.ICANN
        for rule in rules:
            if rule.section is preferred:
                return rule
        return rules[0]
