"""
Inflection table: plural, singular and human rules plus uncountables and acronyms.

A table is built once (defaults first, then custom overrides) and then
treated as read-only. Every add_* method prepends, so whatever is added last
is checked first.
"""

import logging
import re
from typing import Iterable, Union

from wordform.acronyms import AcronymTable
from wordform.constants import (
    ACRONYMS,
    IRREGULARS,
    PLURAL_RULES,
    SINGULAR_RULES,
    UNCOUNTABLES,
)
from wordform.rules import Pattern, RuleSet

logger = logging.getLogger("wordform.inflections")

Pair = tuple[Pattern, str]
Words = Union[str, Iterable[str]]


def _as_words(words: Words) -> list[str]:
    if isinstance(words, str):
        return [words]
    return list(words)


class InflectionTable:
    """
    Container for every rule used by the transform functions.

    Use InflectionTable.create() for a table seeded with the default English
    rules. A bare InflectionTable() is empty.
    """

    def __init__(self):
        self.plurals = RuleSet()
        self.singulars = RuleSet()
        self.humans = RuleSet()
        self.uncountables: set[str] = set()
        self.acronyms = AcronymTable()

    @classmethod
    def create(
        cls,
        plural: Iterable[Pair] = (),
        singular: Iterable[Pair] = (),
        uncountable: Iterable[str] = (),
        acronyms: Iterable[str] = (),
        human: Iterable[Pair] = (),
    ) -> "InflectionTable":
        """
        Build a table with default rules, then layer custom rules on top.

        Custom rules are applied in a fixed order: plurals, singulars,
        uncountables, acronyms (then human rules). Because every rule is
        prepended, custom rules win over defaults.

        Args:
            plural: (pattern, replacement) pairs, e.g. [("octopus", "octopi")]
            singular: (pattern, replacement) pairs, e.g. [("octopi", "octopus")]
            uncountable: Words with no distinct plural
            acronyms: Words with fixed casing, e.g. ["XML"]
            human: (pattern, replacement) pairs applied by humanize

        Returns:
            New InflectionTable

        Examples:
            >>> table = InflectionTable.create(plural=[("person", "persons")])
            >>> table.plurals.apply("person")
            'persons'
        """
        table = cls()
        table.apply_defaults()

        for pattern, replacement in plural:
            table.add_plural(pattern, replacement)
        for pattern, replacement in singular:
            table.add_singular(pattern, replacement)
        table.add_uncountable(uncountable)
        table.add_acronym(acronyms)
        for pattern, replacement in human:
            table.add_human(pattern, replacement)

        logger.debug(
            f"Built inflection table: {len(table.plurals)} plural, "
            f"{len(table.singulars)} singular, {len(table.humans)} human rules, "
            f"{len(table.uncountables)} uncountables, {len(table.acronyms)} acronyms"
        )
        return table

    # ═══════════════════════════════════════════════════════════════════════
    # Rule registration
    # ═══════════════════════════════════════════════════════════════════════

    def add_plural(self, pattern: Pattern, replacement: str) -> "InflectionTable":
        """Add a pluralization rule with top priority."""
        self.plurals.prepend(pattern, replacement)
        return self

    def add_singular(self, pattern: Pattern, replacement: str) -> "InflectionTable":
        """Add a singularization rule with top priority."""
        self.singulars.prepend(pattern, replacement)
        return self

    def add_human(self, pattern: Pattern, replacement: str) -> "InflectionTable":
        """Add a humanize rule with top priority."""
        self.humans.prepend(pattern, replacement)
        return self

    def add_irregular(self, singular: str, plural: str) -> "InflectionTable":
        """
        Add an irregular singular/plural pair (person/people).

        Both forms stop being uncountable. The generated rules keep the
        first letter of the input, so "Person" pluralizes to "People".
        """
        self.uncountables.discard(singular)
        self.uncountables.discard(plural)

        self.plurals.prepend(*self._irregular_rule(singular, plural))
        self.singulars.prepend(*self._irregular_rule(plural, singular))
        return self

    def add_uncountable(self, words: Words) -> "InflectionTable":
        """Mark one or more words as uncountable."""
        self.uncountables.update(_as_words(words))
        return self

    def add_acronym(self, words: Words) -> "InflectionTable":
        """Register one or more acronyms by their canonical spelling ("API")."""
        for word in _as_words(words):
            self.acronyms.add(word.lower(), word)
        return self

    def is_uncountable_word(self, word: str) -> bool:
        """Check the uncountable set for a single word (case-insensitive query)."""
        return word.lower() in self.uncountables

    # ═══════════════════════════════════════════════════════════════════════
    # Defaults
    # ═══════════════════════════════════════════════════════════════════════

    def apply_defaults(self) -> "InflectionTable":
        for pattern, replacement in PLURAL_RULES:
            self.add_plural(pattern, replacement)
        for pattern, replacement in SINGULAR_RULES:
            self.add_singular(pattern, replacement)
        for singular, plural in IRREGULARS:
            self.add_irregular(singular, plural)
        self.add_uncountable(UNCOUNTABLES)
        self.add_acronym(ACRONYMS)
        return self

    @staticmethod
    def _irregular_rule(source: str, target: str) -> tuple["re.Pattern[str]", str]:
        # (p)erson$ -> \g<1>eople
        head, tail = source[:1], source[1:]
        pattern = re.compile(f"({re.escape(head)}){re.escape(tail)}\\Z", re.IGNORECASE)
        return pattern, "\\g<1>" + target[1:]

    def __repr__(self) -> str:
        return (
            f"InflectionTable(plurals={len(self.plurals)}, "
            f"singulars={len(self.singulars)}, humans={len(self.humans)}, "
            f"uncountables={len(self.uncountables)}, acronyms={len(self.acronyms)})"
        )
