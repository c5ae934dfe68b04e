"""
Ordered inflection rules.

A RuleSet is a list of (pattern, replacement) pairs tried first-to-last.
The first rule that actually changes the word wins. New rules are usually
prepended, so the most recently registered rule is checked first.
"""

import re
from dataclasses import dataclass
from typing import Callable, Iterator, Union

Pattern = Union[str, "re.Pattern[str]"]

# \1 .. \99 and \g<name> / \g<1> group references
_GROUP_REF = re.compile(r"\\(\d{1,2})|\\g<(\w+)>")


@dataclass(frozen=True)
class Rule:
    """A single pattern/replacement pair."""

    pattern: Pattern
    replacement: str

    def apply(self, word: str) -> str:
        """
        Apply this rule once to a word.

        Literal patterns replace their first occurrence. Regex patterns
        substitute their first match, expanding group references in the
        replacement; groups that did not participate (or do not exist)
        expand to an empty string.
        """
        if isinstance(self.pattern, str):
            return word.replace(self.pattern, self.replacement, 1)

        return self.pattern.sub(self._expand, word, count=1)

    def _expand(self, match: "re.Match[str]") -> str:
        def group(ref: "re.Match[str]") -> str:
            name = ref.group(1) or ref.group(2)
            key = int(name) if name.isdigit() else name
            try:
                return match.group(key) or ""
            except IndexError:
                return ""

        return _GROUP_REF.sub(group, self.replacement)


class RuleSet:
    """
    Ordered collection of inflection rules.

    Example:
        >>> rules = RuleSet().prepend(re.compile(r"\\Z"), "s")
        >>> rules.apply("book")
        'books'
    """

    def __init__(self):
        self._rules: list[Rule] = []

    def apply(self, word: str) -> str:
        """
        Transform a word with the first rule that changes it.

        Args:
            word: Input word

        Returns:
            The transformed word, or the input unchanged if no rule applies
        """
        for rule in self._rules:
            transformed = rule.apply(word)
            if transformed != word:
                return transformed
        return word

    def insert(self, index: int, pattern: Pattern, replacement: str) -> "RuleSet":
        """Insert a rule at the given position."""
        self._rules.insert(index, Rule(pattern, replacement))
        return self

    def prepend(self, pattern: Pattern, replacement: str) -> "RuleSet":
        """Insert a rule at the front so it takes precedence over all others."""
        return self.insert(0, pattern, replacement)

    def for_each(self, visitor: Callable[[Rule], object]) -> None:
        """Call visitor for every rule, in priority order."""
        for rule in self._rules:
            visitor(rule)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleSet({len(self._rules)} rules)"
