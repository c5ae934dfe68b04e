"""
Acronym registry used by camelization.

Maps a lowercase word to its canonical casing ("api" -> "API") and keeps a
combined regex that finds any registered acronym inside a larger string.
"""

import re
from typing import Optional

# Never matches anything: a "b" can't also be an "a"
_NEVER_MATCHES = re.compile(r"(?=a)b")


class AcronymTable:
    """
    Lowercase key -> canonical acronym form.

    The combined pattern is rebuilt on every add() because it embeds all
    registered canonical forms.
    """

    def __init__(self):
        self._rules: dict[str, str] = {}
        self._pattern: re.Pattern[str] = _NEVER_MATCHES

    @property
    def pattern(self) -> "re.Pattern[str]":
        """Regex matching any registered acronym at a word or case boundary."""
        return self._pattern

    def add(self, key: str, canonical: str) -> "AcronymTable":
        """
        Register (or overwrite) an acronym.

        Args:
            key: Lowercase lookup key (e.g., "api")
            canonical: Display form (e.g., "API")

        Returns:
            self, for chaining
        """
        self._rules[key] = canonical
        self._rebuild_pattern()
        return self

    def apply(self, word: str, capitalize: bool = True) -> str:
        """
        Return the acronym form of a word, or the word itself.

        Registered acronyms always win, regardless of capitalize. Other words
        get their first letter upper-cased (rest untouched) when capitalize
        is True and are returned unchanged otherwise.

        Examples:
            >>> table = AcronymTable().add("api", "API")
            >>> table.apply("api")
            'API'
            >>> table.apply("access")
            'Access'
            >>> table.apply("access", capitalize=False)
            'access'
        """
        acronym = self._rules.get(word.lower())
        if acronym is not None:
            return acronym
        if capitalize:
            return word[:1].upper() + word[1:]
        return word

    def get(self, key: str) -> Optional[str]:
        return self._rules.get(key)

    def _rebuild_pattern(self) -> None:
        if not self._rules:
            self._pattern = _NEVER_MATCHES
            return

        alternation = "|".join(re.escape(value) for value in self._rules.values())
        self._pattern = re.compile(
            rf"(?:(?<=([A-Za-z\d]))|\b)({alternation})(?=\b|[^a-z])"
        )

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"AcronymTable({sorted(self._rules.values())})"
