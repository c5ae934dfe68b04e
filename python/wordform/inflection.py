"""
Pluralization and singularization.
"""

import re
from typing import Any, Optional

from wordform.inflections import InflectionTable
from wordform.state import get_inflections

# Splits "admin_money" into its components so the last one can be checked
_SEGMENT_SPLIT = re.compile(r"_|\b")


def uncountable(word: Any, inflections: Optional[InflectionTable] = None) -> bool:
    """
    Check whether a word has no distinct plural form.

    A word is uncountable when:
    - it is empty or whitespace only
    - it is in the table's uncountable set (case-insensitive)
    - its last component (split on "_" or word boundaries) is in the set

    Args:
        word: Word or identifier to check
        inflections: Table to use (default table when None)

    Returns:
        True if pluralize/singularize must leave the word alone

    Examples:
        >>> uncountable("money")
        True
        >>> uncountable("admin_money")
        True
        >>> uncountable("book")
        False
        >>> uncountable("   ")
        True
    """
    word = str(word)
    table = get_inflections(inflections)

    if not word.strip():
        return True
    if table.is_uncountable_word(word):
        return True

    segments = [segment for segment in _SEGMENT_SPLIT.split(word) if segment]
    return bool(segments) and table.is_uncountable_word(segments[-1])


def pluralize(word: Any, inflections: Optional[InflectionTable] = None) -> str:
    """
    Convert a singular English word to its plural form.

    Uncountable words are returned unchanged. Plurals are not detected, so
    pluralize is not idempotent: pluralize("books") gives "bookss".

    Examples:
        >>> pluralize("book")
        'books'
        >>> pluralize("person")
        'people'
        >>> pluralize("money")
        'money'
    """
    word = str(word)
    table = get_inflections(inflections)

    if uncountable(word, table):
        return word
    return table.plurals.apply(word)


def singularize(word: Any, inflections: Optional[InflectionTable] = None) -> str:
    """
    Convert a plural English word to its singular form.

    Examples:
        >>> singularize("books")
        'book'
        >>> singularize("people")
        'person'
        >>> singularize("sheep")
        'sheep'
    """
    word = str(word)
    table = get_inflections(inflections)

    if uncountable(word, table):
        return word
    return table.singulars.apply(word)
