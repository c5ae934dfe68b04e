"""
Case conversions: camelize, underscore, dasherize, humanize.

Dotted names ("admin.users") are handled segment by segment, and slashes are
treated as the same delimiter, so "drops/inflector" camelizes to
"Drops.Inflector" and underscores back to "drops/inflector".
"""

import re
from typing import Any, Optional

from wordform.constants import DEFAULT_SEPARATOR, PATH_SEPARATOR, SEGMENT_DELIMITER
from wordform.inflections import InflectionTable
from wordform.state import get_inflections

_WORD_SPLIT = re.compile(r"[_-]")
_ACRONYM_BOUNDARY = re.compile(r"([A-Z\d]+)([A-Z][a-z])")  # XMLParser -> XML_Parser
_CASE_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")  # dataMapper -> data_Mapper
_NON_WORD = re.compile(r"\W")


def camelize(
    word: Any, inflections: Optional[InflectionTable] = None, upper: bool = True
) -> str:
    """
    Convert snake_case / kebab-case (optionally dotted) to CamelCase.

    Every sub-word goes through the acronym table, so registered acronyms
    keep their canonical casing. With upper=False the very first sub-word is
    lowercased instead; later segments of a dotted name always start with a
    capital.

    Args:
        word: Input string
        inflections: Table to use (default table when None)
        upper: UpperCamelCase when True, lowerCamelCase when False

    Examples:
        >>> camelize("data_mapper")
        'DataMapper'
        >>> camelize("api_access")
        'APIAccess'
        >>> camelize("drops/inflector", upper=False)
        'drops.Inflector'
    """
    table = get_inflections(inflections)
    word = str(word).replace(PATH_SEPARATOR, SEGMENT_DELIMITER)

    segments = []
    for index, segment in enumerate(word.split(SEGMENT_DELIMITER)):
        first, *rest = _WORD_SPLIT.split(segment)

        if upper or index > 0:
            first = table.acronyms.apply(first, capitalize=True)
        else:
            first = first.lower()

        rest = [table.acronyms.apply(part, capitalize=True) for part in rest]
        segments.append("".join([first, *rest]))

    return SEGMENT_DELIMITER.join(segments)


def camelize_upper(word: Any, inflections: Optional[InflectionTable] = None) -> str:
    """UpperCamelCase: "data_mapper" -> "DataMapper"."""
    return camelize(word, inflections, upper=True)


def camelize_lower(word: Any, inflections: Optional[InflectionTable] = None) -> str:
    """lowerCamelCase: "data_mapper" -> "dataMapper"."""
    return camelize(word, inflections, upper=False)


def underscore(word: Any, inflections: Optional[InflectionTable] = None) -> str:
    """
    Convert CamelCase (optionally dotted) to snake_case.

    Dots become slashes, mirroring camelize. The table is accepted for a
    uniform signature; acronyms are split like any other capital run.

    Examples:
        >>> underscore("DataMapper")
        'data_mapper'
        >>> underscore("XMLParser")
        'xml_parser'
        >>> underscore("Drops.Inflector")
        'drops/inflector'
    """
    word = str(word).replace(SEGMENT_DELIMITER, PATH_SEPARATOR)
    word = _ACRONYM_BOUNDARY.sub(r"\1_\2", word)
    word = _CASE_BOUNDARY.sub(r"\1_\2", word)
    word = word.replace("-", "_")
    return word.lower()


def dasherize(word: Any) -> str:
    """Replace underscores with dashes: "drops_inflector" -> "drops-inflector"."""
    return str(word).replace("_", "-")


def humanize(word: Any, inflections: Optional[InflectionTable] = None) -> str:
    """
    Convert an identifier to display text.

    Human rules from the table run first. Then a trailing "_id" is dropped,
    underscores become spaces, and only the first word is capitalized.
    Words are split on the first non-word character found, and joined back
    with that same character.

    Examples:
        >>> humanize("drops_inflector")
        'Drops inflector'
        >>> humanize("author_id")
        'Author'
    """
    table = get_inflections(inflections)
    result = table.humans.apply(str(word))

    if result.endswith("_id"):
        result = result[: -len("_id")]
    result = result.replace("_", " ")

    match = _NON_WORD.search(result)
    separator = match.group(0) if match else DEFAULT_SEPARATOR

    words = result.split(separator)
    words[0] = words[0].capitalize()
    return separator.join(words)
