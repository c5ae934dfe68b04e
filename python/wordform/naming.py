"""
Naming helpers for dotted, module-like identifiers.

classify / tableize / foreign_key map between class names and table or
column names; demodulize and modulize deal with the dotted path itself.
"""

import builtins
import logging
import sys
from typing import Any, Optional

from wordform.casing import camelize, underscore
from wordform.constants import ORDINALIZE_TH, SEGMENT_DELIMITER
from wordform.inflection import pluralize, singularize
from wordform.inflections import InflectionTable

logger = logging.getLogger("wordform.naming")


class SymbolNotFoundError(LookupError):
    """Raised when modulize() can't resolve a dotted name."""

    pass


def demodulize(word: Any) -> str:
    """
    Return the last segment of a dotted name.

    Examples:
        >>> demodulize("Drops.Inflector")
        'Inflector'
        >>> demodulize("String")
        'String'
    """
    return str(word).split(SEGMENT_DELIMITER)[-1]


def classify(word: Any, inflections: Optional[InflectionTable] = None) -> str:
    """
    Convert a table name to a class name.

    Examples:
        >>> classify("books")
        'Book'
        >>> classify("admin.users")
        'User'
        >>> classify("admin_users")
        'AdminUser'
    """
    return camelize(singularize(demodulize(word), inflections), inflections)


def tableize(word: Any, inflections: Optional[InflectionTable] = None) -> str:
    """
    Convert a class name to a table name.

    Examples:
        >>> tableize("Book")
        'books'
        >>> tableize("Admin.User")
        'admin_users'
    """
    word = str(word).replace(SEGMENT_DELIMITER, "_")
    return pluralize(underscore(word, inflections), inflections)


def foreign_key(word: Any, inflections: Optional[InflectionTable] = None) -> str:
    """
    Build a foreign key column name from a class name.

    The class name is singularized first, so plural names work too.

    Examples:
        >>> foreign_key("Message")
        'message_id'
        >>> foreign_key("Admin.User")
        'user_id'
        >>> foreign_key("Messages")
        'message_id'
    """
    name = singularize(demodulize(word), inflections)
    return f"{underscore(name, inflections)}_id"


def ordinalize(number: int) -> str:
    """
    Append the English ordinal suffix to an integer.

    The sign is kept: ordinalize(-1) == "-1st".

    Raises:
        TypeError: number is not an int

    Examples:
        >>> ordinalize(1)
        '1st'
        >>> ordinalize(12)
        '12th'
        >>> ordinalize(23)
        '23rd'
    """
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"ordinalize() expects an int, got {type(number).__name__}")

    abs_value = abs(number)
    if abs_value % 100 in ORDINALIZE_TH:
        return f"{number}th"

    suffix = {1: "st", 2: "nd", 3: "rd"}.get(abs_value % 10, "th")
    return f"{number}{suffix}"


def modulize(name: Any) -> Any:
    """
    Resolve a dotted name to an object that is already loaded.

    Only modules present in sys.modules are considered: the longest loaded
    module prefix is taken and the remaining segments are looked up as
    attributes. A bare name that is not a loaded module is looked up in
    builtins. modulize never imports anything and never uses an inflection
    table.

    Args:
        name: Dotted name, e.g. "collections.OrderedDict" or "str"

    Returns:
        The module, class, function or other object the name refers to

    Raises:
        SymbolNotFoundError: Nothing loaded has that name

    Examples:
        >>> modulize("os.path")  # doctest: +ELLIPSIS
        <module '...path' ...>
        >>> modulize("str")
        <class 'str'>
    """
    name = str(name)
    parts = name.split(SEGMENT_DELIMITER)
    if not all(parts):
        raise SymbolNotFoundError(f"No such symbol: {name!r}")

    for split in range(len(parts), 0, -1):
        module = sys.modules.get(SEGMENT_DELIMITER.join(parts[:split]))
        if module is not None:
            return _resolve_attributes(module, parts[split:], name)

    if hasattr(builtins, parts[0]):
        return _resolve_attributes(builtins, parts, name)

    logger.debug(f"modulize: nothing loaded for {name!r}")
    raise SymbolNotFoundError(f"No such symbol: {name!r}")


def _resolve_attributes(target: Any, attributes: list[str], name: str) -> Any:
    for attribute in attributes:
        try:
            target = getattr(target, attribute)
        except AttributeError:
            raise SymbolNotFoundError(f"No such symbol: {name!r}") from None
    return target
