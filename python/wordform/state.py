"""
Process-wide default inflection table.

Built once, when this module is first imported, and never mutated after.
Callers that need custom rules build their own table (see wordform.config)
and pass it explicitly; nothing here is per-consumer.
"""

from typing import Optional

from wordform.inflections import InflectionTable

default_inflections: InflectionTable = InflectionTable.create()


def get_inflections(inflections: Optional[InflectionTable] = None) -> InflectionTable:
    """Return the given table, or the process-wide default when None."""
    if inflections is None:
        return default_inflections
    return inflections
