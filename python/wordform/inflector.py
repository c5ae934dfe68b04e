"""
Inflector - every transform bound to one inflection table.

Code that always uses the same custom rules can hold an Inflector instead of
passing the table to each call:

    inflector = Inflector.from_config(InflectionConfig(acronyms=["XML"]))
    inflector.camelize("xml_parser")  # "XMLParser"
"""

from pathlib import Path
from typing import Any, Optional, Union

from wordform import casing, inflection, naming
from wordform.config import InflectionConfig, build_inflections, load_config
from wordform.inflections import InflectionTable
from wordform.state import get_inflections


class Inflector:
    """Transform functions bound to a single InflectionTable."""

    def __init__(self, inflections: Optional[InflectionTable] = None):
        """
        Args:
            inflections: Table to use (process-wide default when None)
        """
        self.inflections = get_inflections(inflections)

    @classmethod
    def from_config(cls, config: Optional[InflectionConfig] = None) -> "Inflector":
        """Build a fresh table from a configuration record."""
        return cls(build_inflections(config))

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "Inflector":
        """Build a fresh table from a YAML configuration file."""
        return cls.from_config(load_config(path))

    def pluralize(self, word: Any) -> str:
        return inflection.pluralize(word, self.inflections)

    def singularize(self, word: Any) -> str:
        return inflection.singularize(word, self.inflections)

    def uncountable(self, word: Any) -> bool:
        return inflection.uncountable(word, self.inflections)

    def camelize(self, word: Any, upper: bool = True) -> str:
        return casing.camelize(word, self.inflections, upper=upper)

    def camelize_upper(self, word: Any) -> str:
        return casing.camelize_upper(word, self.inflections)

    def camelize_lower(self, word: Any) -> str:
        return casing.camelize_lower(word, self.inflections)

    def underscore(self, word: Any) -> str:
        return casing.underscore(word, self.inflections)

    def dasherize(self, word: Any) -> str:
        return casing.dasherize(word)

    def humanize(self, word: Any) -> str:
        return casing.humanize(word, self.inflections)

    def classify(self, word: Any) -> str:
        return naming.classify(word, self.inflections)

    def tableize(self, word: Any) -> str:
        return naming.tableize(word, self.inflections)

    def foreign_key(self, word: Any) -> str:
        return naming.foreign_key(word, self.inflections)

    def demodulize(self, word: Any) -> str:
        return naming.demodulize(word)

    def modulize(self, name: Any) -> Any:
        return naming.modulize(name)

    def ordinalize(self, number: int) -> str:
        return naming.ordinalize(number)

    def __repr__(self) -> str:
        return f"Inflector({self.inflections!r})"
