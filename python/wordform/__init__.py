"""
wordform - configurable, rule-driven English inflection.

Pluralizes, singularizes, cases and acronym-normalizes words and dotted
identifiers. Rules live in an InflectionTable; every transform takes an
optional table and falls back to the process-wide default.
"""

__version__ = "0.1.0"

from wordform.acronyms import AcronymTable
from wordform.casing import (
    camelize,
    camelize_lower,
    camelize_upper,
    dasherize,
    humanize,
    underscore,
)
from wordform.config import (
    InflectionConfig,
    InflectionConfigError,
    build_inflections,
    load_config,
)
from wordform.inflection import pluralize, singularize, uncountable
from wordform.inflections import InflectionTable
from wordform.inflector import Inflector
from wordform.naming import (
    SymbolNotFoundError,
    classify,
    demodulize,
    foreign_key,
    modulize,
    ordinalize,
    tableize,
)
from wordform.rules import Rule, RuleSet
from wordform.state import default_inflections

__all__ = [
    "AcronymTable",
    "InflectionConfig",
    "InflectionConfigError",
    "InflectionTable",
    "Inflector",
    "Rule",
    "RuleSet",
    "SymbolNotFoundError",
    "build_inflections",
    "camelize",
    "camelize_lower",
    "camelize_upper",
    "classify",
    "dasherize",
    "default_inflections",
    "demodulize",
    "foreign_key",
    "humanize",
    "load_config",
    "modulize",
    "ordinalize",
    "pluralize",
    "singularize",
    "tableize",
    "uncountable",
    "underscore",
]
