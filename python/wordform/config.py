"""
Custom inflection configuration.

A configuration is a record with optional lists of plural pairs, singular
pairs, uncountable words, acronyms and human pairs. It can be written in
code or loaded from YAML:

    plural:
      - [octopus, octopi]
      - {pattern: '/(vir)us$/i', replacement: '\\1uses'}
    singular:
      - [octopi, octopus]
    uncountable: [equipment, software]
    acronyms: [XML, HTML]

A pattern written between slashes (optionally followed by "i") is compiled
as a regular expression. Anything else is a literal substring.
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml

from wordform.inflections import InflectionTable, Pair

logger = logging.getLogger("wordform.config")

_REGEX_LITERAL = re.compile(r"^/(?P<source>.*)/(?P<flags>i?)$", re.DOTALL)

_PAIR_KEYS = ("plural", "singular", "human")
_WORD_KEYS = ("uncountable", "acronyms")


class InflectionConfigError(Exception):
    """Raised when an inflection configuration is missing or malformed."""

    pass


@dataclass
class InflectionConfig:
    """Custom rules layered on top of the default English inflections."""

    plural: list[Pair] = field(default_factory=list)
    singular: list[Pair] = field(default_factory=list)
    uncountable: list[str] = field(default_factory=list)
    acronyms: list[str] = field(default_factory=list)
    human: list[Pair] = field(default_factory=list)

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "InflectionConfig":
        """
        Validate and convert a plain mapping (e.g. parsed YAML).

        Args:
            data: Mapping with any of the keys plural, singular, human,
                  uncountable, acronyms. None means "no customization".

        Raises:
            InflectionConfigError: Unknown keys or malformed entries
        """
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise InflectionConfigError(
                f"Inflection config must be a mapping, got {type(data).__name__}"
            )

        unknown = set(data) - set(_PAIR_KEYS) - set(_WORD_KEYS)
        if unknown:
            raise InflectionConfigError(
                f"Unknown inflection config keys: {', '.join(sorted(map(str, unknown)))}"
            )

        values: dict[str, list] = {}
        for key in _PAIR_KEYS:
            values[key] = [
                _parse_pair(key, index, entry)
                for index, entry in enumerate(_as_list(key, data.get(key)))
            ]
        for key in _WORD_KEYS:
            words = _as_list(key, data.get(key))
            for index, word in enumerate(words):
                if not isinstance(word, str):
                    raise InflectionConfigError(
                        f"{key}[{index}] must be a string, got {type(word).__name__}"
                    )
            values[key] = list(words)

        return cls(**values)


def load_config(path: Union[str, Path]) -> InflectionConfig:
    """
    Load an inflection configuration from a YAML file.

    Args:
        path: Path to the YAML document

    Returns:
        Parsed InflectionConfig (empty document -> empty config)

    Raises:
        InflectionConfigError: File missing/unreadable, invalid YAML or shape
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise InflectionConfigError(f"Could not read inflection config {path}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise InflectionConfigError(f"Invalid YAML in {path}: {e}") from e

    try:
        config = InflectionConfig.from_mapping(data)
    except InflectionConfigError as e:
        raise InflectionConfigError(f"{path}: {e}") from e

    logger.debug(f"Loaded inflection config from {path}")
    return config


def build_inflections(config: Optional[InflectionConfig] = None) -> InflectionTable:
    """
    Build an inflection table from a configuration record.

    The result is independent of every other table; hold on to it and pass
    it to the transform functions.

    Examples:
        >>> table = build_inflections(InflectionConfig(acronyms=["XML"]))
        >>> table.acronyms.apply("xml")
        'XML'
    """
    if config is None:
        return InflectionTable.create()
    return InflectionTable.create(
        plural=config.plural,
        singular=config.singular,
        uncountable=config.uncountable,
        acronyms=config.acronyms,
        human=config.human,
    )


def compile_pattern(pattern: str) -> Union[str, "re.Pattern[str]"]:
    """
    Turn "/regex/" or "/regex/i" into a compiled pattern; keep others literal.

    Raises:
        InflectionConfigError: The regular expression doesn't compile
    """
    match = _REGEX_LITERAL.match(pattern)
    if match is None:
        return pattern

    flags = re.IGNORECASE if match.group("flags") else 0
    try:
        return re.compile(match.group("source"), flags)
    except re.error as e:
        raise InflectionConfigError(f"Invalid regular expression {pattern!r}: {e}") from e


def _as_list(key: str, value: Any) -> list:
    if value is None:
        return []
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
        raise InflectionConfigError(f"{key} must be a list, got {type(value).__name__}")
    return list(value)


def _parse_pair(key: str, index: int, entry: Any) -> Pair:
    if isinstance(entry, Mapping):
        if set(entry) != {"pattern", "replacement"}:
            raise InflectionConfigError(
                f"{key}[{index}] must have exactly 'pattern' and 'replacement' keys"
            )
        pattern, replacement = entry["pattern"], entry["replacement"]
    elif isinstance(entry, (list, tuple)) and len(entry) == 2:
        pattern, replacement = entry
    else:
        raise InflectionConfigError(
            f"{key}[{index}] must be a [pattern, replacement] pair"
        )

    if isinstance(pattern, re.Pattern):
        return pattern, str(replacement)
    if not isinstance(pattern, str) or not isinstance(replacement, str):
        raise InflectionConfigError(f"{key}[{index}] pattern and replacement must be strings")
    return compile_pattern(pattern), replacement
