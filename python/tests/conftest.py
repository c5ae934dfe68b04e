"""
Pytest configuration and fixtures for wordform tests.
"""

import logging

import pytest

from wordform.inflections import InflectionTable


@pytest.fixture
def complex_inflections():
    """Table with several custom rules of each kind layered on the defaults."""
    return InflectionTable.create(
        plural=[("octopus", "octopi"), ("virus", "viruses")],
        singular=[("octopi", "octopus"), ("viruses", "virus")],
        uncountable=["equipment", "software"],
    )


@pytest.fixture
def write_config(tmp_path):
    """Write a YAML inflection config and return its path."""

    def _write(content: str, name: str = "inflections.yaml"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def clean_wordform_logger():
    """Remove handlers added to the "wordform" logger during a test."""
    logger = logging.getLogger("wordform")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in logger.handlers[:]:
        if handler not in handlers:
            handler.close()
            logger.removeHandler(handler)
    logger.setLevel(level)
