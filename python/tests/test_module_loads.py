"""
Test that the wordform package and its public API import correctly.
"""

import pytest


def test_wordform_package_imports():
    """Test that the wordform package imports."""
    import wordform
    assert wordform.__version__ == "0.1.0"


def test_public_api_exported():
    """Everything in __all__ is importable from the package root."""
    import wordform

    for name in wordform.__all__:
        try:
            getattr(wordform, name)
        except AttributeError as e:
            pytest.fail(f"wordform.{name} missing: {e}")


def test_default_table_seeded_at_import():
    """The process-wide default table exists as soon as the package is imported."""
    from wordform import default_inflections, pluralize

    assert len(default_inflections.plurals) > 0
    assert pluralize("person") == "people"
