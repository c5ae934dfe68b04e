"""
Tests for the acronym table.
"""

from wordform.acronyms import AcronymTable


class TestAcronymApply:
    """Test looking words up in the table."""

    def test_registered_acronym_wins(self):
        """Registered acronyms return their canonical form."""
        table = AcronymTable().add("api", "API")

        assert table.apply("api") == "API"
        assert table.apply("Api") == "API"
        assert table.apply("api", capitalize=False) == "API"

    def test_unknown_word_capitalized(self):
        """Unknown words get their first letter upper-cased."""
        table = AcronymTable().add("api", "API")

        assert table.apply("access") == "Access"

    def test_capitalize_keeps_rest_of_word(self):
        """Only the first letter changes; the rest is kept as-is."""
        assert AcronymTable().apply("dataMapper") == "DataMapper"

    def test_unknown_word_without_capitalize(self):
        """capitalize=False returns unknown words unchanged."""
        assert AcronymTable().apply("access", capitalize=False) == "access"

    def test_empty_word(self):
        """Empty input stays empty."""
        assert AcronymTable().apply("") == ""

    def test_mixed_case_canonical_form(self):
        """Canonical forms may be mixed case (OpenSSL)."""
        table = AcronymTable().add("openssl", "OpenSSL")
        assert table.apply("openssl") == "OpenSSL"

    def test_add_overwrites(self):
        """Adding the same key again replaces the canonical form."""
        table = AcronymTable().add("api", "Api").add("api", "API")

        assert table.apply("api") == "API"
        assert len(table) == 1


class TestAcronymPattern:
    """Test the combined acronym regex."""

    def test_empty_table_matches_nothing(self):
        """An empty table's pattern never matches."""
        table = AcronymTable()

        assert table.pattern.search("") is None
        assert table.pattern.search("API HTTP ab b a") is None

    def test_pattern_finds_acronyms(self):
        """Registered acronyms are found at word and case boundaries."""
        table = AcronymTable().add("api", "API").add("http", "HTTP")

        assert table.pattern.search("APIClient").group(2) == "API"
        assert table.pattern.search("MyHTTPServer").group(2) == "HTTP"
        assert table.pattern.search("use API now").group(2) == "API"

    def test_pattern_requires_boundary_after(self):
        """An acronym followed by a lowercase letter is not a match."""
        table = AcronymTable().add("api", "API")

        assert table.pattern.search("APIary") is None

    def test_pattern_rebuilt_on_add(self):
        """Each add() extends the pattern."""
        table = AcronymTable().add("api", "API")
        assert table.pattern.search("XMLDoc") is None

        table.add("xml", "XML")
        assert table.pattern.search("XMLDoc").group(2) == "XML"

    def test_special_characters_escaped(self):
        """Canonical forms are matched literally."""
        table = AcronymTable().add("c++", "C++")

        assert table.pattern.search("C++ code").group(2) == "C++"
        assert table.pattern.search("CCC code") is None


class TestAcronymContainer:
    """Test inspection helpers."""

    def test_get(self):
        table = AcronymTable().add("json", "JSON")

        assert table.get("json") == "JSON"
        assert table.get("xml") is None
