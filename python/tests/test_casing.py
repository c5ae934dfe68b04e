"""
Tests for camelize, underscore, dasherize and humanize.
"""

import pytest

from wordform.casing import (
    camelize,
    camelize_lower,
    camelize_upper,
    dasherize,
    humanize,
    underscore,
)
from wordform.inflections import InflectionTable


class TestCamelize:
    """Test camelization."""

    def test_snake_case_to_upper_camel(self):
        assert camelize_upper("data_mapper") == "DataMapper"
        assert camelize_upper("drops_inflector") == "DropsInflector"
        assert camelize_upper("user_name") == "UserName"

    def test_snake_case_to_lower_camel(self):
        assert camelize_lower("data_mapper") == "dataMapper"
        assert camelize_lower("drops_inflector") == "dropsInflector"
        assert camelize_lower("user_name") == "userName"

    def test_dashes(self):
        assert camelize_upper("drops-inflector") == "DropsInflector"
        assert camelize_lower("drops-inflector") == "dropsInflector"

    def test_paths_become_dotted(self):
        """Slashes become dots; later segments always start with a capital."""
        assert camelize_upper("drops/inflector") == "Drops.Inflector"
        assert camelize_lower("drops/inflector") == "drops.Inflector"
        assert camelize_lower("admin.user_account") == "admin.UserAccount"

    def test_camelize_defaults_to_upper(self):
        assert camelize("data_mapper") == camelize_upper("data_mapper")
        assert camelize("data_mapper", upper=False) == camelize_lower("data_mapper")

    def test_default_acronyms(self):
        """Default acronyms keep their canonical casing."""
        assert camelize("api_access") == "APIAccess"
        assert camelize("http_json_client") == "HTTPJSONClient"
        assert camelize("openssl_context") == "OpenSSLContext"

    def test_lower_camel_lowercases_leading_acronym(self):
        """lowerCamelCase keeps the first word lowercase, even an acronym."""
        assert camelize_lower("api_access") == "apiAccess"
        assert camelize_lower("user_api") == "userAPI"

    def test_custom_acronym(self):
        """Acronyms only apply when registered in the table used."""
        table = InflectionTable.create(acronyms=["XML"])

        assert camelize("xml_parser") == "XmlParser"
        assert camelize("xml_parser", table) == "XMLParser"

    def test_existing_capitals_kept(self):
        """Only the first letter of each word is changed."""
        assert camelize("dataMapper") == "DataMapper"

    def test_empty_string(self):
        assert camelize("") == ""
        assert camelize_lower("") == ""

    def test_accepts_non_string(self):
        class Name:
            def __str__(self):
                return "data_mapper"

        assert camelize(Name()) == "DataMapper"


class TestUnderscore:
    """Test underscoring."""

    def test_camel_case_to_snake_case(self):
        assert underscore("DataMapper") == "data_mapper"
        assert underscore("DropsInflector") == "drops_inflector"
        assert underscore("userName") == "user_name"

    def test_dashes(self):
        assert underscore("drops-inflector") == "drops_inflector"

    def test_dotted_names_become_paths(self):
        assert underscore("Drops.Inflector") == "drops/inflector"

    def test_capital_runs(self):
        """A capital run before Capital+lowercase is split off."""
        assert underscore("XMLParser") == "xml_parser"
        assert underscore("APIAccess") == "api_access"
        assert underscore("HTTP2Server") == "http2_server"

    def test_digits(self):
        assert underscore("Base64Encoder") == "base64_encoder"

    def test_already_snake_case(self):
        assert underscore("data_mapper") == "data_mapper"

    @pytest.mark.parametrize("word", ["data_mapper", "user_name", "api_access", "admin/user"])
    def test_round_trip_with_camelize(self, word):
        assert underscore(camelize(word)) == underscore(word)


class TestDasherize:
    def test_underscores_to_dashes(self):
        assert dasherize("drops_inflector") == "drops-inflector"
        assert dasherize("user_name") == "user-name"

    def test_no_underscores(self):
        assert dasherize("plain") == "plain"


class TestHumanize:
    """Test conversion to display text."""

    def test_snake_case(self):
        assert humanize("drops_inflector") == "Drops inflector"
        assert humanize("user_name") == "User name"

    def test_removes_id_suffix(self):
        assert humanize("author_id") == "Author"
        assert humanize("user_id") == "User"

    def test_only_trailing_id_removed(self):
        assert humanize("id_card") == "Id card"

    def test_first_word_capitalized_only(self):
        """The first word is capitalized; the others are left alone."""
        assert humanize("API_key") == "Api key"
        assert humanize("employee_SALARY") == "Employee SALARY"

    def test_separator_is_first_non_word_character(self):
        """Words are split and re-joined on the first non-word character."""
        assert humanize("first-name last") == "First-name last"
        assert humanize("hello,world") == "Hello,world"

    def test_single_word(self):
        assert humanize("author") == "Author"

    def test_empty_string(self):
        assert humanize("") == ""

    def test_human_rules_applied_first(self):
        """Custom human rules run before the fixed steps."""
        table = InflectionTable.create(human=[("cust_", "customer_")])

        assert humanize("cust_name", table) == "Customer name"
        assert humanize("cust_name") == "Cust name"
