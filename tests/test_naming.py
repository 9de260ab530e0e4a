"""Unit tests for component name helpers (compgen.naming)."""

from __future__ import annotations

import pytest

from compgen.errors import InvalidComponentNameError
from compgen.naming import capitalize_first_letter, is_identifier, path_segment

pytestmark = pytest.mark.unit


class TestCapitalizeFirstLetter:
    def test_capitalizes_first_character_only(self):
        assert capitalize_first_letter("myComponent") == "MyComponent"

    def test_already_capitalized(self):
        assert capitalize_first_letter("Header") == "Header"

    def test_rest_left_unchanged(self):
        assert capitalize_first_letter("xML_parser") == "XML_parser"

    def test_single_character(self):
        assert capitalize_first_letter("a") == "A"

    def test_empty_string_returns_empty(self):
        assert capitalize_first_letter("") == ""

    def test_non_letter_first_character_passes_through(self):
        assert capitalize_first_letter("1abc") == "1abc"
        assert capitalize_first_letter("-nav") == "-nav"


class TestIsIdentifier:
    @pytest.mark.parametrize("value", ["Button", "my_button", "$store", "_private", "Card2"])
    def test_valid(self, value):
        assert is_identifier(value)

    @pytest.mark.parametrize("value", ["", "1abc", "my-comp", "my comp", "a.b", "Ünïcode"])
    def test_invalid(self, value):
        assert not is_identifier(value)


class TestPathSegment:
    def test_raw_name_when_not_upper_case(self):
        assert path_segment("foo", False) == "foo"

    def test_capitalized_when_upper_case(self):
        assert path_segment("foo", True) == "Foo"


class TestInvalidNameMessage:
    def test_message_says_ascii(self):
        error = InvalidComponentNameError("Ünïcode")
        assert "ASCII JS identifier" in str(error)
        assert error.name == "Ünïcode"
