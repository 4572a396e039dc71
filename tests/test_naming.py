"""
Tests for identifier sanitization.
"""

import pytest

from so_creator.codegen.core.naming import (
    DEFAULT_TRIM_SYMBOLS,
    NameSanitizer,
    sanitize_identifier,
)

TRICKY_NAMES = [
    "",
    "   ",
    "health",
    "  health ",
    " My Class 1",
    "123abc",
    "1 2 3",
    "-1abc",
    "a\t-",
    "<<value>>",
    "(x)",
    "@name!",
    "first name",
    "9lives left?",
    '"quoted"',
    "a.b.c",
    "___",
    "é",
]


class TestSanitizeIdentifier:
    """Tests for the four-step sanitization."""

    def test_trims_surrounding_whitespace(self):
        assert sanitize_identifier("  health ") == "health"

    def test_replaces_inner_spaces(self):
        assert sanitize_identifier(" My Class ") == "My_Class"

    def test_trailing_digits_are_kept(self):
        assert sanitize_identifier(" My Class 1") == "My_Class_1"

    def test_strips_leading_digits(self):
        assert sanitize_identifier("123abc") == "abc"

    def test_trims_symbols_from_both_ends(self):
        assert sanitize_identifier("<<value>>") == "value"
        assert sanitize_identifier("@name!") == "name"
        assert sanitize_identifier('"quoted"') == "quoted"

    def test_inner_symbols_are_kept(self):
        assert sanitize_identifier("a.b.c") == "a.b.c"

    def test_underscores_are_not_trimmed(self):
        assert sanitize_identifier("_private_") == "_private_"

    def test_digit_exposed_by_symbol_trim_is_removed(self):
        """A leading symbol hiding a digit must not leave a digit first."""
        assert sanitize_identifier("-1abc") == "abc"

    def test_may_return_empty(self):
        assert sanitize_identifier("") == ""
        assert sanitize_identifier("   ") == ""
        assert sanitize_identifier("123") == ""
        assert sanitize_identifier("(){}") == ""

    @pytest.mark.parametrize("raw", TRICKY_NAMES)
    def test_idempotent(self, raw):
        once = sanitize_identifier(raw)
        assert sanitize_identifier(once) == once

    @pytest.mark.parametrize("raw", TRICKY_NAMES)
    def test_never_starts_with_digit_or_contains_space(self, raw):
        result = sanitize_identifier(raw)
        assert " " not in result
        assert not (result and result[0].isdigit())


class TestNameSanitizer:
    """Tests for the NameSanitizer class."""

    def test_default_symbol_set(self):
        assert set("&*+-/<>='\\@`^!?.,;:|{}[]()\"") == DEFAULT_TRIM_SYMBOLS

    def test_custom_symbol_set(self):
        sanitizer = NameSanitizer(trim_symbols="#")
        assert sanitizer.sanitize_name("#tag#") == "tag"
        assert sanitizer.sanitize_name("!tag!") == "!tag!"

    def test_is_valid_name(self):
        sanitizer = NameSanitizer()
        assert sanitizer.is_valid_name(" x ")
        assert not sanitizer.is_valid_name(" 42 ")

    def test_find_duplicates_uses_sanitized_names(self):
        sanitizer = NameSanitizer()
        names = ["health", " health", "speed", "max hp", "max_hp", "", "  "]
        assert sanitizer.find_duplicates(names) == ["health", "max_hp"]

    def test_find_duplicates_none(self):
        assert NameSanitizer().find_duplicates(["a", "b", "c"]) == []

    def test_cache_is_consistent(self):
        sanitizer = NameSanitizer()
        first = sanitizer.sanitize_name(" a b ")
        sanitizer.clear_cache()
        assert sanitizer.sanitize_name(" a b ") == first == "a_b"

    def test_cache_is_bounded(self):
        sanitizer = NameSanitizer(cache_size=2)
        for raw in ["a", "b", "c", "d"]:
            sanitizer.sanitize_name(raw)
        info = sanitizer.cache_info()
        assert info.currsize == 2
        assert info.maxsize == 2

    def test_cache_hits(self):
        sanitizer = NameSanitizer()
        sanitizer.sanitize_name(" x ")
        sanitizer.sanitize_name(" x ")
        assert sanitizer.cache_info().hits == 1
