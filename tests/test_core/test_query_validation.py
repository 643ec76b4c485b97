import pytest

from justice_ai.core.constants import Language
from justice_ai.core.validation import (
    format_character_count,
    is_near_limit,
    validate_query,
)


@pytest.mark.parametrize("text", ["", "   ", "\n\t  "])
def test_blank_query_is_empty_error(text):
    error = validate_query(text, Language.EN)

    assert error is not None
    assert error.code == "query_empty"
    assert error.message == "Please enter a legal query to analyze."


def test_empty_error_is_localized_to_urdu():
    error = validate_query("", Language.UR)

    assert error.code == "query_empty"
    assert error.message == "براہ کرم تجزیہ کے لیے قانونی سوال درج کریں۔"


@pytest.mark.parametrize("length", [1, 5, 9])
def test_short_query_rejected(length):
    error = validate_query("a" * length)

    assert error.code == "query_too_short"
    assert "10" in error.message


@pytest.mark.parametrize("length", [2001, 2500])
def test_long_query_rejected(length):
    error = validate_query("a" * length, Language.UR)

    assert error.code == "query_too_long"
    assert "2000" in error.message


@pytest.mark.parametrize("length", [10, 11, 500, 2000])
def test_query_within_bounds_passes(length):
    assert validate_query("a" * length) is None


def test_length_is_measured_after_trimming():
    # 9 visible characters padded past 10
    assert validate_query("   abcdefghi   ").code == "query_too_short"
    # 2000 characters plus surrounding whitespace
    assert validate_query("  " + "a" * 2000 + "  ") is None


def test_landlord_query_passes(landlord_query):
    assert validate_query(landlord_query, Language.EN) is None


def test_error_str_is_message():
    error = validate_query("short")
    assert str(error) == error.message


def test_character_counter_helpers():
    assert format_character_count(59, 2000) == "59/2000"
    assert is_near_limit(1801, 2000)
    assert not is_near_limit(1800, 2000)
    assert is_near_limit(6, 10, threshold=0.5)
