import pytest

from hackernews.core.exceptions import InputValidationError
from hackernews.graphql.utils import (
    MAX_IDENTIFIER,
    TAKE_DEFAULT,
    parse_identifier,
    validate_skip,
    validate_take,
)


# --- parse_identifier ---


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("0", 0),
        ("1", 1),
        ("42", 42),
        ("007", 7),
        (str(MAX_IDENTIFIER), MAX_IDENTIFIER),
    ],
)
def test_parse_identifier_accepts_digit_strings(value: str, expected: int):
    assert parse_identifier(value) == expected


@pytest.mark.parametrize(
    "value",
    [
        "",
        "abc",
        "12a",
        "a12",
        "-1",
        "+1",
        "1.0",
        "1e3",
        " 1",
        "1 ",
        "1\n",
        "0x1f",
        "١٢",  # Arabic-Indic digits are not ASCII digits
    ],
)
def test_parse_identifier_rejects_everything_else(value: str):
    assert parse_identifier(value) is None


def test_parse_identifier_rejects_values_beyond_the_column_range():
    assert parse_identifier(str(MAX_IDENTIFIER + 1)) is None
    assert parse_identifier("9" * 40) is None


# --- validate_take ---


@pytest.mark.parametrize("take", [1, 2, 30, 49, 50])
def test_validate_take_accepts_values_in_range(take: int):
    assert validate_take(take) == take


def test_validate_take_defaults_to_thirty():
    assert validate_take(None) == TAKE_DEFAULT == 30


@pytest.mark.parametrize("take", [0, -1, 51, 1000])
def test_validate_take_rejects_values_out_of_range(take: int):
    with pytest.raises(InputValidationError) as exc_info:
        validate_take(take)

    message = exc_info.value.message
    assert f"'{take}'" in message
    assert "'1'" in message
    assert "'50'" in message
    assert exc_info.value.field == "take"


# --- validate_skip ---


@pytest.mark.parametrize("skip", [0, 1, 10_000])
def test_validate_skip_passes_non_negative_offsets(skip: int):
    assert validate_skip(skip) == skip


def test_validate_skip_defaults_to_zero():
    assert validate_skip(None) == 0


def test_validate_skip_rejects_negative_offsets():
    with pytest.raises(InputValidationError, match="'-5'"):
        validate_skip(-5)
