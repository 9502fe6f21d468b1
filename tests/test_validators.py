#!/usr/bin/env python3
"""
Tests for the individual validator classes.
"""

import math

import pytest

from typed_flags import (
    AllowedValuesValidator,
    CustomValidator,
    DisallowedValuesValidator,
    FlagType,
    InvalidFlagValueError,
    RangeValidator,
    Token,
    TypeValidator,
)


class TestTypeValidator:
    def test_accepts_exact_type(self):
        TypeValidator(FlagType.FLOAT).validate("ratio", 0.5)

    def test_rejects_other_type(self):
        with pytest.raises(InvalidFlagValueError) as excinfo:
            TypeValidator(FlagType.FLOAT).validate("ratio", 1)
        assert excinfo.value.flag_name == "ratio"
        assert excinfo.value.value == 1
        assert "expecting float" in excinfo.value.reason


class TestRangeValidator:
    """Test suite for inclusive range checks."""

    def test_closed_range_is_inclusive(self):
        validator = RangeValidator(-2, 2)
        assert validator.is_valid(-2)
        assert validator.is_valid(2)
        assert not validator.is_valid(-3)
        assert not validator.is_valid(3)

    def test_open_ends(self):
        assert RangeValidator(0).is_valid(2**128)
        assert not RangeValidator(0, math.inf).is_valid(-1)
        assert RangeValidator(high=0).is_valid(-(2**127))
        assert not RangeValidator(-math.inf, 0).is_valid(1)

    def test_incomparable_value_is_out_of_range(self):
        assert not RangeValidator(0, 10).is_valid("five")

    def test_message_names_range(self):
        with pytest.raises(InvalidFlagValueError, match=r"value out of range! Valid range is -2\.\.2"):
            RangeValidator(-2, 2).validate("boo", 3)


class TestValueSetValidators:
    """Test suite for allowed and disallowed value sets."""

    def test_allowed_values_varargs(self):
        validator = AllowedValuesValidator("left", "right")
        assert validator.is_valid("left")
        assert not validator.is_valid("down")

    def test_allowed_values_list_is_flattened(self):
        directions = [Token("north"), Token("south"), Token("east"), Token("west")]
        validator = AllowedValuesValidator(directions)
        assert validator.allowed_values == tuple(directions)
        assert validator.is_valid(Token("east"))
        assert not validator.is_valid(Token("up"))

    def test_disallowed_values(self):
        validator = DisallowedValuesValidator([Token("competitor1"), Token("competitor2")])
        assert validator.is_valid(Token("client"))
        assert not validator.is_valid(Token("competitor1"))

    def test_messages(self):
        with pytest.raises(InvalidFlagValueError, match="expecting one of"):
            AllowedValuesValidator("a").validate("x", "b")
        with pytest.raises(InvalidFlagValueError, match="may not be one of"):
            DisallowedValuesValidator("a").validate("x", "a")


class TestCustomValidator:
    def test_predicate_and_message(self):
        validator = CustomValidator(lambda v: v % 2 == 0, "Flag value must be an even integer")
        validator.validate("even_number", 10)
        with pytest.raises(InvalidFlagValueError) as excinfo:
            validator.validate("even_number", 11)
        assert str(excinfo.value) == (
            "Flag value 11 for flag -even_number is invalid: Flag value must be an even integer"
        )


class TestTokenAndStringEquality:
    def test_token_and_plain_string_match(self):
        assert AllowedValuesValidator(Token("a")).is_valid("a")
        assert AllowedValuesValidator("a").is_valid(Token("a"))
        assert not DisallowedValuesValidator(Token("a")).is_valid("a")
