#!/usr/bin/env python3
"""
Tests for text conversion and type checks of flag values.
"""

import pickle

import pytest

from typed_flags import FlagType, Token
from typed_flags.values import convert, format_value, is_native, quote_value


class TestToken:
    """Test suite for interned tokens."""

    def test_tokens_are_interned(self):
        assert Token("north") is Token("north")

    def test_token_equals_plain_string(self):
        assert Token("north") == "north"
        assert type(Token("north")) is not str

    def test_token_repr_and_str(self):
        assert repr(Token("north")) == ":north"
        assert str(Token("north")) == "north"
        assert type(str(Token("north"))) is str

    def test_token_survives_pickle(self):
        assert pickle.loads(pickle.dumps(Token("east"))) is Token("east")


class TestConvert:
    """Test suite for converting text to each flag type."""

    def test_string_is_identity(self):
        assert convert(FlagType.STRING, "you rock") == "you rock"

    def test_symbol_becomes_token(self):
        value = convert(FlagType.SYMBOL, "baz")
        assert value is Token("baz")

    def test_int_conversion(self):
        assert convert(FlagType.INT, "2") == 2
        assert convert(FlagType.INT, "-17") == -17
        assert convert(FlagType.INT, str(2**128)) == 2**128

    def test_int_rejects_non_integer_text(self):
        assert convert(FlagType.INT, "not an int") == "not an int"
        assert convert(FlagType.INT, "1.5") == "1.5"
        assert convert(FlagType.INT, "0x1G") == "0x1G"

    def test_int_prefixed_and_zero_padded_literals(self):
        assert convert(FlagType.INT, "0x1A") == 26
        assert convert(FlagType.INT, "0b101") == 5
        assert convert(FlagType.INT, "0o17") == 15
        assert convert(FlagType.INT, "017") == 17
        assert convert(FlagType.INT, "-0x10") == -16

    def test_float_conversion(self):
        assert convert(FlagType.FLOAT, "3.0") == 3.0
        assert convert(FlagType.FLOAT, "1e-3") == 0.001
        assert convert(FlagType.FLOAT, "-2.5") == -2.5

    def test_float_rejects_non_finite_text(self):
        assert convert(FlagType.FLOAT, "inf") == "inf"
        assert convert(FlagType.FLOAT, "-Infinity") == "-Infinity"
        assert convert(FlagType.FLOAT, "nan") == "nan"
        assert convert(FlagType.FLOAT, "1e400") == "1e400"

    def test_float_rejects_non_numeric_text(self):
        assert convert(FlagType.FLOAT, "abc") == "abc"

    def test_bool_conversion_is_case_insensitive(self):
        assert convert(FlagType.BOOL, "true") is True
        assert convert(FlagType.BOOL, "FALSE") is False
        assert convert(FlagType.BOOL, "True") is True

    def test_bool_leaves_other_text_unconverted(self):
        assert convert(FlagType.BOOL, "yes") == "yes"
        assert convert(FlagType.BOOL, "1") == "1"

    def test_non_text_bypasses_conversion(self):
        assert convert(FlagType.INT, 4) == 4
        assert convert(FlagType.FLOAT, 1) == 1
        assert type(convert(FlagType.FLOAT, 1)) is int
        assert convert(FlagType.BOOL, Token("true")) is Token("true")

    def test_flag_type_method_delegates(self):
        assert FlagType.INT.convert("7") == 7


class TestIsNative:
    """Test suite for exact runtime type checks."""

    @pytest.mark.parametrize(
        "flag_type,value",
        [
            (FlagType.STRING, "x"),
            (FlagType.SYMBOL, Token("x")),
            (FlagType.INT, 3),
            (FlagType.FLOAT, 3.0),
            (FlagType.BOOL, False),
        ],
    )
    def test_native_values(self, flag_type, value):
        assert is_native(flag_type, value)

    @pytest.mark.parametrize(
        "flag_type,value",
        [
            (FlagType.STRING, Token("x")),
            (FlagType.STRING, 123),
            (FlagType.SYMBOL, "x"),
            (FlagType.INT, True),
            (FlagType.INT, 3.0),
            (FlagType.FLOAT, 1),
            (FlagType.BOOL, 0),
        ],
    )
    def test_foreign_values(self, flag_type, value):
        assert not is_native(flag_type, value)


class TestFormatting:
    """Test suite for textual forms of values."""

    def test_format_value(self):
        assert format_value(True) == "true"
        assert format_value(False) == "false"
        assert format_value(2.0) == "2.0"
        assert format_value(3) == "3"
        assert format_value(Token("north")) == "north"
        assert format_value("you rock") == "you rock"

    def test_format_value_round_trips_floats(self):
        value = 0.1 + 0.2
        assert convert(FlagType.FLOAT, format_value(value)) == value

    def test_quote_value_quotes_strings(self):
        assert quote_value("you rock") == '"you rock"'
        assert quote_value('say "hi"') == '"say \\"hi\\""'
        assert quote_value(Token("north")) == "north"
        assert quote_value(2.0) == "2.0"
