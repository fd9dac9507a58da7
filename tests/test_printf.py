import io

import pytest

from pushswap.printf import format_string, itoa_base, printf


@pytest.mark.parametrize("value", [0, 1, 7, 10, 255, 4096, 123456789, 2**40])
@pytest.mark.parametrize("base", [2, 8, 10, 16])
def test_itoa_base_round_trip(value, base):
    assert int(itoa_base(value, base), base) == value


def test_itoa_base_zero():
    assert itoa_base(0, 16) == "0"


def test_itoa_base_is_lower_case():
    text = itoa_base(0xABCDEF, 16)
    assert text == text.lower()
    assert int(text, 16) == 0xABCDEF


@pytest.mark.parametrize("base", [0, 1, 17])
def test_itoa_base_rejects_bad_base(base):
    with pytest.raises(ValueError):
        itoa_base(5, base)


def test_itoa_base_rejects_negative():
    with pytest.raises(ValueError):
        itoa_base(-1, 10)


def test_plain_text_unchanged():
    assert format_string("hello world\n") == "hello world\n"


def test_string_conversion():
    assert format_string("[%s]", "abc") == "[abc]"


def test_null_string():
    assert format_string("%s", None) == "(null)"


def test_char_conversion_from_str_and_code():
    assert format_string("s%c\n", "a") == "sa\n"
    assert format_string("%c", ord("Z")) == "Z"


@pytest.mark.parametrize("value", [0, 1, -1, 42, -2147483648, 2147483647])
def test_decimal_round_trip(value):
    assert int(format_string("%d", value)) == value
    assert format_string("%i", value) == format_string("%d", value)


def test_decimal_wraps_to_32_bits():
    assert format_string("%d", 2147483648) == "-2147483648"


@pytest.mark.parametrize("value", [0, 5, 2147483647, 4294967295])
def test_unsigned_non_negative(value):
    assert format_string("%u", value) == str(value)


def test_unsigned_negative_wraps():
    assert int(format_string("%u", -1)) == 2**32 - 1


@pytest.mark.parametrize("value", [0, 9, 10, 255, 3735928559])
def test_hex_matches_builtin_format(value):
    assert format_string("%x", value) == format(value, "x")
    assert format_string("%X", value) == format(value, "x").upper()


def test_hex_of_negative_uses_32_bits():
    assert int(format_string("%x", -1), 16) == 2**32 - 1


def test_pointer_null():
    assert format_string("%p", None) == "(nil)"
    assert format_string("%p", 0) == "(nil)"


def test_pointer_address():
    text = format_string("%p", 255)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 255


def test_percent_literal():
    assert format_string("100%%") == "100%"


def test_unknown_conversion_kept():
    assert format_string("%z") == "%z"


def test_trailing_percent_raises():
    with pytest.raises(ValueError):
        format_string("abc%")


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_string("%d %d", 1)


def test_extra_arguments_ignored():
    assert format_string("%s", "x", "y") == "x"


def test_printf_writes_to_stream_and_returns_length():
    stream = io.StringIO()
    count = printf("r%c\n", "a", stream=stream)
    assert stream.getvalue() == "ra\n"
    assert count == len(stream.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("%s-%d\n", "ab", 12)
    out = capsys.readouterr().out
    assert out == "ab-12\n"
    assert count == len(out)