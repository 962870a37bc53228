import pytest

from pushswap.formatting import (
    format_decimal,
    format_hex,
    format_pointer,
    format_string,
    format_unsigned,
    printf,
    sprintf,
)


@pytest.mark.parametrize("n", [0, 9, 10, -1, 123456, -2147483648, 2147483647])
def test_format_decimal_round_trips_in_range(n):
    assert int(format_decimal(n)) == n


def test_format_decimal_int_min():
    assert format_decimal(-2147483648) == "-2147483648"


def test_format_decimal_wraps_to_32_bits():
    assert int(format_decimal(2**31)) == -(2**31)


def test_format_unsigned_of_negative_wraps():
    assert int(format_unsigned(-1)) == 2**32 - 1


@pytest.mark.parametrize("n", [0, 5, 99, 2**32 - 1])
def test_format_unsigned_round_trips(n):
    assert int(format_unsigned(n)) == n


@pytest.mark.parametrize("n", [0, 9, 10, 15, 16, 255, 48879, 2**32 - 1])
def test_format_hex_round_trips(n):
    lower = format_hex(n, "x")
    upper = format_hex(n, "X")
    assert int(lower, 16) == n
    assert lower.upper() == upper
    assert lower == lower.lower()


def test_format_hex_masks_negative():
    assert int(format_hex(-1, "x"), 16) == 2**32 - 1


def test_format_hex_rejects_unknown_spec():
    with pytest.raises(ValueError):
        format_hex(10, "o")


def test_format_pointer_null():
    assert format_pointer(0) == "(nil)"


@pytest.mark.parametrize("n", [1, 4096, 2**40 + 17])
def test_format_pointer_round_trips(n):
    text = format_pointer(n)
    assert text.startswith("0x")
    assert int(text, 16) == n


def test_format_string():
    assert format_string(None) == "(null)"
    assert format_string("abc") == "abc"


def test_sprintf_mixed_conversions():
    text = sprintf("%c-%s-%d-%i-%%", "z", "word", 12, -3)
    assert text == "z-word-12--3-%"


def test_sprintf_hex_and_unsigned_match_helpers():
    text = sprintf("%x %X %u %p", 3054, 3054, 77, 4096)
    assert text == " ".join(
        [format_hex(3054, "x"), format_hex(3054, "X"), format_unsigned(77), format_pointer(4096)]
    )


def test_sprintf_char_from_integer():
    assert sprintf("%c", ord("Q")) == "Q"


def test_sprintf_missing_string_argument():
    assert sprintf("[%s]", None) == "[(null)]"


def test_sprintf_unknown_conversion_consumes_nothing():
    assert sprintf("%q%d", 5) == "5"


def test_sprintf_trailing_percent_is_dropped():
    assert sprintf("ab%") == "ab"


def test_sprintf_too_few_arguments():
    with pytest.raises(TypeError):
        sprintf("%d %d", 1)


def test_sprintf_missing_format():
    with pytest.raises(TypeError):
        sprintf(None)


def test_printf_writes_and_counts(capsys):
    count = printf("%s=%d\n", "pa", 7)
    out = capsys.readouterr().out
    assert out == "pa=7\n"
    assert count == len(out)


def test_printf_counts_null_pointer(capsys):
    count = printf("%p", 0)
    assert capsys.readouterr().out == "(nil)"
    assert count == len("(nil)")