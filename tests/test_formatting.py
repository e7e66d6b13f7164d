import pytest

from solong.formatting import FormatSpec, parse_spec, printf, sprintf


@pytest.mark.parametrize(
    "fmt, value",
    [
        ("%d", 42),
        ("%i", -17),
        ("%5d", 42),
        ("%-5d|", 42),
        ("%05d", 42),
        ("%08d", -42),
        ("%.3d", 7),
        ("%+d", 9),
        ("% d", 9),
        ("%+5d", -3),
        ("%x", 255),
        ("%X", 48879),
        ("%#x", 255),
        ("%#X", 255),
        ("%#08x", 255),
        ("%-6x|", 171),
        ("%.4x", 10),
        ("%u", 3000000000),
        ("%07u", 12),
        ("%s", "hello"),
        ("%.2s", "hello"),
        ("%10s", "hi"),
        ("%-10s|", "hi"),
        ("%c", "z"),
        ("%3c", "q"),
        ("%-3c|", "q"),
    ],
)
def test_matches_standard_formatting(fmt, value):
    assert sprintf(fmt, value) == fmt % value


def test_literal_text_and_percent():
    assert sprintf("100%% sure") == "100% sure"
    assert sprintf("plain text") == "plain text"


def test_percent_ignores_width():
    assert sprintf("%5%") == "%"


def test_null_string():
    assert sprintf("%s", None) == "(null)"
    assert sprintf("%.6s", None) == "(null)"
    assert sprintf("%.3s", None) == ""


def test_null_string_with_short_precision_pads_to_width():
    result = sprintf("|%50.2s|", None)
    assert result.strip("|") == " " * 50
    assert len(result) == 52


def test_null_pointer():
    assert sprintf("%p", None) == "(nil)"
    assert sprintf("%p", 0) == "(nil)"
    assert sprintf("%8p", None) == "%8s" % "(nil)"


def test_pointer_hex():
    assert sprintf("%p", 255) == "0x" + "%x" % 255
    assert sprintf("%20p", 4096) == "%20s" % ("0x%x" % 4096)
    assert sprintf("%-20p|", 4096) == "%-20s|" % ("0x%x" % 4096)


def test_int_min():
    assert sprintf("%d", -2147483648) == "-2147483648"


def test_int_wraps_to_32_bits():
    assert sprintf("%d", 2**31) == sprintf("%d", -(2**31))
    assert sprintf("%d", 2**32 + 5) == sprintf("%d", 5)


def test_unsigned_wraps_to_32_bits():
    assert sprintf("%u", -1) == sprintf("%u", 0xFFFFFFFF)
    assert sprintf("%x", -1) == "%x" % 0xFFFFFFFF


def test_zero_with_zero_precision_prints_no_digits():
    assert sprintf("%.0d", 0) == ""
    assert sprintf("%5.0d", 0) == "%5s" % ""
    assert sprintf("%.0u", 0) == sprintf("%.0x", 0)


def test_plus_sign_kept_for_suppressed_zero():
    assert sprintf("%+.0d", 0) == "+"


def test_precision_disables_zero_flag():
    assert sprintf("%05.3d", 42) == "%5s" % ("%.3d" % 42)
    assert sprintf("%08.3u", 7) == "%8s" % ("%.3u" % 7)


def test_alternate_form_of_zero_has_no_prefix():
    assert sprintf("%#x", 0) == sprintf("%x", 0)


def test_char_from_int_uses_low_byte():
    assert sprintf("%c", 65) == "%c" % 65
    assert sprintf("%c", 321) == sprintf("%c", 321 & 0xFF)


def test_unknown_characters_in_spec_are_skipped():
    assert sprintf("%kd", 7) == sprintf("%d", 7)


def test_lone_percent_at_end_is_dropped():
    assert sprintf("abc%") == "abc"


def test_extra_arguments_ignored():
    assert sprintf("a", 1, 2) == "a"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        sprintf("%d %d", 1)


def test_wrong_argument_type_raises():
    with pytest.raises(TypeError):
        sprintf("%d", "x")
    with pytest.raises(TypeError):
        sprintf("%s", 3)


def test_none_format():
    assert sprintf(None) == ""
    assert printf(None) == 0


def test_several_conversions_concatenate():
    result = sprintf("%s=%d (%x)", "n", 26, 26)
    assert result == "%s=%d (%x)" % ("n", 26, 26)


def test_printf_writes_and_counts(capsys):
    count = printf("hi %d %s\n", 5, "there")
    out = capsys.readouterr().out
    assert out == sprintf("hi %d %s\n", 5, "there")
    assert count == len(out)


def test_parse_spec_fields():
    spec, pos = parse_spec("-08.3x rest", 0)
    assert spec.minus is True
    assert spec.zero is False
    assert spec.width == 8
    assert spec.precision == 3
    assert spec.conversion == "x"
    assert pos == 6


def test_parse_spec_dot_without_digits_means_zero_precision():
    spec, pos = parse_spec(".s", 0)
    assert spec.precision == 0
    assert spec.conversion == "s"
    assert pos == 2


def test_parse_spec_without_conversion():
    spec, pos = parse_spec("12", 0)
    assert spec.conversion is None
    assert spec.width == 12
    assert pos == 2


def test_parse_spec_flags():
    spec, _ = parse_spec("# +d", 0)
    assert (spec.alternate, spec.space, spec.plus) == (True, True, True)
    assert spec.precision is None


def test_format_spec_rejects_unknown_flag():
    with pytest.raises(ValueError):
        FormatSpec().set_flag("!")