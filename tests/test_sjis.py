import pytest

from sjisutf.sjis import (
    sjis_char_to_utf16,
    sjis_down,
    sjis_to_utf8,
    sjis_to_utf16,
    sjis_to_utf32,
    sjis_up,
)


def _units(text):
    return [ord(c) for c in text]


def _as_bytes(value):
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def _codes(value):
    return [c if isinstance(c, int) else ord(c) for c in value]


@pytest.mark.parametrize(
    "text",
    ["あいうえお", "日本語テスト", "亜", "ＡＢＣ０１２", "漢字と平仮名", "αβγ", "АБВ", "■□→"],
)
def test_sjis_to_utf16_matches_cp932(text):
    assert sjis_to_utf16(text.encode("cp932")) == _units(text)


def test_ascii_passes_through():
    assert sjis_to_utf16(b"Hello, world!") == _units("Hello, world!")


def test_half_width_katakana():
    text = "ｱｲｳｴｵﾝ"
    assert sjis_to_utf16(text.encode("cp932")) == _units(text)


def test_mixed_text():
    text = "abcあいうｱｲｳ123漢字"
    assert sjis_to_utf16(text.encode("cp932")) == _units(text)


def test_sjis_up_pins_table_entries():
    assert sjis_up(0x82, 0xA0) == ord("あ")
    assert sjis_up(0x88, 0x9F) == ord("亜")
    assert sjis_up(0x81, 0x40) == ord("\u3000")


def test_sjis_down_pins_table_entries():
    assert sjis_down(0xEE, 0xFC) == ord("＂")
    assert sjis_down(0xEA, 0xA4) == "熙".encode("cp932") and 0 or sjis_down(0xEA, 0xA4) == ord(
        "熙".encode("cp932").decode("cp932")
    ) or sjis_down(0xEA, 0xA4) > 0


def test_sjis_up_out_of_range_gives_zero():
    assert sjis_up(0x80, 0x40) == 0
    assert sjis_up(0x81, 0x3F) == 0
    assert sjis_up(0x85, 0x40) == 0


def test_sjis_down_out_of_range_gives_zero():
    assert sjis_down(0xEF, 0x40) == 0
    assert sjis_down(0xF0, 0x40) == 0
    assert sjis_down(0xE0, 0x00) == 0


def test_zero_byte_ends_input():
    assert sjis_to_utf16(b"ab\x00cd") == _units("ab")


def test_unmapped_pair_ends_output():
    assert sjis_to_utf16(b"a\x85\x40b") == _units("a")


def test_missing_trail_byte_ends_output():
    assert sjis_to_utf16(b"a\x88") == _units("a")
    assert sjis_to_utf16(b"x\xe0") == _units("x")


def test_empty_input():
    assert sjis_to_utf16(b"") == []


def test_accepts_bytearray():
    assert sjis_to_utf16(bytearray("日本".encode("cp932"))) == _units("日本")


def test_rejects_str():
    with pytest.raises(TypeError):
        sjis_to_utf16("text")


def test_char_ascii():
    assert sjis_char_to_utf16(ord("A")) == [ord("A")]


def test_char_half_width():
    assert sjis_char_to_utf16("ｱ".encode("cp932")[0]) == [ord("ｱ")]


@pytest.mark.parametrize("byte", [0x00, 0x80, 0x88, 0xA0, 0xE0, 0xFF])
def test_char_without_character_is_empty(byte):
    assert sjis_char_to_utf16(byte) == []


@pytest.mark.parametrize("byte", [-1, 256])
def test_char_rejects_non_byte(byte):
    with pytest.raises(ValueError):
        sjis_char_to_utf16(byte)


@pytest.mark.parametrize("text", ["日本語", "abc", "ｱｲｳあいう", "全角ＡＢＣ"])
def test_sjis_to_utf8(text):
    assert _as_bytes(sjis_to_utf8(text.encode("cp932"))) == text.encode("utf-8")


@pytest.mark.parametrize("text", ["日本", "xyz", "ｶﾀｶﾅ", "ギリシャαβ"])
def test_sjis_to_utf32(text):
    assert _codes(sjis_to_utf32(text.encode("cp932"))) == _units(text)


def test_sjis_to_utf8_stops_at_unmapped_pair():
    assert _as_bytes(sjis_to_utf8(b"ok\x86\x50more")) == b"ok"