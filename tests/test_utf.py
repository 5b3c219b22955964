import struct

import pytest

from sjisutf.utf import (
    MAX_CODE_POINT,
    combine_surrogates,
    decode_utf8,
    decode_utf8_char,
    encode_utf16_char,
    encode_utf8,
    encode_utf8_char,
    is_continuation_byte,
    utf16_to_utf32,
    utf16_to_utf8,
    utf32_to_utf16,
    utf8_byte_length,
    utf8_to_utf16,
)

SAMPLES = ["A", "hello", "é", "ÿ", "あいう", "漢字", "€", "😀", "a😀b𝄞c", "\u07ff\u0800\uffff"]


def _units(text):
    raw = text.encode("utf-16-le")
    return list(struct.unpack(f"<{len(raw) // 2}H", raw))


def _codes(text):
    return [ord(ch) for ch in text]


@pytest.mark.parametrize("text", SAMPLES)
def test_encode_utf8_matches_codec(text):
    assert encode_utf8(_codes(text)) == text.encode("utf-8")


@pytest.mark.parametrize("text", SAMPLES)
def test_encode_utf8_char_matches_codec(text):
    for ch in text:
        assert encode_utf8_char(ord(ch)) == ch.encode("utf-8")


def test_encode_utf8_char_out_of_range_and_zero():
    assert encode_utf8_char(MAX_CODE_POINT + 1) == b""
    assert encode_utf8_char(0) == b""
    assert encode_utf8_char(MAX_CODE_POINT) == chr(MAX_CODE_POINT).encode("utf-8")


def test_encode_utf8_char_negative_raises():
    with pytest.raises(ValueError):
        encode_utf8_char(-1)


def test_encode_utf8_stops_at_zero():
    assert encode_utf8([ord("a"), 0, ord("b")]) == b"a"


def test_encode_utf8_skips_out_of_range():
    assert encode_utf8([ord("x"), MAX_CODE_POINT + 5, ord("y")]) == b"xy"


@pytest.mark.parametrize("text", SAMPLES)
def test_utf32_to_utf16_matches_codec(text):
    assert utf32_to_utf16(_codes(text)) == _units(text)


def test_encode_utf16_char_pair():
    assert encode_utf16_char(MAX_CODE_POINT) == _units(chr(MAX_CODE_POINT))
    assert encode_utf16_char(0x10000) == _units(chr(0x10000))


def test_encode_utf16_char_empty_cases():
    assert encode_utf16_char(0) == []
    assert encode_utf16_char(MAX_CODE_POINT + 1) == []


def test_combine_surrogates_pair():
    high, low = _units("😀")
    assert combine_surrogates(high, low) == ord("😀")


def test_combine_surrogates_lone_and_malformed():
    high, low = _units("😀")
    assert combine_surrogates(high) == high
    assert combine_surrogates(low) == low
    assert combine_surrogates(high, ord("A")) == 0
    assert combine_surrogates(low, ord("A")) == 0
    assert combine_surrogates(ord("A"), ord("B")) == ord("A")


def test_combine_surrogates_rejects_out_of_range():
    with pytest.raises(ValueError):
        combine_surrogates(0x10000)


@pytest.mark.parametrize("text", SAMPLES)
def test_utf16_to_utf32_round_trip(text):
    assert utf16_to_utf32(_units(text)) == _codes(text)
    assert utf16_to_utf32(utf32_to_utf16(_codes(text))) == _codes(text)


def test_utf16_to_utf32_stops_at_nul_and_malformed():
    high, _ = _units("😀")
    assert utf16_to_utf32(_units("ab") + [0] + _units("c")) == _codes("ab")
    assert utf16_to_utf32(_units("ab") + [high] + _units("c")) == _codes("ab")
    assert utf16_to_utf32(_units("ab") + [high]) == _codes("ab") + [high]


def test_utf8_byte_length_for_leads():
    for ch in "A\x7fé\u07ffあ\uffff😀":
        encoded = ch.encode("utf-8")
        assert utf8_byte_length(encoded[0]) == len(encoded)


@pytest.mark.parametrize("byte", [0x80, 0xBF, 0xC0, 0xC1, 0xF8, 0xFF])
def test_utf8_byte_length_invalid_leads(byte):
    assert utf8_byte_length(byte) == 0


def test_is_continuation_byte():
    assert all(is_continuation_byte(b) for b in range(0x80, 0xC0))
    assert not any(is_continuation_byte(b) for b in range(0x80))
    assert not any(is_continuation_byte(b) for b in range(0xC0, 0x100))


def test_byte_range_checked():
    with pytest.raises(ValueError):
        utf8_byte_length(256)
    with pytest.raises(ValueError):
        is_continuation_byte(-1)


@pytest.mark.parametrize("ch", ["A", "é", "あ", "😀"])
def test_decode_utf8_char(ch):
    encoded = ch.encode("utf-8")
    assert decode_utf8_char(encoded + b"zz") == (ord(ch), len(encoded))


def test_decode_utf8_char_malformed():
    assert decode_utf8_char(b"\xe0\x80\x80") == (0, 3)
    assert decode_utf8_char(b"\xf0\x80\x80\x80") == (0, 4)
    assert decode_utf8_char(b"\xc3A") == (0, 2)
    assert decode_utf8_char(b"\xe3\x81") == (0, 3)
    assert decode_utf8_char(b"\x80") == (0, 0)
    assert decode_utf8_char(b"") == (0, 1)


@pytest.mark.parametrize("text", SAMPLES)
def test_decode_utf8_round_trip(text):
    assert decode_utf8(text.encode("utf-8")) == _codes(text)
    assert encode_utf8(decode_utf8(text.encode("utf-8"))) == text.encode("utf-8")


def test_decode_utf8_stops_at_nul_and_malformed():
    assert decode_utf8(b"ab\0cd") == _codes("ab")
    assert decode_utf8(b"ab\xffcd") == _codes("ab")
    assert decode_utf8(b"ab\xe3\x81") == _codes("ab")


@pytest.mark.parametrize("text", SAMPLES)
def test_utf16_utf8_round_trips(text):
    assert utf16_to_utf8(_units(text)) == text.encode("utf-8")
    assert utf8_to_utf16(text.encode("utf-8")) == _units(text)
    assert utf8_to_utf16(utf16_to_utf8(_units(text))) == _units(text)