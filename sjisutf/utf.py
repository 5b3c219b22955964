"""Conversions between UTF-8, UTF-16 and UTF-32.

UTF-8 data is handled as ``bytes``. UTF-16 code units and UTF-32 code points
are handled as sequences of ``int``. Sequences behave like NUL-terminated
strings: conversion stops at the first zero value. It also stops at the first
malformed sequence, whose result would be zero.
"""

from __future__ import annotations

from collections.abc import Iterable

MAX_CODE_POINT = 0x10FFFF

_HIGH_SURROGATES = range(0xD800, 0xDC00)
_LOW_SURROGATES = range(0xDC00, 0xE000)

_LEAD_MASKS = {2: 0x1F, 3: 0x0F, 4: 0x07}


def _require_code(code: int) -> None:
    if code < 0:
        raise ValueError(f"code point must not be negative: {code}")


def _require_unit(unit: int) -> None:
    if not 0 <= unit <= 0xFFFF:
        raise ValueError(f"UTF-16 code unit out of range: {unit}")


def _require_byte(byte: int) -> None:
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"byte out of range: {byte}")


def encode_utf8_char(code: int) -> bytes:
    """Encode one code point as UTF-8.

    Zero and values above U+10FFFF give empty bytes.
    """
    _require_code(code)
    if code == 0 or code > MAX_CODE_POINT:
        return b""
    if code < 0x80:
        return bytes((code,))
    if code < 0x800:
        return bytes((0xC0 | (code >> 6), 0x80 | (code & 0x3F)))
    if code < 0x10000:
        return bytes(
            (
                0xE0 | (code >> 12),
                0x80 | ((code >> 6) & 0x3F),
                0x80 | (code & 0x3F),
            )
        )
    return bytes(
        (
            0xF0 | (code >> 18),
            0x80 | ((code >> 12) & 0x3F),
            0x80 | ((code >> 6) & 0x3F),
            0x80 | (code & 0x3F),
        )
    )


def encode_utf8(codes: Iterable[int]) -> bytes:
    """Encode code points as UTF-8, stopping at the first zero."""
    out = bytearray()
    for code in codes:
        if code == 0:
            break
        out += encode_utf8_char(code)
    return bytes(out)


def combine_surrogates(high: int, low: int = 0) -> int:
    """Turn one UTF-16 unit, or a surrogate pair, into a code point.

    A lone surrogate is kept only when ``low`` is zero; any other malformed
    combination gives zero.
    """
    _require_unit(high)
    _require_unit(low)
    if high in _HIGH_SURROGATES:
        if low in _LOW_SURROGATES:
            return 0x10000 + (high - 0xD800) * 0x400 + (low - 0xDC00)
        return high if low == 0 else 0
    if high in _LOW_SURROGATES:
        return high if low == 0 else 0
    return high


def utf16_to_utf32(units: Iterable[int]) -> list[int]:
    """Decode UTF-16 code units into code points."""
    codes: list[int] = []
    stream = iter(units)
    unit = next(stream, 0)
    while unit:
        following = next(stream, 0)
        code = combine_surrogates(unit, following)
        if code == 0:
            break
        codes.append(code)
        # A combined pair consumed the following unit as well.
        unit = next(stream, 0) if code > 0xFFFF else following
    return codes


def encode_utf16_char(code: int) -> list[int]:
    """Encode one code point as UTF-16 code units.

    Zero and values above U+10FFFF give an empty list.
    """
    _require_code(code)
    if code == 0 or code > MAX_CODE_POINT:
        return []
    if code < 0x10000:
        return [code]
    offset = code - 0x10000
    return [offset // 0x400 + 0xD800, offset % 0x400 + 0xDC00]


def utf32_to_utf16(codes: Iterable[int]) -> list[int]:
    """Encode code points as UTF-16 code units, stopping at the first zero."""
    units: list[int] = []
    for code in codes:
        if code == 0:
            break
        units.extend(encode_utf16_char(code))
    return units


def utf8_byte_length(byte: int) -> int:
    """Length of the UTF-8 sequence a lead byte starts, or 0 if it cannot lead."""
    _require_byte(byte)
    if byte < 0x80:
        return 1
    if 0xC2 <= byte < 0xE0:
        return 2
    if 0xE0 <= byte < 0xF0:
        return 3
    if 0xF0 <= byte < 0xF8:
        return 4
    return 0


def is_continuation_byte(byte: int) -> bool:
    """Whether a byte is a UTF-8 continuation byte (0x80 to 0xBF)."""
    _require_byte(byte)
    return 0x80 <= byte < 0xC0


def decode_utf8_char(data: bytes) -> tuple[int, int]:
    """Decode the UTF-8 sequence at the start of ``data``.

    Returns ``(code, length)`` where ``length`` is the length announced by the
    lead byte. ``code`` is zero for a malformed or overlong sequence.
    """
    chunk = bytes(data[:4]).split(b"\0", 1)[0].ljust(4, b"\0")
    lead = chunk[0]
    length = utf8_byte_length(lead)
    if length == 0:
        return 0, 0
    if length == 1:
        return lead, 1

    tail = chunk[1:length]
    if not all(is_continuation_byte(byte) for byte in tail):
        return 0, length
    if length == 2 and lead & 0x1E == 0:
        return 0, length
    if length == 3 and lead & 0x0F == 0 and tail[0] & 0x20 == 0:
        return 0, length
    if length == 4 and lead & 0x07 == 0 and tail[0] & 0x30 == 0:
        return 0, length

    code = lead & _LEAD_MASKS[length]
    for byte in tail:
        code = (code << 6) | (byte & 0x3F)
    return code, length


def decode_utf8(data: bytes) -> list[int]:
    """Decode UTF-8 bytes into code points.

    Decoding stops at a NUL byte or at the first malformed sequence.
    """
    data = bytes(data)
    codes: list[int] = []
    pos = 0
    while pos < len(data) and data[pos] != 0:
        code, length = decode_utf8_char(data[pos : pos + 4])
        if code == 0:
            break
        codes.append(code)
        pos += length or 1
    return codes


def utf16_to_utf8(units: Iterable[int]) -> bytes:
    """Convert UTF-16 code units to UTF-8 bytes."""
    return encode_utf8(utf16_to_utf32(units))


def utf8_to_utf16(data: bytes) -> list[int]:
    """Convert UTF-8 bytes to UTF-16 code units."""
    return utf32_to_utf16(decode_utf8(data))