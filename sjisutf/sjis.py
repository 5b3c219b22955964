"""Shift_JIS decoding into UTF-16, UTF-8 and UTF-32.

Bytes up to 0x7F are taken as ASCII. Bytes 0xA1 to 0xDF are half-width
katakana. Bytes 0x80 to 0xA0 and 0xE0 to 0xFF lead a two-byte character that
is looked up in the double-byte tables.

A zero byte ends the input. A byte pair with no character ends the output,
as if it were a zero code unit.
"""

from __future__ import annotations

from . import table_down, table_up_a, table_up_b
from .utf import utf16_to_utf8, utf16_to_utf32

ROW_LENGTH = 189
TRAIL_BASE = 0x40
UP_LEAD_BASE = 0x81
DOWN_LEAD_BASE = 0xE0
HALF_WIDTH_FIRST = 0xA1
HALF_WIDTH_LAST = 0xDF
HALF_WIDTH_UNIT = 0xFF61


def _table_index(lead: int, trail: int, lead_base: int) -> int:
    return ROW_LENGTH * (lead - lead_base) + (trail - TRAIL_BASE)


def sjis_up(lead: int, trail: int) -> int:
    """Return the UTF-16 unit for a pair whose lead byte is 0x81 to 0x9F.

    Returns 0 when the pair falls outside the table or has no character.
    """
    index = _table_index(lead, trail, UP_LEAD_BASE)
    for table in (table_up_a, table_up_b):
        if index in table.INDICES:
            return table.lookup(index)
    return 0


def sjis_down(lead: int, trail: int) -> int:
    """Return the UTF-16 unit for a pair whose lead byte is 0xE0 to 0xEF.

    Returns 0 when the pair falls outside the table or has no character.
    """
    index = _table_index(lead, trail, DOWN_LEAD_BASE)
    if index in table_down.INDICES:
        return table_down.lookup(index)
    return 0


def sjis_char_to_utf16(byte: int) -> list[int]:
    """Decode a single Shift_JIS byte into a list of UTF-16 units.

    Only ASCII and half-width katakana stand on their own; a lead byte or a
    zero byte gives an empty list.
    """
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"{byte} is not a byte value")
    if 0 < byte <= 0x7F:
        return [byte]
    if HALF_WIDTH_FIRST <= byte <= HALF_WIDTH_LAST:
        return [HALF_WIDTH_UNIT + byte - HALF_WIDTH_FIRST]
    return []


def sjis_to_utf16(data: bytes) -> list[int]:
    """Decode Shift_JIS bytes into a list of UTF-16 code units."""
    raw = bytes(data).split(b"\0", 1)[0]
    units: list[int] = []
    stream = iter(raw)
    for byte in stream:
        if byte <= 0x7F:
            unit = byte
        elif byte < HALF_WIDTH_FIRST:
            unit = sjis_up(byte, next(stream, 0))
        elif byte <= HALF_WIDTH_LAST:
            unit = HALF_WIDTH_UNIT + byte - HALF_WIDTH_FIRST
        else:
            unit = sjis_down(byte, next(stream, 0))
        if unit == 0:
            break
        units.append(unit)
    return units


def sjis_to_utf8(data: bytes):
    """Decode Shift_JIS bytes and encode the text as UTF-8."""
    return utf16_to_utf8(sjis_to_utf16(data))


def sjis_to_utf32(data: bytes):
    """Decode Shift_JIS bytes into UTF-32 code points."""
    return utf16_to_utf32(sjis_to_utf16(data))