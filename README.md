# sjisutf

Small, dependency-free conversions between the Unicode encoding forms UTF-8,
UTF-16 and UTF-32, and decoding of Shift_JIS bytes into them.

Every converter works on plain Python values: UTF-8 and Shift_JIS data are
`bytes`, UTF-16 data is a list of 16-bit code units, and UTF-32 data is a list
of code points (integers).

Conversion behaves like conversion of NUL-terminated strings:

- a zero value ends the input;
- a malformed sequence (a bad UTF-8 sequence, an overlong encoding, a broken
  surrogate pair, or a Shift_JIS byte pair with no character) ends the output
  at that point; what was converted before it is returned.

Values that cannot be a byte, a code unit or a code point at all (a negative
code point, a code unit above 0xFFFF, a byte above 0xFF) raise `ValueError`.

## Installation

```
pip install sjisutf
```

To run the test suite:

```
pip install "sjisutf[test]"
pytest
```

## Unicode forms: `sjisutf.utf`

```python
from sjisutf.utf import (
    encode_utf8, decode_utf8,
    utf16_to_utf32, utf32_to_utf16,
    utf16_to_utf8, utf8_to_utf16,
)

codes = decode_utf8("あa".encode("utf-8"))   # [0x3042, 0x61]
units = utf32_to_utf16([0x1F600])            # [0xD83D, 0xDE00]
back = utf16_to_utf32(units)                 # [0x1F600]
data = encode_utf8(back)                     # b"\xf0\x9f\x98\x80"
```

Single-unit helpers:

- `encode_utf8_char(code)` and `encode_utf16_char(code)` encode one code
  point; zero and values above U+10FFFF give an empty result.
- `decode_utf8_char(data)` decodes the sequence at the start of `data` and
  returns `(code, length)`; `code` is 0 for a malformed sequence.
- `combine_surrogates(high, low=0)` turns one UTF-16 unit or a surrogate pair
  into a code point; a lone surrogate is kept only when `low` is 0.
- `utf8_byte_length(byte)` gives the length a lead byte announces, or 0.
- `is_continuation_byte(byte)` tells whether a byte lies in 0x80–0xBF.

## Shift_JIS: `sjisutf.sjis`

```python
from sjisutf.sjis import sjis_to_utf8, sjis_to_utf16, sjis_to_utf32

sjis_to_utf8(b"\x82\xa0")    # "あ".encode("utf-8")
sjis_to_utf16(b"\xb1")       # [0xFF71], half-width katakana ｱ
sjis_to_utf32(b"abc")        # [0x61, 0x62, 0x63]
```

Bytes up to 0x7F pass through as ASCII, bytes 0xA1–0xDF are half-width
katakana, and the other bytes lead a two-byte character.

- `sjis_up(lead, trail)` maps a pair with lead byte 0x81–0x9F, and
  `sjis_down(lead, trail)` a pair with lead byte 0xE0–0xEF, to a UTF-16 unit;
  both return 0 when the pair has no character in the tables.
- `sjis_char_to_utf16(byte)` decodes a single byte; only ASCII and half-width
  katakana give a unit, anything else an empty list.

The double-byte tables themselves live in `sjisutf.table_up_a`,
`sjisutf.table_up_b` and `sjisutf.table_down`. Each has a `lookup(index)`
function and an `INDICES` range; `lookup` raises `IndexError` outside it.

## What it does not do

The package only decodes Shift_JIS; there is no encoder from Unicode back to
Shift_JIS. It is a library with no command-line tool, and it reads and writes
no files.