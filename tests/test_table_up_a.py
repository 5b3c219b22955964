import pytest

from sjisutf import table_up_a
from sjisutf.table_up_a import INDICES, ROW_LENGTH, lookup


def _index(lead, trail):
    return ROW_LENGTH * (lead - 0x81) + (trail - 0x40)


def test_covers_lead_bytes_0x81_to_0x8f():
    assert INDICES.start == 0
    assert len(INDICES) == ROW_LENGTH * (table_up_a.LAST_LEAD - table_up_a.FIRST_LEAD + 1)
    last = lookup(INDICES.stop - 1)
    assert chr(last) == bytes((0x8F, 0xFC)).decode("cp932")
    with pytest.raises(IndexError):
        lookup(INDICES.stop)


def test_ideographic_space_is_first_entry():
    assert lookup(0) == 12288


def test_hiragana_small_a():
    assert lookup(_index(0x82, 0x9F)) == ord("ぁ")
    assert lookup(_index(0x82, 0xA0)) == ord("あ")


def test_hiragana_is_contiguous():
    start = _index(0x82, 0x9F)
    codes = [lookup(start + offset) for offset in range(83)]
    assert "".join(map(chr, codes)) == "".join(chr(c) for c in range(ord("ぁ"), ord("ん") + 1))


def test_full_width_digits():
    digits = [lookup(_index(0x82, trail)) for trail in range(0x4F, 0x59)]
    assert "".join(map(chr, digits)) == "０１２３４５６７８９"


def test_trail_0x7f_is_never_assigned():
    for lead in range(0x81, 0x90):
        assert lookup(_index(lead, 0x7F)) == 0


def test_unassigned_rows_are_zero():
    for lead in (0x85, 0x86):
        assert all(lookup(_index(lead, trail)) == 0 for trail in range(0x40, 0xFD))


def test_kanji_rows_are_full_to_the_last_trail_byte():
    for lead in range(0x89, 0x90):
        for trail in (0x40, 0xFC):
            expected = bytes((lead, trail)).decode("cp932")
            assert chr(lookup(_index(lead, trail))) == expected, hex(lead << 8 | trail)


def test_first_kanji():
    assert chr(lookup(_index(0x88, 0x9F))) == "亜"
    assert lookup(_index(0x88, 0x9E)) == 0


def test_every_assigned_entry_agrees_with_cp932():
    for index in INDICES:
        value = lookup(index)
        if value == 0:
            continue
        lead = 0x81 + index // ROW_LENGTH
        trail = 0x40 + index % ROW_LENGTH
        assert bytes((lead, trail)).decode("cp932") == chr(value), hex(lead << 8 | trail)


@pytest.mark.parametrize("index", [-1, len(INDICES), len(INDICES) + 500])
def test_out_of_range_index_raises(index):
    with pytest.raises(IndexError):
        lookup(index)