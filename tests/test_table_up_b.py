import pytest

from sjisutf import table_up_b
from sjisutf.table_up_b import INDICES, ROW_LENGTH, lookup


def _index(lead, trail):
    return ROW_LENGTH * (lead - 0x81) + (trail - 0x40)


def _pairs():
    for lead in range(0x90, 0xA0):
        for trail in range(0x40, 0x40 + ROW_LENGTH):
            yield lead, trail


def test_covers_rows_0x90_to_0x9f_up_to_table_end():
    assert INDICES.stop == 5859
    assert len(INDICES) == 16 * ROW_LENGTH
    assert INDICES.start == _index(0x90, 0x40)
    assert lookup(INDICES.start) == 25325
    with pytest.raises(IndexError):
        lookup(INDICES.stop)


def test_first_and_last_values():
    assert lookup(_index(0x90, 0x40)) == 25325
    assert lookup(5858) == 28364


def test_start_of_second_kanji_level():
    assert lookup(_index(0x98, 0x9F)) == 24332


def test_gap_between_kanji_levels_is_empty():
    assert all(lookup(_index(0x98, trail)) == 0 for trail in range(0x73, 0x9F))
    assert lookup(_index(0x98, 0x72)) == 33109


def test_trail_0x7f_is_never_assigned():
    assert [lookup(_index(lead, 0x7F)) for lead in range(0x90, 0xA0)] == [0] * 16


@pytest.mark.parametrize("index", [INDICES.start - 1, INDICES.stop, -1, 0])
def test_out_of_range_raises(index):
    with pytest.raises(IndexError):
        lookup(index)


def test_values_are_kanji_in_bmp():
    values = [lookup(i) for i in INDICES]
    assert all(v == 0 or 0x4E00 <= v <= 0x9FFF for v in values)


def test_matches_standard_shift_jis_decoding():
    for lead, trail in _pairs():
        value = lookup(_index(lead, trail))
        if value:
            assert bytes((lead, trail)).decode("shift_jis") == chr(value), (lead, trail)


def test_zero_entries_are_exactly_invalid_pairs():
    zero_pairs = {(lead, trail) for lead, trail in _pairs() if lookup(_index(lead, trail)) == 0}
    expected = {(lead, 0x7F) for lead in range(0x90, 0xA0)}
    expected |= {(0x98, trail) for trail in range(0x73, 0x9F)}
    assert zero_pairs == expected


def test_values_are_distinct():
    values = [lookup(i) for i in INDICES if lookup(i)]
    assert len(values) == len(set(values))


def test_module_constants_describe_lead_range():
    assert (table_up_b.FIRST_LEAD, table_up_b.LAST_LEAD) == (0x90, 0x9F)
    assert INDICES.stop == _index(table_up_b.LAST_LEAD + 1, 0x40)
    assert lookup(_index(table_up_b.FIRST_LEAD, 0x40)) == 25325
    with pytest.raises(IndexError):
        lookup(_index(table_up_b.LAST_LEAD + 1, 0x40))