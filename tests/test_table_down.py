import pytest

from sjisutf import table_down
from sjisutf.table_down import FIRST_LEAD, INDICES, LAST_LEAD, ROW_LENGTH, lookup


def _index(lead: int, trail: int) -> int:
    return ROW_LENGTH * (lead - FIRST_LEAD) + (trail - 0x40)


def test_table_size_matches_source():
    assert len(INDICES) == 3024
    assert len(INDICES) == ROW_LENGTH * (LAST_LEAD - FIRST_LEAD + 1)
    assert lookup(len(INDICES) - 1) == 0
    with pytest.raises(IndexError):
        lookup(len(INDICES))


def test_first_and_last_entries():
    assert lookup(0) == 28478
    assert lookup(3023) == 0


@pytest.mark.parametrize("index", [-1, 3024, 10000])
def test_out_of_range_raises(index):
    with pytest.raises(IndexError):
        lookup(index)


@pytest.mark.parametrize(
    "lead, trail, expected",
    [
        (0xE0, 0x40, 28478),
        (0xE0, 0xFC, 29681),
        (0xEA, 0xA4, 29081),
        (0xED, 0x40, 32394),
        (0xEE, 0xFC, 65282),
        (0xEE, 0xEF, 8560),
    ],
)
def test_pinned_entries(lead, trail, expected):
    assert lookup(_index(lead, trail)) == expected


@pytest.mark.parametrize(
    "lead, trail",
    [(0xE0, 0x40), (0xE4, 0x40), (0xEA, 0xA1), (0xEA, 0xA4), (0xED, 0x40), (0xEE, 0xEF), (0xEE, 0xFC)],
)
def test_entries_agree_with_cp932(lead, trail):
    expected = bytes((lead, trail)).decode("cp932")
    assert chr(lookup(_index(lead, trail))) == expected


@pytest.mark.parametrize("lead", range(FIRST_LEAD, LAST_LEAD + 1))
def test_trail_0x7f_is_never_assigned(lead):
    assert lookup(_index(lead, 0x7F)) == 0


@pytest.mark.parametrize("lead", [0xEB, 0xEC, 0xEF])
def test_unassigned_rows_are_empty(lead):
    row = [lookup(_index(lead, trail)) for trail in range(0x40, 0x40 + ROW_LENGTH)]
    assert set(row) == {0}


def test_trailing_part_of_row_ea_is_empty():
    tail = [lookup(_index(0xEA, trail)) for trail in range(0xA5, 0x40 + ROW_LENGTH)]
    assert set(tail) == {0}


def test_values_fit_in_a_utf16_unit():
    assert all(0 <= lookup(i) <= 0xFFFF for i in INDICES)


def test_no_value_is_a_surrogate():
    assert not any(0xD800 <= lookup(i) < 0xE000 for i in INDICES)


def test_assigned_entries_are_distinct():
    values = [lookup(i) for i in INDICES if lookup(i)]
    assert len(values) == len(set(values))


def test_row_constants():
    assert table_down.FIRST_LEAD == 0xE0
    assert table_down.LAST_LEAD == 0xEF
    assert lookup(_index(LAST_LEAD, 0x40 + ROW_LENGTH - 1)) == 0