# tests/test_umalqura.py

import pytest

from hijrical.core.errors import InvalidAdjustmentLengthError, OutOfTableRangeError
from hijrical.core.time import MJD_OFFSET
from hijrical.engines import tabular as tab
from hijrical.engines import umalqura as uq


@pytest.fixture
def table():
    return uq.UmmAlQuraTable()


def test_baseline_shape():
    t = uq.load_baseline()
    assert len(t) == uq.TABLE_SIZE == 2196
    assert t[0] == 15140
    assert t[-1] == 79960
    assert uq.month_lengths_valid(t)
    # loaded once and shared
    assert uq.load_baseline() is t


def test_table_edges_agree_with_tabular():
    assert tab.hijri_to_jdn(uq.START_YEAR, 1, 1) == uq.START_JDN
    assert tab.hijri_to_jdn(uq.END_YEAR, 12, 1) == uq.END_JDN


def test_index_of_and_month_of():
    assert uq.index_of(1318, 1) == 0
    assert uq.index_of(1436, 11) == 1426
    assert uq.index_of(1500, 12) == 2195
    assert uq.month_of(1426) == (1436, 11)
    for i in range(uq.TABLE_SIZE):
        assert uq.index_of(*uq.month_of(i)) == i


@pytest.mark.parametrize("year,month", [(1317, 12), (1501, 1), (1436, 0), (1436, 13)])
def test_index_of_out_of_range(year, month):
    with pytest.raises(OutOfTableRangeError):
        uq.index_of(year, month)


def test_known_month_starts(table):
    assert table.month_start(1436, 9) == 57192
    assert table.to_jdn(1436, 9, 1) == 2457192
    assert table.to_jdn(1437, 1, 1) == 2457310
    assert table.days_in_month(1436, 9) == 29
    assert table.days_in_month(1436, 11) == 29
    assert table.days_in_month(1437, 1) == 30


def test_leap_years(table):
    assert table.is_leap_year(1435) is True
    assert table.is_leap_year(1436) is False
    with pytest.raises(OutOfTableRangeError):
        table.is_leap_year(1500)


def test_coverage(table):
    assert not table.covers_jdn(uq.START_JDN)
    assert table.covers_jdn(uq.START_JDN + 1)
    assert table.covers_jdn(uq.END_JDN - 1)
    assert not table.covers_jdn(uq.END_JDN)
    assert table.covers_month(1500, 11)
    assert not table.covers_month(1500, 12)
    assert not table.covers_year(1317)


def test_from_jdn_every_day(table):
    t = table.values
    for i in range(uq.TABLE_SIZE - 1):
        year, month = uq.month_of(i)
        first_of_year = t[12 * (year - uq.START_YEAR)]
        for d in range(t[i + 1] - t[i]):
            jdn = t[i] + d + MJD_OFFSET
            if not table.covers_jdn(jdn):
                continue
            assert table.from_jdn(jdn) == (year, month, d + 1, t[i] + d - first_of_year)


def test_from_jdn_outside(table):
    with pytest.raises(OutOfTableRangeError):
        table.from_jdn(uq.END_JDN)


def test_overlay_is_private_copy():
    base = uq.load_baseline()
    adjusted = uq.UmmAlQuraTable({1426: 57250})
    assert adjusted[1426] == 57250
    assert base[1426] == 57251
    assert adjusted.values is not base
    assert uq.UmmAlQuraTable().values is base

    adj = adjusted.adjustments
    adj[1426] = 1
    assert adjusted.adjustments == {1426: 57250}


def test_adjusted_lookups():
    table = uq.UmmAlQuraTable({1426: 57250})
    assert table.days_in_month(1436, 10) == 29
    assert table.days_in_month(1436, 11) == 30
    assert table.from_jdn(57250 + MJD_OFFSET) == (1436, 11, 1, 57250 - 56956)
    info = table.debug_month(1436, 11)
    assert info["adjusted"] is True
    assert info["baseline_mjd"] == 57251


def test_effective_table_rejects_bad_index():
    with pytest.raises(OutOfTableRangeError):
        uq.effective_table({uq.TABLE_SIZE: 1})


@pytest.mark.parametrize("overrides", [{1426: 99999}, {1426: 57260}, {1433: 57459}])
def test_table_rejects_inconsistent_overrides(overrides):
    with pytest.raises(InvalidAdjustmentLengthError):
        uq.UmmAlQuraTable(overrides)


def test_failed_replacement_keeps_previous_overrides():
    table = uq.UmmAlQuraTable({1426: 57250})
    with pytest.raises(InvalidAdjustmentLengthError):
        table.set_adjustments({1426: 99999})
    assert table.adjustments == {1426: 57250}
    assert table[1426] == 57250
