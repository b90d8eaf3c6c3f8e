# tests/test_adjustment.py

import random

import pytest

from hijrical.adjust import CalendarAdjuster, parse_gregorian_start
from hijrical.core.errors import OutOfTableRangeError
from hijrical.core.types import MonthRef
from hijrical.engines.umalqura import TABLE_SIZE, month_lengths_valid


@pytest.fixture
def adj():
    return CalendarAdjuster()


def test_possible_starts_include_current_adjustment(adj):
    # 1436/11 follows a month starting at MJD 57221
    assert adj.add_adjustment(1436, 11, 57250) is True
    starts = adj.possible_starts(1436, 11)
    assert [c.mjd for c in starts] == [57250, 57251]
    current = [c for c in starts if c.is_current]
    assert [c.mjd for c in current] == [57250]
    assert current[0].gregorian == (2015, 8, 15)
    assert adj.adjustments == {1426: 57250}


def test_possible_starts_report_cascade(adj):
    starts = {c.mjd: c for c in adj.possible_starts(1437, 6)}
    assert set(starts) == {57458, 57459}
    assert starts[57458].is_current
    assert starts[57458].cascade == ()
    (effect,) = starts[57459].cascade
    assert (effect.year, effect.month, effect.index, effect.mjd) == (1437, 7, 1434, 57488)
    assert effect.gregorian == (2016, 4, 9)
    # read-only
    assert adj.adjustments == {}


def test_add_applies_forced_cascade(adj):
    assert adj.cascade_for_new_start(1433, 57459) == {1434: 57488}
    assert adj.add_adjustment(1437, 6, 57459) is True
    assert adj.adjustments == {1433: 57459, 1434: 57488}
    assert adj.table.days_in_month(1437, 5) == 30
    assert adj.table.days_in_month(1437, 6) == 29
    assert adj.table.days_in_month(1437, 7) == 29
    assert month_lengths_valid(adj.table.values)


@pytest.mark.parametrize("start", [57457, 57461, "not a date", "31-02-2016", True, 57458.0])
def test_add_rejects_invalid_start(adj, start, caplog):
    adj.add_adjustment(1436, 11, 57250)
    before = adj.adjustments
    with caplog.at_level("WARNING", logger="hijrical"):
        assert adj.add_adjustment(1437, 6, start) is False
    assert adj.adjustments == before
    assert "Rejected adjustment of 1437/6" in caplog.text


@pytest.mark.parametrize("start", ["11-03-2016", "11/03/2016", "11.3.2016", "11 3 2016", "57459"])
def test_add_accepts_date_strings(adj, start):
    assert adj.add_adjustment(1437, 6, start) is True
    assert adj.month_start(1437, 6) == 57459


def test_parse_gregorian_start():
    assert parse_gregorian_start("15-08-2015") == 57250
    with pytest.raises(ValueError):
        parse_gregorian_start("2015-08-15")


def test_baseline_value_is_not_stored(adj):
    assert adj.add_adjustment(1436, 11, 57250)
    assert adj.add_adjustment(1436, 11, 57251)
    assert adj.adjustments == {}


def test_delete_reverts_dependent_adjustments(adj):
    adj.add_adjustment(1437, 6, 57459)
    assert adj.auto_delete_info(1437, 7) == [MonthRef(1437, 6)]
    # preview only
    assert adj.adjustments == {1433: 57459, 1434: 57488}

    assert adj.delete_adjustment(1437, 7) is True
    assert adj.adjustments == {}
    assert adj.table.values == adj.table.baseline


def test_delete_keeps_still_valid_neighbours(adj):
    adj.add_adjustment(1437, 6, 57459)
    assert adj.auto_delete_info(1437, 6) == []
    assert adj.delete_adjustment(1437, 6) is True
    assert adj.adjustments == {1434: 57488}
    assert month_lengths_valid(adj.table.values)


def test_delete_without_adjustment(adj):
    assert adj.delete_adjustment(1436, 11) is False
    assert adj.auto_delete_info(1436, 11) == []


def test_current_adjustments(adj):
    adj.add_adjustment(1437, 6, 57459)
    first, second = adj.current_adjustments()
    assert (first.year, first.month, first.index) == (1437, 6, 1433)
    assert (first.current_mjd, first.default_mjd) == (57459, 57458)
    assert first.current_date == (2016, 3, 11)
    assert first.default_date == (2016, 3, 10)
    assert (second.year, second.month, second.current_mjd) == (1437, 7, 57488)


@pytest.mark.parametrize("year,month", [(1318, 1), (1500, 12), (1317, 12), (1501, 1)])
def test_non_editable_months_raise(adj, year, month):
    with pytest.raises(OutOfTableRangeError):
        adj.add_adjustment(year, month, 57250)
    with pytest.raises(OutOfTableRangeError):
        adj.possible_starts(year, month)
    with pytest.raises(OutOfTableRangeError):
        adj.delete_adjustment(year, month)


def test_cascade_may_not_move_closing_boundary(adj):
    # 1500/11 starts at 79930 after 79900; the table closes at 79960
    assert adj.add_adjustment(1500, 11, 79929) is False
    assert adj.adjustments == {}
    assert adj.add_adjustment(1500, 11, 79931) is False


def test_serialize_and_restore(adj):
    adj.add_adjustment(1437, 6, 57459)
    text = adj.serialize()
    assert text == '{"1433": 57459, "1434": 57488}'
    assert CalendarAdjuster(text).adjustments == adj.adjustments


def test_malformed_payload_starts_from_baseline(caplog):
    with caplog.at_level("WARNING", logger="hijrical"):
        adj = CalendarAdjuster('{"1426": 57290}')
    assert adj.adjustments == {}
    assert "Ignoring adjustment data" in caplog.text


def test_calendar_is_a_snapshot(adj):
    adj.add_adjustment(1436, 11, 57250)
    cal = adj.calendar()
    assert cal.hijri_to_gregorian(1436, 11, 1) == (2015, 8, 15)
    adj.delete_adjustment(1436, 11)
    assert cal.hijri_to_gregorian(1436, 11, 1) == (2015, 8, 15)
    assert adj.calendar().hijri_to_gregorian(1436, 11, 1) == (2015, 8, 16)


def test_lengths_stay_valid_under_random_edits(adj):
    random.seed(3)
    for _ in range(200):
        index = random.randint(1, TABLE_SIZE - 2)
        year, month = 1318 + index // 12, index % 12 + 1
        if adj.adjustments and random.random() < 0.3:
            i = random.choice(sorted(adj.adjustments))
            assert adj.delete_adjustment(1318 + i // 12, i % 12 + 1)
        else:
            candidate = random.choice(adj.possible_starts(year, month))
            adj.add_adjustment(year, month, candidate.mjd)
        assert month_lengths_valid(adj.table.values)
        assert all(adj.table.baseline[i] != v for i, v in adj.adjustments.items())
