"""
Tests for point selection, the donut view and the calculator state.
"""

from datetime import date, datetime

import pytest

from vestcalc.models.calculator_state import CalculatorState
from vestcalc.models.chart_data_point import ChartDataPoint
from vestcalc.utils.chart_utils import donut_data, find_vested_percentage, vesting_summary

NOW = datetime(2026, 1, 15, 10, 30)


def _point(year, month, vested):
    return ChartDataPoint(month=datetime(year, month, 1).strftime('%b %Y'),
                          date=datetime(year, month, 1),
                          exercise_price=0, taxes=0, profit=0,
                          vested_percentage=vested)


def test_find_vested_percentage_matches_year_and_month():
    data = [_point(2026, 1, 0), _point(2026, 2, 10), _point(2027, 2, 40)]
    assert find_vested_percentage(data, 2026, 2) == 10
    assert find_vested_percentage(data, 2027, 2) == 40


def test_find_vested_percentage_missing_month_is_zero():
    data = [_point(2026, 1, 30)]
    assert find_vested_percentage(data, 2025, 1) == 0
    assert find_vested_percentage([], 2026, 1) == 0


@pytest.mark.parametrize('vested', [0, 12.5, 33.333, 100])
def test_donut_data_sums_to_hundred(vested):
    slices = donut_data(vested)
    assert [s['name'] for s in slices] == ['Vested', 'Unvested']
    assert slices[0]['value'] == vested
    assert sum(s['value'] for s in slices) == pytest.approx(100)


def test_vesting_summary():
    assert vesting_summary(25) == "25.00% Vested, 75.00% Unvested"
    assert vesting_summary(0) == "0.00% Vested, 100.00% Unvested"


def test_chart_data_point_to_dict():
    data = _point(2026, 3, 12.5).to_dict()
    assert data == {
        'month': 'Mar 2026',
        'date': '2026-03-01T00:00:00',
        'exercisePrice': 0,
        'taxes': 0,
        'profit': 0,
        'vestedPercentage': 12.5
    }


def _state_with_grant(**overrides):
    state = CalculatorState(tax_percentage=25, estimated_price_per_share=5)
    fields = dict(has_cliff=True, exercise_price=1, vesting_start_date=date(2025, 1, 15),
                  term=4, number_of_options=1000, vesting_interval=3)
    fields.update(overrides)
    state.grants.add(fields)
    return state


def test_calculate_fills_chart_data_and_selects_now():
    state = _state_with_grant()
    state.selected_date = datetime(2020, 5, 1)

    data = state.calculate(NOW)

    assert len(data) == 48
    assert state.chart_data is data
    assert state.selected_date == NOW
    assert state.selected_vested_percentage() == pytest.approx(25)
    assert state.summary() == "25.00% Vested, 75.00% Unvested"


def test_calculate_with_no_grants_keeps_previous_data():
    state = _state_with_grant()
    data = state.calculate(NOW)
    selected = state.selected_date

    for grant in state.grants.all():
        state.grants.remove(grant.id)
    result = state.calculate(datetime(2030, 1, 1))

    assert result is data
    assert state.chart_data is data
    assert state.selected_date == selected


def test_calculate_before_any_grants_is_noop():
    state = CalculatorState()
    assert state.calculate(NOW) == []
    assert state.chart_data == []
    assert state.selected_vested_percentage() == 0
    assert state.donut_data() == [{'name': 'Vested', 'value': 0.0},
                                  {'name': 'Unvested', 'value': 100.0}]


def test_calculate_replaces_previous_data():
    state = _state_with_grant()
    first = state.calculate(NOW)

    state.grants.add(dict(has_cliff=False, exercise_price=0, vesting_start_date=date(2020, 1, 1),
                          term=6, number_of_options=1000, vesting_interval=1))
    second = state.calculate(NOW)

    assert second is not first
    assert len(second) == 72


def test_select_point_updates_donut():
    state = _state_with_grant()
    state.calculate(NOW)

    # Month 15 since start: 31.25%
    assert state.select_point(2026, 4) == pytest.approx(31.25)
    assert state.selected_date == datetime(2026, 4, 1)
    assert state.donut_data()[1]['value'] == pytest.approx(68.75)


def test_select_point_outside_schedule_is_zero():
    state = _state_with_grant()
    state.calculate(NOW)
    assert state.select_point(2040, 1) == 0
    assert sum(s['value'] for s in state.donut_data()) == 100


def test_tax_and_price_feed_calculation():
    state = _state_with_grant()
    state.calculate(NOW)
    # 250 shares vested: cost 250, value 1250, tax 25% of 1000
    assert state.chart_data[0].taxes == pytest.approx(250)

    state.tax_percentage = 50
    state.estimated_price_per_share = 11
    state.calculate(NOW)
    # value 2750, profit 2500, tax 1250, net 1250
    assert state.chart_data[0].taxes == pytest.approx(1250)
    assert state.chart_data[0].profit == pytest.approx(1250)


def test_calculate_with_float_term_from_store():
    state = _state_with_grant(term=4.0)
    data = state.calculate(NOW)
    assert len(data) == 48
    assert data[0].vested_percentage == pytest.approx(25)
