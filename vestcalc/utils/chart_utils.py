"""
Helpers for the charts: finding the selected month and building the donut.
"""
from __future__ import annotations

from typing import Iterable, List

from vestcalc.models.chart_data_point import ChartDataPoint

DONUT_LABELS = ('Vested', 'Unvested')


def find_vested_percentage(chart_data: Iterable[ChartDataPoint], year: int, month: int) -> float:
    """Return the vested percentage for ``year``/``month``, or 0 when that
    month is not part of ``chart_data`` (for example before any calculation
    has run)."""
    for point in chart_data:
        if point.matches(year, month):
            return point.vested_percentage
    return 0.0


def donut_data(vested_percentage: float) -> List[dict]:
    """Split 100% into the vested and unvested slices."""
    vested_label, unvested_label = DONUT_LABELS
    return [
        {'name': vested_label, 'value': vested_percentage},
        {'name': unvested_label, 'value': 100 - vested_percentage}
    ]


def vesting_summary(vested_percentage: float) -> str:
    """Caption under the donut, e.g. "25.00% Vested, 75.00% Unvested"."""
    return f"{vested_percentage:.2f}% Vested, {100 - vested_percentage:.2f}% Unvested"
