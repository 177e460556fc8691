"""
Calculator state: grants, global inputs and the last calculated schedule.
"""

from datetime import datetime
from typing import List, Optional
import logging

from vestcalc.models.chart_data_point import ChartDataPoint
from vestcalc.models.grant_store import GrantStore
from vestcalc.utils.chart_utils import find_vested_percentage, donut_data, vesting_summary
from vestcalc.utils.vest_calculator import calculate_vesting_schedule

logger = logging.getLogger(__name__)

DEFAULT_TAX_PERCENTAGE = 25.0


class CalculatorState:
    """Everything the calculator page shows, kept in memory."""

    def __init__(self, tax_percentage: float = DEFAULT_TAX_PERCENTAGE,
                 estimated_price_per_share: float = 0.0):
        self.grants = GrantStore()
        self.tax_percentage = tax_percentage
        self.estimated_price_per_share = estimated_price_per_share
        self.chart_data: List[ChartDataPoint] = []
        self.selected_date = datetime.now()

    def __repr__(self) -> str:
        return f'<CalculatorState {len(self.grants)} grants - {len(self.chart_data)} months>'

    def calculate(self, now: Optional[datetime] = None) -> List[ChartDataPoint]:
        """
        Recalculate the schedule from the current grants.

        With no grants this does nothing: the previous chart data and
        selection are kept. Otherwise the chart data is replaced and the
        selection moves to the invocation month.
        """
        if not len(self.grants):
            logger.debug("No grants to calculate, keeping existing chart data")
            return self.chart_data

        if now is None:
            now = datetime.now()

        self.chart_data = calculate_vesting_schedule(
            self.grants.all(),
            self.tax_percentage,
            self.estimated_price_per_share,
            now
        )
        self.selected_date = now
        return self.chart_data

    def select_point(self, year: int, month: int) -> float:
        """Move the selection to ``year``/``month`` and return its vested percentage."""
        self.selected_date = datetime(year, month, 1)
        return self.selected_vested_percentage()

    def selected_vested_percentage(self) -> float:
        return find_vested_percentage(self.chart_data, self.selected_date.year, self.selected_date.month)

    def donut_data(self) -> List[dict]:
        return donut_data(self.selected_vested_percentage())

    def summary(self) -> str:
        return vesting_summary(self.selected_vested_percentage())
