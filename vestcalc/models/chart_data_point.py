"""
Chart data point produced for each month of a vesting schedule.
"""

from dataclasses import dataclass
from datetime import datetime

MONTH_LABEL_FORMAT = '%b %Y'


@dataclass(frozen=True)
class ChartDataPoint:
    """Aggregate values across all grants for one calendar month."""

    month: str
    date: datetime
    exercise_price: float
    taxes: float
    profit: float
    vested_percentage: float

    def __repr__(self) -> str:
        return f'<ChartDataPoint {self.month} - {self.vested_percentage:.2f}% vested>'

    def matches(self, year: int, month: int) -> bool:
        return self.date.year == year and self.date.month == month

    def to_dict(self) -> dict:
        """JSON-friendly form consumed by the charts."""
        return {
            'month': self.month,
            'date': self.date.isoformat(),
            'exercisePrice': self.exercise_price,
            'taxes': self.taxes,
            'profit': self.profit,
            'vestedPercentage': self.vested_percentage
        }
