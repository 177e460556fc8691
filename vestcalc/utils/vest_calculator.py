"""
Vesting schedule calculator for startup option grants.
"""

from datetime import date, datetime
from dateutil.relativedelta import relativedelta
from typing import Iterable, List, Optional
from vestcalc.models.chart_data_point import ChartDataPoint, MONTH_LABEL_FORMAT
from vestcalc.models.grant import Grant

import logging
import math

logger = logging.getLogger(__name__)

# Share of the grant released at the cliff, regardless of interval size
CLIFF_VEST_FRACTION = 0.25


def months_between(start: date, end: datetime) -> int:
    """
    Whole calendar months from ``start`` (at midnight) to ``end``.

    Partial months are dropped, so the result is truncated toward zero
    and is negative when ``start`` lies after ``end``.

    Args:
        start: The vesting start date
        end: The month being evaluated

    Returns:
        Number of complete months between the two
    """
    if not isinstance(start, datetime):
        start = datetime(start.year, start.month, start.day)
    delta = relativedelta(end, start)
    return delta.years * 12 + delta.months


def vested_fraction(grant: Grant, months_since_start: int) -> float:
    """
    Fraction (0-1) of a grant vested after ``months_since_start`` months.

    Nothing vests before the cliff. At the cliff month exactly 25% vests.
    After that the grant steps up once every vesting interval, capped at
    the full grant.

    Example (cliff, 4 year term, 3 month interval):
        month 12 -> 0.25
        month 15 -> (1 * 3 + 12) / 48 = 0.3125
    """
    cliff_period = grant.cliff_period

    if months_since_start < cliff_period:
        return 0.0

    if grant.has_cliff and months_since_start == cliff_period:
        return CLIFF_VEST_FRACTION

    vesting_periods = math.floor((months_since_start - cliff_period) / grant.vesting_interval)
    vested_months = vesting_periods * grant.vesting_interval + cliff_period
    return min(vested_months / grant.total_vesting_months, 1)


def calculate_vesting_schedule(grants: Iterable[Grant], tax_percentage: float,
                               price_per_share: float, now: Optional[datetime] = None) -> List[ChartDataPoint]:
    """
    Calculate the month-by-month vesting schedule across all grants.

    Args:
        grants: Grants to aggregate
        tax_percentage: Tax rate on paper profit, e.g. 25 for 25%
        price_per_share: Estimated market price used for every month
        now: Anchor of month 0 (defaults to the current time)

    Returns:
        One ChartDataPoint per month for 12 x the longest term, or an
        empty list when there are no grants
    """
    grants = list(grants)
    if not grants:
        return []

    if now is None:
        now = datetime.now()

    max_term = max(grant.term for grant in grants)
    tax_rate = tax_percentage / 100

    data = []
    for i in range(max_term * 12):
        month = now + relativedelta(months=i)

        total_exercise_price = 0.0
        total_taxes = 0.0
        total_profit = 0.0
        total_vested_options = 0.0
        total_options = 0.0

        for grant in grants:
            months_since_start = months_between(grant.vesting_start_date, month)

            # Unvested grants still count toward the total
            total_options += grant.number_of_options

            if months_since_start < grant.cliff_period:
                continue

            vested_shares = grant.number_of_options * vested_fraction(grant, months_since_start)
            exercise_cost = vested_shares * grant.exercise_price
            market_value = vested_shares * price_per_share
            profit = market_value - exercise_cost
            taxes = profit * tax_rate

            total_exercise_price += exercise_cost
            total_taxes += taxes
            total_profit += profit - taxes
            total_vested_options += vested_shares

        if total_options:
            vested_percentage = total_vested_options / total_options * 100
        else:
            vested_percentage = 0.0

        data.append(ChartDataPoint(
            month=month.strftime(MONTH_LABEL_FORMAT),
            date=datetime(month.year, month.month, 1),
            exercise_price=total_exercise_price,
            taxes=total_taxes,
            profit=total_profit,
            vested_percentage=vested_percentage
        ))

    logger.debug(f"Calculated {len(data)} months for {len(grants)} grants "
                 f"(tax={tax_percentage}%, price={price_per_share})")
    return data
