"""
Model package initialization.
"""

from vestcalc.models.grant import Grant, GrantValidationError
from vestcalc.models.grant_store import GrantStore
from vestcalc.models.chart_data_point import ChartDataPoint

__all__ = [
    'Grant',
    'GrantValidationError',
    'GrantStore',
    'ChartDataPoint'
]
