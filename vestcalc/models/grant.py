"""
Grant model for startup stock option grants.
"""

from dataclasses import dataclass, field, asdict
from datetime import date
import math

# Defaults used to pre-fill the "Add New Grant" form
DEFAULT_TERM_YEARS = 4
DEFAULT_NUMBER_OF_OPTIONS = 1000
DEFAULT_VESTING_INTERVAL_MONTHS = 3

# Cliff length is fixed when a grant has one
CLIFF_MONTHS = 12


class GrantValidationError(ValueError):
    """Raised when grant fields would produce a meaningless schedule."""


@dataclass
class Grant:
    """A single option grant entered by the user."""

    id: int
    has_cliff: bool = True
    exercise_price: float = 0.0
    vesting_start_date: date = field(default_factory=date.today)
    term: int = DEFAULT_TERM_YEARS
    number_of_options: float = DEFAULT_NUMBER_OF_OPTIONS
    vesting_interval: int = DEFAULT_VESTING_INTERVAL_MONTHS

    def __post_init__(self):
        # Whole-number floats (4.0) count as whole years and months
        for name in ('term', 'vesting_interval'):
            value = getattr(self, name)
            if isinstance(value, float) and value.is_integer():
                setattr(self, name, int(value))

    def __repr__(self) -> str:
        return f'<Grant {self.id} - {self.number_of_options} options from {self.vesting_start_date}>'

    def __str__(self) -> str:
        return self.description

    @property
    def cliff_period(self) -> int:
        """Months before anything vests (0 without a cliff)."""
        return CLIFF_MONTHS if self.has_cliff else 0

    @property
    def total_vesting_months(self) -> int:
        return self.term * 12

    @property
    def description(self) -> str:
        """
        One-line summary shown in the grant list.
        Example: "With Cliff - $0.5 - 2024-01-01 - 4 years - 1000 options - 3 mo interval"
        """
        cliff = "With Cliff" if self.has_cliff else "No Cliff"
        return (f"{cliff} - ${_format_number(self.exercise_price)} - {self.vesting_start_date.isoformat()} - "
                f"{self.term} years - {_format_number(self.number_of_options)} options - "
                f"{self.vesting_interval} mo interval")

    def validate(self):
        """
        Reject grants the calculator cannot handle.

        Term and interval are divisors in the staircase formula, so both
        must be positive whole numbers. Numbers must be finite, and negative
        option counts or prices are rejected too.
        """
        for name in ('exercise_price', 'number_of_options', 'term', 'vesting_interval'):
            if not math.isfinite(getattr(self, name)):
                raise GrantValidationError(f"{name} must be a finite number, got {getattr(self, name)}")
        if not isinstance(self.term, int) or not isinstance(self.vesting_interval, int):
            raise GrantValidationError(
                f"Term and vesting interval must be whole numbers, got {self.term} and {self.vesting_interval}")
        if self.term <= 0:
            raise GrantValidationError(f"Term must be a positive number of years, got {self.term}")
        if self.vesting_interval <= 0:
            raise GrantValidationError(
                f"Vesting interval must be a positive number of months, got {self.vesting_interval}")
        if self.number_of_options < 0:
            raise GrantValidationError(f"Number of options cannot be negative, got {self.number_of_options}")
        if self.exercise_price < 0:
            raise GrantValidationError(f"Exercise price cannot be negative, got {self.exercise_price}")

    def to_dict(self) -> dict:
        data = asdict(self)
        data['vesting_start_date'] = self.vesting_start_date.isoformat()
        data['description'] = self.description
        return data


def _format_number(value) -> str:
    """Show whole numbers without a trailing .0"""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def default_grant_fields() -> dict:
    """Field values a brand new grant starts with."""
    return {
        'has_cliff': True,
        'exercise_price': 0.0,
        'vesting_start_date': date.today(),
        'term': DEFAULT_TERM_YEARS,
        'number_of_options': DEFAULT_NUMBER_OF_OPTIONS,
        'vesting_interval': DEFAULT_VESTING_INTERVAL_MONTHS,
    }
