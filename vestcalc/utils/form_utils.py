"""
Coercion of user-entered text into grant fields and calculator inputs.

Numeric inputs behave like browser number fields: an empty value counts as
zero. Anything that is not a number raises ``ValueError`` so routes can
reject the request.
"""

from datetime import date, datetime
import math

from flask import request

from vestcalc.models.grant import default_grant_fields

TRUE_VALUES = ('true', 'on', '1', 'yes')


def parse_number(value, default: float = 0.0) -> float:
    if value is None or (isinstance(value, str) and not value.strip()):
        return default
    if isinstance(value, bool):
        raise ValueError(f"Expected a number, got {value!r}")
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"Expected a finite number, got {value!r}")
    return number


def parse_whole_number(value, default: int = 0) -> int:
    number = parse_number(value, default)
    if not float(number).is_integer():
        raise ValueError(f"Expected a whole number, got {value!r}")
    return int(number)


def parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in TRUE_VALUES


def parse_date(value) -> date:
    if isinstance(value, date):
        return value
    return datetime.strptime(str(value).strip(), '%Y-%m-%d').date()


def parse_grant_fields(data, partial: bool = False, checkbox: bool = False) -> dict:
    """
    Build grant fields from a form or JSON body.

    Args:
        data: Mapping of submitted values (snake_case keys)
        partial: Only return the fields present in ``data`` (JSON edits)
        checkbox: ``has_cliff`` comes from an HTML checkbox, so a missing
            value means unchecked

    Returns:
        Dict of grant fields ready for the grant store
    """
    fields = {} if partial else default_grant_fields()

    if 'has_cliff' in data:
        fields['has_cliff'] = parse_bool(data.get('has_cliff'))
    elif checkbox:
        fields['has_cliff'] = False

    if 'exercise_price' in data:
        fields['exercise_price'] = parse_number(data.get('exercise_price'))
    if 'vesting_start_date' in data:
        fields['vesting_start_date'] = parse_date(data.get('vesting_start_date'))
    if 'term' in data:
        fields['term'] = parse_whole_number(data.get('term'))
    if 'number_of_options' in data:
        fields['number_of_options'] = parse_number(data.get('number_of_options'))
    if 'vesting_interval' in data:
        fields['vesting_interval'] = parse_whole_number(data.get('vesting_interval'))

    return fields


def submitted_data():
    """Return the JSON body or the form, whichever the client sent."""
    if request.is_json:
        data = request.get_json(silent=True)
        # Only a JSON object carries named fields
        return data if isinstance(data, dict) else {}
    return request.form
