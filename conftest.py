from datetime import date

import pytest

from vestcalc import create_app
from vestcalc.models.grant import Grant


@pytest.fixture
def app():
    app = create_app({
        'TESTING': True,
        'SECRET_KEY': 'test',
        'DEFAULT_TAX_PERCENTAGE': 25,
        'DEFAULT_PRICE_PER_SHARE': 0,
    })
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def calculator(app):
    return app.extensions['vesting_calculator']


@pytest.fixture
def make_grant():
    """Build a grant with the form defaults, overridden by keyword."""
    def _make(**overrides):
        fields = dict(
            id=1,
            has_cliff=True,
            exercise_price=1.0,
            vesting_start_date=date(2024, 1, 1),
            term=4,
            number_of_options=1000,
            vesting_interval=3,
        )
        fields.update(overrides)
        return Grant(**fields)
    return _make
