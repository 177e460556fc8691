"""
Application factory and initialization.
"""

from flask import Flask, current_app
from dotenv import load_dotenv
import logging
import os

# Load environment variables
load_dotenv()


def create_app(config=None):
    """Create and configure the Flask application."""
    from vestcalc.models.calculator_state import CalculatorState, DEFAULT_TAX_PERCENTAGE

    app = Flask(__name__)

    # Configuration
    app.config['SECRET_KEY'] = os.getenv('SECRET_KEY', 'dev-secret-key-change-me')
    app.config['DEFAULT_TAX_PERCENTAGE'] = float(os.getenv('DEFAULT_TAX_PERCENTAGE', DEFAULT_TAX_PERCENTAGE))
    app.config['DEFAULT_PRICE_PER_SHARE'] = float(os.getenv('DEFAULT_PRICE_PER_SHARE', 0))
    app.config['LOG_LEVEL'] = os.getenv('LOG_LEVEL', 'INFO')
    if config:
        app.config.update(config)

    logging.basicConfig(level=app.config['LOG_LEVEL'])

    # Calculator state lives in memory for the lifetime of the app
    app.extensions['vesting_calculator'] = CalculatorState(
        tax_percentage=app.config['DEFAULT_TAX_PERCENTAGE'],
        estimated_price_per_share=app.config['DEFAULT_PRICE_PER_SHARE']
    )

    # Register blueprints
    from vestcalc.routes.main import main_bp
    from vestcalc.routes.grants import grants_bp
    from vestcalc.routes.calculator import calculator_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(grants_bp)
    app.register_blueprint(calculator_bp)

    return app


def get_calculator():
    """Return the calculator state of the current app."""
    return current_app.extensions['vesting_calculator']
