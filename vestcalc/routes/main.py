"""
Main application routes - the calculator page.
"""

from flask import Blueprint, render_template
from vestcalc import get_calculator
from vestcalc.models.grant import default_grant_fields

main_bp = Blueprint('main', __name__)


@main_bp.route('/')
def index():
    """Calculator page with grant list, inputs and charts."""
    calculator = get_calculator()

    return render_template('main/index.html',
                           grants=calculator.grants.all(),
                           new_grant=default_grant_fields(),
                           tax_percentage=calculator.tax_percentage,
                           estimated_price_per_share=calculator.estimated_price_per_share,
                           chart_data=[point.to_dict() for point in calculator.chart_data],
                           selected_date=calculator.selected_date,
                           donut_data=calculator.donut_data(),
                           vesting_summary=calculator.summary())
