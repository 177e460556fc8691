"""
Calculator routes - global inputs, schedule calculation and chart data.
"""

from flask import Blueprint, redirect, url_for, flash, request, jsonify
from vestcalc import get_calculator
from vestcalc.utils.form_utils import parse_number, parse_whole_number, submitted_data
import logging

logger = logging.getLogger(__name__)

calculator_bp = Blueprint('calculator', __name__, url_prefix='/calculator')


def _apply_settings(calculator, data):
    """Update tax percentage and price from whichever of them were sent."""
    if 'tax_percentage' in data:
        calculator.tax_percentage = parse_number(data.get('tax_percentage'))
    if 'estimated_price_per_share' in data:
        calculator.estimated_price_per_share = parse_number(data.get('estimated_price_per_share'))


def _selection_payload(calculator):
    return {
        'selectedDate': calculator.selected_date.isoformat(),
        'selectedMonth': calculator.selected_date.strftime('%B %Y'),
        'vestedPercentage': calculator.selected_vested_percentage(),
        'donut': calculator.donut_data(),
        'summary': calculator.summary()
    }


@calculator_bp.route('/settings', methods=['POST'])
def update_settings():
    """Set the tax percentage and estimated price per share."""
    calculator = get_calculator()

    try:
        _apply_settings(calculator, submitted_data())
    except ValueError as e:
        logger.warning(f"Rejected calculator settings: {e}")
        if request.is_json:
            return jsonify({'error': str(e)}), 400
        flash(f'Error saving settings: {str(e)}', 'error')
        return redirect(url_for('main.index'))

    if request.is_json:
        return jsonify({
            'tax_percentage': calculator.tax_percentage,
            'estimated_price_per_share': calculator.estimated_price_per_share
        })
    return redirect(url_for('main.index'))


@calculator_bp.route('/calculate', methods=['POST'])
def calculate():
    """
    Recalculate the vesting schedule.

    Settings sent along with the request are applied first. With no grants
    the previous chart data is left as it was.
    """
    calculator = get_calculator()

    try:
        _apply_settings(calculator, submitted_data())
    except ValueError as e:
        logger.warning(f"Rejected calculator settings: {e}")
        if request.is_json:
            return jsonify({'error': str(e)}), 400
        flash(f'Error calculating vesting: {str(e)}', 'error')
        return redirect(url_for('main.index'))

    chart_data = calculator.calculate()
    logger.debug(f"Chart data holds {len(chart_data)} months")

    if request.is_json:
        payload = _selection_payload(calculator)
        payload['chartData'] = [point.to_dict() for point in chart_data]
        return jsonify(payload)
    return redirect(url_for('main.index'))


@calculator_bp.route('/chart-data')
def chart_data():
    """Bar chart data from the last calculation."""
    calculator = get_calculator()
    return jsonify({'chartData': [point.to_dict() for point in calculator.chart_data]})


@calculator_bp.route('/select', methods=['POST'])
def select_point():
    """Select the month shown in the donut chart (a bar click)."""
    calculator = get_calculator()
    data = submitted_data()

    if not data.get('year') or not data.get('month'):
        return jsonify({'error': 'year and month required'}), 400

    try:
        calculator.select_point(parse_whole_number(data.get('year')),
                                parse_whole_number(data.get('month')))
    except ValueError as e:
        return jsonify({'error': f'invalid year or month: {str(e)}'}), 400

    return jsonify(_selection_payload(calculator))


@calculator_bp.route('/donut-data')
def donut_data():
    """Donut chart data for the selected month."""
    return jsonify(_selection_payload(get_calculator()))
