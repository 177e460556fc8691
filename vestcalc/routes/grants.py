"""
Grant management routes - list, add, edit, delete grants.
"""

from flask import Blueprint, redirect, url_for, flash, request, jsonify
from vestcalc import get_calculator
from vestcalc.utils.form_utils import parse_grant_fields, submitted_data
import logging

logger = logging.getLogger(__name__)

grants_bp = Blueprint('grants', __name__, url_prefix='/grants')


@grants_bp.route('/')
def list_grants():
    """List all grants in display order."""
    grants = get_calculator().grants.all()
    return jsonify({'grants': [grant.to_dict() for grant in grants]})


@grants_bp.route('/add', methods=['POST'])
def add_grant():
    """Add a new grant."""
    store = get_calculator().grants

    try:
        fields = parse_grant_fields(submitted_data(), checkbox=not request.is_json)
        grant = store.add(fields)
    except ValueError as e:
        logger.warning(f"Rejected new grant: {e}")
        if request.is_json:
            return jsonify({'error': str(e)}), 400
        flash(f'Error adding grant: {str(e)}', 'error')
        return redirect(url_for('main.index'))

    if request.is_json:
        return jsonify(grant.to_dict()), 201
    flash('Grant added successfully!', 'success')
    return redirect(url_for('main.index'))


@grants_bp.route('/<int:grant_id>/edit', methods=['POST'])
def edit_grant(grant_id):
    """Edit an existing grant in place."""
    store = get_calculator().grants

    if grant_id not in store:
        if request.is_json:
            return jsonify({'error': 'Grant not found'}), 404
        flash('Grant not found', 'error')
        return redirect(url_for('main.index'))

    try:
        # JSON clients may send only the fields they change
        fields = parse_grant_fields(submitted_data(),
                                    partial=request.is_json,
                                    checkbox=not request.is_json)
        grant = store.edit(grant_id, fields)
    except ValueError as e:
        logger.warning(f"Rejected edit of grant {grant_id}: {e}")
        if request.is_json:
            return jsonify({'error': str(e)}), 400
        flash(f'Error updating grant: {str(e)}', 'error')
        return redirect(url_for('main.index'))

    if request.is_json:
        return jsonify(grant.to_dict())
    flash('Grant updated successfully!', 'success')
    return redirect(url_for('main.index'))


@grants_bp.route('/<int:grant_id>/delete', methods=['POST'])
def delete_grant(grant_id):
    """Delete a grant. Deleting an unknown grant is not an error."""
    get_calculator().grants.remove(grant_id)

    if request.is_json:
        return jsonify({'success': True})
    flash('Grant deleted successfully', 'success')
    return redirect(url_for('main.index'))
