"""
Catering calculations API

Thin JSON routes over the calculation services, called by the recipe
editor, guest scaler and cost calculator screens. Nothing is stored.
"""

import logging
import math
from dataclasses import asdict

from flask import Flask, request, jsonify, abort

from config import get_config
from services import (
    CalculationError,
    IngredientNotFoundError,
    get_all_units,
    convert_quantity,
    servings_for_guests,
    scale_recipe,
    adjust_recipe_proportions,
    calculate_recipe_composition,
    calculate_ingredient_cost,
    calculate_gst_breakdown,
    calculate_total_with_gst,
)

app = Flask(__name__)
app.config.from_object(get_config())

logging.basicConfig(
    level=getattr(logging, app.config['LOG_LEVEL'], logging.INFO),
    format=app.config['LOG_FORMAT'],
)
logger = logging.getLogger(__name__)


def _payload():
    """Request body as a dict, empty if missing or not JSON."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _number(data, key, default=None):
    """Read a numeric field, answering 400 if it is missing or not a number."""
    value = data.get(key, default)
    if value is None:
        abort(400, description=f"Missing field: {key}")
    try:
        number = float(value)
    except (ValueError, TypeError):
        abort(400, description=f"Field '{key}' must be a number")
    if not math.isfinite(number):
        abort(400, description=f"Field '{key}' must be a finite number")
    return number


def _flag(data, key):
    """Read an optional boolean field; anything but true/false is a 400."""
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        abort(400, description=f"Field '{key}' must be true or false")
    return value


def _text(data, key, default=None):
    value = data.get(key, default)
    if value is None:
        abort(400, description=f"Missing field: {key}")
    return str(value)


def _ingredient_lines(data):
    """Ingredient lines from the body with their numeric fields as floats."""
    lines = data.get('ingredients')
    if not isinstance(lines, list):
        abort(400, description="Field 'ingredients' must be a list")

    parsed = []
    for line in lines:
        if not isinstance(line, dict):
            abort(400, description="Each ingredient must be an object")
        line = dict(line)
        line['quantity'] = _number(line, 'quantity')
        if line.get('cost_per_unit') is not None:
            line['cost_per_unit'] = _number(line, 'cost_per_unit')
        parsed.append(line)
    return parsed


# =========== ERROR HANDLERS ===========

@app.errorhandler(IngredientNotFoundError)
def handle_ingredient_not_found(e):
    logger.info("Ingredient lookup failed: %s", e)
    return jsonify(error=str(e)), 404


@app.errorhandler(CalculationError)
def handle_calculation_error(e):
    logger.info("Calculation rejected: %s", e)
    return jsonify(error=str(e)), 400


@app.errorhandler(400)
def handle_bad_request(e):
    return jsonify(error=e.description), 400


# =========== ROUTES ===========

@app.route('/api/health')
def health():
    return jsonify(status='ok')


@app.route('/api/units')
def units():
    return jsonify(get_all_units())


@app.route('/api/convert', methods=['POST'])
def convert():
    data = _payload()
    result = convert_quantity(
        _number(data, 'quantity'),
        _text(data, 'from_unit'),
        _text(data, 'to_unit'),
        data.get('ingredient'),
    )
    return jsonify(asdict(result))


@app.route('/api/scale', methods=['POST'])
def scale():
    """Scale a recipe to target_servings, or to guest_count * servings_per_guest."""
    data = _payload()
    ingredients = _ingredient_lines(data)
    original_servings = _number(data, 'original_servings')

    if data.get('target_servings') is not None:
        target_servings = _number(data, 'target_servings')
    else:
        target_servings = servings_for_guests(
            _number(data, 'guest_count'),
            _number(data, 'servings_per_guest', 1),
        )

    logger.debug("Scaling %d ingredients from %s to %s servings",
                 len(ingredients), original_servings, target_servings)
    return jsonify(scale_recipe(ingredients, original_servings, target_servings))


@app.route('/api/adjust-proportions', methods=['POST'])
def adjust_proportions():
    data = _payload()
    if data.get('modified_ingredient_id') is None:
        abort(400, description="Missing field: modified_ingredient_id")

    adjusted = adjust_recipe_proportions(
        _ingredient_lines(data),
        data['modified_ingredient_id'],
        _number(data, 'new_quantity'),
    )
    return jsonify(ingredients=adjusted)


@app.route('/api/composition', methods=['POST'])
def composition():
    data = _payload()
    return jsonify(calculate_recipe_composition(_ingredient_lines(data)))


@app.route('/api/cost', methods=['POST'])
def cost():
    data = _payload()
    result = calculate_ingredient_cost(
        _text(data, 'ingredient'),
        _number(data, 'purchase_quantity'),
        _text(data, 'purchase_unit'),
        _number(data, 'purchase_price'),
        _number(data, 'recipe_quantity'),
        _text(data, 'recipe_unit'),
    )
    if result['conversion'] is not None:
        result['conversion'] = asdict(result['conversion'])
    return jsonify(result)


@app.route('/api/gst', methods=['POST'])
def gst_totals():
    data = _payload()
    items = data.get('items')
    if not isinstance(items, list):
        abort(400, description="Field 'items' must be a list")

    parsed = []
    for item in items:
        if not isinstance(item, dict):
            abort(400, description="Each item must be an object")
        parsed.append({
            'current_stock': _number(item, 'current_stock'),
            'price_per_unit': _number(item, 'price_per_unit'),
            'gst_inclusive': _flag(item, 'gst_inclusive'),
        })
    return jsonify(calculate_total_with_gst(parsed))


@app.route('/api/gst/breakdown', methods=['POST'])
def gst_breakdown():
    data = _payload()
    return jsonify(calculate_gst_breakdown(
        _number(data, 'amount'),
        _flag(data, 'gst_inclusive'),
    ))


if __name__ == '__main__':
    app.run(host='0.0.0.0', port=5000, use_reloader=False)
