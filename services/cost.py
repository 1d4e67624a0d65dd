"""
Cost Calculation Service

Functions for pricing a recipe's use of an ingredient from how the
ingredient was purchased.
"""

import logging

from .conversion import CalculationError, convert_quantity

logger = logging.getLogger(__name__)


def calculate_ingredient_cost(ingredient_name, purchase_quantity, purchase_unit,
                              purchase_price, recipe_quantity, recipe_unit):
    """
    Calculate the cost of the amount of an ingredient a recipe uses.

    The recipe quantity is converted into the purchase unit (through the
    ingredient density when one side is volume and the other weight) and
    priced at purchase_price / purchase_quantity per purchase unit.

    Args:
        ingredient_name: Name used for the density lookup
        purchase_quantity: How much was bought, in purchase_unit
        purchase_unit: Unit the ingredient was bought in (KG, L, EA, ...)
        purchase_price: What was paid for purchase_quantity
        recipe_quantity: How much the recipe uses, in recipe_unit
        recipe_unit: Unit the recipe uses

    Returns:
        Dict with 'cost', 'unit_cost' (price per purchase unit) and
        'conversion' (the ConversionResult). When the units cannot be
        converted, cost and unit_cost are 0 and 'error' and 'suggestion'
        explain why.
    """
    if not purchase_quantity:
        return {
            'cost': 0.0,
            'unit_cost': 0.0,
            'conversion': None,
            'error': 'Purchase quantity must not be zero',
            'suggestion': 'Please check your input values and try again.',
        }

    try:
        conversion = convert_quantity(recipe_quantity, recipe_unit, purchase_unit, ingredient_name)
    except CalculationError as e:
        logger.info("Cannot cost %r: %s", ingredient_name, e)
        return {
            'cost': 0.0,
            'unit_cost': 0.0,
            'conversion': None,
            'error': str(e),
            'suggestion': 'Please check if the units are compatible or provide a custom density.',
        }

    unit_cost = purchase_price / purchase_quantity
    return {
        'cost': conversion.quantity * unit_cost,
        'unit_cost': unit_cost,
        'conversion': conversion,
    }
