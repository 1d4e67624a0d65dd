"""
Recipe Scaling Service

Functions for scaling ingredient quantities to a guest count and for
keeping ingredient proportions when one quantity is edited by hand.
"""

from .conversion import (
    CalculationError,
    calculate_ingredient_percentage,
    convert_same_type,
    round_quantity,
    volume_to_weight,
    is_volume_unit,
    is_weight_unit,
)


class InvalidServingsError(CalculationError, ValueError):
    """Raised when a recipe's original serving count is not positive."""
    pass


class IngredientNotFoundError(CalculationError, LookupError):
    """Raised when a referenced ingredient id is not in the list."""

    def __init__(self, ingredient_id):
        self.ingredient_id = ingredient_id
        super().__init__(f"Modified ingredient not found: {ingredient_id}")


class InvalidQuantityError(CalculationError, ValueError):
    """Raised when a modified ingredient has no original quantity to scale from."""

    def __init__(self, ingredient_id):
        self.ingredient_id = ingredient_id
        super().__init__(
            f"Cannot rescale around ingredient {ingredient_id}: its original quantity is 0"
        )


def _check_servings(original_servings):
    if original_servings <= 0:
        raise InvalidServingsError(
            f"Original servings must be greater than 0, got {original_servings}"
        )


def scale_quantity(original_quantity, original_servings, target_servings):
    """
    Scale a quantity from one serving count to another.

    target_servings is not checked; zero or negative targets give zero or
    negative quantities.
    """
    _check_servings(original_servings)
    scale_factor = target_servings / original_servings
    return round_quantity(original_quantity * scale_factor)


def servings_for_guests(guest_count, servings_per_guest=1):
    """Total servings needed for an event."""
    return guest_count * servings_per_guest


def adjust_recipe_proportions(ingredients, modified_ingredient_id, new_quantity):
    """
    Rescale a recipe around one manually overridden ingredient.

    Every other ingredient is multiplied by new_quantity / original quantity
    of the modified one, so ratios between untouched ingredients are kept.
    The modified ingredient gets new_quantity exactly. Input dicts are not
    mutated; each returned dict is a copy with 'adjusted_quantity' added.

    Raises:
        IngredientNotFoundError: if no line has modified_ingredient_id
        InvalidQuantityError: if the modified line's original quantity is 0
    """
    modified = next(
        (ing for ing in ingredients if ing['id'] == modified_ingredient_id),
        None,
    )
    if modified is None:
        raise IngredientNotFoundError(modified_ingredient_id)
    if not modified['quantity']:
        raise InvalidQuantityError(modified_ingredient_id)

    scale_factor = new_quantity / modified['quantity']

    adjusted = []
    for ing in ingredients:
        if ing['id'] == modified_ingredient_id:
            adjusted_quantity = new_quantity
        else:
            adjusted_quantity = round_quantity(ing['quantity'] * scale_factor)
        adjusted.append({**ing, 'adjusted_quantity': adjusted_quantity})
    return adjusted


def scale_recipe(ingredients, original_servings, target_servings):
    """
    Scale every ingredient of a recipe to a new serving count.

    Ingredients are dicts with 'quantity' and optionally 'cost_per_unit'
    (price of one of the ingredient's own unit). Costs are summed without
    rounding.

    Returns a dict with scale_factor, the scaled ingredient lines and the
    original/scaled cost totals.
    """
    _check_servings(original_servings)

    scaled_lines = []
    original_cost = 0.0
    scaled_cost = 0.0

    for ing in ingredients:
        scaled_qty = scale_quantity(ing['quantity'], original_servings, target_servings)
        line = {**ing, 'scaled_quantity': scaled_qty}

        cost_per_unit = ing.get('cost_per_unit')
        if cost_per_unit:
            line['original_cost'] = ing['quantity'] * cost_per_unit
            line['scaled_cost'] = scaled_qty * cost_per_unit
            original_cost += line['original_cost']
            scaled_cost += line['scaled_cost']

        scaled_lines.append(line)

    return {
        'original_servings': original_servings,
        'target_servings': target_servings,
        'scale_factor': target_servings / original_servings,
        'ingredients': scaled_lines,
        'original_cost': original_cost,
        'scaled_cost': scaled_cost,
        'cost_per_serving': scaled_cost / target_servings if target_servings else 0.0,
    }


def _ingredient_grams(ing):
    """Mass of an ingredient line in grams, or None for count units."""
    if is_weight_unit(ing['unit']):
        return convert_same_type(ing['quantity'], ing['unit'], 'g').quantity
    if is_volume_unit(ing['unit']):
        return volume_to_weight(ing['quantity'], ing['unit'], ing.get('name'), 'g').quantity
    return None


def calculate_recipe_composition(ingredients):
    """
    Work out the total mass of a recipe and each ingredient's share of it.

    Count-unit lines add nothing to the total and get a 0 percentage.
    Returns {'total_weight': grams, 'ingredients': [...]} where each line is
    a copy carrying 'weight_g' and 'percentage'.
    """
    weights = [_ingredient_grams(ing) for ing in ingredients]
    total_weight = round_quantity(sum(w for w in weights if w is not None))

    lines = []
    for ing, grams in zip(ingredients, weights):
        percentage = calculate_ingredient_percentage(
            ing['quantity'], ing['unit'], ing.get('name'), total_weight, 'g'
        )
        lines.append({**ing, 'weight_g': grams, 'percentage': percentage})

    return {'total_weight': total_weight, 'ingredients': lines}
