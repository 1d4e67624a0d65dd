"""
Unit Conversion Service

Functions for classifying units and converting quantities between volume,
weight and (for percentages) count units. Volume and weight are bridged
with an ingredient density lookup.
"""

import logging
import math
from dataclasses import dataclass

from constants import (
    UNIT_CLASS_VOLUME, UNIT_CLASS_WEIGHT, UNIT_CLASS_COUNT,
    UNIT_ALIASES, VOLUME_TO_ML, WEIGHT_TO_G, COUNT_UNITS, DISPLAY_UNITS,
    INGREDIENT_DENSITIES, DEFAULT_DENSITY,
    QUANTITY_PLACES, PERCENTAGE_PLACES,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    """Converted value plus the input it came from."""

    quantity: float
    unit: str
    original_quantity: float
    original_unit: str


class CalculationError(Exception):
    """Base class for errors raised by the calculation services."""
    pass


class UnsupportedConversionError(CalculationError):
    """Raised when two units cannot be converted on the requested path."""

    def __init__(self, from_unit, to_unit):
        self.from_unit = from_unit
        self.to_unit = to_unit
        super().__init__(f"Cannot convert between {from_unit} and {to_unit}")


class WrongUnitClassError(CalculationError):
    """Raised when a unit is not of the class a density conversion expects."""

    def __init__(self, unit, expected_class):
        self.unit = unit
        self.expected_class = expected_class
        super().__init__(f"{unit} is not a {expected_class.lower()} unit")


def round_quantity(value, places=QUANTITY_PLACES):
    """Round half up to a fixed number of decimal places."""
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def normalize_unit(unit):
    """Lowercase and trim a unit, then map known spelling variants."""
    normalized = ' '.join((unit or '').lower().split())
    return UNIT_ALIASES.get(normalized, normalized)


def is_volume_unit(unit):
    return normalize_unit(unit) in VOLUME_TO_ML


def is_weight_unit(unit):
    return normalize_unit(unit) in WEIGHT_TO_G


def is_count_unit(unit):
    return normalize_unit(unit) in COUNT_UNITS


def get_unit_class(unit):
    """Return VOLUME, WEIGHT, COUNT, or None for a unit in no table."""
    normalized = normalize_unit(unit)
    if normalized in VOLUME_TO_ML:
        return UNIT_CLASS_VOLUME
    if normalized in WEIGHT_TO_G:
        return UNIT_CLASS_WEIGHT
    if normalized in COUNT_UNITS:
        return UNIT_CLASS_COUNT
    return None


def get_density(ingredient_name):
    """Look up grams per milliliter for an ingredient by exact name."""
    key = (ingredient_name or '').lower().strip()
    return INGREDIENT_DENSITIES.get(key, DEFAULT_DENSITY)


def convert_same_type(quantity, from_unit, to_unit):
    """
    Convert between units of the same class (volume to volume, weight to weight).

    Units that normalize to the same string are returned unchanged, labelled
    with the requested target unit. Otherwise the quantity is routed through
    the base unit (ML or G) and rounded to 4 decimal places.

    Raises:
        UnsupportedConversionError: if the units are not both volume or both weight
    """
    normalized_from = normalize_unit(from_unit)
    normalized_to = normalize_unit(to_unit)

    if normalized_from == normalized_to:
        return ConversionResult(quantity, to_unit, quantity, from_unit)

    if normalized_from in VOLUME_TO_ML and normalized_to in VOLUME_TO_ML:
        factors = VOLUME_TO_ML
    elif normalized_from in WEIGHT_TO_G and normalized_to in WEIGHT_TO_G:
        factors = WEIGHT_TO_G
    else:
        raise UnsupportedConversionError(from_unit, to_unit)

    converted = quantity * factors[normalized_from] / factors[normalized_to]
    return ConversionResult(round_quantity(converted), to_unit, quantity, from_unit)


def volume_to_weight(quantity, volume_unit, ingredient_name, target_weight_unit='g'):
    """
    Convert a volume to a weight using the ingredient's density.

    Unknown ingredients use DEFAULT_DENSITY rather than failing.

    Raises:
        WrongUnitClassError: if volume_unit is not a volume unit or
            target_weight_unit is not a weight unit
    """
    if not is_volume_unit(volume_unit):
        raise WrongUnitClassError(volume_unit, UNIT_CLASS_VOLUME)
    if not is_weight_unit(target_weight_unit):
        raise WrongUnitClassError(target_weight_unit, UNIT_CLASS_WEIGHT)

    density = get_density(ingredient_name)
    ml = quantity * VOLUME_TO_ML[normalize_unit(volume_unit)]
    grams = ml * density
    converted = grams / WEIGHT_TO_G[normalize_unit(target_weight_unit)]

    return ConversionResult(round_quantity(converted), target_weight_unit, quantity, volume_unit)


def weight_to_volume(quantity, weight_unit, ingredient_name, target_volume_unit='cups'):
    """
    Convert a weight to a volume using the ingredient's density.

    Raises:
        WrongUnitClassError: if weight_unit is not a weight unit or
            target_volume_unit is not a volume unit
    """
    if not is_weight_unit(weight_unit):
        raise WrongUnitClassError(weight_unit, UNIT_CLASS_WEIGHT)
    if not is_volume_unit(target_volume_unit):
        raise WrongUnitClassError(target_volume_unit, UNIT_CLASS_VOLUME)

    density = get_density(ingredient_name)
    grams = quantity * WEIGHT_TO_G[normalize_unit(weight_unit)]
    ml = grams / density
    converted = ml / VOLUME_TO_ML[normalize_unit(target_volume_unit)]

    return ConversionResult(round_quantity(converted), target_volume_unit, quantity, weight_unit)


def convert_quantity(quantity, from_unit, to_unit, ingredient_name=None):
    """
    Convert a quantity between any two units the engine can bridge.

    Same-class pairs convert directly; volume/weight pairs go through the
    ingredient density (default density when no name is given).
    """
    from_class = get_unit_class(from_unit)
    to_class = get_unit_class(to_unit)

    if from_class == UNIT_CLASS_VOLUME and to_class == UNIT_CLASS_WEIGHT:
        return volume_to_weight(quantity, from_unit, ingredient_name, to_unit)
    if from_class == UNIT_CLASS_WEIGHT and to_class == UNIT_CLASS_VOLUME:
        return weight_to_volume(quantity, from_unit, ingredient_name, to_unit)
    return convert_same_type(quantity, from_unit, to_unit)


def calculate_ingredient_percentage(quantity, unit, ingredient_name,
                                    total_weight, total_weight_unit='g'):
    """
    Express an ingredient's mass as a percentage of the total recipe mass.

    Count units cannot contribute mass and give 0. Any failure inside the
    calculation is logged and also gives 0; this function never raises.
    """
    try:
        if is_weight_unit(unit):
            grams = convert_same_type(quantity, unit, 'g').quantity
        elif is_volume_unit(unit):
            grams = volume_to_weight(quantity, unit, ingredient_name, 'g').quantity
        else:
            return 0

        if is_weight_unit(total_weight_unit):
            total_grams = convert_same_type(total_weight, total_weight_unit, 'g').quantity
        else:
            total_grams = total_weight

        return round_quantity(grams / total_grams * 100, PERCENTAGE_PLACES)
    except Exception:
        logger.warning(
            "Error calculating ingredient percentage for %r (%s %s of %s %s)",
            ingredient_name, quantity, unit, total_weight, total_weight_unit,
            exc_info=True,
        )
        return 0


def get_all_units():
    """Get all units grouped by class, for unit pickers."""
    return {unit_class: list(units) for unit_class, units in DISPLAY_UNITS.items()}
