"""
Services Package

Calculation modules for catering: unit conversion, scaling, GST and costing.
"""

from .conversion import (
    ConversionResult,
    CalculationError,
    UnsupportedConversionError,
    WrongUnitClassError,
    round_quantity,
    normalize_unit,
    is_volume_unit,
    is_weight_unit,
    is_count_unit,
    get_unit_class,
    get_density,
    convert_same_type,
    volume_to_weight,
    weight_to_volume,
    convert_quantity,
    calculate_ingredient_percentage,
    get_all_units,
)

from .scaling import (
    InvalidServingsError,
    IngredientNotFoundError,
    InvalidQuantityError,
    scale_quantity,
    servings_for_guests,
    adjust_recipe_proportions,
    scale_recipe,
    calculate_recipe_composition,
)

from .gst import (
    calculate_gst,
    add_gst,
    remove_gst,
    get_gst_from_inclusive,
    calculate_gst_breakdown,
    calculate_total_with_gst,
)

from .cost import calculate_ingredient_cost

__all__ = [
    # Conversion
    'ConversionResult',
    'CalculationError',
    'UnsupportedConversionError',
    'WrongUnitClassError',
    'round_quantity',
    'normalize_unit',
    'is_volume_unit',
    'is_weight_unit',
    'is_count_unit',
    'get_unit_class',
    'get_density',
    'convert_same_type',
    'volume_to_weight',
    'weight_to_volume',
    'convert_quantity',
    'calculate_ingredient_percentage',
    'get_all_units',
    # Scaling
    'InvalidServingsError',
    'IngredientNotFoundError',
    'InvalidQuantityError',
    'scale_quantity',
    'servings_for_guests',
    'adjust_recipe_proportions',
    'scale_recipe',
    'calculate_recipe_composition',
    # GST
    'calculate_gst',
    'add_gst',
    'remove_gst',
    'get_gst_from_inclusive',
    'calculate_gst_breakdown',
    'calculate_total_with_gst',
    # Cost
    'calculate_ingredient_cost',
]
