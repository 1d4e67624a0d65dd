"""
Constants Package

Static lookup tables shared by the calculation services.
"""

from .units import (
    UNIT_CLASS_VOLUME,
    UNIT_CLASS_WEIGHT,
    UNIT_CLASS_COUNT,
    UNIT_ALIASES,
    VOLUME_TO_ML,
    WEIGHT_TO_G,
    COUNT_UNITS,
    DISPLAY_UNITS,
    QUANTITY_PLACES,
    PERCENTAGE_PLACES,
)

from .densities import INGREDIENT_DENSITIES, DEFAULT_DENSITY

from .tax import GST_RATE

__all__ = [
    # Units
    'UNIT_CLASS_VOLUME',
    'UNIT_CLASS_WEIGHT',
    'UNIT_CLASS_COUNT',
    'UNIT_ALIASES',
    'VOLUME_TO_ML',
    'WEIGHT_TO_G',
    'COUNT_UNITS',
    'DISPLAY_UNITS',
    'QUANTITY_PLACES',
    'PERCENTAGE_PLACES',
    # Densities
    'INGREDIENT_DENSITIES',
    'DEFAULT_DENSITY',
    # Tax
    'GST_RATE',
]
