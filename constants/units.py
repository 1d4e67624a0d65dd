"""
Unit Constants and Conversion Tables

Contains the unit spellings, base-unit conversion factors and unit class
membership used by the conversion engine.
"""

from types import MappingProxyType

# Unit classes
UNIT_CLASS_VOLUME = 'VOLUME'
UNIT_CLASS_WEIGHT = 'WEIGHT'
UNIT_CLASS_COUNT = 'COUNT'

# Spelling variants (lowercase input -> canonical unit key)
UNIT_ALIASES = MappingProxyType({
    'cup': 'cups',
    'piece': 'pieces',
    'slice': 'slices',
    'lb': 'lbs',
    'pound': 'lbs', 'pounds': 'lbs',
    'ounce': 'oz', 'ounces': 'oz',
    'gram': 'g', 'grams': 'g',
    'kilogram': 'kg', 'kilograms': 'kg',
    'tablespoon': 'tbsp', 'tablespoons': 'tbsp',
    'teaspoon': 'tsp', 'teaspoons': 'tsp',
    'milliliter': 'ml', 'milliliters': 'ml', 'millilitre': 'ml', 'millilitres': 'ml',
    'liter': 'l', 'liters': 'l', 'litre': 'l', 'litres': 'l',
    'fluid ounce': 'fl oz', 'fluid ounces': 'fl oz',
    'pints': 'pint',
    'quarts': 'quart',
    'gallons': 'gallon',
})

# Volume conversions to ML (base unit)
VOLUME_TO_ML = MappingProxyType({
    'ml': 1,
    'l': 1000,
    'cups': 236.588,
    'tbsp': 14.7868,
    'tsp': 4.92892,
    'fl oz': 29.5735,
    'pint': 473.176,
    'quart': 946.353,
    'gallon': 3785.41,
})

# Weight conversions to G (base unit)
WEIGHT_TO_G = MappingProxyType({
    'g': 1,
    'kg': 1000,
    'oz': 28.3495,
    'lbs': 453.592,
})

# Count units carry no factor and are never inferred from unknown spellings
COUNT_UNITS = frozenset({'pieces', 'each', 'whole', 'slices'})

# Picker lists, in display order (includes the singular spellings)
DISPLAY_UNITS = MappingProxyType({
    'volume': ('ml', 'l', 'cup', 'cups', 'tbsp', 'tsp', 'fl oz', 'pint', 'quart', 'gallon'),
    'weight': ('g', 'kg', 'oz', 'lb', 'lbs'),
    'count': ('piece', 'pieces', 'each', 'whole', 'slice', 'slices'),
})

# Decimal places kept on converted and scaled quantities
QUANTITY_PLACES = 4

# Decimal places kept on ingredient percentages
PERCENTAGE_PLACES = 2
