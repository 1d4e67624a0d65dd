"""
Ingredient Density Constants

Grams per milliliter for common ingredients, used to bridge volume and
weight. Keys are lowercase ingredient names and are matched exactly.
"""

from types import MappingProxyType

INGREDIENT_DENSITIES = MappingProxyType({
    # Liquids
    'water': 1.0,
    'milk': 1.03,
    'cream': 0.99,
    'oil': 0.92,
    'honey': 1.4,
    'syrup': 1.3,
    # Dry ingredients
    'flour': 0.53,
    'sugar': 0.85,
    'brown sugar': 0.9,
    'salt': 1.2,
    'baking powder': 0.9,
    'cocoa powder': 0.41,
    'butter': 0.91,
    'rice': 0.75,
    'oats': 0.41,
})

# Used for any ingredient missing from the table
DEFAULT_DENSITY = 0.7
