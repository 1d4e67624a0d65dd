"""Tests for the ingredient cost service."""

import pytest

from services import calculate_ingredient_cost


def test_same_class_cost():
    # 10 kg of flour for $54, recipe uses 500 g
    result = calculate_ingredient_cost('flour', 10, 'kg', 54.0, 500, 'g')
    assert result['unit_cost'] == pytest.approx(5.4)
    assert result['cost'] == pytest.approx(2.7)
    assert result['conversion'].quantity == 0.5
    assert result['conversion'].unit == 'kg'
    assert 'error' not in result


def test_volume_recipe_weight_purchase_uses_density():
    # 1 L of water weighs 1 kg
    result = calculate_ingredient_cost('water', 1, 'kg', 2.0, 1, 'l')
    assert result['cost'] == pytest.approx(2.0)


def test_same_unit_cost():
    result = calculate_ingredient_cost('olive oil', 500, 'ml', 12.0, 30, 'ml')
    assert result['cost'] == pytest.approx(0.72)
    assert result['unit_cost'] == pytest.approx(0.024)


def test_count_units_match_exactly():
    result = calculate_ingredient_cost('lemon', 6, 'each', 3.0, 2, 'each')
    assert result['cost'] == pytest.approx(1.0)


def test_incompatible_units_do_not_raise():
    result = calculate_ingredient_cost('egg', 12, 'each', 6.0, 100, 'g')
    assert result['cost'] == 0.0
    assert result['unit_cost'] == 0.0
    assert result['conversion'] is None
    assert 'each' in result['error']
    assert result['suggestion']


def test_zero_purchase_quantity():
    result = calculate_ingredient_cost('flour', 0, 'kg', 54.0, 500, 'g')
    assert result['cost'] == 0.0
    assert result['error']
