"""Tests for the unit conversion service."""

import logging

import pytest

from constants import VOLUME_TO_ML, WEIGHT_TO_G, INGREDIENT_DENSITIES, DEFAULT_DENSITY
from services import (
    ConversionResult,
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


class TestNormalizeUnit:

    @pytest.mark.parametrize('raw, expected', [
        ('cup', 'cups'),
        (' Cup ', 'cups'),
        ('piece', 'pieces'),
        ('Slice', 'slices'),
        ('LB', 'lbs'),
        ('lbs', 'lbs'),
        ('Tablespoons', 'tbsp'),
        ('fl  oz', 'fl oz'),
        ('ml', 'ml'),
    ])
    def test_spelling_variants(self, raw, expected):
        assert normalize_unit(raw) == expected

    def test_unknown_unit_is_only_lowercased(self):
        assert normalize_unit(' Bunch') == 'bunch'

    def test_classification_normalizes_first(self):
        # 'cup' and 'lb' are only in the tables in their canonical form
        assert is_volume_unit('Cup')
        assert is_volume_unit(' cup ')
        assert is_weight_unit('LB')
        assert not is_weight_unit('cup')
        assert not is_volume_unit('g')


class TestUnitClass:

    def test_classes(self):
        assert get_unit_class('tsp') == 'VOLUME'
        assert get_unit_class('kg') == 'WEIGHT'
        assert get_unit_class('each') == 'COUNT'
        assert get_unit_class('slice') == 'COUNT'

    def test_count_units_are_enumerated_not_inferred(self):
        assert get_unit_class('bunch') is None
        assert not is_count_unit('bunch')
        assert is_count_unit('Whole')


class TestRoundQuantity:

    def test_four_places(self):
        assert round_quantity(1.23456) == 1.2346
        assert round_quantity(2.0) == 2.0

    def test_half_rounds_up(self):
        assert round_quantity(0.5, 0) == 1.0
        assert round_quantity(1.5, 0) == 2.0
        assert round_quantity(2.5, 0) == 3.0


class TestConvertSameType:

    def test_returns_conversion_result(self):
        result = convert_same_type(2, 'cups', 'ml')
        assert isinstance(result, ConversionResult)
        assert result.quantity == 473.176
        assert result.unit == 'ml'
        assert result.original_quantity == 2
        assert result.original_unit == 'cups'

    def test_result_is_immutable(self):
        result = convert_same_type(1, 'kg', 'g')
        with pytest.raises(AttributeError):
            result.quantity = 5

    def test_weight(self):
        assert convert_same_type(1, 'kg', 'g').quantity == 1000
        assert convert_same_type(1, 'lb', 'g').quantity == 453.592
        assert convert_same_type(1000, 'g', 'kg').quantity == 1.0
        assert convert_same_type(16, 'oz', 'lbs').quantity == 1.0

    def test_volume(self):
        assert convert_same_type(1, 'tbsp', 'tsp').quantity == 3.0
        assert convert_same_type(1, 'l', 'ml').quantity == 1000

    def test_same_unit_is_noop_with_requested_label(self):
        result = convert_same_type(2.5, 'Cup', 'cup')
        assert result.quantity == 2.5
        assert result.unit == 'cup'
        assert result.original_unit == 'Cup'

    def test_same_unknown_unit_is_noop(self):
        result = convert_same_type(3, 'bunch', 'Bunch')
        assert result.quantity == 3
        assert result.unit == 'Bunch'

    def test_volume_to_weight_is_rejected(self):
        with pytest.raises(UnsupportedConversionError) as exc_info:
            convert_same_type(1, 'cup', 'g')
        assert 'cup' in str(exc_info.value)
        assert 'g' in str(exc_info.value)
        assert exc_info.value.from_unit == 'cup'
        assert exc_info.value.to_unit == 'g'

    def test_count_units_are_rejected(self):
        with pytest.raises(UnsupportedConversionError):
            convert_same_type(2, 'pieces', 'each')

    @pytest.mark.parametrize('from_unit, to_unit', [
        ('cups', 'ml'),
        ('tbsp', 'tsp'),
        ('l', 'cups'),
        ('kg', 'lbs'),
        ('oz', 'g'),
        ('quart', 'pint'),
    ])
    def test_round_trip(self, from_unit, to_unit):
        there = convert_same_type(2.5, from_unit, to_unit)
        back = convert_same_type(there.quantity, to_unit, from_unit)
        assert back.quantity == pytest.approx(2.5, abs=0.0001)


class TestDensityConversions:

    def test_unknown_ingredient_uses_default_density(self):
        result = volume_to_weight(1, 'cup', 'unknown-ingredient')
        assert result.quantity == 165.6116
        assert result.unit == 'g'
        assert result.original_quantity == 1
        assert result.original_unit == 'cup'

    def test_density_lookup_is_case_insensitive(self):
        assert get_density('Flour') == 0.53
        assert get_density('  BROWN SUGAR ') == 0.9

    def test_density_lookup_is_exact(self):
        assert get_density('flours') == DEFAULT_DENSITY
        assert get_density('bread flour') == DEFAULT_DENSITY

    def test_volume_to_weight_with_known_density(self):
        assert volume_to_weight(1, 'cup', 'flour').quantity == pytest.approx(125.3916)
        assert volume_to_weight(1, 'l', 'water', 'kg').quantity == 1.0

    def test_weight_to_volume(self):
        result = weight_to_volume(236.588, 'g', 'water')
        assert result.quantity == 1.0
        assert result.unit == 'cups'
        assert weight_to_volume(100, 'g', 'sugar', 'ml').quantity == 117.6471

    def test_wrong_source_class(self):
        with pytest.raises(WrongUnitClassError) as exc_info:
            volume_to_weight(1, 'g', 'flour')
        assert str(exc_info.value) == 'g is not a volume unit'

        with pytest.raises(WrongUnitClassError):
            weight_to_volume(1, 'cup', 'flour')

    def test_wrong_target_class(self):
        with pytest.raises(WrongUnitClassError):
            volume_to_weight(1, 'cup', 'flour', 'ml')
        with pytest.raises(WrongUnitClassError):
            weight_to_volume(1, 'g', 'flour', 'kg')

    def test_volume_weight_round_trip(self):
        grams = volume_to_weight(2, 'cups', 'milk').quantity
        assert weight_to_volume(grams, 'g', 'milk').quantity == pytest.approx(2, abs=0.0001)


class TestConvertQuantity:

    def test_same_class(self):
        assert convert_quantity(2, 'kg', 'g').quantity == 2000

    def test_cross_class_uses_density(self):
        assert convert_quantity(1, 'cup', 'g', 'water').quantity == 236.588
        assert convert_quantity(236.588, 'g', 'cups', 'water').quantity == 1.0

    def test_cross_class_without_name_uses_default(self):
        assert convert_quantity(1, 'cup', 'g').quantity == 165.6116

    def test_count_units_cannot_convert(self):
        with pytest.raises(UnsupportedConversionError):
            convert_quantity(2, 'pieces', 'g', 'egg')


class TestIngredientPercentage:

    def test_weight_ingredient(self):
        assert calculate_ingredient_percentage(250, 'g', 'flour', 1000) == 25.0
        assert calculate_ingredient_percentage(0.5, 'kg', 'flour', 1, 'kg') == 50.0

    def test_volume_ingredient_uses_density(self):
        assert calculate_ingredient_percentage(1, 'l', 'water', 2000) == 50.0

    def test_rounds_to_two_places(self):
        assert calculate_ingredient_percentage(1, 'g', 'salt', 3) == 33.33

    def test_count_unit_gives_zero(self):
        assert calculate_ingredient_percentage(3, 'pieces', 'egg', 500) == 0
        assert calculate_ingredient_percentage(1, 'bunch', 'parsley', 500) == 0

    def test_zero_total_is_logged_and_gives_zero(self, caplog):
        with caplog.at_level(logging.WARNING, logger='services.conversion'):
            assert calculate_ingredient_percentage(100, 'g', 'flour', 0) == 0
        assert 'Error calculating ingredient percentage' in caplog.text

    def test_bad_input_never_raises(self, caplog):
        with caplog.at_level(logging.WARNING, logger='services.conversion'):
            assert calculate_ingredient_percentage(100, 'g', 'flour', None) == 0
            assert calculate_ingredient_percentage('lots', 'g', 'flour', 100) == 0
        assert len(caplog.records) == 2


class TestTables:

    def test_all_units(self):
        units = get_all_units()
        assert 'cup' in units['volume']
        assert 'fl oz' in units['volume']
        assert 'lb' in units['weight']
        assert units['count'] == ['piece', 'pieces', 'each', 'whole', 'slice', 'slices']

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            VOLUME_TO_ML['cups'] = 240
        with pytest.raises(TypeError):
            INGREDIENT_DENSITIES['flour'] = 1

    def test_base_factors(self):
        assert VOLUME_TO_ML['ml'] == 1
        assert VOLUME_TO_ML['cups'] == 236.588
        assert WEIGHT_TO_G['g'] == 1
        assert WEIGHT_TO_G['lbs'] == 453.592

    def test_densities_positive(self):
        assert all(d > 0 for d in INGREDIENT_DENSITIES.values())
        assert DEFAULT_DENSITY == 0.7
