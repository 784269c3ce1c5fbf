"""
Tests for the rule-based ingredient parser.

Run with:
    pytest tests/test_rule_based_parser.py -v
"""

import asyncio

import pytest

from meal_planner.schemas.ingredient_schemas import ParsedIngredient
from meal_planner.services.base_parser import IngredientParseError
from meal_planner.services.rule_based_parser import (
    RuleBasedIngredientParser,
    parse_ingredient_line,
    parse_ingredients_with_rules,
    parse_quantity,
)


# ---------------------------------------------------------------------------
# parse_quantity
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "text,expected",
    [
        ("2", 2),
        ("1/2", 0.5),
        ("1 1/2", 1.5),
        ("2-3", 3),
        ("2 to 3", 3),
        ("3-2", 3),
        ("1/2-1", 1),
        ("", 0),
        ("abc", 0),
        ("1/0", 0),
    ],
)
def test_parse_quantity(text, expected):
    assert parse_quantity(text) == expected


# ---------------------------------------------------------------------------
# Single lines
# ---------------------------------------------------------------------------

def test_standard_line():
    assert parse_ingredients_with_rules("2 cups flour") == [
        ParsedIngredient(quantity=2, unit="cups", item="flour", notes=None, category="Pantry")
    ]


def test_fraction_line():
    [result] = parse_ingredients_with_rules("1/2 tablespoon salt")
    assert result.quantity == 0.5
    assert result.unit == "tablespoon"
    assert result.item == "salt"
    assert result.category == "Herbs & Spices"


def test_mixed_number_and_unit_case():
    [result] = parse_ingredient_line("1 1/2 Cups whole milk")
    assert result.quantity == 1.5
    assert result.unit == "cups"
    assert result.item == "whole milk"


def test_unicode_half():
    [result] = parse_ingredient_line("½ cup sugar")
    assert result.quantity == 0.5
    assert result.unit == "cup"
    assert result.item == "sugar"


def test_range_with_comma_notes():
    [result] = parse_ingredient_line("3-4 large eggs, beaten")
    assert result.quantity == 4
    assert result.unit == ""
    assert result.item == "large eggs"
    assert result.notes == "beaten"
    assert result.category == "Dairy & Eggs"


def test_no_quantity_or_unit():
    [result] = parse_ingredient_line("fresh basil")
    assert result.quantity == 0
    assert result.unit == ""
    assert result.item == "fresh basil"
    assert result.notes is None


def test_salt_and_pepper_expands_to_two_records():
    results = parse_ingredient_line("Salt and pepper to taste")
    assert results == [
        ParsedIngredient(quantity=0, unit="", item="salt", notes="to taste", category="Herbs & Spices"),
        ParsedIngredient(quantity=0, unit="", item="pepper", notes="to taste", category="Herbs & Spices"),
    ]


def test_to_taste():
    [result] = parse_ingredient_line("black pepper to taste")
    assert result.quantity == 0
    assert result.item == "black pepper"
    assert result.notes == "to taste"


def test_to_taste_overwrites_comma_note():
    [result] = parse_ingredient_line("1 pinch salt to taste, fine")
    assert result.unit == "pinch"
    assert result.item == "salt"
    assert result.notes == "to taste"


def test_optional_marker():
    [result] = parse_ingredient_line("1 cup walnuts (optional)")
    assert result.item == "walnuts"
    assert result.notes == "(Optional)"


def test_optional_marker_is_appended_to_comma_note():
    [result] = parse_ingredient_line("2 tablespoons fresh parsley (Optional), chopped")
    assert result.unit == "tablespoons"
    assert result.item == "fresh parsley"
    assert result.notes == "chopped (Optional)"


def test_canned_item():
    [result] = parse_ingredient_line("1 (14 ounce) can diced tomatoes")
    assert result.quantity == 1
    assert result.unit == "(14 ounce) can"
    assert result.item == "diced tomatoes"
    assert result.category == "Produce"


def test_canned_item_without_leading_quantity():
    [result] = parse_ingredient_line("(15.5 ounce) can black beans, drained")
    assert result.quantity == 1
    assert result.unit == "(15.5 ounce) can"
    assert result.item == "black beans"
    assert result.notes == "drained"
    assert result.category == "Canned Goods"


def test_canned_pattern_keeps_words_starting_with_can():
    [result] = parse_ingredient_line("2 (15 ounce) cannellini beans")
    assert result.quantity == 2
    assert result.item == "cannellini beans"


# ---------------------------------------------------------------------------
# Whole blocks
# ---------------------------------------------------------------------------

def test_blank_lines_are_skipped_and_order_kept():
    text = "2 cups flour\n\n   \nsalt and pepper to taste\n1 egg"
    items = [r.item for r in parse_ingredients_with_rules(text)]
    assert items == ["flour", "salt", "pepper", "egg"]


def test_garbage_lines_degrade_without_raising():
    results = parse_ingredients_with_rules("!!!\n@@@ ###\n,")
    assert len(results) == 3
    assert all(r.quantity == 0 for r in results)
    assert all(r.unit == "" for r in results)
    assert results[0].item == "!!!"
    assert results[2].item == ""
    assert all(r.category for r in results)


def test_empty_input():
    assert parse_ingredients_with_rules("") == []


def test_every_record_has_a_category():
    text = "1 lb ground beef\n2 cups rice\nsomething unusual"
    assert all(r.category for r in parse_ingredients_with_rules(text))


# ---------------------------------------------------------------------------
# Parser interface
# ---------------------------------------------------------------------------

def test_rule_based_parser_interface():
    parser = RuleBasedIngredientParser()
    results = asyncio.run(parser.parse("2 cups flour"))
    assert results[0].item == "flour"


def test_rule_based_parser_cannot_read_images():
    parser = RuleBasedIngredientParser()
    with pytest.raises(IngredientParseError):
        asyncio.run(parser.parse_image(b"\xff\xd8\xff"))
