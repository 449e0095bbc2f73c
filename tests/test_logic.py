"""
Unit tests for input parsing and calorie totals.
Run with: python -m pytest tests/test_logic.py -v
"""

import pytest

import logic
from tracker import Category, Drink, Food


# ============== Input Parsing ==============

@pytest.mark.parametrize("text, expected", [("1", 1), ("5", 5), ("8", 8)])
def test_valid_menu_choices(text, expected):
    assert logic.validate_menu_choice(text) == expected


@pytest.mark.parametrize("text", ["0", "9", "12", "", "a", " 1", "1\n", "-1"])
def test_invalid_menu_choices(text):
    with pytest.raises(ValueError, match="Please enter a number from 1 to 8"):
        logic.validate_menu_choice(text)


@pytest.mark.parametrize("text, expected", [
    ("0", 0),
    ("95", 95),
    ("1400", 1400),
    ("-5", None),
    ("abc", None),
    ("12.5", None),
    ("", None),
])
def test_parse_calories(text, expected):
    assert logic.parse_calories(text) == expected


def test_capitalize_name_only_touches_first_letter():
    assert logic.capitalize_name("apple") == "Apple"
    assert logic.capitalize_name("iced tea") == "Iced tea"
    assert logic.capitalize_name("mcFlurry") == "McFlurry"
    assert logic.capitalize_name("") == ""


def test_parse_yes_no():
    assert logic.parse_yes_no("yes")
    assert logic.parse_yes_no("YES")
    assert not logic.parse_yes_no("y")
    assert not logic.parse_yes_no("no")
    assert not logic.parse_yes_no("")


# ============== Category Queries ==============

def test_filter_by_category_keeps_order():
    items = [Food("Apple", 95), Drink("Cola", 150), Food("Bread", 250)]
    foods = logic.filter_by_category(items, Category.FOOD)
    drinks = logic.filter_by_category(items, Category.DRINK)

    assert [item.name for item in foods] == ["Apple", "Bread"]
    assert [item.name for item in drinks] == ["Cola"]


def test_format_item_flags_sugary_drinks():
    assert logic.format_item(Food("Apple", 95)) == "Apple (95 cal)"
    assert logic.format_item(Drink("Water", 0)) == "Water (0 cal)"
    assert logic.format_item(Drink("Cola", 150, sugary=True)) == "Cola (150 cal) (Sugary)"


# ============== Daily Totals ==============

def test_totals_for_empty_day():
    totals = logic.calculate_totals([])
    assert totals['food'] == 0
    assert totals['drink'] == 0
    assert totals['grand_total'] == 0
    assert totals['daily_limit'] == logic.DAILY_CALORIE_LIMIT
    assert not totals['is_over_limit']


def test_totals_within_limit():
    totals = logic.calculate_totals([Food("Apple", 95), Drink("Cola", 150, sugary=True)])

    assert totals['food'] == 95
    assert totals['drink'] == 150
    assert totals['grand_total'] == 245
    assert totals['over_by'] == 0
    assert not totals['is_over_limit']


def test_totals_over_limit():
    items = [Food("Apple", 95), Drink("Cola", 150, sugary=True), Food("Cake", 1400)]
    totals = logic.calculate_totals(items)

    assert totals['food'] == 1495
    assert totals['grand_total'] == 1645
    assert totals['over_by'] == 145
    assert totals['is_over_limit']
    assert logic.format_overage_warning(totals) == (
        "⚠️ Grand Total: 1645 cal — you are over your daily limit by 145 calories!"
    )


def test_exactly_at_limit_is_not_over():
    totals = logic.calculate_totals([Food("Big Meal", 1500)])
    assert not totals['is_over_limit']
    assert totals['over_by'] == 0


def test_custom_daily_limit():
    totals = logic.calculate_totals([Food("Apple", 95)], daily_limit=50)
    assert totals['is_over_limit']
    assert totals['over_by'] == 45
