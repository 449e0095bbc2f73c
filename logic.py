"""
Business logic module for Food Tracker.
Handles input parsing, category filtering, and daily calorie totals.
"""

import re
from typing import Iterable, List, Optional

from tracker import Category, Consumable


# ============== Settings ==============

DAILY_CALORIE_LIMIT = 1500
STARTUP_DELAY_SECONDS = 1

MENU_CHOICES = {
    1: 'Add food',
    2: 'Add drink',
    3: 'Delete food',
    4: 'Delete drink',
    5: 'List food',
    6: 'List drink',
    7: 'Show total calories',
    8: 'Exit',
}

MENU_CHOICE_PATTERN = re.compile(r'^[1-8]$')


# ============== Input Parsing ==============

def validate_menu_choice(text: str) -> int:
    """Return the menu choice as an int. Raises ValueError if out of range."""
    if not MENU_CHOICE_PATTERN.fullmatch(text):
        raise ValueError("Invalid choice. Please enter a number from 1 to 8.")
    return int(text)


def parse_calories(text: str) -> Optional[int]:
    """Parse a calorie amount. Returns None if not a non-negative integer."""
    try:
        value = int(text)
    except ValueError:
        return None
    if value < 0:
        return None
    return value


def capitalize_name(text: str) -> str:
    """Upper-case the first letter, leaving the rest untouched."""
    if not text:
        return text
    return text[0].upper() + text[1:]


def parse_yes_no(text: str) -> bool:
    return text.strip().lower() == 'yes'


# ============== Category Queries ==============

def filter_by_category(items: Iterable[Consumable], category: Category) -> List[Consumable]:
    return [item for item in items if item.category is category]


def format_item(item: Consumable) -> str:
    """Format an item for display, flagging sugary drinks."""
    text = f"{item.name} ({item.calories} cal)"
    if item.is_sugary:
        text += " (Sugary)"
    return text


# ============== Daily Totals ==============

def calculate_totals(items: Iterable[Consumable], daily_limit: int = DAILY_CALORIE_LIMIT) -> dict:
    """Calculate per-category and grand totals against the daily limit."""
    totals = {category.value: 0 for category in Category}

    for item in items:
        totals[item.category.value] += item.calories

    grand_total = sum(totals.values())
    over_by = max(grand_total - daily_limit, 0)

    totals.update({
        'grand_total': grand_total,
        'daily_limit': daily_limit,
        'over_by': over_by,
        'is_over_limit': grand_total > daily_limit,
    })
    return totals


def format_overage_warning(totals: dict) -> str:
    return (f"⚠️ Grand Total: {totals['grand_total']} cal — "
            f"you are over your daily limit by {totals['over_by']} calories!")
