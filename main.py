#!/usr/bin/env python3
"""
Food & Drink Tracker CLI Application

A command-line application for tracking what you eat and drink in a session.

Features:
- Add food and drinks with their calorie counts
- Alerts for high-calorie food and sugary drinks
- Delete items by name
- List tracked food and drinks separately
- Category totals with a warning when over the 1500 calorie daily limit

Nothing is saved: all items are forgotten when the program exits.

Usage:
    python main.py

    Or if made executable:
    ./main.py
"""

from cli import run

if __name__ == "__main__":
    run()
