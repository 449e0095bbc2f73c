"""
CLI Interface module for Food Tracker.
Handles all user interaction and display formatting.
"""

import sys
import time
from typing import Optional, TextIO

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich import box

import logic
from logger import ConsoleLogger
from tracker import Category, Drink, Food, Tracker

console = Console()

# Read answers from here instead of the terminal when set
input_stream: Optional[TextIO] = None


# ============== Helper Functions ==============

def ask(prompt: str) -> str:
    """Read a line of input from the user."""
    return Prompt.ask(prompt, console=console, stream=input_stream)


def print_header(title: str):
    """Print a styled header."""
    console.print()
    console.print(f"[bold cyan]{title}[/bold cyan]")


def print_error(message: str):
    """Print an error message."""
    console.print(f"Error: {message}", style="red", markup=False, emoji=False)


def print_warning(message: str):
    """Print a warning message."""
    console.print(message, style="yellow", markup=False, emoji=False)


def show_startup_message():
    """Print the startup notice and wait before opening the menu."""
    console.print("Program started. Please wait...\n")
    time.sleep(logic.STARTUP_DELAY_SECONDS)


def read_calories():
    """Prompt for a calorie amount. Returns None after reporting bad input."""
    calories = logic.parse_calories(ask("Enter calorie amount"))
    if calories is None:
        print_error("Invalid calories. Must be a non-negative integer.")
    return calories


# ============== Adding Items ==============

def add_food_menu(tracker: Tracker):
    name = logic.capitalize_name(ask("Enter food name"))
    calories = read_calories()
    if calories is None:
        return

    tracker.add(Food(name=name, calories=calories))


def add_drink_menu(tracker: Tracker):
    name = logic.capitalize_name(ask("Enter drink name"))
    calories = read_calories()
    if calories is None:
        return

    sugary = logic.parse_yes_no(ask("Is it sugary? (yes/no)"))
    tracker.add(Drink(name=name, calories=calories, sugary=sugary))


# ============== Deleting Items ==============

def delete_menu(tracker: Tracker, category: Category):
    """Delete an item by name, skipping the prompt if the category is empty."""
    if not logic.filter_by_category(tracker.items, category):
        tracker.log(f"No {category.value} items in the list.")
        return

    name = ask(f"Enter the {category.value} to be deleted")
    tracker.delete_by_name(name)


# ============== Listing Items ==============

def list_menu(tracker: Tracker, category: Category):
    """Show the tracked items of one category."""
    title = "Tracked Food:" if category is Category.FOOD else "Tracked Drinks:"
    print_header(title)

    items = logic.filter_by_category(tracker.items, category)
    if not items:
        print_warning(f"No {category.value} items tracked yet.")
        return

    console.print(", ".join(logic.format_item(item) for item in items), markup=False, emoji=False)


def show_totals(tracker: Tracker):
    """Show category subtotals and warn when over the daily limit."""
    totals = logic.calculate_totals(tracker.items)

    print_header("Total Calories:")
    console.print(f"- Food: {totals['food']} cal")
    console.print(f"- Drinks: {totals['drink']} cal")

    if totals['is_over_limit']:
        print_warning(logic.format_overage_warning(totals))


# ============== Main Menu ==============

def print_menu():
    console.print("\n[bold]Menu:[/bold]")
    for number, label in logic.MENU_CHOICES.items():
        console.print(f"{number}. {label}")


def main_menu(tracker: Tracker):
    """Display and handle the main menu until the user exits."""
    console.print(Panel(
        "[bold cyan]Welcome to the Food & Drink Tracker![/bold cyan]",
        box=box.DOUBLE
    ))

    while True:
        print_menu()

        try:
            choice = logic.validate_menu_choice(ask("Enter choice"))
        except ValueError as e:
            print_error(str(e))
            continue

        if choice == 1:
            add_food_menu(tracker)
        elif choice == 2:
            add_drink_menu(tracker)
        elif choice == 3:
            delete_menu(tracker, Category.FOOD)
        elif choice == 4:
            delete_menu(tracker, Category.DRINK)
        elif choice == 5:
            list_menu(tracker, Category.FOOD)
        elif choice == 6:
            list_menu(tracker, Category.DRINK)
        elif choice == 7:
            show_totals(tracker)
        elif choice == 8:
            console.print("\n[cyan]Exiting program, goodbye![/cyan]")
            break


def run():
    """Entry point for the CLI."""
    try:
        show_startup_message()
        tracker = Tracker(ConsoleLogger(console))
        main_menu(tracker)
    except KeyboardInterrupt:
        console.print("\n[cyan]Goodbye![/cyan]")
        sys.exit(0)
    except Exception as e:
        console.print(f"[red]Fatal error: {e}[/red]")
        sys.exit(1)
    sys.exit(0)


if __name__ == "__main__":
    run()
