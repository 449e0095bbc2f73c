"""
Tracker module for Food Tracker.
Holds the consumable data model and the in-memory tracker that records them.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Generic, List, Optional, Tuple, TypeVar

from logger import ConsoleLogger, Logger

HIGH_CALORIE_THRESHOLD = 500


# ============== Data Model ==============

class Category(Enum):
    FOOD = 'food'
    DRINK = 'drink'


@dataclass(frozen=True)
class Consumable(ABC):
    """Base shape of anything the tracker can record."""
    name: str
    calories: int

    @property
    @abstractmethod
    def category(self) -> Category:
        ...

    @property
    def is_sugary(self) -> Optional[bool]:
        """Sugary flag, or None where the concept does not apply."""
        return None

    @property
    def is_high_calorie(self) -> bool:
        return self.calories > HIGH_CALORIE_THRESHOLD

    def describe_calories(self) -> str:
        return f"{self.name} has {self.calories} calories."


@dataclass(frozen=True)
class Food(Consumable):
    @property
    def category(self) -> Category:
        return Category.FOOD


@dataclass(frozen=True)
class Drink(Consumable):
    sugary: bool = False

    @property
    def category(self) -> Category:
        return Category.DRINK

    @property
    def is_sugary(self) -> Optional[bool]:
        return self.sugary


# ============== Insertion Alerts ==============

def _food_alert(item: Consumable) -> Optional[str]:
    if item.is_high_calorie:
        return f"⚠️ Alert: {item.name} is high in calories!"
    return None


def _drink_alert(item: Consumable) -> Optional[str]:
    if not item.is_sugary:
        return None
    if item.is_high_calorie:
        return f"Warning: {item.name} is both sugary and high in calories!"
    return f"Note: {item.name} is sugary!"


ALERT_POLICIES: Dict[Category, Callable[[Consumable], Optional[str]]] = {
    Category.FOOD: _food_alert,
    Category.DRINK: _drink_alert,
}

_missing = set(Category) - set(ALERT_POLICIES)
if _missing:
    raise RuntimeError(f"No alert policy for categories: {sorted(c.value for c in _missing)}")


# ============== Tracker ==============

T = TypeVar('T', bound=Consumable)


@dataclass
class Tracker(Generic[T]):
    """In-memory, insertion-ordered collection of consumables.

    Every mutation is reported to the injected logger. Out-of-range indices
    and unknown names are logged and ignored rather than raised.
    """
    logger: Logger = field(default_factory=ConsoleLogger)
    _items: List[T] = field(default_factory=list, init=False, repr=False)

    def __len__(self) -> int:
        return len(self._items)

    def log(self, message: str):
        self.logger.log(message)

    def add(self, item: T):
        """Append an item and emit its category alert, if any."""
        self._items.append(item)
        self.log(f"{item.name} added!")

        alert = ALERT_POLICIES[item.category](item)
        if alert:
            self.log(alert)

    @property
    def items(self) -> Tuple[T, ...]:
        """Snapshot of the tracked items in insertion order."""
        return tuple(self._items)

    def list_items(self) -> str:
        if not self._items:
            return "No items tracked yet."
        return ", ".join(f"{item.name} ({item.calories} cal)" for item in self._items)

    def total_calories(self) -> int:
        return sum(item.calories for item in self._items)

    def delete_at(self, index: int):
        """Remove the item at index. Negative indices are invalid, not wrapped."""
        if index < 0 or index >= len(self._items):
            self.log(f"Invalid index: {index}")
            return
        removed = self._items.pop(index)
        self.log(f"{removed.name} removed.")

    def delete_by_name(self, name: str):
        """Remove the first item whose name matches, ignoring case."""
        target = name.lower()
        for index, item in enumerate(self._items):
            if item.name.lower() == target:
                self.delete_at(index)
                return
        self.log(f'Item "{name}" not found.')
