"""Read-only food catalog lookups."""

from collections.abc import Iterable
from dataclasses import dataclass

from nutriai.catalog_data import FOODS
from nutriai.domain.nutrition import FoodItem


class FoodNotFoundError(LookupError):
    """Raised when a food id is not in the catalog."""


@dataclass
class FoodCatalog:
    """Static table of foods searchable by name or localized name."""

    foods: tuple[FoodItem, ...]

    @classmethod
    def create(cls, foods: Iterable[FoodItem] | None = None) -> "FoodCatalog":
        """Create a catalog, defaulting to the bundled foods."""
        if foods is None:
            return cls(foods=FOODS)
        return cls(foods=tuple(foods))

    def search(self, query: str | None, limit: int | None = None) -> list[FoodItem]:
        """Return foods whose name or localized name contains the query."""
        needle = (query or "").strip().lower()
        matches = [food for food in self.foods if _matches(food, needle)]
        if limit is not None:
            return matches[:limit]
        return matches

    def get(self, food_id: str) -> FoodItem:
        """Return a food by id."""
        for food in self.foods:
            if food.id == food_id:
                return food
        raise FoodNotFoundError(food_id)

    def match_label(self, label: str) -> FoodItem | None:
        """Return the food whose name equals the label, ignoring case."""
        needle = label.strip().lower()
        if not needle:
            return None
        for food in self.foods:
            if food.name.lower() == needle:
                return food
            if food.localized_name and food.localized_name.lower() == needle:
                return food
        return None


def _matches(food: FoodItem, needle: str) -> bool:
    if needle in food.name.lower():
        return True
    return bool(food.localized_name and needle in food.localized_name.lower())
