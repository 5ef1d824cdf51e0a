"""Static game reference data: resources, items and the games that own them.

Catalogs are loaded once at startup and shared by every build order.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Resource:
    """A named amount, e.g. 50 Minerals."""

    name: str
    amount: float


@dataclass
class GameItem:
    """One buildable unit, structure, research or move."""

    id: str
    name: str
    category: str = ""
    build_time: float = 0.0
    costs: list[Resource] = field(default_factory=list)
    description: str = ""

    def add_cost(self, resource: Resource) -> None:
        self.costs.append(resource)


@dataclass
class Game:
    """A named catalog of items, kept in insertion order."""

    id: str
    name: str
    description: str = ""
    items: list[GameItem] = field(default_factory=list)

    def add_item(self, item: GameItem) -> None:
        """Append an item. Ids are not checked for uniqueness."""
        self.items.append(item)

    def find_item(self, item_id: str) -> GameItem | None:
        """Return the first item with this id, or None."""
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def categories(self) -> list[str]:
        """Distinct categories in order of first appearance."""
        seen: list[str] = []
        for item in self.items:
            if item.category not in seen:
                seen.append(item.category)
        return seen

    def items_in(self, category: str) -> list[GameItem]:
        return [item for item in self.items if item.category == category]
