"""Ordered build steps with automatic renumbering.

A BuildOrder holds references to catalog items, never copies. Every step's
number equals its 1-based position once any public method returns.
Out-of-range indices are ignored: the call returns False and the order is
left as it was.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field

from ..logging import get_logger
from .catalog import GameItem, Resource

logger = get_logger(__name__)


@dataclass(eq=False)
class BuildOrderStep:
    """One entry in a build order."""

    item: GameItem
    notes: str = ""
    _number: int = field(default=1, repr=False)

    @property
    def step_number(self) -> int:
        """1-based position, maintained by the owning BuildOrder."""
        return self._number


@dataclass
class BuildOrder:
    """A named, ordered sequence of steps."""

    name: str = "New Build Order"
    _steps: list[BuildOrderStep] = field(
        default_factory=list, init=False, repr=False
    )

    @property
    def steps(self) -> tuple[BuildOrderStep, ...]:
        return tuple(self._steps)

    def get_steps(self) -> tuple[BuildOrderStep, ...]:
        return self.steps

    def get_name(self) -> str:
        return self.name

    def set_name(self, name: str) -> None:
        self.name = name

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[BuildOrderStep]:
        return iter(self.steps)

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._steps)

    def _renumber(self) -> None:
        for position, step in enumerate(self._steps):
            step._number = position + 1

    def add_step(self, item: GameItem, notes: str = "") -> BuildOrderStep:
        """Append a step for item and return it."""
        step = BuildOrderStep(item=item, notes=notes, _number=len(self._steps) + 1)
        self._steps.append(step)
        logger.debug(
            "step_added", order=self.name, item=item.id, step=step.step_number
        )
        return step

    def remove_step(self, index: int) -> bool:
        """Remove the step at index (0-based)."""
        if not self._in_range(index):
            logger.debug("step_index_out_of_range", order=self.name, index=index)
            return False
        removed = self._steps.pop(index)
        self._renumber()
        logger.debug(
            "step_removed", order=self.name, item=removed.item.id, index=index
        )
        return True

    def move_step(self, from_index: int, to_index: int) -> bool:
        """Move a step so it ends up at to_index.

        The step is taken out first, so to_index counts positions in the
        shortened list. Equal indices do nothing.
        """
        if not (self._in_range(from_index) and self._in_range(to_index)):
            logger.debug(
                "step_index_out_of_range",
                order=self.name,
                from_index=from_index,
                to_index=to_index,
            )
            return False
        if from_index == to_index:
            return False
        step = self._steps.pop(from_index)
        self._steps.insert(to_index, step)
        self._renumber()
        logger.debug(
            "step_moved",
            order=self.name,
            item=step.item.id,
            from_index=from_index,
            to_index=to_index,
        )
        return True

    def set_notes(self, index: int, notes: str) -> bool:
        if not self._in_range(index):
            logger.debug("step_index_out_of_range", order=self.name, index=index)
            return False
        self._steps[index].notes = notes
        return True

    def clear(self) -> None:
        self._steps.clear()
        logger.debug("order_cleared", order=self.name)

    def total_time(self) -> float:
        """Sum of build times over all steps."""
        return sum(step.item.build_time for step in self._steps)

    def total_costs(self) -> list[Resource]:
        """Summed costs per resource name, in order of first appearance."""
        totals: dict[str, float] = {}
        for step in self._steps:
            for cost in step.item.costs:
                totals[cost.name] = totals.get(cost.name, 0.0) + cost.amount
        return [Resource(name, amount) for name, amount in totals.items()]
