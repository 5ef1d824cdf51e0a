"""Text commands over a build order, plus plain-text renderers.

handle_command(game, order, raw_input) -> str is the main entry point.
It tokenizes the input and dispatches to a handler. Handlers mutate the
order in place and return descriptive text. Step numbers typed by the user
are 1-based.
"""

from collections.abc import Callable

from .build_order import BuildOrder
from .catalog import Game, GameItem, Resource

# How many item ids to suggest when a lookup misses
SUGGESTION_COUNT = 10

HELP_TEXT = """Commands:
  add <id> [notes]    append an item to the build order
  remove <n>          remove step n
  move <from> <to>    move step <from> to position <to>
  note <n> <text>     attach notes to step n
  clear               remove every step
  name <text>         rename the build order
  list                show the build order
  items               show the catalog
  total               show total time and costs
  help                show this text"""


def _format_amount(amount: float) -> str:
    if amount == int(amount):
        return str(int(amount))
    return f"{amount:g}"


def format_costs(costs: list[Resource]) -> str:
    """Render costs as '100 Minerals, 25 Gas'."""
    if not costs:
        return "free"
    return ", ".join(f"{_format_amount(c.amount)} {c.name}" for c in costs)


def render_build_order(order: BuildOrder) -> str:
    """Numbered listing of the order's steps."""
    lines = [f"Build order: {order.name}"]
    if not order.steps:
        lines.append("  (empty)")
        return "\n".join(lines)

    for step in order.steps:
        line = f"  {step.step_number}. {step.item.name}"
        if step.notes:
            line += f" ({step.notes})"
        lines.append(line)
    return "\n".join(lines)


def render_totals(order: BuildOrder) -> str:
    return (
        f"Total time: {order.total_time():.1f}\n"
        f"Total cost: {format_costs(order.total_costs())}"
    )


def render_catalog(game: Game) -> str:
    """Catalog items grouped by category."""
    lines = [f"{game.name} ({len(game.items)} items)"]
    if game.description:
        lines.append(game.description)
    for category in game.categories():
        lines.append("")
        lines.append(f"[{category or 'Other'}]")
        for item in game.items_in(category):
            lines.append(
                f"  {item.id} - {item.name}: {item.build_time:g}s, "
                f"{format_costs(item.costs)}"
            )
    return "\n".join(lines)


def _parse_step_number(word: str) -> int | None:
    """Convert a typed 1-based step number to a list index."""
    try:
        return int(word) - 1
    except ValueError:
        return None


def _find_item_loosely(game: Game, item_id: str) -> GameItem | None:
    """Exact id first, then the first id that matches ignoring case."""
    item = game.find_item(item_id)
    if item is not None:
        return item
    folded = item_id.casefold()
    for candidate in game.items:
        if candidate.id.casefold() == folded:
            return candidate
    return None


def _cmd_add(game: Game, order: BuildOrder, args: list[str]) -> str:
    if not args:
        return "Add what? Try 'add <id>'."

    item_id = args[0]
    item = _find_item_loosely(game, item_id)
    if item is None:
        suggestions = ", ".join(i.id for i in game.items[:SUGGESTION_COUNT])
        more = len(game.items) - SUGGESTION_COUNT
        if more > 0:
            suggestions += f" ... and {more} more"
        return f"'{item_id}' not found. Available: {suggestions}"

    step = order.add_step(item, notes=" ".join(args[1:]))
    return f"Added step {step.step_number}: {item.name}."


def _cmd_remove(game: Game, order: BuildOrder, args: list[str]) -> str:
    if not args:
        return "Remove which step?"
    index = _parse_step_number(args[0])
    if index is None:
        return f"'{args[0]}' is not a step number."

    name = order.steps[index].item.name if 0 <= index < len(order) else None
    if not order.remove_step(index):
        return f"There is no step {args[0]}."
    return f"Removed {name}."


def _cmd_move(game: Game, order: BuildOrder, args: list[str]) -> str:
    if len(args) < 2:
        return "Usage: move <from> <to>"
    from_index = _parse_step_number(args[0])
    to_index = _parse_step_number(args[1])
    if from_index is None or to_index is None:
        return "Step numbers must be whole numbers."
    if from_index == to_index and 0 <= from_index < len(order):
        return "That step is already there."

    if not order.move_step(from_index, to_index):
        return f"Steps must be between 1 and {len(order)}."
    return f"Moved step {args[0]} to position {args[1]}."


def _cmd_note(game: Game, order: BuildOrder, args: list[str]) -> str:
    if len(args) < 2:
        return "Usage: note <n> <text>"
    index = _parse_step_number(args[0])
    if index is None or not order.set_notes(index, " ".join(args[1:])):
        return f"There is no step {args[0]}."
    return f"Noted step {args[0]}."


def _cmd_clear(game: Game, order: BuildOrder, args: list[str]) -> str:
    order.clear()
    return "Cleared all steps."


def _cmd_name(game: Game, order: BuildOrder, args: list[str]) -> str:
    order.set_name(" ".join(args))
    return f"Renamed to '{order.name}'."


def _cmd_list(game: Game, order: BuildOrder, args: list[str]) -> str:
    return render_build_order(order)


def _cmd_items(game: Game, order: BuildOrder, args: list[str]) -> str:
    return render_catalog(game)


def _cmd_total(game: Game, order: BuildOrder, args: list[str]) -> str:
    return render_totals(order)


def _cmd_help(game: Game, order: BuildOrder, args: list[str]) -> str:
    return HELP_TEXT


_VERB_DISPATCH: dict[str, Callable[[Game, BuildOrder, list[str]], str]] = {
    "add": _cmd_add,
    "remove": _cmd_remove,
    "rm": _cmd_remove,
    "move": _cmd_move,
    "mv": _cmd_move,
    "note": _cmd_note,
    "clear": _cmd_clear,
    "name": _cmd_name,
    "rename": _cmd_name,
    "list": _cmd_list,
    "show": _cmd_list,
    "items": _cmd_items,
    "catalog": _cmd_items,
    "total": _cmd_total,
    "help": _cmd_help,
}


def handle_command(game: Game, order: BuildOrder, raw_input: str) -> str:
    """Process a command and return the response text."""
    words = raw_input.strip().split()
    if not words:
        return "I beg your pardon?"

    verb = words[0].lower()
    handler = _VERB_DISPATCH.get(verb)
    if handler is None:
        return "I don't understand that command."
    return handler(game, order, words[1:])
