"""Interactive console planner.

Reads commands line by line and prints the interpreter's replies. Log output
goes to stderr so it stays out of the transcript.
"""

import sys
from collections.abc import Callable
from typing import TextIO

from .config import Config
from .engine.commands import render_catalog
from .engine.loader import Catalog, load_catalogs
from .logging import configure_logging, get_logger
from .session import PlannerSession

logger = get_logger(__name__)

PROMPT = "> "
QUIT_WORDS = ("quit", "exit")


def run_console(
    catalog: Catalog,
    read_line: Callable[[str], str] = input,
    out: TextIO = sys.stdout,
) -> PlannerSession:
    """Run the command loop until quit or EOF and return the final session."""
    planner = PlannerSession(catalog)
    print(render_catalog(catalog.game), file=out)
    print("\nType 'help' for commands, 'quit' to leave.", file=out)

    while True:
        try:
            line = read_line(PROMPT)
        except EOFError:
            break
        if line.strip().lower() in QUIT_WORDS:
            break
        print(planner.process_command(line), file=out)

    print(f"\nFinal build order: {planner.order.name}", file=out)
    for step in planner.order.steps:
        print(f"  {step.step_number}. {step.item.name}", file=out)
    return planner


def main(argv: list[str] | None = None) -> int:
    """Entry point for gameplanner-console [game_id]."""
    argv = sys.argv[1:] if argv is None else argv
    config = Config.from_env()
    configure_logging(
        log_level=config.log_level,
        log_file=config.log_file,
        json_logs=config.json_logs,
        hash_fingerprints=config.hash_fingerprints,
        stream=sys.stderr,
    )

    catalogs = load_catalogs(config.catalog_dir)
    game_id = argv[0] if argv else config.default_game
    catalog = catalogs.get(game_id)
    if catalog is None:
        print(
            f"Unknown game '{game_id}'. Choose one of: {', '.join(sorted(catalogs))}",
            file=sys.stderr,
        )
        return 2

    logger.info("console_started", game=game_id)
    run_console(catalog)
    return 0
