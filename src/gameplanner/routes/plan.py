"""Build order planning routes."""

from contextlib import contextmanager

import structlog
from xitzin import Redirect, Request, Xitzin
from xitzin.auth import get_identity, require_certificate

from ..engine.commands import format_costs
from ..session import PlannerSession


@contextmanager
def _planner_session(request: Request):
    """Look up the caller's session, logging under its fingerprint."""
    identity = get_identity(request)
    with structlog.contextvars.bound_contextvars(fingerprint=identity.fingerprint):
        yield request.app.state.sessions.get_or_create(identity.fingerprint)


def _parse_number(number: str) -> int | None:
    """1-based step number from a path segment, as a list index."""
    try:
        return int(number) - 1
    except ValueError:
        return None


def _render_plan(app: Xitzin, planner: PlannerSession, message: str = ""):
    """Render the build order view."""
    order = planner.order
    return app.template(
        "plan.gmi",
        game=planner.game,
        order_name=order.name,
        steps=order.steps,
        last_index=len(order) - 1,
        items=planner.game.items,
        samples=list(planner.catalog.samples.values()),
        total_time=order.total_time(),
        total_cost=format_costs(order.total_costs()),
        message=message,
    )


def _register_edit_routes(app: Xitzin) -> None:
    """Register routes that change the order's steps."""

    @app.gemini("/add/{item_id}", name="add")
    @require_certificate
    def add(request: Request, item_id: str):
        with _planner_session(request) as planner:
            item = planner.game.find_item(item_id)
            if item is None:
                return _render_plan(app, planner, message=f"No item '{item_id}'.")
            step = planner.order.add_step(item)
            return _render_plan(
                app, planner, message=f"Added step {step.step_number}: {item.name}."
            )

    @app.gemini("/remove/{number}", name="remove")
    @require_certificate
    def remove(request: Request, number: str):
        with _planner_session(request) as planner:
            index = _parse_number(number)
            if index is None or not planner.order.remove_step(index):
                return _render_plan(
                    app, planner, message=f"There is no step {number}."
                )
            return _render_plan(app, planner, message=f"Removed step {number}.")

    @app.gemini("/up/{number}", name="up")
    @require_certificate
    def up(request: Request, number: str):
        """Swap a step with the one before it."""
        with _planner_session(request) as planner:
            index = _parse_number(number)
            if index is None or not planner.order.move_step(index, index - 1):
                message = "That step can't move up."
                return _render_plan(app, planner, message=message)
            return _render_plan(app, planner)

    @app.gemini("/down/{number}", name="down")
    @require_certificate
    def down(request: Request, number: str):
        """Swap a step with the one after it."""
        with _planner_session(request) as planner:
            index = _parse_number(number)
            if index is None or not planner.order.move_step(index, index + 1):
                message = "That step can't move down."
                return _render_plan(app, planner, message=message)
            return _render_plan(app, planner)

    @app.input("/cmd", prompt="Command (try 'help'):", name="cmd")
    @require_certificate
    def cmd(request: Request, query: str):
        """Freeform command entry."""
        with _planner_session(request) as planner:
            message = planner.process_command(query)
            return _render_plan(app, planner, message=message)

    @app.input(
        "/clear",
        prompt="Remove every step? Type YES to confirm:",
        name="clear",
    )
    @require_certificate
    def clear(request: Request, query: str):
        with _planner_session(request) as planner:
            if query.strip().upper() == "YES":
                planner.order.clear()
                return _render_plan(app, planner, message="Cleared all steps.")
            return Redirect("/plan")


def _register_plan_routes(app: Xitzin) -> None:
    """Register plan view, game selection and naming routes."""

    @app.gemini("/plan", name="plan")
    @require_certificate
    def plan(request: Request):
        """Main build order view."""
        with _planner_session(request) as planner:
            return _render_plan(app, planner)

    @app.gemini("/select/{game_id}", name="select")
    @require_certificate
    def select(request: Request, game_id: str):
        catalog = request.app.state.catalogs.get(game_id)
        if catalog is None:
            return app.template("missing.gmi", what=f"game '{game_id}'")
        with _planner_session(request) as planner:
            planner.select(catalog)
            return _render_plan(
                app, planner, message=f"Planning for {catalog.game.name}."
            )

    @app.gemini("/sample/{sample_id}", name="sample")
    @require_certificate
    def sample(request: Request, sample_id: str):
        """Replace the current order with one of the game's samples."""
        with _planner_session(request) as planner:
            if not planner.load_sample(sample_id):
                return _render_plan(
                    app, planner, message=f"No sample '{sample_id}'."
                )
            return _render_plan(
                app, planner, message=f"Loaded sample {planner.order.name}."
            )

    @app.input("/rename", prompt="New build order name:", name="rename")
    @require_certificate
    def rename(request: Request, query: str):
        with _planner_session(request) as planner:
            planner.order.set_name(query.strip())
            message = f"Renamed to '{planner.order.name}'."
            return _render_plan(app, planner, message=message)


def register_routes(app: Xitzin) -> None:
    """Register planning routes."""
    _register_plan_routes(app)
    _register_edit_routes(app)
