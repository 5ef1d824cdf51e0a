"""Tests for planner sessions."""

from gameplanner.engine.build_order import BuildOrder
from gameplanner.engine.loader import Catalog
from gameplanner.session import PlannerSession, SessionStore


def test_new_session_order_named_after_game(chess: Catalog):
    planner = PlannerSession(chess)
    assert planner.order.name == "Chess build"
    assert len(planner.order) == 0


def test_process_command(chess: Catalog):
    planner = PlannerSession(chess)
    planner.process_command("add e4")
    planner.process_command("add e5")
    assert [s.item.id for s in planner.order.steps] == ["e4", "e5"]


def test_select_other_game_restarts_order(chess: Catalog, sc2: Catalog):
    planner = PlannerSession(chess)
    planner.process_command("add e4")
    planner.select(sc2)
    assert planner.game.id == "sc2"
    assert len(planner.order) == 0


def test_select_same_game_keeps_order(chess: Catalog):
    planner = PlannerSession(chess)
    planner.process_command("add e4")
    planner.select(chess)
    assert len(planner.order) == 1


def test_load_sample(chess: Catalog):
    planner = PlannerSession(chess)
    assert planner.load_sample("ruy_lopez")
    assert planner.order.name == "Ruy Lopez"
    assert len(planner.order) == 5
    assert not planner.load_sample("nope")
    assert planner.order.name == "Ruy Lopez"


def test_reset(chess: Catalog):
    planner = PlannerSession(chess)
    planner.load_sample("italian")
    planner.reset()
    assert len(planner.order) == 0
    assert planner.game.id == "chess"


def test_store_keeps_one_session_per_fingerprint(catalogs: dict[str, Catalog]):
    store = SessionStore(catalogs, "chess")
    first = store.get_or_create("alice")
    assert store.get_or_create("alice") is first
    assert store.get_or_create("bob") is not first
    assert len(store) == 2
    assert first.game.id == "chess"


def test_given_order_is_kept_even_when_empty(chess: Catalog):
    mine = BuildOrder("Mine")
    planner = PlannerSession(chess, order=mine)
    planner.process_command("add e4")
    assert planner.order is mine
    assert len(mine) == 1
