"""Shared test fixtures for Game Planner."""

import pytest

from gameplanner.app import create_app
from gameplanner.config import Config
from gameplanner.engine.catalog import Game, GameItem, Resource
from gameplanner.engine.loader import Catalog, load_catalogs


@pytest.fixture
def catalogs() -> dict[str, Catalog]:
    return load_catalogs()


@pytest.fixture
def chess(catalogs: dict[str, Catalog]) -> Catalog:
    return catalogs["chess"]


@pytest.fixture
def sc2(catalogs: dict[str, Catalog]) -> Catalog:
    return catalogs["sc2"]


@pytest.fixture
def tiny_game() -> Game:
    """Four cheap items, a to d."""
    game = Game(id="tiny", name="Tiny")
    for n, item_id in enumerate("abcd", start=1):
        item = GameItem(id=item_id, name=item_id.upper(), category="Test")
        item.build_time = float(n)
        item.add_cost(Resource("Gold", 10 * n))
        game.add_item(item)
    return game


@pytest.fixture
def test_config() -> Config:
    return Config()


@pytest.fixture
def app(test_config: Config):
    return create_app(test_config)


@pytest.fixture
def client(app):
    from xitzin.testing import test_app

    with test_app(app) as client:
        yield client


@pytest.fixture
def auth_client(client):
    return client.with_certificate("test-fingerprint-abc123")
