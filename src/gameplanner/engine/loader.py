"""Parse TOML catalog files into Game objects.

File layout:

    [game]
    id = "sc2"
    name = "StarCraft 2"
    description = "..."

    [[items]]
    id = "marine"
    name = "Marine"
    category = "Infantry"
    build_time = 18.0
    description = "..."
    costs = [{ name = "Minerals", amount = 50 }]

    [samples.reaper_expand]
    name = "Reaper Expand"
    steps = ["scv", "supply_depot", "barracks"]
"""

import tomllib
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path

from ..logging import get_logger
from .build_order import BuildOrder
from .catalog import Game, GameItem, Resource

logger = get_logger(__name__)


class CatalogError(ValueError):
    """A catalog file is missing data or holds values of the wrong type."""


@dataclass(frozen=True)
class Sample:
    """A named, pre-defined sequence of item ids."""

    id: str
    name: str
    steps: tuple[str, ...]


@dataclass
class Catalog:
    """A game together with its sample build orders."""

    game: Game
    samples: dict[str, Sample] = field(default_factory=dict)


def _get_data_dir():
    """Locate the packaged catalogs via importlib.resources."""
    return resources.files("gameplanner").joinpath("data")


def _require(table: dict, key: str, where: str):
    if key not in table:
        raise CatalogError(f"{where}: missing '{key}'")
    return table[key]


def _as_list(value, key: str, where: str) -> list:
    if not isinstance(value, list):
        raise CatalogError(f"{where}: '{key}' must be an array, got {value!r}")
    return value


def _as_table(value, key: str, where: str) -> dict:
    if not isinstance(value, dict):
        raise CatalogError(f"{where}: '{key}' must be a table, got {value!r}")
    return value


def _as_number(value, where: str) -> float:
    # bool is an int subclass; "true" is not a cost
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise CatalogError(f"{where}: expected a number, got {value!r}")
    return float(value)


def _parse_resource(raw: dict, where: str) -> Resource:
    raw = _as_table(raw, "costs", where)
    name = str(_require(raw, "name", where))
    amount = _as_number(_require(raw, "amount", where), f"{where} {name}")
    return Resource(name, amount)


def _parse_item(raw: dict, where: str) -> GameItem:
    raw = _as_table(raw, "items", where)
    item_id = str(_require(raw, "id", where))
    where = f"{where} item '{item_id}'"
    build_time = _as_number(raw.get("build_time", 0.0), where)
    if build_time < 0:
        raise CatalogError(f"{where}: build_time must not be negative")

    item = GameItem(
        id=item_id,
        name=str(raw.get("name", item_id)),
        category=str(raw.get("category", "")),
        build_time=build_time,
        description=str(raw.get("description", "")),
    )
    for cost in _as_list(raw.get("costs", []), "costs", where):
        item.add_cost(_parse_resource(cost, where))
    return item


def _parse_sample(sample_id: str, raw: dict, where: str) -> Sample:
    where = f"{where} sample '{sample_id}'"
    raw = _as_table(raw, "samples", where)
    # a bare string would otherwise be split into characters
    steps = _as_list(_require(raw, "steps", where), "steps", where)
    return Sample(
        id=sample_id,
        name=str(raw.get("name", sample_id)),
        steps=tuple(str(s) for s in steps),
    )


def parse_catalog(data: dict, where: str = "<catalog>") -> Catalog:
    """Build a Catalog from an already-decoded TOML document."""
    header = _as_table(_require(data, "game", where), "game", where)
    game = Game(
        id=str(_require(header, "id", where)),
        name=str(_require(header, "name", where)),
        description=str(header.get("description", "")),
    )
    for raw_item in _as_list(data.get("items", []), "items", where):
        game.add_item(_parse_item(raw_item, where))

    raw_samples = _as_table(data.get("samples", {}), "samples", where)
    samples = {
        sample_id: _parse_sample(sample_id, raw, where)
        for sample_id, raw in raw_samples.items()
    }
    return Catalog(game=game, samples=samples)


def load_game(path) -> Catalog:
    """Parse one catalog file."""
    with path.open("rb") as fh:
        try:
            data = tomllib.load(fh)
        except tomllib.TOMLDecodeError as exc:
            raise CatalogError(f"{path.name}: {exc}") from exc
    return parse_catalog(data, where=path.name)


def _catalog_files(directory) -> list:
    if not directory.is_dir():
        raise CatalogError(f"{directory}: not a directory")
    return sorted(
        (p for p in directory.iterdir() if p.name.endswith(".toml")),
        key=lambda p: p.name,
    )


def load_catalogs(extra_dir: Path | None = None) -> dict[str, Catalog]:
    """Load the packaged catalogs, then any from extra_dir.

    A catalog whose game id is already loaded replaces the earlier one.
    """
    directories = [_get_data_dir()]
    if extra_dir is not None:
        directories.append(extra_dir)

    catalogs: dict[str, Catalog] = {}
    for directory in directories:
        for path in _catalog_files(directory):
            catalog = load_game(path)
            if catalog.game.id in catalogs:
                logger.info("catalog_replaced", game=catalog.game.id, file=path.name)
            catalogs[catalog.game.id] = catalog
            logger.debug(
                "catalog_loaded",
                game=catalog.game.id,
                items=len(catalog.game.items),
                samples=len(catalog.samples),
            )
    return catalogs


def build_sample(catalog: Catalog, sample_id: str) -> BuildOrder | None:
    """Turn a sample into a BuildOrder, skipping ids the game lacks."""
    sample = catalog.samples.get(sample_id)
    if sample is None:
        return None

    order = BuildOrder(name=sample.name)
    for item_id in sample.steps:
        item = catalog.game.find_item(item_id)
        if item is None:
            logger.debug("sample_item_missing", sample=sample_id, item=item_id)
            continue
        order.add_step(item)
    return order
