"""Xitzin application factory for Game Planner."""

from pathlib import Path

from xitzin import Xitzin

from .config import Config
from .engine.loader import Catalog, CatalogError, load_catalogs
from .logging import get_logger
from .session import SessionStore

logger = get_logger(__name__)


def choose_default_game(catalogs: dict[str, Catalog], requested: str) -> str:
    """The requested game id, or the first loaded one if it is missing."""
    if not catalogs:
        raise CatalogError("no catalogs loaded; nothing to plan")
    if requested in catalogs:
        return requested
    fallback = next(iter(catalogs))
    logger.warning("default_game_missing", requested=requested, using=fallback)
    return fallback


def create_app(config: Config | None = None) -> Xitzin:
    """Create and configure the Xitzin application."""
    config = config or Config.from_env()

    templates_dir = Path(__file__).parent / "templates"

    app = Xitzin(
        title="Game Planner",
        version="0.1.0",
        templates_dir=templates_dir,
    )
    app.state.config = config

    @app.on_startup
    async def startup():
        """Load catalogs and prepare the session store."""
        catalogs = load_catalogs(config.catalog_dir)
        default_game = choose_default_game(catalogs, config.default_game)

        app.state.catalogs = catalogs
        app.state.sessions = SessionStore(catalogs, default_game)
        logger.info(
            "catalogs_loaded",
            games=sorted(catalogs),
            items=sum(len(c.game.items) for c in catalogs.values()),
        )
        logger.info("startup_complete")

    from .routes import home, plan

    home.register_routes(app)
    plan.register_routes(app)

    return app
