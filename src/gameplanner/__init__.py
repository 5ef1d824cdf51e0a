"""Build order planning for strategy games, served over Gemini."""

from .app import create_app
from .config import Config
from .logging import configure_logging, get_logger

__all__ = ["main", "create_app", "Config"]


def main() -> None:
    """Start the Gemini server with settings from the environment."""
    config = Config.from_env()
    configure_logging(
        log_level=config.log_level,
        log_file=config.log_file,
        json_logs=config.json_logs,
        hash_fingerprints=config.hash_fingerprints,
    )

    get_logger(__name__).info(
        "planner_starting",
        address=f"{config.host}:{config.port}",
        default_game=config.default_game,
        extra_catalogs=str(config.catalog_dir) if config.catalog_dir else None,
        tls=config.certfile is not None,
    )
    create_app(config).run(host=config.host, port=config.port, **config.tls_files())
