"""Configuration for Game Planner.

Every setting can come from a GAMEPLANNER_* environment variable.
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "GAMEPLANNER_"

_TRUE_WORDS = ("true", "1", "yes", "on")
_FALSE_WORDS = ("false", "0", "no", "off")


def _env_path(env: Mapping[str, str], name: str) -> Path | None:
    value = env.get(ENV_PREFIX + name, "").strip()
    return Path(value).expanduser() if value else None


def _env_flag(env: Mapping[str, str], name: str, default: bool) -> bool:
    value = env.get(ENV_PREFIX + name, "").strip().lower()
    if not value:
        return default
    if value in _TRUE_WORDS:
        return True
    if value in _FALSE_WORDS:
        return False
    raise ValueError(f"{ENV_PREFIX}{name}: expected a yes/no value, got {value!r}")


def _env_port(env: Mapping[str, str], default: int) -> int:
    value = env.get(ENV_PREFIX + "PORT", "").strip()
    if not value:
        return default
    try:
        port = int(value)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}PORT: not a number: {value!r}") from None
    if not 0 < port < 65536:
        raise ValueError(f"{ENV_PREFIX}PORT: out of range: {port}")
    return port


@dataclass
class Config:
    """Server, catalog and logging settings."""

    host: str = "localhost"
    port: int = 1965
    certfile: Path | None = None
    keyfile: Path | None = None
    catalog_dir: Path | None = None
    default_game: str = "chess"
    log_level: str = "INFO"
    log_file: Path | None = None
    json_logs: bool = False
    hash_fingerprints: bool = True

    def __post_init__(self):
        self.log_level = self.log_level.upper()
        if self.log_level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {self.log_level}")
        if (self.certfile is None) != (self.keyfile is None):
            raise ValueError("certfile and keyfile must be given together")

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "Config":
        """Read settings from env, os.environ by default.

        Unset or blank variables keep the field default.
        """
        if env is None:
            env = os.environ

        def text(name: str, default: str) -> str:
            return env.get(ENV_PREFIX + name, "").strip() or default

        return cls(
            host=text("HOST", cls.host),
            port=_env_port(env, cls.port),
            certfile=_env_path(env, "CERTFILE"),
            keyfile=_env_path(env, "KEYFILE"),
            catalog_dir=_env_path(env, "CATALOG_DIR"),
            default_game=text("DEFAULT_GAME", cls.default_game),
            log_level=text("LOG_LEVEL", cls.log_level),
            log_file=_env_path(env, "LOG_FILE"),
            json_logs=_env_flag(env, "JSON_LOGS", cls.json_logs),
            hash_fingerprints=_env_flag(
                env, "HASH_FINGERPRINTS", cls.hash_fingerprints
            ),
        )

    def tls_files(self) -> dict[str, str | None]:
        """certfile/keyfile keyword arguments for Xitzin.run."""
        return {
            "certfile": str(self.certfile) if self.certfile else None,
            "keyfile": str(self.keyfile) if self.keyfile else None,
        }
