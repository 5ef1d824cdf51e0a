"""Per-user planning sessions, held in memory only."""

from .engine.build_order import BuildOrder
from .engine.commands import handle_command
from .engine.loader import Catalog, build_sample
from .logging import get_logger

logger = get_logger(__name__)


class PlannerSession:
    """Wraps the selected Catalog and the BuildOrder being assembled."""

    def __init__(self, catalog: Catalog, order: BuildOrder | None = None):
        self.catalog = catalog
        if order is None:
            order = BuildOrder(name=f"{catalog.game.name} build")
        self.order = order

    @property
    def game(self):
        return self.catalog.game

    def process_command(self, raw_input: str) -> str:
        """Delegate to the command interpreter and return response text."""
        return handle_command(self.game, self.order, raw_input)

    def select(self, catalog: Catalog) -> None:
        """Switch games. Items belong to one catalog, so the order restarts."""
        if catalog.game.id == self.game.id:
            return
        self.catalog = catalog
        self.order = BuildOrder(name=f"{catalog.game.name} build")
        logger.info("game_selected", game=catalog.game.id)

    def load_sample(self, sample_id: str) -> bool:
        """Replace the current order with a sample. False if unknown."""
        order = build_sample(self.catalog, sample_id)
        if order is None:
            return False
        self.order = order
        logger.info("sample_loaded", game=self.game.id, sample=sample_id)
        return True

    def reset(self) -> None:
        """Start over with an empty order for the same game."""
        self.order = BuildOrder(name=f"{self.game.name} build")
        logger.info("session_reset", game=self.game.id)


class SessionStore:
    """Maps client certificate fingerprints to their sessions.

    Nothing is persisted; sessions are lost when the process exits.
    """

    def __init__(self, catalogs: dict[str, Catalog], default_game: str):
        self.catalogs = catalogs
        self.default_game = default_game
        self._sessions: dict[str, PlannerSession] = {}

    def get_or_create(self, fingerprint: str) -> PlannerSession:
        session = self._sessions.get(fingerprint)
        if session is None:
            session = PlannerSession(self.catalogs[self.default_game])
            self._sessions[fingerprint] = session
            logger.info("session_created", fingerprint=fingerprint)
        else:
            logger.debug("session_accessed", fingerprint=fingerprint)
        return session

    def __len__(self) -> int:
        return len(self._sessions)
