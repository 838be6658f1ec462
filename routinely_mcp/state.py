"""Application context shared by the MCP tools."""

from __future__ import annotations

import logging

from routinely_mcp.config import Settings, get_settings
from routinely_mcp.core.store import TaskStore
from routinely_mcp.utils.storage import JsonStateStorage

logger = logging.getLogger(__name__)


class AppContext:
    """
    Owns the task store and its storage.

    Tools mutate through ``store`` and then call ``commit()``, which writes
    tasks, history and streak together while holding the store's lock.
    """

    def __init__(self, storage: JsonStateStorage, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.storage = storage
        self.store = TaskStore(storage.load(), lookback_days=self.settings.streak_lookback_days)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> AppContext:
        settings = settings or get_settings()
        return cls(JsonStateStorage(settings.data_file), settings)

    def commit(self) -> None:
        with self.store.lock:
            self.storage.save(self.store.snapshot())


_context: AppContext | None = None


def get_context() -> AppContext:
    """Return the process-wide context, creating it from settings on first use."""
    global _context
    if _context is None:
        _context = AppContext.from_settings()
        logger.info("Routinely state ready at %s", _context.storage.path)
    return _context


def set_context(context: AppContext | None) -> None:
    """Install (or clear, with None) the process-wide context."""
    global _context
    _context = context
