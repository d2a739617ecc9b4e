"""
Application context — owns the process-wide NameStore.

Usage::

    context = AppContext.create(AppConfig(db_path="~/.namestore/names.db"))
    window = MainWindow(context)

The context is built once at startup and passed by reference to whoever needs
the store; nothing looks it up globally.
"""

import logging
from dataclasses import dataclass, field

from namestore.store.db import NameStore

__all__ = ["AppConfig", "AppContext", "DEFAULT_DB_PATH"]

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = "~/.namestore/names.db"


@dataclass
class AppConfig:
    """Runtime configuration for the names application."""
    db_path:      str = DEFAULT_DB_PATH
    window_title: str = "Names"


@dataclass
class AppContext:
    """Application-lifetime objects shared by the CLI and the GUI."""
    config: AppConfig
    store:  NameStore = field(repr=False)

    @classmethod
    def create(cls, config: AppConfig) -> "AppContext":
        """
        Open (or create) the database named by *config*.

        Raises:
            StorageUnavailable: if the database cannot be opened.
        """
        logger.info("Opening name store at %s", config.db_path)
        return cls(config=config, store=NameStore(db_path=config.db_path))
