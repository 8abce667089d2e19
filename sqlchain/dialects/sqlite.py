"""SQLite dialect."""

import logging
import urllib.parse

from typing import ClassVar

from .base import Dialect

logger = logging.getLogger(__name__)


class SqliteDialect(Dialect):
    """Dialect for SQLite (scheme sqlite). sqlite3 uses ``?`` natively."""

    SUPPORTED_SCHEMA: ClassVar[tuple[str, ...]] = ("sqlite",)

    def connect(self, url: str):
        import sqlite3
        parsed = urllib.parse.urlparse(url)
        path = (parsed.path or "")[1:] or parsed.hostname
        logger.info("Connecting to SQLite database %s", path)
        return sqlite3.connect(path)
