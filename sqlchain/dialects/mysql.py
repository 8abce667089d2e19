"""MySQL dialect."""

import logging
import urllib.parse
from typing import ClassVar

from sqlchain.text import split_placeholders

from .base import Dialect

logger = logging.getLogger(__name__)


class MysqlDialect(Dialect):
    """Dialect for MySQL (scheme mysql), through pymysql's ``%s`` paramstyle."""

    SUPPORTED_SCHEMA: ClassVar[tuple[str, ...]] = ("mysql",)

    def connect(self, url: str):
        import pymysql  # pylint: disable=import-outside-toplevel,import-error
        parsed = urllib.parse.urlparse(url)
        logger.info("Connecting to MySQL database %s on %s", parsed.path[1:], parsed.hostname)
        return pymysql.connect(
            host=parsed.hostname,
            user=parsed.username,
            password=parsed.password,
            database=(parsed.path or "")[1:] or None,
            port=parsed.port or 3306,
        )

    def adapt(self, sql: str) -> str:
        """``?`` becomes ``%s``; literal ``%`` is doubled since pymysql %-formats the query."""
        return "%s".join(part.replace("%", "%%") for part in split_placeholders(sql))
