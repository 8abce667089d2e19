"""Named database URLs and one-shot execution of built statements."""

from __future__ import annotations

import logging
import urllib.parse
from typing import Any, Callable

from .dialects import Dialect, get_dialect_for_scheme
from .statement import Mode, Statement

logger = logging.getLogger(__name__)

_urls: dict[str, str | Callable[[], str]] = {}


def connect(database_url: str | Callable[[], str], name: str = "default") -> None:
    """Register a database URL (or a method returning one) under ``name``."""
    if not isinstance(database_url, str) and not callable(database_url):
        raise ValueError("database_url must be a str, or a method returning a str")
    _urls[name] = database_url


def _get_url(name: str = "default") -> str:
    try:
        url = _urls[name]
    except KeyError as error:
        raise ValueError(f"No connection configured with name=`{name}`") from error
    if callable(url):
        url = url()
    return url


def _resolve(name: str = "default") -> tuple[Dialect, str]:
    """Return the dialect and the URL registered under ``name``."""
    url = _get_url(name)
    return get_dialect_for_scheme(urllib.parse.urlparse(url).scheme), url


def _get_connection(name: str = "default"):
    dialect, url = _resolve(name)
    return dialect.connect(url)


def execute(statement: Statement, name: str = "default", rows_as_dicts: bool = False) -> Any:
    """Run ``statement`` on a fresh connection to the database registered as ``name``.

    Args:
        statement: A select or update statement.
        name: Connection name given to connect().
        rows_as_dicts: For selects, return dicts keyed by column name instead of tuples.

    Returns:
        List of rows for a select; number of affected rows for an update (committed).
    """
    sql, values = statement.build()
    dialect, url = _resolve(name)
    connection = dialect.connect(url)
    try:
        cursor = connection.cursor()
        logger.debug("Executing on %s: %s %r", name, sql, values)
        cursor.execute(dialect.adapt(sql), values)
        if statement.mode is Mode.UPDATE:
            connection.commit()
            return cursor.rowcount
        rows = cursor.fetchall()
        if rows_as_dicts:
            columns = [description[0] for description in cursor.description]
            return [dict(zip(columns, row)) for row in rows]
        return list(rows)
    finally:
        connection.close()
