"""Drivers that can run built statements.

Only engines that understand ``limit ?, ?`` pagination are registered;
each dialect turns the builder's ``?`` text into its driver's paramstyle.
"""

from .base import Dialect
from .sqlite import SqliteDialect
from .mysql import MysqlDialect

_DIALECTS_BY_SCHEME: dict[str, type[Dialect]] = {
    scheme: dialect_cls
    for dialect_cls in (SqliteDialect, MysqlDialect)
    for scheme in dialect_cls.SUPPORTED_SCHEMA
}


def get_dialect_for_scheme(scheme: str) -> Dialect:
    """Dialect for a URL scheme; a driver suffix is ignored (``mysql+pymysql`` is ``mysql``)."""
    base_scheme = (scheme or "").split("+")[0].lower()
    try:
        dialect_cls = _DIALECTS_BY_SCHEME[base_scheme]
    except KeyError as error:
        raise ValueError(f"Unsupported database scheme: {scheme}") from error
    return dialect_cls()


__all__ = [
    "Dialect",
    "SqliteDialect",
    "MysqlDialect",
    "get_dialect_for_scheme",
]
