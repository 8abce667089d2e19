"""What execute() needs from a database engine."""

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from pydantic import BaseModel


class Dialect(BaseModel, ABC):
    """Opens driver connections and adapts statement text for one engine.

    Statements always render ``?`` placeholders; ``adapt`` rewrites them for
    drivers using another paramstyle, leaving the value tuple untouched.
    """

    SUPPORTED_SCHEMA: ClassVar[tuple[str, ...]] = ()
    """Base URL schemes routed to this dialect."""

    @abstractmethod
    def connect(self, url: str) -> Any:
        """Open a DB-API connection for ``url``; execute() closes it."""

    def adapt(self, sql: str) -> str:
        return sql
