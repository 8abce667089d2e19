"""Table references and joins."""

from __future__ import annotations

import enum
from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator

from .errors import InvalidUsage
from .expressions import Expression, collect_values, render_conjunction
from .text import SQLText, require_no_placeholders


class TableReference(BaseModel):
    """A table name with an optional alias (e.g. ``m_shop m``)."""

    model_config = {"frozen": True}

    name: str
    alias: Optional[str] = None

    @model_validator(mode="after")
    def _check_no_placeholders(self):
        require_no_placeholders(self.name, "table name")
        require_no_placeholders(self.alias or "", "table alias")
        return self

    @classmethod
    def parse(cls, text: str) -> TableReference:
        """Build from ``"name"``, ``"name alias"`` or ``"name as alias"``."""
        tokens = text.split()
        if len(tokens) == 3 and tokens[1].lower() == "as":
            tokens = [tokens[0], tokens[2]]
        if not tokens or len(tokens) > 2:
            raise InvalidUsage(f"Cannot read a table reference from {text!r}")
        return cls(name=tokens[0], alias=tokens[1] if len(tokens) == 2 else None)

    @property
    def sql(self) -> str:
        return SQLText().write(self.name, self.alias or "").result()


class JoinKind(enum.Enum):
    INNER = "inner"
    LEFT = "left"
    RIGHT = "right"


class Join(BaseModel):
    """A joined table and the ON expressions qualifying it.

    A join without any ON expression renders to nothing and binds nothing.
    """

    model_config = {"arbitrary_types_allowed": True}

    kind: JoinKind = JoinKind.INNER
    table: TableReference
    on_expressions: list[Expression] = Field(default_factory=list)

    @property
    def is_qualified(self) -> bool:
        return bool(self.on_expressions)

    @property
    def sql(self) -> str:
        if not self.is_qualified:
            return ""
        return (
            SQLText()
            .write(self.kind.value, "join", self.table.sql, "on")
            .write(render_conjunction(self.on_expressions))
            .result()
        )

    @property
    def values(self) -> tuple[Any, ...]:
        if not self.is_qualified:
            return ()
        return collect_values(self.on_expressions)
