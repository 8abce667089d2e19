"""Set membership against a nested SELECT statement."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import model_validator

from ..errors import InvalidUsage
from ..text import SQLText, require_no_placeholders
from ._bases import Expression, ExpressionKind

if TYPE_CHECKING:
    from ..statement import Statement


class SubqueryExpression(Expression):
    """``fragment in ( <subquery> )``, or ``not in`` when ``negated``.

    The subquery is owned by this expression: it is sealed on construction,
    so any later attempt to modify it, or to embed it a second time, raises
    ``InvalidUsage``. Its SQL and values are read when the outer statement
    is rendered.
    """

    KIND: ClassVar[ExpressionKind] = ExpressionKind.IN_SUBQUERY

    subquery: Statement
    negated: bool = False

    @model_validator(mode="after")
    def _seal_subquery(self):
        from ..statement import Mode

        require_no_placeholders(self.fragment, "column of a subquery filter")
        if self.subquery.mode is not Mode.SELECT:
            raise InvalidUsage(
                f"subquery for {self.fragment!r} must be a select statement, "
                f"got mode {self.subquery.mode.value!r}"
            )
        if self.subquery.sealed:
            raise InvalidUsage(
                f"subquery for {self.fragment!r} is already embedded in another statement"
            )
        self.subquery._seal()
        return self

    @property
    def kind(self) -> ExpressionKind:
        return ExpressionKind.NOT_IN_SUBQUERY if self.negated else ExpressionKind.IN_SUBQUERY

    @property
    def sql(self) -> str:
        operator = "not in" if self.negated else "in"
        return SQLText().write(self.fragment, operator).wrap(self.subquery.sql).result()

    @property
    def values(self) -> tuple[Any, ...]:
        """Exactly the subquery's values, in its own order."""
        return self.subquery.values
