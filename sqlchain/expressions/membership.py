"""Set membership against literal values: ``column in (?, ?, ...)``."""

from typing import ClassVar

from pydantic import model_validator

from ..errors import InvalidUsage
from ..text import SQLText, require_no_placeholders
from ._bases import ArgumentedExpression, ExpressionKind


class InExpression(ArgumentedExpression):
    """``fragment in (?, ?, ...)`` with one placeholder per argument."""

    KIND: ClassVar[ExpressionKind] = ExpressionKind.IN
    OPERATOR: ClassVar[str] = "in"

    @model_validator(mode="after")
    def _check_fragment(self):
        require_no_placeholders(self.fragment, f"column of an {self.OPERATOR!r} filter")
        if not self.arguments:
            raise InvalidUsage(f"{self.OPERATOR} list for {self.fragment!r} cannot be empty")
        return self

    @property
    def sql(self) -> str:
        placeholders = ", ".join("?" for _ in self.arguments)
        return SQLText().write(self.fragment, self.OPERATOR, f"({placeholders})").result()


class NotInExpression(InExpression):
    """``fragment not in (?, ?, ...)``."""

    KIND: ClassVar[ExpressionKind] = ExpressionKind.NOT_IN
    OPERATOR: ClassVar[str] = "not in"
