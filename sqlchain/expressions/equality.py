"""Raw comparison or assignment fragment."""

from typing import ClassVar

from pydantic import model_validator

from ..errors import InvalidUsage
from ..text import count_placeholders
from ._bases import ArgumentedExpression, ExpressionKind


class EqualityExpression(ArgumentedExpression):
    """Fragment emitted verbatim (e.g. ``id = ?``) with its arguments in call order.

    The fragment must contain exactly one ``?`` per argument; placeholders
    inside quoted literals are not counted.
    """

    KIND: ClassVar[ExpressionKind] = ExpressionKind.EQUALITY

    @model_validator(mode="after")
    def _check_placeholders(self):
        expected = count_placeholders(self.fragment)
        if expected != len(self.arguments):
            raise InvalidUsage(
                f"{self.fragment!r} has {expected} placeholder(s) "
                f"but {len(self.arguments)} argument(s) were given"
            )
        return self

    @property
    def sql(self) -> str:
        return self.fragment
