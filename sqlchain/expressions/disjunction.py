"""OR-group of expressions."""

from typing import Any, ClassVar, Tuple

from pydantic import model_validator

from ..errors import InvalidUsage
from ..text import SQLText
from ._bases import Expression, ExpressionKind, collect_values


class AnyExpression(Expression):
    """``e1 or e2 or ...``; the enclosing clause adds the parentheses."""

    KIND: ClassVar[ExpressionKind] = ExpressionKind.ANY

    expressions: Tuple[Expression, ...]

    @model_validator(mode="after")
    def _check_not_empty(self):
        if not self.expressions:
            raise InvalidUsage("an OR group needs at least one expression")
        return self

    @property
    def sql(self) -> str:
        text = SQLText()
        for i, expression in enumerate(self.expressions):
            if i:
                text.write("or")
            text.write(expression.sql)
        return text.result()

    @property
    def values(self) -> tuple[Any, ...]:
        return collect_values(self.expressions)
