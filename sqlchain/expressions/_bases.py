"""Base expression types for WHERE, ON and SET fragments."""

from __future__ import annotations

import datetime
import enum
from decimal import Decimal
from typing import Any, ClassVar, Iterable, Optional, Tuple, Union

from pydantic import BaseModel, Field as PydanticField

from ..text import SQLText

ArgumentValue = Optional[
    Union[
        bool,
        int,
        float,
        Decimal,
        str,
        bytes,
        datetime.datetime,
        datetime.date,
        datetime.time,
    ]
]
"""Values that may be bound to a ``?`` placeholder."""


class ExpressionKind(enum.Enum):
    EQUALITY = "equality"
    IN = "in"
    NOT_IN = "not_in"
    IN_SUBQUERY = "in_subquery"
    NOT_IN_SUBQUERY = "not_in_subquery"
    ANY = "any"


class Expression(BaseModel):
    """Base type for all expression nodes.

    Subclasses must implement the ``sql`` property. The default ``values``
    is an empty tuple; expression types that bind literals override it
    to return the bound values in the same order as ``?`` placeholders in ``sql``.
    """

    model_config = {"arbitrary_types_allowed": True}

    KIND: ClassVar[ExpressionKind]

    fragment: str = ""
    """Caller-supplied SQL text (a comparison, or a column name), trusted verbatim."""

    @property
    def kind(self) -> ExpressionKind:
        return self.KIND

    @property
    def sql(self) -> str:
        """SQL fragment for this expression, with ``?`` for bound parameters."""
        raise NotImplementedError("Subclasses must implement `sql` property")

    @property
    def values(self) -> tuple[Any, ...]:
        """Bound values for placeholders in ``sql``, in order."""
        return ()


class ArgumentedExpression(Expression):
    """Base for expressions carrying literal arguments of their own."""

    arguments: Tuple[ArgumentValue, ...] = PydanticField(default_factory=tuple)

    @property
    def values(self) -> tuple[Any, ...]:
        return tuple(self.arguments)


def render_conjunction(expressions: Iterable[Expression]) -> str:
    """Render ``( e1 ) and ( e2 ) ...``; empty string for no expressions."""
    text = SQLText()
    for i, expression in enumerate(expressions):
        if i:
            text.write("and")
        text.wrap(expression.sql)
    return text.result()


def collect_values(expressions: Iterable[Expression]) -> tuple[Any, ...]:
    """Concatenate ``values`` of each expression, in order."""
    return sum((expression.values for expression in expressions), ())
