"""Expression types for statement building.

Each expression renders one fragment of a WHERE, ON or SET clause. Every
expression has a ``.sql`` property (SQL fragment with ``?`` placeholders) and
``.values`` (tuple of bound values in the same order). ``SubqueryExpression``
nests a whole statement and splices its values in place.
"""

from ._bases import (
    ArgumentValue,
    ArgumentedExpression,
    Expression,
    ExpressionKind,
    collect_values,
    render_conjunction,
)
from .disjunction import AnyExpression
from .equality import EqualityExpression
from .membership import InExpression, NotInExpression
from .subquery import SubqueryExpression

__all__ = [
    "AnyExpression",
    "ArgumentValue",
    "ArgumentedExpression",
    "EqualityExpression",
    "Expression",
    "ExpressionKind",
    "InExpression",
    "NotInExpression",
    "SubqueryExpression",
    "collect_values",
    "render_conjunction",
]
