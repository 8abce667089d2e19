"""sqlchain: chainable SELECT/UPDATE builder emitting ``?`` SQL and matching values."""

from .errors import InvalidUsage, SQLChainError, UnsupportedOperation
from .expressions import (
    AnyExpression,
    EqualityExpression,
    Expression,
    ExpressionKind,
    InExpression,
    NotInExpression,
    SubqueryExpression,
)
from .reference import Join, JoinKind, TableReference
from .statement import Mode, Statement, table
from .text import SQLText
from .connection import connect, execute

__all__ = [
    "AnyExpression",
    "EqualityExpression",
    "Expression",
    "ExpressionKind",
    "InExpression",
    "InvalidUsage",
    "Join",
    "JoinKind",
    "Mode",
    "NotInExpression",
    "SQLChainError",
    "SQLText",
    "Statement",
    "SubqueryExpression",
    "TableReference",
    "UnsupportedOperation",
    "connect",
    "execute",
    "table",
]
