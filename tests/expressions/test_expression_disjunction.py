"""Tests for AnyExpression (OR groups)."""

import pytest

from sqlchain import table
from sqlchain.errors import InvalidUsage
from sqlchain.expressions import (
    AnyExpression,
    EqualityExpression,
    ExpressionKind,
    InExpression,
    SubqueryExpression,
)


def test_any_expression_joins_members_with_or():
    expr = AnyExpression(
        expressions=(
            EqualityExpression(fragment="state = ?", arguments=(1,)),
            EqualityExpression(fragment="closed is null"),
            InExpression(fragment="city", arguments=("a", "b")),
        )
    )
    assert expr.sql == "state = ? or closed is null or city in (?, ?)"
    assert expr.values == (1, "a", "b")
    assert expr.kind is ExpressionKind.ANY


def test_any_expression_with_subquery_member():
    nested = table("vip").select("uid").where("level > ?", 2)
    expr = AnyExpression(
        expressions=(
            SubqueryExpression(fragment="uid", subquery=nested),
            EqualityExpression(fragment="uid = ?", arguments=(9,)),
        )
    )
    assert expr.sql == "uid in ( select uid from vip where ( level > ? ) ) or uid = ?"
    assert expr.values == (2, 9)


def test_any_expression_empty_raises():
    with pytest.raises(InvalidUsage, match="at least one"):
        AnyExpression(expressions=())
