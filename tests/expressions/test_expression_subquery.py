"""Tests for SubqueryExpression: rendering, values and sealing of the nested statement."""

import pytest

from sqlchain import table
from sqlchain.errors import InvalidUsage
from sqlchain.expressions import ExpressionKind, SubqueryExpression


def _vip():
    return table("vip").select("uid").where("level > ?", 2)


def test_in_subquery_sql_and_values():
    expr = SubqueryExpression(fragment="uid", subquery=_vip())
    assert expr.sql == "uid in ( select uid from vip where ( level > ? ) )"
    assert expr.values == (2,)
    assert expr.kind is ExpressionKind.IN_SUBQUERY


def test_not_in_subquery_sql_and_values():
    expr = SubqueryExpression(fragment="uid", subquery=_vip(), negated=True)
    assert expr.sql == "uid not in ( select uid from vip where ( level > ? ) )"
    assert expr.values == (2,)
    assert expr.kind is ExpressionKind.NOT_IN_SUBQUERY


def test_subquery_values_keep_nested_order():
    nested = (
        table("orders o")
        .select("o.uid")
        .join("vip v")
        .on("v.uid = o.uid")
        .on("v.level = ?", 3)
        .where("o.amount > ?", 100)
        .limit(0, 50)
    )
    expr = SubqueryExpression(fragment="uid", subquery=nested)
    assert expr.values == (3, 100, 0, 50)


def test_subquery_is_kept_by_identity_and_sealed():
    nested = _vip()
    expr = SubqueryExpression(fragment="uid", subquery=nested)
    assert expr.subquery is nested
    assert nested.sealed
    with pytest.raises(InvalidUsage, match="embedded as a subquery"):
        nested.where("vip = ?", True)


def test_subquery_must_be_a_select():
    with pytest.raises(InvalidUsage, match="must be a select"):
        SubqueryExpression(fragment="uid", subquery=table("vip").update("level", 1))
    with pytest.raises(InvalidUsage, match="must be a select"):
        SubqueryExpression(fragment="uid", subquery=table("vip"))


def test_sealed_subquery_cannot_be_reused():
    nested = _vip()
    SubqueryExpression(fragment="uid", subquery=nested)
    with pytest.raises(InvalidUsage, match="already embedded"):
        SubqueryExpression(fragment="uid", subquery=nested, negated=True)


def test_subquery_column_cannot_hold_a_placeholder():
    nested = _vip()
    with pytest.raises(InvalidUsage, match="cannot contain"):
        SubqueryExpression(fragment="field(uid, ?)", subquery=nested)
    assert not nested.sealed
