"""Tests for sqlchain.expressions: base Expression, EqualityExpression and rendering helpers."""

import datetime

import pytest

from sqlchain.errors import InvalidUsage
from sqlchain.expressions import (
    EqualityExpression,
    Expression,
    ExpressionKind,
    collect_values,
    render_conjunction,
)


def test_expression_base_sql_raises():
    expr = Expression.model_construct()
    with pytest.raises(NotImplementedError, match="sql"):
        _ = expr.sql


def test_expression_base_values_empty():
    expr = Expression.model_construct()
    assert expr.values == ()


def test_equality_expression_sql_and_values():
    expr = EqualityExpression(fragment="id = ?", arguments=(1,))
    assert expr.sql == "id = ?"
    assert expr.values == (1,)
    assert expr.kind is ExpressionKind.EQUALITY


def test_equality_expression_without_arguments():
    expr = EqualityExpression(fragment="s.mid = m.id")
    assert expr.sql == "s.mid = m.id"
    assert expr.values == ()


def test_equality_expression_keeps_argument_order():
    expr = EqualityExpression(fragment="a between ? and ?", arguments=(10, 20))
    assert expr.values == (10, 20)


def test_equality_expression_keeps_argument_types():
    when = datetime.datetime(2024, 5, 1, 12, 30)
    expr = EqualityExpression(
        fragment="a = ? and b = ? and c = ? and d = ? and e = ?",
        arguments=(True, 1, "1", when, None),
    )
    assert expr.values[0] is True
    assert type(expr.values[1]) is int
    assert expr.values[2] == "1"
    assert expr.values[3] == when
    assert expr.values[4] is None


def test_equality_expression_placeholder_mismatch_raises():
    with pytest.raises(InvalidUsage, match="1 placeholder"):
        EqualityExpression(fragment="id = ?")
    with pytest.raises(InvalidUsage, match="0 placeholder"):
        EqualityExpression(fragment="id = 1", arguments=(1,))


def test_equality_expression_quoted_question_mark_is_not_a_placeholder():
    expr = EqualityExpression(fragment="note = '?' and id = ?", arguments=(7,))
    assert expr.values == (7,)


def test_render_conjunction():
    first = EqualityExpression(fragment="a = ?", arguments=(1,))
    second = EqualityExpression(fragment="b = c")
    assert render_conjunction([first, second]) == "( a = ? ) and ( b = c )"
    assert render_conjunction([first]) == "( a = ? )"
    assert render_conjunction([]) == ""


def test_collect_values_in_order():
    first = EqualityExpression(fragment="a = ? and b = ?", arguments=(1, 2))
    second = EqualityExpression(fragment="c = ?", arguments=(3,))
    assert collect_values([first, second]) == (1, 2, 3)
    assert collect_values([]) == ()
