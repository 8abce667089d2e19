"""Chainable SELECT/UPDATE statement builder.

A ``Statement`` is bound to a table and mutated in place through chained
calls; ``sql`` renders the statement text with ``?`` placeholders and
``values`` renders the matching arguments. Both walk the builder state in the
same order, so the i-th placeholder is always bound to ``values[i]``, including
placeholders spliced in from nested subqueries.
"""

from __future__ import annotations

import enum
import logging
from typing import Any, ClassVar, Iterable, Mapping, Optional

from pydantic import BaseModel, Field, PrivateAttr, ValidationError

from .errors import InvalidUsage, UnsupportedOperation
from .expressions import (
    AnyExpression,
    ArgumentValue,
    EqualityExpression,
    Expression,
    InExpression,
    NotInExpression,
    SubqueryExpression,
    collect_values,
    render_conjunction,
)
from .reference import Join, JoinKind, TableReference
from .text import SQLText, require_no_placeholders

logger = logging.getLogger("sqlchain")


class Mode(enum.Enum):
    UNSET = "unset"
    SELECT = "select"
    UPDATE = "update"


def _build(expression_type: type[Expression], **data: Any) -> Expression:
    """Instantiate an expression, reporting bad arguments as ``InvalidUsage``."""
    try:
        return expression_type(**data)
    except ValidationError as error:
        raise InvalidUsage(f"Invalid {expression_type.__name__}: {error}") from error


def _as_expression(condition: str | Expression, arguments: tuple[Any, ...]) -> Expression:
    if isinstance(condition, Expression):
        if arguments:
            raise InvalidUsage("Arguments cannot be given alongside an Expression instance")
        return condition
    if not condition.strip():
        raise InvalidUsage("A condition cannot be an empty fragment")
    return _build(EqualityExpression, fragment=condition, arguments=arguments)


def _check_columns(columns: tuple[str, ...], role: str) -> None:
    for column in columns:
        require_no_placeholders(column, role)


class Statement(BaseModel):
    """Builder for one SELECT or UPDATE statement.

    Every mutating method returns the statement itself. Rendering reads the
    current state and is not cached: once ``sql``/``values`` have been read,
    further mutation changes what the next read returns, so callers should stop
    mutating a statement they have rendered. A statement embedded as a subquery
    is sealed and rejects mutation.

    Not thread-safe; build each statement from a single call chain.
    """

    model_config = {"arbitrary_types_allowed": True}

    RENDERERS: ClassVar[dict[Mode, tuple[str, str]]] = {
        Mode.SELECT: ("_select_sql", "_select_values"),
        Mode.UPDATE: ("_update_sql", "_update_values"),
    }
    """Mode -> (sql method, values method); both must walk state in the same order."""

    mode: Mode = Mode.UNSET
    target: Optional[TableReference] = None
    joins: list[Join] = Field(default_factory=list)
    current_join: Optional[int] = None
    """Index in ``joins`` that ``on()`` appends to."""
    where_expressions: list[Expression] = Field(default_factory=list)
    """Top-level filters, ANDed together."""
    select_columns: list[str] = Field(default_factory=list)
    set_expressions: list[EqualityExpression] = Field(default_factory=list)
    group_by_columns: list[str] = Field(default_factory=list)
    order_by_columns: list[str] = Field(default_factory=list)
    offset_value: Optional[int] = None
    limit_value: Optional[int] = None

    _sealed: bool = PrivateAttr(default=False)

    # --- state transitions ---

    def _check_mutable(self) -> None:
        if self._sealed:
            raise InvalidUsage("Statement is embedded as a subquery and can no longer be modified")

    def _seal(self) -> None:
        self._sealed = True

    @property
    def sealed(self) -> bool:
        return self._sealed

    def _transition(self, mode: Mode) -> None:
        if self.mode is not Mode.UNSET and self.mode is not mode:
            logger.debug("Statement switches from %s to %s", self.mode.value, mode.value)
        self.mode = mode

    # --- table and joins ---

    def table(self, name: str, alias: Optional[str] = None) -> Statement:
        """Bind the target table (``"shop"``, ``"m_shop m"``, or name plus ``alias``).

        Binding again replaces the previous target.
        """
        self._check_mutable()
        reference = TableReference.parse(name) if alias is None else TableReference(name=name, alias=alias)
        if self.target is not None:
            logger.debug("Rebinding statement from %s to %s", self.target.sql, reference.sql)
        self.target = reference
        return self

    def join(self, table: str, alias: Optional[str] = None, kind: JoinKind = JoinKind.INNER) -> Statement:
        """Add a join; following ``on()`` calls qualify it.

        A join that never receives an ON expression is left out of the statement.
        """
        self._check_mutable()
        reference = TableReference.parse(table) if alias is None else TableReference(name=table, alias=alias)
        self.joins.append(Join(kind=kind, table=reference))
        self.current_join = len(self.joins) - 1
        return self

    def left_join(self, table: str, alias: Optional[str] = None) -> Statement:
        return self.join(table, alias, kind=JoinKind.LEFT)

    def right_join(self, table: str, alias: Optional[str] = None) -> Statement:
        return self.join(table, alias, kind=JoinKind.RIGHT)

    def on(self, condition: str | Expression, *arguments: ArgumentValue) -> Statement:
        """Append an ON expression to the most recently added join."""
        self._check_mutable()
        if self.current_join is None:
            raise InvalidUsage("on() requires a preceding join()")
        expression = _as_expression(condition, arguments)
        self.joins[self.current_join].on_expressions.append(expression)
        return self

    def if_on(self, ok: bool, condition: str | Expression, *arguments: ArgumentValue) -> Statement:
        """``on()`` when ``ok`` is true, otherwise leave the statement untouched."""
        if not ok:
            return self
        return self.on(condition, *arguments)

    # --- filters ---

    def where(self, condition: str | Expression, *arguments: ArgumentValue) -> Statement:
        """Add a top-level filter, e.g. ``where("id = ?", 1)``.

        All top-level filters are ANDed, each one in its own parentheses.
        """
        self._check_mutable()
        self.where_expressions.append(_as_expression(condition, arguments))
        return self

    def if_where(self, ok: bool, condition: str | Expression, *arguments: ArgumentValue) -> Statement:
        if not ok:
            return self
        return self.where(condition, *arguments)

    def and_(self, condition: str | Expression, *arguments: ArgumentValue) -> Statement:
        """Alias for where(), reads better in the middle of a chain."""
        return self.where(condition, *arguments)

    def if_and(self, ok: bool, condition: str | Expression, *arguments: ArgumentValue) -> Statement:
        return self.if_where(ok, condition, *arguments)

    def where_or(self, *conditions: str | tuple | Expression) -> Statement:
        """Add one filter made of alternatives: ``where_or(("a = ?", 1), "b is null")``.

        Each condition is a fragment, a ``(fragment, *arguments)`` tuple, or an Expression.
        """
        self._check_mutable()
        members = []
        for condition in conditions:
            if isinstance(condition, tuple):
                if not condition:
                    raise InvalidUsage("where_or() conditions cannot be empty tuples")
                members.append(_as_expression(condition[0], condition[1:]))
            else:
                members.append(_as_expression(condition, ()))
        self.where_expressions.append(_build(AnyExpression, expressions=tuple(members)))
        return self

    def where_in(self, column: str, values: Iterable[ArgumentValue]) -> Statement:
        self._check_mutable()
        self.where_expressions.append(_build(InExpression, fragment=column, arguments=tuple(values)))
        return self

    def where_not_in(self, column: str, values: Iterable[ArgumentValue]) -> Statement:
        self._check_mutable()
        self.where_expressions.append(_build(NotInExpression, fragment=column, arguments=tuple(values)))
        return self

    def where_in_subquery(self, column: str, subquery: Statement) -> Statement:
        """Filter on ``column in ( <subquery> )``; ``subquery`` is sealed from then on."""
        return self._where_subquery(column, subquery, negated=False)

    def where_not_in_subquery(self, column: str, subquery: Statement) -> Statement:
        return self._where_subquery(column, subquery, negated=True)

    def _where_subquery(self, column: str, subquery: Statement, negated: bool) -> Statement:
        self._check_mutable()
        if subquery is self:
            raise InvalidUsage("A statement cannot be its own subquery")
        self.where_expressions.append(
            _build(SubqueryExpression, fragment=column, subquery=subquery, negated=negated)
        )
        return self

    # --- payloads ---

    def select(self, *columns: str) -> Statement:
        """Switch to SELECT and replace the column list (no columns selects ``*``)."""
        self._check_mutable()
        _check_columns(columns, "selected column")
        self._transition(Mode.SELECT)
        self.select_columns = list(columns)
        return self

    def count(self, column: str = "*") -> Statement:
        return self.select(f"count({column})")

    def update(self, *pairs: Any) -> Statement:
        """Switch to UPDATE and add assignments: ``update("closed", True, "name", "x")``."""
        self._check_mutable()
        if not pairs or len(pairs) % 2:
            raise InvalidUsage(
                f"update() expects alternating column/value pairs, got {len(pairs)} argument(s)"
            )
        assignments = [
            _build(EqualityExpression, fragment=f"{column} = ?", arguments=(value,))
            for column, value in zip(pairs[::2], pairs[1::2])
        ]
        self._transition(Mode.UPDATE)
        self.set_expressions.extend(assignments)
        return self

    def assign(self, values: Mapping[str, ArgumentValue]) -> Statement:
        """Same as update(), from a column -> value mapping."""
        pairs = []
        for column, value in values.items():
            pairs.extend((column, value))
        return self.update(*pairs)

    def group_by(self, *columns: str) -> Statement:
        self._check_mutable()
        _check_columns(columns, "group by column")
        self.group_by_columns.extend(columns)
        return self

    def order_by(self, *columns: str) -> Statement:
        self._check_mutable()
        _check_columns(columns, "order by column")
        self.order_by_columns.extend(columns)
        return self

    def limit(self, offset: int, limit: int) -> Statement:
        """Paginate with ``limit ?, ?`` (offset first)."""
        self._check_mutable()
        for name, value in (("offset", offset), ("limit", limit)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidUsage(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise InvalidUsage(f"{name} must not be negative, got {value}")
        self.offset_value, self.limit_value = offset, limit
        return self

    @property
    def is_paginated(self) -> bool:
        return self.offset_value is not None or self.limit_value is not None

    # --- rendering ---

    def _renderers(self):
        try:
            sql_method, values_method = self.RENDERERS[self.mode]
        except KeyError as error:
            raise UnsupportedOperation(
                f"Cannot render a statement in mode {self.mode.value!r}; call select() or update() first"
            ) from error
        if self.target is None:
            raise InvalidUsage("Statement has no table; call table() first")
        return getattr(self, sql_method), getattr(self, values_method)

    def _write_where(self, text: SQLText) -> None:
        if self.where_expressions:
            text.write("where", render_conjunction(self.where_expressions))

    def _select_sql(self) -> str:
        text = SQLText()
        text.write("select", ", ".join(self.select_columns) or "*")
        text.write("from", self.target.sql)
        for join in self.joins:
            if not join.is_qualified:
                logger.debug("Skipping join on %s: no ON expression", join.table.sql)
                continue
            text.write(join.sql)
        self._write_where(text)
        if self.group_by_columns:
            text.write("group by", ", ".join(self.group_by_columns))
        if self.order_by_columns:
            text.write("order by", ", ".join(self.order_by_columns))
        if self.is_paginated:
            text.write("limit ?, ?")
        return text.result()

    def _select_values(self) -> tuple[Any, ...]:
        values: list[Any] = []
        for join in self.joins:
            if join.is_qualified:
                values.extend(join.values)
        values.extend(collect_values(self.where_expressions))
        if self.is_paginated:
            values.extend((self.offset_value, self.limit_value))
        return tuple(values)

    def _update_sql(self) -> str:
        text = SQLText()
        text.write("update", self.target.sql)
        text.write("set", ", ".join(expression.sql for expression in self.set_expressions))
        self._write_where(text)
        return text.result()

    def _update_values(self) -> tuple[Any, ...]:
        return collect_values(self.set_expressions) + collect_values(self.where_expressions)

    @property
    def sql(self) -> str:
        """The statement text, with one ``?`` per entry of ``values``."""
        render_sql, _ = self._renderers()
        sql = render_sql()
        logger.debug("Rendered %s statement: %s", self.mode.value, sql)
        return sql

    @property
    def values(self) -> tuple[Any, ...]:
        """Bound values for the placeholders in ``sql``, in order."""
        _, render_values = self._renderers()
        return render_values()

    def build(self) -> tuple[str, tuple[Any, ...]]:
        """Return ``(sql, values)`` ready for a ``?``-style ``cursor.execute``."""
        return self.sql, self.values


# Resolve the forward reference from subquery expressions back to Statement
SubqueryExpression.model_rebuild()


def table(name: str, alias: Optional[str] = None) -> Statement:
    """Start a new statement bound to ``name`` (e.g. ``table("m_shop m")``)."""
    return Statement().table(name, alias)


__all__ = ["Mode", "Statement", "table"]
