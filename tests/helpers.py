"""Shared test helpers."""

from sqlchain.text import count_placeholders


def assert_parity(statement):
    """Assert the statement binds exactly one value per placeholder; return (sql, values)."""
    sql, values = statement.build()
    placeholders = count_placeholders(sql)
    assert placeholders == len(values), (
        f"{placeholders} placeholder(s) but {len(values)} value(s) in {sql!r}: {values!r}"
    )
    return sql, values
