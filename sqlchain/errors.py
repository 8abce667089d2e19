"""Exceptions raised by sqlchain."""


class SQLChainError(Exception):
    """Base class for sqlchain errors."""


class InvalidUsage(SQLChainError):
    """The calling code used the builder in a way that cannot yield a correct statement.

    Raised at the offending call (empty IN list, odd update pairs, negative
    pagination, ON clause without a join, ...). This is a defect in the caller,
    never a data condition.
    """


class UnsupportedOperation(InvalidUsage):
    """The statement is in a mode that has no renderer (e.g. no select/update yet)."""
