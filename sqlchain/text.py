"""Space-separated SQL text assembly and placeholder scanning."""

from .errors import InvalidUsage

_QUOTES = ("'", '"', "`")


class SQLText:
    """Accumulates SQL tokens separated by single spaces.

    Empty tokens are skipped, so optional fragments can be written
    unconditionally without producing double spaces.
    """

    __slots__ = ("_tokens",)

    def __init__(self) -> None:
        self._tokens: list[str] = []

    def write(self, *tokens: str) -> "SQLText":
        for token in tokens:
            if token:
                self._tokens.append(token)
        return self

    def wrap(self, *tokens: str) -> "SQLText":
        """Write ``( tokens... )``."""
        return self.write("(").write(*tokens).write(")")

    def result(self) -> str:
        return " ".join(self._tokens)

    def __str__(self) -> str:
        return self.result()


def split_placeholders(sql: str) -> list[str]:
    """Split ``sql`` around each ``?`` placeholder that is not inside a quoted literal.

    ``"a = ? and b = 'x?'"`` gives ``["a = ", " and b = 'x?'"]``; the number of
    placeholders is always ``len(result) - 1``. Inside a literal, a quote is
    escaped either by doubling it or with a backslash (MySQL style).
    """
    parts: list[str] = []
    current: list[str] = []
    quote = None
    escaped = False
    for char in sql:
        if quote is not None:
            current.append(char)
            if escaped:
                escaped = False
            elif char == "\\" and quote != "`":
                escaped = True
            elif char == quote:
                quote = None
        elif char in _QUOTES:
            quote = char
            current.append(char)
        elif char == "?":
            parts.append("".join(current))
            current = []
        else:
            current.append(char)
    parts.append("".join(current))
    return parts


def count_placeholders(sql: str) -> int:
    """Number of ``?`` placeholders in ``sql``, ignoring quoted literals."""
    return len(split_placeholders(sql)) - 1


def require_no_placeholders(fragment: str, role: str) -> str:
    """Return ``fragment``, or raise ``InvalidUsage`` if it holds a ``?``.

    Column lists, table names and the left-hand side of ``in`` filters bind no
    values, so a placeholder there would have nothing to bind to.
    """
    if count_placeholders(fragment):
        raise InvalidUsage(f"{role} {fragment!r} cannot contain a ? placeholder")
    return fragment
