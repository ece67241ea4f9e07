"""Built-in syntax tables, addressable by name."""

from __future__ import annotations

from typing import Dict, Tuple

from upcase_engine.errors import UnknownSyntaxError

from .table import SyntaxTable

LISP = SyntaxTable(
    name="lisp",
    brackets=(("(", ")"),),
    string_delimiters='"',
    escape_chars="\\",
    line_comments=(";",),
    block_comments=(("#|", "|#"),),
    nested_block_comments=True,
    word_chars="",
    symbol_chars="-+*/<>=!?$%&_:~^.@",
)

C = SyntaxTable(
    name="c",
    brackets=(("(", ")"), ("[", "]"), ("{", "}")),
    string_delimiters="\"'",
    escape_chars="\\",
    line_comments=("//",),
    block_comments=(("/*", "*/"),),
)

PYTHON = SyntaxTable(
    name="python",
    brackets=(("(", ")"), ("[", "]"), ("{", "}")),
    string_delimiters="\"'",
    long_strings=('"""', "'''"),
    escape_chars="\\",
    line_comments=("#",),
)

SQL = SyntaxTable(
    name="sql",
    brackets=(("(", ")"),),
    string_delimiters="'\"",
    escape_chars="",
    line_comments=("--",),
    block_comments=(("/*", "*/"),),
)

TEXT = SyntaxTable(
    name="text",
    brackets=(("(", ")"),),
    string_delimiters='"',
    escape_chars="",
)

_SYNTAXES: Dict[str, SyntaxTable] = {
    table.name: table for table in (LISP, C, PYTHON, SQL, TEXT)
}


def get_syntax(name: str) -> SyntaxTable:
    try:
        return _SYNTAXES[name.lower()]
    except KeyError as exc:
        raise UnknownSyntaxError(name) from exc


def register_syntax(table: SyntaxTable, *, replace: bool = False) -> SyntaxTable:
    key = table.name.lower()
    if not replace and key in _SYNTAXES:
        raise ValueError(f"Syntax '{table.name}' already registered")
    _SYNTAXES[key] = table
    return table


def syntax_names() -> Tuple[str, ...]:
    return tuple(sorted(_SYNTAXES))


__all__ = [
    "C",
    "LISP",
    "PYTHON",
    "SQL",
    "TEXT",
    "get_syntax",
    "register_syntax",
    "syntax_names",
]
