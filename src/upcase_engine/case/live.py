"""Per-keystroke filter: upcase typed characters outside comments and strings."""

from __future__ import annotations

from upcase_engine.buffer.host import TextHost
from upcase_engine.syntax import SyntaxOracle

from .tables import CaseTable


def filter_character(
    host: TextHost,
    position: int,
    character: str,
    case_table: CaseTable,
    oracle: SyntaxOracle,
) -> str:
    """Return the character to insert at ``position`` for a typed ``character``."""

    if not oracle.is_plain(host, position):
        return character
    return case_table.upcase(character)


def on_character_typed(
    host: TextHost,
    position: int,
    character: str,
    case_table: CaseTable,
    oracle: SyntaxOracle,
) -> str:
    if len(character) != 1:
        raise ValueError(f"Expected a single character, got {character!r}")
    inserted = filter_character(host, position, character, case_table, oracle)
    host.insert_at(position, inserted)
    return inserted


__all__ = ["filter_character", "on_character_typed"]
