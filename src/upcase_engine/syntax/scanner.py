"""Incremental lexical scanner tracking string, comment, and bracket state.

``scan`` consumes a slice of text and returns the parse state reached,
mirroring what an editor keeps in its syntax cache: the stack of open
brackets, whether we are inside a string or comment, and where that
construct began. The state after scanning ``[0, p)`` is the state *at*
position ``p``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from upcase_engine.errors import ScanError

from .table import SyntaxTable

LINE_COMMENT = "line"
BLOCK_COMMENT = "block"


@dataclass(frozen=True, slots=True)
class ParseState:
    """Lexical state at a position; positions are absolute buffer offsets."""

    open_stack: Tuple[str, ...] = ()
    open_positions: Tuple[int, ...] = ()
    string_delimiter: Optional[str] = None
    string_start: Optional[int] = None
    comment: Optional[str] = None
    comment_start: Optional[int] = None
    comment_end: Optional[str] = None
    comment_depth: int = 0
    escaped: bool = False

    @property
    def depth(self) -> int:
        return len(self.open_stack)

    @property
    def in_string(self) -> bool:
        return self.string_delimiter is not None

    @property
    def in_comment(self) -> bool:
        return self.comment is not None


INITIAL_STATE = ParseState()


def scan(
    table: SyntaxTable,
    text: str,
    state: ParseState = INITIAL_STATE,
    *,
    offset: int = 0,
    limit: Optional[int] = None,
    strict: bool = False,
) -> Tuple[ParseState, int]:
    """Scan ``text`` (which starts at buffer offset ``offset``) up to ``limit``.

    Returns the state reached and the absolute offset it belongs to. The
    offset can fall short of ``limit`` when a multi-character delimiter
    straddles it; such a delimiter is left unconsumed.

    With ``strict`` set, stray or mismatched closers raise :class:`ScanError`
    immediately. Unterminated constructs are left for :func:`finish` to
    report, since a scan may legitimately stop inside them.
    """

    end = len(text) if limit is None else min(len(text), limit - offset)
    i = 0

    while i < end:
        char = text[i]

        if state.escaped:
            state = replace(state, escaped=False)
            i += 1
            continue

        if state.comment == LINE_COMMENT:
            if char == "\n":
                state = replace(state, comment=None, comment_start=None)
            i += 1
            continue

        if state.comment == BLOCK_COMMENT:
            closing = state.comment_end or ""
            if text.startswith(closing, i):
                if i + len(closing) > end:
                    break
                depth = state.comment_depth - 1
                if depth == 0:
                    state = replace(
                        state,
                        comment=None,
                        comment_start=None,
                        comment_end=None,
                        comment_depth=0,
                    )
                else:
                    state = replace(state, comment_depth=depth)
                i += len(closing)
                continue
            if table.nested_block_comments:
                opening = _block_opener_for(table, closing)
                if opening and text.startswith(opening, i):
                    if i + len(opening) > end:
                        break
                    state = replace(state, comment_depth=state.comment_depth + 1)
                    i += len(opening)
                    continue
            i += 1
            continue

        if state.string_delimiter is not None:
            closing = state.string_delimiter
            if table.is_escape(char):
                state = replace(state, escaped=True)
            elif text.startswith(closing, i):
                if i + len(closing) > end:
                    break
                state = replace(state, string_delimiter=None, string_start=None)
                i += len(closing)
                continue
            i += 1
            continue

        if table.is_escape(char):
            state = replace(state, escaped=True)
            i += 1
            continue

        long_string = _match_long_string(table, text, i)
        if long_string is not None:
            if i + len(long_string) > end:
                break
            state = replace(state, string_delimiter=long_string, string_start=offset + i)
            i += len(long_string)
            continue

        if table.is_string_delimiter(char):
            state = replace(state, string_delimiter=char, string_start=offset + i)
            i += 1
            continue

        block = _match_block_start(table, text, i)
        if block is not None:
            opening, closing = block
            if i + len(opening) > end:
                break
            state = replace(
                state,
                comment=BLOCK_COMMENT,
                comment_start=offset + i,
                comment_end=closing,
                comment_depth=1,
            )
            i += len(opening)
            continue

        starter = _match_line_start(table, text, i)
        if starter is not None:
            if i + len(starter) > end:
                break
            state = replace(state, comment=LINE_COMMENT, comment_start=offset + i)
            i += len(starter)
            continue

        if table.is_opener(char):
            state = replace(
                state,
                open_stack=state.open_stack + (char,),
                open_positions=state.open_positions + (offset + i,),
            )
        elif table.is_closer(char):
            state = _close(table, state, char, offset + i, strict=strict)
        i += 1

    return state, offset + i


def finish(state: ParseState, end: int) -> None:
    """Raise :class:`ScanError` if the scan ending at ``end`` left anything open."""

    if state.escaped:
        raise ScanError("dangling escape", position=end - 1)
    if state.string_delimiter is not None:
        raise ScanError("unterminated string", position=state.string_start or 0)
    if state.comment == BLOCK_COMMENT:
        raise ScanError("unterminated comment", position=state.comment_start or 0)
    if state.open_stack:
        raise ScanError("unclosed opener", position=state.open_positions[-1])


def _close(
    table: SyntaxTable, state: ParseState, char: str, position: int, *, strict: bool
) -> ParseState:
    if not state.open_stack:
        if strict:
            raise ScanError("unmatched closer", position=position)
        return state
    if strict and table.closer_for(state.open_stack[-1]) != char:
        raise ScanError("mismatched closer", position=position)
    return replace(
        state,
        open_stack=state.open_stack[:-1],
        open_positions=state.open_positions[:-1],
    )


def _match_block_start(
    table: SyntaxTable, text: str, index: int
) -> Optional[Tuple[str, str]]:
    for opening, closing in table.block_comments:
        if text.startswith(opening, index):
            return opening, closing
    return None


def _match_long_string(table: SyntaxTable, text: str, index: int) -> Optional[str]:
    for quote in table.long_strings:
        if text.startswith(quote, index):
            return quote
    return None


def _match_line_start(table: SyntaxTable, text: str, index: int) -> Optional[str]:
    for starter in table.line_comments:
        if text.startswith(starter, index):
            return starter
    return None


def _block_opener_for(table: SyntaxTable, closing: str) -> Optional[str]:
    for opening, candidate in table.block_comments:
        if candidate == closing:
            return opening
    return None


__all__ = [
    "BLOCK_COMMENT",
    "INITIAL_STATE",
    "LINE_COMMENT",
    "ParseState",
    "finish",
    "scan",
]
