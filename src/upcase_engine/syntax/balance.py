"""Balance pre-flight for bulk transforms.

A range is balanced when scanning it as a standalone fragment closes every
bracket, string and block comment it opens and never meets a stray closer.
The scanner signals imbalance with :class:`ScanError`; that is the expected
outcome for malformed text and is turned into a value here. Anything else
raised during the traversal is a bug and propagates.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from upcase_engine.buffer.host import TextHost
from upcase_engine.buffer.validation import ensure_range
from upcase_engine.errors import ScanError
from upcase_engine.runtime import telemetry

from .scanner import finish, scan
from .table import SyntaxTable


@dataclass(frozen=True, slots=True)
class BalanceReport:
    balanced: bool
    reason: Optional[str] = None
    position: Optional[int] = None

    def __bool__(self) -> bool:
        return self.balanced

    @property
    def message(self) -> str:
        if self.balanced:
            return "balanced"
        return f"Unbalanced: {self.reason} at offset {self.position}"


BALANCED = BalanceReport(balanced=True)


def check_balance(
    host: TextHost, begin: int, end: int, table: SyntaxTable
) -> BalanceReport:
    begin, end = ensure_range(host, begin, end)
    with telemetry.span(
        "syntax::balance",
        logger_name="upcase_engine.syntax",
        component="syntax",
        metadata={"begin": begin, "end": end, "syntax": table.name},
    ) as handle:
        try:
            _traverse(host, begin, end, table)
        except ScanError as exc:
            handle.add_metadata("reason", exc.reason)
            return BalanceReport(balanced=False, reason=exc.reason, position=exc.position)
        return BALANCED


def is_unbalanced(host: TextHost, begin: int, end: int, table: SyntaxTable) -> bool:
    return not check_balance(host, begin, end, table).balanced


def _traverse(host: TextHost, begin: int, end: int, table: SyntaxTable) -> None:
    text = host.get_text(begin, end)
    state, reached = scan(table, text, offset=begin, strict=True)
    finish(state, reached)


__all__ = ["BALANCED", "BalanceReport", "check_balance", "is_unbalanced"]
