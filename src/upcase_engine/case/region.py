"""Bulk upcasing of a region: balance gate, segmentation, substitution."""

from __future__ import annotations

from dataclasses import dataclass

from upcase_engine.buffer.host import TextHost
from upcase_engine.buffer.validation import ensure_range
from upcase_engine.runtime import telemetry
from upcase_engine.syntax import BALANCED, BalanceReport, SyntaxOracle, check_balance

from .segmenter import segment
from .tables import CaseTable
from .transformer import apply_case


@dataclass(frozen=True, slots=True)
class UpcaseResult:
    """Outcome of a bulk transform: either applied, or refused as unbalanced."""

    begin: int
    end: int
    changed: int = 0
    balance: BalanceReport = BALANCED

    @classmethod
    def ok(cls, begin: int, end: int, changed: int) -> "UpcaseResult":
        return cls(begin=begin, end=end, changed=changed)

    @classmethod
    def unbalanced(cls, begin: int, end: int, report: BalanceReport) -> "UpcaseResult":
        return cls(begin=begin, end=end, balance=report)

    @property
    def is_ok(self) -> bool:
        return self.balance.balanced

    @property
    def is_unbalanced(self) -> bool:
        return not self.balance.balanced

    def __bool__(self) -> bool:
        return self.is_ok

    @property
    def message(self) -> str:
        if self.is_ok:
            return f"Upcased {self.changed} characters"
        return self.balance.message


def upcase_region(
    host: TextHost,
    begin: int,
    end: int,
    case_table: CaseTable,
    oracle: SyntaxOracle,
) -> UpcaseResult:
    """Upcase the plain code in ``[begin, end)`` unless the range is unbalanced.

    The balance verdict and the segmentation are both taken from the buffer
    as it was on entry; nothing is written when the verdict is negative.
    """

    begin, end = ensure_range(host, begin, end)
    with telemetry.span(
        "case::upcase_region",
        logger_name="upcase_engine.case",
        component="case",
        metadata={"begin": begin, "end": end, "case_table": case_table.name},
    ) as handle:
        report = check_balance(host, begin, end, oracle.table)
        if not report.balanced:
            handle.add_metadata("unbalanced", report.reason)
            telemetry.record_event(
                "upcase.unbalanced",
                level="warning",
                data={"begin": begin, "end": end, "reason": report.reason},
                logger_name="upcase_engine.case",
            )
            return UpcaseResult.unbalanced(begin, end, report)

        runs = segment(host, begin, end, oracle)
        changed = apply_case(host, runs, case_table)
        handle.add_metadata("changed", changed)
    return UpcaseResult.ok(begin, end, changed)


def upcase_buffer(
    host: TextHost, case_table: CaseTable, oracle: SyntaxOracle
) -> UpcaseResult:
    return upcase_region(host, 0, host.length(), case_table, oracle)


__all__ = ["UpcaseResult", "upcase_buffer", "upcase_region"]
