"""Upcase actions reusable from modes and host commands."""

from __future__ import annotations

from typing import Optional

from upcase_engine.case import UpcaseResult, upcase_region
from upcase_engine.case.tables import CaseTable
from upcase_engine.modes.base_mode import ModeContext, ModeResult


def run_upcase(
    context: ModeContext,
    begin: int,
    end: int,
    *,
    case_table: Optional[CaseTable] = None,
) -> UpcaseResult:
    """Upcase ``[begin, end)`` and announce the outcome on the mode bus.

    Emits ``upcase.applied`` or ``upcase.unbalanced`` with the
    :class:`UpcaseResult` as payload; the latter is the host's cue to show
    ``result.message`` to the user.
    """

    result = upcase_region(
        context.buffer,
        begin,
        end,
        case_table or context.case_table,
        context.oracle,
    )
    context.extras["last_upcase"] = result
    context.bus.emit("upcase.applied" if result else "upcase.unbalanced", result)
    return result


def upcase_buffer_action(context: ModeContext) -> ModeResult:
    result = run_upcase(context, 0, context.buffer.length())
    return _to_mode_result(result)


def upcase_selection_action(context: ModeContext) -> ModeResult:
    region = context.buffer.region()
    if region is None:
        return ModeResult(consumed=False, status="no_selection")
    result = run_upcase(context, *region)
    return _to_mode_result(result)


def _to_mode_result(result: UpcaseResult) -> ModeResult:
    return ModeResult(
        consumed=True,
        status="upcased" if result else "unbalanced",
        message=result.message,
    )


__all__ = ["run_upcase", "upcase_buffer_action", "upcase_selection_action"]
