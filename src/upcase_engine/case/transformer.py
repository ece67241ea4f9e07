"""Apply a case table to the plain runs of a segmentation."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from upcase_engine.buffer.host import TextHost

from .segmenter import Run
from .tables import CaseTable


def apply_case(host: TextHost, runs: Iterable[Run], case_table: CaseTable) -> int:
    """Upcase every plain run in place and return how many characters changed.

    Runs must be ascending. Every substitution is computed and checked before
    the first write, so a case table that changes a length leaves the host
    untouched. Substitutions keep the text length, so the offsets of later
    runs stay valid.
    """

    pending: List[Tuple[Run, str, int]] = []
    for run in runs:
        if not run.plain:
            continue
        original = host.get_text(run.begin, run.end)
        upcased = case_table.upcase_text(original)
        if upcased == original:
            continue
        if len(upcased) != len(original):
            raise ValueError(
                f"Case table '{case_table.name}' changed the length of {original!r}"
            )
        changed = sum(1 for old, new in zip(original, upcased) if old != new)
        pending.append((run, upcased, changed))

    for run, upcased, _ in pending:
        host.replace_range(run.begin, run.end, upcased)
    return sum(changed for _, _, changed in pending)


__all__ = ["apply_case"]
