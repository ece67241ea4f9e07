"""Split a range into runs of one character class.

Each run starts at ``pt``, takes its plain/skip flag from the syntax class at
``pt``, and extends while the following characters share the character class
of the character at ``pt``. The flag is not re-evaluated inside the run: a
word run that starts in plain code and continues into a comment whose
starter is made of word characters (``abc--def`` with ``-`` as a word
constituent and ``--`` as comment starter) is plain from end to end.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List

from upcase_engine.buffer.host import TextHost
from upcase_engine.buffer.validation import ensure_range
from upcase_engine.runtime import telemetry
from upcase_engine.syntax import GROUPING_CLASSES, CharClass, SyntaxClass, SyntaxOracle


@dataclass(frozen=True, slots=True)
class Run:
    begin: int
    end: int
    plain: bool
    char_class: CharClass

    def __len__(self) -> int:
        return self.end - self.begin


def iter_runs(
    host: TextHost, begin: int, end: int, oracle: SyntaxOracle
) -> Iterator[Run]:
    begin, end = ensure_range(host, begin, end)
    if begin == end:
        return
    table = oracle.table
    text = host.get_text(begin, end)
    cursor = oracle.cursor(host, begin)
    pt = begin
    while pt < end:
        plain = cursor.classify(pt) is SyntaxClass.PLAIN
        char_class = table.char_class(text[pt - begin])
        stop = pt + 1
        if char_class in GROUPING_CLASSES:
            while stop < end and table.char_class(text[stop - begin]) is char_class:
                stop += 1
        yield Run(pt, stop, plain, char_class)
        pt = stop


def segment(host: TextHost, begin: int, end: int, oracle: SyntaxOracle) -> List[Run]:
    with telemetry.span(
        "case::segment",
        logger_name="upcase_engine.case",
        metadata={"begin": begin, "end": end},
    ) as handle:
        runs = list(iter_runs(host, begin, end, oracle))
        handle.add_metadata("runs", len(runs))
    return runs


__all__ = ["Run", "iter_runs", "segment"]
