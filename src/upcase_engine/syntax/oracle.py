"""Position classification: comment, string, or plain code."""

from __future__ import annotations

import bisect
from enum import Enum
from typing import List, Optional, Tuple

from upcase_engine.buffer.host import TextHost
from upcase_engine.buffer.validation import ensure_position
from upcase_engine.runtime import telemetry

from .scanner import INITIAL_STATE, ParseState, scan
from .table import SyntaxTable

DEFAULT_CHECKPOINT_INTERVAL = 2048


class SyntaxClass(str, Enum):
    COMMENT = "comment"
    STRING = "string"
    PLAIN = "plain"


def classification_for(state: ParseState) -> SyntaxClass:
    if state.in_comment:
        return SyntaxClass.COMMENT
    if state.in_string:
        return SyntaxClass.STRING
    return SyntaxClass.PLAIN


class SyntaxOracle:
    """Answers "what is at this position?" for buffers written in one syntax.

    Parse states are cached as checkpoints every ``checkpoint_interval``
    characters. The cache follows one buffer at a time: a different buffer
    resets it, and an edit drops only the checkpoints at or past the edited
    offset when the oracle saw the version just before it.
    """

    def __init__(
        self,
        table: SyntaxTable,
        *,
        checkpoint_interval: int = DEFAULT_CHECKPOINT_INTERVAL,
    ) -> None:
        if checkpoint_interval <= 0:
            raise ValueError("checkpoint_interval must be positive")
        self.table = table
        self.checkpoint_interval = checkpoint_interval
        self.logger = telemetry.get_logger("upcase_engine.syntax")
        self._host_id: Optional[int] = None
        self._version: Optional[int] = None
        self._positions: List[int] = [0]
        self._states: List[ParseState] = [INITIAL_STATE]

    def classify(self, host: TextHost, position: int) -> SyntaxClass:
        return classification_for(self.state_at(host, position))

    def is_plain(self, host: TextHost, position: int) -> bool:
        return self.classify(host, position) is SyntaxClass.PLAIN

    def state_at(self, host: TextHost, position: int) -> ParseState:
        """Parse state after scanning ``[0, position)``."""

        return self._resolve(host, position)[0]

    def cursor(self, host: TextHost, position: int = 0) -> "SyntaxCursor":
        """Return a cursor classifying ascending positions from ``position`` on."""

        return SyntaxCursor(self, host, position)

    def checkpoint_count(self) -> int:
        return len(self._positions)

    def reset(self) -> None:
        self._positions = [0]
        self._states = [INITIAL_STATE]

    def _resolve(self, host: TextHost, position: int) -> Tuple[ParseState, int]:
        """State at ``position`` and the offset the scan actually reached.

        The offset falls short of ``position`` when a delimiter straddles it.
        """

        ensure_position(host, position)
        self._sync(host)
        start, state = self._nearest_checkpoint(position)
        while start < position:
            target = min(position, self._next_boundary(start))
            scanned, reached = self._scan(host, state, start, target)
            while reached < target < position:
                # Delimiter straddles a checkpoint boundary: scan through it.
                target = min(position, self._next_boundary(target))
                scanned, reached = self._scan(host, state, start, target)
            state = scanned
            if reached < target:
                return state, reached
            start = reached
            if start < position:
                self._remember(start, state)
        return state, start

    def _scan(
        self, host: TextHost, state: ParseState, start: int, target: int
    ) -> Tuple[ParseState, int]:
        lookahead = min(host.length(), target + self.table.longest_delimiter - 1)
        text = host.get_text(start, lookahead)
        return scan(self.table, text, state, offset=start, limit=target)

    def _next_boundary(self, start: int) -> int:
        interval = self.checkpoint_interval
        return (start // interval + 1) * interval

    def _nearest_checkpoint(self, position: int) -> Tuple[int, ParseState]:
        index = bisect.bisect_right(self._positions, position) - 1
        return self._positions[index], self._states[index]

    def _remember(self, position: int, state: ParseState) -> None:
        index = bisect.bisect_left(self._positions, position)
        if index < len(self._positions) and self._positions[index] == position:
            return
        self._positions.insert(index, position)
        self._states.insert(index, state)

    def _sync(self, host: TextHost) -> None:
        host_id = id(host)
        version = host.version
        if self._host_id == host_id and self._version == version:
            return
        if self._host_id == host_id and self._version == version - 1:
            self._invalidate_from(host.last_change_offset)
        else:
            self.reset()
        self._host_id = host_id
        self._version = version

    def _invalidate_from(self, offset: int) -> None:
        # A checkpoint just before the edit may sit inside a delimiter the
        # edit completed, so back off by the longest delimiter.
        cutoff = max(1, offset - self.table.longest_delimiter + 1)
        index = bisect.bisect_left(self._positions, cutoff)
        dropped = len(self._positions) - index
        del self._positions[index:]
        del self._states[index:]
        if dropped:
            self.logger.debug(f"syntax cache: dropped {dropped} checkpoints from {cutoff}")


class SyntaxCursor:
    """Forward-only classifier for one buffer version.

    Each call scans only the text between the previous position and the new
    one, so walking a whole region costs a single pass. The buffer must not
    change while the cursor is in use.
    """

    def __init__(self, oracle: SyntaxOracle, host: TextHost, position: int) -> None:
        self._oracle = oracle
        self._host = host
        self._version = host.version
        self._position = position
        self._state, self._reached = oracle._resolve(host, position)

    def state_at(self, position: int) -> ParseState:
        if self._host.version != self._version:
            raise RuntimeError("buffer changed while a syntax cursor was in use")
        if position < self._position:
            raise ValueError(
                f"cursor cannot move back from {self._position} to {position}"
            )
        ensure_position(self._host, position)
        if position > self._reached:
            self._state, self._reached = self._oracle._scan(
                self._host, self._state, self._reached, position
            )
        self._position = position
        return self._state

    def classify(self, position: int) -> SyntaxClass:
        return classification_for(self.state_at(position))


__all__ = [
    "DEFAULT_CHECKPOINT_INTERVAL",
    "SyntaxClass",
    "SyntaxCursor",
    "SyntaxOracle",
    "classification_for",
]
