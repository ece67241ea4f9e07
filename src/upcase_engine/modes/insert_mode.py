"""Insert mode: typed text goes into the buffer at point."""

from __future__ import annotations

from upcase_engine.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult

_NEWLINE_KEYS = {"ENTER", "RETURN", "<CR>"}
_BACKSPACE_KEYS = {"BACKSPACE", "<BS>"}


class InsertMode(Mode):
    """Verbatim insertion; subclasses override :meth:`insert_char`."""

    name = "insert"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger(f"upcase_engine.modes.{self.name}")

    def handle_key(self, key: KeyInput) -> ModeResult:
        if key.key in _BACKSPACE_KEYS:
            return self._delete_backward()

        text = "\n" if key.key in _NEWLINE_KEYS else key.text
        modifiers = {modifier.lower() for modifier in key.modifiers}
        if not text or modifiers & {"ctrl", "alt", "meta"}:
            return ModeResult(consumed=False)

        inserted = "".join(self.insert_char(char) for char in text)
        return ModeResult(consumed=True, status="inserted", inserted=inserted)

    def insert_char(self, char: str) -> str:
        self.context.buffer.insert(char)
        return char

    def _delete_backward(self) -> ModeResult:
        buffer = self.context.buffer
        if buffer.point == 0:
            return ModeResult(consumed=True, status="noop")
        buffer.delete_range(buffer.point - 1, buffer.point)
        return ModeResult(consumed=True, status="deleted")
