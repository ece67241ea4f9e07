"""Upcase mode: insert mode whose typed characters pass the live filter."""

from __future__ import annotations

from typing import Optional

from upcase_engine.actions import upcase as upcase_actions
from upcase_engine.case.live import on_character_typed

from .insert_mode import InsertMode


class UpcaseMode(InsertMode):
    name = "upcase"

    def on_enter(self, previous: Optional[str]) -> None:
        del previous
        if self.context.config.upcase_existing_on_activation:
            result = upcase_actions.upcase_buffer_action(self.context)
            self.logger.info(f"activation upcase: {result.status} {result.message}")

    def insert_char(self, char: str) -> str:
        buffer = self.context.buffer
        return on_character_typed(
            buffer,
            buffer.point,
            char,
            self.context.case_table,
            self.context.oracle,
        )
