"""Host-facing facade bundling buffer, syntax oracle, case table, and modes."""

from __future__ import annotations

from typing import Iterable, Optional

from upcase_engine.actions.upcase import run_upcase
from upcase_engine.buffer import Buffer
from upcase_engine.case import CaseTable, UpcaseResult, filter_character
from upcase_engine.config import UpcaseConfig
from upcase_engine.modes import (
    InsertMode,
    KeyInput,
    ModeBus,
    ModeContext,
    ModeManager,
    ModeResult,
    UpcaseMode,
)
from upcase_engine.runtime import telemetry
from upcase_engine.syntax import SyntaxClass, SyntaxOracle


class UpcaseEngine:
    """Entry points a host editor calls: bulk upcasing, typing, activation.

    The engine starts in plain ``insert`` mode; :meth:`enable` switches to
    ``upcase`` mode, upcasing the existing text first when
    ``config.upcase_existing_on_activation`` is set.
    """

    def __init__(
        self,
        buffer: Optional[Buffer] = None,
        *,
        config: Optional[UpcaseConfig] = None,
        oracle: Optional[SyntaxOracle] = None,
    ) -> None:
        self.config = config or UpcaseConfig()
        self.buffer = buffer or Buffer()
        self.oracle = oracle or SyntaxOracle(
            self.config.resolve_syntax(),
            checkpoint_interval=self.config.checkpoint_interval,
        )
        self.bus = ModeBus()
        self.context = ModeContext(
            buffer=self.buffer,
            oracle=self.oracle,
            case_table=self.config.resolve_case_table(),
            config=self.config,
            bus=self.bus,
        )
        self.modes = ModeManager(self.context)
        self.modes.register_mode(InsertMode)
        self.modes.register_mode(UpcaseMode)

    @classmethod
    def from_text(
        cls, text: str, *, config: Optional[UpcaseConfig] = None
    ) -> "UpcaseEngine":
        return cls(Buffer.from_text(text), config=config)

    @property
    def text(self) -> str:
        return self.buffer.text

    @property
    def case_table(self) -> CaseTable:
        return self.context.case_table

    @case_table.setter
    def case_table(self, table: CaseTable) -> None:
        self.context.case_table = table

    @property
    def enabled(self) -> bool:
        return self.modes.active_name == UpcaseMode.name

    def enable(self) -> None:
        self.modes.switch_mode(UpcaseMode.name)

    def disable(self) -> None:
        self.modes.switch_mode(InsertMode.name)

    def toggle(self) -> bool:
        if self.enabled:
            self.disable()
        else:
            self.enable()
        return self.enabled

    def classify(self, position: Optional[int] = None) -> SyntaxClass:
        target = self.buffer.point if position is None else position
        return self.oracle.classify(self.buffer, target)

    def upcase_region(
        self, begin: int, end: int, *, case_table: Optional[CaseTable] = None
    ) -> UpcaseResult:
        return run_upcase(self.context, begin, end, case_table=case_table)

    def upcase_buffer(self, *, case_table: Optional[CaseTable] = None) -> UpcaseResult:
        return run_upcase(self.context, 0, self.buffer.length(), case_table=case_table)

    def on_character_typed(self, character: str) -> str:
        """Insert ``character`` at point, filtered when the engine is enabled."""

        if len(character) != 1:
            raise ValueError(f"Expected a single character, got {character!r}")
        mode = self.modes.active_mode
        if not isinstance(mode, InsertMode):
            raise RuntimeError("No insert-capable mode is active")
        return mode.insert_char(character)

    def preview_character(self, character: str) -> str:
        """Character that typing ``character`` at point would insert."""

        if not self.enabled:
            return character
        return filter_character(
            self.buffer, self.buffer.point, character, self.case_table, self.oracle
        )

    def type_text(self, text: Iterable[str]) -> str:
        return "".join(self.on_character_typed(char) for char in text)

    def handle_key(
        self, key: str, *, text: Optional[str] = None, modifiers: Iterable[str] = ()
    ) -> ModeResult:
        result = self.modes.handle_key(
            KeyInput(key=key, text=text, modifiers=tuple(modifiers))
        )
        if not result.consumed:
            telemetry.record_event(
                "key.unhandled",
                level="debug",
                data={"key": key, "mode": self.modes.active_name},
                logger_name="upcase_engine.engine",
            )
        return result


__all__ = ["UpcaseEngine"]
