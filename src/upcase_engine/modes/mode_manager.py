"""Mode manager coordinating insert and upcase modes."""

from __future__ import annotations

from typing import Dict, Optional, Type

from upcase_engine.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult


class ModeManager:
    """Owns the active mode, handles transitions, and dispatches key events."""

    def __init__(self, context: ModeContext) -> None:
        self.context = context
        self._modes: Dict[str, Mode] = {}
        self._active: Optional[str] = None
        self.logger = telemetry.get_logger("upcase_engine.modes")
        self.context.extras.setdefault("mode_manager", self)

    @property
    def active_mode(self) -> Optional[Mode]:
        if self._active is None:
            return None
        return self._modes.get(self._active)

    @property
    def active_name(self) -> Optional[str]:
        return self._active

    def register_mode(self, mode_cls: Type[Mode], /) -> Mode:
        mode = mode_cls(self.context)
        if mode.name in self._modes:
            raise ValueError(f"Mode '{mode.name}' already registered")
        self._modes[mode.name] = mode
        if self._active is None:
            self._active = mode.name
            mode.on_enter(None)
        return mode

    def switch_mode(self, name: str) -> None:
        if name not in self._modes:
            raise KeyError(f"Unknown mode '{name}'")
        previous = self.active_mode
        if previous and previous.name == name:
            return
        if previous:
            previous.on_exit(name)
        self._active = name
        telemetry.record_event(
            "mode.switch",
            data={"mode": name, "previous": previous.name if previous else None},
            logger_name="upcase_engine.modes",
        )
        self._modes[name].on_enter(previous.name if previous else None)

    def handle_key(self, key: KeyInput) -> ModeResult:
        mode = self.active_mode
        if mode is None:
            raise RuntimeError("No active mode registered")
        with telemetry.span(
            name=f"mode::{mode.name}",
            logger_name="upcase_engine.modes",
            component=True,
            metadata={"key": key.key, "mode": mode.name},
        ):
            result = mode.handle_key(key)
        if result.switch_to:
            self.switch_mode(result.switch_to)
        return result
