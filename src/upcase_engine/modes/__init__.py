"""Editor modes and key dispatch."""

from .base_mode import KeyInput, Mode, ModeBus, ModeContext, ModeResult
from .insert_mode import InsertMode
from .upcase_mode import UpcaseMode
from .mode_manager import ModeManager

__all__ = [
    "KeyInput",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "InsertMode",
    "UpcaseMode",
    "ModeManager",
]
