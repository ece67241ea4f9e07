"""Engine configuration and environment overrides."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from upcase_engine.case.tables import CaseTable, get_case_table
from upcase_engine.runtime.telemetry import env, env_flag
from upcase_engine.syntax.oracle import DEFAULT_CHECKPOINT_INTERVAL
from upcase_engine.syntax.presets import get_syntax
from upcase_engine.syntax.table import SyntaxTable


@dataclass
class UpcaseConfig:
    """User-facing options for one engine instance.

    ``case_table`` and ``syntax`` accept either a registered name or a
    ready-made object.
    """

    upcase_existing_on_activation: bool = False
    case_table: Union[str, CaseTable] = "unicode"
    syntax: Union[str, SyntaxTable] = "lisp"
    checkpoint_interval: int = DEFAULT_CHECKPOINT_INTERVAL

    @classmethod
    def from_env(cls) -> "UpcaseConfig":
        return cls(
            upcase_existing_on_activation=env_flag("UPCASE_EXISTING", False),
            case_table=env("CASE_TABLE") or "unicode",
            syntax=env("SYNTAX") or "lisp",
            checkpoint_interval=int(
                env("CHECKPOINT_INTERVAL") or DEFAULT_CHECKPOINT_INTERVAL
            ),
        )

    def resolve_case_table(self) -> CaseTable:
        if isinstance(self.case_table, CaseTable):
            return self.case_table
        return get_case_table(self.case_table)

    def resolve_syntax(self) -> SyntaxTable:
        if isinstance(self.syntax, SyntaxTable):
            return self.syntax
        return get_syntax(self.syntax)
