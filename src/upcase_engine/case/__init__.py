"""Case conversion: tables, segmentation, bulk and live transforms."""

from .live import filter_character, on_character_typed
from .region import UpcaseResult, upcase_buffer, upcase_region
from .segmenter import Run, iter_runs, segment
from .tables import (
    AsciiCaseTable,
    CaseTable,
    MappingCaseTable,
    UnicodeCaseTable,
    case_table_names,
    get_case_table,
    register_case_table,
)
from .transformer import apply_case

__all__ = [
    "AsciiCaseTable",
    "CaseTable",
    "MappingCaseTable",
    "Run",
    "UnicodeCaseTable",
    "UpcaseResult",
    "apply_case",
    "case_table_names",
    "filter_character",
    "get_case_table",
    "iter_runs",
    "on_character_typed",
    "register_case_table",
    "segment",
    "upcase_buffer",
    "upcase_region",
]
