"""Lexical analysis: syntax tables, scanner, oracle, and balance checks."""

from .balance import BALANCED, BalanceReport, check_balance, is_unbalanced
from .oracle import SyntaxClass, SyntaxCursor, SyntaxOracle, classification_for
from .presets import get_syntax, register_syntax, syntax_names
from .scanner import INITIAL_STATE, ParseState, finish, scan
from .table import GROUPING_CLASSES, CharClass, SyntaxTable

__all__ = [
    "BALANCED",
    "BalanceReport",
    "CharClass",
    "GROUPING_CLASSES",
    "INITIAL_STATE",
    "ParseState",
    "SyntaxClass",
    "SyntaxCursor",
    "SyntaxOracle",
    "SyntaxTable",
    "check_balance",
    "classification_for",
    "finish",
    "get_syntax",
    "is_unbalanced",
    "register_syntax",
    "scan",
    "syntax_names",
]
