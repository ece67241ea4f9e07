"""Selective case conversion: upcase code, leave comments and strings alone."""

__all__ = [
    "actions",
    "buffer",
    "case",
    "config",
    "engine",
    "modes",
    "runtime",
    "syntax",
]

__version__ = "0.1.0"
