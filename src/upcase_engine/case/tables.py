"""Case tables: character to uppercase mappings used by every transform.

Tables are length preserving (one character in, one character out) and
idempotent (upcasing an uppercase character changes nothing), so a bulk
transform can substitute text in place without moving any position.
"""

from __future__ import annotations

from functools import lru_cache
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Tuple

from upcase_engine.errors import UnknownCaseTableError


class CaseTable:
    """Base class; subclasses implement :meth:`upcase` for one character."""

    name: str = "identity"

    def upcase(self, char: str) -> str:
        return char

    def upcase_text(self, text: str) -> str:
        return "".join(self.upcase(char) for char in text)

    def __getitem__(self, char: str) -> str:
        return self.upcase(char)


class UnicodeCaseTable(CaseTable):
    """Unicode uppercase, restricted to single-character idempotent results.

    ``"ß".upper()`` is ``"SS"``; such characters are left alone.
    """

    name = "unicode"

    def upcase(self, char: str) -> str:
        return _unicode_upcase(char)


@lru_cache(maxsize=4096)
def _unicode_upcase(char: str) -> str:
    upper = char.upper()
    if len(upper) != 1 or upper.upper() != upper:
        return char
    return upper


class AsciiCaseTable(CaseTable):
    name = "ascii"

    def upcase(self, char: str) -> str:
        if "a" <= char <= "z":
            return chr(ord(char) - 32)
        return char


class MappingCaseTable(CaseTable):
    """Explicit mapping; entries breaking the table contract are dropped."""

    def __init__(self, mapping: Mapping[str, str], *, name: str = "custom") -> None:
        self.name = name
        cleaned: Dict[str, str] = {}
        for source, target in mapping.items():
            if len(source) != 1 or len(target) != 1:
                raise ValueError(
                    f"Case table entries must map one character to one: {source!r}"
                )
            cleaned[source] = target
        # Idempotence: a target that would itself be remapped is not upper.
        self._mapping = MappingProxyType(
            {
                source: target
                for source, target in cleaned.items()
                if cleaned.get(target, target) == target
            }
        )

    @property
    def mapping(self) -> Mapping[str, str]:
        return self._mapping

    def upcase(self, char: str) -> str:
        return self._mapping.get(char, char)


_FACTORIES: Dict[str, Callable[[], CaseTable]] = {
    "unicode": UnicodeCaseTable,
    "ascii": AsciiCaseTable,
    "identity": CaseTable,
}


def get_case_table(name: str) -> CaseTable:
    try:
        factory = _FACTORIES[name.lower()]
    except KeyError as exc:
        raise UnknownCaseTableError(name) from exc
    return factory()


def register_case_table(
    name: str, factory: Callable[[], CaseTable], *, replace: bool = False
) -> None:
    key = name.lower()
    if not replace and key in _FACTORIES:
        raise ValueError(f"Case table '{name}' already registered")
    _FACTORIES[key] = factory


def case_table_names() -> Tuple[str, ...]:
    return tuple(sorted(_FACTORIES))


__all__ = [
    "AsciiCaseTable",
    "CaseTable",
    "MappingCaseTable",
    "UnicodeCaseTable",
    "case_table_names",
    "get_case_table",
    "register_case_table",
]
