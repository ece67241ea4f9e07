"""Syntax tables describing the lexical structure of a language."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple


class CharClass(str, Enum):
    """Fine-grained lexical class of a single character."""

    WHITESPACE = "whitespace"
    WORD = "word"
    SYMBOL = "symbol"
    PUNCTUATION = "punctuation"
    OPEN = "open"
    CLOSE = "close"
    STRING_QUOTE = "string_quote"
    ESCAPE = "escape"
    COMMENT_START = "comment_start"
    COMMENT_END = "comment_end"


# Classes whose consecutive characters form a single run; every other class
# advances one character at a time.
GROUPING_CLASSES = frozenset({CharClass.WHITESPACE, CharClass.WORD, CharClass.SYMBOL})


@dataclass(frozen=True, slots=True)
class SyntaxTable:
    """Delimiters and character classes for one language.

    ``brackets`` pairs openers with closers, ``line_comments`` lists the
    sequences starting a comment that runs to end of line, and
    ``block_comments`` pairs block comment starters with their terminators.
    ``long_strings`` lists multi-character quotes such as Python's ``\"\"\"``,
    which open a string closed only by the same sequence.
    Comment delimiters may span several characters; their characters keep
    the class they would otherwise have unless the delimiter is a single
    character.
    """

    name: str = "custom"
    brackets: Tuple[Tuple[str, str], ...] = (("(", ")"),)
    string_delimiters: str = '"'
    long_strings: Tuple[str, ...] = ()
    escape_chars: str = "\\"
    line_comments: Tuple[str, ...] = ()
    block_comments: Tuple[Tuple[str, str], ...] = ()
    nested_block_comments: bool = False
    word_chars: str = "_"
    symbol_chars: str = ""
    _closers: Dict[str, str] = field(init=False, repr=False, compare=False)
    _openers: Dict[str, str] = field(init=False, repr=False, compare=False)
    _class_cache: Dict[str, CharClass] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        for opener, closer in self.brackets:
            if len(opener) != 1 or len(closer) != 1:
                raise ValueError("brackets must pair single characters")
        if any(not seq for seq in self.line_comments):
            raise ValueError("line comment starters cannot be empty")
        if any(not start or not end for start, end in self.block_comments):
            raise ValueError("block comment delimiters cannot be empty")
        if any(len(seq) < 2 for seq in self.long_strings):
            raise ValueError("long string delimiters need at least two characters")
        object.__setattr__(self, "_closers", dict(self.brackets))
        object.__setattr__(
            self, "_openers", {closer: opener for opener, closer in self.brackets}
        )
        object.__setattr__(self, "_class_cache", {})
        # Longest first so "///" wins over "//" when both are declared.
        object.__setattr__(
            self,
            "line_comments",
            tuple(sorted(self.line_comments, key=len, reverse=True)),
        )
        object.__setattr__(
            self,
            "long_strings",
            tuple(sorted(self.long_strings, key=len, reverse=True)),
        )

    @property
    def longest_delimiter(self) -> int:
        lengths = [len(seq) for seq in self.line_comments]
        lengths.extend(len(seq) for seq in self.long_strings)
        for start, end in self.block_comments:
            lengths.extend((len(start), len(end)))
        return max(lengths, default=1)

    def closer_for(self, opener: str) -> Optional[str]:
        return self._closers.get(opener)

    def opener_for(self, closer: str) -> Optional[str]:
        return self._openers.get(closer)

    def is_opener(self, char: str) -> bool:
        return char in self._closers

    def is_closer(self, char: str) -> bool:
        return char in self._openers

    def is_string_delimiter(self, char: str) -> bool:
        return char in self.string_delimiters

    def is_escape(self, char: str) -> bool:
        return char in self.escape_chars

    def char_class(self, char: str) -> CharClass:
        cached = self._class_cache.get(char)
        if cached is None:
            cached = self._classify_char(char)
            self._class_cache[char] = cached
        return cached

    def _classify_char(self, char: str) -> CharClass:
        if char in self.string_delimiters:
            return CharClass.STRING_QUOTE
        if char in self.escape_chars:
            return CharClass.ESCAPE
        if char in self._closers:
            return CharClass.OPEN
        if char in self._openers:
            return CharClass.CLOSE
        if char in self.line_comments or any(
            char == start for start, _ in self.block_comments
        ):
            return CharClass.COMMENT_START
        if char == "\n" and self.line_comments:
            return CharClass.COMMENT_END
        if char.isspace():
            return CharClass.WHITESPACE
        if char.isalnum() or char in self.word_chars:
            return CharClass.WORD
        if char in self.symbol_chars:
            return CharClass.SYMBOL
        return CharClass.PUNCTUATION
