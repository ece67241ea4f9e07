import pytest

from upcase_engine.buffer import Buffer
from upcase_engine.case import UnicodeCaseTable, filter_character, on_character_typed
from upcase_engine.syntax import SyntaxOracle, get_syntax


def type_at_end(text: str, char: str) -> tuple[str, Buffer]:
    buffer = Buffer.from_text(text)
    oracle = SyntaxOracle(get_syntax("lisp"))
    inserted = on_character_typed(
        buffer, buffer.length(), char, UnicodeCaseTable(), oracle
    )
    return inserted, buffer


def test_plain_insertion_point_upcases() -> None:
    inserted, buffer = type_at_end("(foo ", "a")

    assert inserted == "A"
    assert buffer.text == "(foo A"


def test_string_insertion_point_keeps_character() -> None:
    inserted, buffer = type_at_end('(foo "', "a")

    assert inserted == "a"
    assert buffer.text == '(foo "a'


def test_comment_insertion_point_keeps_character() -> None:
    inserted, _ = type_at_end("; x", "a")

    assert inserted == "a"


def test_unmapped_character_inserted_unchanged() -> None:
    inserted, _ = type_at_end("(", "1")

    assert inserted == "1"


def test_filter_character_does_not_mutate() -> None:
    buffer = Buffer.from_text("(foo ")
    oracle = SyntaxOracle(get_syntax("lisp"))

    assert filter_character(buffer, 5, "z", UnicodeCaseTable(), oracle) == "Z"
    assert buffer.text == "(foo "
    assert buffer.version == 0


def test_multi_character_input_rejected() -> None:
    buffer = Buffer.from_text("")
    oracle = SyntaxOracle(get_syntax("lisp"))

    with pytest.raises(ValueError):
        on_character_typed(buffer, 0, "ab", UnicodeCaseTable(), oracle)
