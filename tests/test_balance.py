import pytest

from upcase_engine.buffer import Buffer
from upcase_engine.syntax import check_balance, get_syntax, is_unbalanced


def lisp_report(text: str, begin: int = 0, end: int | None = None):
    buffer = Buffer.from_text(text)
    stop = buffer.length() if end is None else end
    return check_balance(buffer, begin, stop, get_syntax("lisp"))


class ExplodingBuffer(Buffer):
    def get_text(self, begin: int, end: int) -> str:
        raise RuntimeError("storage failure")


def test_unclosed_opener_is_unbalanced() -> None:
    buffer = Buffer.from_text("(foo (bar)")

    assert is_unbalanced(buffer, 0, buffer.length(), get_syntax("lisp")) is True

    report = lisp_report("(foo (bar)")
    assert report.balanced is False
    assert report.reason == "unclosed opener"
    assert report.position == 0
    assert "Unbalanced" in report.message


def test_balanced_expression() -> None:
    buffer = Buffer.from_text("(foo (bar) baz)")

    assert is_unbalanced(buffer, 0, buffer.length(), get_syntax("lisp")) is False
    assert lisp_report("(foo (bar) baz)")


def test_stray_closer() -> None:
    report = lisp_report("foo)")

    assert report.reason == "unmatched closer"
    assert report.position == 3


def test_mismatched_closer() -> None:
    buffer = Buffer.from_text("(]")

    report = check_balance(buffer, 0, 2, get_syntax("c"))

    assert report.reason == "mismatched closer"
    assert report.position == 1


@pytest.mark.parametrize(
    ("text", "reason"),
    [
        ('"abc', "unterminated string"),
        ("#| abc", "unterminated comment"),
        ("abc\\", "dangling escape"),
    ],
)
def test_unterminated_constructs(text: str, reason: str) -> None:
    assert lisp_report(text).reason == reason


@pytest.mark.parametrize(
    "text",
    [
        "; (",
        '"(" x',
        "#| ) |# (a)",
        "(a) ; trailing comment without newline",
        "",
    ],
)
def test_delimiters_inside_comments_and_strings_are_ignored(text: str) -> None:
    assert lisp_report(text).balanced


def test_range_is_checked_as_a_standalone_fragment() -> None:
    assert lisp_report("(a) (b", 0, 3).balanced
    assert not lisp_report("(a) (b", 0, 6).balanced
    assert not lisp_report('"a" b', 1, 5).balanced


def test_unexpected_failures_propagate() -> None:
    buffer = ExplodingBuffer.from_text("(a)")

    with pytest.raises(RuntimeError, match="storage failure"):
        is_unbalanced(buffer, 0, 3, get_syntax("lisp"))
