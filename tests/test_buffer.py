import pytest

from upcase_engine.buffer import Buffer, BufferValidationError, TextHost


def test_buffer_reads_offsets_across_lines() -> None:
    buffer = Buffer.from_text("ab\ncd")

    assert buffer.length() == 5
    assert buffer.char_at(2) == "\n"
    assert buffer.get_text(1, 4) == "b\nc"
    assert isinstance(buffer, TextHost)


def test_empty_buffer_has_zero_length() -> None:
    buffer = Buffer()

    assert buffer.length() == 0
    assert buffer.get_text(0, 0) == ""


def test_char_at_end_of_buffer_raises() -> None:
    buffer = Buffer.from_text("ab")

    with pytest.raises(IndexError):
        buffer.char_at(2)


def test_replace_range_bumps_version_and_records_offset() -> None:
    buffer = Buffer.from_text("hello world")

    delta = buffer.replace_range(6, 11, "WORLD")

    assert buffer.text == "hello WORLD"
    assert buffer.version == 1
    assert buffer.last_change_offset == 6
    assert delta.begin == 6
    assert delta.end == 11


def test_insert_at_point_advances_point() -> None:
    buffer = Buffer.from_text("ac")
    buffer.goto(1)

    buffer.insert("b")

    assert buffer.text == "abc"
    assert buffer.point == 2


def test_same_length_replace_keeps_point() -> None:
    buffer = Buffer.from_text("abc def")
    buffer.goto(5)

    buffer.replace_range(4, 7, "DEF")

    assert buffer.point == 5


def test_undo_and_redo_restore_text_and_point() -> None:
    buffer = Buffer.from_text("ac")
    buffer.goto(1)
    buffer.insert("b")

    entry = buffer.undo()

    assert entry is not None
    assert buffer.text == "ac"
    assert buffer.point == 1

    buffer.redo()

    assert buffer.text == "abc"
    assert buffer.point == 2
    assert buffer.undo_timeline.labels() == ["insert_text"]


def test_region_uses_mark_and_point() -> None:
    buffer = Buffer.from_text("foo bar")
    buffer.goto(6)
    buffer.set_mark()
    buffer.goto(2)

    assert buffer.region() == (2, 6)
    assert buffer.cursor() == (0, 2)


def test_cursor_reports_row_and_column() -> None:
    buffer = Buffer.from_text("ab\ncd")
    buffer.goto(4)

    assert buffer.cursor() == (1, 1)


def test_out_of_range_positions_rejected() -> None:
    buffer = Buffer.from_text("abc")

    with pytest.raises(BufferValidationError):
        buffer.goto(4)
    with pytest.raises(BufferValidationError):
        buffer.replace_range(-1, 2, "x")
