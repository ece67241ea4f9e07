from __future__ import annotations

from typing import List

import pytest

from upcase_engine.actions import upcase_buffer_action, upcase_selection_action
from upcase_engine.case import AsciiCaseTable, UpcaseResult
from upcase_engine.config import UpcaseConfig
from upcase_engine.engine import UpcaseEngine
from upcase_engine.modes import InsertMode
from upcase_engine.syntax import SyntaxClass


def make_engine(text: str = "", **config_kwargs) -> UpcaseEngine:
    engine = UpcaseEngine.from_text(text, config=UpcaseConfig(**config_kwargs))
    engine.buffer.goto(engine.buffer.length())
    return engine


def collect(engine: UpcaseEngine, event: str) -> List[object]:
    payloads: List[object] = []
    engine.bus.subscribe(event, payloads.append)
    return payloads


def test_engine_starts_disabled_and_inserts_verbatim() -> None:
    engine = make_engine("(foo ")

    assert engine.enabled is False
    assert engine.on_character_typed("a") == "a"
    assert engine.text == "(foo a"


def test_enabled_engine_filters_typing() -> None:
    engine = make_engine()
    engine.enable()

    typed = engine.type_text('(setq x "hello world") ; Done')

    assert typed == '(SETQ X "hello world") ; Done'
    assert engine.text == typed
    assert engine.classify() is SyntaxClass.COMMENT


def test_toggle_switches_modes() -> None:
    engine = make_engine()

    assert engine.toggle() is True
    assert engine.modes.active_name == "upcase"
    assert engine.toggle() is False
    assert engine.modes.active_name == "insert"


def test_activation_upcases_existing_text_when_configured() -> None:
    engine = make_engine('(foo "bar")', upcase_existing_on_activation=True)
    applied = collect(engine, "upcase.applied")

    engine.enable()

    assert engine.text == '(FOO "bar")'
    assert len(applied) == 1
    assert isinstance(applied[0], UpcaseResult)


def test_activation_leaves_existing_text_by_default() -> None:
    engine = make_engine("(foo)")

    engine.enable()

    assert engine.text == "(foo)"


def test_activation_reports_unbalanced_text() -> None:
    engine = make_engine("(foo", upcase_existing_on_activation=True)
    unbalanced = collect(engine, "upcase.unbalanced")

    engine.enable()

    assert engine.enabled
    assert engine.text == "(foo"
    assert len(unbalanced) == 1
    assert "unclosed opener" in unbalanced[0].message


def test_handle_key_routes_text_through_filter() -> None:
    engine = make_engine("(list ")
    engine.enable()

    result = engine.handle_key("x", text="x")

    assert result.consumed
    assert result.inserted == "X"
    assert engine.text == "(list X"


def test_handle_key_special_keys() -> None:
    engine = make_engine("(ab")
    engine.enable()

    assert engine.handle_key("BACKSPACE").status == "deleted"
    assert engine.text == "(a"
    assert engine.handle_key("ENTER").inserted == "\n"
    assert engine.handle_key("c", text="c", modifiers=("CTRL",)).consumed is False
    assert engine.text == "(a\n"


def test_engine_upcase_region_with_case_table_override() -> None:
    engine = make_engine("(héllo)")

    result = engine.upcase_region(0, engine.buffer.length(), case_table=AsciiCaseTable())

    assert result.is_ok
    assert engine.text == "(HéLLO)"


def test_engine_upcase_buffer_unbalanced() -> None:
    engine = make_engine("(foo (bar)")

    result = engine.upcase_buffer()

    assert result.is_unbalanced
    assert engine.text == "(foo (bar)"


def test_selection_action_uses_region() -> None:
    engine = make_engine("foo (bar)")
    engine.buffer.goto(0)
    engine.buffer.set_mark()
    engine.buffer.goto(3)

    result = upcase_selection_action(engine.context)

    assert result.status == "upcased"
    assert engine.text == "FOO (bar)"


def test_selection_action_without_mark() -> None:
    engine = make_engine("foo")

    assert upcase_selection_action(engine.context).status == "no_selection"


def test_buffer_action_reports_unbalanced() -> None:
    engine = make_engine('"open')

    result = upcase_buffer_action(engine.context)

    assert result.status == "unbalanced"
    assert result.message is not None


def test_preview_character_respects_mode() -> None:
    engine = make_engine("(a ")

    assert engine.preview_character("b") == "b"
    engine.enable()
    assert engine.preview_character("b") == "B"
    assert engine.text == "(a "


def test_mode_manager_guards() -> None:
    engine = make_engine()

    with pytest.raises(ValueError):
        engine.modes.register_mode(InsertMode)
    with pytest.raises(KeyError):
        engine.modes.switch_mode("visual")


def test_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("UPCASE_ENGINE_SYNTAX", "c")
    monkeypatch.setenv("UPCASE_ENGINE_CASE_TABLE", "ascii")
    monkeypatch.setenv("UPCASE_ENGINE_UPCASE_EXISTING", "yes")

    config = UpcaseConfig.from_env()

    assert config.upcase_existing_on_activation is True
    assert config.resolve_syntax().name == "c"
    assert isinstance(config.resolve_case_table(), AsciiCaseTable)
