import pytest

from upcase_engine.runtime import telemetry


def test_env_flag_reads_prefixed_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("UPCASE_ENGINE_SAMPLE_FLAG", "Yes")
    monkeypatch.delenv("UPCASE_ENGINE_MISSING_FLAG", raising=False)

    assert telemetry.env("SAMPLE_FLAG") == "Yes"
    assert telemetry.env_flag("SAMPLE_FLAG", False) is True
    assert telemetry.env_flag("MISSING_FLAG", True) is True


def test_unknown_preset_is_rejected() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")


def test_span_reraises_and_records_failure() -> None:
    with pytest.raises(KeyError):
        with telemetry.span("test::failing", metadata={"step": 1}) as handle:
            handle.add_metadata("stage", "before")
            raise KeyError("boom")

    assert handle.metadata == {"step": "1", "stage": "before"}
