import pytest

from upcase_engine.case import (
    AsciiCaseTable,
    CaseTable,
    MappingCaseTable,
    UnicodeCaseTable,
    get_case_table,
    register_case_table,
)
from upcase_engine.errors import UnknownCaseTableError

SAMPLE = "abcxyzABC019 éüßǅſıñ-_(;"


def test_unicode_table() -> None:
    table = UnicodeCaseTable()

    assert table.upcase("a") == "A"
    assert table.upcase("é") == "É"
    assert table.upcase("ß") == "ß"
    assert table.upcase("1") == "1"
    assert table["q"] == "Q"


def test_ascii_table_ignores_non_ascii() -> None:
    table = AsciiCaseTable()

    assert table.upcase_text("héllo") == "HéLLO"


@pytest.mark.parametrize("table", [UnicodeCaseTable(), AsciiCaseTable(), CaseTable()])
def test_tables_are_idempotent_and_length_preserving(table: CaseTable) -> None:
    for char in SAMPLE:
        upper = table.upcase(char)
        assert len(upper) == 1
        assert table.upcase(upper) == upper


def test_mapping_table_drops_chained_entries() -> None:
    table = MappingCaseTable({"a": "A", "A": "B"})

    assert table.upcase("a") == "a"
    assert table.upcase("A") == "B"
    assert table.upcase(table.upcase("A")) == "B"


def test_mapping_table_rejects_multi_character_entries() -> None:
    with pytest.raises(ValueError):
        MappingCaseTable({"ß": "SS"})


def test_case_table_registry() -> None:
    assert isinstance(get_case_table("ASCII"), AsciiCaseTable)

    with pytest.raises(UnknownCaseTableError):
        get_case_table("klingon")
    with pytest.raises(KeyError):
        get_case_table("klingon")
    with pytest.raises(ValueError):
        register_case_table("unicode", UnicodeCaseTable)

    register_case_table("vowels", lambda: MappingCaseTable({"a": "A", "e": "E"}))
    assert get_case_table("vowels").upcase_text("beat") == "bEAt"
