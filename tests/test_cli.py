from pathlib import Path

from click.testing import CliRunner

from upcase_engine.cli import EXIT_UNBALANCED, main


def write_source(tmp_path: Path, text: str, name: str = "source.lisp") -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_cli_prints_upcased_source(tmp_path: Path) -> None:
    path = write_source(tmp_path, '(defun foo () "doc") ; hi\n')

    result = CliRunner().invoke(main, [str(path), "--syntax", "lisp"])

    assert result.exit_code == 0
    assert result.stdout == '(DEFUN FOO () "doc") ; hi\n'


def test_cli_reads_stdin() -> None:
    result = CliRunner().invoke(main, ["-", "--syntax", "lisp"], input="(a b)")

    assert result.exit_code == 0
    assert result.stdout == "(A B)"


def test_cli_in_place_rewrites_file(tmp_path: Path) -> None:
    path = write_source(tmp_path, "int x; // note\n", name="main.c")

    result = CliRunner().invoke(main, [str(path), "--syntax", "c", "--in-place"])

    assert result.exit_code == 0
    assert path.read_text(encoding="utf-8") == "INT X; // note\n"


def test_cli_unbalanced_source_is_untouched(tmp_path: Path) -> None:
    path = write_source(tmp_path, "(foo (bar)")

    result = CliRunner().invoke(main, [str(path), "--syntax", "lisp", "--in-place"])

    assert result.exit_code == EXIT_UNBALANCED
    assert path.read_text(encoding="utf-8") == "(foo (bar)"


def test_cli_check_mode(tmp_path: Path) -> None:
    balanced = write_source(tmp_path, "(a)", name="ok.lisp")
    broken = write_source(tmp_path, "(a", name="broken.lisp")
    runner = CliRunner()

    ok = runner.invoke(main, [str(balanced), "--syntax", "lisp", "--check"])
    bad = runner.invoke(main, [str(broken), "--syntax", "lisp", "--check"])

    assert ok.exit_code == 0
    assert "balanced" in ok.stdout
    assert bad.exit_code == EXIT_UNBALANCED
    assert broken.read_text(encoding="utf-8") == "(a"


def test_cli_in_place_keeps_crlf_line_endings(tmp_path: Path) -> None:
    path = tmp_path / "notes.lisp"
    path.write_bytes(b"(foo bar)\r\n; note\r\n")

    result = CliRunner().invoke(main, [str(path), "--syntax", "lisp", "--in-place"])

    assert result.exit_code == 0
    assert path.read_bytes() == b"(FOO BAR)\r\n; note\r\n"


def test_cli_rejects_source_that_is_not_utf8(tmp_path: Path) -> None:
    path = tmp_path / "latin1.lisp"
    path.write_bytes(b"(caf\xe9)")

    result = CliRunner().invoke(main, [str(path), "--syntax", "lisp"])

    assert result.exit_code == 1
    assert not isinstance(result.exception, UnicodeDecodeError)
    assert "UTF-8" in result.output
    assert path.read_bytes() == b"(caf\xe9)"
