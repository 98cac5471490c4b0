"""Tests for the transmute command-line entry point."""

import io
import json

from transmute.cli import main
from transmute.highlighter import highlight
from transmute.synthesizer import synthesize
from transmute.themes import get_theme

TEXT = "buy milk\n\nfinish report\n"


def _write(tmp_path, text: str = TEXT):
    path = tmp_path / "notes.txt"
    path.write_text(text, encoding="utf-8")
    return str(path)


class TestMain:
    def test_html_output(self, tmp_path, capsys):
        assert main([_write(tmp_path), "--language", "python"]) == 0
        out = capsys.readouterr().out
        assert out == highlight(synthesize(TEXT, "python", "seeded"), "python", "matrix-green") + "\n"

    def test_plain_output(self, tmp_path, capsys):
        assert main([_write(tmp_path), "-l", "go", "--format", "plain"]) == 0
        assert capsys.readouterr().out == synthesize(TEXT, "go", "seeded") + "\n"

    def test_reads_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("walk the dog"))
        assert main(["--format", "plain"]) == 0
        assert capsys.readouterr().out == synthesize("walk the dog", "javascript", "seeded") + "\n"

    def test_random_mode_with_seed_is_repeatable(self, tmp_path, capsys):
        path = _write(tmp_path)
        main([path, "--mode", "random", "--seed", "5", "--format", "plain"])
        first = capsys.readouterr().out
        main([path, "--mode", "random", "--seed", "5", "--format", "plain"])
        assert capsys.readouterr().out == first

    def test_document_flag(self, tmp_path, capsys):
        path = _write(tmp_path, "# Shopping\n- milk\n")
        assert main([path, "--document", "--format", "plain", "-l", "ruby"]) == 0
        assert "class Shopping" in capsys.readouterr().out

    def test_terminal_output(self, tmp_path, capsys):
        assert main([_write(tmp_path), "--format", "terminal"]) == 0
        out = capsys.readouterr().out
        code = synthesize(TEXT, "javascript", "seeded")
        assert "".join(out.split()) == "".join(code.split())

    def test_unknown_theme_prints_unstyled(self, tmp_path, capsys):
        assert main([_write(tmp_path), "--theme", "nope"]) == 0
        assert "<span" not in capsys.readouterr().out

    def test_themes_file(self, tmp_path, capsys):
        theme = get_theme("matrix-green").model_dump()
        theme.update(name="ocean", keyword="#123456", comment="#123456", punctuation="#123456")
        themes_path = tmp_path / "themes.json"
        themes_path.write_text(json.dumps([theme]), encoding="utf-8")
        args = [_write(tmp_path, "if x"), "--themes-file", str(themes_path), "--theme", "ocean"]
        assert main(args) == 0
        assert "#123456" in capsys.readouterr().out

    def test_malformed_themes_file(self, tmp_path, capsys):
        themes_path = tmp_path / "themes.json"
        themes_path.write_text("{not json", encoding="utf-8")
        assert main(["--themes-file", str(themes_path), "--list-themes"]) == 1
        assert "invalid themes file" in capsys.readouterr().err

    def test_themes_file_with_bad_colour(self, tmp_path, capsys):
        theme = get_theme("matrix-green").model_dump()
        theme.update(name="ocean", keyword="#fff\" onclick=\"x")
        themes_path = tmp_path / "themes.json"
        themes_path.write_text(json.dumps([theme]), encoding="utf-8")
        assert main([_write(tmp_path), "--themes-file", str(themes_path)]) == 1
        assert "invalid themes file" in capsys.readouterr().err

    def test_missing_themes_file(self, tmp_path, capsys):
        assert main(["--themes-file", str(tmp_path / "nope.json"), "--list-themes"]) == 1
        assert "cannot read" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.txt")]) == 1
        assert "cannot read" in capsys.readouterr().err


class TestListing:
    def test_list_languages(self, capsys):
        assert main(["--list-languages"]) == 0
        out = capsys.readouterr().out
        assert "C++" in out
        assert ".rs" in out
        assert len(out.strip().split("\n")) == 7

    def test_list_themes(self, capsys):
        assert main(["--list-themes"]) == 0
        out = capsys.readouterr().out
        assert "matrix-green" in out
        assert "Tokyo Nights" in out
