"""
Command line tests

Tests option parsing (order-sensitive pattern modes, positional pattern)
and the full pipeline from input files to stdout, including exit codes.
"""

import io

import pytest

from colalign.__main__ import main, options_parse
from colalign.models import AlignSide, Justify, MatcherKind


PEOPLE = "John Jacob@Jingleheimerschmidt@5300\nJohn@Doe@1200\nJanet@Smith@900\n"


class TestOptionParsing:
    """Test how the command line becomes pattern specs"""

    def test_positional_pattern(self):
        """Without -e the first positional is the pattern"""
        options = options_parse(["@", "a.txt", "b.txt"])

        assert [spec.text for spec in options.patternSpecs] == ["@"]
        assert options.files == ["a.txt", "b.txt"]

    def test_all_positionals_are_files_with_e(self):
        """With -e every positional is an input file"""
        options = options_parse(["-e", "@", "a.txt"])

        assert [spec.text for spec in options.patternSpecs] == ["@"]
        assert options.files == ["a.txt"]

    def test_modes_are_order_sensitive(self):
        """Each pattern keeps the modes active when it was declared"""
        options = options_parse(["-F", "-e", ".", "-P", "-a", "-r", "-e", "a.c"])
        first, second = options.patternSpecs

        assert first.kind is MatcherKind.LITERAL
        assert first.side is AlignSide.BEFORE
        assert first.justify is Justify.LEFT
        assert second.kind is MatcherKind.REGEX
        assert second.side is AlignSide.AFTER
        assert second.justify is Justify.RIGHT

    def test_skip_pattern(self):
        """-s declares a skip pattern in sequence with -e"""
        options = options_parse(["-s", "#", "-e", "="])

        assert [(spec.text, spec.skip) for spec in options.patternSpecs] == [
            ("#", True),
            ("=", False),
        ]

    def test_skip_only_needs_positional(self):
        """A skip pattern alone does not count as the pattern to align on"""
        options = options_parse(["-s", "#", "=", "file.txt"])

        assert [(spec.text, spec.skip) for spec in options.patternSpecs] == [
            ("#", True),
            ("=", False),
        ]
        assert options.files == ["file.txt"]

    def test_no_pattern_is_usage_error(self, capsys):
        """Missing pattern exits with a usage error"""
        with pytest.raises(SystemExit) as excinfo:
            options_parse([])

        assert excinfo.value.code == 2
        assert "no pattern given" in capsys.readouterr().err

    def test_bad_tabsize_is_usage_error(self):
        with pytest.raises(SystemExit) as excinfo:
            options_parse(["-t", "0", "@"])
        assert excinfo.value.code == 2


class TestMain:
    """Test complete runs through main()"""

    def test_align_file(self, tmp_path, capsys):
        """Single pass on the first separator"""
        path = tmp_path / "people.txt"
        path.write_text(PEOPLE)

        main(["@", str(path)])

        assert capsys.readouterr().out.splitlines() == [
            "John Jacob @ Jingleheimerschmidt@5300",
            "John       @ Doe@1200",
            "Janet      @ Smith@900",
        ]

    def test_global_repeat(self, tmp_path, capsys):
        """-g aligns every separator"""
        path = tmp_path / "people.txt"
        path.write_text(PEOPLE)

        main(["-g", "@", str(path)])

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "John Jacob @ Jingleheimerschmidt @ 5300"
        assert len({line.rindex("@") for line in lines}) == 1

    def test_stdin(self, monkeypatch, capsys):
        """No file arguments reads standard input"""
        monkeypatch.setattr("sys.stdin", io.StringIO("a=1\nbbb=2\n"))

        main(["="])

        assert capsys.readouterr().out == "a   = 1\nbbb = 2\n"

    def test_stdin_undecodable_bytes(self, tmp_path, monkeypatch, capsysbinary):
        """Invalid UTF-8 on stdin passes through exactly as from a named file"""
        data = b"caf\xe9=1\nbb=2\n"
        path = tmp_path / "latin1.txt"
        path.write_bytes(data)

        main(["=", str(path)])
        from_file = capsysbinary.readouterr().out

        monkeypatch.setattr(
            "sys.stdin", io.TextIOWrapper(io.BytesIO(data), encoding="utf-8", errors="strict")
        )
        main(["="])
        from_stdin = capsysbinary.readouterr().out

        assert from_file == b"caf\xe9 = 1\nbb   = 2\n"
        assert from_stdin == from_file

    def test_files_aligned_separately(self, tmp_path, capsys):
        """Every file is its own alignment unit"""
        first = tmp_path / "first.txt"
        second = tmp_path / "second.txt"
        first.write_text("a=1\nbbbb=2\n")
        second.write_text("cc=3\n")

        main(["=", str(first), str(second)])

        assert capsys.readouterr().out.splitlines() == ["a    = 1", "bbbb = 2", "cc = 3"]

    def test_concatenate(self, tmp_path, capsys):
        """-c aligns all files together"""
        first = tmp_path / "first.txt"
        second = tmp_path / "second.txt"
        first.write_text("a=1\nbbbb=2\n")
        second.write_text("cc=3\n")

        main(["-c", "=", str(first), str(second)])

        assert capsys.readouterr().out.splitlines() == ["a    = 1", "bbbb = 2", "cc   = 3"]

    def test_fixed_strings(self, tmp_path, capsys):
        """-F matches regex metacharacters literally"""
        path = tmp_path / "dots.txt"
        path.write_text("a.b\nccc.d\n")

        main(["-F", ".", str(path)])

        assert capsys.readouterr().out.splitlines() == ["a   . b", "ccc . d"]

    def test_spacing_options(self, tmp_path, capsys):
        path = tmp_path / "kv.txt"
        path.write_text("a=1\nbbb=2\n")

        main(["--spaces-before", "0", "--spaces-after", "0", "=", str(path)])

        assert capsys.readouterr().out.splitlines() == ["a  =1", "bbb=2"]

    def test_invalid_regex_exits(self, tmp_path, capsys):
        """A bad regular expression is reported and exits 1"""
        path = tmp_path / "input.txt"
        path.write_text("x\n")

        with pytest.raises(SystemExit) as excinfo:
            main(["-e", "(", str(path)])

        captured = capsys.readouterr()
        assert excinfo.value.code == 1
        assert "Invalid pattern" in captured.err
        assert captured.out == ""

    def test_missing_file_exits(self, tmp_path, capsys):
        """Unreadable input is fatal"""
        with pytest.raises(SystemExit) as excinfo:
            main(["@", str(tmp_path / "missing.txt")])

        assert excinfo.value.code == 1
        assert "Error reading input" in capsys.readouterr().err
