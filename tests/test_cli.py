"""Tests for the command-line interface."""

import io
import os
from unittest.mock import patch

import pytest

from pathmark.cli import EXIT_IO_ERROR, EXIT_MAP_ERROR, EXIT_OK, main


@pytest.fixture
def map_file(tmp_path):
    path = tmp_path / "map.txt"
    path.write_text("S..\n.B.\n..X\n")
    return path


@pytest.fixture(autouse=True)
def clean_env():
    with patch.dict(os.environ, {}, clear=True):
        yield


class TestMarkCommand:
    """Tests for `pathmark mark`."""

    def test_marks_file(self, map_file, capsys):
        assert main(["mark", str(map_file)]) == EXIT_OK

        out = capsys.readouterr().out
        assert out == "*..\n*B.\n.**\n"

    def test_reads_stdin(self, capsys):
        with patch("sys.stdin", io.StringIO("S.X\n")):
            assert main(["mark"]) == EXIT_OK

        assert capsys.readouterr().out == "***\n"

    def test_writes_output_file(self, map_file, tmp_path, capsys):
        out_path = tmp_path / "out.txt"

        assert main(["mark", str(map_file), "-o", str(out_path)]) == EXIT_OK
        assert out_path.read_text() == "*..\n*B.\n.**\n"
        assert capsys.readouterr().out == ""

    def test_reports_cost(self, map_file, capsys):
        assert main(["mark", str(map_file), "--cost"]) == EXIT_OK

        assert "cost: 7, steps: 3" in capsys.readouterr().err

    def test_reports_unreachable(self, tmp_path, capsys):
        path = tmp_path / "blocked.txt"
        path.write_text("SBX")

        assert main(["mark", str(path), "--cost"]) == EXIT_OK

        captured = capsys.readouterr()
        assert captured.out == "*BX\n"
        assert "unreachable" in captured.err

    def test_color_output_keeps_map_text(self, map_file, capsys):
        assert main(["mark", str(map_file), "--color"]) == EXIT_OK

        # Not a terminal, so rich writes plain text
        assert capsys.readouterr().out == "*..\n*B.\n.**\n"

    def test_color_output_does_not_wrap_wide_rows(self, tmp_path, capsys):
        """Rows wider than the console stay on a single line."""
        path = tmp_path / "wide.txt"
        path.write_text("S" + "." * 120 + "X\n")

        assert main(["mark", str(path), "--color"]) == EXIT_OK
        assert capsys.readouterr().out == "*" * 122 + "\n"

    def test_invalid_map(self, tmp_path, capsys):
        path = tmp_path / "bad.txt"
        path.write_text("S..\n...")

        assert main(["mark", str(path)]) == EXIT_MAP_ERROR
        assert "No end point specified" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        assert main(["mark", str(tmp_path / "nope.txt")]) == EXIT_IO_ERROR
        assert "Error" in capsys.readouterr().err


class TestSolveCommand:
    """Tests for `pathmark solve`."""

    def test_prints_cells_and_cost(self, map_file, capsys):
        assert main(["solve", str(map_file)]) == EXIT_OK

        lines = capsys.readouterr().out.splitlines()
        assert lines == ["0,0", "1,0", "2,1", "2,2", "cost: 7"]

    def test_unreachable(self, tmp_path, capsys):
        path = tmp_path / "blocked.txt"
        path.write_text("SBX")

        assert main(["solve", str(path)]) == EXIT_OK
        assert capsys.readouterr().out == "unreachable\n"


class TestMain:
    """Tests for argument handling."""

    def test_no_command_prints_help(self, capsys):
        assert main([]) == EXIT_IO_ERROR
        assert "usage" in capsys.readouterr().out.lower()

    def test_config_enables_cost(self, map_file, tmp_path, capsys):
        config = tmp_path / "pathmark.yaml"
        config.write_text("output:\n  show_cost: true\n")

        assert main(["--config", str(config), "mark", str(map_file)]) == EXIT_OK
        assert "cost: 7" in capsys.readouterr().err
