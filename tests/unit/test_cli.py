"""Unit tests for the command line interface."""

import json

import pytest
from typer.testing import CliRunner

from loopcorner import __version__
from loopcorner.cli.app import app
from loopcorner.io import dump_loops

runner = CliRunner()


@pytest.fixture
def square_file(tmp_path, square_loop):
    path = tmp_path / "square.json"
    dump_loops([square_loop], path)
    return path


class TestCornersCommand:
    """Tests for the corners command."""

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_json_loops(self, square_file):
        result = runner.invoke(app, [str(square_file)])

        assert result.exit_code == 0
        assert "Loop 0" in result.output
        assert "quite dull" in result.output
        assert "4 corners" in result.output

    def test_quiet_prints_only_summary(self, square_file):
        result = runner.invoke(app, [str(square_file), "--quiet"])

        assert result.exit_code == 0
        assert "Loop 0" not in result.output
        assert "4 corners" in result.output

    def test_only_quite_filters_rows(self, tmp_path):
        path = tmp_path / "shallow.json"
        # Near straight join at (10, 0), right angles elsewhere
        path.write_text(
            json.dumps(
                {
                    "loops": [
                        [
                            [[0, 0], [10, 0]],
                            [[10, 0], [110, 3]],
                            [[110, 3], [110, 50]],
                            [[110, 50], [0, 50]],
                            [[0, 50], [0, 0]],
                        ]
                    ]
                }
            )
        )

        full = runner.invoke(app, [str(path)])
        filtered = runner.invoke(app, [str(path), "--only-quite"])

        assert full.exit_code == 0
        assert filtered.exit_code == 0
        # Five rows plus the summary line, then four quite dull rows plus the summary
        assert full.output.count("dull") == 6
        assert filtered.output.count("dull") == 5
        assert "5 corners" in filtered.output

    def test_missing_input(self, tmp_path):
        result = runner.invoke(app, [str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert "found" in result.output

    def test_invalid_tolerance(self, square_file):
        result = runner.invoke(app, [str(square_file), "--tolerance", "95"])
        assert result.exit_code == 1
        assert "Invalid option" in result.output

    def test_invalid_loop_file(self, tmp_path):
        path = tmp_path / "open.json"
        path.write_text(json.dumps({"loops": [[[[0, 0], [1, 0]]]]}))

        result = runner.invoke(app, [str(path)])

        assert result.exit_code == 1
        assert "closed" in result.output

    def test_non_finite_point(self, tmp_path):
        path = tmp_path / "nan.json"
        path.write_text('{"loops": [[[[0, 0], [NaN, 0]], [[NaN, 0], [0, 0]]]]}')

        result = runner.invoke(app, [str(path)])

        assert result.exit_code == 1
        assert "finite" in result.output

    def test_help_shows_input_argument(self):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "INPUT_PATH" in result.output

    def test_font_requires_glyph(self, test_font):
        result = runner.invoke(app, [str(test_font)])
        assert result.exit_code == 1
        assert "--glyph" in result.output

    def test_font_glyph(self, test_font):
        result = runner.invoke(app, [str(test_font), "--glyph", "square"])

        assert result.exit_code == 0
        assert "TrueType" in result.output
        assert "quite sharp" in result.output

    def test_font_unknown_glyph(self, test_font):
        result = runner.invoke(app, [str(test_font), "--glyph", "missing"])
        assert result.exit_code == 1
        assert "missing" in result.output

    def test_log_file(self, square_file, tmp_path):
        log_file = tmp_path / "run.log"

        result = runner.invoke(app, [str(square_file), "--log-file", str(log_file)])

        assert result.exit_code == 0
        assert log_file.exists()
