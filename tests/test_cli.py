"""
Tests for the command line interface.
"""

import json
import os
import sys

import pytest
from PIL import Image

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

import main
from color_selector import NamedColor
from config import OUTPUT_CONFIG


@pytest.fixture
def input_file(tmp_path, sample_text):
    path = tmp_path / "input.txt"
    path.write_text(sample_text, encoding="utf-8")
    return str(path)


@pytest.mark.cli
class TestArgumentParsing:
    def test_defaults(self):
        args = main.parse_arguments(["--input", "text.txt", "--output", "cloud.png"])
        assert args.format == "png"
        assert args.image_size is None
        assert args.max_unique_words == 100
        assert isinstance(args.background, NamedColor)
        assert args.background.name == "black"
        assert not args.disable_rotation

    def test_parses_sizes_and_colors(self):
        args = main.parse_arguments(
            [
                "-i", "text.txt",
                "-o", "cloud.jpg",
                "--image-size", "720p",
                "--colors", "red", "#00ff00",
                "--background", "white",
            ]
        )
        assert args.image_size == (1280, 720)
        assert [color.name for color in args.colors] == ["red", "#00ff00"]
        assert args.format == "jpeg"

    @pytest.mark.parametrize(
        "extra",
        [
            ["--image-size", "huge"],
            ["--colors", "not-a-color"],
            ["--max-unique-words", "5"],
            ["--max-unique-words", "501"],
            ["--distance-step", "0"],
            ["--format", "svg"],
        ],
    )
    def test_rejects_bad_values(self, extra, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main.parse_arguments(["-i", "text.txt", "-o", "cloud.png"] + extra)
        assert excinfo.value.code == 2

    def test_input_and_output_are_required(self):
        with pytest.raises(SystemExit):
            main.parse_arguments(["--input", "text.txt"])


@pytest.mark.cli
@pytest.mark.integration
class TestMain:
    def test_writes_image(self, input_file, tmp_path):
        output = tmp_path / "cloud.png"
        code = main.main(
            ["-i", input_file, "-o", str(output), "--image-size", "400x300", "--seed", "5", "--quiet"]
        )
        assert code == 0
        with Image.open(output) as image:
            assert image.size == (400, 300)

    def test_quiet_silences_progress(self, input_file, tmp_path, capsys):
        output = tmp_path / "cloud.png"
        main.main(["-i", input_file, "-o", str(output), "--image-size", "400x300", "-q"])
        assert OUTPUT_CONFIG["verbose"] is False
        assert capsys.readouterr().out == ""

    def test_json_summary(self, input_file, tmp_path, capsys):
        output = tmp_path / "cloud.png"
        code = main.main(
            ["-i", input_file, "-o", str(output), "--image-size", "400x300", "--json", "-q"]
        )
        assert code == 0
        summary = json.loads(capsys.readouterr().out)
        assert summary["width"] == 400
        assert summary["height"] == 300
        assert summary["aspect_ratio"] == "4:3"
        assert summary["max_frequency"] == 5

    def test_verbose_run_prints_summary(self, input_file, tmp_path, capsys):
        output = tmp_path / "cloud.png"
        main.main(["-i", input_file, "-o", str(output), "--image-size", "400x300"])
        out = capsys.readouterr().out
        assert "Word Cloud Summary" in out
        assert "Word cloud saved to" in out

    def test_empty_palette_exits_with_error(self, input_file, tmp_path, capsys):
        output = tmp_path / "cloud.png"
        code = main.main(
            [
                "-i", input_file,
                "-o", str(output),
                "--image-size", "400x300",
                "--colors", "white", "grey",
                "-q",
            ]
        )
        assert code == 1
        assert "Error:" in capsys.readouterr().out
        assert not output.exists()

    def test_missing_input_file_is_treated_as_text(self, tmp_path):
        output = tmp_path / "cloud.png"
        code = main.main(
            ["-i", "lonely mountain river", "-o", str(output), "--image-size", "400x300", "-q"]
        )
        assert code == 0
        assert output.exists()
