"""Tests for the command line tool."""

import io
import json

from pathcmds.cli import looks_like_svg, main
from tests.conftest import SQUARE_D, SQUARE_SVG, TWO_PATH_SVG


def test_looks_like_svg():
    assert looks_like_svg(SQUARE_SVG)
    assert looks_like_svg('  <path d="M0 0"/>')
    assert not looks_like_svg(SQUARE_D)


def test_raw_path_to_json(tmp_path, capsys):
    src = tmp_path / "square.txt"
    src.write_text(SQUARE_D + "\n", encoding="utf-8")
    assert main([str(src)]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data == [[
        {"t": "M", "x": 0.0, "y": 0.0},
        {"t": "L", "x": 10.0, "y": 0.0},
        {"t": "L", "x": 10.0, "y": 10.0},
        {"t": "Z"},
    ]]


def test_svg_to_path_data(tmp_path, capsys):
    src = tmp_path / "two.svg"
    src.write_text(TWO_PATH_SVG, encoding="utf-8")
    assert main([str(src), "--format", "d"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[0] == "M10 10 L90 10 L90 90 L10 90 Z"
    assert lines[1].startswith("M50 20 Q80 50 50 80")


def test_transform_flags(tmp_path, capsys):
    src = tmp_path / "p.txt"
    src.write_text("M1,1", encoding="utf-8")
    args = [str(src), "--scale-x", "2", "--scale-y", "3", "--flip-y", "--offset-x", "5", "--offset-y", "7"]
    assert main(args) == 0
    assert json.loads(capsys.readouterr().out) == [[{"t": "M", "x": 7.0, "y": 4.0}]]


def test_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("M0 0 l5 5"))
    assert main(["-", "--format", "d"]) == 0
    assert capsys.readouterr().out.strip() == "M0 0 L5 5"


def test_output_file(tmp_path):
    src = tmp_path / "p.txt"
    out = tmp_path / "out.txt"
    src.write_text("M0 0 L1 1", encoding="utf-8")
    assert main([str(src), "--format", "d", "-o", str(out)]) == 0
    assert out.read_text(encoding="utf-8") == "M0 0 L1 1\n"


def test_parse_error_exit_status(tmp_path, capsys):
    src = tmp_path / "arc.txt"
    src.write_text("M0 0 A1 1 0 0 0 5 5", encoding="utf-8")
    assert main([str(src)]) == 1
    assert "Arc command" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.svg")]) == 1
    assert "Cannot read" in capsys.readouterr().err


def test_looks_like_svg_after_long_prolog():
    prolog = '<?xml version="1.0"?>\n<!-- ' + "x" * 4000 + " -->\n"
    assert looks_like_svg(prolog + SQUARE_SVG)
    assert not looks_like_svg("M0 0 L10 10 <svg")


def test_svg_with_long_prolog(tmp_path, capsys):
    src = tmp_path / "prolog.svg"
    src.write_text('<?xml version="1.0"?>\n<!-- ' + "x" * 4000 + " -->\n" + SQUARE_SVG, encoding="utf-8")
    assert main([str(src), "--format", "d"]) == 0
    assert capsys.readouterr().out.strip() == "M2 2 L22 2 L22 22 L2 22 Z"


def test_overflowing_number_exit_status(tmp_path, capsys):
    src = tmp_path / "big.txt"
    src.write_text("M1e999 0 L1 1", encoding="utf-8")
    assert main([str(src)]) == 1
    assert "Non-finite" in capsys.readouterr().err
    assert main([str(src), "--format", "d"]) == 1
