"""Tests for the command-line interface."""

import io

import pandas as pd

from thai_segmenter.cli import main
from thai_segmenter.pipeline import LINES_FILE, TOKENS_FILE


def test_tokenize_prints_list(capsys):
    assert main(["tokenize", "hello world", "123"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["['hello', ' ', 'world']", "['123']"]


def test_tokenize_with_dict(tmp_path, capsys):
    word_file = tmp_path / "words.txt"
    word_file.write_text("ฉัน\nไป\nโรงเรียน\n", encoding="utf-8")

    assert main(["tokenize", "--dict", str(word_file), "--no-whitespace", "ฉันไป โรงเรียน"]) == 0
    assert capsys.readouterr().out.strip() == "['ฉัน', 'ไป', 'โรงเรียน']"


def test_tokenize_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("ที่นี่\n"))
    assert main(["tokenize", "--engine", "tcc"]) == 0
    assert capsys.readouterr().out.strip() == "['ที่', 'นี่']"


def test_tokenize_missing_dict(tmp_path, capsys):
    assert main(["tokenize", "--dict", str(tmp_path / "missing.txt"), "ไป"]) == 1
    assert "Dictionary file not found" in capsys.readouterr().err


def test_segment_command(tmp_path, capsys):
    input_file = tmp_path / "input.txt"
    input_file.write_text("ไปมา\nhello\n", encoding="utf-8")
    output_dir = tmp_path / "out"

    code = main(["segment", "--input", str(input_file), "--output", str(output_dir), "--no-line-rows"])

    assert code == 0
    assert "Processed 2 lines" in capsys.readouterr().out
    assert not (output_dir / LINES_FILE).exists()
    tokens = pd.read_csv(output_dir / TOKENS_FILE)
    assert list(tokens["Token"]) == ["ไป", "มา", "hello"]


def test_segment_with_config(tmp_path):
    input_file = tmp_path / "input.txt"
    input_file.write_text("ไป มา\n", encoding="utf-8")
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        f"input_file: {input_file}\noutput:\n  output_dir: {tmp_path / 'out'}\n",
        encoding="utf-8",
    )

    assert main(["segment", "--config", str(config_path), "--no-whitespace"]) == 0
    lines = pd.read_csv(tmp_path / "out" / LINES_FILE)
    assert lines["Segmented_Text"].iloc[0] == "ไป|มา"


def test_segment_requires_input(capsys):
    assert main(["segment"]) == 1
    assert "Input file is required" in capsys.readouterr().err


def test_segment_invalid_workers(tmp_path, capsys):
    input_file = tmp_path / "input.txt"
    input_file.write_text("ไป\n", encoding="utf-8")
    assert main(["segment", "--input", str(input_file), "--workers", "0"]) == 1
    assert "Error" in capsys.readouterr().err


def test_no_command(capsys):
    assert main([]) == 1
