from pathlib import Path
import json

import pytest
from click.testing import CliRunner

from arithcode import __version__
from arithcode.cli import cli


@pytest.fixture()
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def coding_file(tmp_path: Path) -> Path:
    path = tmp_path / "coding.txt"
    path.write_text("AAB", encoding="utf-8")
    return path


def test_version(cli_runner: CliRunner):
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_encode_writes_state(cli_runner: CliRunner, coding_file: Path, tmp_path: Path):
    out = tmp_path / "decoding.txt"
    result = cli_runner.invoke(cli, ["encode", "--input", str(coding_file), "--output", str(out)])
    assert result.exit_code == 0
    assert "Encoded value: 0.3" in result.output
    assert "Bit length: 4 bits" in result.output
    assert "Warning" not in result.output
    assert out.read_text(encoding="utf-8") == "0.3\n3\nA:0.6666666666666666;B:0.3333333333333333"


def test_decode_restores_text(cli_runner: CliRunner, tmp_path: Path):
    state = tmp_path / "decoding.txt"
    state.write_text("0.3\n3\nA:0.6666666666666666;B:0.3333333333333333", encoding="utf-8")
    out = tmp_path / "coding.txt"
    result = cli_runner.invoke(cli, ["decode", "--input", str(state), "--output", str(out)])
    assert result.exit_code == 0
    assert "Decoded text: AAB" in result.output
    assert out.read_text(encoding="utf-8") == "AAB"


def test_encode_then_decode(cli_runner: CliRunner, tmp_path: Path):
    source = tmp_path / "message.txt"
    source.write_text("hello world", encoding="utf-8")
    state = tmp_path / "message.state"
    restored = tmp_path / "restored.txt"
    r1 = cli_runner.invoke(cli, ["encode", "--input", str(source), "--output", str(state)])
    assert r1.exit_code == 0
    r2 = cli_runner.invoke(cli, ["decode", "--input", str(state), "--output", str(restored)])
    assert r2.exit_code == 0
    assert restored.read_text(encoding="utf-8") == "hello world"


def test_encode_warns_when_input_too_long(cli_runner: CliRunner, tmp_path: Path):
    source = tmp_path / "long.txt"
    source.write_text("abcdefghijklmnopqrstuvwxyz" * 2, encoding="utf-8")
    result = cli_runner.invoke(
        cli, ["encode", "--input", str(source), "--output", str(tmp_path / "state.txt")]
    )
    assert result.exit_code == 0
    assert "Warning" in result.output


def test_encode_empty_file(cli_runner: CliRunner, tmp_path: Path):
    source = tmp_path / "empty.txt"
    source.write_text("", encoding="utf-8")
    result = cli_runner.invoke(
        cli, ["encode", "--input", str(source), "--output", str(tmp_path / "state.txt")]
    )
    assert result.exit_code == 1
    assert "Error" in result.output


def test_missing_input_file(cli_runner: CliRunner, tmp_path: Path):
    result = cli_runner.invoke(cli, ["encode", "--input", str(tmp_path / "nope.txt")])
    assert result.exit_code == 2


@pytest.mark.parametrize(
    "content",
    [
        "not a number\n3\nA:1.0",
        "0.3\n0\nA:1.0",
        "0.3\n3\nA:0.25;B:0.25",
    ],
)
def test_decode_bad_state(cli_runner: CliRunner, tmp_path: Path, content: str):
    state = tmp_path / "decoding.txt"
    state.write_text(content, encoding="utf-8")
    result = cli_runner.invoke(
        cli, ["decode", "--input", str(state), "--output", str(tmp_path / "out.txt")]
    )
    assert result.exit_code == 1
    assert "Error" in result.output
    assert not (tmp_path / "out.txt").exists()


def test_probabilities_table(cli_runner: CliRunner, coding_file: Path):
    result = cli_runner.invoke(cli, ["probabilities", "--input", str(coding_file)])
    assert result.exit_code == 0
    assert "Symbol 'A': 0.666667" in result.output
    assert "Symbol 'B': 0.333333" in result.output
    assert "Entropy:" in result.output


def test_probabilities_json(cli_runner: CliRunner, coding_file: Path):
    result = cli_runner.invoke(cli, ["probabilities", "--input", str(coding_file), "--format", "json"])
    assert result.exit_code == 0
    assert json.loads(result.output) == pytest.approx({"A": 2 / 3, "B": 1 / 3})


def test_ratio(cli_runner: CliRunner, coding_file: Path):
    result = cli_runner.invoke(cli, ["ratio", "--input", str(coding_file)])
    assert result.exit_code == 0
    assert "Compression ratio: 6.00" in result.output
    assert "Encoded length: 4 bits" in result.output


def test_bits(cli_runner: CliRunner, coding_file: Path):
    result = cli_runner.invoke(cli, ["bits", "--input", str(coding_file)])
    assert result.exit_code == 0
    assert "Original bits: 24" in result.output
    assert "Encoded bits (4 per fractional digit): 4" in result.output


def test_verbose_flag(cli_runner: CliRunner, coding_file: Path):
    result = cli_runner.invoke(cli, ["--verbose", "bits", "--input", str(coding_file)])
    assert result.exit_code == 0


def test_crlf_file_round_trips_byte_for_byte(cli_runner: CliRunner, tmp_path: Path):
    source = tmp_path / "crlf.txt"
    source.write_bytes(b"ab\r\nba\r\n")
    state = tmp_path / "crlf.state"
    restored = tmp_path / "restored.txt"

    r1 = cli_runner.invoke(cli, ["encode", "--input", str(source), "--output", str(state)])
    assert r1.exit_code == 0
    lines = state.read_bytes().split(b"\n")
    assert lines[1] == b"8"
    assert b"\\r:" in lines[2]

    r2 = cli_runner.invoke(cli, ["decode", "--input", str(state), "--output", str(restored)])
    assert r2.exit_code == 0
    assert restored.read_bytes() == b"ab\r\nba\r\n"


def test_bits_counts_carriage_returns(cli_runner: CliRunner, tmp_path: Path):
    source = tmp_path / "crlf.txt"
    source.write_bytes(b"ab\r\n")
    result = cli_runner.invoke(cli, ["bits", "--input", str(source)])
    assert result.exit_code == 0
    assert "Original bits: 32" in result.output


@pytest.mark.parametrize("command", ["encode", "probabilities", "ratio", "bits"])
def test_non_utf8_input(cli_runner: CliRunner, tmp_path: Path, command: str):
    source = tmp_path / "binary.txt"
    source.write_bytes(b"ab\xff\xfe")
    result = cli_runner.invoke(cli, [command, "--input", str(source)])
    assert result.exit_code == 1
    assert "Error" in result.output
    assert "utf-8" in result.output


def test_decode_non_utf8_state(cli_runner: CliRunner, tmp_path: Path):
    state = tmp_path / "decoding.txt"
    state.write_bytes(b"0.3\n3\n\xff:1.0")
    result = cli_runner.invoke(
        cli, ["decode", "--input", str(state), "--output", str(tmp_path / "out.txt")]
    )
    assert result.exit_code == 1
    assert "Error" in result.output
