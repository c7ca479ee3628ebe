"""Tests for the CLI module."""

import json
import logging
from unittest.mock import patch

import pytest

from id3scope.cli import main
from id3scope.cli.utils import ExitCode, format_value, setup_logging
from id3scope import __version__

from conftest import make_frame, make_tag, synchsafe

TIT2_SONG = make_frame("TIT2", b"\x03Song\x00")
COMR = make_frame("COMR", b"\x00\x00\x00\x00\x00Seller\x00\x00image/png\x00\x01\x02\x03")


def run(argv):
    """Run the CLI and return the exit code."""
    with pytest.raises(SystemExit) as exc_info:
        with patch("sys.argv", ["id3scope"] + argv):
            main()
    return exc_info.value.code


def test_version_output(capsys):
    """Test that --version flag displays version correctly."""
    assert run(["--version"]) == 0
    captured = capsys.readouterr()
    assert __version__ in captured.out


def test_help_output(capsys):
    """Test that --help flag displays help information."""
    assert run(["--help"]) == 0
    captured = capsys.readouterr()
    assert "frames" in captured.out
    assert "header" in captured.out
    assert "config" in captured.out


def test_no_command_shows_help(capsys):
    """Test that running without a command shows help."""
    assert run([]) == 1
    captured = capsys.readouterr()
    assert "ID3v2" in captured.out


def test_frames_help(capsys):
    """Test that frames command help works."""
    assert run(["frames", "--help"]) == 0
    captured = capsys.readouterr()
    assert "--extract" in captured.out
    assert "--json" in captured.out


class TestFramesCommand:
    """Test the frames subcommand."""

    def test_json_output(self, capsys, tag_file, config_path):
        """Test decoding a tag to JSON."""
        path = tag_file(make_tag(TIT2_SONG, padding=4))
        code = run(["frames", str(path), "--json", "-c", str(config_path)])

        assert code == ExitCode.SUCCESS
        data = json.loads(capsys.readouterr().out)
        assert data["status"] == "complete"
        assert data["header"]["version"] == "2.4.0"
        assert data["padding"] == 4
        assert data["frames"][0]["frame_id"] == "TIT2"
        assert data["frames"][0]["offset"] == 20
        assert data["frames"][0]["fields"]["values"] == ["Song"]
        assert data["frames"][0]["fields"]["encoding"] == 3
        assert "attachments" not in data

    def test_table_output(self, capsys, tag_file, config_path):
        """Test the rich report."""
        path = tag_file(make_tag(TIT2_SONG, padding=4))
        assert run(["frames", str(path), "-c", str(config_path)]) == ExitCode.SUCCESS

        out = capsys.readouterr().out
        assert "TIT2" in out
        assert "Song" in out
        assert "Padding: 4 bytes" in out

    def test_quiet_hides_frames(self, capsys, tag_file, config_path):
        """Test that -q omits the frame table."""
        path = tag_file(make_tag(TIT2_SONG))
        assert run(["frames", str(path), "-q", "-c", str(config_path)]) == ExitCode.SUCCESS

        out = capsys.readouterr().out
        assert "Frames (1)" not in out
        assert "Padding" in out

    def test_partial_tag(self, capsys, tag_file, config_path):
        """Test that a fatal diagnostic gives a partial result and exit 20."""
        path = tag_file(make_tag(TIT2_SONG, make_frame("APIC", b"\x00" * 4)))
        code = run(["frames", str(path), "--json", "-c", str(config_path)])

        assert code == ExitCode.DATA_ERROR
        data = json.loads(capsys.readouterr().out)
        assert data["status"] == "partial"
        assert len(data["frames"]) == 1
        assert data["diagnostics"][0]["severity"] == "fatal"
        assert data["diagnostics"][0]["frame_id"] == "APIC"

    def test_missing_file(self, capsys, tmp_path, config_path):
        """Test exit code 10 for a missing file."""
        code = run(["frames", str(tmp_path / "nope.mp3"), "--json", "-c", str(config_path)])

        assert code == ExitCode.INVALID_INPUT
        data = json.loads(capsys.readouterr().out)
        assert data["status"] == "error"
        assert data["error"] == "invalid_input"

    def test_not_a_tag(self, capsys, tag_file, config_path):
        """Test exit code 20 for a file without an ID3v2 tag."""
        path = tag_file(b"\xff\xfb\x90\x00" * 8)
        code = run(["frames", str(path), "--json", "-c", str(config_path)])

        assert code == ExitCode.DATA_ERROR
        data = json.loads(capsys.readouterr().out)
        assert data["error"] == "data_error"

    def test_extract(self, capsys, tag_file, tmp_path, config_path):
        """Test writing attachments with --extract and --name."""
        path = tag_file(make_tag(COMR))
        out_dir = tmp_path / "out"
        code = run([
            "frames", str(path), "--json", "--extract", str(out_dir),
            "--name", "logo", "-c", str(config_path),
        ])

        assert code == ExitCode.SUCCESS
        assert (out_dir / "logo.png").read_bytes() == b"\x01\x02\x03"
        data = json.loads(capsys.readouterr().out)
        assert data["attachments"] == [str(out_dir / "logo.png")]
        assert data["frames"][0]["fields"]["logo"]["data"] == "010203"

    def test_extract_dir_from_config(self, tag_file, tmp_path, config_path):
        """Test that the config file can supply the attachment directory."""
        out_dir = tmp_path / "from-config"
        config_path.write_text(f'[attachments]\ndirectory = "{out_dir.as_posix()}"\n')
        path = tag_file(make_tag(COMR), name="x.mp3")

        assert run(["frames", str(path), "-q", "-c", str(config_path)]) == ExitCode.SUCCESS
        assert (out_dir / "x.mp3.png").read_bytes() == b"\x01\x02\x03"

    def test_extract_write_failure(self, capsys, tag_file, tmp_path, config_path):
        """Test exit code 30 when the attachment directory cannot be created."""
        blocker = tmp_path / "blocker"
        blocker.write_bytes(b"")
        path = tag_file(make_tag(COMR))
        code = run(["frames", str(path), "--json", "--extract", str(blocker), "-c", str(config_path)])

        assert code == ExitCode.WRITE_FAILED
        data = json.loads(capsys.readouterr().out)
        assert data["error"] == "write_failed"


class TestHeaderCommand:
    """Test the header subcommand."""

    def test_json(self, capsys, tag_file, config_path):
        """Test header JSON output."""
        path = tag_file(b"ID3\x03\x00\x40" + synchsafe(300) + synchsafe(6) + b"\x00\x00")
        code = run(["header", str(path), "--json", "-c", str(config_path)])

        assert code == ExitCode.SUCCESS
        data = json.loads(capsys.readouterr().out)
        assert data["header"]["version"] == "2.3.0"
        assert data["header"]["declared_size"] == 300
        assert data["header"]["extended_header"] is True

    def test_table(self, capsys, tag_file, config_path):
        """Test the rich header table."""
        path = tag_file(make_tag(TIT2_SONG))
        with patch("sys.argv", ["id3scope", "header", str(path), "-c", str(config_path)]):
            main()

        out = capsys.readouterr().out
        assert "ID3v2.4.0" in out

    def test_bad_magic(self, capsys, tag_file, config_path):
        """Test exit code 20 for a non-ID3 file."""
        path = tag_file(b"RIFF" + b"\x00" * 20)
        assert run(["header", str(path), "-c", str(config_path)]) == ExitCode.DATA_ERROR


class TestConfigCommand:
    """Test the config subcommand."""

    def test_show_json(self, capsys, config_path):
        """Test that the effective configuration is printed."""
        assert run(["config", "--json", "-c", str(config_path)]) == ExitCode.SUCCESS

        data = json.loads(capsys.readouterr().out)
        assert data["config"]["display"]["max_value_length"] == 60
        assert data["written"] is False
        assert not config_path.exists()

    def test_init_writes_file(self, capsys, config_path):
        """Test that --init saves the configuration."""
        assert run(["config", "--init", "--json", "-c", str(config_path)]) == ExitCode.SUCCESS

        data = json.loads(capsys.readouterr().out)
        assert data["written"] is True
        assert config_path.exists()


class TestFormatValue:
    """Test table cell rendering."""

    def test_short_bytes_as_hex(self):
        """Test short byte strings."""
        assert format_value(b"\x01\x02") == "01 02"

    def test_long_bytes_as_length(self):
        """Test long byte strings."""
        assert format_value(b"\x00" * 100) == "<100 bytes>"

    def test_truncation(self):
        """Test that long text is shortened."""
        text = format_value("x" * 100, max_length=20)
        assert len(text) == 20
        assert text.endswith("...")


def test_setup_logging_debug():
    """Test logging setup with debug level."""
    # Reset logging to avoid interference from previous tests
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    setup_logging("debug")
    assert logging.getLogger().level == logging.DEBUG


def test_setup_logging_warning():
    """Test logging setup with warning level."""
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    setup_logging("warning")
    assert logging.getLogger().level == logging.WARNING


def test_setup_logging_invalid():
    """Test that invalid log level raises ValueError."""
    with pytest.raises(ValueError):
        setup_logging("invalid")
