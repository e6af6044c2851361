"""Unit tests for the linediff command line entry point."""

import argparse
import io
from unittest.mock import patch

import pytest
from utils import write_lines

from linediff.cli import main
from linediff.cli.builder import (
    EXIT_DEPENDENCY_ERROR,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_INVARIANT_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    _validate_context_lines,
    _validate_max_lines,
    get_exit_code_for_exception,
)
from linediff.exceptions import (
    DependencyError,
    DiffResourceError,
    FileNotFoundError,
    InputLimitError,
    MalformedScriptError,
    RenderingError,
)


@pytest.mark.unit
class TestValidateContextLines:
    """Test _validate_context_lines() helper function."""

    def test_valid_values(self):
        assert _validate_context_lines("3") == 3
        assert _validate_context_lines("0") == 0

    def test_invalid_negative_integer(self):
        with pytest.raises(argparse.ArgumentTypeError, match="non-negative"):
            _validate_context_lines("-1")

    def test_invalid_non_integer(self):
        with pytest.raises(argparse.ArgumentTypeError, match="must be an integer"):
            _validate_context_lines("3.5")


@pytest.mark.unit
class TestValidateMaxLines:
    """Test _validate_max_lines() helper function."""

    def test_valid(self):
        assert _validate_max_lines("100") == 100

    def test_zero_is_rejected(self):
        with pytest.raises(argparse.ArgumentTypeError, match="positive"):
            _validate_max_lines("0")

    def test_non_integer(self):
        with pytest.raises(argparse.ArgumentTypeError, match="must be an integer"):
            _validate_max_lines("lots")


@pytest.mark.unit
class TestExitCodes:
    """Test get_exit_code_for_exception()."""

    @pytest.mark.parametrize(
        "exception,expected",
        [
            (MalformedScriptError("bad"), EXIT_INVARIANT_ERROR),
            (DependencyError("rich-output", [("rich", "")]), EXIT_DEPENDENCY_ERROR),
            (InputLimitError(10, 5), EXIT_VALIDATION_ERROR),
            (FileNotFoundError("x"), EXIT_FILE_ERROR),
            (RenderingError("bad"), EXIT_RENDERING_ERROR),
            (DiffResourceError("oom"), EXIT_ERROR),
            (RuntimeError("?"), EXIT_ERROR),
        ],
    )
    def test_mapping(self, exception, expected):
        assert get_exit_code_for_exception(exception) == expected


@pytest.mark.unit
@pytest.mark.cli
@pytest.mark.usefixtures("clean_env", "restore_package_logger")
class TestMainDiff:
    """Test main() in diff mode."""

    def test_normal_diff(self, scenario_files, capsys):
        old, new = scenario_files
        assert main([str(old), str(new)]) == EXIT_SUCCESS
        captured = capsys.readouterr()
        assert captured.out == "2c2\n< b\n---\n> x\n"

    def test_unified_diff(self, scenario_files, capsys):
        old, new = scenario_files
        assert main(["-u", str(old), str(new)]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "@@ -1,3 +1,3 @@\n a\n-b\n+x\n c\n"

    def test_unified_with_file_headers(self, scenario_files, capsys):
        old, new = scenario_files
        main(["--unified", "--file-headers", str(old), str(new)])
        out = capsys.readouterr().out
        assert out.startswith(f"--- {old}\n+++ {new}\n@@ -1,3 +1,3 @@\n")

    def test_context_option(self, temp_dir, capsys):
        old = write_lines(temp_dir / "a.txt", [str(i) for i in range(10)])
        new = write_lines(temp_dir / "b.txt", [str(i) if i != 5 else "five" for i in range(10)])
        main(["-u", "-U", "0", str(old), str(new)])
        assert capsys.readouterr().out == "@@ -6,1 +6,1 @@\n-5\n+five\n"

    def test_identical_files(self, temp_dir, capsys):
        old = write_lines(temp_dir / "a.txt", ["same"])
        new = write_lines(temp_dir / "b.txt", ["same"])
        assert main([str(old), str(new)]) == EXIT_SUCCESS
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "No differences found." in captured.err

    def test_both_empty(self, temp_dir, capsys):
        old = temp_dir / "a.txt"
        new = temp_dir / "b.txt"
        old.write_bytes(b"")
        new.write_bytes(b"")
        assert main(["-u", str(old), str(new)]) == EXIT_SUCCESS
        assert capsys.readouterr().out == ""

    def test_forced_color(self, scenario_files, capsys):
        old, new = scenario_files
        main(["--color=always", str(old), str(new)])
        out = capsys.readouterr().out
        assert "\033[36m2c2\033[0m\n" in out
        assert "\033[31m< b\033[0m\n" in out
        assert "\033[32m> x\033[0m\n" in out
        assert "---\n" in out

    def test_auto_color_is_off_when_captured(self, scenario_files, capsys):
        old, new = scenario_files
        main(["--color-mode", "auto", str(old), str(new)])
        assert "\033[" not in capsys.readouterr().out

    def test_bare_color_flag_does_not_consume_a_file(self, scenario_files, capsys):
        old, new = scenario_files
        assert main(["--color", str(old), str(new)]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "2c2\n< b\n---\n> x\n"

    def test_color_mode_option(self, scenario_files, capsys):
        old, new = scenario_files
        main(["--color-mode", "always", str(old), str(new)])
        assert "\033[36m2c2\033[0m\n" in capsys.readouterr().out

    def test_last_color_option_wins(self, scenario_files, capsys):
        old, new = scenario_files
        main(["--color=always", "--color=never", str(old), str(new)])
        assert "\033[" not in capsys.readouterr().out

    def test_invalid_color_value(self, scenario_files, capsys):
        old, new = scenario_files
        assert main(["--color=sometimes", str(old), str(new)]) == EXIT_VALIDATION_ERROR
        assert capsys.readouterr().out == ""

    def test_marker_and_skip_empty(self, temp_dir, capsys):
        old = write_lines(temp_dir / "a.txt", ["a", "# comment", "", "b"])
        new = write_lines(temp_dir / "b.txt", ["a", "  #other", "b", "   "])
        assert main(["-m", "#", "-s", str(old), str(new)]) == EXIT_SUCCESS
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "No differences found." in captured.err

    def test_quoted_marker(self, temp_dir, capsys):
        old = write_lines(temp_dir / "a.txt", ["x", "// note"])
        new = write_lines(temp_dir / "b.txt", ["x"])
        main(["--marker", "'//'", str(old), str(new)])
        assert capsys.readouterr().out == ""

    def test_undecodable_bytes_pass_through(self, temp_dir):
        old = temp_dir / "a.bin"
        new = temp_dir / "b.bin"
        old.write_bytes(b"same\n\xff\xfe old\n")
        new.write_bytes(b"same\n\xff\xfe new\n")
        buffer = io.BytesIO()
        stream = io.TextIOWrapper(buffer, encoding="utf-8")
        with patch("sys.stdout", stream):
            main([str(old), str(new)])
        stream.flush()
        assert buffer.getvalue() == b"2c2\n< \xff\xfe old\n---\n> \xff\xfe new\n"

    def test_input_bytes_survive_a_non_utf8_stdout(self, temp_dir):
        old = temp_dir / "a.txt"
        new = temp_dir / "b.txt"
        old.write_bytes("café\n".encode("utf-8"))
        new.write_bytes(b"caf\xe9 \xff\n")
        buffer = io.BytesIO()
        stream = io.TextIOWrapper(buffer, encoding="latin-1")
        with patch("sys.stdout", stream):
            assert main([str(old), str(new)]) == EXIT_SUCCESS
        stream.flush()
        assert buffer.getvalue() == b"1c1\n< caf\xc3\xa9\n---\n> caf\xe9 \xff\n"


@pytest.mark.unit
@pytest.mark.cli
@pytest.mark.usefixtures("clean_env", "restore_package_logger")
class TestMainErrors:
    """Test main() error handling and exit codes."""

    def test_help(self, capsys):
        assert main(["--help"]) == EXIT_SUCCESS
        assert "usage: linediff" in capsys.readouterr().out

    def test_version(self, capsys):
        assert main(["--version"]) == EXIT_SUCCESS
        assert "linediff" in capsys.readouterr().out

    def test_one_file_is_a_usage_error(self, scenario_files, capsys):
        old, _ = scenario_files
        assert main([str(old)]) == EXIT_VALIDATION_ERROR
        assert "usage: linediff" in capsys.readouterr().err

    def test_three_files_is_a_usage_error(self, scenario_files, capsys):
        old, new = scenario_files
        assert main([str(old), str(new), str(new)]) == EXIT_VALIDATION_ERROR
        assert "expected exactly two files" in capsys.readouterr().err

    def test_no_files(self, capsys):
        assert main([]) == EXIT_VALIDATION_ERROR

    def test_unknown_option(self, scenario_files, capsys):
        old, new = scenario_files
        assert main(["--bogus", str(old), str(new)]) == EXIT_VALIDATION_ERROR

    def test_negative_context(self, scenario_files, capsys):
        old, new = scenario_files
        assert main(["-u", "-U", "-1", str(old), str(new)]) == EXIT_VALIDATION_ERROR

    def test_missing_file(self, scenario_files, temp_dir, capsys):
        old, _ = scenario_files
        assert main([str(old), str(temp_dir / "missing.txt")]) == EXIT_FILE_ERROR
        captured = capsys.readouterr()
        assert "Error: File not found" in captured.err
        assert captured.out == ""

    def test_line_limit(self, scenario_files, capsys):
        old, new = scenario_files
        assert main(["--max-lines", "5", str(old), str(new)]) == EXIT_VALIDATION_ERROR
        captured = capsys.readouterr()
        assert "exceeds the limit of 5" in captured.err
        assert captured.out == ""

    def test_unexpected_error(self, scenario_files, capsys):
        old, new = scenario_files
        with patch("linediff.cli.handle_diff", side_effect=RuntimeError("kaboom")):
            assert main([str(old), str(new)]) == EXIT_ERROR
        assert "Unexpected error: kaboom" in capsys.readouterr().err


@pytest.mark.unit
@pytest.mark.cli
@pytest.mark.usefixtures("clean_env", "restore_package_logger")
class TestMainConfiguration:
    """Test configuration files and environment variables through main()."""

    def test_discovered_config(self, scenario_files, clean_env, capsys):
        (clean_env / ".linediff.toml").write_text('mode = "unified"\ncontext = 0\n', encoding="utf-8")
        old, new = scenario_files
        main([str(old), str(new)])
        assert capsys.readouterr().out == "@@ -2,1 +2,1 @@\n-b\n+x\n"

    def test_cli_flag_overrides_config(self, scenario_files, clean_env, capsys):
        (clean_env / ".linediff.toml").write_text('mode = "unified"\n', encoding="utf-8")
        old, new = scenario_files
        main(["--normal", str(old), str(new)])
        assert capsys.readouterr().out.startswith("2c2\n")

    def test_no_config(self, scenario_files, clean_env, capsys):
        (clean_env / ".linediff.toml").write_text('mode = "unified"\n', encoding="utf-8")
        old, new = scenario_files
        main(["--no-config", str(old), str(new)])
        assert capsys.readouterr().out.startswith("2c2\n")

    def test_explicit_config(self, scenario_files, clean_env, capsys):
        config = clean_env / "custom.yaml"
        config.write_text("mode: unified\n", encoding="utf-8")
        old, new = scenario_files
        main(["--config", str(config), str(old), str(new)])
        assert capsys.readouterr().out.startswith("@@ -1,3 +1,3 @@\n")

    def test_config_from_environment_variable(self, scenario_files, clean_env, capsys, monkeypatch):
        config = clean_env / "env.json"
        config.write_text('{"mode": "unified"}', encoding="utf-8")
        monkeypatch.setenv("LINEDIFF_CONFIG", str(config))
        old, new = scenario_files
        main([str(old), str(new)])
        assert capsys.readouterr().out.startswith("@@ ")

    def test_option_environment_variable_beats_config(self, scenario_files, clean_env, capsys, monkeypatch):
        (clean_env / ".linediff.toml").write_text('mode = "unified"\n', encoding="utf-8")
        monkeypatch.setenv("LINEDIFF_MODE", "normal")
        old, new = scenario_files
        main([str(old), str(new)])
        assert capsys.readouterr().out.startswith("2c2\n")

    def test_invalid_config(self, scenario_files, clean_env, capsys):
        (clean_env / ".linediff.toml").write_text('context = "many"\n', encoding="utf-8")
        old, new = scenario_files
        assert main([str(old), str(new)]) == EXIT_VALIDATION_ERROR
        assert "context" in capsys.readouterr().err

    def test_missing_explicit_config(self, scenario_files, clean_env, capsys):
        old, new = scenario_files
        assert main(["--config", str(clean_env / "nope.toml"), str(old), str(new)]) == EXIT_VALIDATION_ERROR
        assert "does not exist" in capsys.readouterr().err
