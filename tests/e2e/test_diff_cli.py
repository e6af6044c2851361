"""End-to-end tests for the linediff command.

This module runs linediff as a subprocess, the way it is used from a shell,
and checks the complete pipeline from command line to output and exit code.
"""

import os
import subprocess
import sys
from pathlib import Path

import pytest
from utils import cleanup_test_dir, create_test_temp_dir

SRC_DIR = Path(__file__).parent.parent.parent / "src"


@pytest.mark.e2e
@pytest.mark.cli
@pytest.mark.slow
class TestDiffCLI:
    """End-to-end tests for the diff command."""

    def setup_method(self):
        """Set up test environment."""
        self.temp_dir = create_test_temp_dir()

        self.file1 = self.temp_dir / "before.txt"
        self.file1.write_text("alpha\nbeta\ngamma\ndelta\n", encoding="utf-8")

        self.file2 = self.temp_dir / "after.txt"
        self.file2.write_text("alpha\nBETA\ngamma\ndelta\nepsilon\n", encoding="utf-8")

    def teardown_method(self):
        """Clean up test environment."""
        cleanup_test_dir(self.temp_dir)

    def _run_diff(self, args: list[str]) -> subprocess.CompletedProcess:
        """Run linediff as a subprocess.

        The working and home directories point at the temporary directory so
        no configuration file is discovered.
        """
        env = {key: value for key, value in os.environ.items() if not key.startswith("LINEDIFF_")}
        env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_DIR), env.get("PYTHONPATH")]))
        env["HOME"] = str(self.temp_dir)
        env["USERPROFILE"] = str(self.temp_dir)
        cmd = [sys.executable, "-m", "linediff"] + args
        return subprocess.run(cmd, cwd=self.temp_dir, env=env, capture_output=True, text=True)

    def test_normal_diff(self):
        result = self._run_diff([str(self.file1), str(self.file2)])

        assert result.returncode == 0, f"Command failed: {result.stderr}"
        assert result.stdout == "2c2\n< beta\n---\n> BETA\n4a5\n> epsilon\n"

    def test_unified_diff(self):
        result = self._run_diff(["-u", str(self.file1), str(self.file2)])

        assert result.returncode == 0, f"Command failed: {result.stderr}"
        assert result.stdout == "@@ -1,4 +1,5 @@\n alpha\n-beta\n+BETA\n gamma\n delta\n+epsilon\n"

    def test_unified_with_file_headers(self):
        result = self._run_diff(["-u", "--file-headers", str(self.file1), str(self.file2)])

        assert result.returncode == 0
        assert result.stdout.startswith(f"--- {self.file1}\n+++ {self.file2}\n@@ ")

    def test_identical_files(self):
        result = self._run_diff([str(self.file1), str(self.file1)])

        assert result.returncode == 0
        assert result.stdout == ""
        assert "No differences found." in result.stderr

    def test_color_always(self):
        result = self._run_diff(["--color=always", str(self.file1), str(self.file2)])

        assert result.returncode == 0
        assert "\033[36m2c2\033[0m" in result.stdout
        assert "\033[31m< beta\033[0m" in result.stdout
        assert "\033[32m> BETA\033[0m" in result.stdout

    def test_bare_color_flag(self):
        result = self._run_diff(["--color", str(self.file1), str(self.file2)])

        assert result.returncode == 0, f"Command failed: {result.stderr}"
        assert result.stdout == "2c2\n< beta\n---\n> BETA\n4a5\n> epsilon\n"

    def test_color_auto_when_piped(self):
        result = self._run_diff([str(self.file1), str(self.file2)])

        assert "\033[" not in result.stdout

    def test_print_mode(self):
        result = self._run_diff(["-p", str(self.file1)])

        assert result.returncode == 0
        assert result.stdout == f"File 1 ({self.file1}):\nalpha\nbeta\ngamma\ndelta\nEOF\n"

    def test_config_file(self):
        (self.temp_dir / ".linediff.toml").write_text('mode = "unified"\ncontext = 0\n', encoding="utf-8")
        result = self._run_diff([str(self.file1), str(self.file2)])

        assert result.returncode == 0
        assert result.stdout == "@@ -2,1 +2,1 @@\n-beta\n+BETA\n@@ -4,0 +5,1 @@\n+epsilon\n"

    def test_usage_error(self):
        result = self._run_diff([str(self.file1)])

        assert result.returncode == 3
        assert "usage: linediff" in result.stderr
        assert result.stdout == ""

    def test_missing_file(self):
        result = self._run_diff([str(self.file1), str(self.temp_dir / "missing.txt")])

        assert result.returncode == 4
        assert "Error:" in result.stderr
        assert result.stdout == ""

    def test_help(self):
        result = self._run_diff(["--help"])

        assert result.returncode == 0
        assert "usage: linediff" in result.stdout
        assert "--unified" in result.stdout

    def test_version(self):
        result = self._run_diff(["--version"])

        assert result.returncode == 0
        assert "linediff" in result.stdout
