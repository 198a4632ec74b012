"""
Tests for CLI
=============
Tests for the pwdgen command-line interface in pwdgen/cli.py.
"""

import re
import subprocess
import sys
from pathlib import Path

import pytest

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pwdgen import cli, random_source

DIAGNOSTIC_RE = re.compile(r'^entropy: (\d+) length: (\d+)$')


def run_cli(*args, timeout=60):
    return subprocess.run(
        [sys.executable, "-m", "pwdgen", *args],
        capture_output=True,
        text=True,
        cwd=str(ROOT),
        timeout=timeout,
    )


class TestCLIBasic:
    """Basic CLI tests."""

    def test_version_flag(self):
        result = run_cli("--version")
        assert result.returncode == 0
        assert "pwdgen" in result.stdout.lower()

    def test_help_flag(self):
        result = run_cli("--help")
        assert result.returncode == 0
        assert "--min-length" in result.stdout
        assert "--count" in result.stdout

    def test_default_run(self):
        """No arguments: 100 passwords of min length 12, one diagnostic each."""
        result = run_cli()
        assert result.returncode == 0

        passwords = result.stdout.splitlines()
        assert len(passwords) == 100
        assert all(len(p) >= 12 for p in passwords)

        diagnostics = result.stderr.splitlines()
        assert len(diagnostics) == 100
        for line, password in zip(diagnostics, passwords):
            match = DIAGNOSTIC_RE.match(line)
            assert match, line
            assert int(match.group(1)) >= 32
            assert int(match.group(2)) == len(password)


class TestCLIGenerate:
    """Tests for generation options."""

    def test_count_and_length(self, capsys):
        assert cli.main(["-n", "5", "-l", "20"]) == 0
        captured = capsys.readouterr()
        passwords = captured.out.splitlines()
        assert len(passwords) == 5
        assert all(len(p) >= 20 for p in passwords)
        assert len(captured.err.splitlines()) == 5

    def test_quiet(self, capsys):
        assert cli.main(["-n", "3", "-q"]) == 0
        captured = capsys.readouterr()
        assert len(captured.out.splitlines()) == 3
        assert captured.err == ""

    def test_zero_count(self, capsys):
        assert cli.main(["-n", "0"]) == 0
        assert capsys.readouterr().out == ""

    def test_seed_reproducible(self, capsys):
        assert cli.main(["-n", "4", "-q", "--seed", "42"]) == 0
        first = capsys.readouterr().out
        assert cli.main(["-n", "4", "-q", "--seed", "42"]) == 0
        second = capsys.readouterr().out
        assert first == second
        assert len(first.splitlines()) == 4

    def test_seed_warns(self, capsys):
        assert cli.main(["-n", "1", "--seed", "1"]) == 0
        assert "NOT secure" in capsys.readouterr().err

    def test_table(self, capsys):
        assert cli.main(["-n", "3", "--table", "-q"]) == 0
        out = capsys.readouterr().out
        assert "Password" in out
        assert "Entropy" in out

    @pytest.mark.parametrize("args", [["-l", "0"], ["-l", "-3"], ["-n", "-1"], ["-l", "abc"]])
    def test_invalid_arguments(self, args):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(args)
        assert exc_info.value.code == 2


class TestCLIErrors:
    """Tests for error exit codes."""

    def test_no_secure_source_exits_10(self, monkeypatch, capsys):
        def fail(n):
            raise NotImplementedError("no randomness source found")
        monkeypatch.setattr(random_source.os, "urandom", fail)

        assert cli.main(["-n", "3"]) == cli.EXIT_NO_SECURE_SOURCE == 10
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "no randomness source found" in captured.err
