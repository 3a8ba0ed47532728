"""Tests for ``shellgate exec`` CLI command."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from shellgate.cli import main


class TestExec:
    def test_echo(self, tmp_path: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["exec", "-d", str(tmp_path), "echo", "hello"])

        assert result.exit_code == 0
        assert result.stdout == "hello\n"

    def test_arguments_after_command_pass_through(self, tmp_path: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["exec", "-d", str(tmp_path), "echo", "--json", "-d", "x"])

        # options after COMMAND belong to the command, not to shellgate
        assert result.exit_code == 0
        assert result.stdout == "--json -d x\n"

    def test_cwd_and_env(self, tmp_path: Path) -> None:
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "inner.txt").write_text("x")
        runner = CliRunner()
        result = runner.invoke(
            main,
            ["exec", "-d", str(tmp_path), "--cwd", "sub", "-e", "LC_ALL=C", "ls"],
        )

        assert result.exit_code == 0
        assert result.stdout == "inner.txt\n"

    def test_not_allowed(self, tmp_path: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["exec", "-d", str(tmp_path), "curl", "http://example.com"])

        assert result.exit_code == 1
        assert "Command not allowed: curl" in result.stderr
        assert result.stdout == ""

    def test_exit_code_propagates(self, tmp_path: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["exec", "-d", str(tmp_path), "ls", "no-such-entry"])

        assert result.exit_code not in (0, None)
        assert "Error:" in result.stderr

    def test_sandbox_violation(self, tmp_path: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["exec", "-d", str(tmp_path), "--cwd", "..", "ls"])

        assert result.exit_code == 1
        assert "outside the allowed base directory" in result.stderr

    def test_missing_base_dir(self, tmp_path: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["exec", "-d", str(tmp_path / "missing"), "echo", "hi"])

        assert result.exit_code == 1
        assert "base directory does not exist" in result.stderr

    def test_bad_env_pair(self, tmp_path: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["exec", "-d", str(tmp_path), "-e", "NOVALUE", "echo"])

        assert result.exit_code == 2
        assert "KEY=VALUE" in result.output

    def test_json_output(self, tmp_path: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["exec", "-d", str(tmp_path), "--json", "echo", "hi"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["stdout"] == "hi\n"
        assert data["success"] is True
        assert data["exit_code"] == 0

    def test_config_file(self, tmp_path: Path) -> None:
        config = tmp_path / "shellgate.yaml"
        config.write_text(f"base_dir: {tmp_path}\ngateway:\n  allowed_commands: [ls]\n")
        runner = CliRunner()

        denied = runner.invoke(main, ["exec", "-c", str(config), "echo", "hi"])
        assert denied.exit_code == 1
        assert "Allowed commands: ls" in denied.stderr

    def test_bad_config_file(self, tmp_path: Path) -> None:
        config = tmp_path / "shellgate.yaml"
        config.write_text("gateway: [unclosed\n")
        runner = CliRunner()
        result = runner.invoke(main, ["exec", "-c", str(config), "echo", "hi"])

        assert result.exit_code == 1
        assert "Configuration error" in result.stderr
