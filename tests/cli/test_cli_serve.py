"""Tests for ``shellgate serve`` CLI command."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

from shellgate.cli import main


class TestServe:
    def test_starts_server(self, tmp_path: Path) -> None:
        with patch("shellgate.protocols.mcp.server.create_server") as create_server:
            runner = CliRunner()
            result = runner.invoke(main, ["serve", "-d", str(tmp_path), "--name", "unit"])

        assert result.exit_code == 0
        gateway = create_server.call_args.args[0]
        assert gateway.boundary.root == tmp_path.resolve()
        assert create_server.call_args.kwargs == {"name": "unit"}
        create_server.return_value.run.assert_called_once_with()

    def test_refuses_missing_base_dir(self, tmp_path: Path) -> None:
        with patch("shellgate.protocols.mcp.server.create_server") as create_server:
            runner = CliRunner()
            result = runner.invoke(main, ["serve", "-d", str(tmp_path / "missing")])

        assert result.exit_code == 1
        assert "base directory does not exist" in result.stderr
        create_server.assert_not_called()

    def test_telemetry_flag(self, tmp_path: Path) -> None:
        with (
            patch("shellgate.protocols.mcp.server.create_server"),
            patch("shellgate.utils.telemetry.configure_telemetry") as configure,
        ):
            runner = CliRunner()
            result = runner.invoke(main, ["serve", "-d", str(tmp_path), "--telemetry"])

        assert result.exit_code == 0
        configure.assert_called_once_with(
            service_name="shellgate",
            export_to_console=True,
            otlp_endpoint=None,
        )

    def test_telemetry_from_config(self, tmp_path: Path) -> None:
        config = tmp_path / "shellgate.yaml"
        config.write_text(
            f"base_dir: {tmp_path}\n"
            "telemetry:\n  enabled: true\n  otlp_endpoint: http://collector:4317\n"
        )
        with (
            patch("shellgate.protocols.mcp.server.create_server"),
            patch("shellgate.utils.telemetry.configure_telemetry") as configure,
        ):
            runner = CliRunner()
            result = runner.invoke(main, ["serve", "-c", str(config)])

        assert result.exit_code == 0
        configure.assert_called_once_with(
            service_name="shellgate",
            export_to_console=False,
            otlp_endpoint="http://collector:4317",
        )
