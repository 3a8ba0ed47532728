"""Pydantic models for the settings file consumed by the ``shellgate`` CLI."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from shellgate.runtime.config import GatewayConfig


class TelemetrySettings(BaseModel):
    """Optional telemetry configuration."""

    enabled: bool = False
    otlp_endpoint: str | None = None


class ShellgateSettings(BaseModel):
    """Top-level settings parsed from YAML."""

    base_dir: Path | None = None
    gateway: GatewayConfig = Field(default_factory=GatewayConfig)
    env: dict[str, str] = Field(default_factory=dict, description="Extra base environment entries.")
    inherit_env: bool = Field(default=True, description="Start the base environment from os.environ.")
    telemetry: TelemetrySettings = Field(default_factory=TelemetrySettings)
