"""Embedding API — settings, gateway assembly, and the request/result types."""

from shellgate.runtime.gateway import ExecutionGateway
from shellgate.runtime.sandbox.models import ExecutionRequest, ExecutionResult
from shellgate.sdk.errors import ConfigError
from shellgate.sdk.loader import SettingsLoader, build_base_env, build_gateway, load_settings
from shellgate.sdk.models import ShellgateSettings, TelemetrySettings

__all__ = [
    "ConfigError",
    "ExecutionGateway",
    "ExecutionRequest",
    "ExecutionResult",
    "SettingsLoader",
    "ShellgateSettings",
    "TelemetrySettings",
    "build_base_env",
    "build_gateway",
    "load_settings",
]
