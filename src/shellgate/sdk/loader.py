"""Settings loading and gateway assembly for embedding hosts and the CLI."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml
from pydantic import ValidationError

from shellgate.runtime.gateway import ExecutionGateway
from shellgate.runtime.policy.allowlist import CommandAllowList
from shellgate.runtime.sandbox.boundary import SandboxBoundary
from shellgate.runtime.sandbox.runner import ProcessRunner
from shellgate.sdk.errors import ConfigError
from shellgate.sdk.models import ShellgateSettings

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


class SettingsLoader:
    """Load and validate a settings YAML file into :class:`ShellgateSettings`."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def load(self) -> ShellgateSettings:
        """Read YAML, interpolate env vars, and validate.

        Environment variables in the form ``${VAR}`` or ``$VAR`` are expanded
        using :func:`os.path.expandvars` before YAML parsing.  An empty file
        yields the defaults.

        Raises:
            ConfigError: On read errors, YAML parse errors or schema
                validation failures.
        """
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Cannot read {self._path}: {exc}") from exc

        expanded = os.path.expandvars(raw)

        try:
            data: Any = yaml.safe_load(expanded)
        except yaml.YAMLError as exc:
            raise ConfigError(f"YAML parse error: {exc}") from exc

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError("Settings YAML must be a mapping")

        try:
            return ShellgateSettings.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(str(exc)) from exc


def load_settings(path: str | os.PathLike[str] | None = None) -> ShellgateSettings:
    """Load settings from *path*, or return the defaults when no path is given."""
    if path is None:
        return ShellgateSettings()
    return SettingsLoader(Path(path)).load()


def build_base_env(
    settings: ShellgateSettings,
    inherited: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Compose the base environment every execution starts from.

    *inherited* defaults to ``os.environ`` and is ignored when
    ``inherit_env`` is off; ``settings.env`` is overlaid on top.
    """
    env: dict[str, str] = {}
    if settings.inherit_env:
        env.update(os.environ if inherited is None else inherited)
    env.update(settings.env)
    return env


def build_gateway(
    settings: ShellgateSettings,
    *,
    base_dir: str | os.PathLike[str] | None = None,
    base_env: Mapping[str, str] | None = None,
) -> ExecutionGateway:
    """Assemble an :class:`ExecutionGateway` from *settings*.

    *base_dir* overrides ``settings.base_dir``; when neither is set the
    current directory is used.  *base_env* is the opaque environment the
    host prepared (defaults to ``os.environ``).

    Raises:
        WorkingDirectoryNotFoundError: If the base directory does not exist.
    """
    root = base_dir if base_dir is not None else settings.base_dir or Path.cwd()
    boundary = SandboxBoundary(root)
    config = settings.gateway
    logger.info("Sandbox root: %s (max timeout %ss)", boundary.root, config.max_timeout)
    return ExecutionGateway(
        boundary,
        allow_list=CommandAllowList(config.allowed_commands),
        runner=ProcessRunner(drain_timeout=config.drain_timeout),
        base_env=build_base_env(settings, base_env),
        config=config,
    )
