"""ExecutionGateway — validates requests, then delegates to a process executor.

Every call is checked against the :class:`CommandAllowList` and the
:class:`SandboxBoundary` before anything is spawned.  Every outcome, including
rejections and unexpected runner failures, comes back as an
:class:`ExecutionResult`.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from shellgate.runtime.config import GatewayConfig
from shellgate.runtime.errors import (
    CommandNotAllowedError,
    ErrorKind,
    GatewayError,
    RequestValidationError,
)
from shellgate.runtime.policy.allowlist import CommandAllowList
from shellgate.runtime.sandbox.boundary import SandboxBoundary
from shellgate.runtime.sandbox.models import ExecutionResult
from shellgate.runtime.sandbox.runner import ProcessRunner
from shellgate.utils.telemetry import (
    ATTR_ARG_COUNT,
    ATTR_COMMAND,
    ATTR_CWD,
    ATTR_ERROR_KIND,
    ATTR_EXIT_CODE,
    ATTR_OUTCOME,
    ATTR_TIMEOUT,
    get_tracer,
)

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from opentelemetry.trace import Span

    from shellgate.runtime.sandbox.executor import ProcessExecutor
    from shellgate.runtime.sandbox.models import ExecutionRequest

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)


class ExecutionGateway:
    """Allow-list and sandbox aware front door for running commands.

    Validation order, short-circuiting on the first failure:
    1. **Command present** — an empty command is rejected.
    2. **Allow-list** — the command's basename must be allowed.
    3. **Sandbox** — the working directory must resolve inside the root.

    The merged environment (base overlaid by the request) and the clamped
    timeout are then handed to the :class:`ProcessExecutor`.
    """

    def __init__(
        self,
        boundary: SandboxBoundary,
        *,
        allow_list: CommandAllowList | None = None,
        runner: ProcessExecutor | None = None,
        base_env: Mapping[str, str] | None = None,
        config: GatewayConfig | None = None,
    ) -> None:
        self._config = config or GatewayConfig()
        self._boundary = boundary
        self._allow_list = (
            allow_list if allow_list is not None else CommandAllowList(self._config.allowed_commands)
        )
        self._runner = runner or ProcessRunner(drain_timeout=self._config.drain_timeout)
        self._base_env = dict(os.environ if base_env is None else base_env)

    @classmethod
    def create(
        cls,
        base_dir: str | os.PathLike[str],
        *,
        base_env: Mapping[str, str] | None = None,
        config: GatewayConfig | None = None,
    ) -> ExecutionGateway:
        """Build a gateway rooted at *base_dir*.

        Raises:
            WorkingDirectoryNotFoundError: If *base_dir* does not exist.
        """
        return cls(SandboxBoundary(base_dir), base_env=base_env, config=config)

    @property
    def config(self) -> GatewayConfig:
        return self._config

    @property
    def boundary(self) -> SandboxBoundary:
        return self._boundary

    @property
    def allow_list(self) -> CommandAllowList:
        return self._allow_list

    @property
    def base_env(self) -> dict[str, str]:
        return dict(self._base_env)

    def get_allowed_commands(self) -> list[str]:
        """Return the allowed command names in insertion order."""
        return self._allow_list.list()

    def allow_command(self, name: str) -> None:
        self._allow_list.allow(name)

    def disallow_command(self, name: str) -> None:
        self._allow_list.disallow(name)

    def effective_timeout(self, requested: float | None) -> float:
        """Clamp *requested* to the configured maximum (default: the maximum)."""
        limit = self._config.max_timeout
        return min(requested or limit, limit)

    async def execute(self, request: ExecutionRequest) -> ExecutionResult:
        """Validate *request*, run it, and return the result; never raises."""
        with _tracer.start_as_current_span("shellgate.execute") as span:
            span.set_attribute(ATTR_COMMAND, request.command)
            span.set_attribute(ATTR_ARG_COUNT, len(request.args))
            result = await self._execute(request, span)
            span.set_attribute(ATTR_EXIT_CODE, result.exit_code)
            span.set_attribute(ATTR_OUTCOME, "success" if result.success else "failure")
            if result.error_kind is not None:
                span.set_attribute(ATTR_ERROR_KIND, result.error_kind.value)
            return result

    async def _execute(self, request: ExecutionRequest, span: Span) -> ExecutionResult:
        try:
            cwd = self._validate(request)
        except GatewayError as exc:
            logger.warning("Rejected %r: %s", request.command, exc)
            return ExecutionResult.from_error(exc)
        except Exception as exc:
            logger.exception("Unexpected failure while validating %s", request.command)
            return _internal_failure("Command validation failed", exc)

        timeout = self.effective_timeout(request.timeout)
        env = {**self._base_env, **request.env}
        span.set_attribute(ATTR_CWD, str(cwd))
        span.set_attribute(ATTR_TIMEOUT, timeout)

        logger.info("Executing %s %s in %s", request.command, " ".join(request.args), cwd)
        try:
            return await self._runner.run(
                request.command,
                request.args,
                cwd=cwd,
                env=env,
                timeout=timeout,
            )
        except Exception as exc:
            logger.exception("Unexpected failure while running %s", request.command)
            return _internal_failure("Command execution failed", exc)

    def _validate(self, request: ExecutionRequest) -> Path:
        """Run the three validation steps and return the working directory."""
        if not request.command.strip():
            raise RequestValidationError("No command specified")

        if not self._allow_list.is_allowed(request.command):
            raise CommandNotAllowedError(request.command, self._allow_list.list())

        return self._boundary.resolve(request.cwd)


def _internal_failure(prefix: str, exc: Exception) -> ExecutionResult:
    return ExecutionResult(
        exit_code=1,
        success=False,
        error=f"{prefix}: {exc}",
        error_kind=ErrorKind.INTERNAL,
    )
