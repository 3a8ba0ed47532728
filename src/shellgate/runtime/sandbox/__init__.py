"""Sandbox subsystem — working-directory confinement and process execution."""

from shellgate.runtime.sandbox.boundary import SandboxBoundary
from shellgate.runtime.sandbox.executor import ProcessExecutor
from shellgate.runtime.sandbox.models import ExecutionRequest, ExecutionResult
from shellgate.runtime.sandbox.runner import ProcessRunner

__all__ = [
    "ExecutionRequest",
    "ExecutionResult",
    "ProcessExecutor",
    "ProcessRunner",
    "SandboxBoundary",
]
