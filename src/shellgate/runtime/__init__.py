"""Runtime layer — allow-list policy, sandbox boundary, and the execution gateway."""

from shellgate.runtime.config import GatewayConfig
from shellgate.runtime.errors import (
    CommandNotAllowedError,
    ErrorKind,
    ExecutionTimeoutError,
    GatewayError,
    RequestValidationError,
    SandboxViolationError,
    SpawnError,
    WorkingDirectoryNotFoundError,
)
from shellgate.runtime.gateway import ExecutionGateway

__all__ = [
    "CommandNotAllowedError",
    "ErrorKind",
    "ExecutionGateway",
    "ExecutionTimeoutError",
    "GatewayConfig",
    "GatewayError",
    "RequestValidationError",
    "SandboxViolationError",
    "SpawnError",
    "WorkingDirectoryNotFoundError",
]
