"""shellgate — allow-listed, sandboxed command execution for tool hosts."""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "0.1.0"

if TYPE_CHECKING:
    from shellgate.runtime.gateway import ExecutionGateway as ExecutionGateway
    from shellgate.runtime.sandbox.models import ExecutionRequest as ExecutionRequest
    from shellgate.runtime.sandbox.models import ExecutionResult as ExecutionResult

_LAZY_EXPORTS = {
    "ExecutionGateway": "shellgate.runtime.gateway",
    "ExecutionRequest": "shellgate.runtime.sandbox.models",
    "ExecutionResult": "shellgate.runtime.sandbox.models",
}


def __getattr__(name: str) -> object:
    module_path = _LAZY_EXPORTS.get(name)
    if module_path is not None:
        import importlib

        mod = importlib.import_module(module_path)
        return getattr(mod, name)
    raise AttributeError(f"module 'shellgate' has no attribute {name!r}")
