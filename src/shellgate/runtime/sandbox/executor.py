"""ProcessExecutor protocol — the interface the gateway delegates to."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from pathlib import Path

    from shellgate.runtime.sandbox.models import ExecutionResult


@runtime_checkable
class ProcessExecutor(Protocol):
    """Runs one already-validated command and reports its outcome.

    Implementations must never raise for spawn failures or timeouts; every
    outcome is encoded in the returned :class:`ExecutionResult`.
    """

    async def run(
        self,
        command: str,
        args: Sequence[str],
        *,
        cwd: Path,
        env: Mapping[str, str],
        timeout: float,
    ) -> ExecutionResult:
        """Run *command* and return its result."""
        ...
