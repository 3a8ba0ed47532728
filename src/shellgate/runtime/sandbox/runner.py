"""ProcessRunner — spawns a child process with a bounded lifetime.

Satisfies the :class:`~shellgate.runtime.sandbox.executor.ProcessExecutor`
protocol.

Each ``run()`` call:
1. Spawns the command (argument vector, no shell) in a new session so the
   whole process group can be killed.
2. Drains stdout and stderr concurrently in fixed-size chunks.
3. Races process exit plus end-of-output against the timeout.
4. On timeout or caller cancellation, SIGKILLs the process group and keeps
   whatever output arrived before the kill.
"""

from __future__ import annotations

import asyncio
import logging
import os
import signal
import time
from typing import TYPE_CHECKING

from shellgate.runtime.errors import ExecutionTimeoutError, SpawnError
from shellgate.runtime.sandbox.models import ExecutionResult

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from pathlib import Path

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 64 * 1024
_POSIX = os.name == "posix"


class ProcessRunner:
    """Runs external programs on the host, one call at a time per handle."""

    def __init__(self, *, drain_timeout: float = 1.0) -> None:
        self._drain_timeout = drain_timeout

    async def run(
        self,
        command: str,
        args: Sequence[str],
        *,
        cwd: Path,
        env: Mapping[str, str],
        timeout: float,
    ) -> ExecutionResult:
        """Run *command* with *args* and return its result; never raises."""
        started = time.monotonic()
        logger.debug("Spawning %s %s in %s (timeout=%ss)", command, list(args), cwd, timeout)

        try:
            proc = await asyncio.create_subprocess_exec(
                command,
                *args,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=cwd,
                env=dict(env),
                start_new_session=_POSIX,
            )
        except (OSError, ValueError) as exc:
            logger.warning("Failed to start %s: %s", command, exc)
            return ExecutionResult.from_error(
                SpawnError(command, str(exc)),
                duration=time.monotonic() - started,
            )

        handle = _ProcessHandle(proc)
        try:
            await asyncio.wait_for(handle.wait(), timeout=timeout)
        except TimeoutError:
            logger.warning("Command %s timed out after %ss, killing pid %s", command, timeout, proc.pid)
            handle.kill()
            await handle.drain(self._drain_timeout)
            return ExecutionResult.from_error(
                ExecutionTimeoutError(timeout),
                stdout=handle.stdout,
                stderr=handle.stderr,
                duration=time.monotonic() - started,
            )
        except asyncio.CancelledError:
            handle.kill()
            handle.abandon()
            raise

        exit_code = proc.returncode if proc.returncode is not None else 1
        logger.debug("Command %s exited with %s", command, exit_code)
        return ExecutionResult.completed(
            exit_code,
            stdout=handle.stdout,
            stderr=handle.stderr,
            duration=time.monotonic() - started,
        )


class _ProcessHandle:
    """Live child process plus its output buffers and reader tasks."""

    def __init__(self, proc: asyncio.subprocess.Process) -> None:
        self.proc = proc
        self._stdout: list[bytes] = []
        self._stderr: list[bytes] = []
        self._readers = [
            asyncio.ensure_future(_pump(proc.stdout, self._stdout)),
            asyncio.ensure_future(_pump(proc.stderr, self._stderr)),
        ]
        self._done = asyncio.gather(proc.wait(), *self._readers)

    @property
    def stdout(self) -> str:
        return b"".join(self._stdout).decode(errors="replace")

    @property
    def stderr(self) -> str:
        return b"".join(self._stderr).decode(errors="replace")

    async def wait(self) -> None:
        """Wait for exit and for both streams to reach EOF.

        Shielded so that a timed-out waiter does not cancel the readers.
        """
        await asyncio.shield(self._done)

    def kill(self) -> None:
        """SIGKILL the process group (or the process where groups are unavailable)."""
        if _POSIX:
            try:
                os.killpg(self.proc.pid, signal.SIGKILL)
                return
            except ProcessLookupError:
                return
            except PermissionError:
                pass
        try:
            self.proc.kill()
        except ProcessLookupError:
            pass

    async def drain(self, timeout: float) -> None:
        """Reap the killed process and collect trailing output, bounded by *timeout*."""
        try:
            await asyncio.wait_for(self.wait(), timeout=timeout)
        except TimeoutError:
            # A descendant outside the group still holds a pipe open.
            logger.debug("Output pipes still open after kill of pid %s", self.proc.pid)
            self.abandon()

    def abandon(self) -> None:
        """Stop reading and release the pipes; whatever was buffered so far is kept."""
        for reader in self._readers:
            reader.cancel()
        self._done.cancel()
        # asyncio.subprocess.Process has no public close; the transport owns the pipe fds.
        self.proc._transport.close()  # noqa: SLF001


async def _pump(stream: asyncio.StreamReader | None, chunks: list[bytes]) -> None:
    if stream is None:
        return
    while True:
        chunk = await stream.read(_CHUNK_SIZE)
        if not chunk:
            return
        chunks.append(chunk)
