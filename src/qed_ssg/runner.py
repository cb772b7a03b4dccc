"""Secure process execution primitive.

Every external program qed-ssg touches is started here, with an explicit
argument vector handed to ``asyncio.create_subprocess_exec``. Nothing above
this module builds command lines or talks to a shell.
"""

from __future__ import annotations

import asyncio
import logging
import os
import shutil
import signal
import time
from collections.abc import Sequence
from dataclasses import dataclass

from qed_ssg.config import QedConfig
from qed_ssg.types import ExecutionResult

logger = logging.getLogger(__name__)

# Output kept from a detached (serve-class) child; older bytes are dropped.
_OUTPUT_TAIL_BYTES = 64 * 1024
_READ_CHUNK = 64 * 1024
# How long aclose() waits after SIGTERM before escalating to SIGKILL.
_TERMINATE_GRACE = 5.0


def _decode(data: bytes | None) -> str:
    return data.decode(errors="replace") if data else ""


def _check_args(args: Sequence[str]) -> list[str]:
    """Reject anything that is not a list of argument tokens."""
    if isinstance(args, (str, bytes)):
        raise TypeError("args must be a sequence of argument tokens, not a single string")
    tokens = list(args)
    for token in tokens:
        if not isinstance(token, str):
            raise TypeError(f"argument tokens must be str, got {type(token).__name__}")
    return tokens


async def _drain(stream: asyncio.StreamReader | None, limit: int = _OUTPUT_TAIL_BYTES) -> bytes:
    """Read a stream to EOF, keeping only the last ``limit`` bytes."""
    if stream is None:
        return b""
    buf = bytearray()
    while chunk := await stream.read(_READ_CHUNK):
        buf.extend(chunk)
        if len(buf) > limit:
            del buf[:-limit]
    return bytes(buf)


def _signal_group(process: asyncio.subprocess.Process, sig: int) -> None:
    """Send ``sig`` to the child's whole process group.

    Children are spawned as session leaders, so the group also holds any
    processes they started (``sbt``, ``mix`` and ``gradle`` all fork workers).
    Those grandchildren share the output pipes and would keep them open.
    """
    try:
        os.killpg(process.pid, sig)
    except (ProcessLookupError, PermissionError):
        pass


async def _kill(process: asyncio.subprocess.Process) -> None:
    _signal_group(process, signal.SIGKILL)
    await process.wait()


@dataclass
class _Detached:
    """A serve-class child left running after start() returned."""

    binary: str
    process: asyncio.subprocess.Process
    drains: tuple[asyncio.Task[bytes], asyncio.Task[bytes]]


class ProcessRunner:
    """Run external binaries with explicit argument vectors.

    Usage:
        runner = ProcessRunner()
        result = await runner.run("zola", ["build", "--drafts"], cwd="./site")
        if not result.success:
            print(result.code, result.stderr)

    Failures are folded into the returned ExecutionResult:
    - binary not on the search path, or the OS refusing to spawn it: code 127
    - child still running when the timeout expires: killed, code 124
    - non-zero exit: code is the child's exit status
    """

    def __init__(self, config: QedConfig | None = None) -> None:
        self._config = config or QedConfig()
        self._detached: list[_Detached] = []

    @property
    def config(self) -> QedConfig:
        return self._config

    @property
    def active_processes(self) -> int:
        """Number of detached children still running."""
        return sum(1 for d in self._detached if d.process.returncode is None)

    def _prune(self) -> None:
        """Forget detached children that exited and closed their pipes."""
        self._detached = [
            d
            for d in self._detached
            if d.process.returncode is None or not all(task.done() for task in d.drains)
        ]

    def resolve(self, binary: str) -> str | None:
        """Locate a binary on the configured search path."""
        return shutil.which(binary, path=self._config.search_path)

    def _child_env(self) -> dict[str, str] | None:
        if not self._config.env:
            return None
        full_env = os.environ.copy()
        full_env.update(self._config.env)
        return full_env

    async def _spawn(
        self,
        binary: str,
        tokens: list[str],
        cwd: str | None,
    ) -> asyncio.subprocess.Process | ExecutionResult:
        executable = self.resolve(binary)
        if executable is None:
            logger.debug("Binary not found on search path: %s", binary)
            return ExecutionResult.binary_not_found(binary)

        logger.debug("Spawning %s %s (cwd=%s)", executable, tokens, cwd)
        try:
            return await asyncio.create_subprocess_exec(
                executable,
                *tokens,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=cwd,
                env=self._child_env(),
                start_new_session=True,
            )
        except OSError as e:
            logger.debug("Failed to spawn %s: %s", binary, e)
            return ExecutionResult.binary_not_found(binary, detail=str(e))

    async def run(
        self,
        binary: str,
        args: Sequence[str] = (),
        *,
        timeout: float | None = None,
        cwd: str | None = None,
    ) -> ExecutionResult:
        """Run ``binary`` with ``args`` to completion.

        Args:
            binary: Executable name, resolved against the search path.
            args: Argument tokens, passed to the child verbatim.
            timeout: Wall-clock limit in seconds. Defaults to the configured
                default_timeout.
            cwd: Working directory for the child.

        Raises:
            TypeError: If args is a single string or contains non-str tokens.
        """
        tokens = _check_args(args)
        limit = timeout if timeout is not None else self._config.default_timeout

        started = time.monotonic()
        spawned = await self._spawn(binary, tokens, cwd)
        if isinstance(spawned, ExecutionResult):
            return spawned
        process = spawned

        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=limit)
        except TimeoutError:
            elapsed = (time.monotonic() - started) * 1000
            logger.warning("%s timed out after %ss, killing pid %s", binary, limit, process.pid)
            await _kill(process)
            return ExecutionResult.timed_out(binary, limit, duration_ms=elapsed)
        finally:
            # Covers cancellation of the awaiting task as well as timeouts
            if process.returncode is None:
                await _kill(process)

        elapsed = (time.monotonic() - started) * 1000
        return ExecutionResult.from_exit(
            process.returncode if process.returncode is not None else -1,
            _decode(stdout),
            _decode(stderr),
            duration_ms=elapsed,
        )

    async def start(
        self,
        binary: str,
        args: Sequence[str] = (),
        *,
        cwd: str | None = None,
        startup_grace: float | None = None,
    ) -> ExecutionResult:
        """Start a long-running child (a preview server) and report its start.

        Waits up to ``startup_grace`` seconds. A child that exits inside that
        window is reported like run() would report it. A child still alive
        afterwards is left running, its output drained in the background, and
        a success result naming its pid is returned.
        """
        tokens = _check_args(args)
        grace = startup_grace if startup_grace is not None else self._config.serve_startup_grace

        started = time.monotonic()
        spawned = await self._spawn(binary, tokens, cwd)
        if isinstance(spawned, ExecutionResult):
            return spawned
        process = spawned

        drains = (
            asyncio.create_task(_drain(process.stdout)),
            asyncio.create_task(_drain(process.stderr)),
        )
        try:
            await asyncio.wait_for(process.wait(), timeout=grace)
        except TimeoutError:
            self._prune()
            self._detached.append(_Detached(binary, process, drains))
            logger.info("Started %s (pid %s)", binary, process.pid)
            return ExecutionResult(
                success=True,
                stdout=f"Started {binary} (pid {process.pid})",
                stderr="",
                code=0,
                duration_ms=(time.monotonic() - started) * 1000,
            )
        except BaseException:
            await _kill(process)
            await asyncio.gather(*drains, return_exceptions=True)
            raise

        stdout, stderr = await asyncio.gather(*drains)
        return ExecutionResult.from_exit(
            process.returncode if process.returncode is not None else -1,
            _decode(stdout),
            _decode(stderr),
            duration_ms=(time.monotonic() - started) * 1000,
        )

    async def aclose(self) -> None:
        """Terminate detached children and release their pipes."""
        detached, self._detached = self._detached, []
        for entry in detached:
            process = entry.process
            if process.returncode is None or not all(task.done() for task in entry.drains):
                logger.info("Stopping %s (pid %s)", entry.binary, process.pid)
                _signal_group(process, signal.SIGTERM)
                try:
                    await asyncio.wait_for(process.wait(), timeout=_TERMINATE_GRACE)
                except TimeoutError:
                    await _kill(process)
            await asyncio.gather(*entry.drains, return_exceptions=True)
