"""External command execution.

Every collaborator (mdfind, grep, xcrun) runs through run_command(), which
owns the process handle for its whole life:

- stdout is piped, stderr is discarded
- communicate() drains stdout to EOF before the exit status is awaited
- on timeout or cancellation the process group gets SIGTERM -> wait -> SIGKILL

There is no timeout unless one is passed explicitly; a hung command then
blocks the caller.
"""

import asyncio
import logging
import os
import signal
from asyncio.subprocess import Process
from collections.abc import Sequence
from dataclasses import dataclass

from xcdocs.core.encoding import decode_output
from xcdocs.core.errors import ProcessTimeoutError, ProviderError

logger = logging.getLogger(__name__)

GRACEFUL_TIMEOUT: float = 2.0


@dataclass(frozen=True)
class CommandResult:
    """Captured outcome of a finished command.

    Attributes:
        returncode: Exit status of the process.
        stdout: Decoded standard output.
    """

    returncode: int
    stdout: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    def lines(self) -> list[str]:
        """Non-empty output lines, in order."""
        return [line for line in self.stdout.splitlines() if line]


async def run_command(
    cmd: Sequence[str],
    timeout: float | None = None,
    capture_output: bool = True,
) -> CommandResult:
    """Run a command to completion and capture its standard output.

    Args:
        cmd: Program and arguments. Never passed through a shell.
        timeout: Seconds to wait before killing the process, or None to wait forever.
        capture_output: If False, stdout is discarded (for tools that write files).

    Returns:
        CommandResult with the exit status and decoded stdout.

    Raises:
        ProviderError: If the program cannot be started.
        ProcessTimeoutError: If the timeout expires; the process tree is killed first.
    """
    program = cmd[0]
    logger.debug("Running command: %s", " ".join(cmd))

    try:
        process = await asyncio.create_subprocess_exec(
            *cmd,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE if capture_output else asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.DEVNULL,
            start_new_session=True,
        )
    except (FileNotFoundError, PermissionError) as e:
        raise ProviderError(f"Cannot run {program}: {e}") from e

    try:
        # communicate() reads stdout to EOF and only then waits for exit
        stdout, _ = await asyncio.wait_for(process.communicate(), timeout=timeout)
    except TimeoutError:
        logger.warning("Command timed out after %ss: %s", timeout, program)
        await terminate_process_tree(process)
        raise ProcessTimeoutError(program, timeout or 0.0) from None
    except asyncio.CancelledError:
        await terminate_process_tree(process)
        raise

    returncode = process.returncode if process.returncode is not None else -1
    if returncode != 0:
        logger.debug("Command exited with status %d: %s", returncode, program)

    return CommandResult(
        returncode=returncode,
        stdout=decode_output(stdout) if stdout else "",
    )


async def terminate_process_tree(
    process: Process,
    graceful_timeout: float = GRACEFUL_TIMEOUT,
) -> None:
    """Terminate a process and all its children.

    1. Send SIGTERM to the process group
    2. Wait for graceful_timeout
    3. If still running, send SIGKILL to the process group

    Args:
        process: The asyncio subprocess to terminate.
        graceful_timeout: Seconds to wait after SIGTERM before SIGKILL.
    """
    if process.returncode is not None:
        return

    pid = process.pid
    if pid is None:
        return

    try:
        pgid = os.getpgid(pid)
        os.killpg(pgid, signal.SIGTERM)
        logger.debug("Sent SIGTERM to process group %d", pgid)
    except (ProcessLookupError, PermissionError, OSError):
        # Process group not found or no permission, try single process
        try:
            process.terminate()
        except ProcessLookupError:
            return

    try:
        await asyncio.wait_for(process.wait(), timeout=graceful_timeout)
        return
    except TimeoutError:
        pass

    try:
        pgid = os.getpgid(pid)
        os.killpg(pgid, signal.SIGKILL)
        logger.debug("Sent SIGKILL to process group %d", pgid)
    except (ProcessLookupError, PermissionError, OSError):
        try:
            process.kill()
        except ProcessLookupError:
            return

    await process.wait()
