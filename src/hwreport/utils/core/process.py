# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Subprocess execution utilities.

All external tools queried by the report (dmidecode, lshw, lsusb, lspci,
lsblk, ip, sensors, smartctl, apt-get) are executed through this module.
Failures never raise: every invocation yields a ProcessResult describing
the exit status, captured output and whether the command timed out.
"""

import logging
import os
import shutil
import subprocess  # nosec B404 # For process execution API
import time
from typing import Dict, List, Optional

import psutil

logger = logging.getLogger(__name__)

# Exit status reported by shells when a command cannot be found
COMMAND_NOT_FOUND_RETURNCODE = 127
# Exit status reported by shells when a command cannot be executed
COMMAND_NOT_EXECUTABLE_RETURNCODE = 126

DEFAULT_TIMEOUT = 60.0


class ProcessResult:
    """
    Container for subprocess execution results.
    """

    def __init__(
        self,
        returncode: int,
        stdout: str = "",
        stderr: str = "",
        command: List[str] = None,
        execution_time: float = 0.0,
        timed_out: bool = False,
    ):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.command = command or []
        self.execution_time = execution_time
        self.timed_out = timed_out

    @property
    def success(self) -> bool:
        """Check if the command executed successfully."""
        return self.returncode == 0 and not self.timed_out

    @property
    def failed(self) -> bool:
        """Check if the command failed."""
        return not self.success

    def __str__(self) -> str:
        status = "SUCCESS" if self.success else "FAILED"
        return f"ProcessResult(status={status}, returncode={self.returncode}, time={self.execution_time:.2f}s)"


class CommandRunner:
    """
    Runs external commands with captured output and a timeout.

    Commands are always passed as argument lists; no shell is involved.
    """

    def __init__(self, default_timeout: float = DEFAULT_TIMEOUT):
        self.default_timeout = default_timeout

    def is_available(self, command: str) -> bool:
        """Check whether a command can be found on PATH."""
        return shutil.which(command) is not None

    def run(
        self,
        command: List[str],
        env: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> ProcessResult:
        """
        Execute a command and capture its output.

        Args:
            command: Command and arguments
            env: Extra environment variables merged over the current environment
            timeout: Maximum execution time in seconds

        Returns:
            ProcessResult: Execution results
        """
        cmd_list = self._prepare_command(command)
        effective_timeout = timeout or self.default_timeout
        start_time = time.time()

        logger.debug(f"Executing command: {' '.join(cmd_list)} (timeout={effective_timeout})")

        try:
            process = subprocess.Popen(
                cmd_list,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                stdin=subprocess.DEVNULL,
                env=self._prepare_environment(env),
                text=True,
                errors="replace",
            )
        except FileNotFoundError:
            logger.debug(f"Command not found: {cmd_list[0]}")
            return ProcessResult(
                returncode=COMMAND_NOT_FOUND_RETURNCODE,
                stderr=f"{cmd_list[0]}: command not found",
                command=cmd_list,
            )
        except OSError as e:
            logger.warning(f"Failed to execute {cmd_list[0]}: {e}")
            return ProcessResult(
                returncode=COMMAND_NOT_EXECUTABLE_RETURNCODE,
                stderr=str(e),
                command=cmd_list,
            )

        try:
            stdout, stderr = process.communicate(timeout=effective_timeout)
        except subprocess.TimeoutExpired:
            logger.warning(f"Command timed out after {effective_timeout}s: {' '.join(cmd_list)}")
            terminate_process_tree(process)
            stdout, stderr = process.communicate()
            return ProcessResult(
                returncode=-1,
                stdout=stdout or "",
                stderr=stderr or f"Command timed out after {effective_timeout}s",
                command=cmd_list,
                execution_time=time.time() - start_time,
                timed_out=True,
            )

        result = ProcessResult(
            returncode=process.returncode,
            stdout=stdout or "",
            stderr=stderr or "",
            command=cmd_list,
            execution_time=time.time() - start_time,
        )
        logger.debug(f"{' '.join(cmd_list)}: {result}")
        return result

    def _prepare_command(self, command: List[str]) -> List[str]:
        if not isinstance(command, (list, tuple)):
            raise TypeError(f"Invalid command type: {type(command)}")
        if not command:
            raise ValueError("Empty command not allowed")
        return [str(arg) for arg in command]

    def _prepare_environment(self, env: Optional[Dict[str, str]]) -> Dict[str, str]:
        merged_env = os.environ.copy()
        if env:
            merged_env.update(env)
        return merged_env


def terminate_process_tree(process: subprocess.Popen, grace_period: float = 5.0) -> None:
    """
    Terminate a process together with every descendant it spawned.

    Package managers fork helpers (dpkg, http fetchers) that would otherwise
    survive their parent being killed.

    Args:
        process: Process to terminate
        grace_period: Seconds to wait after SIGTERM before sending SIGKILL
    """
    try:
        children = psutil.Process(process.pid).children(recursive=True)
    except psutil.NoSuchProcess:
        children = []

    for child in children:
        try:
            child.terminate()
        except psutil.NoSuchProcess:
            pass
    process.terminate()

    _, alive = psutil.wait_procs(children, timeout=grace_period)
    for child in alive:
        logger.debug(f"Process {child.pid} ignored SIGTERM, sending SIGKILL")
        try:
            child.kill()
        except psutil.NoSuchProcess:
            pass

    try:
        process.wait(timeout=grace_period)
    except subprocess.TimeoutExpired:
        logger.warning(f"Process {process.pid} didn't respond to SIGTERM, sending SIGKILL")
        process.kill()
        process.wait()


# Global runner instance
_global_runner = None


def get_runner() -> CommandRunner:
    """
    Get the global command runner instance.

    Returns:
        CommandRunner: Global runner instance
    """
    global _global_runner
    if _global_runner is None:
        _global_runner = CommandRunner()
    return _global_runner
