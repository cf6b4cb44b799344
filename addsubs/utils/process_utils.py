"""
This module provides the wrapper used to run the external tools (mkvmerge, ffs).
"""

import os
import shlex
import subprocess
from pathlib import Path
from typing import List, Optional

from loguru import logger

from ..domain.exceptions import CommandFailedError


def display_cmd(cmd_list: List[str]) -> str:
    """Quotes and joins a command list for logging."""
    if os.name == "nt":
        return subprocess.list2cmdline(cmd_list)
    return shlex.join(cmd_list)


def run_cmd(
    cmd_list: List[str],
    cwd: Optional[Path] = None,
    show_cmd: bool = True,
) -> subprocess.CompletedProcess:
    """
    Executes an external command and captures its output.

    This is a wrapper around `subprocess.run` that adds logging and turns a
    non-zero exit status into a typed exception. The command is always given
    as a list and never goes through a shell.

    Args:
        cmd_list: The command to execute as a list of arguments.
        cwd: The working directory for the command.
        show_cmd: If True, the command is logged at DEBUG level before execution.

    Returns:
        The `subprocess.CompletedProcess`. `stdout` and `stderr` are raw bytes.

    Raises:
        ValueError: If `cmd_list` is empty.
        CommandFailedError: If the command exits with a non-zero return code.
        OSError: If the command cannot be started (e.g. `FileNotFoundError`
                 when the executable is not installed).
    """
    if not cmd_list:
        raise ValueError("run_cmd received an empty command list.")

    display_cmd_str = display_cmd(cmd_list)
    if show_cmd:
        logger.debug(f"Executing command: {display_cmd_str}")

    try:
        result = subprocess.run(
            cmd_list,
            cwd=cwd,
            capture_output=True,
            shell=False,
        )
    except FileNotFoundError:
        logger.error(
            f"Command not found: '{cmd_list[0]}'. Ensure it's in your system's PATH or configured in config.user.yaml."
        )
        raise

    if result.stdout and len(result.stdout) > 500:
        logger.trace(f"Command stdout (truncated): {result.stdout[:500]!r}...")
    elif result.stdout:
        logger.trace(f"Command stdout: {result.stdout!r}")

    stderr_text = result.stderr.decode("utf-8", errors="replace") if result.stderr else ""
    if result.returncode != 0:
        logger.debug(f"Command stderr (error, rc={result.returncode}): {stderr_text}")
        raise CommandFailedError(cmd_list, result.returncode, stderr_text)
    if stderr_text:
        logger.trace(f"Command stderr (non-error, rc={result.returncode}): {stderr_text}")

    return result
