"""
Defines custom exception types for the addsubs application.

Batch-fatal conditions (`LangError`, `MismatchError`, `ExitError`) are raised
before any external process is spawned and abort the whole run. Task-scoped
failures (`CommandFailedError`) are captured per pair by the execution
coordinator and reported alongside the successful results.

All custom exceptions inherit from the base `AddSubsException`. Filesystem
failures are not wrapped: they propagate as the built-in `OSError`.
"""
from typing import List


class AddSubsException(Exception):
    """Base class for all custom exceptions in the addsubs application."""

    pass


# --- Batch-fatal Exceptions ---
class MismatchError(AddSubsException):
    """
    Raised when the directory holds a different number of video and subtitle files.

    Pairing is purely positional, so unequal counts would silently shift every
    pair after the first gap. The batch is stopped before anything is shown to
    the operator.
    """

    def __init__(self, videos: int = 0, subs: int = 0):
        self.videos = videos
        self.subs = subs
        super().__init__(
            f"Not the same amount of video and sub files ({videos} video, {subs} sub)."
        )


class LangError(AddSubsException):
    """Raised when the requested language code is not in the supported table."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"{code} language not supported.")


class ExitError(AddSubsException):
    """
    Raised when the operator rejects the proposed pairing.

    Not a failure as such, but modelled as an exception so cancellation leaves
    the batch through the same path as every other pre-dispatch condition.
    """

    def __init__(self):
        super().__init__("User cancelled.")


# --- Task-scoped Exceptions ---
class CommandFailedError(AddSubsException):
    """Raised when an external command exits with a non-zero return code."""

    def __init__(self, cmd: List[str], returncode: int, stderr: str = ""):
        self.cmd = list(cmd)
        self.returncode = returncode
        self.stderr = stderr
        message = f"'{self.cmd[0] if self.cmd else '?'}' exited with return code {returncode}"
        if stderr:
            message += f": {stderr.strip()}"
        super().__init__(message)


# --- Filesystem Exceptions ---
class OutputDirectoryError(AddSubsException, OSError):
    """
    Raised when the output folder cannot be created.

    It is still an `OSError`, so callers that only care about filesystem
    failures can keep catching that.
    """

    pass
