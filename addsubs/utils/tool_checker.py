"""
This module provides the Tools class to verify the external executables
addsubs drives: mkvmerge for multiplexing and ffs (ffsubsync) for the
optional subtitle synchronization.
"""
import subprocess

from loguru import logger

from ..config import common


class Tools:
    """
    Startup checks for the external tools.

    The executables are taken from the user's `config.user.yaml` when set there,
    otherwise they are expected on the system's PATH. A failed check is only
    logged: a missing tool will surface again as a failure of each task.
    """

    @staticmethod
    def verify(executable: str) -> bool:
        """
        Runs `<executable> --version` and logs the first line of its output.

        Returns:
            True if the tool could be executed and exited successfully.
        """
        try:
            result = subprocess.run(
                [executable, "--version"],
                check=True,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except subprocess.CalledProcessError as e:
            logger.error(f"'{executable} --version' failed (return code {e.returncode}):\n{e.stderr}")
            return False
        except FileNotFoundError:
            logger.error(
                f"'{executable}' command not found. Please ensure it is installed and accessible.\n"
                "You can either add it to your system's PATH or specify its location in the 'config.user.yaml' file."
            )
            return False
        except OSError as e:
            logger.error(f"Could not execute '{executable}': {e}")
            return False

        version_output_lines = (result.stdout or result.stderr).splitlines()
        first_line = version_output_lines[0] if version_output_lines else "(no output)"
        logger.info(f"{executable} version check successful: {first_line}")
        return True

    @staticmethod
    def run_all(sync: bool = False) -> bool:
        """
        Verifies mkvmerge, and ffs too when synchronization is requested.
        """
        ok = Tools.verify(common.MKVMERGE_PATH)
        if sync:
            ok = Tools.verify(common.FFS_PATH) and ok
        return ok
