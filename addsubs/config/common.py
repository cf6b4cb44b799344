"""
Common configuration settings used throughout the application.

This module contains globally shared configuration settings and constants for
addsubs: the CLI defaults, the output folder layout, the logging format and
the process exit codes. It also handles the loading of user-specific
configuration from an external YAML file, so the locations of the external
tools (mkvmerge, ffs) can be customised without modifying the source code.
"""
import os
from pathlib import Path

import yaml
from loguru import logger

# --- User-Defined Path Configuration ---
# This block loads user-specific executable paths from a 'config.user.yaml'
# file located at the project root, or from the file named by the
# ADDSUBS_CONFIG environment variable.

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
USER_CONFIG_PATH = Path(os.environ.get("ADDSUBS_CONFIG", PROJECT_ROOT / "config.user.yaml"))

# The executables used for multiplexing and subtitle synchronization. When not
# configured they are looked up on the system's PATH.
MKVMERGE_PATH: str = "mkvmerge"
FFS_PATH: str = "ffs"

if USER_CONFIG_PATH.is_file():
    try:
        with USER_CONFIG_PATH.open("r", encoding="utf-8") as f:
            user_config = yaml.safe_load(f)
        if user_config and "paths" in user_config:
            paths_config = user_config.get("paths") or {}
            if paths_config.get("mkvmerge"):
                MKVMERGE_PATH = str(paths_config["mkvmerge"])
            if paths_config.get("ffs"):
                FFS_PATH = str(paths_config["ffs"])
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Could not load or parse '{USER_CONFIG_PATH}': {e}")
else:
    logger.debug(f"User config '{USER_CONFIG_PATH}' not found. Relying on system PATH for executables.")


# --- Logging Configuration ---

# The format string for the Loguru logger.
LOGGER_FORMAT = (
    "<green>{time:MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "{thread.name} - <level>{message}</level>"
)


# --- CLI Defaults ---

DEFAULT_DIR = "."
DEFAULT_VIDEO_FORMAT = "mkv"
DEFAULT_SUB_FORMAT = "srt"
DEFAULT_LANGUAGE = "jpn"


# --- Directory and File Management ---

# Name of the folder, created inside the scanned directory, that receives the
# multiplexed video files. Each output keeps the source video's filename.
OUTPUT_DIR_NAME = "output"


# --- Batch Report ---

REPORT_STATUS_COMPLETED = "completed"
REPORT_STATUS_FAILED = "failed"


# --- Process Exit Codes ---
# Batch-fatal conditions each get their own code. A run in which at least one
# task failed exits with EXIT_TASK_FAILED after every result is reported.

EXIT_OK = 0
EXIT_LANGUAGE_ERROR = 1
EXIT_DIR_ERROR = 2
EXIT_NO_FILE_ERROR = 3
EXIT_MISMATCH_ERROR = 4
EXIT_USER_CANCEL = 6
EXIT_OUTPUT_MKDIR_ERROR = 7
EXIT_TASK_FAILED = 8
