"""
Main entry point for addsubs.

This script parses the command-line arguments, configures logging, and runs
the multiplexing pipeline over the target directory. Each task's mkvmerge
output is printed in pairing order; the exit status tells whether the whole
batch, or any single pair, failed.
"""

import sys
from typing import List, Optional

from loguru import logger

from addsubs.cli import get_args
from addsubs.config.common import (
    EXIT_DIR_ERROR,
    EXIT_LANGUAGE_ERROR,
    EXIT_MISMATCH_ERROR,
    EXIT_NO_FILE_ERROR,
    EXIT_OK,
    EXIT_OUTPUT_MKDIR_ERROR,
    EXIT_TASK_FAILED,
    EXIT_USER_CANCEL,
    LOGGER_FORMAT,
)
from addsubs.domain.exceptions import ExitError, LangError, MismatchError, OutputDirectoryError
from addsubs.pipeline.mux_pipeline import MuxPipeline, TaskResult
from addsubs.services.logging_service import BatchReport


def report_results(results: List[TaskResult]) -> int:
    """Prints every result in pairing order and returns the number of failures."""
    failed = 0
    for result in results:
        if result.ok:
            print(result.stdout.decode("utf-8", errors="replace"))
        else:
            failed += 1
            logger.error(f"{result.task.video_file}: {result.error}")
    return failed


def main(argv: Optional[List[str]] = None) -> int:
    args = get_args(argv)

    effective_log_level = "DEBUG" if args.debug_mode else args.log_level
    logger.remove()
    logger.add(sys.stderr, level=effective_log_level, format=LOGGER_FORMAT)
    logger.debug(f"Parsed arguments: {args}")

    pipeline = MuxPipeline(
        args.dir,
        video_format=args.videoformat,
        sub_format=args.subformat,
        language=args.lang,
        sync=args.sync,
        max_workers=args.processes,
        check_tools=not args.skip_tool_check,
    )
    try:
        results = pipeline.run()
    except LangError as e:
        logger.error(str(e))
        return EXIT_LANGUAGE_ERROR
    except MismatchError as e:
        logger.error(str(e))
        return EXIT_MISMATCH_ERROR
    except ExitError as e:
        logger.warning(str(e))
        return EXIT_USER_CANCEL
    except OutputDirectoryError as e:
        logger.error(str(e))
        return EXIT_OUTPUT_MKDIR_ERROR
    except OSError as e:
        logger.error(f"Could not read directory '{args.dir}': {e}")
        return EXIT_DIR_ERROR

    if not results:
        logger.error(
            f"Either there are no video files or sub files that match '{args.videoformat}'/'{args.subformat}' in '{args.dir}'."
        )
        return EXIT_NO_FILE_ERROR

    failed = report_results(results)

    if args.report:
        try:
            BatchReport(args.report).write(results)
        except OSError as e:
            logger.error(f"Failed to write report {args.report}: {e}")

    if failed:
        logger.error(f"{failed} of {len(results)} pair(s) failed.")
        return EXIT_TASK_FAILED
    logger.success("addsubs finished.")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
