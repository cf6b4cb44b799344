import concurrent.futures
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, TextIO, Union

from loguru import logger

from ..config.common import DEFAULT_LANGUAGE, DEFAULT_SUB_FORMAT, DEFAULT_VIDEO_FORMAT
from ..domain.languages import Language
from ..services.confirmation_service import confirm
from ..services.file_pairing_service import pair
from ..services.task_builder import MuxTask, build_tasks, create_output_dir
from ..utils.process_utils import run_cmd
from ..utils.tool_checker import Tools


@dataclass(frozen=True)
class TaskResult:
    """
    Outcome of one `MuxTask`: the mux stdout on success, or the first error.
    """

    task: MuxTask
    stdout: bytes = b""
    error: Optional[Exception] = None

    @property
    def index(self) -> int:
        return self.task.index

    @property
    def ok(self) -> bool:
        return self.error is None


def process_single_task(task: MuxTask) -> bytes:
    """
    Runs the external tools for one pair and returns the mux stdout.

    The sync step, when enabled, has to finish before the mux starts; its
    output is discarded. Any exception ends the task.
    """
    if task.sync:
        logger.debug(f"Synchronizing {task.sub_file} against {task.video_file}")
        run_cmd(task.sync_command(), cwd=task.work_dir)
    result = run_cmd(task.mux_command(), cwd=task.work_dir)
    logger.info(f"Multiplexing {task.video_file}")
    return result.stdout


def run_tasks(tasks: List[MuxTask], max_workers: Optional[int] = None) -> List[TaskResult]:
    """
    Runs every task concurrently and returns the results in task order.

    One worker thread is started per task unless `max_workers` caps it. A
    failing task never cancels its siblings; the call returns only after all
    of them have finished.
    """
    if not tasks:
        return []

    workers = max(1, min(max_workers or len(tasks), len(tasks)))
    logger.info(f"Running {len(tasks)} task(s) with {workers} worker thread(s).")

    results: List[Optional[TaskResult]] = [None] * len(tasks)
    with concurrent.futures.ThreadPoolExecutor(
        max_workers=workers, thread_name_prefix="mux"
    ) as executor:
        futures = {
            executor.submit(process_single_task, task): position
            for position, task in enumerate(tasks)
        }
        for future in concurrent.futures.as_completed(futures):
            position = futures[future]
            task = tasks[position]
            try:
                results[position] = TaskResult(task, stdout=future.result())
                logger.success(f"Finished {task.video_file} -> {task.output_path}")
            except Exception as exc:
                logger.error(
                    f"Error processing task for {task.video_file}:\n"
                    f"Exception type: {type(exc).__name__}\n"
                    f"Exception message: {exc}"
                )
                results[position] = TaskResult(task, error=exc)

    return results


class MuxPipeline:
    """
    Runs a whole batch: pair, confirm, build, dispatch.

    Every check that can fail the batch (language, pairing, confirmation,
    output folder) happens before the first external process is started,
    including the optional tool version check.
    """

    def __init__(
        self,
        directory: Union[str, Path],
        video_format: str = DEFAULT_VIDEO_FORMAT,
        sub_format: str = DEFAULT_SUB_FORMAT,
        language: str = DEFAULT_LANGUAGE,
        sync: bool = False,
        max_workers: Optional[int] = None,
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None,
        check_tools: bool = False,
    ):
        self.directory = Path(directory)
        self.video_format = video_format
        self.sub_format = sub_format
        self.language = language
        self.sync = sync
        self.max_workers = max_workers
        self.input_stream = input_stream or sys.stdin
        self.output_stream = output_stream or sys.stdout
        self.check_tools = check_tools

    def run(self) -> List[TaskResult]:
        logger.info(f"MuxPipeline: Starting in path: {self.directory}")
        Language.from_code(self.language)

        pair_set = pair(self.directory, self.video_format, self.sub_format)
        if not len(pair_set):
            logger.warning(
                f"No '{self.video_format}'/'{self.sub_format}' pairs found in {pair_set.directory}. Nothing to do."
            )
            return []

        confirm(pair_set, self.input_stream, self.output_stream)

        tasks = build_tasks(pair_set, self.language, self.sync)
        create_output_dir(pair_set.directory)
        if self.check_tools:
            Tools.run_all(sync=self.sync)
        results = run_tasks(tasks, self.max_workers)

        failed = sum(1 for r in results if not r.ok)
        logger.info(f"MuxPipeline: {len(results) - failed} succeeded, {failed} failed.")
        return results
