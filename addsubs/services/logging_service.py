"""
This module provides the structured report written at the end of a batch.

Console logging is handled by loguru. The report is a separate, machine-readable
YAML file with one entry per pair, in pairing order, so a batch can be audited
after the fact.
"""

from datetime import datetime
from pathlib import Path
from typing import Dict, List

import yaml
from loguru import logger

from ..config.common import REPORT_STATUS_COMPLETED, REPORT_STATUS_FAILED


class BatchReport:
    """
    Writes the results of a batch to a YAML file.

    Attributes:
        log_file_path (Path): Where the report is written.
    """

    def __init__(self, log_file_path: Path):
        self.log_file_path = Path(log_file_path).resolve()
        self.log_file_path.parent.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def to_entry(result) -> Dict:
        task = result.task
        entry = {
            "index": task.index + 1,
            "subtitle": task.sub_file,
            "video": task.video_file,
            "output": str(task.output_path),
            "language": task.language_code,
            "synced": task.sync,
            "status": REPORT_STATUS_COMPLETED if result.ok else REPORT_STATUS_FAILED,
        }
        if not result.ok:
            entry["error"] = f"{type(result.error).__name__}: {result.error}"
        return entry

    def write(self, results: List) -> List[Dict]:
        """
        Dumps one entry per `TaskResult`, overwriting any previous report.

        Returns:
            The entries that were written.
        """
        finished = datetime.now().isoformat(timespec="seconds")
        entries = []
        for result in results:
            entry = self.to_entry(result)
            entry["finished_datetime"] = finished
            entries.append(entry)

        with self.log_file_path.open("w", encoding="utf-8") as f:
            yaml.dump(
                entries,
                f,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
                indent=4,
                width=220,
            )
        logger.info(f"Wrote batch report with {len(entries)} entries to {self.log_file_path}")
        return entries
