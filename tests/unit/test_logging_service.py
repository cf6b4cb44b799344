"""Unit tests for the YAML batch report."""

import yaml

from addsubs.config.common import REPORT_STATUS_COMPLETED, REPORT_STATUS_FAILED
from addsubs.domain.exceptions import CommandFailedError
from addsubs.pipeline.mux_pipeline import TaskResult
from addsubs.services.logging_service import BatchReport


class TestBatchReport:
    def test_writes_one_entry_per_result(self, tmp_path, tasks):
        results = [
            TaskResult(tasks[0], stdout=b"ok"),
            TaskResult(tasks[1], error=CommandFailedError(["mkvmerge"], 2, "bad track")),
            TaskResult(tasks[2], stdout=b"ok"),
        ]
        report = BatchReport(tmp_path / "logs" / "report.yaml")

        written = report.write(results)

        loaded = yaml.safe_load(report.log_file_path.read_text(encoding="utf-8"))
        assert loaded == written
        assert [e["index"] for e in loaded] == [1, 2, 3]
        assert [e["status"] for e in loaded] == [
            REPORT_STATUS_COMPLETED,
            REPORT_STATUS_FAILED,
            REPORT_STATUS_COMPLETED,
        ]
        assert loaded[1]["video"] == "ep02.mkv"
        assert loaded[1]["subtitle"] == "ep02.srt"
        assert "bad track" in loaded[1]["error"]
        assert "error" not in loaded[0]
        assert loaded[0]["output"] == str(tasks[0].output_path)
        assert loaded[0]["language"] == "jpn"

    def test_overwrites_previous_report(self, tmp_path, tasks):
        path = tmp_path / "report.yaml"
        BatchReport(path).write([TaskResult(t, stdout=b"") for t in tasks])
        BatchReport(path).write([TaskResult(tasks[0], stdout=b"")])

        assert len(yaml.safe_load(path.read_text(encoding="utf-8"))) == 1
