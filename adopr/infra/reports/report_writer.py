from pathlib import Path
from typing import IO, Optional

from adopr.core.exceptions import ReportWriteError
from adopr.core.export.csv_rows import (
    COMMENT_HEADER,
    PR_HEADER,
    render_comment_row,
    render_pr_row,
)
from adopr.core.ports.report_writer import ReportWriter
from adopr.core.schema.export import CommentRow, PRRow

PR_REPORT_NAME = "all_prs.csv"
COMMENT_REPORT_NAME = "pr_comments.csv"


class CsvReportWriter(ReportWriter):
    """Writes the pull request and comment tables under ``output_dir``.

    ``open`` truncates both files and writes their headers. Every row is
    flushed as soon as it is written, so an interrupted run still leaves
    readable files.
    """

    def __init__(self, output_dir: str | Path) -> None:
        self._output_dir = Path(output_dir)
        self._pr_handle: Optional[IO[str]] = None
        self._comment_handle: Optional[IO[str]] = None

    @property
    def pr_report_path(self) -> Path:
        return self._output_dir / PR_REPORT_NAME

    @property
    def comment_report_path(self) -> Path:
        return self._output_dir / COMMENT_REPORT_NAME

    def open(self) -> None:
        self._output_dir.mkdir(parents=True, exist_ok=True)
        self._write_header(self.pr_report_path, PR_HEADER)
        self._write_header(self.comment_report_path, COMMENT_HEADER)
        self._pr_handle = self._open_append(self.pr_report_path)
        self._comment_handle = self._open_append(self.comment_report_path)

    def write_pr_row(self, row: PRRow) -> None:
        self._append(self._pr_handle, self.pr_report_path, render_pr_row(row))

    def write_comment_row(self, row: CommentRow) -> None:
        self._append(
            self._comment_handle,
            self.comment_report_path,
            render_comment_row(row),
        )

    def close(self) -> None:
        for handle in (self._pr_handle, self._comment_handle):
            if handle is not None:
                handle.close()
        self._pr_handle = None
        self._comment_handle = None

    def __enter__(self) -> "CsvReportWriter":
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        self.close()

    def _write_header(self, path: Path, header: str) -> None:
        try:
            path.write_text(header + "\n", encoding="utf-8")
        except OSError as error:
            raise ReportWriteError(f"Cannot write report header: {error}", str(path)) from error

    def _open_append(self, path: Path) -> IO[str]:
        try:
            return path.open("a", encoding="utf-8", newline="")
        except OSError as error:
            raise ReportWriteError(f"Cannot open report: {error}", str(path)) from error

    def _append(self, handle: Optional[IO[str]], path: Path, line: str) -> None:
        if handle is None:
            raise ReportWriteError("Report is not open", str(path))
        try:
            handle.write(line + "\n")
            handle.flush()
        except OSError as error:
            raise ReportWriteError(f"Cannot append to report: {error}", str(path)) from error
