from typing import List

from adopr.core.ports.report_writer import ReportWriter
from adopr.core.schema.export import CommentRow, PRRow


class FakeReportWriter(ReportWriter):
    def __init__(self) -> None:
        self.pr_rows: List[PRRow] = []
        self.comment_rows: List[CommentRow] = []
        self.opened = 0
        self.closed = 0

    def open(self) -> None:
        self.opened += 1

    def write_pr_row(self, row: PRRow) -> None:
        self.pr_rows.append(row)

    def write_comment_row(self, row: CommentRow) -> None:
        self.comment_rows.append(row)

    def close(self) -> None:
        self.closed += 1
