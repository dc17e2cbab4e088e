from typing import Protocol, runtime_checkable

from adopr.core.schema.export import CommentRow, PRRow


@runtime_checkable
class ReportWriter(Protocol):
    def open(self) -> None:
        ...

    def write_pr_row(self, row: PRRow) -> None:
        ...

    def write_comment_row(self, row: CommentRow) -> None:
        ...

    def close(self) -> None:
        ...
