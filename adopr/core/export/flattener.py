from dataclasses import dataclass
from typing import List, Sequence, Tuple

from adopr.core.export.csv_rows import (
    format_timestamp,
    text_or_empty,
    text_or_unknown,
)
from adopr.core.ports.logger import Logger
from adopr.core.schema.export import CommentRow, PRRow
from adopr.core.schema.pr import PullRequestRecord, ThreadRecord

DEPLOYMENT_NOT_AVAILABLE = "Not Available"

ERROR_FETCHING_COMMENTS = "Error fetching comments"
NO_COMMENTS = "No comments"
NO_COMMENTS_IN_THREAD = "No comments in thread"
NO_COMMENTS_FOUND = "No comments found"
NO_CONTENT = "No content"


@dataclass(frozen=True, slots=True)
class FlattenedComments:
    rows: Tuple[CommentRow, ...]
    comments_extracted: int


class RecordFlattener:
    """Turns one pull request and its thread tree into report rows.

    Every pull request yields at least one comment row; when there is nothing
    real to report a placeholder row names the reason in the author column.
    """

    def __init__(self, logger: Logger) -> None:
        self._logger = logger

    def pr_row(
        self,
        pr: PullRequestRecord,
        url: str,
        build_info: str,
        deployment_info: str = DEPLOYMENT_NOT_AVAILABLE,
    ) -> PRRow:
        return PRRow(
            pr_id=pr.pull_request_id,
            title=text_or_unknown(pr.title),
            creator=text_or_unknown(pr.creator_name),
            created_date=format_timestamp(pr.created_at),
            status=text_or_unknown(pr.status),
            url=url,
            merge_status=text_or_unknown(pr.merge_status),
            build_info=build_info,
            deployment_info=deployment_info,
        )

    def error_rows(self, pr_row: PRRow) -> FlattenedComments:
        return FlattenedComments(
            rows=(self._placeholder(pr_row, ERROR_FETCHING_COMMENTS),),
            comments_extracted=0,
        )

    def no_thread_rows(self, pr_row: PRRow) -> FlattenedComments:
        return FlattenedComments(
            rows=(self._placeholder(pr_row, NO_COMMENTS),),
            comments_extracted=0,
        )

    def comment_rows(
        self,
        pr_row: PRRow,
        threads: Sequence[ThreadRecord],
    ) -> FlattenedComments:
        if not threads:
            return self.no_thread_rows(pr_row)

        rows: List[CommentRow] = []
        extracted = 0
        for thread in threads:
            thread_rows, thread_extracted = self._thread_rows(pr_row, thread)
            rows.extend(thread_rows)
            extracted += thread_extracted

        if extracted == 0:
            rows.append(self._placeholder(pr_row, NO_COMMENTS_FOUND))
        return FlattenedComments(rows=tuple(rows), comments_extracted=extracted)

    def _thread_rows(
        self,
        pr_row: PRRow,
        thread: ThreadRecord,
    ) -> Tuple[List[CommentRow], int]:
        thread_id = text_or_empty(thread.thread_id)
        file_path = text_or_empty(thread.file_path)
        line_number = text_or_empty(thread.line_number)

        if not thread.comments:
            if thread.comments is None:
                self._logger.warning(
                    "No comments in thread",
                    pr_id=pr_row.pr_id,
                    thread_id=thread.thread_id,
                )
            row = self._placeholder(
                pr_row,
                NO_COMMENTS_IN_THREAD,
                thread_id=thread_id,
                file_path=file_path,
                line_number=line_number,
            )
            return [row], 0

        rows: List[CommentRow] = []
        extracted = 0
        for comment in thread.comments:
            context = {
                "pr_id": pr_row.pr_id,
                "thread_id": thread.thread_id,
                "comment_id": comment.comment_id,
            }
            if comment.content == "":
                self._logger.warning("Empty comment content skipped", **context)
                continue
            if comment.content is None:
                self._logger.warning("Comment has no content", **context)
                content = NO_CONTENT
            else:
                content = comment.content
                extracted += 1
            rows.append(
                self._row(
                    pr_row,
                    thread_id=thread_id,
                    comment_id=text_or_empty(comment.comment_id),
                    comment_author=text_or_unknown(comment.author_name),
                    comment_date=format_timestamp(comment.published_at),
                    comment_content=content,
                    file_path=file_path,
                    line_number=line_number,
                )
            )
        return rows, extracted

    def _placeholder(
        self,
        pr_row: PRRow,
        reason: str,
        *,
        thread_id: str = "",
        file_path: str = "",
        line_number: str = "",
    ) -> CommentRow:
        return self._row(
            pr_row,
            thread_id=thread_id,
            comment_id="",
            comment_author=reason,
            comment_date="",
            comment_content="",
            file_path=file_path,
            line_number=line_number,
        )

    def _row(
        self,
        pr_row: PRRow,
        *,
        thread_id: str,
        comment_id: str,
        comment_author: str,
        comment_date: str,
        comment_content: str,
        file_path: str,
        line_number: str,
    ) -> CommentRow:
        return CommentRow(
            pr_id=pr_row.pr_id,
            title=pr_row.title,
            creator=pr_row.creator,
            created_date=pr_row.created_date,
            status=pr_row.status,
            url=pr_row.url,
            build_info=pr_row.build_info,
            deployment_info=pr_row.deployment_info,
            thread_id=thread_id,
            comment_id=comment_id,
            comment_author=comment_author,
            comment_date=comment_date,
            comment_content=comment_content,
            file_path=file_path,
            line_number=line_number,
        )
