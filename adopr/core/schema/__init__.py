from adopr.core.schema.export import CommentRow, PRRow
from adopr.core.schema.pr import (
    STATUS_COMPLETED,
    BuildListing,
    BuildRecord,
    CommentRecord,
    PullRequestRecord,
    ThreadRecord,
)
from adopr.core.schema.summary import RunSummary

__all__ = [
    "STATUS_COMPLETED",
    "PullRequestRecord",
    "BuildRecord",
    "BuildListing",
    "ThreadRecord",
    "CommentRecord",
    "PRRow",
    "CommentRow",
    "RunSummary",
]
