from adopr.core.export.csv_rows import (
    COMMENT_HEADER,
    PR_HEADER,
    clean_content,
    escape_field,
    render_comment_row,
    render_pr_row,
)
from adopr.core.export.flattener import (
    DEPLOYMENT_NOT_AVAILABLE,
    FlattenedComments,
    RecordFlattener,
)

__all__ = [
    "PR_HEADER",
    "COMMENT_HEADER",
    "escape_field",
    "clean_content",
    "render_pr_row",
    "render_comment_row",
    "RecordFlattener",
    "FlattenedComments",
    "DEPLOYMENT_NOT_AVAILABLE",
]
