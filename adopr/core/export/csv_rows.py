from datetime import datetime, timezone
from typing import Optional

from adopr.core.schema.export import CommentRow, PRRow

UNKNOWN = "Unknown"

PR_HEADER = (
    "PR ID,PR Title,PR Creator,PR Created Date,PR Status,PR URL,"
    "PR Merge Status,Build Info,Deployment Info"
)
COMMENT_HEADER = (
    "PR ID,PR Title,PR Creator,PR Created Date,PR Status,PR URL,"
    "Build Info,Deployment Info,Thread ID,Comment ID,Comment Author,"
    "Comment Date,Comment Content,File Path,Line Number"
)


def escape_field(value: str) -> str:
    """Quote one CSV field.

    Commas become semicolons and double quotes are doubled before the value
    is wrapped in double quotes. The comma substitution is lossy on purpose;
    downstream spreadsheets never see a delimiter inside a field.
    """
    escaped = value.replace(",", ";").replace('"', '""')
    return f'"{escaped}"'


def clean_content(value: str) -> str:
    return value.replace("\r", " ").replace("\n", " ")


def text_or_unknown(value: Optional[str]) -> str:
    return UNKNOWN if value is None else value


def text_or_empty(value: object) -> str:
    return "" if value is None else str(value)


def format_timestamp(value: Optional[datetime], default: str = UNKNOWN) -> str:
    if value is None:
        return default
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.replace(tzinfo=None).isoformat() + "Z"


def render_pr_row(row: PRRow) -> str:
    fields = (
        row.title,
        row.creator,
        row.created_date,
        row.status,
        row.url,
        row.merge_status,
        row.build_info,
        row.deployment_info,
    )
    return _join(row.pr_id, fields)


def render_comment_row(row: CommentRow) -> str:
    fields = (
        row.title,
        row.creator,
        row.created_date,
        row.status,
        row.url,
        row.build_info,
        row.deployment_info,
        row.thread_id,
        row.comment_id,
        row.comment_author,
        row.comment_date,
        clean_content(row.comment_content),
        row.file_path,
        row.line_number,
    )
    return _join(row.pr_id, fields)


def _join(pr_id: int, fields: tuple[str, ...]) -> str:
    # The PR id is the only column written unquoted.
    return ",".join([str(pr_id), *(escape_field(field) for field in fields)])
