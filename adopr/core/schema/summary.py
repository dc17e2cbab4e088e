from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RunSummary:
    total_fetched: int
    processed: int
    skipped: int
    pr_rows: int
    comment_rows: int
    comments_extracted: int
    truncated: bool
    pagination_aborted: bool
