from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple


STATUS_COMPLETED = "completed"


@dataclass(frozen=True, slots=True)
class PullRequestRecord:
    pull_request_id: int
    title: Optional[str]
    creator_name: Optional[str]
    creator_id: Optional[str]
    created_at: Optional[datetime]
    closed_at: Optional[datetime]
    status: Optional[str]
    merge_status: Optional[str]
    merge_commit_id: Optional[str]

    @property
    def is_completed(self) -> bool:
        return self.status == STATUS_COMPLETED


@dataclass(frozen=True, slots=True)
class BuildRecord:
    build_id: Optional[int]
    build_number: Optional[str]
    result: Optional[str]
    status: Optional[str]
    finished_at: Optional[datetime]
    requester_id: Optional[str]
    source_version: Optional[str]


@dataclass(frozen=True, slots=True)
class BuildListing:
    builds: Tuple[BuildRecord, ...]
    raw_body: str


@dataclass(frozen=True, slots=True)
class CommentRecord:
    comment_id: Optional[int]
    author_name: Optional[str]
    published_at: Optional[datetime]
    content: Optional[str]


@dataclass(frozen=True, slots=True)
class ThreadRecord:
    thread_id: Optional[int]
    file_path: Optional[str]
    line_number: Optional[int]
    comments: Optional[Tuple[CommentRecord, ...]]
