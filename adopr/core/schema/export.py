from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PRRow:
    pr_id: int
    title: str
    creator: str
    created_date: str
    status: str
    url: str
    merge_status: str
    build_info: str
    deployment_info: str


@dataclass(frozen=True, slots=True)
class CommentRow:
    pr_id: int
    title: str
    creator: str
    created_date: str
    status: str
    url: str
    build_info: str
    deployment_info: str
    thread_id: str
    comment_id: str
    comment_author: str
    comment_date: str
    comment_content: str
    file_path: str
    line_number: str
