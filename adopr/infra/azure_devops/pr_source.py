import re
from datetime import datetime, timezone
from typing import Any, Mapping, Optional, Tuple
from urllib.parse import quote

from adopr.core.exceptions import (
    RepositoryResolutionError,
    SourceNotFoundError,
    UnexpectedPayloadError,
)
from adopr.core.ports.pr_source import PRSource
from adopr.core.schema.pr import (
    BuildListing,
    BuildRecord,
    CommentRecord,
    PullRequestRecord,
    ThreadRecord,
)
from adopr.infra.azure_devops.client import AzureDevOpsClient, JsonResponse

STATUS_ALL = "all"
REPOSITORY_TYPE_GIT = "TfsGit"
QUERY_ORDER_FINISH_DESC = "finishTimeDescending"

_FRACTION_RE = re.compile(r"\.(\d+)")


class AzureDevOpsPRSource(PRSource):
    def __init__(self, client: AzureDevOpsClient, repository_name: str) -> None:
        self._client = client
        self._repository_name = repository_name
        self._repository_path = (
            f"git/repositories/{quote(repository_name, safe='')}"
        )

    def resolve_repository_id(self) -> str:
        try:
            response = self._client.get_json(self._repository_path)
        except SourceNotFoundError as error:
            raise RepositoryResolutionError(
                "Repository not found; check organization, project and repository names",
                self._repository_name,
            ) from error
        payload = response.payload
        repository_id = payload.get("id") if isinstance(payload, dict) else None
        if not repository_id:
            raise RepositoryResolutionError(
                f"Repository lookup returned no id: {response.body[:200]}",
                self._repository_name,
            )
        return str(repository_id)

    def list_pull_requests(self, skip: int, top: int) -> Tuple[PullRequestRecord, ...]:
        response = self._client.get_json(
            f"{self._repository_path}/pullRequests",
            {
                "searchCriteria.status": STATUS_ALL,
                "$top": top,
                "$skip": skip,
            },
        )
        return tuple(_to_pull_request(item) for item in _values(response))

    def list_threads(self, pull_request_id: int) -> Tuple[ThreadRecord, ...]:
        response = self._client.get_json(
            f"{self._repository_path}/pullRequests/{pull_request_id}/threads"
        )
        return tuple(_to_thread(item) for item in _values(response))

    def list_recent_builds(self, repository_id: str, top: int) -> BuildListing:
        response = self._client.get_json(
            "build/builds",
            {
                "repositoryId": repository_id,
                "repositoryType": REPOSITORY_TYPE_GIT,
                "queryOrder": QUERY_ORDER_FINISH_DESC,
                "$top": top,
            },
        )
        builds = tuple(_to_build(item) for item in _values(response))
        return BuildListing(builds=builds, raw_body=response.body)

    def pull_request_url(self, pull_request_id: int) -> str:
        return (
            f"{self._client.project_url}/_git/"
            f"{quote(self._repository_name, safe='')}/pullrequest/{pull_request_id}"
        )


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an Azure DevOps timestamp such as ``2024-01-05T10:00:00.1234567Z``.

    The API emits up to seven fractional digits, one more than ``datetime``
    holds, so the fraction is cut to microseconds. Unparseable values give None.
    """
    if not isinstance(value, str) or not value:
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    text = _FRACTION_RE.sub(lambda match: "." + match.group(1)[:6].ljust(6, "0"), text, count=1)
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _values(response: JsonResponse) -> list:
    payload = response.payload
    values = payload.get("value") if isinstance(payload, dict) else None
    if not isinstance(values, list):
        raise UnexpectedPayloadError(
            "Response has no 'value' list",
            response.body,
        )
    return [item for item in values if isinstance(item, dict)]


def _nested(item: Mapping[str, Any], *keys: str) -> Any:
    value: Any = item
    for key in keys:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def _int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _first(*values: Any) -> Any:
    for value in values:
        if value is not None:
            return value
    return None


def _to_pull_request(item: Mapping[str, Any]) -> PullRequestRecord:
    return PullRequestRecord(
        pull_request_id=_int(item.get("pullRequestId")) or 0,
        title=_text(item.get("title")),
        creator_name=_text(_nested(item, "createdBy", "displayName")),
        creator_id=_text(_nested(item, "createdBy", "id")),
        created_at=parse_timestamp(item.get("creationDate")),
        closed_at=parse_timestamp(
            _first(item.get("closedDate"), item.get("completionDate"))
        ),
        status=_text(item.get("status")),
        merge_status=_text(item.get("mergeStatus")),
        merge_commit_id=_text(
            _first(
                _nested(item, "lastMergeCommit", "commitId"),
                _nested(item, "lastMergeSourceCommit", "commitId"),
            )
        ),
    )


def _to_build(item: Mapping[str, Any]) -> BuildRecord:
    return BuildRecord(
        build_id=_int(item.get("id")),
        build_number=_text(item.get("buildNumber")),
        result=_text(item.get("result")),
        status=_text(item.get("status")),
        finished_at=parse_timestamp(item.get("finishTime")),
        requester_id=_text(_nested(item, "requestedFor", "id")),
        source_version=_text(item.get("sourceVersion")),
    )


def _to_thread(item: Mapping[str, Any]) -> ThreadRecord:
    comments = item.get("comments")
    return ThreadRecord(
        thread_id=_int(item.get("id")),
        file_path=_text(_nested(item, "threadContext", "filePath")),
        line_number=_int(_nested(item, "threadContext", "rightFileStart", "line")),
        comments=(
            tuple(_to_comment(c) for c in comments if isinstance(c, dict))
            if isinstance(comments, list)
            else None
        ),
    )


def _to_comment(item: Mapping[str, Any]) -> CommentRecord:
    return CommentRecord(
        comment_id=_int(item.get("id")),
        author_name=_text(_nested(item, "author", "displayName")),
        published_at=parse_timestamp(
            _first(item.get("publishedDate"), item.get("lastUpdatedDate"))
        ),
        content=_text(item.get("content")),
    )
