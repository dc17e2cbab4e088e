from typing import Protocol, Tuple, runtime_checkable

from adopr.core.schema.pr import BuildListing, PullRequestRecord, ThreadRecord


@runtime_checkable
class PRSource(Protocol):
    """Read-only view of one repository's pull requests, threads and builds.

    Implementations raise ``SourceError`` subclasses; ``MalformedResponseError``
    when a body is not JSON and ``UnexpectedPayloadError`` when the JSON lacks
    the expected ``value`` list.
    """

    def resolve_repository_id(self) -> str:
        ...

    def list_pull_requests(self, skip: int, top: int) -> Tuple[PullRequestRecord, ...]:
        ...

    def list_threads(self, pull_request_id: int) -> Tuple[ThreadRecord, ...]:
        ...

    def list_recent_builds(self, repository_id: str, top: int) -> BuildListing:
        ...

    def pull_request_url(self, pull_request_id: int) -> str:
        ...
