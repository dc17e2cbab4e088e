from datetime import date, datetime, timezone
from typing import Optional, Sequence

from adopr.core.ports.logger import Logger
from adopr.core.schema.pr import BuildRecord, PullRequestRecord

UNKNOWN_BUILD = "Unknown"


class BuildMatcher:
    """Best-effort association of a completed pull request with one CI build.

    Azure DevOps does not link builds to pull requests through the endpoints
    used here, so the match is heuristic. Rules are tried in order and the
    first one that yields a build wins:

    1. a build whose source version is the pull request's merge commit;
    2. a build that finished on the same calendar day the pull request was
       closed, preferring one requested by the pull request's creator.
    """

    def __init__(self, logger: Logger) -> None:
        self._logger = logger

    def match(
        self,
        pr: PullRequestRecord,
        builds: Sequence[BuildRecord],
    ) -> Optional[BuildRecord]:
        build = self._match_by_commit(pr, builds)
        if build is not None:
            self._logger.debug(
                "Matched build by commit",
                pr_id=pr.pull_request_id,
                build_id=build.build_id,
            )
            return build

        build = self._match_by_day(pr, builds)
        if build is not None:
            self._logger.debug(
                "Matched build by completion day",
                pr_id=pr.pull_request_id,
                build_id=build.build_id,
            )
        return build

    def _match_by_commit(
        self,
        pr: PullRequestRecord,
        builds: Sequence[BuildRecord],
    ) -> Optional[BuildRecord]:
        if not pr.merge_commit_id:
            return None
        for build in builds:
            if build.source_version == pr.merge_commit_id:
                return build
        return None

    def _match_by_day(
        self,
        pr: PullRequestRecord,
        builds: Sequence[BuildRecord],
    ) -> Optional[BuildRecord]:
        if pr.closed_at is None:
            return None
        closed_day = _utc_day(pr.closed_at)
        fallback: Optional[BuildRecord] = None
        for build in builds:
            if build.finished_at is None or _utc_day(build.finished_at) != closed_day:
                continue
            if pr.creator_id is not None and build.requester_id == pr.creator_id:
                return build
            if fallback is None:
                fallback = build
        return fallback


def _utc_day(value: datetime) -> date:
    return value.astimezone(timezone.utc).date()


def describe_build(build: Optional[BuildRecord]) -> str:
    if build is None:
        return UNKNOWN_BUILD
    number = build.build_number or UNKNOWN_BUILD
    result = build.result or UNKNOWN_BUILD
    return f"Build #{number} ({result})"
