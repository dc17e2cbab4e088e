from typing import Optional, Sequence, Tuple

from adopr.core.exceptions import (
    ArtifactWriteError,
    MalformedResponseError,
    SourceError,
    UnexpectedPayloadError,
)
from adopr.core.export.flattener import FlattenedComments, RecordFlattener
from adopr.core.jobs.base import BaseJob
from adopr.core.matching.build_matcher import BuildMatcher, describe_build
from adopr.core.ports.artifact_store import ArtifactStore
from adopr.core.ports.clock import Clock
from adopr.core.ports.logger import Logger
from adopr.core.ports.pr_source import PRSource
from adopr.core.ports.report_writer import ReportWriter
from adopr.core.schema.export import PRRow
from adopr.core.schema.pr import BuildRecord, PullRequestRecord


class ExtractionJob(BaseJob):
    """Writes report rows for each pull request in the given order.

    Failures to read builds or threads degrade the affected pull request to
    placeholder values; they never stop the job.
    """

    def __init__(
        self,
        logger: Logger,
        clock: Clock,
        pr_source: PRSource,
        report_writer: ReportWriter,
        artifact_store: ArtifactStore,
        records: Sequence[PullRequestRecord],
        *,
        repository_id: str,
        completed_only: bool,
        build_top: int,
        cache_builds: bool,
        debug_dump_limit: int,
        pr_delay: float,
    ) -> None:
        super().__init__(logger, interval=pr_delay, clock=clock)
        self._pr_source = pr_source
        self._report_writer = report_writer
        self._artifact_store = artifact_store
        self._records = tuple(records)
        self._repository_id = repository_id
        self._completed_only = completed_only
        self._build_top = build_top
        self._cache_builds = cache_builds
        self._debug_dump_limit = debug_dump_limit
        self._matcher = BuildMatcher(logger)
        self._flattener = RecordFlattener(logger)
        self._cached_builds: Optional[Tuple[BuildRecord, ...]] = None
        self._index = 0
        self.processed = 0
        self.skipped = 0
        self.pr_rows = 0
        self.comment_rows = 0
        self.comments_extracted = 0

    def setup(self) -> None:
        self._index = 0

    def should_continue(self) -> bool:
        return self._index < len(self._records)

    def execute_once(self) -> None:
        pr = self._records[self._index]
        self._index += 1

        if self._completed_only and not pr.is_completed:
            self.skipped += 1
            self._logger.info(
                "Skipping pull request that is not completed",
                pr_id=pr.pull_request_id,
                status=pr.status,
            )
            return

        self.processed += 1
        self._logger.info(
            "Processing pull request",
            pr_id=pr.pull_request_id,
            position=self.processed,
            total=len(self._records),
            title=pr.title,
        )

        build = self._matcher.match(pr, self._candidate_builds(pr))
        pr_row = self._flattener.pr_row(
            pr,
            url=self._pr_source.pull_request_url(pr.pull_request_id),
            build_info=describe_build(build),
        )
        self._report_writer.write_pr_row(pr_row)
        self.pr_rows += 1

        flattened = self._flatten_threads(pr_row)
        for row in flattened.rows:
            self._report_writer.write_comment_row(row)
        self.comment_rows += len(flattened.rows)
        self.comments_extracted += flattened.comments_extracted

    def teardown(self) -> None:
        return

    def _candidate_builds(self, pr: PullRequestRecord) -> Tuple[BuildRecord, ...]:
        if self._cached_builds is not None:
            return self._cached_builds
        try:
            listing = self._pr_source.list_recent_builds(
                self._repository_id,
                self._build_top,
            )
        except (MalformedResponseError, UnexpectedPayloadError) as error:
            self._dump_builds(pr, error.body)
            self._logger.warning(
                "Invalid or empty build response",
                pr_id=pr.pull_request_id,
                error=str(error),
            )
            return ()
        except SourceError as error:
            self._logger.warning(
                "Failed to fetch builds",
                pr_id=pr.pull_request_id,
                error=str(error),
            )
            return ()

        self._dump_builds(pr, listing.raw_body)
        if self._cache_builds:
            self._cached_builds = listing.builds
        return listing.builds

    def _dump_builds(self, pr: PullRequestRecord, body: str) -> None:
        if self.processed > self._debug_dump_limit:
            return
        try:
            self._artifact_store.write(f"repo_builds_pr_{pr.pull_request_id}.json", body)
        except ArtifactWriteError as error:
            self._logger.warning(
                "Failed to save build response",
                pr_id=pr.pull_request_id,
                path=error.path,
                error=str(error),
            )

    def _flatten_threads(self, pr_row: PRRow) -> FlattenedComments:
        try:
            threads = self._pr_source.list_threads(pr_row.pr_id)
        except UnexpectedPayloadError:
            self._logger.info("No threads found", pr_id=pr_row.pr_id)
            return self._flattener.no_thread_rows(pr_row)
        except SourceError as error:
            self._logger.warning(
                "Failed to fetch comment threads",
                pr_id=pr_row.pr_id,
                error=str(error),
            )
            return self._flattener.error_rows(pr_row)

        self._logger.info(
            "Found comment threads",
            pr_id=pr_row.pr_id,
            count=len(threads),
        )
        flattened = self._flattener.comment_rows(pr_row, threads)
        if threads:
            self._logger.info(
                "Extracted comments",
                pr_id=pr_row.pr_id,
                count=flattened.comments_extracted,
            )
        return flattened
