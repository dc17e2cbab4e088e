from typing import Optional

from adopr.core.exceptions import RepositoryResolutionError, SourceError
from adopr.core.jobs.extraction import ExtractionJob
from adopr.core.jobs.pagination import PaginationJob
from adopr.core.ports.artifact_store import ArtifactStore
from adopr.core.ports.clock import Clock
from adopr.core.ports.logger import Logger
from adopr.core.ports.pr_source import PRSource
from adopr.core.ports.report_writer import ReportWriter
from adopr.core.schema.summary import RunSummary
from adopr.core.sorting import sort_by_creation


class ExtractionPipeline:
    """Runs one extraction from repository lookup to the final summary.

    Only an unresolvable repository aborts the run; it is raised as
    ``RepositoryResolutionError`` before any report file is touched.
    """

    def __init__(
        self,
        logger: Logger,
        clock: Clock,
        pr_source: PRSource,
        report_writer: ReportWriter,
        artifact_store: ArtifactStore,
        *,
        repository_name: str,
        repository_id: Optional[str] = None,
        page_size: int = 100,
        max_pages: int = 200,
        completed_only: bool = True,
        build_top: int = 50,
        cache_builds: bool = False,
        debug_dump_limit: int = 3,
        page_delay: float = 1.0,
        pr_delay: float = 0.5,
    ) -> None:
        self._logger = logger
        self._clock = clock
        self._pr_source = pr_source
        self._report_writer = report_writer
        self._artifact_store = artifact_store
        self._repository_name = repository_name
        self._repository_id = repository_id
        self._page_size = page_size
        self._max_pages = max_pages
        self._completed_only = completed_only
        self._build_top = build_top
        self._cache_builds = cache_builds
        self._debug_dump_limit = debug_dump_limit
        self._page_delay = page_delay
        self._pr_delay = pr_delay

    def run(self) -> RunSummary:
        started_at = self._clock.now()
        self._logger.info(
            "Starting pull request extraction",
            repository=self._repository_name,
            started_at=started_at.isoformat(),
        )
        repository_id = self._resolve_repository_id()

        pagination = PaginationJob(
            self._logger,
            self._clock,
            self._pr_source,
            page_size=self._page_size,
            max_pages=self._max_pages,
            page_delay=self._page_delay,
        )
        records = sort_by_creation(pagination.fetch_all())
        self._logger.info(
            "Sorted pull requests by creation date",
            total=len(records),
        )

        extraction = ExtractionJob(
            self._logger,
            self._clock,
            self._pr_source,
            self._report_writer,
            self._artifact_store,
            records,
            repository_id=repository_id,
            completed_only=self._completed_only,
            build_top=self._build_top,
            cache_builds=self._cache_builds,
            debug_dump_limit=self._debug_dump_limit,
            pr_delay=self._pr_delay,
        )
        self._report_writer.open()
        try:
            extraction.run()
        finally:
            self._report_writer.close()

        summary = RunSummary(
            total_fetched=len(records),
            processed=extraction.processed,
            skipped=extraction.skipped,
            pr_rows=extraction.pr_rows,
            comment_rows=extraction.comment_rows,
            comments_extracted=extraction.comments_extracted,
            truncated=pagination.truncated,
            pagination_aborted=pagination.aborted,
        )
        self._logger.info(
            "Extraction complete",
            processed=summary.processed,
            skipped=summary.skipped,
            pr_rows=summary.pr_rows,
            comments_extracted=summary.comments_extracted,
            comment_rows=summary.comment_rows,
            truncated=summary.truncated,
            completed_at=self._clock.now().isoformat(),
        )
        return summary

    def _resolve_repository_id(self) -> str:
        if self._repository_id:
            return self._repository_id
        self._logger.info(
            "No repository ID provided; resolving by name",
            repository=self._repository_name,
        )
        try:
            repository_id = self._pr_source.resolve_repository_id()
        except RepositoryResolutionError:
            raise
        except SourceError as error:
            raise RepositoryResolutionError(
                f"Could not resolve repository ID: {error}",
                self._repository_name,
            ) from error
        self._logger.info("Found repository ID", repository_id=repository_id)
        return repository_id
