from typing import List, Tuple

from adopr.core.exceptions import (
    AdoprError,
    MalformedResponseError,
    UnexpectedPayloadError,
)
from adopr.core.jobs.base import BaseJob
from adopr.core.ports.clock import Clock
from adopr.core.ports.logger import Logger
from adopr.core.ports.pr_source import PRSource
from adopr.core.schema.pr import PullRequestRecord

BODY_PREVIEW_CHARS = 200


class PaginationJob(BaseJob):
    """Collects every pull request of the repository page by page.

    Stops on an empty page, on a page shorter than ``page_size`` or after
    ``max_pages`` requests. A page that cannot be read ends pagination but
    keeps the records gathered so far.
    """

    def __init__(
        self,
        logger: Logger,
        clock: Clock,
        pr_source: PRSource,
        *,
        page_size: int,
        max_pages: int,
        page_delay: float,
    ) -> None:
        super().__init__(logger, interval=page_delay, clock=clock)
        self._pr_source = pr_source
        self._page_size = page_size
        self._max_pages = max_pages
        self._records: List[PullRequestRecord] = []
        self._page_count = 0
        self._skip = 0
        self._finished = False
        self.truncated = False
        self.aborted = False

    def fetch_all(self) -> Tuple[PullRequestRecord, ...]:
        self.run()
        return tuple(self._records)

    def setup(self) -> None:
        self._records = []
        self._page_count = 0
        self._skip = 0
        self._finished = False
        self.truncated = False
        self.aborted = False

    def should_continue(self) -> bool:
        return not self._finished and self._page_count < self._max_pages

    def execute_once(self) -> None:
        self._page_count += 1
        self._logger.info(
            "Fetching pull request page",
            page=self._page_count,
            skip=self._skip,
        )
        try:
            page = self._pr_source.list_pull_requests(self._skip, self._page_size)
        except MalformedResponseError as error:
            self._logger.error(
                "Invalid JSON response for pull request page",
                page=self._page_count,
                body=error.body[:BODY_PREVIEW_CHARS],
            )
            self._abort()
            return
        except UnexpectedPayloadError:
            self._logger.warning(
                "Could not determine pull request count; assuming 0",
                page=self._page_count,
            )
            page = ()

        self._logger.info(
            "Found pull requests in page",
            page=self._page_count,
            count=len(page),
        )
        if not page:
            self._logger.info("No more pull requests found")
            self._finished = True
            return

        self._records.extend(page)
        self._skip += self._page_size
        if len(page) < self._page_size:
            self._logger.info("Received fewer pull requests than page size")
            self._finished = True

    def handle_error(self, error: AdoprError) -> None:
        self._logger.error(
            "Failed to fetch pull request page",
            page=self._page_count,
            error=str(error),
        )
        self._abort()

    def teardown(self) -> None:
        if not self._finished and self._page_count >= self._max_pages:
            self.truncated = True
            self._logger.warning(
                "Reached maximum page limit; some pull requests may be missing",
                max_pages=self._max_pages,
            )
        self._logger.info(
            "Pagination finished",
            pages=self._page_count,
            total=len(self._records),
        )

    def _abort(self) -> None:
        self.aborted = True
        self._finished = True
