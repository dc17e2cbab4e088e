import csv
from datetime import datetime, timezone

import pytest

from adopr.core.exceptions import (
    RepositoryResolutionError,
    SourceNotFoundError,
)
from adopr.core.export.csv_rows import COMMENT_HEADER, PR_HEADER
from adopr.core.pipeline import ExtractionPipeline
from adopr.core.schema.pr import (
    CommentRecord,
    PullRequestRecord,
    ThreadRecord,
)
from adopr.infra.reports import CsvReportWriter
from tests.fakes import (
    FakeArtifactStore,
    FakeClock,
    FakeLogger,
    FakePRSource,
    FakeReportWriter,
)

NOW = datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


def _make_pr(pr_id: int, created_day: int, status: str = "completed") -> PullRequestRecord:
    return PullRequestRecord(
        pull_request_id=pr_id,
        title=f"Change, part {pr_id}",
        creator_name="Ada",
        creator_id="U1",
        created_at=datetime(2024, 1, created_day, 9, 0, 0, tzinfo=timezone.utc),
        closed_at=None,
        status=status,
        merge_status="succeeded",
        merge_commit_id=None,
    )


def _make_pipeline(source, writer, logger=None, **kwargs) -> ExtractionPipeline:
    options = dict(repository_name="repo", page_size=2, max_pages=10)
    options.update(kwargs)
    return ExtractionPipeline(
        logger or FakeLogger(),
        FakeClock(NOW),
        source,
        writer,
        FakeArtifactStore(),
        **options,
    )


def _read_rows(path) -> list[list[str]]:
    with open(path, newline="", encoding="utf-8") as handle:
        return list(csv.reader(handle))


class TestPipelineRun:
    def test_writes_reports_in_creation_order(self, tmp_path) -> None:
        thread = ThreadRecord(
            thread_id=11,
            file_path="/src/a.py",
            line_number=4,
            comments=(
                CommentRecord(
                    comment_id=1,
                    author_name="Grace",
                    published_at=datetime(2024, 1, 6, tzinfo=timezone.utc),
                    content='Nit: rename, please\nand add "docs"',
                ),
            ),
        )
        source = FakePRSource(
            [
                [_make_pr(3, created_day=3), _make_pr(1, created_day=1)],
                [_make_pr(2, created_day=2, status="active")],
            ],
            threads={3: [thread]},
        )
        writer = CsvReportWriter(tmp_path)

        summary = _make_pipeline(source, writer).run()

        pr_lines = (tmp_path / "all_prs.csv").read_text(encoding="utf-8").splitlines()
        assert pr_lines[0] == PR_HEADER
        assert [line.split(",")[0] for line in pr_lines[1:]] == ["1", "3"]

        comment_rows = _read_rows(tmp_path / "pr_comments.csv")
        assert ",".join(comment_rows[0]) == COMMENT_HEADER
        assert comment_rows[1][0] == "1"
        assert comment_rows[1][10] == "No comments"
        assert comment_rows[2][0] == "3"
        assert comment_rows[2][1] == "Change; part 3"
        assert comment_rows[2][12] == 'Nit: rename; please and add "docs"'
        assert comment_rows[2][13:] == ["/src/a.py", "4"]

        assert summary.total_fetched == 3
        assert summary.processed == 2
        assert summary.skipped == 1
        assert summary.pr_rows == 2
        assert summary.comment_rows == 2
        assert summary.comments_extracted == 1
        assert summary.truncated is False

    def test_resolves_repository_when_not_configured(self) -> None:
        source = FakePRSource([[_make_pr(1, created_day=1)]], repository_id="guid-1")

        _make_pipeline(source, FakeReportWriter()).run()

        assert source.repository_lookups == 1
        assert source.build_requests[0][0] == "guid-1"

    def test_uses_static_repository_id(self) -> None:
        source = FakePRSource([[_make_pr(1, created_day=1)]])

        _make_pipeline(source, FakeReportWriter(), repository_id="static-guid").run()

        assert source.repository_lookups == 0
        assert source.build_requests[0][0] == "static-guid"

    def test_unresolvable_repository_is_fatal(self) -> None:
        source = FakePRSource(repository_id=SourceNotFoundError("missing", "repo"))
        writer = FakeReportWriter()

        with pytest.raises(RepositoryResolutionError):
            _make_pipeline(source, writer).run()

        assert source.page_requests == []
        assert writer.opened == 0

    def test_headers_written_even_without_pull_requests(self, tmp_path) -> None:
        writer = CsvReportWriter(tmp_path)

        summary = _make_pipeline(FakePRSource(), writer).run()

        assert (tmp_path / "all_prs.csv").read_text(encoding="utf-8") == PR_HEADER + "\n"
        assert (tmp_path / "pr_comments.csv").read_text(encoding="utf-8") == COMMENT_HEADER + "\n"
        assert summary.processed == 0

    def test_logs_summary(self) -> None:
        logger = FakeLogger()
        source = FakePRSource([[_make_pr(1, created_day=1)]])

        _make_pipeline(source, FakeReportWriter(), logger=logger).run()

        summary = [r for r in logger.records if r[1] == "Extraction complete"][0]
        assert summary[2]["processed"] == 1
        assert summary[2]["pr_rows"] == 1
        assert summary[2]["comment_rows"] == 1

    def test_writer_closed_after_run(self) -> None:
        writer = FakeReportWriter()

        _make_pipeline(FakePRSource([[_make_pr(1, created_day=1)]]), writer).run()

        assert writer.opened == 1
        assert writer.closed == 1
