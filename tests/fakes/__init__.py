from tests.fakes.artifact_store import FakeArtifactStore
from tests.fakes.azure_devops import FakeResponse, FakeSession
from tests.fakes.clock import FakeClock
from tests.fakes.logger import FakeLogger
from tests.fakes.pr_source import FakePRSource
from tests.fakes.report_writer import FakeReportWriter

__all__ = [
    "FakeArtifactStore",
    "FakeClock",
    "FakeLogger",
    "FakePRSource",
    "FakeReportWriter",
    "FakeResponse",
    "FakeSession",
]
