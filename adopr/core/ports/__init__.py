from adopr.core.ports.artifact_store import ArtifactStore
from adopr.core.ports.clock import Clock
from adopr.core.ports.logger import Logger
from adopr.core.ports.pr_source import PRSource
from adopr.core.ports.report_writer import ReportWriter

__all__ = [
    "Logger",
    "Clock",
    "PRSource",
    "ReportWriter",
    "ArtifactStore",
]
