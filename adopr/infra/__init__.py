from adopr.infra.artifacts import FileArtifactStore
from adopr.infra.azure_devops import AzureDevOpsClient, AzureDevOpsPRSource
from adopr.infra.clock import SystemClock
from adopr.infra.logging import (
    ConsoleLogger,
    LogfireLogger,
    MultiLogger,
    configure_logfire,
)
from adopr.infra.reports import CsvReportWriter

__all__ = [
    'AzureDevOpsClient',
    'AzureDevOpsPRSource',
    'CsvReportWriter',
    'FileArtifactStore',
    'ConsoleLogger',
    'LogfireLogger',
    'MultiLogger',
    'configure_logfire',
    'SystemClock',
]
