import sys
from pathlib import Path

from adopr.config import Settings, load_settings, validate_settings
from adopr.core.exceptions import (
    AdoprError,
    ConfigurationError,
    RepositoryResolutionError,
)
from adopr.core.pipeline import ExtractionPipeline
from adopr.core.ports.logger import Logger
from adopr.core.schema.summary import RunSummary
from adopr.infra import (
    AzureDevOpsClient,
    AzureDevOpsPRSource,
    ConsoleLogger,
    CsvReportWriter,
    FileArtifactStore,
    LogfireLogger,
    MultiLogger,
    SystemClock,
    configure_logfire,
)

LOG_FILE_NAME = 'extraction.log'
DEBUG_DIR_NAME = 'debug'


def main() -> None:
    try:
        settings = load_settings()
    except ConfigurationError as error:
        ConsoleLogger('adopr').error('Invalid configuration', error=error.message)
        sys.exit(1)

    log_file = Path(settings.output.output_dir) / LOG_FILE_NAME
    try:
        logger = _build_logger(settings, log_file)
    except OSError as error:
        ConsoleLogger(settings.logging.name).error(
            'Cannot open log file',
            path=str(log_file),
            error=str(error),
        )
        sys.exit(1)

    try:
        validate_settings(settings)
    except ConfigurationError as error:
        logger.error('Precondition failed', error=error.message)
        sys.exit(1)

    try:
        summary = run(settings, logger)
    except RepositoryResolutionError as error:
        logger.error(
            'Could not resolve repository',
            repository=error.repository,
            error=error.message,
        )
        sys.exit(1)
    except AdoprError as error:
        logger.error('Extraction failed', error=error.message)
        sys.exit(1)
    except OSError as error:
        logger.error('Extraction failed', error=str(error))
        sys.exit(1)
    except KeyboardInterrupt:
        logger.warning('Extraction interrupted; reports contain a partial prefix')
        sys.exit(130)

    if summary.pagination_aborted:
        logger.warning('Pagination stopped early; results are partial')


def run(settings: Settings, logger: Logger) -> RunSummary:
    azure = settings.azure_devops
    extraction = settings.extraction
    output_dir = Path(settings.output.output_dir)
    clock = SystemClock()
    report_writer = CsvReportWriter(output_dir)
    artifact_store = FileArtifactStore(output_dir / DEBUG_DIR_NAME)

    with AzureDevOpsClient(
        azure.token,
        azure.organization,
        azure.project,
        base_url=azure.base_url,
        api_version=azure.api_version,
        timeout=azure.request_timeout,
    ) as client:
        pipeline = ExtractionPipeline(
            logger,
            clock,
            AzureDevOpsPRSource(client, azure.repository_name),
            report_writer,
            artifact_store,
            repository_name=azure.repository_name,
            repository_id=azure.repository_id,
            page_size=extraction.page_size,
            max_pages=extraction.max_pages,
            completed_only=extraction.completed_only,
            build_top=extraction.build_top,
            cache_builds=extraction.cache_builds,
            debug_dump_limit=extraction.debug_dump_limit,
            page_delay=settings.jobs.page_delay,
            pr_delay=settings.jobs.pr_delay,
        )
        summary = pipeline.run()

    logger.info(
        'Results saved',
        all_prs=str(report_writer.pr_report_path),
        comments=str(report_writer.comment_report_path),
    )
    return summary


def _build_logger(settings: Settings, log_file: Path) -> Logger:
    console = ConsoleLogger(settings.logging.name, log_file=log_file)
    if settings.logging.backend == 'console':
        return console
    if settings.logging.backend == 'logfire':
        if not settings.logging.logfire_token:
            raise ValueError(
                'Logfire backend selected but ADOPR_LOGFIRE_TOKEN is not set'
            )
        configure_logfire(settings.logging.logfire_token, settings.logging.name)
        return MultiLogger([console, LogfireLogger(settings.logging.name)])
    raise ValueError(f'Unknown logging backend {settings.logging.backend}')
