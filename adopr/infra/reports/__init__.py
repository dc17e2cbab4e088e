from adopr.infra.reports.report_writer import (
    COMMENT_REPORT_NAME,
    PR_REPORT_NAME,
    CsvReportWriter,
)

__all__ = ["CsvReportWriter", "PR_REPORT_NAME", "COMMENT_REPORT_NAME"]
