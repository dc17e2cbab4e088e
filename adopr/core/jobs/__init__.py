from adopr.core.jobs.base import BaseJob
from adopr.core.jobs.extraction import ExtractionJob
from adopr.core.jobs.pagination import PaginationJob

__all__ = [
    "BaseJob",
    "PaginationJob",
    "ExtractionJob",
]
