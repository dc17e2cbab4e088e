from adopr.core.exceptions.errors import (
    AdoprError,
    ArtifactWriteError,
    ConfigurationError,
    MalformedResponseError,
    ReportWriteError,
    RepositoryResolutionError,
    SourceAuthenticationError,
    SourceError,
    SourceNotFoundError,
    SourceRateLimitError,
    UnexpectedPayloadError,
)

__all__ = [
    "AdoprError",
    "ConfigurationError",
    "SourceError",
    "SourceAuthenticationError",
    "SourceRateLimitError",
    "SourceNotFoundError",
    "MalformedResponseError",
    "UnexpectedPayloadError",
    "RepositoryResolutionError",
    "ReportWriteError",
    "ArtifactWriteError",
]
