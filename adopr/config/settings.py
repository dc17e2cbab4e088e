import os
from dataclasses import dataclass
from typing import Optional

from adopr.core.exceptions import ConfigurationError


@dataclass(frozen=True, slots=True)
class AzureDevOpsSettings:
    token: Optional[str]
    organization: Optional[str]
    project: Optional[str]
    repository_name: Optional[str]
    repository_id: Optional[str]
    base_url: str
    api_version: str
    request_timeout: Optional[float]


@dataclass(frozen=True, slots=True)
class ExtractionSettings:
    page_size: int
    max_pages: int
    completed_only: bool
    build_top: int
    cache_builds: bool
    debug_dump_limit: int


@dataclass(frozen=True, slots=True)
class OutputSettings:
    output_dir: str


@dataclass(frozen=True, slots=True)
class JobSettings:
    page_delay: float
    pr_delay: float


@dataclass(frozen=True, slots=True)
class LoggingSettings:
    backend: str
    name: str
    logfire_token: Optional[str]


@dataclass(frozen=True, slots=True)
class Settings:
    azure_devops: AzureDevOpsSettings
    extraction: ExtractionSettings
    output: OutputSettings
    jobs: JobSettings
    logging: LoggingSettings


def load_settings() -> Settings:
    from dotenv import load_dotenv

    load_dotenv()

    return Settings(
        azure_devops=AzureDevOpsSettings(
            token=_env_or_default("AZURE_DEVOPS_PAT"),
            organization=_env_or_default("ADOPR_ORG"),
            project=_env_or_default("ADOPR_PROJECT"),
            repository_name=_env_or_default("ADOPR_REPO_NAME"),
            repository_id=_env_or_default("ADOPR_REPO_ID"),
            base_url=_env_or_default("ADOPR_BASE_URL", "https://dev.azure.com").rstrip("/"),
            api_version=_env_or_default("ADOPR_API_VERSION", "6.0"),
            request_timeout=_env_optional_float("ADOPR_REQUEST_TIMEOUT"),
        ),
        extraction=ExtractionSettings(
            page_size=_env_int("ADOPR_PAGE_SIZE", 100),
            max_pages=_env_int("ADOPR_MAX_PAGES", 200),
            completed_only=_env_bool("ADOPR_COMPLETED_ONLY", True),
            build_top=_env_int("ADOPR_BUILD_TOP", 50),
            cache_builds=_env_bool("ADOPR_CACHE_BUILDS", False),
            debug_dump_limit=_env_int("ADOPR_DEBUG_DUMP_LIMIT", 3),
        ),
        output=OutputSettings(
            output_dir=_env_or_default("ADOPR_OUTPUT_DIR", "pr_data"),
        ),
        jobs=JobSettings(
            page_delay=_env_float("ADOPR_PAGE_DELAY", 1.0),
            pr_delay=_env_float("ADOPR_PR_DELAY", 0.5),
        ),
        logging=LoggingSettings(
            backend=_env_or_default("ADOPR_LOGGER_BACKEND", "console").lower(),
            name=_env_or_default("ADOPR_LOGGER_NAME", "adopr"),
            logfire_token=_env_or_default("ADOPR_LOGFIRE_TOKEN"),
        ),
    )


def validate_settings(settings: Settings) -> None:
    """Reject settings that would make any network call pointless."""
    azure = settings.azure_devops
    if not azure.token:
        raise ConfigurationError(
            "AZURE_DEVOPS_PAT environment variable not set; "
            "export AZURE_DEVOPS_PAT=your_personal_access_token"
        )
    missing = [
        name
        for name, value in (
            ("ADOPR_ORG", azure.organization),
            ("ADOPR_PROJECT", azure.project),
            ("ADOPR_REPO_NAME", azure.repository_name),
        )
        if not value
    ]
    if missing:
        raise ConfigurationError(f"Missing required settings: {', '.join(missing)}")

    extraction = settings.extraction
    if extraction.page_size <= 0:
        raise ConfigurationError("ADOPR_PAGE_SIZE must be positive")
    if extraction.max_pages <= 0:
        raise ConfigurationError("ADOPR_MAX_PAGES must be positive")
    if extraction.build_top <= 0:
        raise ConfigurationError("ADOPR_BUILD_TOP must be positive")


def _env_or_default(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name)
    if not value:
        return default
    return value


def _env_int(name: str, default: int) -> int:
    value = _env_or_default(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError as error:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from error


def _env_float(name: str, default: float) -> float:
    value = _env_optional_float(name)
    return default if value is None else value


def _env_optional_float(name: str) -> Optional[float]:
    value = _env_or_default(name)
    if value is None:
        return None
    try:
        return float(value)
    except ValueError as error:
        raise ConfigurationError(f"{name} must be a number, got {value!r}") from error


def _env_bool(name: str, default: bool) -> bool:
    value = _env_or_default(name)
    if value is None:
        return default
    return value.strip().upper() in ("TRUE", "1", "YES")
