import pytest

from tests.settings import get_test_settings

ENV_VARS = (
    "AZURE_DEVOPS_PAT",
    "ADOPR_ORG",
    "ADOPR_PROJECT",
    "ADOPR_REPO_NAME",
    "ADOPR_REPO_ID",
    "ADOPR_BASE_URL",
    "ADOPR_API_VERSION",
    "ADOPR_REQUEST_TIMEOUT",
    "ADOPR_PAGE_SIZE",
    "ADOPR_MAX_PAGES",
    "ADOPR_COMPLETED_ONLY",
    "ADOPR_BUILD_TOP",
    "ADOPR_CACHE_BUILDS",
    "ADOPR_DEBUG_DUMP_LIMIT",
    "ADOPR_OUTPUT_DIR",
    "ADOPR_PAGE_DELAY",
    "ADOPR_PR_DELAY",
    "ADOPR_LOGGER_BACKEND",
    "ADOPR_LOGGER_NAME",
    "ADOPR_LOGFIRE_TOKEN",
)


@pytest.fixture
def test_settings(tmp_path):
    return get_test_settings(str(tmp_path / "pr_data"))


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("dotenv.load_dotenv", lambda *args, **kwargs: False)
    return monkeypatch
