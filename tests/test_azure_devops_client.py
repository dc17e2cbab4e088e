import pytest
import requests
from requests.auth import HTTPBasicAuth

from adopr.core.exceptions import (
    MalformedResponseError,
    SourceAuthenticationError,
    SourceError,
    SourceNotFoundError,
    SourceRateLimitError,
)
from adopr.infra.azure_devops.client import AzureDevOpsClient
from tests.fakes import FakeResponse, FakeSession


def _make_client(session: FakeSession, **kwargs) -> AzureDevOpsClient:
    return AzureDevOpsClient("pat-123", "my org", "Project", session=session, **kwargs)


class TestAzureDevOpsClientRequests:
    def test_builds_project_scoped_url_with_api_version(self) -> None:
        session = FakeSession({"/_apis/git/repositories/repo": FakeResponse.of_json({"id": "x"})})
        client = _make_client(session, timeout=5.0)

        client.get_json("git/repositories/repo", {"$top": 10})

        url, params, timeout = session.calls[0]
        assert url == "https://dev.azure.com/my%20org/Project/_apis/git/repositories/repo"
        assert params == {"api-version": "6.0", "$top": 10}
        assert timeout == 5.0

    def test_uses_basic_auth_with_empty_user(self) -> None:
        session = FakeSession()

        _make_client(session)

        assert isinstance(session.auth, HTTPBasicAuth)
        assert session.auth.username == ""
        assert session.auth.password == "pat-123"

    def test_returns_payload_and_body(self) -> None:
        session = FakeSession({"/builds": FakeResponse(text='{"value": []}')})

        response = _make_client(session).get_json("build/builds")

        assert response.payload == {"value": []}
        assert response.body == '{"value": []}'

    def test_custom_base_url(self) -> None:
        session = FakeSession({"/builds": FakeResponse.of_json({})})
        client = _make_client(session, base_url="https://tfs.example.com/tfs/", api_version="7.1")

        client.get_json("build/builds")

        url, params, _ = session.calls[0]
        assert url == "https://tfs.example.com/tfs/my%20org/Project/_apis/build/builds"
        assert params["api-version"] == "7.1"

    def test_context_manager_closes_session(self) -> None:
        session = FakeSession()

        with _make_client(session):
            pass

        assert session.closed is True


class TestAzureDevOpsClientErrors:
    def test_non_json_body(self) -> None:
        session = FakeSession({"/builds": FakeResponse(status_code=203, text="<html>Sign in</html>")})

        with pytest.raises(MalformedResponseError) as info:
            _make_client(session).get_json("build/builds")

        assert info.value.body == "<html>Sign in</html>"
        assert info.value.url.endswith("/_apis/build/builds")

    def test_unauthorized(self) -> None:
        session = FakeSession({"/builds": FakeResponse(status_code=401)})

        with pytest.raises(SourceAuthenticationError):
            _make_client(session).get_json("build/builds")

    def test_not_found(self) -> None:
        session = FakeSession({"/builds": FakeResponse(status_code=404)})

        with pytest.raises(SourceNotFoundError):
            _make_client(session).get_json("build/builds")

    def test_too_many_requests(self) -> None:
        session = FakeSession(
            {"/builds": FakeResponse(status_code=429, headers={"Retry-After": "30"})}
        )

        with pytest.raises(SourceRateLimitError):
            _make_client(session).get_json("build/builds")

    def test_forbidden_is_generic_source_error(self) -> None:
        session = FakeSession(
            {"/builds": FakeResponse(status_code=403, headers={"Retry-After": "30"})}
        )

        with pytest.raises(SourceError) as info:
            _make_client(session).get_json("build/builds")

        assert not isinstance(info.value, SourceRateLimitError)

    def test_server_error(self) -> None:
        session = FakeSession({"/builds": FakeResponse(status_code=500, text="oops")})

        with pytest.raises(SourceError):
            _make_client(session).get_json("build/builds")

    def test_transport_failure_is_translated(self) -> None:
        session = FakeSession({"/builds": requests.ConnectionError("reset")})

        with pytest.raises(SourceError) as info:
            _make_client(session).get_json("build/builds")

        assert isinstance(info.value.__cause__, requests.ConnectionError)
