from dataclasses import dataclass
from typing import Any, Mapping, Optional
from urllib.parse import quote

import requests
from requests.auth import HTTPBasicAuth

from adopr.core.exceptions import (
    MalformedResponseError,
    SourceAuthenticationError,
    SourceError,
    SourceNotFoundError,
    SourceRateLimitError,
)


@dataclass(frozen=True, slots=True)
class JsonResponse:
    payload: Any
    body: str


class AzureDevOpsClient:
    """Authenticated GET access to one project's REST API.

    The personal access token travels as the password of HTTP basic auth with
    an empty user name. Error statuses are raised as ``SourceError``
    subclasses and a body that is not JSON as ``MalformedResponseError``.
    """

    def __init__(
        self,
        token: str,
        organization: str,
        project: str,
        *,
        base_url: str = "https://dev.azure.com",
        api_version: str = "6.0",
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._organization = organization
        self._project = project
        self._base_url = base_url.rstrip("/")
        self._api_version = api_version
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.auth = HTTPBasicAuth("", token)
        self._session.headers.update({"Accept": "application/json"})

    @property
    def project_url(self) -> str:
        return (
            f"{self._base_url}/{quote(self._organization, safe='')}"
            f"/{quote(self._project, safe='')}"
        )

    def api_url(self, path: str) -> str:
        return f"{self.project_url}/_apis/{path.lstrip('/')}"

    def get_json(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> JsonResponse:
        url = self.api_url(path)
        query = {"api-version": self._api_version, **(params or {})}
        try:
            response = self._session.get(url, params=query, timeout=self._timeout)
        except requests.RequestException as error:
            raise SourceError(f"Request to {url} failed: {error}") from error

        if response.status_code >= 400:
            self._translate_status(response, url)

        body = response.text
        try:
            payload = response.json()
        except ValueError as error:
            raise MalformedResponseError(
                f"Response from {url} is not valid JSON",
                url,
                body,
            ) from error
        return JsonResponse(payload=payload, body=body)

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "AzureDevOpsClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        self.close()

    def _translate_status(self, response: requests.Response, url: str) -> None:
        status = response.status_code
        message = f"Request to {url} failed with HTTP {status}"
        if status == 401:
            raise SourceAuthenticationError(message)
        if status == 404:
            raise SourceNotFoundError(message, url)
        if status == 429:
            raise SourceRateLimitError(message)
        raise SourceError(message)
