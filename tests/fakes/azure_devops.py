import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple


@dataclass
class FakeResponse:
    status_code: int = 200
    text: str = ""
    headers: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def of_json(cls, payload: Any, status_code: int = 200) -> "FakeResponse":
        return cls(status_code=status_code, text=json.dumps(payload))

    def json(self) -> Any:
        return json.loads(self.text)


class FakeSession:
    """Stands in for ``requests.Session``; answers by URL suffix."""

    def __init__(self, routes: Optional[Mapping[str, Any]] = None) -> None:
        self._routes: Dict[str, Any] = dict(routes or {})
        self.auth = None
        self.headers: Dict[str, str] = {}
        self.calls: List[Tuple[str, Dict[str, Any], Optional[float]]] = []
        self.closed = False

    def route(self, suffix: str, response: Any) -> None:
        self._routes[suffix] = response

    def get(self, url: str, params=None, timeout=None) -> FakeResponse:  # noqa: ANN001
        self.calls.append((url, dict(params or {}), timeout))
        for suffix in sorted(self._routes, key=len, reverse=True):
            if url.endswith(suffix):
                response = self._routes[suffix]
                if isinstance(response, Exception):
                    raise response
                if isinstance(response, list):
                    return response.pop(0)
                return response
        return FakeResponse(status_code=404, text="")

    def close(self) -> None:
        self.closed = True
