from typing import Any

import pytest


_NO_JSON = object()


class FakeResponse:
    """Stand-in for ``niquests.Response`` with just what the client reads."""

    def __init__(self, status_code: int = 200, payload: Any = _NO_JSON, text: str = "") -> None:
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self) -> Any:
        if self._payload is _NO_JSON:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


class FakeSession:
    """Records requests and replays a canned response or error."""

    def __init__(self, response: FakeResponse | None = None, error: BaseException | None = None) -> None:
        self.response = response
        self.error = error
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    async def __aenter__(self) -> "FakeSession":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def make_session():
    def _make(status_code: int = 200, payload: Any = _NO_JSON, text: str = "", error: BaseException | None = None):
        return FakeSession(FakeResponse(status_code, payload, text), error=error)

    return _make


def form_fields(call: dict[str, Any]) -> dict[str, Any]:
    return {name: value for name, value in call["files"]}
