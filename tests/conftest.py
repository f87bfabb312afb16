# Shared fixtures: a recording transport that answers with a canned envelope.

from typing import Any

import pytest

FIRST = "Yo, I'm the first element of the response"
SECOND = "I'm always second :("


class RecordingTransport:
    """HttpTransport double: records every post and returns `response`."""

    def __init__(self, response: Any = None) -> None:
        self.response = [FIRST, SECOND] if response is None else response
        self.calls: list[dict[str, Any]] = []

    async def post(self, url, *, json, headers, auth):
        self.calls.append({"url": url, "json": json, "headers": headers, "auth": auth})
        return self.response

    @property
    def last(self) -> dict[str, Any]:
        return self.calls[-1]


@pytest.fixture
def transport():
    return RecordingTransport()
