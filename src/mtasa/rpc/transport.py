"""Transport out of the box: HTTP + JSON over httpx."""
from __future__ import annotations

from typing import Any

import httpx

from mtasa.rpc.protocol import JsonValue


class HttpxTransport:
    """
    POST with a JSON body, response parsed as JSON.
    Without an injected client a short-lived httpx.AsyncClient is opened per call,
    with `timeout` (None: wait indefinitely).
    An injected client is reused with its own settings and never closed here.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float | httpx.Timeout | None = None,
    ) -> None:
        self._client = client
        self._timeout = timeout

    async def post(
        self,
        url: str,
        *,
        json: list[JsonValue],
        headers: dict[str, str],
        auth: tuple[str, str] | None,
    ) -> Any:
        if self._client is not None:
            return await _post(self._client, url, json, headers, auth)
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            return await _post(client, url, json, headers, auth)


async def _post(
    client: httpx.AsyncClient,
    url: str,
    body: list[JsonValue],
    headers: dict[str, str],
    auth: tuple[str, str] | None,
) -> Any:
    kwargs: dict[str, Any] = {"json": body, "headers": headers}
    if auth is not None:
        kwargs["auth"] = httpx.BasicAuth(*auth)
    r = await client.post(url, **kwargs)
    r.raise_for_status()
    return r.json()
