"""RPC protocols: errors and the HTTP POST primitive the client delegates to."""
from __future__ import annotations

from typing import Any, Protocol, Union, runtime_checkable

JsonValue = Union[None, bool, int, float, str, list[Any], dict[str, Any]]


class RpcError(Exception):
    """RPC call failed at the client level (transport errors are not wrapped)."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")


class ProtocolError(RpcError):
    """Response is not the one-element array envelope. Raised in strict mode only."""

    def __init__(self, message: str) -> None:
        super().__init__("PROTOCOL_ERROR", message)


@runtime_checkable
class HttpTransport(Protocol):
    """
    HTTP transport: one POST, parsed JSON back. User may implement their own.
    Failures (connection, status, decoding) are raised as-is.
    """

    async def post(
        self,
        url: str,
        *,
        json: list[JsonValue],
        headers: dict[str, str],
        auth: tuple[str, str] | None,
    ) -> Any:
        ...
