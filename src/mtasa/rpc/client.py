"""
Client for the MTA:SA HTTP JSON-RPC interface.
POST {protocol}://{host}:{port}/{resource}/call/{procedure} with the args as a JSON array;
the server answers with a JSON array whose first element is the result.
"""
from __future__ import annotations

import logging
import platform
from typing import Any, Generic, TypeVar, cast

from mtasa.core.config import DEFAULT_HOST, DEFAULT_PORT, DEFAULT_PROTOCOL, ClientConfig, WebProtocol
from mtasa.rpc.protocol import HttpTransport, JsonValue, ProtocolError
from mtasa.rpc.resources import Resources
from mtasa.rpc.transport import HttpxTransport

logger = logging.getLogger(__name__)

USER_AGENT_MARKER = "(mtasa-rpc)"

R = TypeVar("R")


class Client(Generic[R]):
    """
    Facade: call(resource_name, procedure_name, *args) -> first element of the response.
    Same thing via client.resources.resource_name.procedureName(*args).
    Transport errors propagate unchanged. Declare R (a class with the resources
    as attributes) to type client.resources for your own convenience.
    """

    resources: R

    def __init__(
        self,
        host: str | None = None,
        port: int | None = None,
        user: str | None = None,
        password: str | None = None,
        protocol: WebProtocol | None = None,
        *,
        transport: HttpTransport | None = None,
        strict: bool = False,
    ) -> None:
        self._config = ClientConfig(
            host=DEFAULT_HOST if host is None else host,
            port=DEFAULT_PORT if port is None else port,
            user=user,
            password=password,
            protocol=DEFAULT_PROTOCOL if protocol is None else protocol,
        )
        self._transport: HttpTransport = transport if transport is not None else HttpxTransport()
        self._strict = strict
        self.resources = cast(R, Resources(self))

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        *,
        transport: HttpTransport | None = None,
        strict: bool = False,
    ) -> Client[R]:
        return cls(
            config.host,
            config.port,
            config.user,
            config.password,
            config.protocol,
            transport=transport,
            strict=strict,
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def server_uri(self) -> str:
        """URI of the MTA server's HTTP server."""
        return self._config.server_uri

    @property
    def user_agent(self) -> str:
        return f"MTA:SA WEB client on Python {platform.python_version()} {USER_AGENT_MARKER}"

    @property
    def auth_options(self) -> tuple[str, str] | None:
        """(user, password), or None when either is missing."""
        return self._config.auth

    async def call(self, resource_name: str, procedure_name: str, *args: JsonValue) -> Any:
        """Call procedure_name of resource_name with positional args; return the unwrapped result."""
        uri = f"{self.server_uri}/{resource_name}/call/{procedure_name}"
        auth = self.auth_options
        logger.debug("POST %s (%d args, auth=%s)", uri, len(args), auth is not None)
        result = await self._transport.post(
            uri,
            json=list(args),
            headers={
                "Content-type": "application/json",
                "User-Agent": self.user_agent,
            },
            auth=auth,
        )
        return self._unwrap(result, uri)

    def _unwrap(self, result: Any, uri: str) -> Any:
        # MTA wraps every return value in a one-element array
        if isinstance(result, list) and result:
            return result[0]
        if self._strict:
            raise ProtocolError(f"{uri}: expected a non-empty JSON array, got {result!r}")
        return None

    def __repr__(self) -> str:
        return f"<Client {self.server_uri}>"
