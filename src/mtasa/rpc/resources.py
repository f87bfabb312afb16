"""Virtual resources: client.resources.resource_name.procedureName(*args) -> client.call(...)."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Awaitable, Callable

if TYPE_CHECKING:
    from mtasa.rpc.client import Client


def _is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


class Resources:
    """
    Any attribute is a resource; nothing is checked until the server answers a call.
    Use resources["race-manager"] for names that are not identifiers.
    """

    def __init__(self, client: Client[Any]) -> None:
        self._client = client

    def __getattr__(self, name: str) -> Resource:
        if _is_dunder(name):
            raise AttributeError(name)
        return Resource(self._client, name)

    def __getitem__(self, name: str) -> Resource:
        return Resource(self._client, name)

    def __repr__(self) -> str:
        return f"<Resources of {self._client.server_uri}>"


class Resource:
    """One remote resource: any attribute is a procedure bound to client.call."""

    def __init__(self, client: Client[Any], name: str) -> None:
        self._client = client
        self._name = name

    def __getattr__(self, name: str) -> Callable[..., Awaitable[Any]]:
        if _is_dunder(name):
            raise AttributeError(name)
        return self._procedure(name)

    def __getitem__(self, name: str) -> Callable[..., Awaitable[Any]]:
        return self._procedure(name)

    def _procedure(self, procedure_name: str) -> Callable[..., Awaitable[Any]]:
        client, resource_name = self._client, self._name

        def call(*args: Any) -> Awaitable[Any]:
            return client.call(resource_name, procedure_name, *args)

        call.__name__ = procedure_name
        call.__qualname__ = f"{resource_name}.{procedure_name}"
        return call

    def __repr__(self) -> str:
        return f"<Resource {self._name!r}>"
