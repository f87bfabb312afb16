"""Client config: one frozen object per client; optional loading from env."""
from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Any, Literal

WebProtocol = Literal["http", "https"]

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 22005
DEFAULT_PROTOCOL: WebProtocol = "http"


@dataclass(frozen=True)
class ClientConfig:
    """
    Connection parameters of an MTA server's HTTP interface.
    Not validated: a bad host, port or protocol only shows up when a call fails.
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    user: str | None = None
    password: str | None = None
    protocol: WebProtocol = DEFAULT_PROTOCOL

    @property
    def server_uri(self) -> str:
        return f"{self.protocol}://{self.host}:{self.port}"

    @property
    def auth(self) -> tuple[str, str] | None:
        """(user, password) when both are set, otherwise None."""
        if self.user and self.password:
            return (self.user, self.password)
        return None


def load_config_from_env(prefix: str = "MTA_", **defaults: Any) -> ClientConfig:
    """
    Build ClientConfig from os.environ with prefix and defaults.
    Env vars: MTA_HOST, MTA_PORT, MTA_USER, MTA_PASSWORD, MTA_PROTOCOL.
    """
    names = {f.name for f in fields(ClientConfig)}
    values = {k: v for k, v in defaults.items() if k in names}
    for key, value in os.environ.items():
        if not key.startswith(prefix):
            continue
        name = key[len(prefix):].lower()
        if name in names and value:
            values[name] = value.strip()
    if "port" in values:
        values["port"] = int(values["port"])
    return ClientConfig(**values)
