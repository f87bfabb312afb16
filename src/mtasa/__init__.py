"""
mtasa-rpc: async client for the MTA:SA server's HTTP JSON-RPC interface.
await Client().call("resource", "procedure", *args) or
await Client().resources.resource.procedure(*args).
"""
from mtasa.core import ClientConfig, WebProtocol, load_config_from_env
from mtasa.rpc import Client, HttpTransport, HttpxTransport, JsonValue, ProtocolError, RpcError

__all__ = [
    "Client",
    "ClientConfig",
    "HttpTransport",
    "HttpxTransport",
    "JsonValue",
    "ProtocolError",
    "RpcError",
    "WebProtocol",
    "load_config_from_env",
]
