from mtasa.rpc.client import USER_AGENT_MARKER, Client
from mtasa.rpc.protocol import HttpTransport, JsonValue, ProtocolError, RpcError
from mtasa.rpc.resources import Resource, Resources
from mtasa.rpc.transport import HttpxTransport

__all__ = [
    "Client",
    "HttpTransport",
    "HttpxTransport",
    "JsonValue",
    "ProtocolError",
    "Resource",
    "Resources",
    "RpcError",
    "USER_AGENT_MARKER",
]
