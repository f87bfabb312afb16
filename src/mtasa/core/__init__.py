from mtasa.core.config import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_PROTOCOL,
    ClientConfig,
    WebProtocol,
    load_config_from_env,
)

__all__ = [
    "ClientConfig",
    "WebProtocol",
    "load_config_from_env",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "DEFAULT_PROTOCOL",
]
