from easyfetch._client import Client as Client
from easyfetch._config import ClientConfig as ClientConfig
from easyfetch._exceptions import (
    ConnectionFailure as ConnectionFailure,
    EasyFetchError as EasyFetchError,
    InvalidConfigurationError as InvalidConfigurationError,
    UnconfiguredTargetError as UnconfiguredTargetError,
)
from easyfetch._headers import Headers as Headers
from easyfetch._mock import MockBackend as MockBackend
from easyfetch._models import Response as Response
from easyfetch._storages import FileStorage as FileStorage

__all__ = (
    # Client
    "Client",
    "ClientConfig",
    ## Models
    "Response",
    "Headers",
    ## Storages
    "FileStorage",
    # Testing
    "MockBackend",
    # Exceptions
    "EasyFetchError",
    "UnconfiguredTargetError",
    "InvalidConfigurationError",
    "ConnectionFailure",
)
