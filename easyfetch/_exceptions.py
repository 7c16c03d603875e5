__all__ = (
    "EasyFetchError",
    "UnconfiguredTargetError",
    "InvalidConfigurationError",
    "ConnectionFailure",
)


class EasyFetchError(Exception): ...


class UnconfiguredTargetError(EasyFetchError): ...


class InvalidConfigurationError(EasyFetchError, TypeError): ...


class ConnectionFailure(EasyFetchError): ...
