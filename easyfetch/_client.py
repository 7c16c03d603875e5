from __future__ import annotations

import logging
import typing as tp

import httpcore
import httpx

from ._config import ClientConfig
from ._exceptions import ConnectionFailure, UnconfiguredTargetError
from ._headers import Headers, HeaderValue
from ._models import Response
from ._storages import FileStorage
from ._utils import HEADERS_ENCODING

logger = logging.getLogger("easyfetch.client")

__all__ = ("Client",)

DEFAULT_PORT = 80
READ_CHUNK_SIZE = 64 * 1024


def parse_absolute_url(value: str) -> tp.Optional[httpx.URL]:
    try:
        url = httpx.URL(value)
    except (httpx.InvalidURL, TypeError):
        return None
    if not url.is_absolute_url or b"%" in url.raw_host:
        return None
    return url


class Client:
    """
    A one-shot HTTP/1.1 client.

    Every request attempt opens a new connection, writes the request, reads
    until the server closes the connection and closes it. Redirects are
    followed up to ``max_redirects`` and the final raw response can be cached
    on disk, see :class:`~easyfetch.ClientConfig`.

    :param uri: The target URI, defaults to None
    :type uri: tp.Optional[tp.Any]
    :param config: Options merged over the defaults, defaults to None
    :type config: tp.Optional[tp.Mapping[str, tp.Any]]
    :param network_backend: Backend used to open connections, defaults to ``httpcore.SyncBackend``
    :type network_backend: tp.Optional[httpcore.NetworkBackend]
    """

    def __init__(
        self,
        uri: tp.Optional[tp.Any] = None,
        config: tp.Optional[tp.Mapping[str, tp.Any]] = None,
        *,
        network_backend: tp.Optional[httpcore.NetworkBackend] = None,
    ) -> None:
        self._uri: tp.Optional[str] = None
        self._config = ClientConfig()
        self._headers = Headers()
        self._redirect_counter = 0
        self._network_backend = network_backend if network_backend is not None else httpcore.SyncBackend()

        if uri is not None:
            self.uri = uri
        if config is not None:
            self.configure(config)

    @property
    def uri(self) -> tp.Optional[str]:
        return self._uri

    @uri.setter
    def uri(self, value: tp.Optional[tp.Any]) -> None:
        self._uri = value if value is None or isinstance(value, str) else str(value)

    @property
    def config(self) -> ClientConfig:
        return self._config

    def configure(self, options: tp.Mapping[str, tp.Any]) -> None:
        self._config = self._config.merge(options)

    @property
    def headers(self) -> Headers:
        return self._headers

    def set_header(self, name: str, value: tp.Optional[HeaderValue] = None) -> None:
        self._headers.set(name, value)

    def get_header(self, name: str) -> tp.Optional[HeaderValue]:
        return self._headers.get(name)

    @property
    def redirections(self) -> int:
        """Number of redirects followed by the last request that went to the network."""
        return self._redirect_counter

    def request(self, method: str = "GET") -> Response:
        """
        Sends the request, following redirects, and returns the final response.

        :param method: HTTP method, defaults to "GET"
        :type method: str
        :raises UnconfiguredTargetError: No absolute target URI is set
        :raises ConnectionFailure: A connection could not be opened, written or read
        :return: The final response
        :rtype: Response
        """

        if not self._uri:
            raise UnconfiguredTargetError("No target URI is set, assign `Client.uri` first.")

        method = method.upper()
        requested_uri = self._uri
        storage = self._storage()

        if storage is not None:
            cached = storage.retrieve(requested_uri)
            if cached is not None:
                logger.debug(f"Using cached response for {requested_uri}")
                return Response.from_bytes(cached, method=method)

        self._redirect_counter = 0

        while True:
            url = parse_absolute_url(self._uri)
            if url is None:
                raise UnconfiguredTargetError(f"The target URI {self._uri!r} is not an absolute URI.")

            raw = self._send(method, url)
            response = Response.from_bytes(raw, method=method)

            location = response.get_header("Location") if response.is_redirect() else None
            if location is None:
                break

            if parse_absolute_url(location) is None:
                logger.debug(f"Not following redirect to {location!r}, it is not an absolute URI")
                break

            if self._redirect_counter >= self._config.max_redirects:
                logger.debug(f"Redirect limit of {self._config.max_redirects} reached at {self._uri}")
                break

            logger.debug(f"Following {response.status_code} redirect from {self._uri} to {location}")
            self._headers.set("Host", None)
            self._uri = location
            self._redirect_counter += 1

        if storage is not None:
            storage.store(requested_uri, raw)

        return response

    def _storage(self) -> tp.Optional[FileStorage]:
        if not self._config.caching_enabled:
            return None
        return FileStorage(
            base_path=tp.cast(str, self._config.cache_dir),
            ttl=self._config.cache_expire_seconds,
        )

    def _prepare_headers(self, host: str, port: int) -> tp.List[tp.Tuple[str, str]]:
        headers: tp.List[tp.Tuple[str, str]] = []

        if "Host" not in self._headers:
            headers.append(("Host", host if port == DEFAULT_PORT else f"{host}:{port}"))

        if "Connection" not in self._headers:
            headers.append(("Connection", "close"))

        if "User-Agent" not in self._headers:
            headers.append(("User-Agent", self._config.user_agent))

        headers.extend(self._headers.lines())
        return headers

    def _build_request(self, method: str, url: httpx.URL) -> bytes:
        host = url.raw_host.decode("ascii")
        if ":" in host:
            host = f"[{host}]"
        port = url.port or DEFAULT_PORT
        target = url.raw_path.decode("ascii") or "/"

        lines = [f"{method} {target} HTTP/1.1"]
        lines.extend(f"{name}: {value}" for name, value in self._prepare_headers(host, port))
        lines.extend(["", ""])
        return "\r\n".join(lines).encode(HEADERS_ENCODING)

    def _send(self, method: str, url: httpx.URL) -> bytes:
        host = url.raw_host.decode("ascii")
        port = url.port or DEFAULT_PORT
        timeout = self._config.timeout_seconds
        request = self._build_request(method, url)

        logger.debug(f"Connecting to {host}:{port} for {method} {url}")
        try:
            stream = self._network_backend.connect_tcp(host, port, timeout=timeout)
        except (httpcore.NetworkError, httpcore.TimeoutException) as exc:
            raise ConnectionFailure(f"Could not connect to {host}:{port}: {exc}") from exc

        chunks = []
        try:
            stream.write(request, timeout=timeout)
            while True:
                chunk = stream.read(READ_CHUNK_SIZE, timeout=timeout)
                if not chunk:
                    break
                chunks.append(chunk)
        except (httpcore.NetworkError, httpcore.TimeoutException) as exc:
            raise ConnectionFailure(f"Connection to {host}:{port} failed: {exc}") from exc
        finally:
            stream.close()

        return b"".join(chunks)
