from __future__ import annotations

import logging
import typing as tp
from dataclasses import dataclass, field

import h11

from ._headers import Headers
from ._utils import HEADERS_ENCODING, extract_charset

logger = logging.getLogger("easyfetch.models")

__all__ = ("Response",)


@dataclass
class Response:
    """
    A parsed HTTP response.

    ``raw`` keeps the bytes exactly as they were read from the network, which
    is also what ends up in the cache.
    """

    status_code: int = 0
    reason: str = ""
    http_version: str = ""
    headers: Headers = field(default_factory=Headers)
    content: bytes = b""
    raw: bytes = b""

    @classmethod
    def from_bytes(cls, raw: bytes, method: str = "GET") -> "Response":
        """
        Parse a raw response stream that ended with the peer closing the connection.

        Never raises on malformed input. Whatever was recognised before a
        protocol error is kept; if not even a status line was recognised the
        response has ``status_code == 0`` and carries the raw bytes as content.

        :param raw: Everything read from the connection
        :type raw: bytes
        :param method: Method of the request, a ``HEAD`` response has no body
        :type method: str
        """

        response = cls(raw=raw)
        conn = h11.Connection(our_role=h11.CLIENT)
        body = bytearray()
        seen_status = False

        try:
            conn.send(h11.Request(method=method, target="/", headers=[("Host", "localhost")]))
            conn.send(h11.EndOfMessage())
            conn.receive_data(raw)
            conn.receive_data(b"")

            while True:
                event = conn.next_event()
                if isinstance(event, h11.InformationalResponse):
                    continue
                if isinstance(event, h11.Response):
                    seen_status = True
                    response.status_code = event.status_code
                    response.reason = event.reason.decode(HEADERS_ENCODING)
                    response.http_version = event.http_version.decode(HEADERS_ENCODING)
                    for raw_name, value in event.headers.raw_items():
                        response.headers.add(raw_name.decode(HEADERS_ENCODING), value.decode(HEADERS_ENCODING))
                elif isinstance(event, h11.Data):
                    body += event.data
                else:
                    break
        except h11.ProtocolError as exc:
            logger.debug(f"Malformed response stream ({len(raw)} bytes): {exc}")
            if not seen_status:
                response.content = raw
                return response

        response.content = bytes(body)
        return response

    def is_redirect(self) -> bool:
        return 300 <= self.status_code < 400

    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    def is_error(self) -> bool:
        return 400 <= self.status_code < 600

    def get_header(self, name: str) -> tp.Optional[str]:
        return self.headers.get_joined(name)

    @property
    def text(self) -> str:
        charset = extract_charset(self.get_header("Content-Type")) or "utf-8"
        try:
            return self.content.decode(charset, errors="replace")
        except LookupError:
            return self.content.decode("utf-8", errors="replace")

    def __repr__(self) -> str:
        return f"<Response [{self.status_code} {self.reason}]>"
