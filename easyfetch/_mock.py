import typing as tp

import httpcore

__all__ = ("MockBackend", "MockStream")


class MockStream(httpcore.MockStream):
    """A scripted connection that remembers everything written to it."""

    def __init__(self, buffer: tp.List[bytes]) -> None:
        super().__init__(buffer)
        self.written = bytearray()
        self.closed = False

    def write(self, buffer: bytes, timeout: tp.Optional[float] = None) -> None:
        self.written += buffer

    def close(self) -> None:
        self.closed = True
        super().close()


class MockBackend(httpcore.NetworkBackend):
    """
    Network backend serving one scripted response per connection.

    Every call to ``connect_tcp`` pops the next response. A response is either
    raw bytes or a list of chunks returned by successive reads.
    """

    def __init__(self) -> None:
        self.mocked_responses: tp.List[tp.Union[bytes, tp.List[bytes]]] = []
        self.connections: tp.List[tp.Tuple[str, int, tp.Optional[float]]] = []
        self.streams: tp.List[MockStream] = []

    def add_responses(self, responses: tp.Sequence[tp.Union[bytes, tp.List[bytes]]]) -> None:
        self.mocked_responses.extend(responses)

    @property
    def requests(self) -> tp.List[bytes]:
        return [bytes(stream.written) for stream in self.streams]

    def connect_tcp(
        self,
        host: str,
        port: int,
        timeout: tp.Optional[float] = None,
        local_address: tp.Optional[str] = None,
        socket_options: tp.Optional[tp.Iterable[tp.Any]] = None,
    ) -> httpcore.NetworkStream:
        if not self.mocked_responses:
            raise httpcore.ConnectError(f"No mocked response left for {host}:{port}")
        self.connections.append((host, port, timeout))
        response = self.mocked_responses.pop(0)
        stream = MockStream([response] if isinstance(response, bytes) else list(response))
        self.streams.append(stream)
        return stream

    def sleep(self, seconds: float) -> None: ...
