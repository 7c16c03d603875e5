import pytest

from easyfetch import Response


def test_parse_simple_response():
    raw = b"HTTP/1.1 200 OK\r\nContent-Type: text/plain\r\nContent-Length: 5\r\n\r\nhello"

    response = Response.from_bytes(raw)

    assert response.status_code == 200
    assert response.reason == "OK"
    assert response.http_version == "1.1"
    assert response.get_header("content-type") == "text/plain"
    assert list(response.headers) == ["Content-Type", "Content-Length"]
    assert response.content == b"hello"
    assert response.raw == raw
    assert response.is_success()
    assert not response.is_redirect()


def test_body_without_framing_runs_to_eof():
    response = Response.from_bytes(b"HTTP/1.0 200 OK\r\nServer: test\r\n\r\nall of it")

    assert response.http_version == "1.0"
    assert response.content == b"all of it"


def test_chunked_body_is_decoded():
    raw = b"HTTP/1.1 200 OK\r\nTransfer-Encoding: chunked\r\n\r\n5\r\nhello\r\n6\r\n world\r\n0\r\n\r\n"

    response = Response.from_bytes(raw)

    assert response.content == b"hello world"
    assert response.raw == raw


def test_interim_responses_are_skipped():
    raw = b"HTTP/1.1 100 Continue\r\n\r\nHTTP/1.1 201 Created\r\nContent-Length: 2\r\n\r\nok"

    response = Response.from_bytes(raw)

    assert response.status_code == 201
    assert response.content == b"ok"


def test_head_response_has_no_body():
    response = Response.from_bytes(b"HTTP/1.1 200 OK\r\nContent-Length: 5\r\n\r\n", method="HEAD")

    assert response.status_code == 200
    assert response.content == b""


def test_repeated_headers_are_joined():
    raw = b"HTTP/1.1 200 OK\r\nVary: Accept\r\nvary: Cookie\r\nContent-Length: 0\r\n\r\n"

    response = Response.from_bytes(raw)

    assert response.get_header("VARY") == "Accept, Cookie"
    assert response.headers.get_list("vary") == ["Accept", "Cookie"]


@pytest.mark.parametrize("raw", [b"", b"garbage", b"not http at all\r\n\r\n", b"\x00\xff\x10"])
def test_malformed_stream_degrades(raw):
    response = Response.from_bytes(raw)

    assert response.status_code == 0
    assert len(response.headers) == 0
    assert response.content == raw
    assert response.raw == raw
    assert not response.is_redirect()


def test_truncated_body_keeps_what_was_received():
    response = Response.from_bytes(b"HTTP/1.1 200 OK\r\nContent-Length: 10\r\n\r\nabc")

    assert response.status_code == 200
    assert response.content == b"abc"


@pytest.mark.parametrize(
    "status_code, redirect, error",
    [(200, False, False), (301, True, False), (304, True, False), (404, False, True), (503, False, True)],
)
def test_status_classes(status_code, redirect, error):
    response = Response(status_code=status_code)

    assert response.is_redirect() is redirect
    assert response.is_error() is error


def test_redirect_location():
    response = Response.from_bytes(b"HTTP/1.1 302 Found\r\nLocation: http://example.org/\r\n\r\n")

    assert response.is_redirect()
    assert response.get_header("location") == "http://example.org/"
    assert response.get_header("Content-Type") is None


def test_text_uses_declared_charset():
    raw = b"HTTP/1.1 200 OK\r\nContent-Type: text/plain; charset=iso-8859-1\r\n\r\ncaf\xe9"

    assert Response.from_bytes(raw).text == "café"


def test_text_falls_back_to_utf8():
    raw = b"HTTP/1.1 200 OK\r\nContent-Type: text/plain; charset=unknown-charset\r\n\r\ncaf\xc3\xa9"

    assert Response.from_bytes(raw).text == "café"
