from easyfetch import Headers


def test_case_insensitive_access():
    headers = Headers()
    headers.set("X-Foo", "1")

    assert headers.get("x-foo") == "1"
    assert headers.get("X-FOO") == "1"
    assert "x-FoO" in headers


def test_missing_header_is_none():
    assert Headers().get("Accept") is None


def test_set_replaces_existing_value():
    headers = Headers()
    headers.set("Accept", "text/html")
    headers.set("accept", "application/json")

    assert len(headers) == 1
    assert headers.get("ACCEPT") == "application/json"
    assert list(headers) == ["accept"]


def test_set_none_or_false_removes():
    headers = Headers({"Accept": "text/html", "X-Foo": "1"})

    headers.set("accept", None)
    headers.set("x-foo", False)  # type: ignore[arg-type]

    assert len(headers) == 0


def test_removing_missing_header_is_noop():
    headers = Headers()
    headers.set("Accept")
    assert len(headers) == 0


def test_keeps_original_casing_and_order():
    headers = Headers()
    headers.set("x-second", "2")
    headers.set("X-First", "1")
    headers["ACCEPT"] = "*/*"

    assert list(headers) == ["x-second", "X-First", "ACCEPT"]


def test_sequence_values_are_joined_on_the_wire():
    headers = Headers({"Accept": ["text/html", "application/xml"]})

    assert headers.get("accept") == ["text/html", "application/xml"]
    assert headers.get_joined("accept") == "text/html, application/xml"
    assert list(headers.lines()) == [("Accept", "text/html, application/xml")]


def test_add_collects_repeated_headers():
    headers = Headers()
    headers.add("Set-Cookie", "a=1")
    headers.add("set-cookie", "b=2")

    assert headers.get_list("SET-COOKIE") == ["a=1", "b=2"]
    assert list(headers) == ["Set-Cookie"]


def test_delete():
    headers = Headers({"Accept": "*/*"})
    del headers["accept"]
    assert "Accept" not in headers


def test_equality_ignores_name_casing():
    assert Headers({"Accept": "*/*"}) == Headers({"accept": "*/*"})
    assert Headers({"Accept": "*/*"}) != Headers({"Accept": "text/html"})
