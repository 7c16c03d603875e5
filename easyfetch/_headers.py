from __future__ import annotations

from typing import (
    Any,
    Dict,
    Iterator,
    List,
    Mapping,
    MutableMapping,
    Optional,
    Sequence,
    Tuple,
    Union,
)

from typing_extensions import TypeAlias

__all__ = ("Headers", "HeaderValue")

HeaderValue: TypeAlias = Union[str, Sequence[str]]


class Headers(MutableMapping[str, HeaderValue]):
    """
    Ordered, case-insensitive header table.

    Entries are indexed by the lower-cased name while the casing used by the
    caller is kept for output. There is at most one entry per name: setting an
    existing name replaces its value, and setting ``None`` (or ``False``)
    removes it.

    >>> headers = Headers()
    >>> headers.set("X-Foo", "1")
    >>> headers.get("x-foo")
    '1'
    """

    def __init__(self, headers: Optional[Mapping[str, Optional[HeaderValue]]] = None) -> None:
        self._headers: Dict[str, Tuple[str, HeaderValue]] = {}
        for name, value in (headers or {}).items():
            self.set(name, value)

    def set(self, name: str, value: Optional[HeaderValue] = None) -> None:
        if value is None or value is False:
            self._headers.pop(name.lower(), None)
            return
        if not isinstance(value, str):
            value = list(value)
        self._headers[name.lower()] = (name, value)

    def add(self, name: str, value: str) -> None:
        """Append a value, turning the entry into a list when the name repeats."""
        key = name.lower()
        if key not in self._headers:
            self._headers[key] = (name, value)
            return
        original_name, current = self._headers[key]
        values = [current] if isinstance(current, str) else list(current)
        values.append(value)
        self._headers[key] = (original_name, values)

    def get_list(self, name: str) -> Optional[List[str]]:
        entry = self._headers.get(name.lower())
        if entry is None:
            return None
        value = entry[1]
        return [value] if isinstance(value, str) else list(value)

    def get_joined(self, name: str) -> Optional[str]:
        values = self.get_list(name)
        if values is None:
            return None
        return ", ".join(values)

    def lines(self) -> Iterator[Tuple[str, str]]:
        """Yield ``(name, value)`` pairs ready to be written on the wire."""
        for name, value in self._headers.values():
            yield name, value if isinstance(value, str) else ", ".join(value)

    def __getitem__(self, key: str) -> HeaderValue:
        return self._headers[key.lower()][1]

    def __setitem__(self, key: str, value: HeaderValue) -> None:
        self.set(key, value)

    def __delitem__(self, key: str) -> None:
        del self._headers[key.lower()]

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self._headers.values())

    def __len__(self) -> int:
        return len(self._headers)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r})"

    def __eq__(self, other_headers: Any) -> bool:
        if not isinstance(other_headers, Headers):
            return NotImplemented
        return self._folded() == other_headers._folded()

    def _folded(self) -> Dict[str, Optional[str]]:
        return {key: self.get_joined(key) for key in self._headers}
