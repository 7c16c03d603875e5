from __future__ import annotations

import dataclasses
import typing as tp
from dataclasses import dataclass, field
from pathlib import Path

from ._exceptions import InvalidConfigurationError

__all__ = ("ClientConfig", "DEFAULT_USER_AGENT")

DEFAULT_USER_AGENT = "easyfetch"

# Option names understood by older callers.
LEGACY_OPTION_NAMES = {
    "maxredirects": "max_redirects",
    "useragent": "user_agent",
    "timeout": "timeout_seconds",
    "cache_expire": "cache_expire_seconds",
}


@dataclass(frozen=True)
class ClientConfig:
    """
    Settings used by :class:`~easyfetch.Client`.

    Instances are immutable. :meth:`merge` returns a copy where only the
    supplied options are overwritten; unknown options are kept in ``extra``.

    :param max_redirects: How many redirects to follow before giving up, defaults to 5
    :type max_redirects: int
    :param user_agent: ``User-Agent`` sent when the caller did not set one
    :type user_agent: str
    :param timeout_seconds: Connect, write and read timeout of each connection, defaults to 10
    :type timeout_seconds: float
    :param cache_dir: Directory of the response cache, caching is off when None
    :type cache_dir: tp.Optional[tp.Union[str, Path]]
    :param cache_expire_seconds: How long a cached response stays fresh, defaults to 3600
    :type cache_expire_seconds: float
    """

    max_redirects: int = 5
    user_agent: str = DEFAULT_USER_AGENT
    timeout_seconds: float = 10
    cache_dir: tp.Optional[tp.Union[str, Path]] = None
    cache_expire_seconds: float = 3600
    extra: tp.Mapping[str, tp.Any] = field(default_factory=dict)

    @property
    def caching_enabled(self) -> bool:
        return bool(self.cache_dir) and bool(self.cache_expire_seconds)

    def merge(self, options: tp.Mapping[str, tp.Any]) -> "ClientConfig":
        if not isinstance(options, tp.Mapping):
            raise InvalidConfigurationError(
                f"Configuration must be a mapping of option names to values, got {type(options).__name__!r}."
            )

        known_fields = {f.name for f in dataclasses.fields(self)} - {"extra"}
        updates: tp.Dict[str, tp.Any] = {}
        extra = dict(self.extra)

        for key, value in options.items():
            name = str(key).lower()
            name = LEGACY_OPTION_NAMES.get(name, name)
            if name in known_fields:
                updates[name] = value
            else:
                extra[name] = value

        return dataclasses.replace(self, extra=extra, **updates)
