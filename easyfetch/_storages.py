from __future__ import annotations

import logging
import time
import typing as tp
from pathlib import Path

from ._utils import ensure_cache_dir, generate_key

logger = logging.getLogger("easyfetch.storages")

__all__ = ("FileStorage",)


class FileStorage:
    """
    A simple file storage of raw responses, one file per URI.

    Entries are never removed. An entry older than ``ttl`` seconds is ignored
    and overwritten by the next successful request. Writes are not
    synchronised, so concurrent writers of the same URI race and the last one
    wins.

    :param base_path: A storage base path where the responses should be saved
    :type base_path: tp.Union[str, Path]
    :param ttl: Specifies the maximum number of seconds that the response stays fresh
    :type ttl: tp.Union[int, float]
    """

    def __init__(self, base_path: tp.Union[str, Path], ttl: tp.Union[int, float]) -> None:
        self._base_path = Path(base_path)
        self._ttl = ttl

    def path_for(self, uri: str) -> Path:
        return self._base_path / generate_key(uri)

    def store(self, uri: str, raw: bytes) -> None:
        """
        Stores the raw response in the cache, replacing any previous entry.

        :param uri: The requested URI
        :type uri: str
        :param raw: Response bytes exactly as read from the network
        :type raw: bytes
        """

        ensure_cache_dir(self._base_path)
        response_path = self.path_for(uri)
        with open(response_path, "wb") as f:
            f.write(raw)
        logger.debug(f"Stored {len(raw)} bytes for {uri} in {response_path}")

    def retrieve(self, uri: str) -> tp.Optional[bytes]:
        """
        Retrieves the raw response of a URI if a fresh entry exists.

        :param uri: The requested URI
        :type uri: str
        :return: The stored bytes, or None on a missing, stale or empty entry
        :rtype: tp.Optional[bytes]
        """

        response_path = self.path_for(uri)

        try:
            mtime = response_path.stat().st_mtime
        except FileNotFoundError:
            logger.debug(f"No cache entry for {uri}")
            return None

        age = time.time() - mtime
        if age > self._ttl:
            logger.debug(f"Cache entry for {uri} is stale ({age:.0f}s old)")
            return None

        try:
            with open(response_path, "rb") as f:
                read_data = f.read()
        except FileNotFoundError:
            logger.debug(f"Cache entry for {uri} disappeared before it was read")
            return None
        if len(read_data) == 0:
            return None
        return read_data
