from __future__ import annotations

import hashlib
import typing as tp
from pathlib import Path

HEADERS_ENCODING = "iso-8859-1"
CACHE_FILE_PREFIX = "easy_rdf_"


def generate_key(uri: str) -> str:
    """
    Build the cache file name of a URI.

    Examples:
        >>> generate_key("http://example.com/")
        'easy_rdf_a6bf1757fff057f266b697df9cf176fd'
    """
    return CACHE_FILE_PREFIX + hashlib.md5(uri.encode("utf-8")).hexdigest()


def ensure_cache_dir(base_path: tp.Union[str, Path]) -> Path:
    _base_path = Path(base_path)
    _gitignore_file = _base_path / ".gitignore"

    if not _base_path.is_dir():
        _base_path.mkdir(parents=True, exist_ok=True)
        with open(_gitignore_file, "w", encoding="utf-8") as f:
            f.write("# Automatically created by easyfetch\n*")
    return _base_path


def extract_charset(content_type: tp.Optional[str]) -> tp.Optional[str]:
    """
    Return the ``charset`` parameter of a ``Content-Type`` value.

    Examples:
        >>> extract_charset('text/html; charset="ISO-8859-1"')
        'ISO-8859-1'
        >>> extract_charset("application/json") is None
        True
    """
    if not content_type:
        return None
    for param in content_type.split(";")[1:]:
        name, _, value = param.partition("=")
        if name.strip().lower() == "charset" and value.strip():
            return value.strip().strip('"')
    return None
