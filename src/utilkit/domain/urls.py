"""URL detection."""

from __future__ import annotations

from pydantic import AnyUrl, TypeAdapter, ValidationError

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def is_url(path: str | None) -> bool:
    """Return True if *path* starts with ``http`` and parses as a URL.

    Parsing follows the WHATWG rules implemented by pydantic-core, so
    ``"http://"`` (no host) is rejected while ``"https://example.com"``
    is accepted.

    Examples:
        >>> is_url("https://example.com/docs")
        True
        >>> is_url("http://")
        False
        >>> is_url("ftp://example.com")
        False
    """
    if path is None or not path.startswith("http"):
        return False
    try:
        _URL_ADAPTER.validate_python(path)
    except ValidationError:
        return False
    return True
