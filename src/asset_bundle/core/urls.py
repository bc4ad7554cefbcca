"""URL path normalization.

Own assets are keyed by the path component of their URL only, so that
``/app.js?hash=abc`` and ``/app.js`` refer to the same asset.
"""

from typing import NewType
from urllib.parse import urlsplit

UrlPath = NewType("UrlPath", str)


def url_path_of(url: str) -> UrlPath:
    """Return the path component of a manifest URL.

    The path is taken as written; loaded manifests are already checked
    for absolute URLs by the program.json schema.

    Args:
        url: URL or URL path as written in the manifest

    Returns:
        The path without query string or fragment
    """
    return UrlPath(urlsplit(url).path)
