from __future__ import annotations

"""
Target Segmentation.

Derives the ordered segment list (hostname first, then every '/'-delimited
path component) from an observed request target. Empty components are kept;
the tree filters them on insertion.
"""

import logging
import re
from typing import Any, List
from urllib.parse import urlsplit

from pathtree.errors import InvalidTargetError

logger = logging.getLogger(__name__)

_SCHEME_RX = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def split_target(target: Any) -> List[str]:
    """
    Split an observed target into [hostname, segment1, segment2, ...].

    Accepts a URL string or any object exposing a `url` attribute, such as
    requests.Request, requests.PreparedRequest or requests.Response. Query
    strings and fragments are ignored. Hostname case is preserved.

    Args:
        target: URL string or request-like object.

    Returns:
        List[str]: Hostname followed by the raw path split on '/'.

    Raises:
        InvalidTargetError: If no URL can be extracted or the URL is malformed.
    """
    url = _extract_url(target)

    # Bare "host/path" inputs are treated as network locations, not paths
    if not _SCHEME_RX.match(url) and not url.startswith("//"):
        url = "//" + url

    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise InvalidTargetError(f"Malformed URL '{url}': {e}") from e

    return [_hostname(parts.netloc, url)] + parts.path.split("/")

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _extract_url(target: Any) -> str:
    """Resolve the URL string carried by the target."""
    if isinstance(target, str):
        url = target
    else:
        url = getattr(target, "url", None)
        if not isinstance(url, str):
            raise InvalidTargetError(
                f"Cannot derive a URL from {type(target).__name__}."
            )

    url = url.strip()
    if not url:
        raise InvalidTargetError("Empty URL.")
    return url


def _hostname(netloc: str, url: str) -> str:
    """Strip userinfo, port and IPv6 brackets from a network location."""
    host = netloc.rpartition("@")[2]

    if host.startswith("["):
        end = host.find("]")
        if end == -1:
            raise InvalidTargetError(f"Malformed IPv6 host in '{url}'.")
        return host[1:end]

    name, sep, port = host.rpartition(":")
    if sep and (port == "" or port.isdigit()):
        return name
    return host
