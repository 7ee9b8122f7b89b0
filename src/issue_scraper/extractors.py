"""Pull the first useful URL out of free-text issue and comment bodies."""

from __future__ import annotations

import re
from typing import Dict, Iterable, Optional
from urllib.parse import urlsplit

from .config import EXCLUDED_HOSTS

# https://stackoverflow.com/a/29288898
URL_RE = re.compile(
    r"(?:(?:https?|file)://|www\.)"
    r"(?:\([-A-Z0-9+&@#/%=~_|$?!:,.]*\)|[-A-Z0-9+&@#/%=~_|$?!:,.])*"
    r"(?:\([-A-Z0-9+&@#/%=~_|$?!:,.]*\)|[A-Z0-9+&@#/%=~_|$])",
    flags=re.IGNORECASE | re.MULTILINE,
)

DEFAULT_PORTS = {"http": 80, "https": 443}
HOST_REQUIRED_SCHEMES = {"http", "https"}
HOST_LABEL = r"[a-z0-9\-_~!$&'()*+,;=]+"
HOST_RE = re.compile(rf"{HOST_LABEL}(?:\.{HOST_LABEL})*\.?")


def normalize_url(raw: str) -> str:
    """Return the absolute, normalized form of a matched URL.

    Bare ``www.`` matches get an ``http://`` scheme. Scheme and host are
    lower-cased, default ports and fragments are dropped, and an empty
    http(s) path becomes ``/``. Raises ValueError for URLs that cannot be
    parsed, lack a host where one is required, or whose host has
    empty labels or characters outside the host charset.
    """
    candidate = raw.strip()
    if candidate[:4].lower() == "www.":
        candidate = f"http://{candidate}"

    parts = urlsplit(candidate)
    scheme = parts.scheme.lower()
    host = parts.hostname
    port = parts.port  # raises ValueError when out of range or not numeric
    if scheme in HOST_REQUIRED_SCHEMES and not host:
        raise ValueError(f"missing host in {raw!r}")
    if host and not HOST_RE.fullmatch(host):
        raise ValueError(f"invalid host {host!r} in {raw!r}")

    netloc = ""
    if parts.username is not None:
        netloc = parts.username
        if parts.password is not None:
            netloc += f":{parts.password}"
        netloc += "@"
    if host:
        netloc += host
    if port is not None and DEFAULT_PORTS.get(scheme) != port:
        netloc += f":{port}"

    path = parts.path
    if not path and scheme in HOST_REQUIRED_SCHEMES:
        path = "/"
    query = f"?{parts.query}" if parts.query else ""
    return f"{scheme}://{netloc}{path}{query}"


def is_excluded_host(host: Optional[str]) -> bool:
    """True for localhost and GitHub's own domains."""
    if not host:
        return False
    host = host.lower()
    return any(excluded in host for excluded in EXCLUDED_HOSTS)


def parse_comment_for_url(comment: Optional[str]) -> Optional[str]:
    """Return the first non-excluded URL in a comment, or None.

    Only the first URL-shaped match is examined; later URLs in the same
    comment are ignored even when the first one is filtered out.
    """
    if not comment:
        return None
    match = URL_RE.search(comment)
    if not match:
        return None

    try:
        url = normalize_url(match.group(0))
    except ValueError:
        return None

    if is_excluded_host(urlsplit(url).hostname):
        return None
    return url


def collect_urls(comments: Iterable[Optional[str]],
                 urls: Optional[Dict[str, None]] = None) -> Dict[str, None]:
    """Add the URL of each comment to an insertion-ordered set and return it."""
    if urls is None:
        urls = {}
    for comment in comments:
        url = parse_comment_for_url(comment)
        if url:
            urls.setdefault(url, None)
    return urls


__all__ = [
    "URL_RE",
    "normalize_url",
    "is_excluded_host",
    "parse_comment_for_url",
    "collect_urls",
]
