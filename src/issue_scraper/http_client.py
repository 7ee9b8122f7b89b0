"""GraphQL query executor for the issue URL scraper.

Every call is a single POST: there is no retry, backoff, or token rotation.
Failures propagate to the caller, which is expected to abort the run.
"""

from __future__ import annotations

import sys
from typing import Any, Dict, List, Optional

import requests

from .config import GRAPHQL_URL, USER_AGENT


class GraphQLError(RuntimeError):
    """Raised when the API answers 200 but reports query-level errors."""

    def __init__(self, errors: List[Any]) -> None:
        self.errors = errors
        messages = ", ".join(
            str(err.get("message")) for err in errors if isinstance(err, dict)
        )
        super().__init__(f"GraphQL error: {messages or errors}")


def log_http_error(resp: requests.Response, url: str) -> None:
    """Print a short, human-readable message when GitHub returns an error."""
    try:
        body = resp.json()
    except ValueError:
        body = {"text": (resp.text or "")[:300]}
    if not isinstance(body, dict):
        body = {"text": str(body)[:300]}
    msg = body.get("message") or body.get("error") or body.get("text")
    print(f"[error] HTTP {resp.status_code} for {url}\n  -> {msg}", file=sys.stderr)


def graphql_headers(token: Optional[str]) -> Dict[str, str]:
    """Build headers for GraphQL requests, attaching the token if available."""
    headers = {
        "Accept": "application/vnd.github+json",
        "User-Agent": USER_AGENT,
        "Content-Type": "application/json",
    }
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def run_graphql_query(
    query: str,
    variables: Dict[str, Any],
    token: Optional[str],
    *,
    url: str = GRAPHQL_URL,
    timeout: Optional[float] = None,
) -> Dict[str, Any]:
    """Execute one GraphQL query and return its `data` object."""
    payload = {"query": query, "variables": variables}
    resp = requests.post(url, json=payload, headers=graphql_headers(token), timeout=timeout)

    if resp.status_code >= 400:
        log_http_error(resp, url)
        resp.raise_for_status()

    data = resp.json()
    if data.get("errors"):
        raise GraphQLError(data["errors"])
    return data.get("data") or {}


__all__ = [
    "GraphQLError",
    "log_http_error",
    "graphql_headers",
    "run_graphql_query",
]
