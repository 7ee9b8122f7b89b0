"""Configuration constants and CLI settings for the issue URL scraper."""

from __future__ import annotations

import argparse
import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

TOKEN_ENV_VAR = "GH_TOKEN_ISSUE_SCRAPER"
USER_AGENT = "issue-url-scraper/1.0"
GRAPHQL_URL = "https://api.github.com/graphql"
REPO_OWNER = "GoogleChrome"
REPO_NAME = "lighthouse"
COMMENTS_LIMIT = 100
TIMELINE_LIMIT = 250
EXCLUDED_HOSTS = ("localhost", "github.com")
SECRETS_FILENAME = "local_secrets.json"


def _env_timeout() -> Optional[float]:
    raw = os.getenv("REQUEST_TIMEOUT", "").strip()
    return float(raw) if raw else None


REQUEST_TIMEOUT: Optional[float] = _env_timeout()  # None = transport default


@dataclass(frozen=True)
class ScraperSettings:
    """Resolved runtime settings for one scraper invocation."""

    issue_number: int
    token: Optional[str]
    owner: str = REPO_OWNER
    repo: str = REPO_NAME
    graphql_url: str = GRAPHQL_URL
    timeout: Optional[float] = REQUEST_TIMEOUT
    verbose: bool = False


def _issue_number(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid issue number: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"issue number must be positive: {value!r}")
    return number


def build_arg_parser() -> argparse.ArgumentParser:
    """Return the CLI parser used by the scraper entry point."""

    parser = argparse.ArgumentParser(
        description="List URLs mentioned in all comments of an issue, including issues that reference it.",
        epilog=f"The API token is read from ${TOKEN_ENV_VAR}.",
    )
    parser.add_argument("issue_number", type=_issue_number)
    parser.add_argument("--owner", default=REPO_OWNER)
    parser.add_argument("--repo", default=REPO_NAME)
    parser.add_argument("--timeout", type=float, default=REQUEST_TIMEOUT,
                        help="Request timeout in seconds (default: none)")
    parser.add_argument("--verbose", action="store_true",
                        help="Print per-issue progress to stderr")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments; accepts argv overrides for testing."""

    parser = build_arg_parser()
    return parser.parse_args(argv)


def _secrets_path() -> Path:
    override = os.getenv("LOCAL_SECRETS_FILE")
    if override:
        return Path(override).expanduser()
    return Path(__file__).resolve().parents[2] / SECRETS_FILENAME


def token_from_secrets(path: Optional[Path] = None) -> Optional[str]:
    """Read `github_token` from the gitignored secrets file, if there is one."""
    path = path or _secrets_path()
    if not path.is_file():
        return None
    try:
        secrets = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return None
    token = secrets.get("github_token") if isinstance(secrets, dict) else None
    if isinstance(token, str) and token.strip():
        return token.strip()
    return None


def resolve_token() -> Optional[str]:
    """Prefer the environment token; fall back to local_secrets.json."""
    return os.getenv(TOKEN_ENV_VAR) or token_from_secrets()


def resolve_settings(args: argparse.Namespace) -> ScraperSettings:
    """Return immutable settings built from parsed arguments and the environment."""

    return ScraperSettings(
        issue_number=int(args.issue_number),
        token=resolve_token(),
        owner=args.owner,
        repo=args.repo,
        timeout=args.timeout,
        verbose=bool(args.verbose),
    )


__all__ = [
    "TOKEN_ENV_VAR",
    "USER_AGENT",
    "GRAPHQL_URL",
    "REPO_OWNER",
    "REPO_NAME",
    "COMMENTS_LIMIT",
    "TIMELINE_LIMIT",
    "EXCLUDED_HOSTS",
    "SECRETS_FILENAME",
    "REQUEST_TIMEOUT",
    "ScraperSettings",
    "build_arg_parser",
    "parse_args",
    "token_from_secrets",
    "resolve_token",
    "resolve_settings",
]
