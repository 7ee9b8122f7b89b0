"""Entry point: scan an issue and its cross-referencing issues for URLs."""

from __future__ import annotations

import sys
from typing import Dict, List, Optional

from .collectors import get_comments_for_issue, get_issue_timeline
from .config import ScraperSettings, parse_args, resolve_settings
from .extractors import collect_urls
from .models import IssueRef, IssueTimeline


def build_scan_list(root_number: int, timeline: IssueTimeline) -> List[IssueRef]:
    """Root issue first, then every cross-reference in timeline order.

    Issues referenced more than once are kept once per occurrence.
    """
    return [IssueRef(number=root_number), *timeline.references]


def scrape_urls(issues: List[IssueRef], settings: ScraperSettings) -> Dict[str, None]:
    """Fetch each issue's bodies in turn and collect their unique URLs."""
    urls: Dict[str, None] = {}
    for issue in issues:
        comments = get_comments_for_issue(issue.number, settings)
        if settings.verbose:
            print(f"[scan] #{issue.number}: {len(comments)} bodies", file=sys.stderr)
        collect_urls(comments, urls)
    return urls


def run(settings: ScraperSettings) -> List[str]:
    """Print the root title, the scan count, then each URL; return the URLs."""
    timeline = get_issue_timeline(settings.issue_number, settings)
    issues = build_scan_list(settings.issue_number, timeline)

    print(f"title: {timeline.title}")
    print(f"parsing {len(issues)} issues for URLs")

    urls = list(scrape_urls(issues, settings))
    for url in urls:
        print(url)
    return urls


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point for the issue URL scraper."""

    args = parse_args(argv)
    run(resolve_settings(args))


__all__ = ["build_scan_list", "scrape_urls", "run", "main"]
