"""Fetch issue titles, cross-reference timelines, and comment bodies."""

from __future__ import annotations

from typing import Any, Dict, List

from .config import COMMENTS_LIMIT, TIMELINE_LIMIT, ScraperSettings
from .http_client import run_graphql_query
from .models import IssueTimeline, decode_comments, decode_timeline

ISSUE_TIMELINE_QUERY = """
query IssueTimeline($owner:String!, $name:String!, $number:Int!) {
  repository(owner:$owner, name:$name) {
    issue(number:$number) {
      title
      timelineItems(first:%d) {
        nodes {
          ... on CrossReferencedEvent {
            source {
              ... on Issue {
                number
                title
              }
            }
          }
        }
      }
    }
  }
}
""" % TIMELINE_LIMIT

ISSUE_COMMENTS_QUERY = """
query IssueComments($owner:String!, $name:String!, $number:Int!) {
  repository(owner:$owner, name:$name) {
    issue(number:$number) {
      body
      comments(first:%d) {
        nodes {
          body
        }
      }
    }
  }
}
""" % COMMENTS_LIMIT


def _query_issue(query: str, number: int, settings: ScraperSettings) -> Dict[str, Any]:
    variables = {"owner": settings.owner, "name": settings.repo, "number": number}
    return run_graphql_query(
        query,
        variables,
        settings.token,
        url=settings.graphql_url,
        timeout=settings.timeout,
    )


def get_issue_timeline(number: int, settings: ScraperSettings) -> IssueTimeline:
    """Return the issue title and the issues that cross-reference it."""
    return decode_timeline(_query_issue(ISSUE_TIMELINE_QUERY, number, settings))


def get_comments_for_issue(number: int, settings: ScraperSettings) -> List[str]:
    """Return the issue body followed by its first 100 comment bodies."""
    return decode_comments(_query_issue(ISSUE_COMMENTS_QUERY, number, settings)).bodies()


__all__ = [
    "ISSUE_TIMELINE_QUERY",
    "ISSUE_COMMENTS_QUERY",
    "get_issue_timeline",
    "get_comments_for_issue",
]
