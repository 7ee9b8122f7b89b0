"""Typed views of the two GraphQL responses the scraper consumes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


class ResponseShapeError(ValueError):
    """Raised when a GraphQL response does not have the expected structure."""


@dataclass(frozen=True)
class IssueRef:
    """An issue to scan; the root issue carries no title."""

    number: int
    title: Optional[str] = None


@dataclass(frozen=True)
class IssueTimeline:
    """Root issue title plus every cross-reference found in its timeline."""

    title: str
    references: List[IssueRef] = field(default_factory=list)


@dataclass(frozen=True)
class IssueComments:
    body: str
    comments: List[str] = field(default_factory=list)

    def bodies(self) -> List[str]:
        """Issue body first, then comment bodies in creation order."""
        return [self.body, *self.comments]


def _require(obj: Any, key: str, kind: type, where: str) -> Any:
    if not isinstance(obj, dict):
        raise ResponseShapeError(f"{where}: expected an object, got {type(obj).__name__}")
    value = obj.get(key)
    if not isinstance(value, kind):
        raise ResponseShapeError(f"{where}.{key}: expected {kind.__name__}, got {type(value).__name__}")
    return value


def _issue_node(data: Dict[str, Any]) -> Dict[str, Any]:
    repository = _require(data, "repository", dict, "data")
    return _require(repository, "issue", dict, "repository")


def _cross_reference(node: Any) -> Optional[IssueRef]:
    """Map a timeline node to an IssueRef when its source is an issue with a number."""
    if not isinstance(node, dict):
        return None
    source = node.get("source")
    if not isinstance(source, dict):
        return None
    number = source.get("number")
    # bool is an int subclass; zero is not a valid issue number
    if not isinstance(number, int) or isinstance(number, bool) or not number:
        return None
    title = source.get("title")
    return IssueRef(number=number, title=title if isinstance(title, str) else None)


def decode_timeline(data: Dict[str, Any]) -> IssueTimeline:
    """Decode the title-and-timeline query response."""
    issue = _issue_node(data)
    title = _require(issue, "title", str, "issue")
    timeline = _require(issue, "timelineItems", dict, "issue")
    nodes = _require(timeline, "nodes", list, "issue.timelineItems")

    references = []
    for node in nodes:
        ref = _cross_reference(node)
        if ref is not None:
            references.append(ref)
    return IssueTimeline(title=title, references=references)


def decode_comments(data: Dict[str, Any]) -> IssueComments:
    """Decode the body-plus-comments query response."""
    issue = _issue_node(data)
    body = _require(issue, "body", str, "issue")
    comments = _require(issue, "comments", dict, "issue")
    nodes = _require(comments, "nodes", list, "issue.comments")
    return IssueComments(
        body=body,
        comments=[_require(node, "body", str, "issue.comments.nodes[]") for node in nodes],
    )


__all__ = [
    "ResponseShapeError",
    "IssueRef",
    "IssueTimeline",
    "IssueComments",
    "decode_timeline",
    "decode_comments",
]
