from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional

from gh_activity.schemas.github_activity import Event, User

UNKNOWN_EVENT_LINE = "- ..."


class EventType(str, Enum):
    push = "PushEvent"
    pull_request = "PullRequestEvent"
    watch = "WatchEvent"
    issues = "IssuesEvent"
    fork = "ForkEvent"
    issue_comment = "IssueCommentEvent"


def _login(user: Optional[User]) -> str:
    return user.login if user else ""


def extract_line_from_push_event(event: Event) -> str:
    return f"- Pushed {len(event.payload.commits)} commits to {event.repo.name}"


def extract_line_from_pull_request_event(event: Event) -> str:
    pull_request = event.payload.pull_request
    author = _login(pull_request.user if pull_request else None)
    return f"- Pulled request from {author} branch into {event.repo.name}"


def extract_line_from_watch_event(event: Event) -> str:
    return f"- Starred {event.repo.name}"


def extract_line_from_issues_event(event: Event) -> str:
    return f"- Opened a new issue in {event.repo.name}"


def extract_line_from_fork_event(event: Event) -> str:
    return f"- Forked {event.repo.name}"


def extract_line_from_issue_comment_event(event: Event) -> str:
    issue = event.payload.issue
    author = _login(issue.user if issue else None)
    return f"- {author} commented on an issue in the {event.repo.name}"


EXTRACTORS: Dict[EventType, Callable[[Event], str]] = {
    EventType.push: extract_line_from_push_event,
    EventType.pull_request: extract_line_from_pull_request_event,
    EventType.watch: extract_line_from_watch_event,
    EventType.issues: extract_line_from_issues_event,
    EventType.fork: extract_line_from_fork_event,
    EventType.issue_comment: extract_line_from_issue_comment_event,
}


def extract_line_from_event(event: Event) -> str:
    """
    One display line for an event, "- ..." for event types without a summary.
    """
    try:
        event_type = EventType(event.type)
    except ValueError:
        return UNKNOWN_EVENT_LINE
    return EXTRACTORS[event_type](event)


def extract_lines_from_events(events: Iterable[Event]) -> List[str]:
    return [extract_line_from_event(event) for event in events]
