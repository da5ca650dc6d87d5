import logging
import sys
from typing import Optional, TextIO

from gh_activity.client.github_client import fetch_user_events
from gh_activity.extractor.github_activity_extractor import extract_lines_from_events
from gh_activity.schemas.github_activity import ActivityRequest

logger = logging.getLogger(__name__)

OUTPUT_HEADER = "Output:"


def no_contributions_message(username: str) -> str:
    return (
        f"No contributions found for the GitHub user '{username}'. "
        "It appears they have not made any public contributions recently or their activity is private."
    )


def report_user_activity(request: ActivityRequest, out: Optional[TextIO] = None) -> int:
    """
    Fetch the activity of request.username and write one line per event to out.
    Returns the number of events. Fetch errors propagate before anything is written.
    """
    if out is None:
        out = sys.stdout
    events = fetch_user_events(request)
    lines = extract_lines_from_events(events)

    print(OUTPUT_HEADER, file=out)
    if not lines:
        logger.info("No events returned for %s", request.username)
        print(no_contributions_message(request.username), file=out)
        return 0

    for line in lines:
        print(line, file=out)
    return len(lines)
