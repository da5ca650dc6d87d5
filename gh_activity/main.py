import argparse
import logging
import sys
from typing import List, Optional

from gh_activity.common.exceptions import ActivityError, UsageError
from gh_activity.core.config import DEFAULT_RESULTS_PER_PAGE, MAX_RESULTS_PER_PAGE, get_request_timeout
from gh_activity.pipeline.github_pipeline import report_user_activity
from gh_activity.schemas.github_activity import ActivityRequest

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gh-activity",
        description="Print a summary of the recent public activity of a GitHub user.",
    )
    parser.add_argument("--user", default="", help="The handle for the GitHub user account")
    parser.add_argument(
        "--results-per-page",
        type=int,
        default=DEFAULT_RESULTS_PER_PAGE,
        help=f"The number of results per page (max {MAX_RESULTS_PER_PAGE})",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )


def build_request(args: argparse.Namespace) -> ActivityRequest:
    if not args.user:
        raise UsageError("github username is required to fetch user activity")
    if not 1 <= args.results_per_page <= MAX_RESULTS_PER_PAGE:
        logger.warning(
            "--results-per-page %d is outside 1..%d, GitHub decides how many events to return",
            args.results_per_page, MAX_RESULTS_PER_PAGE,
        )
    return ActivityRequest(
        username=args.user,
        page_size=args.results_per_page,
        timeout=get_request_timeout(),
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        request = build_request(args)
    except UsageError as e:
        logger.info(str(e))
        return 0
    except ActivityError as e:
        logger.error(str(e))
        return 1

    try:
        report_user_activity(request)
    except ActivityError as e:
        logger.error(str(e))
        return 1
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
