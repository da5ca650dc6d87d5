import logging
from typing import Dict, List

import requests
from pydantic import ValidationError

from gh_activity.client.utils import build_events_url, build_query_params, parse_json_body
from gh_activity.common.exceptions import DecodeError, RemoteError, TransportError
from gh_activity.core.config import GITHUB_USER_AGENT
from gh_activity.schemas.github_activity import ActivityRequest, ApiError, Event, EventList

logger = logging.getLogger(__name__)


def get_headers() -> Dict[str, str]:
    return {
        "Accept": "application/vnd.github+json",
        "User-Agent": GITHUB_USER_AGENT,
    }


def format_api_error(api_error: ApiError) -> str:
    return (
        f"error: {api_error.message} (statusCode: {api_error.status}), "
        f"check documentation: {api_error.documentation_url}"
    )


def decode_api_error(response: requests.Response) -> ApiError:
    body = parse_json_body(response)
    try:
        return ApiError.model_validate(body)
    except ValidationError as e:
        raise DecodeError(f"unexpected error body from GitHub: {e}", cause=e) from e


def decode_events(response: requests.Response) -> List[Event]:
    body = parse_json_body(response)
    try:
        return EventList.validate_python(body)
    except ValidationError as e:
        raise DecodeError(f"unexpected events body from GitHub: {e}", cause=e) from e


def fetch_user_events(request: ActivityRequest) -> List[Event]:
    """
    Fetch one page of the public events of request.username.

    Exactly one GET is sent and nothing is retried. Events come back in the
    order GitHub returns them (newest first).

    Raises TransportError when GitHub can't be reached, RemoteError when it
    answers with a non-OK status and DecodeError when a body has an
    unexpected shape.
    """
    url = build_events_url(request.base_url, request.username)
    params = build_query_params(request.page_size)
    logger.debug("GET %s params=%s", url, params)

    try:
        response = requests.get(url, headers=get_headers(), params=params, timeout=request.timeout)
    except requests.exceptions.RequestException as e:
        raise TransportError(e) from e

    if response.status_code != requests.codes.ok:
        api_error = decode_api_error(response)
        raise RemoteError(format_api_error(api_error), response.status_code, api_error)

    events = decode_events(response)
    logger.info("Fetched %d events for %s", len(events), request.username)
    return events
