from typing import Any, Dict
from urllib.parse import quote

import requests

from gh_activity.common.exceptions import DecodeError


def build_events_url(base_url: str, username: str) -> str:
    """
    Public events endpoint of a user. The login is used as a single path segment.
    """
    return f"{base_url.rstrip('/')}/users/{quote(username, safe='')}/events"


def build_query_params(page_size: int) -> Dict[str, str]:
    # forwarded verbatim, range checks are left to GitHub
    return {"per_page": str(page_size)}


def parse_json_body(response: requests.Response) -> Any:
    """
    Response body parsed as JSON, DecodeError if it is not JSON at all.
    """
    try:
        return response.json()
    except ValueError as e:
        raise DecodeError(
            f"response from {response.url} is not valid JSON (statusCode: {response.status_code})",
            cause=e,
        ) from e
