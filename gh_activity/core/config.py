import os
from dotenv import load_dotenv

from gh_activity.common.exceptions import ConfigError

load_dotenv()

GITHUB_API_BASE_URL = os.getenv("GITHUB_API_BASE_URL", "https://api.github.com")
GITHUB_USER_AGENT = os.getenv("GITHUB_USER_AGENT", "gh-activity/0.1.0")

DEFAULT_REQUEST_TIMEOUT = 20.0
DEFAULT_RESULTS_PER_PAGE = 30
MAX_RESULTS_PER_PAGE = 100


def get_request_timeout() -> float:
    """
    Seconds to wait for GitHub, from GITHUB_REQUEST_TIMEOUT when it is set.
    Read on every call so that a bad value surfaces as a ConfigError to the CLI.
    """
    raw = os.getenv("GITHUB_REQUEST_TIMEOUT")
    if not raw:
        return DEFAULT_REQUEST_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigError(f"GITHUB_REQUEST_TIMEOUT must be a number of seconds, got {raw!r}") from None
    if timeout <= 0:
        raise ConfigError(f"GITHUB_REQUEST_TIMEOUT must be positive, got {raw!r}")
    return timeout
