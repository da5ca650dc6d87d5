import logging
from datetime import datetime
from typing import Any, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    ValidationInfo,
    field_validator,
)

from gh_activity.core.config import (
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_RESULTS_PER_PAGE,
    GITHUB_API_BASE_URL,
)

logger = logging.getLogger(__name__)


def _default_on_error(model, value: Any, handler, info: ValidationInfo) -> Any:
    # for fields nothing renders: a bad value falls back to the field default
    try:
        return handler(value)
    except ValidationError as e:
        logger.debug("Ignoring undecodable %s.%s: %s", model.__name__, info.field_name, e)
        return model.model_fields[info.field_name].get_default(call_default_factory=True)


class GitHubModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)


class ActivityRequest(GitHubModel):
    """
    One query against the public events endpoint of a user.
    page_size is forwarded as-is, GitHub truncates anything above 100.
    """
    username: str = Field(min_length=1)
    page_size: int = DEFAULT_RESULTS_PER_PAGE
    base_url: str = GITHUB_API_BASE_URL
    timeout: float = DEFAULT_REQUEST_TIMEOUT


class User(GitHubModel):
    id: Optional[int] = None
    login: str
    node_id: Optional[str] = None
    display_login: Optional[str] = None
    gravatar_id: Optional[str] = None
    url: Optional[str] = None
    avatar_url: Optional[str] = None

    @field_validator("id", "node_id", "display_login", "gravatar_id", "url", "avatar_url", mode="wrap")
    @classmethod
    def tolerate_profile(cls, value, handler, info):
        return _default_on_error(cls, value, handler, info)


class Organization(GitHubModel):
    id: int
    login: str
    gravatar_id: Optional[str] = None
    url: Optional[str] = None
    avatar_url: Optional[str] = None


class RepoRef(GitHubModel):
    id: int
    name: str
    url: Optional[str] = None


class Author(GitHubModel):
    name: Optional[str] = None
    email: Optional[str] = None


class Commit(GitHubModel):
    sha: Optional[str] = None
    author: Optional[Author] = None
    message: Optional[str] = None
    distinct: bool = False
    url: Optional[str] = None

    @field_validator("sha", "author", "message", "distinct", "url", mode="wrap")
    @classmethod
    def tolerate_details(cls, value, handler, info):
        # only the number of commits is rendered
        return _default_on_error(cls, value, handler, info)


class PullRequestRef(GitHubModel):
    user: Optional[User] = None


class IssueRef(GitHubModel):
    user: Optional[User] = None


class Payload(GitHubModel):
    action: Optional[str] = None
    repository_id: Optional[int] = None
    push_id: Optional[int] = None
    size: Optional[int] = None
    distinct_size: Optional[int] = None
    ref: Optional[str] = None
    head: Optional[str] = None
    before: Optional[str] = None
    commits: List[Commit] = Field(default_factory=list)
    issue: Optional[IssueRef] = None
    pull_request: Optional[PullRequestRef] = None

    @field_validator(
        "action", "repository_id", "push_id", "size", "distinct_size", "ref", "head", "before",
        mode="wrap",
    )
    @classmethod
    def tolerate_unrendered(cls, value, handler, info):
        return _default_on_error(cls, value, handler, info)


class Event(GitHubModel):
    id: str
    type: str
    actor: User
    repo: RepoRef
    payload: Payload = Field(default_factory=Payload)
    public: bool = False
    created_at: Optional[datetime] = None
    org: Optional[Organization] = None

    @field_validator("payload", mode="wrap")
    @classmethod
    def tolerate_missing_payload(cls, value, handler):
        # a payload that is not an object carries nothing to render
        try:
            return handler(value)
        except ValidationError as e:
            if isinstance(value, dict):
                raise
            logger.debug("Ignoring non-object payload: %s", e)
            return Payload()

    @field_validator("public", "created_at", "org", mode="wrap")
    @classmethod
    def tolerate_metadata(cls, value, handler, info):
        return _default_on_error(cls, value, handler, info)


class ApiError(GitHubModel):
    message: str = ""
    documentation_url: str = ""
    status: str = ""


EventList = TypeAdapter(List[Event])
