import json

import pytest
import requests


def _make_response(status_code, body, url="https://api.github.com/users/octocat/events?per_page=30"):
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response.encoding = "utf-8"
    if isinstance(body, (bytes, str)):
        response._content = body.encode("utf-8") if isinstance(body, str) else body
    else:
        response._content = json.dumps(body).encode("utf-8")
    return response


class FakeGitHub:
    def __init__(self):
        self.calls = []
        self.response = _make_response(200, [])
        self.error = None

    def get(self, url, headers=None, params=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "params": params, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response

    def reply(self, status_code, body):
        self.response = _make_response(status_code, body)


@pytest.fixture
def github_api(monkeypatch):
    fake = FakeGitHub()
    monkeypatch.setattr(requests, "get", fake.get)
    return fake


def _event(event_type, repo="octocat/Hello-World", payload=None, event_id="1"):
    return {
        "id": event_id,
        "type": event_type,
        "actor": {
            "id": 583231,
            "login": "octocat",
            "display_login": "octocat",
            "gravatar_id": "",
            "url": "https://api.github.com/users/octocat",
            "avatar_url": "https://avatars.githubusercontent.com/u/583231?",
        },
        "repo": {
            "id": 1296269,
            "name": repo,
            "url": f"https://api.github.com/repos/{repo}",
        },
        "payload": payload if payload is not None else {},
        "public": True,
        "created_at": "2024-05-01T12:00:00Z",
    }


@pytest.fixture
def make_event():
    return _event


@pytest.fixture
def sample_feed():
    commit = {
        "sha": "6dcb09b5b57875f334f61aebed695e2e4193db5e",
        "author": {"name": "Mona", "email": "mona@example.com"},
        "message": "Fix all the bugs",
        "distinct": True,
        "url": "https://api.github.com/repos/octocat/Hello-World/commits/6dcb09b",
    }
    return [
        _event("PushEvent", payload={
            "repository_id": 1296269, "push_id": 10115855396, "size": 2, "distinct_size": 2,
            "ref": "refs/heads/main", "head": "7a8f3ac", "before": "883efe0",
            "commits": [commit, dict(commit, sha="7a8f3ac80e2ad2f6842cb86f576d4bfe2c03e300")],
        }, event_id="5"),
        _event("PullRequestEvent", repo="octo-org/octo-repo", payload={
            "action": "opened", "number": 2,
            "pull_request": {"id": 1, "user": {"id": 1, "login": "hubot"}},
        }, event_id="4"),
        _event("WatchEvent", repo="torvalds/linux", payload={"action": "started"}, event_id="3"),
        _event("IssueCommentEvent", payload={
            "action": "created",
            "issue": {"number": 1347, "user": {"id": 2, "login": "monalisa"}},
            "comment": {"id": 3, "body": "Me too"},
        }, event_id="2"),
        _event("CreateEvent", payload={"ref": "v1.0", "ref_type": "tag"}, event_id="1"),
    ]
