"""
Pytest configuration: project root on sys.path and shared webhook payloads.
"""

import sys
from pathlib import Path
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parent.parent

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def build_pr_payload(
    *,
    action: str = "opened",
    state: str = "open",
    title: str | None = "Implement login flow",
    body: str | None = "See https://example.com/design for details",
    sha: str = "abc123",
) -> dict[str, Any]:
    return {
        "action": action,
        "sender": {"login": "octocat", "id": 1, "type": "User"},
        "installation": {"id": 99},
        "repository": {
            "id": 123456,
            "name": "hello-world",
            "full_name": "octocat/hello-world",
            "owner": {"login": "octocat"},
        },
        "pull_request": {
            "number": 42,
            "state": state,
            "title": title,
            "body": body,
            "head": {"sha": sha},
        },
    }


@pytest.fixture
def pr_payload() -> dict[str, Any]:
    """A pull request payload that passes every default check."""
    return build_pr_payload()


@pytest.fixture
def make_pr_payload():
    """Factory for pull request payloads with overridable fields."""
    return build_pr_payload
