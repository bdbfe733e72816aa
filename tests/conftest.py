"""
Shared fixtures for PR Inbox tests.
"""

from datetime import datetime, timezone

import pytest

from pr_inbox.models.pull_request import Comment, PullRequest, Review, ReviewRequest, ReviewState


def at(day: int, hour: int = 0) -> datetime:
    return datetime(2024, 1, day, hour, tzinfo=timezone.utc)


@pytest.fixture
def make_pr():
    """Factory for PullRequest objects with sensible defaults."""
    def _make_pr(number=10, author="alice", comments=(), reviews=(), review_requests=(), title=None):
        return PullRequest(
            number=number,
            permalink=f"https://github.com/acme/widgets/pull/{number}",
            title=title or f"Change number {number}",
            author=author,
            comments=list(comments),
            reviews=list(reviews),
            review_requests=list(review_requests),
        )
    return _make_pr


@pytest.fixture
def comment():
    def _comment(author, day, body="", hour=0):
        return Comment(author=author, published_at=at(day, hour), body=body)
    return _comment


@pytest.fixture
def review():
    def _review(author, day, body="", state=ReviewState.COMMENTED, hour=0):
        return Review(author=author, published_at=at(day, hour), state=state, body=body)
    return _review


@pytest.fixture
def user_request():
    def _user_request(login, as_code_owner=False):
        return ReviewRequest(user_login=login, as_code_owner=as_code_owner)
    return _user_request


@pytest.fixture
def team_request():
    def _team_request(name, as_code_owner=False):
        return ReviewRequest(team_name=name, as_code_owner=as_code_owner)
    return _team_request


@pytest.fixture
def repository_payload():
    """Raw GraphQL ``repository`` object as GitHub returns it."""
    return {
        "description": "Widgets service",
        "pullRequests": {
            "nodes": [
                {
                    "author": {"login": "bob"},
                    "number": 11,
                    "permalink": "https://github.com/acme/widgets/pull/11",
                    "title": "Add widget cache",
                    "comments": {"nodes": [], "pageInfo": {"endCursor": None, "hasNextPage": False}},
                    "reviews": {"nodes": [], "pageInfo": {"endCursor": None, "hasNextPage": False}},
                    "reviewRequests": {"nodes": [], "pageInfo": {"endCursor": None, "hasNextPage": False}},
                },
                {
                    "author": {"login": "alice"},
                    "number": 10,
                    "permalink": "https://github.com/acme/widgets/pull/10",
                    "title": "Fix widget sizing",
                    "comments": {
                        "nodes": [
                            {
                                "author": {"login": "alice"},
                                "publishedAt": "2024-01-02T00:00:00Z",
                                "body": "addressed your comment",
                            },
                        ],
                        "pageInfo": {"endCursor": "Y3Vyc29yOjE=", "hasNextPage": False},
                    },
                    "reviews": {
                        "nodes": [
                            {
                                "author": {"login": "bob"},
                                "publishedAt": "2024-01-01T00:00:00Z",
                                "state": "CHANGES_REQUESTED",
                                "body": "looks fine",
                            },
                        ],
                        "pageInfo": {"endCursor": "Y3Vyc29yOjI=", "hasNextPage": False},
                    },
                    "reviewRequests": {
                        "nodes": [
                            {
                                "asCodeOwner": True,
                                "requestedReviewer": {"__typename": "Team", "name": "Backend"},
                            },
                        ],
                        "pageInfo": {"endCursor": None, "hasNextPage": False},
                    },
                },
                {
                    "author": {"login": "carol"},
                    "number": 12,
                    "permalink": "https://github.com/acme/widgets/pull/12",
                    "title": "Unrelated docs",
                    "comments": {"nodes": [], "pageInfo": {"endCursor": None, "hasNextPage": False}},
                    "reviews": {"nodes": [], "pageInfo": {"endCursor": None, "hasNextPage": False}},
                    "reviewRequests": {"nodes": [], "pageInfo": {"endCursor": None, "hasNextPage": False}},
                },
            ],
            "pageInfo": {"endCursor": "cHI6MTI=", "hasNextPage": False},
        },
    }
