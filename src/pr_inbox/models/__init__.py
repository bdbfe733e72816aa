"""
Data Models

PR Inbox 의 핵심 데이터 모델들
"""

from .pull_request import (
    ENGAGED_REVIEW_STATES,
    Comment,
    PageInfo,
    PullRequest,
    PullRequestQueryVariables,
    Repository,
    Review,
    ReviewRequest,
    ReviewState,
)

__all__ = [
    "ENGAGED_REVIEW_STATES",
    "Comment",
    "PageInfo",
    "PullRequest",
    "PullRequestQueryVariables",
    "Repository",
    "Review",
    "ReviewRequest",
    "ReviewState",
]
