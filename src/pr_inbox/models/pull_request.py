"""
Pull Request Data Models

GraphQL 조회 결과를 담는 데이터 모델들
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator


# 누락된 시각 대체값. 실제 시각보다 항상 이르다
EARLIEST = datetime.min.replace(tzinfo=timezone.utc)


class ReviewState(str, Enum):
    """PullRequestReviewState 값"""
    COMMENTED = "COMMENTED"
    CHANGES_REQUESTED = "CHANGES_REQUESTED"
    DISMISSED = "DISMISSED"
    PENDING = "PENDING"
    APPROVED = "APPROVED"


# APPROVED 는 조회 대상에서 제외
ENGAGED_REVIEW_STATES = (
    ReviewState.COMMENTED,
    ReviewState.CHANGES_REQUESTED,
    ReviewState.DISMISSED,
    ReviewState.PENDING,
)


@dataclass(frozen=True)
class PageInfo:
    """connection 페이지 정보 (첫 페이지만 사용)"""
    end_cursor: Optional[str] = None
    has_next_page: bool = False


@dataclass(frozen=True)
class Comment:
    """PR 이슈 코멘트"""
    author: str
    published_at: datetime
    body: str


@dataclass(frozen=True)
class Review:
    """PR 리뷰"""
    author: str
    published_at: datetime
    state: ReviewState
    body: str


@dataclass(frozen=True)
class ReviewRequest:
    """리뷰 요청. 대상은 사용자 또는 팀"""
    user_login: Optional[str] = None
    team_name: Optional[str] = None
    as_code_owner: bool = False

    def __post_init__(self):
        """데이터 검증"""
        if self.user_login is not None and self.team_name is not None:
            raise ValueError("A review request targets either a user or a team, not both")

    @property
    def is_team_request(self) -> bool:
        return self.team_name is not None

    def targets(self, login: str, team_names=()) -> bool:
        """login 본인 또는 team_names 중 하나의 팀을 대상으로 하는지 확인"""
        if self.user_login is not None and self.user_login == login:
            return True
        return self.is_team_request and self.team_name in team_names


@dataclass(frozen=True)
class PullRequest:
    """열린 Pull Request"""
    number: int
    permalink: str
    title: str
    author: str
    comments: List[Comment] = field(default_factory=list)
    reviews: List[Review] = field(default_factory=list)
    review_requests: List[ReviewRequest] = field(default_factory=list)
    comments_page: PageInfo = field(default_factory=PageInfo)
    reviews_page: PageInfo = field(default_factory=PageInfo)
    review_requests_page: PageInfo = field(default_factory=PageInfo)

    def __post_init__(self):
        """데이터 검증"""
        if self.number <= 0:
            raise ValueError("PR number must be positive")

    def is_authored_by(self, login: str) -> bool:
        return self.author == login


@dataclass(frozen=True)
class Repository:
    """저장소와 열린 PR 목록"""
    description: str
    pull_requests: List[PullRequest] = field(default_factory=list)
    pull_requests_page: PageInfo = field(default_factory=PageInfo)


# Pydantic model for query variable validation
class PullRequestQueryVariables(BaseModel):
    """GraphQL 조회 변수"""
    owner: str
    name: str
    review_author: str = Field(serialization_alias="reviewAuthor")
    pull_request_limit: int = Field(default=100, serialization_alias="pullRequestLimit")
    comment_limit: int = Field(default=10, serialization_alias="commentLimit")
    review_request_limit: int = Field(default=10, serialization_alias="reviewRequestLimit")
    review_states: List[ReviewState] = Field(
        default_factory=lambda: list(ENGAGED_REVIEW_STATES),
        serialization_alias="reviewStates",
    )

    @field_validator('owner', 'name', 'review_author')
    @classmethod
    def validate_not_blank(cls, v):
        if not v or not v.strip():
            raise ValueError('Value must not be blank')
        return v

    @field_validator('pull_request_limit', 'comment_limit', 'review_request_limit')
    @classmethod
    def validate_page_size(cls, v):
        if not 1 <= v <= 100:
            raise ValueError('Page size must be between 1 and 100')
        return v

    @field_validator('review_states')
    @classmethod
    def validate_review_states(cls, v):
        if not v:
            raise ValueError('At least one review state is required')
        if ReviewState.APPROVED in v:
            raise ValueError('Approved reviews are not an engagement signal')
        return v

    def to_graphql(self) -> dict:
        """GraphQL variables 딕셔너리로 변환"""
        return self.model_dump(mode='json', by_alias=True)
