"""
Pull Request Parser

Parses the GitHub GraphQL repository payload into structured models.
Null connections, nodes and authors are treated as empty values.
"""

import logging
from typing import Dict, List, Optional
from datetime import datetime

from ..models.pull_request import (
    EARLIEST,
    Comment,
    PageInfo,
    PullRequest,
    Repository,
    Review,
    ReviewRequest,
    ReviewState,
)


logger = logging.getLogger(__name__)


def parse_datetime(value: Optional[str]) -> datetime:
    """Parse a GitHub DateTime scalar into an aware datetime."""
    # Pending reviews are not published yet
    if value is None:
        return EARLIEST
    return datetime.fromisoformat(value.replace('Z', '+00:00'))


class PullRequestParser:
    """
    Parser for the open pull request query.

    Converts the raw ``repository`` object into a Repository with
    PullRequest, Comment, Review and ReviewRequest children.
    """

    def parse_repository(self, repository_data: Dict) -> Repository:
        """
        Parse repository data into a Repository object.

        Args:
            repository_data: ``repository`` object from the GraphQL response

        Returns:
            Structured Repository object
        """
        connection = repository_data.get('pullRequests') or {}
        pull_requests = [
            self.parse_pull_request(node)
            for node in self._nodes(connection)
        ]
        page_info = self._parse_page_info(connection)

        logger.info(f"Parsed {len(pull_requests)} open PRs")
        if page_info.has_next_page:
            logger.warning(
                f"More than {len(pull_requests)} open PRs exist; only the first page is considered"
            )

        return Repository(
            description=repository_data.get('description') or "",
            pull_requests=pull_requests,
            pull_requests_page=page_info,
        )

    def parse_pull_request(self, pr_data: Dict) -> PullRequest:
        """
        Parse a single pull request node.

        Args:
            pr_data: PullRequest node

        Returns:
            Structured PullRequest object
        """
        comments = pr_data.get('comments') or {}
        reviews = pr_data.get('reviews') or {}
        review_requests = pr_data.get('reviewRequests') or {}

        return PullRequest(
            number=int(pr_data['number']),
            permalink=pr_data.get('permalink') or "",
            title=pr_data.get('title') or "",
            author=self._login(pr_data.get('author')),
            comments=[self._parse_comment(node) for node in self._nodes(comments)],
            reviews=[self._parse_review(node) for node in self._nodes(reviews)],
            review_requests=[self._parse_review_request(node) for node in self._nodes(review_requests)],
            comments_page=self._parse_page_info(comments),
            reviews_page=self._parse_page_info(reviews),
            review_requests_page=self._parse_page_info(review_requests),
        )

    def _parse_comment(self, node: Dict) -> Comment:
        return Comment(
            author=self._login(node.get('author')),
            published_at=parse_datetime(node.get('publishedAt')),
            body=node.get('body') or "",
        )

    def _parse_review(self, node: Dict) -> Review:
        return Review(
            author=self._login(node.get('author')),
            published_at=parse_datetime(node.get('publishedAt')),
            state=ReviewState(node['state']),
            body=node.get('body') or "",
        )

    def _parse_review_request(self, node: Dict) -> ReviewRequest:
        """
        Parse a review request node.

        The requested reviewer is a User or a Team. Other reviewer kinds
        (bots, mannequins) and deleted reviewers yield a request with no target.
        """
        reviewer = node.get('requestedReviewer') or {}
        typename = reviewer.get('__typename')
        as_code_owner = bool(node.get('asCodeOwner'))

        if typename == 'User' or (typename is None and reviewer.get('login')):
            return ReviewRequest(user_login=reviewer.get('login'), as_code_owner=as_code_owner)
        if typename == 'Team' or (typename is None and reviewer.get('name')):
            return ReviewRequest(team_name=reviewer.get('name'), as_code_owner=as_code_owner)
        return ReviewRequest(as_code_owner=as_code_owner)

    @staticmethod
    def _nodes(connection: Dict) -> List[Dict]:
        return [node for node in (connection.get('nodes') or []) if node]

    @staticmethod
    def _login(actor: Optional[Dict]) -> str:
        # Deleted accounts come back as a null author
        return (actor or {}).get('login') or ""

    @staticmethod
    def _parse_page_info(connection: Dict) -> PageInfo:
        page_info = connection.get('pageInfo') or {}
        return PageInfo(
            end_cursor=page_info.get('endCursor'),
            has_next_page=bool(page_info.get('hasNextPage')),
        )
