"""
Interaction Classifier

Decides, for each open pull request, whether the configured user has a
stake in it and whether the user or the PR author spoke last.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from ..models.pull_request import PullRequest
from .interaction import Interaction, latest_interaction


logger = logging.getLogger(__name__)


class EngagementStatus(Enum):
    """Who needs to respond next"""
    RESPONDED = "✅"
    AWAITING_MY_RESPONSE = "⚠️"

    @property
    def glyph(self) -> str:
        return self.value


@dataclass(frozen=True)
class ClassificationResult:
    """Engagement verdict for one pull request."""
    pull_request: PullRequest
    status: EngagementStatus
    speaker: str
    body: str
    has_reviewed: bool
    has_commented: bool
    has_been_requested_to_review: bool

    @property
    def has_snippet(self) -> bool:
        return bool(self.body)


class InteractionClassifier:
    """
    Classifies pull requests from the point of view of one user.

    A pull request is either authored by the user, in which case it is
    only reported by ``list_authored``, or a candidate for ``classify``.
    Team review requests count as requests to the user when the team name
    is one of ``team_names``.
    """

    def __init__(self, me: str, team_names: Iterable[str] = ("Backend",)):
        """
        Initialize the classifier.

        Args:
            me: Login of the user the report is for
            team_names: Names of teams whose review requests count as the user's
        """
        self.me = me
        self.team_names = frozenset(team_names)

    def list_authored(self, pull_requests: Iterable[PullRequest]) -> List[Tuple[int, str]]:
        """Return (number, permalink) of every PR authored by the user, in fetch order."""
        return [
            (pr.number, pr.permalink)
            for pr in pull_requests
            if pr.is_authored_by(self.me)
        ]

    def classify(self, pr: PullRequest) -> Optional[ClassificationResult]:
        """
        Classify a single pull request.

        Args:
            pr: Pull request to classify

        Returns:
            ClassificationResult, or None when the PR is authored by the
            user or the user has not engaged with it
        """
        if pr.is_authored_by(self.me):
            return None

        my_reviews = [review for review in pr.reviews if review.author == self.me]
        my_comments = [comment for comment in pr.comments if comment.author == self.me]
        author_comments = [comment for comment in pr.comments if comment.author == pr.author]

        has_reviewed = bool(my_reviews)
        has_commented = bool(my_comments)
        has_been_requested_to_review = any(
            request.targets(self.me, self.team_names) for request in pr.review_requests
        )

        if not (has_reviewed or has_commented or has_been_requested_to_review):
            return None

        latest_mine = latest_interaction(
            [Interaction(review.body, review.published_at) for review in my_reviews]
            + [Interaction(comment.body, comment.published_at) for comment in my_comments]
        )
        latest_author = latest_interaction(
            Interaction(comment.body, comment.published_at) for comment in author_comments
        )

        if latest_mine.is_before(latest_author):
            status, speaker, body = EngagementStatus.AWAITING_MY_RESPONSE, pr.author, latest_author.body
        else:
            status, speaker, body = EngagementStatus.RESPONDED, self.me, latest_mine.body

        logger.debug(f"PR #{pr.number}: {status.name} (reviewed={has_reviewed}, "
                     f"commented={has_commented}, requested={has_been_requested_to_review})")

        return ClassificationResult(
            pull_request=pr,
            status=status,
            speaker=speaker,
            body=body,
            has_reviewed=has_reviewed,
            has_commented=has_commented,
            has_been_requested_to_review=has_been_requested_to_review,
        )

    def classify_all(self, pull_requests: Iterable[PullRequest]) -> List[ClassificationResult]:
        """Classify every PR, keeping fetch order and dropping skipped ones."""
        results = []
        for pr in pull_requests:
            result = self.classify(pr)
            if result is not None:
                results.append(result)
        return results
