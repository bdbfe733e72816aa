"""
PR Inbox API

Main interface that runs the whole pass: fetch the open pull requests,
parse them, classify them and hand back a report ready for printing.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .config import AppConfig
from .github.client import GitHubGraphQLClient
from .github.parser import PullRequestParser
from .models.pull_request import PullRequestQueryVariables, Repository
from .review.classifier import ClassificationResult, InteractionClassifier


logger = logging.getLogger(__name__)


@dataclass
class InboxReport:
    """Result of one inbox run."""
    description: str
    authored: List[Tuple[int, str]] = field(default_factory=list)
    engaged: List[ClassificationResult] = field(default_factory=list)


class PRInboxAPI:
    """
    Main PR Inbox interface.

    Orchestrates the run:
    1. Build and validate the query variables
    2. Fetch the repository's open pull requests (one request)
    3. Parse the response into models
    4. Split into authored and engaged pull requests
    """

    def __init__(self, config: AppConfig, client: Optional[GitHubGraphQLClient] = None):
        """
        Initialize PR Inbox API.

        Args:
            config: Validated application configuration
            client: Optional GraphQL client, built from config when omitted
        """
        self.config = config
        self.client = client or GitHubGraphQLClient.from_config(config.github)
        self.parser = PullRequestParser()
        self.classifier = InteractionClassifier(
            me=config.inbox.me,
            team_names=config.inbox.review_teams,
        )

    def query_variables(self) -> PullRequestQueryVariables:
        return PullRequestQueryVariables(
            owner=self.config.repository.owner,
            name=self.config.repository.name,
            review_author=self.config.inbox.me,
            pull_request_limit=self.config.inbox.pull_request_limit,
            comment_limit=self.config.inbox.comment_limit,
            review_request_limit=self.config.inbox.review_request_limit,
        )

    def fetch_repository(self) -> Repository:
        """
        Fetch and parse the open pull requests.

        Raises:
            FetchFailure: When the GitHub request fails
        """
        repository_data = self.client.fetch_open_pull_requests(self.query_variables())
        return self.parser.parse_repository(repository_data)

    def build_report(self, repository: Repository) -> InboxReport:
        """Classify every fetched pull request into the two report sections."""
        authored = self.classifier.list_authored(repository.pull_requests)
        engaged = self.classifier.classify_all(repository.pull_requests)

        logger.info(
            f"{self.config.repository.full_name}: {len(authored)} authored, "
            f"{len(engaged)} engaged of {len(repository.pull_requests)} open PRs"
        )

        return InboxReport(
            description=repository.description,
            authored=authored,
            engaged=engaged,
        )

    def run(self) -> InboxReport:
        return self.build_report(self.fetch_repository())

    def close(self) -> None:
        self.client.close()
