"""
GitHub GraphQL Client

Handles GitHub API authentication and communication.
Executes the open pull request query and surfaces every upstream
problem as a single FetchFailure.
"""

import logging
from typing import Any, Dict, Optional
from datetime import datetime
import requests

from ..models.pull_request import PullRequestQueryVariables
from .queries import OPEN_PULL_REQUESTS_QUERY


logger = logging.getLogger(__name__)


class FetchFailure(Exception):
    """Network, authentication or query error from the GitHub API"""
    def __init__(self, message: str, status_code: Optional[int] = None, response_data: Optional[Dict] = None):
        super().__init__(message)
        self.status_code = status_code
        self.response_data = response_data


class GitHubGraphQLClient:
    """
    GitHub GraphQL API client with bearer token authentication.

    Failed requests are never retried: any error is raised as
    FetchFailure and the caller decides what to do with it.
    """

    def __init__(
        self,
        token: Optional[str],
        graphql_url: str = "https://api.github.com/graphql",
        timeout_seconds: int = 30,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize GitHub GraphQL client.

        Args:
            token: GitHub personal access token (may be empty; GitHub rejects the request)
            graphql_url: GraphQL endpoint URL
            timeout_seconds: Timeout for the HTTP request
            session: Optional pre-built session, mainly for tests
        """
        self.token = token or ""
        self.graphql_url = graphql_url
        self.timeout_seconds = timeout_seconds
        self.session = session or self._create_session()
        self.rate_limit_remaining: Optional[int] = None
        self.rate_limit_reset: Optional[datetime] = None

    @classmethod
    def from_config(cls, github_config) -> "GitHubGraphQLClient":
        return cls(
            token=github_config.token,
            graphql_url=github_config.graphql_url,
            timeout_seconds=github_config.timeout_seconds,
        )

    def _create_session(self) -> requests.Session:
        """Create requests session with authentication headers."""
        session = requests.Session()
        session.headers.update({
            'Authorization': f'Bearer {self.token}',
            'Content-Type': 'application/json',
            'User-Agent': 'PR-Inbox/1.0'
        })
        return session

    def __enter__(self) -> "GitHubGraphQLClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def _update_rate_limit(self, response: requests.Response) -> None:
        """Update rate limit information from response headers."""
        if 'X-RateLimit-Remaining' in response.headers:
            self.rate_limit_remaining = int(response.headers['X-RateLimit-Remaining'])

        if 'X-RateLimit-Reset' in response.headers:
            reset_timestamp = int(response.headers['X-RateLimit-Reset'])
            self.rate_limit_reset = datetime.fromtimestamp(reset_timestamp)

        if self.rate_limit_remaining is not None:
            logger.debug(f"GraphQL rate limit remaining: {self.rate_limit_remaining} (resets {self.rate_limit_reset})")

    def execute(self, query: str, variables: Dict[str, Any]) -> Dict[str, Any]:
        """
        Execute a GraphQL query.

        Args:
            query: GraphQL document
            variables: Query variables

        Returns:
            The decoded ``data`` object of the response

        Raises:
            FetchFailure: For transport, HTTP, decoding or GraphQL errors
        """
        try:
            response = self.session.post(
                self.graphql_url,
                json={"query": query, "variables": variables},
                timeout=self.timeout_seconds,
            )
        except requests.RequestException as e:
            logger.error(f"GraphQL request failed: {e}")
            raise FetchFailure(f"Request failed: {e}") from e

        self._update_rate_limit(response)

        try:
            payload = response.json() if response.content else {}
        except ValueError as e:
            raise FetchFailure(
                f"GitHub API returned a non-JSON response ({response.status_code})",
                status_code=response.status_code,
            ) from e

        if not response.ok:
            message = payload.get('message', 'Unknown error') if isinstance(payload, dict) else 'Unknown error'
            raise FetchFailure(
                f"GitHub API error: {response.status_code} - {message}",
                status_code=response.status_code,
                response_data=payload,
            )

        if not isinstance(payload, dict):
            raise FetchFailure("Unexpected GraphQL response shape", status_code=response.status_code,
                               response_data={'payload': payload})

        errors = payload.get('errors')
        if errors:
            messages = '; '.join(error.get('message', str(error)) for error in errors)
            raise FetchFailure(
                f"GraphQL query failed: {messages}",
                status_code=response.status_code,
                response_data=payload,
            )

        data = payload.get('data')
        if data is None:
            raise FetchFailure("GraphQL response contained no data", status_code=response.status_code,
                               response_data=payload)
        return data

    def fetch_open_pull_requests(self, variables: PullRequestQueryVariables) -> Dict[str, Any]:
        """
        Fetch the first page of open pull requests of a repository.

        Args:
            variables: Validated query variables

        Returns:
            Raw ``repository`` object from the GraphQL response
        """
        logger.info(f"Fetching open PRs for {variables.owner}/{variables.name}")

        data = self.execute(OPEN_PULL_REQUESTS_QUERY, variables.to_graphql())
        repository = data.get('repository')
        if repository is None:
            raise FetchFailure(f"Repository not found: {variables.owner}/{variables.name}", response_data=data)
        return repository
