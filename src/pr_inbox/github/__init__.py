"""
GitHub Integration Layer

This module provides GitHub GraphQL integration for fetching a
repository's open pull requests and parsing them into models.
"""

from .client import FetchFailure, GitHubGraphQLClient
from .parser import PullRequestParser

__all__ = ['FetchFailure', 'GitHubGraphQLClient', 'PullRequestParser']
