"""
GitHub Integration Layer

This module provides GitHub API integration for reading pull request
state and mutating pull request labels.
"""

from .client import GitHubAPIError, GitHubClient, RateLimitExceeded
from .parser import PRFileParser
from .gateway import PullRequestGateway

__all__ = ['GitHubAPIError', 'GitHubClient', 'RateLimitExceeded', 'PRFileParser', 'PullRequestGateway']
