"""Integrations with the hosting CI platform."""

from license_checker.integrations.github import (
    CreatedIssue,
    GitHubIssueCreator,
    IssueCreator,
    issue_body,
    issue_title,
)
from license_checker.integrations.outputs import ActionOutputs

__all__ = [
    "ActionOutputs",
    "CreatedIssue",
    "GitHubIssueCreator",
    "IssueCreator",
    "issue_body",
    "issue_title",
]
