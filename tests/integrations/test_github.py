"""Tests for GitHub issue creation."""

import json

import httpx
import pytest

from license_checker.exceptions import IssueCreationError
from license_checker.integrations.github import (
    ISSUE_LABELS,
    CreatedIssue,
    GitHubIssueCreator,
    issue_body,
    issue_title,
)


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


class TestIssueText:
    """Tests for issue title and body helpers."""

    def test_title(self) -> None:
        """Test the title includes the violation count."""
        assert issue_title(3) == "License Compliance Issue: 3 violation(s) detected"

    def test_body_appends_footer(self) -> None:
        """Test the body is the report followed by a separator and note."""
        body = issue_body("# License Compliance Report\n\n")

        assert body.startswith("# License Compliance Report\n\n---\n")
        assert body.endswith(
            "*This issue was automatically created by the License Checker action.*"
        )


class TestGitHubIssueCreator:
    """Tests for GitHubIssueCreator class."""

    def test_creates_issue(self) -> None:
        """Test request shape and returned issue."""
        captured: dict = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["url"] = str(request.url)
            captured["auth"] = request.headers["Authorization"]
            captured["payload"] = json.loads(request.content)
            return httpx.Response(
                201,
                json={"number": 42, "html_url": "https://github.com/o/r/issues/42"},
            )

        creator = GitHubIssueCreator(
            "secret", "o/r", api_url="https://api.example.com/", client=_client(handler)
        )

        issue = creator.create_issue("title", "body")

        assert issue == CreatedIssue(number=42, url="https://github.com/o/r/issues/42")
        assert captured["url"] == "https://api.example.com/repos/o/r/issues"
        assert captured["auth"] == "Bearer secret"
        assert captured["payload"] == {
            "title": "title",
            "body": "body",
            "labels": ISSUE_LABELS,
        }

    def test_missing_token(self) -> None:
        """Test that a missing token fails before any request."""
        creator = GitHubIssueCreator(None, "o/r")

        with pytest.raises(IssueCreationError, match="token is required"):
            creator.create_issue("t", "b")

    @pytest.mark.parametrize("repository", [None, "", "no-slash"])
    def test_invalid_repository(self, repository) -> None:
        """Test that the repository must be owner/name."""
        creator = GitHubIssueCreator("secret", repository)

        with pytest.raises(IssueCreationError, match="owner/name"):
            creator.create_issue("t", "b")

    def test_http_error_status(self) -> None:
        """Test that an error status becomes IssueCreationError."""
        creator = GitHubIssueCreator(
            "secret",
            "o/r",
            client=_client(lambda request: httpx.Response(403, json={})),
        )

        with pytest.raises(IssueCreationError, match="403"):
            creator.create_issue("t", "b")

    def test_transport_error(self) -> None:
        """Test that network failures become IssueCreationError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        creator = GitHubIssueCreator("secret", "o/r", client=_client(handler))

        with pytest.raises(IssueCreationError, match="Failed to create issue"):
            creator.create_issue("t", "b")

    def test_unexpected_payload(self) -> None:
        """Test that a response without number/html_url is rejected."""
        creator = GitHubIssueCreator(
            "secret",
            "o/r",
            client=_client(lambda request: httpx.Response(201, json={"id": 1})),
        )

        with pytest.raises(IssueCreationError, match="Unexpected issue payload"):
            creator.create_issue("t", "b")

    def test_invalid_json(self) -> None:
        """Test that a non-JSON body is rejected."""
        creator = GitHubIssueCreator(
            "secret",
            "o/r",
            client=_client(lambda request: httpx.Response(201, text="not json")),
        )

        with pytest.raises(IssueCreationError, match="Invalid response"):
            creator.create_issue("t", "b")
