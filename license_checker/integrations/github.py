"""GitHub issue creation for license violations."""

from __future__ import annotations

from typing import Any, NamedTuple, Optional, Protocol

import httpx
import structlog

from license_checker.exceptions import IssueCreationError

log = structlog.get_logger("license_checker.github")

ISSUE_LABELS = ["security", "license-compliance"]
ISSUE_FOOTER = (
    "\n\n---\n*This issue was automatically created by the License Checker action.*"
)


class CreatedIssue(NamedTuple):
    """An issue created in the host repository.

    Attributes:
        number: Issue number.
        url: Browser URL of the issue.
    """

    number: int
    url: str


class IssueCreator(Protocol):
    """Creates a tracked issue in the host repository."""

    def create_issue(self, title: str, body: str) -> CreatedIssue:
        """Create an issue.

        Raises:
            IssueCreationError: If the issue cannot be created.
        """
        ...


def issue_title(violations_count: int) -> str:
    """Title of the tracking issue for a number of violations."""
    return f"License Compliance Issue: {violations_count} violation(s) detected"


def issue_body(table_report: str) -> str:
    """Body of the tracking issue: the table report plus a footer."""
    return table_report.rstrip("\n") + ISSUE_FOOTER


class GitHubIssueCreator:
    """IssueCreator backed by the GitHub REST API."""

    def __init__(
        self,
        token: Optional[str],
        repository: Optional[str],
        api_url: str = "https://api.github.com",
        client: Optional[httpx.Client] = None,
    ) -> None:
        """Initialize the issue creator.

        Args:
            token: Token with issues write permission.
            repository: Repository in owner/name form.
            api_url: Base URL of the REST API.
            client: Optional shared httpx.Client (a new one is created per call
                if not provided).
        """
        self._token = token
        self._repository = repository
        self._api_url = api_url.rstrip("/")
        self._client = client

    def create_issue(self, title: str, body: str) -> CreatedIssue:
        """Create an issue labelled for license compliance.

        Args:
            title: Issue title.
            body: Markdown issue body.

        Returns:
            The created issue.

        Raises:
            IssueCreationError: If credentials are missing or the request fails.
        """
        if not self._token:
            raise IssueCreationError("GitHub token is required to create issues")
        if not self._repository or "/" not in self._repository:
            raise IssueCreationError(
                f"Repository must be given as owner/name, got '{self._repository}'"
            )

        url = f"{self._api_url}/repos/{self._repository}/issues"
        headers = {
            "Authorization": f"Bearer {self._token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        payload = {"title": title, "body": body, "labels": ISSUE_LABELS}

        def do_post(client: httpx.Client) -> dict[str, Any]:
            try:
                response = client.post(
                    url, json=payload, headers=headers, timeout=httpx.Timeout(30.0)
                )
                response.raise_for_status()
                return response.json()  # type: ignore[no-any-return]
            except httpx.HTTPStatusError as e:
                raise IssueCreationError(
                    f"GitHub API returned {e.response.status_code} for {url}"
                ) from e
            except httpx.HTTPError as e:
                raise IssueCreationError(f"Failed to create issue: {e}") from e
            except ValueError as e:
                raise IssueCreationError(f"Invalid response from {url}: {e}") from e

        if self._client:
            data = do_post(self._client)
        else:
            with httpx.Client() as new_client:
                data = do_post(new_client)

        try:
            issue = CreatedIssue(number=int(data["number"]), url=str(data["html_url"]))
        except (KeyError, TypeError, ValueError) as e:
            raise IssueCreationError(f"Unexpected issue payload from {url}") from e

        log.info("issue created", number=issue.number, url=issue.url)
        return issue
