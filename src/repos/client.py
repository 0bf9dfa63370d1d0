# src/repos/client.py

from typing import Optional

import requests
from github import Auth, Github, GithubException

from core.logging.logger import get_logger
from repos.errors import RepoFetchError


class GitHubClient:
    """
    Low-level GitHub API wrapper.
    Only responsible for HTTP communication.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: str = "https://api.github.com",
        timeout: int = 15,
    ):
        auth = Auth.Token(token) if token else None
        # retry=None: a failed lookup is reported, never retried
        self.client = Github(auth=auth, base_url=base_url, timeout=timeout, retry=None)
        self.logger = get_logger(__name__)

    def get_repo_data(self, full_name: str) -> dict:
        """
        Core API: GET /repos/{owner}/{name}

        Args:
            full_name: owner/repo
        Returns:
            raw JSON payload of the repository
        """
        try:
            repo = self.client.get_repo(full_name)
            return repo.raw_data
        except GithubException as e:
            self.logger.error(f"GitHub API error ({e.status}) for {full_name}")
            raise RepoFetchError(full_name, f"GitHub API error ({e.status})") from e
        except requests.RequestException as e:
            self.logger.error(f"GitHub unreachable for {full_name}: {e}")
            raise RepoFetchError(full_name, f"GitHub unreachable: {e}") from e
