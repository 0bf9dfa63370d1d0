# src/repos/store.py

from typing import List, Tuple

from repos.errors import InvalidRepoIdentifier

MIN_IDENTIFIER_LENGTH = 3
IDENTIFIER_TOO_SHORT = (
    f"Repository name must be at least {MIN_IDENTIFIER_LENGTH} characters long"
)


def validate_identifier(identifier: str) -> str:
    """
    Form-level check for a submitted owner/name string.
    Only the length is checked; the store itself accepts anything.
    """
    if len(identifier) < MIN_IDENTIFIER_LENGTH:
        raise InvalidRepoIdentifier(IDENTIFIER_TOO_SHORT)
    return identifier


class RepoListStore:
    """
    Session-lived list of submitted identifiers, newest first.
    """

    def __init__(self):
        self._repos: List[str] = []

    @property
    def repos(self) -> Tuple[str, ...]:
        return tuple(self._repos)

    def add_repo(self, identifier: str) -> None:
        self._repos.insert(0, identifier)

    def __len__(self) -> int:
        return len(self._repos)
