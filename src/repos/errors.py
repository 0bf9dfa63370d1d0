class RepoShelfError(Exception):
    """Base error for repository lookups and the archive."""


class InvalidRepoIdentifier(RepoShelfError, ValueError):
    """Raised at the form boundary for identifiers that are too short."""


class RepoFetchError(RepoShelfError):
    """
    Upstream lookup failed: unreachable, non-2xx, or malformed payload.
    """

    def __init__(self, identifier: str, reason: str):
        super().__init__(f"Failed to fetch {identifier}: {reason}")
        self.identifier = identifier
        self.reason = reason


class ArchiveReadError(RepoShelfError):
    """Archive file could not be read or parsed."""


class ArchiveFormatError(ArchiveReadError):
    """Archive file parses, but does not hold a JSON array."""


class ArchiveWriteError(RepoShelfError):
    """Archive file could not be serialized or written."""
