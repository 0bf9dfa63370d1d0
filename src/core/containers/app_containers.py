from dependency_injector import containers, providers

from core.config.settings import settings
from repos.archive import RepoArchive
from repos.client import GitHubClient
from repos.display import ArchiveFeed, RepoDisplay
from repos.fetcher import RepoFetcher
from repos.store import RepoListStore


class AppContainer(containers.DeclarativeContainer):

    github_client = providers.Singleton(
        GitHubClient,
        token=settings.GITHUB_TOKEN,
        base_url=settings.GITHUB_API_URL,
        timeout=settings.GITHUB_TIMEOUT,
    )

    repo_archive = providers.Singleton(
        RepoArchive,
        path=settings.ARCHIVE_PATH,
        serialize_writes=settings.ARCHIVE_SERIALIZE_WRITES,
    )

    # session-lived identifier list
    repo_store = providers.Singleton(RepoListStore)

    repo_fetcher = providers.Singleton(
        RepoFetcher,
        client=github_client,
        archive=repo_archive,
    )

    archive_feed = providers.Singleton(
        ArchiveFeed,
        archive=repo_archive,
        fetcher=repo_fetcher,
    )

    repo_display = providers.Factory(
        RepoDisplay,
        store=repo_store,
        fetcher=repo_fetcher,
    )
