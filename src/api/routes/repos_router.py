# src/api/routes/repos_router.py
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, field_validator
from dependency_injector.wiring import Provide, inject

from core.containers.app_containers import AppContainer
from repos.display import ArchiveFeed, RepoDisplay
from repos.errors import RepoFetchError
from repos.fetcher import RepoFetcher
from repos.store import RepoListStore, validate_identifier

router = APIRouter(prefix="/repos", tags=["Repos"])


class RepoSubmission(BaseModel):
    repo: str

    @field_validator("repo")
    @classmethod
    def check_length(cls, value: str) -> str:
        return validate_identifier(value)


@router.post("", status_code=201)
@inject
async def submit_repo(
    submission: RepoSubmission,
    store: RepoListStore = Depends(Provide[AppContainer.repo_store]),
    fetcher: RepoFetcher = Depends(Provide[AppContainer.repo_fetcher]),
):
    # resubmitting a failed identifier is the only way to retry it
    fetcher.forget_failure(submission.repo)
    store.add_repo(submission.repo)
    fetcher.ensure(submission.repo)
    return {"repos": list(store.repos)}


@router.get("")
@inject
async def list_repos(
    wait: bool = False,
    display: RepoDisplay = Depends(Provide[AppContainer.repo_display]),
):
    items = await display.render(wait=wait)
    return {"items": [item.model_dump() for item in items]}


@router.get("/archive")
@inject
async def archived_repos(feed: ArchiveFeed = Depends(Provide[AppContainer.archive_feed])):
    await feed.hydrate()
    return {"records": feed.records}


@router.get("/{owner}/{name}")
@inject
async def get_repo(
    owner: str,
    name: str,
    fetcher: RepoFetcher = Depends(Provide[AppContainer.repo_fetcher]),
):
    identifier = f"{owner}/{name}"
    try:
        record = await fetcher.fetch(identifier)
    except RepoFetchError:
        return JSONResponse(status_code=502, content={"error": f"Failed to fetch {identifier}"})
    return record.model_dump()
