# src/api/routes/health_router.py
from fastapi import APIRouter, Depends
from dependency_injector.wiring import Provide, inject

from core.containers.app_containers import AppContainer
from repos.archive import RepoArchive

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("/")
@inject
async def health_check(archive: RepoArchive = Depends(Provide[AppContainer.repo_archive])):
    return {
        "status": "ok",
        "archive": "present" if archive.exists() else "absent"
    }
