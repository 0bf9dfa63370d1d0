# src/api/routes/archive_router.py
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse
from dependency_injector.wiring import Provide, inject

from core.containers.app_containers import AppContainer
from repos.archive import RepoArchive

router = APIRouter(tags=["Archive"])


@router.get("/repoData.json")
@inject
async def archive_file(archive: RepoArchive = Depends(Provide[AppContainer.repo_archive])):
    """
    The archive as stored on disk, oldest first.
    """
    if not archive.exists():
        raise HTTPException(status_code=404, detail="Not Found")
    return FileResponse(archive.path, media_type="application/json")
