# src/api/routes/save_repo_router.py
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from dependency_injector.wiring import Provide, inject

from core.containers.app_containers import AppContainer
from core.logging.logger import get_logger
from repos.archive import RepoArchive
from repos.errors import ArchiveWriteError

router = APIRouter(prefix="/api", tags=["Archive"])
logger = get_logger(__name__)


@router.post("/saveRepo")
@inject
async def save_repo(
    request: Request,
    archive: RepoArchive = Depends(Provide[AppContainer.repo_archive]),
):
    """
    Append one repository record to the archive file.
    """
    try:
        record = await request.json()
        if not isinstance(record, dict):
            raise ValueError("record must be a JSON object")
        await archive.append(record)
    except (ValueError, ArchiveWriteError) as e:
        logger.error(f"Failed to save data: {e}")
        return JSONResponse(status_code=500, content={"error": "Failed to save data"})

    return {"message": "Data saved successfully!"}
