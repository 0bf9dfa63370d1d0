# src/api/main.py

import uvicorn
from fastapi import FastAPI
from contextlib import asynccontextmanager

from core.config.settings import settings
from core.containers.app_containers import AppContainer
from core.logging.logger import get_logger
from api.routes.health_router import router as health_router
from api.routes.save_repo_router import router as save_repo_router
from api.routes.archive_router import router as archive_router
from api.routes.repos_router import router as repos_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container: AppContainer = app.container

    # the feed subscribes to the fetcher; load it before any fetch runs
    feed = container.archive_feed()
    await feed.hydrate()
    archive = container.repo_archive()
    logger.info(f"Archive at {archive.path}")

    yield

    logger.info("Shutting down")


def create_app() -> FastAPI:
    container = AppContainer()
    container.wire(modules=[
        "api.routes.health_router",
        "api.routes.save_repo_router",
        "api.routes.archive_router",
        "api.routes.repos_router",
    ])
    app = FastAPI(
        title=settings.APP_NAME,
        debug=settings.DEBUG,
        lifespan=lifespan
    )

    app.container = container

    app.include_router(health_router)
    app.include_router(save_repo_router)
    app.include_router(archive_router)
    app.include_router(repos_router)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
