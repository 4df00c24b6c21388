from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from core import db
from core.config import Settings, load_settings
from core.limits import BodySizeLimitMiddleware, RequestBodyTooLarge, body_too_large_response
from diary import router as diary_router
from events import router as events_router
from finance import router as finance_router
from notes import router as notes_router
from questions import router as questions_router
from tasks import router as tasks_router

logger = logging.getLogger(__name__)

HEALTH_MESSAGE = "DSE Survival Kit API is Running! 🚀"


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    # A store attached before startup (tests, embedding) is owned by the caller.
    owns_store = getattr(app.state, "store", None) is None
    if owns_store:
        app.state.store = await db.connect(settings)
        if settings.apply_schema:
            await db.apply_schema(app.state.store)
    try:
        yield
    finally:
        if owns_store:
            await app.state.store.close()
            app.state.store = None
            logger.info("Database pool closed.")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or load_settings()

    app = FastAPI(title="DSE Survival Kit API", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=settings.max_body_bytes)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.allowed_origins),
        # Browsers reject credentials together with a wildcard origin.
        allow_credentials=not settings.allows_any_origin,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.exception_handler(RequestBodyTooLarge)
    async def body_too_large_handler(request: Request, exc: RequestBodyTooLarge) -> JSONResponse:
        return body_too_large_response()

    @app.exception_handler(db.StoreError)
    async def store_error_handler(request: Request, exc: db.StoreError) -> JSONResponse:
        logger.error("Store error on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=500, content={"error": str(exc)})

    app.include_router(tasks_router.router, tags=["tasks"])
    app.include_router(questions_router.router, tags=["questions"])
    app.include_router(diary_router.router, tags=["diary"])
    app.include_router(finance_router.router, tags=["finance"])
    app.include_router(events_router.router, tags=["events"])
    app.include_router(notes_router.router, tags=["notes"])

    @app.get("/", response_class=PlainTextResponse)
    def root() -> str:
        return HEALTH_MESSAGE

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()


def run() -> None:
    settings: Settings = app.state.settings
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
