"""
Glovebox API - Application
FastAPI app exposing the reminder scan trigger
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.cors import cors_headers
from app.core.exceptions import GloveboxException
from app.core.logging import configure_logging
from app.routes import api_router
from app.schemas import ErrorResponse


async def glovebox_exception_handler(request: Request, exc: GloveboxException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.detail).model_dump(),
        headers=cors_headers(request.headers.get("origin")),
    )


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION, debug=settings.DEBUG)

    # No CORSMiddleware: the trigger route sets its own CORS headers
    app.add_exception_handler(GloveboxException, glovebox_exception_handler)

    app.include_router(api_router)

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()
