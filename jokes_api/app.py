from __future__ import annotations

import logging
import random

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from jokes_api.core.config import Settings, get_settings
from jokes_api.repositories import json_storage
from jokes_api.routers import jokes as jokes_router
from jokes_api.services.joke_service import JokeService

logger = logging.getLogger(__name__)


class BaselineHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline headers (no sniffing, no referrer, no caching of random picks)."""

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        response.headers.setdefault("Cache-Control", "no-store")
        return response


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        {"error": exc.detail},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


def create_app(
    settings: Settings | None = None,
    *,
    jokes=None,
    rng: random.Random | None = None,
) -> FastAPI:
    """
    Build the joke API.

    The dataset is read here, once, before the server accepts connections.
    Pass ``jokes`` to skip the file entirely (tests, embedding).
    """
    settings = settings or get_settings()
    if jokes is None:
        jokes = json_storage.load(settings.jokes_file)

    app = FastAPI(title="Joke API", docs_url=None, redoc_url=None, openapi_url=None)
    app.state.settings = settings
    app.state.joke_service = JokeService(jokes, rng=rng)
    app.add_middleware(BaselineHeadersMiddleware)
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.include_router(jokes_router.router)
    logger.info("Joke API ready (%s, %d jokes)", settings.app_env, app.state.joke_service.count())
    return app
