from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from jokes_api.services.joke_service import JokeService

router = APIRouter(tags=["jokes"])


def _get_joke_service(request: Request) -> JokeService:
    svc = getattr(getattr(request.app, "state", None), "joke_service", None)
    if not svc:
        raise RuntimeError("JokeService not configured")
    return svc


def _respond(request: Request, path: str) -> JSONResponse:
    status, payload = _get_joke_service(request).handle(path)
    return JSONResponse(payload, status_code=status)


@router.get("/")
def random_joke(request: Request):
    return _respond(request, "/")


@router.get("/{token}")
def joke_by_index(token: str, request: Request):
    return _respond(request, f"/{token}")
