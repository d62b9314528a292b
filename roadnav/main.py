from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from roadnav.adapters.api.controllers.routes import router as routes_router
from roadnav.adapters.api.controllers.vertices import router as vertices_router
from roadnav.adapters.runtime_config import _env_bool
from roadnav.domain.exceptions import EmptyIndex, RouteCancelled, VertexNotFound

app = FastAPI(title="RoadNav")
app.include_router(routes_router)
app.include_router(vertices_router)


@app.exception_handler(VertexNotFound)
async def vertex_not_found_handler(
    request: Request, exc: VertexNotFound
) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(EmptyIndex)
async def empty_index_handler(request: Request, exc: EmptyIndex) -> JSONResponse:
    return JSONResponse(status_code=503, content={"detail": str(exc)})


@app.exception_handler(RouteCancelled)
async def route_cancelled_handler(
    request: Request, exc: RouteCancelled
) -> JSONResponse:
    return JSONResponse(status_code=504, content={"detail": str(exc)})


@app.exception_handler(Exception)
async def unhandled_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Ensure API errors are JSON, including failures while building the graph."""

    logging.getLogger("uvicorn.error").exception(
        "Unhandled exception", extra={"path": str(request.url.path)}
    )

    reveal = _env_bool("ROADNAV_REVEAL_ERRORS", False)
    if reveal or isinstance(exc, (FileNotFoundError, RuntimeError, ValueError)):
        detail = str(exc) or exc.__class__.__name__
    else:
        detail = "Internal Server Error"

    return JSONResponse(status_code=500, content={"detail": detail})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
