from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.adapters.api.controllers.stops import router as stops_router
from src.adapters.api.dependencies import build_nearby_stops_service
from src.adapters.settings import log_level, reveal_errors


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    # Config errors are fatal here; the catalogue is built once and never reloaded.
    app.state.nearby_stops_service = build_nearby_stops_service()
    logging.getLogger(__name__).info(
        "Service available at /atm/stops (%d stops)",
        len(app.state.nearby_stops_service.catalogue),
    )
    yield


app = FastAPI(title="ATM Nearby Stops", lifespan=lifespan)
app.include_router(stops_router)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    if exc.status_code == 404:
        return JSONResponse(status_code=404, content={"error": "Not Found"})
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail), "status": exc.status_code},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Keep error bodies JSON, in the same shape as the client errors."""

    logging.getLogger("uvicorn.error").exception(
        "Uncaught exception", extra={"path": str(request.url.path)}
    )

    if reveal_errors():
        detail = str(exc) or exc.__class__.__name__
    else:
        detail = "Internal Server Error"

    return JSONResponse(status_code=500, content={"error": detail})


@app.get("/health")
def health(request: Request) -> dict[str, str | int]:
    service = getattr(request.app.state, "nearby_stops_service", None)
    stops = len(service.catalogue) if service is not None else 0
    return {"status": "ok", "stops": stops}
