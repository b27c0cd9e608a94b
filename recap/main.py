from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from recap.api.router import router
from recap.core.config import settings
from recap.workers.uploader import close_http_client


def _configure_logging() -> None:
    """Send classifier, observer and uploader records to stderr.

    Everything under ``recap`` gets one handler at ``settings.log_level``.
    Header dumps (``settings.log_headers``) are logged at DEBUG, so they only
    show when the level is lowered as well.  Records stop at ``recap`` and
    are not duplicated through whatever root handlers uvicorn installs.
    """
    recap_log = logging.getLogger("recap")
    recap_log.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    recap_log.propagate = False
    if recap_log.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
    )
    recap_log.addHandler(handler)


_configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    # ── Shutdown ─────────────────────────────────────────────────────
    await close_http_client()


app = FastAPI(
    title="RECAP Observer",
    description="Classifies court-portal responses, rewrites their cache "
    "headers and forwards archivable documents.",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(router)


@app.get("/health", tags=["health"])
async def health() -> dict[str, str]:
    return {"status": "ok"}
