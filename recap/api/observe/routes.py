from __future__ import annotations

import logging

import httpx
from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException

from recap.models.common import ErrorResponse
from recap.models.response.context import ResponseContext
from recap.models.response.schemas import ObserveRequest, ObserveResponse
from recap.services.observer.service import ObserverService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/observe", tags=["observe"])


# ---------------------------------------------------------------------------
# Dependency
# ---------------------------------------------------------------------------


def _get_service() -> ObserverService:
    """FastAPI dependency that builds an ``ObserverService`` for each request."""
    return ObserverService()


# ---------------------------------------------------------------------------
# POST /observe
# ---------------------------------------------------------------------------


@router.post(
    "",
    response_model=ObserveResponse,
    responses={500: {"model": ErrorResponse}},
    summary="Classify an intercepted response and rewrite its headers",
)
async def post_observe(
    request: ObserveRequest,
    background_tasks: BackgroundTasks,
    service: ObserverService = Depends(_get_service),
) -> ObserveResponse:
    """Run the classify-and-rewrite pass for one intercepted response.

    Returns the headers the host should deliver in place of the
    originals.  When the response is uploadworthy and ``body`` was sent,
    an archive upload is scheduled in the background; its outcome never
    affects this response.

    - **200** — response classified; headers returned
    - **422** — invalid URL or body that is not valid base64
    - **500** — unexpected failure
    """
    url = str(request.url)
    try:
        context = ResponseContext.from_url(url, request.headers, request.referrer)
        result = service.observe(context, request.cookies)
    except httpx.InvalidURL as exc:
        raise HTTPException(status_code=422, detail=f"Invalid URL: {exc}")
    except Exception as exc:
        logger.error("POST /observe failed for %s: %s", url, exc)
        raise HTTPException(status_code=500, detail=str(exc))

    scheduled = False
    if (
        result.action.uploads
        and result.metadata is not None
        and request.body is not None
    ):
        background_tasks.add_task(
            service.background_upload, request.body, result.metadata
        )
        scheduled = True
        logger.info(
            "Upload scheduled for %s (%s)", result.metadata.name, result.action.value
        )

    return ObserveResponse(
        action=result.action,
        headers=dict(context.headers),
        metadata=result.metadata,
        upload_scheduled=scheduled,
    )
