"""Archive uploader.

Delivers one captured response body, described by its
``DocumentMetadata``, to the archive as a multipart POST.

Delivery either succeeds with a 2xx from the archive or raises
:class:`UploadError`.  Only failures that happen before the archive has
answered (timeouts, refused connections) are retried; a reply, including a
redirect, is final.  Redirects are not followed because httpx would replay
a 302/303 as a body-less GET.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx
from tenacity import (
    AsyncRetrying,
    RetryError,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from recap.core.config import settings
from recap.models.metadata.document import DocumentMetadata

logger = logging.getLogger(__name__)

# Failures where the archive never saw a complete request.
_TRANSIENT = (httpx.TimeoutException, httpx.ConnectError)

_archive_client: Optional[httpx.AsyncClient] = None


def get_http_client() -> httpx.AsyncClient:
    """Shared client for archive uploads, opened on first use."""
    global _archive_client  # noqa: PLW0603
    if _archive_client is None or _archive_client.is_closed:
        _archive_client = httpx.AsyncClient(
            timeout=httpx.Timeout(settings.http_timeout),
            verify=settings.http_verify_ssl,
            headers={"User-Agent": "RecapObserver/1.0"},
        )
    return _archive_client


async def close_http_client() -> None:
    """Release the shared client; called from the app's shutdown hook."""
    global _archive_client  # noqa: PLW0603
    if _archive_client is not None and not _archive_client.is_closed:
        await _archive_client.aclose()
        logger.info("Archive client closed.")
    _archive_client = None


class UploadError(Exception):
    """The archive did not accept a document."""


def build_form(metadata: DocumentMetadata) -> dict[str, str]:
    """Multipart form fields describing *metadata*; unset fields are omitted."""
    fields = {
        "court": metadata.court,
        "casenum": metadata.casenum,
        "mimetype": metadata.mimetype,
        "url": metadata.url,
    }
    return {key: value for key, value in fields.items() if value is not None}


async def upload_document(body: bytes, metadata: DocumentMetadata) -> int:
    """Deliver *body* to the archive and return the accepting status code.

    Makes up to ``http_max_retries + 1`` attempts, backing off
    exponentially between transient failures.

    Raises:
        UploadError: the archive answered with a non-2xx status, the
            request could not be built or sent, or every attempt failed
            transiently.
    """
    retrying = AsyncRetrying(
        retry=retry_if_exception_type(_TRANSIENT),
        stop=stop_after_attempt(settings.http_max_retries + 1),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=10),
        before_sleep=before_sleep_log(logger, logging.WARNING),
    )
    try:
        async for attempt in retrying:
            with attempt:
                return await _do_upload(body, metadata)
    except RetryError as exc:
        raise UploadError(
            f"Archive unreachable for {metadata.name} after "
            f"{exc.last_attempt.attempt_number} attempts: "
            f"{exc.last_attempt.exception()}"
        ) from exc


async def _do_upload(body: bytes, metadata: DocumentMetadata) -> int:
    """POST *body* once; transient transport errors escape for a retry."""
    client = get_http_client()
    files = {"data": (metadata.name or "upload", body, metadata.mimetype)}

    try:
        response = await client.post(
            settings.upload_url, data=build_form(metadata), files=files
        )
    except _TRANSIENT:
        raise
    except httpx.InvalidURL as exc:
        raise UploadError(f"Invalid upload URL '{settings.upload_url}': {exc}") from exc
    except httpx.RequestError as exc:
        raise UploadError(f"Request error uploading {metadata.name}: {exc}") from exc

    # A reply means the archive saw the request; resending would not change it.
    if not response.is_success:
        raise UploadError(
            f"Archive rejected {metadata.name}: HTTP {response.status_code}"
        )
    logger.info(
        "Uploaded %s (%s, court=%s): HTTP %s",
        metadata.name,
        metadata.mimetype,
        metadata.court,
        response.status_code,
    )
    return response.status_code
