from __future__ import annotations

from typing import Optional

from pydantic import Base64Bytes, BaseModel, HttpUrl

from recap.models.metadata.document import DocumentMetadata
from recap.models.response.classification import Action


class ObserveRequest(BaseModel):
    """Request body for POST /observe.

    ``body`` is the base64-encoded response payload.  It is only needed
    when the host wants uploadworthy responses forwarded to the archive.
    """

    url: HttpUrl
    referrer: Optional[str] = None
    headers: dict[str, str] = {}
    cookies: dict[str, str] = {}
    body: Optional[Base64Bytes] = None


class ObserveResponse(BaseModel):
    """Outcome of the classify-and-rewrite pass for one response.

    ``headers`` is the full header set the host should deliver, with
    lower-cased names.
    """

    action: Action
    headers: dict[str, str]
    metadata: Optional[DocumentMetadata] = None
    upload_scheduled: bool = False
