from __future__ import annotations

import logging
from datetime import datetime
from typing import Mapping, Optional

from recap.core.config import settings
from recap.core.courts import is_portal_host
from recap.core.tables import DEFAULT_TABLES, PortalTables
from recap.models.metadata.document import DocumentMetadata
from recap.models.response.classification import Action, Classification
from recap.models.response.context import ResponseContext
from recap.services.classifier.classifier import ResponseClassifier
from recap.services.classifier.headers import describe_headers
from recap.workers.uploader import UploadError, upload_document

logger = logging.getLogger(__name__)


class ObserverService:
    """Host-facing orchestration around the response classifier.

    Applies the portal-host and session filters, runs the
    classify-and-rewrite pass and hands uploadworthy bodies to the
    uploader.
    """

    def __init__(
        self,
        classifier: Optional[ResponseClassifier] = None,
        tables: PortalTables = DEFAULT_TABLES,
    ) -> None:
        self._tables = tables
        self._classifier = classifier or ResponseClassifier(tables)

    def has_session(self, cookies: Mapping[str, str]) -> bool:
        """True when any configured portal session cookie is set."""
        return any(cookies.get(name) for name in settings.session_cookie_names)

    def applies_to(self, context: ResponseContext, cookies: Mapping[str, str]) -> bool:
        if not is_portal_host(context.host, self._tables.court_labels):
            return False
        return self.has_session(cookies)

    def observe(
        self,
        context: ResponseContext,
        cookies: Mapping[str, str],
        now: Optional[datetime] = None,
    ) -> Classification:
        """Filter, classify and rewrite one response.

        Responses from other hosts, or without a portal session, are
        reported as ``ignore`` and left untouched.
        """
        if not self.applies_to(context, cookies):
            logger.debug("Not a portal session response: %s%s", context.host, context.path)
            return Classification(action=Action.IGNORE)

        result = self._classifier.examine(context, settings.cache_time_ms, now)
        if settings.log_headers and result.action is not Action.IGNORE:
            url = f"{context.scheme}://{context.host}{context.path}"
            logger.debug("%s", describe_headers(url, context.headers))
        return result

    async def upload(self, body: bytes, metadata: DocumentMetadata) -> int:
        """Send *body* to the archive.

        Raises:
            UploadError: propagated from the uploader.
        """
        return await upload_document(body, metadata)

    async def background_upload(self, body: bytes, metadata: DocumentMetadata) -> None:
        """Fire-and-forget wrapper for ``upload``.

        Logs every failure and never raises: the intercepted response has
        already been delivered and nobody is waiting on the outcome.
        """
        try:
            await self.upload(body, metadata)
        except UploadError as exc:
            logger.error("Upload failed for %s: %s", metadata.name, exc)
        except Exception as exc:
            logger.exception("Unexpected error in background_upload for %s: %s", metadata.name, exc)
