"""Response classification and the classify-and-rewrite pass.

Rules run first-match-wins, in this order:

1. the page's script is on the ignore list        -> ``ignore``
2. the response declares a PDF                    -> ``upload-pdf``
3. the response declares HTML and an HTML rule
   (docket report first, then doc page) matches   -> ``upload-html``
4. anything else                                  -> ``skip``

Ignored responses are returned untouched.  Every other response gets the
cache-friendly header rewrite; PDFs also get a ``Content-Disposition``
filename.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from recap.core.tables import DEFAULT_TABLES, PortalTables
from recap.models.response.classification import Action, Classification
from recap.models.response.context import ResponseContext
from recap.services.classifier.extractor import MetadataExtractor, media_type
from recap.services.classifier.headers import (
    cache_friendly_headers,
    set_content_disposition,
)
from recap.services.classifier.paths import page_identity

logger = logging.getLogger(__name__)


def is_pdf(mimetype: Optional[str]) -> bool:
    return media_type(mimetype) == "application/pdf"


def is_html(mimetype: Optional[str]) -> bool:
    return media_type(mimetype) == "text/html"


class ResponseClassifier:
    """Decides what to do with each intercepted response.

    Holds no per-response state, so one instance may serve concurrent
    callers.
    """

    def __init__(
        self,
        tables: PortalTables = DEFAULT_TABLES,
        extractor: Optional[MetadataExtractor] = None,
    ) -> None:
        self._tables = tables
        self._extractor = extractor or MetadataExtractor(tables)

    def is_ignored(self, path: str) -> bool:
        page = page_identity(path)
        return page is not None and page in self._tables.ignore_pages

    def classify(self, context: ResponseContext) -> Classification:
        if self.is_ignored(context.path):
            return Classification(action=Action.IGNORE)

        mimetype = context.mimetype
        if mimetype is not None and is_pdf(mimetype):
            return Classification(
                action=Action.UPLOAD_PDF,
                metadata=self._extractor.pdf_metadata(context.referrer, mimetype),
            )
        if mimetype is not None and is_html(mimetype):
            meta = self._extractor.html_metadata(context, mimetype)
            if meta is not None:
                return Classification(action=Action.UPLOAD_HTML, metadata=meta)
        return Classification(action=Action.SKIP)

    def examine(
        self,
        context: ResponseContext,
        cache_ttl_ms: int,
        now: Optional[datetime] = None,
    ) -> Classification:
        """Classify *context* and rewrite its headers in place.

        This is the entry point hosts call once per response, after their
        own portal-host and session checks.
        """
        result = self.classify(context)
        if result.action is Action.IGNORE:
            logger.debug("Ignoring %s%s", context.host, context.path)
            return result

        cache_friendly_headers(context.headers, cache_ttl_ms, now)
        if result.action is Action.UPLOAD_PDF and result.metadata is not None:
            set_content_disposition(
                context.headers,
                result.metadata.name,
                result.metadata.court,
                self._tables.court_labels,
            )
        return result
