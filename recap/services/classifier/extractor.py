from __future__ import annotations

import logging
from typing import Callable, Optional

from recap.core.courts import court_from_host
from recap.core.tables import DEFAULT_TABLES, PortalTables
from recap.models.metadata.document import DocumentMetadata
from recap.models.response.context import Referrer, ResponseContext
from recap.services.classifier.paths import (
    casenum_from_path,
    is_doc_path,
    last_segment,
    page_identity,
)

logger = logging.getLogger(__name__)

_MIME_SUFFIXES: dict[str, str] = {"application/pdf": ".pdf"}

HtmlRule = Callable[[ResponseContext, str], Optional[DocumentMetadata]]


def media_type(mimetype: Optional[str]) -> str:
    """Lower-cased Content-Type without parameters (``""`` when absent)."""
    if not mimetype:
        return ""
    return mimetype.split(";", 1)[0].strip().lower()


def file_suffix(mimetype: Optional[str]) -> str:
    return _MIME_SUFFIXES.get(media_type(mimetype), "")


class MetadataExtractor:
    """Derives ``DocumentMetadata`` from a response's URL and referrer.

    Never touches headers.  Every ``*_metadata`` method returns ``None``
    when its rule does not apply.
    """

    def __init__(self, tables: PortalTables = DEFAULT_TABLES) -> None:
        self._tables = tables
        # Evaluated in order; the first rule returning metadata wins.
        self._html_rules: tuple[HtmlRule, ...] = (
            self._perl_rule,
            self._doc_rule,
        )

    def _court(self, host: Optional[str]) -> Optional[str]:
        return court_from_host(host, self._tables.court_labels)

    # ------------------------------------------------------------------
    # PDF documents
    # ------------------------------------------------------------------

    def pdf_metadata(
        self, referrer: Optional[Referrer], mimetype: str
    ) -> DocumentMetadata:
        """Name the PDF after the referring page.

        The referrer path's last segment plus the mimetype suffix becomes
        the filename.  Without a referrer only the mimetype is known.
        """
        if referrer is None:
            return DocumentMetadata(mimetype=mimetype)

        name = last_segment(referrer.path) + file_suffix(mimetype)
        meta = DocumentMetadata(
            mimetype=mimetype,
            court=self._court(referrer.host),
            name=name,
            url=referrer.path,
        )
        logger.debug("PDF metadata: %s", meta)
        return meta

    # ------------------------------------------------------------------
    # HTML pages
    # ------------------------------------------------------------------

    def perl_html_metadata(
        self, path: str, referrer: Optional[Referrer], mimetype: str
    ) -> Optional[DocumentMetadata]:
        """Metadata for docket report result pages.

        The results page and its search form share a script name.  Only
        the results page is reached from the same script, so both the page
        and its referrer must carry the same downloadable identity.
        """
        if referrer is None:
            return None

        page = page_identity(path)
        ref_page = page_identity(referrer.path)
        if (
            page is None
            or ref_page is None
            or page != ref_page
            or page not in self._tables.downloadable_pages
        ):
            return None

        meta = DocumentMetadata(
            mimetype=mimetype,
            court=self._court(referrer.host),
            name=page.replace(".pl", ".html", 1),
            casenum=casenum_from_path(referrer.path),
        )
        logger.debug("Perl HTML metadata: %s", meta)
        return meta

    def doc_html_metadata(
        self,
        path: str,
        referrer: Optional[Referrer],
        host: str,
        mimetype: str,
    ) -> Optional[DocumentMetadata]:
        """Metadata for a ``/doc1/`` document-view page.

        A doc page referred by another doc page is either the "View
        Document" hop to the PDF or a lone receipt page for a
        sub-document; neither is archived.
        """
        if not is_doc_path(path) or referrer is None:
            return None
        if is_doc_path(referrer.path):
            return None

        meta = DocumentMetadata(
            mimetype=mimetype,
            court=self._court(host),
            name=path,
        )
        logger.debug("Doc HTML metadata: %s", meta)
        return meta

    def _perl_rule(
        self, context: ResponseContext, mimetype: str
    ) -> Optional[DocumentMetadata]:
        return self.perl_html_metadata(context.path, context.referrer, mimetype)

    def _doc_rule(
        self, context: ResponseContext, mimetype: str
    ) -> Optional[DocumentMetadata]:
        return self.doc_html_metadata(
            context.path, context.referrer, context.host, mimetype
        )

    def html_metadata(
        self, context: ResponseContext, mimetype: str
    ) -> Optional[DocumentMetadata]:
        """Apply the HTML rules in order: docket reports, then doc pages."""
        for rule in self._html_rules:
            meta = rule(context, mimetype)
            if meta is not None:
                return meta
        return None
