"""Read/write view of one intercepted response.

The classifier only ever sees a ``ResponseContext``; host adapters (the
``/observe`` route, a proxy addon, ...) build one from whatever response
object they hold.  Headers live in a ``HeaderBag``, which ``httpx.Headers``
satisfies: case-insensitive lookup and in-place assignment.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Protocol

import httpx
from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


class HeaderBag(Protocol):
    def get(self, key: str, default: Optional[str] = None) -> Optional[str]: ...

    def __setitem__(self, key: str, value: str) -> None: ...


class Referrer(BaseModel):
    model_config = ConfigDict(frozen=True)

    host: str
    path: str


class ResponseContext(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    scheme: str
    host: str
    path: str
    referrer: Optional[Referrer] = None
    headers: httpx.Headers

    @property
    def mimetype(self) -> Optional[str]:
        """Declared Content-Type, or ``None`` when the header is absent."""
        return self.headers.get("content-type") or None

    # ------------------------------------------------------------------
    # Factory
    # ------------------------------------------------------------------

    @classmethod
    def from_url(
        cls,
        url: str,
        headers: Mapping[str, str] | httpx.Headers,
        referrer: Optional[str] = None,
    ) -> ResponseContext:
        """Build a context from absolute URLs, as a proxy would see them.

        ``path`` keeps the query string.  An unparseable or host-less
        referrer is treated as absent.

        Raises:
            httpx.InvalidURL: when *url* itself cannot be parsed.
        """
        parsed = httpx.URL(url)
        bag = headers if isinstance(headers, httpx.Headers) else header_bag(headers)
        return cls(
            scheme=parsed.scheme,
            host=parsed.host,
            path=_path_with_query(parsed),
            referrer=_parse_referrer(referrer),
            headers=bag,
        )


def _path_with_query(url: httpx.URL) -> str:
    return url.raw_path.decode("ascii", errors="replace")


def _parse_referrer(referrer: Optional[str]) -> Optional[Referrer]:
    if not referrer:
        return None
    try:
        parsed = httpx.URL(referrer)
    except httpx.InvalidURL:
        logger.debug("Ignoring unparseable referrer %r", referrer)
        return None
    if not parsed.host:
        return None
    return Referrer(host=parsed.host, path=_path_with_query(parsed))


def header_bag(headers: Mapping[str, str]) -> httpx.Headers:
    """Wrap plain ``str`` headers, keeping non-ASCII values as UTF-8."""
    return httpx.Headers(
        [(key.encode("latin-1"), value.encode("utf-8")) for key, value in headers.items()],
        encoding="utf-8",
    )
