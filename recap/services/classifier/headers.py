"""Response header rewrites.

The portal marks its dynamically generated pages as uncacheable.  These
helpers replace that policy with a bounded TTL and give PDFs a readable
download filename.  Nothing here inspects the response body or decides
whether a response is uploadworthy.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from email.utils import format_datetime
from typing import Mapping, Optional

from recap.core.courts import COURT_LABELS
from recap.models.response.context import HeaderBag

CLEARED_HEADERS: tuple[str, ...] = (
    "Age",
    "Cache-Control",
    "ETag",
    "Vary",
    "Last-Modified",
)

LOGGED_HEADERS: tuple[str, ...] = (
    "Age",
    "Cache-Control",
    "ETag",
    "Pragma",
    "Vary",
    "Last-Modified",
    "Expires",
    "Date",
    "Content-Disposition",
    "Content-Type",
)


def http_date(moment: datetime) -> str:
    """Format *moment* as an RFC 7231 HTTP-date (always GMT)."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return format_datetime(moment.astimezone(timezone.utc), usegmt=True)


def pragma_value(headers: HeaderBag) -> str:
    """Return the current ``Pragma`` with every literal ``no-cache`` removed.

    Only the substring goes; ``"no-cache, no-store"`` becomes
    ``", no-store"``.  An absent header gives ``""``.
    """
    current = headers.get("Pragma")
    if current is None:
        return ""
    return current.replace("no-cache", "")


def cache_friendly_headers(
    headers: HeaderBag,
    cache_ttl_ms: int,
    now: Optional[datetime] = None,
) -> HeaderBag:
    """Rewrite *headers* in place so the response is cacheable for the TTL.

    Returns the same bag for chaining.
    """
    now = now or datetime.now(timezone.utc)
    pragma = pragma_value(headers)
    for name in CLEARED_HEADERS:
        headers[name] = ""
    headers["Pragma"] = pragma
    headers["Expires"] = http_date(now + timedelta(milliseconds=cache_ttl_ms))
    headers["Date"] = http_date(now)
    return headers


def content_disposition(
    filename: Optional[str],
    court: Optional[str],
    court_labels: Mapping[str, str] = COURT_LABELS,
) -> Optional[str]:
    """Build a save-friendly ``Content-Disposition`` value.

    Returns ``None`` (leave the header alone) unless both parts are known.
    Backslashes and double quotes in the name are escaped so the value stays
    one quoted-string.
    """
    if filename is None or court is None:
        return None
    label = court_labels.get(court, court)
    quoted = f"{label}-{filename}".replace("\\", "\\\\").replace('"', '\\"')
    return f'inline; filename="{quoted}"'


def set_content_disposition(
    headers: HeaderBag,
    filename: Optional[str],
    court: Optional[str],
    court_labels: Mapping[str, str] = COURT_LABELS,
) -> Optional[str]:
    value = content_disposition(filename, court, court_labels)
    if value is not None:
        headers["Content-Disposition"] = value
    return value


def describe_headers(url: str, headers: HeaderBag) -> str:
    """One-line dump of the cache-relevant headers, for debug logging."""
    parts = []
    for name in LOGGED_HEADERS:
        value = headers.get(name)
        parts.append(f"'{name}': '{'<<none>>' if value is None else value}'")
    return f"Headers for {url}: " + "; ".join(parts)
