"""Path pattern helpers for portal URLs.

Every function here is total: a path that does not have the expected shape
yields ``None``/``False``, never an exception.
"""

from __future__ import annotations

import re
from typing import Optional

_PERL_SCRIPT_RE = re.compile(r"\w+\.pl", re.IGNORECASE)
_DOC_PATH_RE = re.compile(r"/doc1/\d+")
_CASENUM_RE = re.compile(r"\?(\d+)$")


def page_identity(path: Optional[str]) -> Optional[str]:
    """Return the first ``<word>.pl`` script token in *path*.

    >>> page_identity("/cgi-bin/DktRpt.pl?101")
    'DktRpt.pl'
    """
    if not path:
        return None
    match = _PERL_SCRIPT_RE.search(path)
    return match.group(0) if match else None


def is_doc_path(path: Optional[str]) -> bool:
    """True for single-document view paths such as ``/doc1/12345``."""
    return bool(path) and _DOC_PATH_RE.search(path) is not None


def casenum_from_path(path: Optional[str]) -> Optional[str]:
    """Extract the case number from a trailing ``?<digits>`` query."""
    if not path:
        return None
    match = _CASENUM_RE.search(path)
    return match.group(1) if match else None


def last_segment(path: str) -> str:
    return path.rsplit("/", 1)[-1]
