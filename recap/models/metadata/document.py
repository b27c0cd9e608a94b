from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class DocumentMetadata(BaseModel):
    """Identity of a response worth handing to the archive uploader.

    ``court`` and ``name`` are ``None`` when they cannot be derived;
    ``casenum`` is only ever set for docket report pages.
    """

    model_config = ConfigDict(frozen=True)

    mimetype: str
    court: Optional[str] = None
    name: Optional[str] = None
    url: Optional[str] = None
    casenum: Optional[str] = None
