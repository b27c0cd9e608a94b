from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from recap.models.metadata.document import DocumentMetadata


class Action(str, Enum):
    IGNORE = "ignore"
    UPLOAD_PDF = "upload-pdf"
    UPLOAD_HTML = "upload-html"
    SKIP = "skip"

    @property
    def uploads(self) -> bool:
        return self in (Action.UPLOAD_PDF, Action.UPLOAD_HTML)


class Classification(BaseModel):
    """What to do with one response, plus its metadata when uploadworthy."""

    model_config = ConfigDict(frozen=True)

    action: Action
    metadata: Optional[DocumentMetadata] = None
