from __future__ import annotations

from unittest.mock import AsyncMock, patch

import httpx
import pytest
from fastapi.testclient import TestClient

from recap.main import app
from recap.models.response.context import Referrer, ResponseContext

PORTAL_HOST = "ecf.cand.uscourts.gov"


def _make_context(
    path: str,
    mimetype: str | None = "text/html",
    referrer_path: str | None = None,
    referrer_host: str = PORTAL_HOST,
    host: str = PORTAL_HOST,
    headers: dict[str, str] | None = None,
) -> ResponseContext:
    """Build a ``ResponseContext`` with a fresh header bag."""
    bag = httpx.Headers(headers or {})
    if mimetype is not None:
        bag["Content-Type"] = mimetype
    referrer = (
        Referrer(host=referrer_host, path=referrer_path)
        if referrer_path is not None
        else None
    )
    return ResponseContext(
        scheme="https", host=host, path=path, referrer=referrer, headers=bag
    )


@pytest.fixture
def client():
    """TestClient with the shutdown hook mocked."""
    with patch("recap.main.close_http_client", new_callable=AsyncMock):
        with TestClient(app) as c:
            yield c


@pytest.fixture
def make_context():
    return _make_context
