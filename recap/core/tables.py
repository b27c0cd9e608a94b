from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from recap.core.courts import COURT_LABELS


class PortalTables(BaseModel):
    """Read-only lookup tables shared by the extractor and classifier.

    Built once at import time and passed in explicitly; nothing mutates it
    after construction.
    """

    model_config = ConfigDict(frozen=True)

    court_labels: dict[str, str]
    # Pages never processed: no header rewrite, no upload.
    ignore_pages: frozenset[str]
    # Report pages whose HTML is itself worth archiving.
    downloadable_pages: frozenset[str]


DEFAULT_TABLES = PortalTables(
    court_labels=COURT_LABELS,
    ignore_pages=frozenset({"login.pl", "iquery.pl", "BillingRpt.pl"}),
    downloadable_pages=frozenset({"HistDocQry.pl", "DktRpt.pl"}),
)
