"""Static court tables.

``COURT_LABELS`` maps every PACER district court code to the abbreviation
used in West citations.  The set of keys doubles as the list of known
portal courts: a host is only resolved to a court when the code parsed
from it is present here.
"""

from __future__ import annotations

import re
from typing import Mapping, Optional

COURT_LABELS: dict[str, str] = {
    "akd": "D.Alaska",
    "almd": "M.D.Ala.",
    "alnd": "N.D.Ala.",
    "alsd": "S.D.Ala.",
    "ared": "E.D.Ark.",
    "arwd": "W.D.Ark.",
    "azd": "D.Ariz.",
    "cacd": "C.D.Cal.",
    "caed": "E.D.Cal.",
    "cand": "N.D.Cal.",
    "casd": "S.D.Cal.",
    "cod": "D.Colo.",
    "ctd": "D.Conn.",
    "dcd": "D.D.C.",
    "ded": "D.Del.",
    "flmd": "M.D.Fla.",
    "flnd": "N.D.Fla.",
    "flsd": "S.D.Fla.",
    "gamd": "M.D.Ga.",
    "gand": "N.D.Ga.",
    "gasd": "S.D.Ga.",
    "gud": "D.Guam",
    "hid": "D.Hawai'i",
    "iand": "N.D.Iowa",
    "iasd": "S.D.Iowa",
    "idd": "D.Idaho",
    "ilcd": "C.D.Ill.",
    "ilnd": "N.D.Ill.",
    "ilsd": "S.D.Ill.",
    "innd": "N.D.Ind.",
    "insd": "S.D.Ind.",
    "ksd": "D.Kan.",
    "kyed": "E.D.Ky.",
    "kywd": "W.D.Ky.",
    "laed": "E.D.La.",
    "lamd": "M.D.La.",
    "lawd": "W.D.La.",
    "mad": "D.Mass.",
    "mdd": "D.Md.",
    "med": "D.Me.",
    "mied": "E.D.Mich.",
    "miwd": "W.D.Mich.",
    "mnd": "D.Minn.",
    "moed": "E.D.Mo.",
    "mowd": "W.D.Mo.",
    "msnd": "N.D.Miss.",
    "mssd": "S.D.Miss.",
    "mtd": "D.Mont.",
    "nced": "E.D.N.C.",
    "ncmd": "M.D.N.C.",
    "ncwd": "W.D.N.C.",
    "ndd": "D.N.D.",
    "ned": "D.Neb.",
    "nhd": "D.N.H.",
    "njd": "D.N.J.",
    "nmd": "D.N.M.",
    "nmid": "D.N.Mar.I.",
    "nvd": "D.Nev.",
    "nyed": "E.D.N.Y.",
    "nynd": "N.D.N.Y.",
    "nysd": "S.D.N.Y.",
    "nywd": "W.D.N.Y.",
    "ohnd": "N.D.Ohio",
    "ohsd": "S.D.Ohio",
    "oked": "E.D.Okla.",
    "oknd": "N.D.Okla.",
    "okwd": "W.D.Okla.",
    "ord": "D.Or.",
    "paed": "E.D.Pa.",
    "pamd": "M.D.Pa.",
    "pawd": "W.D.Pa.",
    "prd": "D.Puerto Rico",
    "rid": "D.R.I.",
    "scd": "D.S.C.",
    "sdd": "D.S.D.",
    "tned": "E.D.Tenn.",
    "tnmd": "M.D.Tenn.",
    "tnwd": "W.D.Tenn.",
    "txed": "E.D.Tex.",
    "txnd": "N.D.Tex.",
    "txsd": "S.D.Tex.",
    "txwd": "W.D.Tex.",
    "utd": "D.Utah",
    "vaed": "E.D.Va.",
    "vawd": "W.D.Va.",
    "vid": "D.Virgin Islands",
    "vtd": "D.Vt.",
    "waed": "E.D.Wash.",
    "wawd": "W.D.Wash.",
    "wied": "E.D.Wis.",
    "wiwd": "W.D.Wis.",
    "wvnd": "N.D.W.Va.",
    "wvsd": "S.D.W.Va.",
    "wyd": "D.Wyo.",
}

_COURT_HOST_RE = re.compile(r"([^.]+)\.uscourts\.gov$", re.IGNORECASE)


def court_from_host(
    host: Optional[str], court_labels: Mapping[str, str] = COURT_LABELS
) -> Optional[str]:
    """Return the court code for a portal *host*, or ``None``.

    ``ecf.cand.uscourts.gov`` resolves to ``cand``.  Hosts outside
    ``uscourts.gov`` and codes missing from *court_labels* give ``None``.
    """
    if not host:
        return None
    match = _COURT_HOST_RE.search(host.rstrip("."))
    if match is None:
        return None
    code = match.group(1).lower()
    return code if code in court_labels else None


def is_portal_host(
    host: Optional[str], court_labels: Mapping[str, str] = COURT_LABELS
) -> bool:
    return court_from_host(host, court_labels) is not None
