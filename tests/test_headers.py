from __future__ import annotations

from datetime import datetime, timedelta, timezone

import httpx

from recap.services.classifier.headers import (
    CLEARED_HEADERS,
    cache_friendly_headers,
    content_disposition,
    describe_headers,
    http_date,
    pragma_value,
    set_content_disposition,
)

_NOW = datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)
_DAY_MS = 86_400_000


def _origin_headers() -> httpx.Headers:
    return httpx.Headers(
        {
            "Age": "12",
            "Cache-Control": "no-store, no-cache, must-revalidate",
            "ETag": '"abc"',
            "Vary": "Cookie",
            "Last-Modified": "Mon, 01 Jan 2024 00:00:00 GMT",
            "Pragma": "no-cache",
            "Content-Type": "application/pdf",
        }
    )


class TestPragma:
    def test_removes_only_the_literal(self):
        headers = httpx.Headers({"Pragma": "no-cache, no-store"})
        assert pragma_value(headers) == ", no-store"

    def test_removes_every_occurrence(self):
        headers = httpx.Headers({"Pragma": "no-cache no-cache"})
        assert pragma_value(headers) == " "

    def test_absent_is_empty(self):
        assert pragma_value(httpx.Headers()) == ""


class TestCacheFriendlyHeaders:
    def test_rewrites_cache_headers(self):
        headers = cache_friendly_headers(_origin_headers(), _DAY_MS, _NOW)

        for name in CLEARED_HEADERS:
            assert headers[name] == ""
        assert headers["Pragma"] == ""
        assert headers["Date"] == "Mon, 19 Oct 2026 12:00:00 GMT"
        assert headers["Expires"] == "Tue, 20 Oct 2026 12:00:00 GMT"
        assert headers["Content-Type"] == "application/pdf"

    def test_rewrites_in_place(self):
        headers = _origin_headers()
        assert cache_friendly_headers(headers, _DAY_MS, _NOW) is headers

    def test_absent_headers_are_added_empty(self):
        headers = cache_friendly_headers(httpx.Headers(), 0, _NOW)
        assert headers["Cache-Control"] == ""
        assert headers["Pragma"] == ""
        assert headers["Expires"] == headers["Date"]

    def test_second_pass_advances_dates(self):
        headers = cache_friendly_headers(_origin_headers(), _DAY_MS, _NOW)
        later = _NOW + timedelta(seconds=30)
        cache_friendly_headers(headers, _DAY_MS, later)

        for name in CLEARED_HEADERS:
            assert headers[name] == ""
        assert headers["Date"] == "Mon, 19 Oct 2026 12:00:30 GMT"
        assert headers["Expires"] == "Tue, 20 Oct 2026 12:00:30 GMT"

    def test_no_duplicate_values_after_rewrite(self):
        headers = httpx.Headers([("Pragma", "no-cache"), ("Vary", "A"), ("Vary", "B")])
        cache_friendly_headers(headers, _DAY_MS, _NOW)
        assert headers.get_list("Vary") == [""]


def test_http_date_naive_is_utc():
    assert http_date(datetime(2026, 1, 2, 3, 4, 5)) == "Fri, 02 Jan 2026 03:04:05 GMT"


class TestContentDisposition:
    def test_uses_court_label(self):
        value = content_disposition("case-67-0.pdf", "cand")
        assert value == 'inline; filename="N.D.Cal.-case-67-0.pdf"'

    def test_unknown_court_falls_back_to_code(self):
        value = content_disposition("x.pdf", "zzzz")
        assert value == 'inline; filename="zzzz-x.pdf"'

    def test_quotes_in_filename_are_escaped(self):
        value = content_disposition('a"b\\c.pdf', "cand")
        assert value == 'inline; filename="N.D.Cal.-a\\"b\\\\c.pdf"'

    def test_missing_parts_give_none(self):
        assert content_disposition(None, "cand") is None
        assert content_disposition("x.pdf", None) is None

    def test_set_leaves_header_untouched_when_incomplete(self):
        headers = httpx.Headers({"Content-Disposition": "attachment"})
        assert set_content_disposition(headers, None, "cand") is None
        assert headers["Content-Disposition"] == "attachment"

    def test_set_writes_header(self):
        headers = httpx.Headers()
        set_content_disposition(headers, "x.pdf", "nysd")
        assert headers["content-disposition"] == 'inline; filename="S.D.N.Y.-x.pdf"'


def test_describe_headers_marks_absent():
    line = describe_headers("https://h/p", httpx.Headers({"ETag": "e"}))
    assert line.startswith("Headers for https://h/p: ")
    assert "'ETag': 'e'" in line
    assert "'Age': '<<none>>'" in line
