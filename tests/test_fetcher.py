import pytest
import requests

from libur_api.core.errors import FetchError
from libur_api.services.fetcher import PageFetcher


class FakeResponse:
    def __init__(self, status_code, text="", encoding="utf-8"):
        self.status_code = status_code
        self.text = text
        self.encoding = encoding
        self.apparent_encoding = "utf-8"


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requests = []

    def get(self, url, headers=None, timeout=None):
        self.requests.append((url, headers, timeout))
        if self.error is not None:
            raise self.error
        return self.response


def test_build_url():
    fetcher = PageFetcher(base_url="https://example.test/", session=FakeSession())
    assert fetcher.build_url(2025) == "https://example.test/2025"


def test_fetch_returns_body():
    session = FakeSession(FakeResponse(200, "<html></html>"))
    fetcher = PageFetcher(base_url="https://example.test", timeout=3, session=session)

    assert fetcher.fetch(2025) == "<html></html>"

    url, headers, timeout = session.requests[0]
    assert url == "https://example.test/2025"
    assert timeout == 3
    assert "user-agent" in headers


@pytest.mark.parametrize("status", [404, 429, 500, 302])
def test_non_success_status_raises(status):
    fetcher = PageFetcher(base_url="https://example.test", session=FakeSession(FakeResponse(status)))

    with pytest.raises(FetchError) as exc_info:
        fetcher.fetch(2025)

    assert exc_info.value.year == 2025
    assert exc_info.value.status == status
    assert str(status) in exc_info.value.message


def test_transport_failure_raises():
    session = FakeSession(error=requests.ConnectionError("connection refused"))
    fetcher = PageFetcher(base_url="https://example.test", session=session)

    with pytest.raises(FetchError) as exc_info:
        fetcher.fetch(2024)

    assert exc_info.value.year == 2024
    assert exc_info.value.status is None
    assert len(session.requests) == 1


PAGE_UTF8 = (
    "<html><body><ul>"
    + "".join(
        f'<li class="holiday"><span class="date">{d}</span><span class="title">{t}</span></li>'
        for d, t in [
            ("29 Januari", "Tahun Baru Imlek 2576 Kongzili – Libur Nasional"),
            ("29 Maret", "Hari Suci Nyepi · Tahun Baru Saka 1947"),
            ("31 Maret", "Idul Fitri 1446 Hijriah — “Lebaran”"),
        ]
    )
    + "</ul></body></html>"
)


def make_response(body: str, encoding):
    response = requests.Response()
    response.status_code = 200
    response._content = body.encode("utf-8")
    response.encoding = encoding
    return response


@pytest.mark.parametrize("encoding", [None, "ISO-8859-1"])
def test_undeclared_charset_is_detected(encoding):
    session = FakeSession(make_response(PAGE_UTF8, encoding))
    fetcher = PageFetcher(base_url="https://example.test", session=session)

    html = fetcher.fetch(2025)

    assert html == PAGE_UTF8
    assert "“Lebaran”" in html


def test_declared_charset_is_kept():
    session = FakeSession(make_response(PAGE_UTF8, "utf-8"))
    fetcher = PageFetcher(base_url="https://example.test", session=session)

    assert fetcher.fetch(2025) == PAGE_UTF8
