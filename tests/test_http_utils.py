import pytest
import requests

from wallpaperswide.http_utils import HTTPStatusError, fetch_binary, fetch_text

from fakes import FakeResponse, FakeScraper


def test_fetch_text_returns_body():
    scraper = FakeScraper({"https://x/": FakeResponse(text="<html></html>")})
    assert fetch_text(scraper, "https://x/") == "<html></html>"


def test_fetch_binary_returns_bytes():
    scraper = FakeScraper({"https://x/a.jpg": FakeResponse(content=b"\xff\xd8")})
    assert fetch_binary(scraper, "https://x/a.jpg") == b"\xff\xd8"


@pytest.mark.parametrize("status", [301, 404, 503])
def test_non_success_status_raises(status):
    scraper = FakeScraper({"https://x/": FakeResponse(status_code=status)})
    with pytest.raises(HTTPStatusError) as excinfo:
        fetch_text(scraper, "https://x/")
    assert excinfo.value.status == status
    assert excinfo.value.url == "https://x/"
    assert str(excinfo.value) == f"HTTP {status}"


def test_transport_errors_propagate():
    scraper = FakeScraper({"https://x/": requests.ConnectionError("refused")})
    with pytest.raises(requests.ConnectionError):
        fetch_binary(scraper, "https://x/")
    assert scraper.visited == ["https://x/"]
