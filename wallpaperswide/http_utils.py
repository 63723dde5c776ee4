from __future__ import annotations

from typing import Optional

import cloudscraper
import requests


class HTTPStatusError(RuntimeError):
    """Raised when the server answers with a status outside the 2xx range."""

    def __init__(self, status: int, url: str) -> None:
        super().__init__(f"HTTP {status}")
        self.status = status
        self.url = url


def create_scraper() -> cloudscraper.CloudScraper:
    return cloudscraper.create_scraper(
        browser={"browser": "chrome", "platform": "windows", "mobile": False},
    )


def perform_request(
    scraper: cloudscraper.CloudScraper,
    url: str,
    *,
    timeout: Optional[float] = None,
) -> requests.Response:
    response = scraper.request(method="GET", url=url, timeout=timeout)
    if not 200 <= response.status_code < 300:
        raise HTTPStatusError(response.status_code, url)
    return response


def fetch_text(scraper: cloudscraper.CloudScraper, url: str, *, timeout: Optional[float] = None) -> str:
    return perform_request(scraper, url, timeout=timeout).text


def fetch_binary(scraper: cloudscraper.CloudScraper, url: str, *, timeout: Optional[float] = None) -> bytes:
    return perform_request(scraper, url, timeout=timeout).content
