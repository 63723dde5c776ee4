from __future__ import annotations

from typing import Optional

from bs4 import BeautifulSoup

from .models import DownloadTarget, ListingItem

SITE_ORIGIN = "https://wallpaperswide.com"
RESOLUTION_SUFFIX = "1920x1080.jpg"

LISTING_CARD_SELECTOR = ".wall"
DOWNLOAD_LINK_SELECTOR = f"a[target='_self'][href$='{RESOLUTION_SUFFIX}']"


def extract_listing_items(html: str) -> list[ListingItem]:
    soup = BeautifulSoup(html, "html.parser")
    items: list[ListingItem] = []
    for position, card in enumerate(soup.select(LISTING_CARD_SELECTOR), start=1):
        link = card.select_one("a[href]")
        detail_link = link["href"].strip() if link else None
        items.append(ListingItem(position=position, detail_link=detail_link or None))
    return items


def extract_download_link(html: str) -> Optional[str]:
    soup = BeautifulSoup(html, "html.parser")
    anchor = soup.select_one(DOWNLOAD_LINK_SELECTOR)
    if not anchor or not anchor.get("href"):
        return None
    return anchor["href"].strip()


def absolute_url(href: str, origin: str = SITE_ORIGIN) -> str:
    if href.startswith(("http://", "https://")):
        return href
    return f"{origin}{href}"


def build_download_target(href: str, origin: str = SITE_ORIGIN) -> DownloadTarget:
    file_name = href.split("/")[-1]
    if not file_name:
        raise ValueError(f"Download link has no file name: {href}")
    return DownloadTarget(url=absolute_url(href, origin), file_name=file_name)
