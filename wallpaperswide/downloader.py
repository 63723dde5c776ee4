from __future__ import annotations

import time
from pathlib import Path
from typing import Optional

from .http_utils import create_scraper, fetch_binary, fetch_text
from .models import ItemOutcome, ItemStatus, ListingItem, PageRange, PageResult, RunResult
from .parsing import (
    SITE_ORIGIN,
    absolute_url,
    build_download_target,
    extract_download_link,
    extract_listing_items,
)
from .ui import ConsoleUI


def listing_url(page: int) -> str:
    if page == 1:
        return f"{SITE_ORIGIN}/"
    return f"{SITE_ORIGIN}/page/{page}"


def download_item(scraper, item: ListingItem, output_directory: Path) -> ItemOutcome:
    """Resolve one listing entry to its image and write it to disk.

    Never raises: a missing download link yields ``NO_LINK`` and any
    fetch, parse or write error yields ``FAILED`` with the exception attached.
    """
    try:
        if not item.detail_link:
            raise ValueError(f"Listing entry {item.position} has no detail link")
        detail_html = fetch_text(scraper, absolute_url(item.detail_link))
        href = extract_download_link(detail_html)
        if href is None:
            return ItemOutcome(item=item, status=ItemStatus.NO_LINK)

        target = build_download_target(href)
        payload = fetch_binary(scraper, target.url)
        path = output_directory / target.file_name
        path.write_bytes(payload)
    except Exception as exc:
        return ItemOutcome(item=item, status=ItemStatus.FAILED, error=exc)
    return ItemOutcome(item=item, status=ItemStatus.DOWNLOADED, target=target, path=path)


def scrape_page(
    scraper,
    page: int,
    output_directory: Path,
    *,
    ui: Optional[ConsoleUI] = None,
) -> PageResult:
    internal_ui = ui or ConsoleUI()
    should_finalize = ui is None

    try:
        html = fetch_text(scraper, listing_url(page))
        items = extract_listing_items(html)
        total_items = len(items)
        internal_ui.log_event(f"Page {page}: {total_items} wallpapers found", level="info")

        result = PageResult(page=page, item_count=total_items)
        for item in items:
            internal_ui.update_detail(f"Resolving wallpaper {item.position}/{total_items}...")
            outcome = download_item(scraper, item, output_directory)
            result.outcomes.append(outcome)
            if outcome.status is ItemStatus.DOWNLOADED:
                internal_ui.log_event(
                    f"[{item.position}/{total_items}] {outcome.target.file_name}",
                    level="success",
                )
        internal_ui.update_detail(None)
    finally:
        if should_finalize:
            internal_ui.finalize()
    return result


def download_pages(
    page_range: PageRange,
    output_directory: Path,
    delay: float = 2.0,
    *,
    ui: Optional[ConsoleUI] = None,
    scraper=None,
) -> RunResult:
    output_directory.mkdir(parents=True, exist_ok=True)
    internal_ui = ui or ConsoleUI()
    should_finalize = ui is None
    scraper = scraper or create_scraper()
    result = RunResult(output_directory=output_directory)

    try:
        internal_ui.log_event(
            f"Fetching wallpapers from page {page_range.start} to {page_range.end}...\n",
            level="info",
        )

        for page in page_range.pages():
            try:
                page_result = scrape_page(scraper, page, output_directory, ui=internal_ui)
            except Exception as exc:
                message = str(exc).strip() or exc.__class__.__name__
                internal_ui.update_detail(None)
                internal_ui.log_event(f"Page {page} failed: {message}", level="error")
                result.failed_pages.append(page)
            else:
                result.total += page_result.item_count
                result.downloaded += page_result.downloaded

            if page < page_range.end:
                time.sleep(delay)

        internal_ui.log_event(
            f'\nDone! {result.total} wallpapers saved in "{output_directory}".',
            level="success",
        )
        if result.downloaded != result.total:
            internal_ui.log_event(
                f"{result.downloaded} of {result.total} discovered wallpapers were actually downloaded.",
                level="muted",
            )
    finally:
        if should_finalize:
            internal_ui.finalize()
    return result
