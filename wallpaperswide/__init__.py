from .downloader import download_pages, scrape_page
from .cli import parse_args, resolve_page_range, validate_args

__all__ = [
    "download_pages",
    "scrape_page",
    "parse_args",
    "resolve_page_range",
    "validate_args",
]
