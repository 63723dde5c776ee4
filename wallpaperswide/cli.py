from __future__ import annotations

import argparse
import re
from pathlib import Path
from typing import Optional, Sequence

from .models import PageRange

DEFAULT_OUTPUT = "downloads"
DEFAULT_DELAY = 2.0
PAGE_NUMBER_PATTERN = re.compile(r"\s*([+-]?\d+)")

EXAMPLES = """\
examples:
  wallpaperswide-downloader
  wallpaperswide-downloader --start 1 --end 3
"""


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Download wallpapers from wallpaperswide.com in 1920x1080 resolution. "
            'Files are saved into the "downloads/" folder in the current directory.'
        ),
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--start",
        nargs="?",
        default=None,
        metavar="N",
        help="Starting listing page (default: 1).",
    )
    parser.add_argument(
        "--end",
        nargs="?",
        default=None,
        metavar="N",
        help="Ending listing page, inclusive (default: same as --start).",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=DEFAULT_OUTPUT,
        help=f"Destination directory for the images (default: {DEFAULT_OUTPUT}).",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=DEFAULT_DELAY,
        help=f"Pause (seconds) between listing pages to be polite to the server (default: {DEFAULT_DELAY}).",
    )
    args, _unknown = parser.parse_known_args(argv)
    return args


def _page_number(raw: Optional[str]) -> Optional[int]:
    if raw is None:
        return None
    match = PAGE_NUMBER_PATTERN.match(raw)
    if not match:
        return None
    return int(match.group(1)) or None


def resolve_page_range(args: argparse.Namespace) -> PageRange:
    start = _page_number(args.start) or 1
    end = _page_number(args.end) or start
    if start > end:
        raise SystemExit("Invalid range: start cannot be greater than end.")
    if start < 1:
        raise SystemExit("Invalid range: page numbers must be positive.")
    return PageRange(start=start, end=end)


def validate_args(args: argparse.Namespace) -> None:
    if args.delay < 0:
        raise SystemExit("Delay must be zero or greater.")
    output_path = Path(args.output)
    if output_path.exists() and not output_path.is_dir():
        raise SystemExit(f"Output path exists and is not a directory: {output_path}")
