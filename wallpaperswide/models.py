from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterator, Optional


@dataclass(frozen=True)
class PageRange:
    start: int
    end: int

    def pages(self) -> Iterator[int]:
        return iter(range(self.start, self.end + 1))

    def __len__(self) -> int:
        return self.end - self.start + 1


@dataclass(frozen=True)
class ListingItem:
    position: int
    detail_link: Optional[str]


@dataclass(frozen=True)
class DownloadTarget:
    url: str
    file_name: str


class ItemStatus(Enum):
    DOWNLOADED = "downloaded"
    NO_LINK = "no_link"
    FAILED = "failed"


@dataclass(frozen=True)
class ItemOutcome:
    item: ListingItem
    status: ItemStatus
    target: Optional[DownloadTarget] = None
    path: Optional[Path] = None
    error: Optional[Exception] = None


@dataclass
class PageResult:
    page: int
    item_count: int
    outcomes: list[ItemOutcome] = field(default_factory=list)

    @property
    def downloaded(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status is ItemStatus.DOWNLOADED)


@dataclass
class RunResult:
    output_directory: Path
    total: int = 0
    downloaded: int = 0
    failed_pages: list[int] = field(default_factory=list)
