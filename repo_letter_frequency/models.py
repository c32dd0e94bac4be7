"""Data models for the repository walk and letter tally."""

from dataclasses import dataclass, field

FILE = "file"
DIR = "dir"


@dataclass
class ApiResponse:
    """Response from a contents listing call."""

    status: int
    body: dict | list
    link: str | None = None


@dataclass
class RepoEntry:
    """One item of a contents listing."""

    path: str | None
    type: str | None
    url: str | None = None

    @classmethod
    def from_api(cls, item) -> "RepoEntry":
        if not isinstance(item, dict):
            return cls(path=None, type=None)
        return cls(path=item.get("path"), type=item.get("type"), url=item.get("url"))

    @property
    def is_file(self) -> bool:
        return self.type == FILE

    @property
    def is_dir(self) -> bool:
        return self.type == DIR


@dataclass
class AggregateStats:
    """Counters reported by the content aggregator."""

    fetched: int = 0
    errors: int = 0
    failed_paths: list[str] = field(default_factory=list)
