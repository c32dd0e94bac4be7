"""Count letter frequency across source files of a GitHub repository.

Walks the contents API (following Link-header pagination), downloads the
raw text of matching files one at a time, and tallies letters case-insensitively.
"""

from .cli import main
from .client import RepoClient
from .letter_counts import aggregate, count_letters
from .models import ApiResponse, RepoEntry
from .report import format_report
from .walk_tree import walk_tree

__all__ = [
    "main",
    "RepoClient",
    "aggregate",
    "count_letters",
    "ApiResponse",
    "RepoEntry",
    "format_report",
    "walk_tree",
]

if __name__ == "__main__":
    main()
