"""Download file contents and fold them into one letter-frequency table."""

import sys

import httpx

from ..client import RepoClient
from ..models import AggregateStats
from .count_letters import count_letters


def aggregate(
    client: RepoClient,
    paths: list[str],
    table: dict[str, int] | None = None,
    skip_errors: bool = False,
    verbose: bool = False,
) -> tuple[dict[str, int], AggregateStats]:
    """Fetch each path in order and count its letters into `table`.

    By default the first failed download aborts the run. With `skip_errors`
    the failure is recorded in the returned stats and the path is skipped.
    Paths are not deduplicated.
    """
    table = {} if table is None else table
    stats = AggregateStats()
    total = len(paths)

    for i, path in enumerate(paths, 1):
        try:
            content = client.get_raw(path)
        except httpx.HTTPError as e:
            if not skip_errors:
                raise
            stats.errors += 1
            stats.failed_paths.append(path)
            print(f"    [WARN] {path}: {e}", file=sys.stderr, flush=True)
            continue

        count_letters(content, table)
        stats.fetched += 1
        if verbose:
            print(f"  [{i}/{total}] {path}", file=sys.stderr, flush=True)

    return table, stats
