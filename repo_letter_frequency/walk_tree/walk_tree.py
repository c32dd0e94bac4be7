"""Walk a repository's contents listing and collect matching file paths."""

import sys

from ..client import RepoClient
from ..models import RepoEntry
from ..utils import has_extension, next_page_url


def _warn(message: str) -> None:
    print(f"    [WARN] {message}", file=sys.stderr, flush=True)


def _list_directory(client: RepoClient, url: str | None) -> list[RepoEntry]:
    """Fetch every page of one directory listing."""
    entries: list[RepoEntry] = []
    url = url or client.settings.contents_url
    pages_seen: set[str] = set()
    while True:
        pages_seen.add(url)
        resp = client.list_contents(url)
        entries.extend(RepoEntry.from_api(item) for item in resp.body)
        url = next_page_url(resp.link)
        if url is None:
            return entries
        if url in pages_seen:
            _warn(f"Pagination loops back to {url}, stopping")
            return entries


def walk_tree(
    client: RepoClient,
    url: str | None = None,
    extensions=None,
    verbose: bool = False,
) -> list[str]:
    """Collect paths of files under `url` whose names end in one of `extensions`.

    Subdirectories are expanded from an explicit stack rather than by
    recursion, so depth is bounded by memory, not the call stack. Output
    order matches a depth-first walk: a directory's files appear where the
    directory was listed.

    Any HTTP or parse failure propagates.
    """
    if extensions is None:
        extensions = client.settings.extensions

    # Stack frames are iterators over listed entries; a dir pushes its own frame
    stack = [iter(_list_directory(client, url))]
    paths: list[str] = []
    dirs_seen = 1

    while stack:
        entry = next(stack[-1], None)
        if entry is None:
            stack.pop()
            continue

        if entry.path is None:
            _warn(f"Skipping entry without a path (type={entry.type})")
            continue

        if entry.is_file:
            if has_extension(entry.path, extensions):
                paths.append(entry.path)
        elif entry.is_dir:
            if not entry.url:
                _warn(f"Skipping directory without a listing URL: {entry.path}")
                continue
            if verbose:
                print(f"  dir {entry.path}", file=sys.stderr, flush=True)
            stack.append(iter(_list_directory(client, entry.url)))
            dirs_seen += 1

    if verbose:
        print(f"Found {len(paths):,} files in {dirs_seen:,} directories", file=sys.stderr, flush=True)
    return paths
