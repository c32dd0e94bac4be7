"""CLI for counting letter frequency across a GitHub repository."""

import argparse
import sys

from .client import RepoClient
from .letter_counts import aggregate
from .report import format_report
from .settings import Settings, get_settings
from .walk_tree import walk_tree


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Count letter frequency across source files in a GitHub repository",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--repo",
        default=None,
        metavar="OWNER/NAME",
        help="Repository to scan (default: GITHUB_REPO or lodash/lodash)",
    )
    parser.add_argument(
        "--ref",
        default=None,
        help="Branch, tag or commit (default: GITHUB_REF or master)",
    )
    parser.add_argument(
        "--url",
        default=None,
        help="Start the walk at this contents API URL instead of the repository root",
    )
    parser.add_argument(
        "--ext",
        action="append",
        default=None,
        metavar="EXT",
        help="File extension to include (repeatable, default: .js and .ts)",
    )
    parser.add_argument(
        "--skip-errors",
        action="store_true",
        help="Skip files that fail to download instead of aborting",
    )
    parser.add_argument(
        "--list-only",
        action="store_true",
        help="Print matching file paths and stop",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress progress output on stderr",
    )
    return parser


def _load_settings(args: argparse.Namespace) -> Settings:
    overrides = {}
    if args.repo:
        overrides["github_repo"] = args.repo
    if args.ref:
        overrides["github_ref"] = args.ref
    if args.ext:
        overrides["extensions"] = args.ext
    if not overrides:
        return get_settings()
    # Init kwargs take priority over environment and .env
    return Settings(**overrides)


def run(args: argparse.Namespace) -> None:
    settings = _load_settings(args)
    client = RepoClient(settings)
    verbose = not args.quiet

    if verbose:
        auth = "authenticated" if settings.github_token else "unauthenticated"
        print(f"Scanning {settings.github_repo}@{settings.github_ref} ({auth})", file=sys.stderr, flush=True)

    paths = walk_tree(client, url=args.url, extensions=settings.extensions, verbose=verbose)

    if args.list_only:
        for path in paths:
            print(path)
        return

    table, stats = aggregate(client, paths, skip_errors=args.skip_errors, verbose=verbose)
    if verbose:
        print(
            f"Done: {stats.fetched:,} fetched, {stats.errors:,} errors, {client.requests:,} requests",
            file=sys.stderr,
            flush=True,
        )

    print(format_report(table))


def main(argv=None):
    try:
        args = _build_parser().parse_args(argv)
    except SystemExit as e:
        # argparse has already written usage to stderr; --help exits with 0
        if e.code:
            print(f"An error occurred: invalid arguments (exit code {e.code})")
        return

    try:
        run(args)
    except Exception as e:
        print(f"An error occurred: {str(e) or type(e).__name__}")


if __name__ == "__main__":
    main()
