"""Render a letter-frequency table for stdout."""

HEADER = "Letter Frequency:"


def sort_frequency(table: dict[str, int]) -> list[tuple[str, int]]:
    """Order by descending count, ties broken by ascending character."""
    return sorted(table.items(), key=lambda kv: (-kv[1], kv[0]))


def format_report(table: dict[str, int]) -> str:
    lines = [HEADER]
    lines.extend(f"{ch}: {count}" for ch, count in sort_frequency(table))
    return "\n".join(lines)
