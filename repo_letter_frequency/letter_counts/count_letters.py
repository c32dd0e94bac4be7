"""Case-insensitive letter tally."""


def count_letters(text: str, table: dict[str, int]) -> dict[str, int]:
    """Add every alphabetic character of `text` to `table`, lowercased.

    Updates `table` in place and returns it. Digits, punctuation,
    whitespace and other non-letters are ignored. A letter whose lowercase
    form spans several code points (e.g. 'İ') is counted as itself, so every
    key is a single character.
    """
    for ch in text:
        if ch.isalpha():
            key = ch.lower()
            if len(key) != 1:
                key = ch
            table[key] = table.get(key, 0) + 1
    return table
