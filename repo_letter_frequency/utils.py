"""Helpers for Link headers and path filtering."""

import re

_LINK_RE = re.compile(r"<([^>]*)>([^<]*)")
_REL_RE = re.compile(r'rel\s*=\s*(?:"([^"]*)"|([^\s;,]+))', re.IGNORECASE)


def parse_link_header(header: str | None) -> dict[str, str]:
    """Parse a Link header into a {relation: url} dict.

    Handles `<url>; rel="next", <url>; rel="last"` and space-separated
    relation lists. The first URL seen for a relation wins.
    """
    links: dict[str, str] = {}
    if not header:
        return links
    for url, params in _LINK_RE.findall(header):
        match = _REL_RE.search(params)
        if not match:
            continue
        rels = match.group(1) if match.group(1) is not None else match.group(2)
        for rel in rels.split():
            links.setdefault(rel.lower(), url.strip())
    return links


def next_page_url(header: str | None) -> str | None:
    """Return the rel="next" URL from a Link header, if any."""
    return parse_link_header(header).get("next")


def has_extension(path: str | None, extensions) -> bool:
    """Case-sensitive suffix match. A missing path never matches."""
    if not path:
        return False
    return path.endswith(tuple(extensions))
