"""
Link extraction for SiteMapper.

Links are found with regular expressions over the raw markup rather than a full
HTML parser. Malformed markup may therefore yield extra or missing links; that
is accepted behaviour. All functions are pure and never raise on bad input.
"""
from __future__ import annotations

import re
from functools import lru_cache
from typing import List, Optional

__all__ = ("extract_relative_links", "extract_absolute_links", "extract_links", "ANY_HOST_PATTERN")

#: host pattern used when no domain filter is supplied
ANY_HOST_PATTERN = r"[^:/\s\"']+"

_RELATIVE_RE = re.compile(r"""href=(?P<q>["'])(?P<link>/(?!/)[A-Za-z0-9\-_./]+)(?P=q)""")


@lru_cache(maxsize=32)
def _absolute_re(domain: Optional[str]) -> re.Pattern[str]:
    host = ANY_HOST_PATTERN if domain is None else r"(?:[^\s/\"']*\.)?" + re.escape(domain)
    return re.compile(
        r"""href=(?P<q>["'])(?P<link>https?://""" + host + r"""(?:/[^\s"']*)?)(?P=q)"""
    )


def extract_relative_links(html: str) -> List[str]:
    """
    Return root-relative paths (``/about``, ``/blog/post-1``) in document order.

    Only values made of letters, digits and ``-_./`` are accepted; duplicates are kept.
    Protocol-relative values (``//cdn.example.com``) are not relative links.
    """
    if not isinstance(html, str):
        return []
    return [m.group("link") for m in _RELATIVE_RE.finditer(html)]


def extract_absolute_links(html: str, domain: Optional[str] = None) -> List[str]:
    """
    Return fully qualified http(s) links in document order.

    With *domain*, only links whose host equals it or is one of its subdomains
    are returned. Without it, links to any host are returned.
    """
    if not isinstance(html, str):
        return []
    return [m.group("link") for m in _absolute_re(domain).finditer(html)]


def extract_links(html: str, root: str, domain: Optional[str]) -> List[str]:
    """Relative links resolved against *root*, followed by absolute links on *domain*."""
    base = root.rstrip("/")
    children = [base + path for path in extract_relative_links(html)]
    children.extend(extract_absolute_links(html, domain))
    return children
