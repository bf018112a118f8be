"""
Profile link extraction.

Finds professional-network and code-hosting profile URLs in free text,
merges them with an explicit link list and deduplicates the result.
"""

import re
from typing import Iterable, Optional

from atsfit.utils.logger import get_logger

logger = get_logger(__name__)


# Recognised profile hosts (pattern -> kind)
PROFILE_LINK_PATTERNS: tuple[tuple[str, re.Pattern], ...] = (
    ("linkedin", re.compile(r"(?:https?://)?(?:[a-z]{2,3}\.)?linkedin\.com/(?:in|pub|company)/[\w\-.%]+/?", re.IGNORECASE)),
    ("github", re.compile(r"(?:https?://)?(?:www\.)?github\.com/[\w\-.]+(?:/[\w\-.]+)?/?", re.IGNORECASE)),
    ("gitlab", re.compile(r"(?:https?://)?(?:www\.)?gitlab\.com/[\w\-.]+(?:/[\w\-.]+)?/?", re.IGNORECASE)),
    ("bitbucket", re.compile(r"(?:https?://)?(?:www\.)?bitbucket\.org/[\w\-.]+/?", re.IGNORECASE)),
    ("stackoverflow", re.compile(r"(?:https?://)?(?:www\.)?stackoverflow\.com/users/\d+(?:/[\w\-]+)?/?", re.IGNORECASE)),
    ("dribbble", re.compile(r"(?:https?://)?(?:www\.)?dribbble\.com/[\w\-]+/?", re.IGNORECASE)),
    ("behance", re.compile(r"(?:https?://)?(?:www\.)?behance\.net/[\w\-]+/?", re.IGNORECASE)),
)

# Tag line that opens an explicit link block
LINKS_BLOCK_TAG = re.compile(r"^\s*\[LINKS\]\s*$", re.IGNORECASE)
_BLOCK_TAG = re.compile(r"^\s*\[[A-Z_ ]+\]\s*$")
_URL_LIKE = re.compile(r"^(?:https?://)?(?:www\.)?[\w\-]+(?:\.[\w\-]+)+(?:/\S*)?$", re.IGNORECASE)

_TRAILING_PUNCTUATION = ".,;:)]}>\"'"


def _link_key(url: str) -> str:
    """Comparison key: case-insensitive, one trailing slash ignored."""
    key = url.strip().lower()
    if key.endswith("/"):
        key = key[:-1]
    return key


def _clean_url(url: str) -> str:
    url = url.strip()
    while url and url[-1] in _TRAILING_PUNCTUATION:
        url = url[:-1]
    return url


def find_links_block(text: str) -> list[str]:
    """
    Read the URLs listed under a ``[LINKS]`` tag.

    The block runs until a blank line or the next ``[TAG]`` line.

    Args:
        text: Raw text that may contain a tagged block

    Returns:
        The URL-like lines of the block, in order
    """
    links: list[str] = []
    in_block = False
    for line in text.splitlines():
        if LINKS_BLOCK_TAG.match(line):
            in_block = True
            continue
        if not in_block:
            continue
        stripped = line.strip().lstrip("-•* ").strip()
        if not stripped or _BLOCK_TAG.match(line):
            in_block = False
            continue
        if _URL_LIKE.match(stripped):
            links.append(stripped)
    return links


def is_link_line(line: str) -> bool:
    """True when a line is nothing but a URL or profile handle."""
    stripped = line.strip().lstrip("-•* ").strip()
    if not stripped or " " in stripped:
        return False
    return bool(_URL_LIKE.match(stripped)) and "." in stripped


def extract_links(text: str, explicit_list: Optional[Iterable[str]] = None) -> list[str]:
    """
    Extract profile links from text plus an explicit list.

    Recognises bare or scheme-prefixed professional-network and
    code-hosting profile URLs. Deduplication is case-insensitive and
    ignores one trailing slash. Links found in the text come first, in
    order of first occurrence, followed by explicit-list-only entries.

    Args:
        text: Free text to scan
        explicit_list: URLs supplied separately (e.g. from a [LINKS] block)

    Returns:
        Ordered, deduplicated URLs (empty when nothing was found)
    """
    found: list[tuple[int, str]] = []
    for _kind, pattern in PROFILE_LINK_PATTERNS:
        for match in pattern.finditer(text or ""):
            found.append((match.start(), _clean_url(match.group(0))))
    found.sort(key=lambda item: item[0])

    seen: set[str] = set()
    links: list[str] = []
    for _position, url in found:
        key = _link_key(url)
        if url and key not in seen:
            seen.add(key)
            links.append(url)

    for url in explicit_list or ():
        cleaned = _clean_url(url)
        key = _link_key(cleaned)
        if cleaned and key not in seen:
            seen.add(key)
            links.append(cleaned)

    if links:
        logger.debug(f"Extracted {len(links)} profile link(s)")
    return links
