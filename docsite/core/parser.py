"""Link extraction from rendered HTML and markdown."""

import re
from dataclasses import dataclass
from urllib.parse import urljoin

from bs4 import BeautifulSoup

MARKDOWN_LINK_PATTERN = re.compile(r'(?<!!)\[[^\]]*\]\(\s*<?([^)\s>]+)>?(?:\s+"[^"]*")?\s*\)')
HREF_PATTERN = re.compile(r'href=["\']([^"\']+)["\']')
FENCED_CODE_PATTERN = re.compile(r'```[\s\S]*?```')


@dataclass
class NavLink:
    """A navigation link with hierarchy information."""
    title: str
    url: str
    depth: int = 0


def parse_nav_links(html: str, nav_selector: str, base_url: str) -> list[NavLink]:
    """
    Parse navigation links from HTML.

    Args:
        html: HTML content to parse
        nav_selector: CSS selector for the navigation container
        base_url: Base URL for resolving relative links

    Returns:
        List of NavLink objects with title, URL, and depth
    """
    soup = BeautifulSoup(html, "lxml")
    nav = soup.select_one(nav_selector)

    if not nav:
        return []

    links: list[NavLink] = []
    seen_urls: set[str] = set()

    for anchor in nav.select("a"):
        href = anchor.get("href")
        if not href:
            continue

        # Skip anchor links and mail links
        if href.startswith("#") or href.startswith("mailto:"):
            continue

        full_url = urljoin(base_url, href)

        if full_url in seen_urls:
            continue
        seen_urls.add(full_url)

        # Badge text stays in the title, separated by a space
        title = anchor.get_text(" ", strip=True)
        if not title:
            continue

        depth = len(anchor.find_parents("ul"))

        links.append(NavLink(title=title, url=full_url, depth=depth))

    return links


def markdown_links(body: str) -> list[str]:
    """
    Collect link targets from a markdown/MDX body.

    Picks up both [text](target) links and raw href="..." attributes.
    Image links and anything inside fenced code blocks are ignored.
    """
    text = FENCED_CODE_PATTERN.sub('', body)
    targets = MARKDOWN_LINK_PATTERN.findall(text)
    targets.extend(HREF_PATTERN.findall(text))
    return targets
