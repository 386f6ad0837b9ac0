"""Internal and external link validation."""

from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Iterable, Optional

import requests

from docsite.core.content import DocPage
from docsite.core.fetcher import Fetcher
from docsite.core.parser import markdown_links, parse_nav_links
from docsite.core.processor import LANGUAGES
from docsite.sidebar import SidebarItem, extract_slugs, external_links

# Suffixes of the markdown endpoints that map back to a page slug
ENDPOINT_VARIANTS = LANGUAGES + ("full",)
STATIC_SUFFIXES = {
    ".png", ".jpg", ".jpeg", ".gif", ".svg", ".webp", ".ico",
    ".txt", ".json", ".xml", ".pdf", ".zip",
}


@dataclass(frozen=True)
class BrokenLink:
    """A link whose target could not be resolved."""
    source: str
    target: str
    reason: str

    def __str__(self) -> str:
        return f"{self.source}: {self.target} ({self.reason})"


def resolve_internal(target: str, site_url: str) -> Optional[str]:
    """
    Map a link target to the page slug it points at.

    Args:
        target: href or markdown link target
        site_url: Absolute site URL; links under it count as internal

    Returns:
        The slug, or None for external, relative, fragment-only and
        static asset links, which are not checked here
    """
    site_url = site_url.rstrip("/")
    if target.startswith(site_url + "/") or target == site_url:
        target = target[len(site_url):] or "/"
    if not target.startswith("/") or target.startswith("//"):
        return None

    path = target.split("#", 1)[0].split("?", 1)[0].strip("/")

    if path.endswith(".md"):
        path = path[: -len(".md")]
        stem, _, variant = path.rpartition(".")
        if stem and variant in ENDPOINT_VARIANTS:
            path = stem
    elif PurePosixPath(path).suffix.lower() in STATIC_SUFFIXES:
        return None

    return path or "index"


def validate_site(
    pages: Iterable[DocPage],
    sidebar: list[SidebarItem],
    hero_fragments: dict[str, str],
    site_url: str,
) -> list[BrokenLink]:
    """
    Check every internal link the site publishes.

    Args:
        pages: All loaded pages
        sidebar: Site-wide sidebar
        hero_fragments: Rendered hero HTML keyed by page slug
        site_url: Absolute site URL

    Returns:
        Broken links, in discovery order
    """
    pages = list(pages)
    known = {page.slug for page in pages}
    broken: list[BrokenLink] = []

    for slug in extract_slugs(sidebar):
        if slug not in known:
            broken.append(BrokenLink("sidebar", slug, "no such page"))

    for page in pages:
        for target in markdown_links(page.body):
            slug = resolve_internal(target, site_url)
            if slug is not None and slug not in known:
                broken.append(BrokenLink(page.slug, target, "no such page"))

    for page_slug, html in hero_fragments.items():
        for link in parse_nav_links(html, ".hero", site_url.rstrip("/") + "/"):
            slug = resolve_internal(link.url, site_url)
            if slug is not None and slug not in known:
                broken.append(BrokenLink(f"{page_slug} (hero)", link.url, "no such page"))

    return broken


def check_external(sidebar: list[SidebarItem], fetcher: Fetcher) -> list[BrokenLink]:
    """Request every external sidebar link; errors and 4xx/5xx count as broken."""
    broken = []
    for item in external_links(sidebar):
        try:
            status = fetcher.check_url(item.link)
        except requests.RequestException as e:
            broken.append(BrokenLink("sidebar", item.link, f"request failed: {e}"))
            continue
        if status >= 400:
            broken.append(BrokenLink("sidebar", item.link, f"HTTP {status}"))
    return broken
