"""Base classes for language documentation trees."""

from abc import ABC, abstractmethod
from pathlib import Path
from types import ModuleType
from typing import Optional

from docsite.bundle import index_language
from docsite.config import SiteConfig
from docsite.core.content import DocPage, find_doc_files, load_titled_pages
from docsite.core.parser import NavLink
from docsite.core.processor import filter_content_by_language, process_raw_content, write_endpoints
from docsite.sidebar import SidebarItem, extract_slugs, load_sidebar


class BaseModule(ABC):
    """Base class that all documentation trees must implement."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Language key (e.g., 'js', 'go')."""
        pass

    @property
    @abstractmethod
    def label(self) -> str:
        """Sidebar group label (e.g., 'Genkit JS')."""
        pass

    @abstractmethod
    def get_doc_urls(self) -> list[NavLink]:
        """Return every documentation link in the tree's sidebar."""
        pass

    @abstractmethod
    def fetch_page(self, slug: str) -> str:
        """Return a single page as language-filtered markdown."""
        pass

    @abstractmethod
    def run(self, output_dir: Path) -> int:
        """
        Publish the tree's markdown endpoints.

        Args:
            output_dir: Root of the build output

        Returns:
            Number of endpoint files written
        """
        pass


class DocTreeModule(BaseModule):
    """
    A documentation tree driven by a per-language config module.

    Subclasses set `config` to a module exposing NAME, LABEL, DISPLAY_NAME,
    CONTENT_PREFIX, STATUS, API_REFERENCE_URL and SIDEBAR.
    """

    config: ModuleType

    def __init__(self, site: SiteConfig, pages: Optional[list[DocPage]] = None):
        self.site = site
        self._pages: Optional[list[DocPage]] = None
        if pages is not None:
            self._pages = [p for p in pages if self.owns(p.slug)]
        self._sidebar: Optional[list[SidebarItem]] = None

    @property
    def name(self) -> str:
        return self.config.NAME

    @property
    def label(self) -> str:
        return self.config.LABEL

    @property
    def display_name(self) -> str:
        return self.config.DISPLAY_NAME

    @property
    def status(self) -> str:
        return self.config.STATUS

    @property
    def content_prefix(self) -> str:
        return self.config.CONTENT_PREFIX

    @property
    def content_root(self) -> Path:
        return self.site.content_dir / self.content_prefix

    @property
    def sidebar(self) -> list[SidebarItem]:
        if self._sidebar is None:
            self._sidebar = load_sidebar(self.config.SIDEBAR)
        return self._sidebar

    def owns(self, slug: str) -> bool:
        """Whether a page slug belongs to this tree."""
        return slug == self.content_prefix or slug.startswith(self.content_prefix + "/")

    def load_pages(self) -> list[DocPage]:
        """Load (once) every titled page under the tree's content root."""
        if self._pages is None:
            self._pages = load_titled_pages(find_doc_files(self.content_root), self.site.content_dir)
        return self._pages

    def get_page(self, slug: str) -> Optional[DocPage]:
        for page in self.load_pages():
            if page.slug == slug:
                return page
        return None

    def get_doc_urls(self) -> list[NavLink]:
        """Flatten the sidebar into links, resolving slugs against the site URL."""
        links: list[NavLink] = []

        def walk(items: list[SidebarItem], depth: int) -> None:
            for item in items:
                if item.slug:
                    links.append(NavLink(item.label, self.site.url_for(item.slug), depth))
                elif item.link:
                    links.append(NavLink(item.label, item.link, depth))
                if item.items:
                    walk(item.items, depth + 1)

        walk(self.sidebar, 0)
        return links

    def fetch_page(self, slug: str) -> str:
        page = self.get_page(slug)
        if page is None:
            return ""
        base = process_raw_content(page.raw, page.title)
        return filter_content_by_language(base, self.name)

    def bundle_entries(self) -> dict:
        """Search bundle entries for this tree."""
        return index_language(self.name, self.content_root)

    def run(self, output_dir: Path) -> int:
        """Write markdown endpoints for every page and an _index.md listing."""
        pages = self.load_pages()
        if not pages:
            print(f"No pages found for {self.display_name}!")
            return 0

        print(f"\nWriting {len(pages)} {self.display_name} pages to {output_dir}...")
        written = 0
        for page in pages:
            written += write_endpoints(page, output_dir)
        print(f"Saved {written} markdown endpoints")

        self._generate_index(output_dir, pages)
        return written

    def _generate_index(self, output_dir: Path, pages: list[DocPage]) -> None:
        """Generate _index.md listing the tree's pages, sidebar pages first."""
        by_slug = {page.slug: page for page in pages}
        sidebar_slugs = [s for s in dict.fromkeys(extract_slugs(self.sidebar)) if s in by_slug]
        others = sorted(s for s in by_slug if s not in sidebar_slugs)

        lines = [
            f"# {self.site.title} {self.display_name} Documentation",
            "",
            f"Status: {self.status}",
            f"Total pages: {len(pages)}",
            "",
            "## In the sidebar",
            "",
        ]
        for slug in sidebar_slugs:
            lines.append(f"- [{by_slug[slug].title}](/{slug}.md)")

        if others:
            lines.extend(["", "## Other pages", ""])
            for slug in others:
                lines.append(f"- [{by_slug[slug].title}](/{slug}.md)")

        index_path = output_dir / self.content_prefix / "_index.md"
        index_path.parent.mkdir(parents=True, exist_ok=True)
        index_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        print(f"Saved: {index_path.relative_to(output_dir).as_posix()}")
