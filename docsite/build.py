"""Full site build: everything the static site serves besides themed HTML pages."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from docsite.bundle import write_bundle
from docsite.config import SiteConfig
from docsite.core.content import DocPage, load_pages
from docsite.core.processor import write_endpoints
from docsite.hero import render_hero
from docsite.llms import write_llms
from docsite.modules import DocTreeModule, all_modules
from docsite.sidebar import SidebarItem, build_sidebar

HERO_DIR = "hero"
SIDEBAR_FILENAME = "sidebar.json"


@dataclass
class BuildReport:
    """Counts of what a build produced."""
    pages: int = 0
    endpoints: int = 0
    heroes: list[str] = field(default_factory=list)
    llms_files: int = 0
    bundle_documents: int = 0


def render_heroes(pages: list[DocPage], site: SiteConfig) -> dict[str, str]:
    """Hero HTML for every page that declares a hero block, keyed by slug."""
    return {
        page.slug: render_hero(page, site.hero_actions)
        for page in pages
        if page.hero is not None
    }


def write_heroes(fragments: dict[str, str], output_dir: Path) -> None:
    for slug, html in fragments.items():
        target = output_dir / HERO_DIR / f"{slug}.html"
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(html, encoding="utf-8")
        print(f"Saved: {HERO_DIR}/{slug}.html")


def write_sidebar(sidebar: list[SidebarItem], output_dir: Path) -> Path:
    path = output_dir / SIDEBAR_FILENAME
    path.write_text(
        json.dumps([item.to_dict() for item in sidebar], indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    print(f"Saved: {SIDEBAR_FILENAME}")
    return path


def unowned_pages(pages: list[DocPage], modules: list[DocTreeModule]) -> list[DocPage]:
    """Pages outside every language tree (landing page, developer tools...)."""
    return [p for p in pages if not any(m.owns(p.slug) for m in modules)]


def build_site(site: SiteConfig, output_dir: Optional[Path] = None) -> BuildReport:
    """
    Build every generated artifact of the site.

    Args:
        site: Site configuration
        output_dir: Overrides site.output_dir

    Returns:
        BuildReport summarizing the outputs
    """
    output_dir = output_dir or site.output_dir
    output_dir.mkdir(parents=True, exist_ok=True)

    print(f"Loading content from {site.content_dir}...")
    pages = load_pages(site.content_dir)
    modules = all_modules(site, pages)
    report = BuildReport(pages=len(pages))

    # Language trees
    for module in modules:
        report.endpoints += module.run(output_dir)

    # Pages outside the trees still get markdown endpoints
    for page in unowned_pages(pages, modules):
        report.endpoints += write_endpoints(page, output_dir)

    fragments = render_heroes(pages, site)
    write_heroes(fragments, output_dir)
    report.heroes = sorted(fragments)

    write_sidebar(build_sidebar(modules), output_dir)
    report.llms_files = len(write_llms(site, modules, pages, output_dir))

    report.bundle_documents = write_bundle(modules, output_dir)

    print(f"\nDone! Built {report.pages} pages into {output_dir}")
    return report

