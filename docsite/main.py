"""CLI entry point for the documentation site build."""

import argparse
import sys
from pathlib import Path

from docsite.build import build_site, render_heroes, write_heroes
from docsite.bundle import write_bundle
from docsite.config import SiteConfig, load_config
from docsite.core.content import load_pages
from docsite.core.fetcher import Fetcher
from docsite.errors import DocsiteError
from docsite.hero import render_hero
from docsite.links import check_external, validate_site
from docsite.llms import write_llms
from docsite.modules import MODULES, all_modules, get_module
from docsite.sidebar import build_sidebar
from docsite.tabs import refactor_directory


def _output_dir(args, site: SiteConfig) -> Path:
    return args.output or site.output_dir


def build_command(args) -> int:
    """Handle the build subcommand."""
    site = load_config(args.config)
    report = build_site(site, _output_dir(args, site))
    print(f"Markdown endpoints: {report.endpoints}")
    print(f"Hero sections: {len(report.heroes)}")
    print(f"llms.txt files: {report.llms_files}")
    print(f"Bundle documents: {report.bundle_documents}")
    return 0


def hero_command(args) -> int:
    """Handle the hero subcommand: print or write hero HTML."""
    site = load_config(args.config)
    pages = load_pages(site.content_dir)

    if args.slug:
        page = next((p for p in pages if p.slug == args.slug), None)
        if page is None:
            print(f"No page with slug '{args.slug}'")
            return 1
        print(render_hero(page, site.hero_actions), end="")
        return 0

    write_heroes(render_heroes(pages, site), _output_dir(args, site))
    return 0


def llms_command(args) -> int:
    """Handle the llms subcommand."""
    site = load_config(args.config)
    pages = load_pages(site.content_dir)
    write_llms(site, all_modules(site, pages), pages, _output_dir(args, site))
    return 0


def bundle_command(args) -> int:
    """Handle the bundle subcommand."""
    site = load_config(args.config)
    write_bundle(all_modules(site), _output_dir(args, site))
    return 0


def pages_command(args) -> int:
    """Handle the pages subcommand: list documentation links."""
    site = load_config(args.config)
    names = [args.language] if args.language else list(MODULES)

    for name in names:
        module = get_module(name, site)
        print(f"\n{module.label} ({module.status})")
        for link in module.get_doc_urls():
            print(f"{'  ' * (link.depth + 1)}{link.title}: {link.url}")
    return 0


def check_links_command(args) -> int:
    """Handle the check-links subcommand."""
    site = load_config(args.config)
    pages = load_pages(site.content_dir)
    modules = all_modules(site, pages)
    sidebar = build_sidebar(modules)

    broken = validate_site(pages, sidebar, render_heroes(pages, site), site.site_url)

    if args.external:
        print("Checking external links...")
        fetcher = Fetcher(delay=site.request_delay)
        broken.extend(check_external(sidebar, fetcher))

    if not broken:
        print("No broken links found.")
        return 0

    print(f"\nFound {len(broken)} broken links:\n")
    for link in broken:
        print(f"  {link}")
    return 1


def refactor_tabs_command(args) -> int:
    """Handle the refactor-tabs subcommand."""
    print("Starting tab replacement...")
    changed = refactor_directory(args.directory)
    print(f"Tab replacement finished: {len(changed)} files updated.")
    return 0


def _add_common_arguments(parser: argparse.ArgumentParser, output: bool = True) -> None:
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Site config file (default: site.yaml at the project root)"
    )
    if output:
        parser.add_argument(
            "-o", "--output",
            type=Path,
            default=None,
            help="Output directory (default: output_dir from the config)"
        )


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docsite",
        description="Build tooling for the multi-language documentation site",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    build_parser = subparsers.add_parser(
        "build",
        help="Build markdown endpoints, hero sections, sidebar, llms.txt and search bundle"
    )
    _add_common_arguments(build_parser)
    build_parser.set_defaults(func=build_command)

    hero_parser = subparsers.add_parser(
        "hero",
        help="Render hero sections"
    )
    hero_parser.add_argument(
        "slug",
        nargs="?",
        default=None,
        help="Print the hero for this page slug instead of writing all of them"
    )
    _add_common_arguments(hero_parser)
    hero_parser.set_defaults(func=hero_command)

    llms_parser = subparsers.add_parser(
        "llms",
        help="Generate llms.txt and related files"
    )
    _add_common_arguments(llms_parser)
    llms_parser.set_defaults(func=llms_command)

    bundle_parser = subparsers.add_parser(
        "bundle",
        help="Generate docs-bundle.json for site search"
    )
    _add_common_arguments(bundle_parser)
    bundle_parser.set_defaults(func=bundle_command)

    pages_parser = subparsers.add_parser(
        "pages",
        help="List the documentation links of each language tree"
    )
    pages_parser.add_argument(
        "-l", "--language",
        choices=list(MODULES),
        default=None,
        help="Only list this language"
    )
    _add_common_arguments(pages_parser, output=False)
    pages_parser.set_defaults(func=pages_command)

    links_parser = subparsers.add_parser(
        "check-links",
        help="Validate internal links (and optionally external sidebar links)"
    )
    links_parser.add_argument(
        "--external",
        action="store_true",
        help="Also request external sidebar links over HTTP"
    )
    _add_common_arguments(links_parser, output=False)
    links_parser.set_defaults(func=check_links_command)

    tabs_parser = subparsers.add_parser(
        "refactor-tabs",
        help="Rewrite language-synced <Tabs> in .mdx files to <LangTabs>"
    )
    tabs_parser.add_argument(
        "directory",
        type=Path,
        help="Directory to scan for .mdx files"
    )
    tabs_parser.set_defaults(func=refactor_tabs_command)

    return parser


def main(argv=None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    # If no command specified, show help
    if not args.command:
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except DocsiteError as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
