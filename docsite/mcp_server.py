"""MCP Server for the documentation content.

Serves the same language-filtered markdown the site publishes as `.md`
endpoints, so MCP clients can read the docs without scraping HTML.

Tools:
    - list_languages: Show the documentation trees and their status
    - list_pages: List the pages of one language tree
    - get_page: Markdown for one page, filtered to a language

Resources:
    - docs://languages: JSON list of language trees
    - docs://{language}/pages: JSON list of pages in a tree
    - docs://llms/{language}: llms-<language>.txt content
"""

import argparse
import json
import sys
from contextlib import redirect_stdout
from functools import lru_cache
from typing import Optional

from fastmcp import FastMCP

from docsite.config import SiteConfig, load_config
from docsite.core.content import DocPage, load_pages
from docsite.core.processor import (
    LANGUAGES,
    filter_content_by_language,
    normalize_language,
    process_document,
    process_raw_content,
)
from docsite.llms import generate_language_content
from docsite.modules import MODULES, DocTreeModule, all_modules

mcp = FastMCP(
    name="Documentation Pages",
    instructions="""
    This server exposes the SDK documentation as clean markdown, one rendition
    per SDK language (js, go, python).

    HOW TO USE:
    1. list_languages() to see the documentation trees
    2. list_pages(language) to find a page slug
    3. get_page(slug, language) to read it

    Slugs look like "docs/flows", "go/docs/flows" or "python/docs/reference/flows".
    Shared pages may contain language-specific sections; pass the language you
    are writing code in to get only the relevant examples.
    """
)


@lru_cache(maxsize=1)
def _site() -> SiteConfig:
    return load_config()


@lru_cache(maxsize=1)
def _pages() -> tuple[DocPage, ...]:
    # stdout carries the MCP protocol in stdio mode
    with redirect_stdout(sys.stderr):
        return tuple(load_pages(_site().content_dir))


def _modules() -> list[DocTreeModule]:
    return all_modules(_site(), list(_pages()))


def _find_page(slug: str) -> Optional[DocPage]:
    slug = slug.strip("/")
    if slug.endswith(".md"):
        slug = slug[: -len(".md")]
    for page in _pages():
        if page.slug == slug:
            return page
    return None


def pages_listing(language: str) -> str:
    """Markdown list of one tree's pages."""
    lang = normalize_language(language)
    module = MODULES[lang](_site(), list(_pages()))
    pages = module.load_pages()
    if not pages:
        return f"No pages found for '{lang}'."

    output = [f"# {module.label} pages\n"]
    for page in pages:
        output.append(f"- `{page.slug}`: {page.title}")
    return "\n".join(output)


def page_markdown(slug: str, language: str) -> str:
    """Language-filtered markdown for one page, or an error message."""
    page = _find_page(slug)
    if page is None:
        return f"Error: No page with slug '{slug}'. Use list_pages() to find slugs."

    content = process_raw_content(page.raw, page.title)
    return filter_content_by_language(content, language)


# =============================================================================
# TOOLS
# =============================================================================

@mcp.tool
def list_languages() -> str:
    """
    List the documentation trees with their release status and page counts.

    Returns:
        Markdown list with one entry per language (use the key in list_pages
        and get_page).
    """
    output = ["# Documentation Trees\n"]
    for module in _modules():
        output.append(f"## {module.name}")
        output.append(f"- **Label:** {module.label}")
        output.append(f"- **Status:** {module.status}")
        output.append(f"- **Pages:** {len(module.load_pages())}\n")
    return "\n".join(output)


@mcp.tool
def list_pages(language: str = "js") -> str:
    """
    List the pages of one language tree, sorted by file path.

    Args:
        language: js, go or python (aliases like "javascript" or "py" work)

    Returns:
        Markdown list of "slug: title" entries
    """
    return pages_listing(language)


@mcp.tool
def get_page(slug: str, language: str = "js") -> str:
    """
    Get one documentation page as markdown.

    Args:
        slug: Page slug, e.g. "docs/flows"
        language: Language to filter language-specific sections for

    Returns:
        Markdown with the page title as H1, or an error message
    """
    return page_markdown(slug, language)


# =============================================================================
# RESOURCES
# =============================================================================

@mcp.resource("docs://languages")
def get_languages_resource() -> str:
    """JSON list of language trees with status and pages URI."""
    languages = [
        {
            "name": module.name,
            "label": module.label,
            "status": module.status,
            "pages": len(module.load_pages()),
            "pages_uri": f"docs://{module.name}/pages",
        }
        for module in _modules()
    ]
    return json.dumps({"languages": languages}, indent=2)


@mcp.resource("docs://{language}/pages")
def get_language_pages_resource(language: str) -> str:
    """JSON list of {slug, title, description} for one language tree."""
    if language not in LANGUAGES:
        return json.dumps({"error": f"Unknown language: {language}", "available": list(LANGUAGES)})

    module = MODULES[language](_site(), list(_pages()))
    pages = [
        {"slug": page.slug, "title": page.title, "description": page.description}
        for page in module.load_pages()
    ]
    return json.dumps({"language": language, "page_count": len(pages), "pages": pages}, indent=2)


@mcp.resource("docs://llms/{language}")
def get_llms_resource(language: str) -> str:
    """The llms-<language>.txt dump for one language."""
    if language not in LANGUAGES:
        return f"Unknown language: {language}"
    docs = {page.slug: process_document(page) for page in _pages()}
    module = MODULES[language](_site(), list(_pages()))
    return generate_language_content(_site(), docs, module)


# =============================================================================
# MAIN
# =============================================================================

def main():
    """Run the MCP server."""
    parser = argparse.ArgumentParser(
        description="Documentation Pages MCP Server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run with STDIO
  docsite-mcp

  # Run as HTTP server
  docsite-mcp --transport http --port 8000
        """
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport protocol (default: stdio)"
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host for HTTP transport (default: 127.0.0.1)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port for HTTP transport (default: 8000)"
    )

    args = parser.parse_args()

    if args.transport == "http":
        print(f"Starting HTTP server at http://{args.host}:{args.port}/mcp")
        mcp.run(transport="http", host=args.host, port=args.port, log_level="WARNING")
    else:
        mcp.run(log_level="WARNING")


if __name__ == "__main__":
    main()
