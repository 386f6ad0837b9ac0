"""llms.txt generation.

Produces the llms.txt index plus plain-text documentation dumps meant for
language models:

    llms.txt                          index of everything below
    llms-full.txt                     every page, every language
    llms-<lang>.txt                   every page of one language's sidebar
    _llms-txt/<set>-<lang>.txt        one sidebar section for one language
    _llms-txt/devtools.txt            language-agnostic developer tools pages
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from docsite.config import LlmsSet, SiteConfig
from docsite.core.content import DocPage
from docsite.core.processor import LANGUAGE_NAMES, LANGUAGES, ProcessedDocument, process_document
from docsite.sidebar import extract_slugs, find_group

SETS_DIR = "_llms-txt"
SEPARATOR = "\n\n---\n\n"

DEVTOOLS_SET = LlmsSet(
    label="Developer Tools",
    section="",
    description="Documentation for development tools, MCP server, and local development.",
)


@dataclass
class ResolvedSet:
    """A thematic set resolved against one language's sidebar."""
    set: LlmsSet
    language: str
    paths: list[str]

    @property
    def filename(self) -> str:
        return f"{self.set.file_stem}-{self.language}.txt"


def _unique(items: list[str]) -> list[str]:
    return list(dict.fromkeys(items))


def resolve_sets(site: SiteConfig, module, known: Optional[Iterable[str]] = None) -> list[ResolvedSet]:
    """
    Resolve each configured set against a module's sidebar.

    Args:
        site: Site configuration holding the configured sets
        module: Language tree whose sidebar groups select the pages
        known: Slugs of loaded pages; when given, sets without any of
               them are dropped

    Returns:
        Non-empty sets, in configuration order
    """
    known = set(known) if known is not None else None
    resolved = []
    for llms_set in site.llms_sets:
        group = find_group(module.sidebar, llms_set.section)
        if group is None:
            continue
        paths = _unique(extract_slugs(group.items))
        if known is not None and not any(path in known for path in paths):
            continue
        if paths:
            resolved.append(ResolvedSet(llms_set, module.name, paths))
    return resolved


def _append_docs(content: str, docs: dict[str, ProcessedDocument], paths: list[str], language: str) -> str:
    for path in paths:
        doc = docs.get(path)
        if doc and doc.content.get(language):
            content += f"{doc.content[language]}{SEPARATOR}"
    return content


def generate_language_content(site: SiteConfig, docs: dict[str, ProcessedDocument], module) -> str:
    """Every page in a language's sidebar, filtered to that language."""
    name = LANGUAGE_NAMES[module.name]
    content = f"# {site.title} Documentation - {name}\n\n"
    content += f"> {site.title} documentation focused on {name}.\n\n"
    return _append_docs(content, docs, _unique(extract_slugs(module.sidebar)), module.name)


def generate_set_content(docs: dict[str, ProcessedDocument], llms_set: LlmsSet, paths: list[str], language: str) -> str:
    content = f"# {llms_set.label} - {LANGUAGE_NAMES[language]}\n\n"
    content += f"{llms_set.description}\n\n"
    return _append_docs(content, docs, paths, language)


def generate_full_documentation(site: SiteConfig, docs: dict[str, ProcessedDocument], paths: list[str]) -> str:
    """All pages, sorted by slug, with every language rendition."""
    content = f"# {site.title} - Complete Documentation\n\n"
    content += f"> {site.description}\n"
    content += "> This is the complete unfiltered documentation (primarily for internal use).\n\n"

    for path in sorted(set(paths)):
        doc = docs.get(path)
        if doc is None:
            continue
        for language in LANGUAGES:
            if doc.content.get(language):
                content += f"## {path} ({language.upper()})\n\n"
                content += f"{doc.content[language]}{SEPARATOR}"
    return content


def generate_main_llms_txt(site: SiteConfig, modules, sets: list[ResolvedSet], has_devtools: bool) -> str:
    """The llms.txt index, listing only files that were actually generated."""
    lines = [
        f"# {site.title}",
        "",
        f"> {site.description}",
        "",
        "## Documentation Sets",
        "",
    ]
    for module in modules:
        name = LANGUAGE_NAMES[module.name]
        lines.append(
            f"- [{name} documentation]({site.url_for(f'llms-{module.name}.txt')}): "
            f"{site.title} documentation focused on {name}"
        )

    if sets:
        lines.extend(["", "### Language-Specific Thematic Sets"])
        for module in modules:
            module_sets = [s for s in sets if s.language == module.name]
            if not module_sets:
                continue
            name = LANGUAGE_NAMES[module.name]
            lines.extend(["", f"#### {name}"])
            for resolved in module_sets:
                url = site.url_for(f"{SETS_DIR}/{resolved.filename}")
                lines.append(f"- [{resolved.set.label} - {name}]({url}): {resolved.set.description}")

    if has_devtools:
        lines.extend([
            "",
            "### Developer Tools",
            f"- [{DEVTOOLS_SET.label}]({site.url_for(f'{SETS_DIR}/devtools.txt')}): {DEVTOOLS_SET.description}",
        ])

    lines.extend([
        "",
        "## Notes",
        "",
        "- Language-specific versions filter content to show only relevant examples and instructions for that language",
        "- The content is automatically generated from the same source as the official documentation",
        f"- [Complete documentation]({site.url_for('llms-full.txt')}): Full unfiltered documentation (primarily for internal use)",
    ])
    return "\n".join(lines) + "\n"


def write_llms(site: SiteConfig, modules, pages: list[DocPage], output_dir: Path) -> list[Path]:
    """
    Generate the whole llms.txt family.

    Args:
        site: Site configuration (title, URL, configured sets)
        modules: Language trees whose sidebars select the pages
        pages: Every loaded page
        output_dir: Build output root

    Returns:
        Paths of all files written
    """
    print("Generating llms.txt files...")
    sets_dir = output_dir / SETS_DIR
    sets_dir.mkdir(parents=True, exist_ok=True)

    docs = {page.slug: process_document(page) for page in pages}
    written: list[Path] = []

    def write(path: Path, content: str) -> None:
        path.write_text(content, encoding="utf-8")
        written.append(path)
        print(f"Generated {path.relative_to(output_dir).as_posix()}")

    all_sets = [s for module in modules for s in resolve_sets(site, module, docs)]
    devtools_paths = [slug for slug in site.devtools_slugs if slug in docs]

    write(output_dir / "llms.txt", generate_main_llms_txt(site, modules, all_sets, bool(devtools_paths)))

    full_paths = [slug for module in modules for slug in extract_slugs(module.sidebar)]
    full_paths.extend(site.devtools_slugs)
    write(output_dir / "llms-full.txt", generate_full_documentation(site, docs, full_paths))

    for module in modules:
        write(output_dir / f"llms-{module.name}.txt", generate_language_content(site, docs, module))

    for resolved in all_sets:
        write(
            sets_dir / resolved.filename,
            generate_set_content(docs, resolved.set, resolved.paths, resolved.language),
        )

    if devtools_paths:
        write(sets_dir / "devtools.txt", generate_set_content(docs, DEVTOOLS_SET, devtools_paths, "js"))

    print(f"llms.txt generation complete ({len(written)} files)")
    return written
