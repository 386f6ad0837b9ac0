"""docs-bundle.json: raw page text per language, consumed by site search."""

import json
from pathlib import Path

from docsite.core.content import find_doc_files
from docsite.core.frontmatter import FRONTMATTER_AND_BODY_PATTERN, parse_frontmatter

BUNDLE_FILENAME = "docs-bundle.json"


def index_language(lang: str, directory: Path) -> dict:
    """
    Index every page of one language tree.

    Args:
        lang: Language key used as the entry prefix
        directory: Root of that language's content

    Returns:
        Mapping of "<lang>/<relative file>" to {title, text, lang}.
        Files without front-matter are listed with empty text.
    """
    documents = {}
    for path in find_doc_files(directory):
        relative = path.relative_to(directory).as_posix()
        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            print(f"Warning: skipping {path} in bundle: {e}")
            continue
        if FRONTMATTER_AND_BODY_PATTERN.match(source):
            frontmatter, body = parse_frontmatter(source)
        else:
            frontmatter, body = {}, ""
        documents[f"{lang}/{relative}"] = {
            "text": body,
            "title": frontmatter.get("title") or relative,
            "lang": lang,
        }
    return documents


def build_bundle(modules) -> dict:
    bundle: dict = {}
    for module in modules:
        bundle.update(module.bundle_entries())
    return bundle


def write_bundle(modules, output_dir: Path) -> int:
    """Write docs-bundle.json for all language trees; returns the document count."""
    bundle = build_bundle(modules)
    output_dir.mkdir(parents=True, exist_ok=True)
    bundle_path = output_dir / BUNDLE_FILENAME
    bundle_path.write_text(json.dumps(bundle, indent=2, ensure_ascii=False), encoding="utf-8")
    print(f"Saved: {BUNDLE_FILENAME} ({len(bundle)} documents)")
    return len(bundle)
