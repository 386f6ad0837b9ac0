from __future__ import annotations

from pathlib import Path

import pytest

from docsite.config import LlmsSet, SiteConfig
from docsite.core.content import load_pages
from docsite.llms import SETS_DIR, resolve_sets, write_llms
from docsite.modules import all_modules


@pytest.fixture
def generated(site: SiteConfig) -> tuple[Path, list[Path]]:
    pages = load_pages(site.content_dir)
    written = write_llms(site, all_modules(site, pages), pages, site.output_dir)
    return site.output_dir, written


def test_resolve_sets_follows_each_sidebar(site: SiteConfig) -> None:
    js, go, python = all_modules(site)

    assert [s.filename for s in resolve_sets(site, js)] == [
        "building-ai-workflows-js.txt",
        "deploying-ai-workflows-js.txt",
        "observing-ai-workflows-js.txt",
        "writing-plugins-js.txt",
        "plugins-js.txt",
    ]
    assert "observing-ai-workflows-go.txt" not in [s.filename for s in resolve_sets(site, go)]
    assert [s.filename for s in resolve_sets(site, python)] == ["plugins-python.txt"]


def test_resolve_sets_skips_unknown_sections(tmp_path: Path) -> None:
    site = SiteConfig(
        content_dir=tmp_path,
        llms_sets=(LlmsSet("Templates", "Templates", ""), LlmsSet("Nope", "Missing", "")),
    )
    js, go, _ = all_modules(site)

    resolved = resolve_sets(site, js)

    assert [(s.filename, s.paths) for s in resolved] == [("templates-js.txt", ["docs/templates/pgvector"])]
    assert resolve_sets(site, go) == []


def test_resolve_sets_drops_sets_without_loaded_pages(site: SiteConfig) -> None:
    js, go, python = all_modules(site)
    known = {"docs/flows", "python/docs/reference/plugins/ollama"}

    assert [s.filename for s in resolve_sets(site, js, known)] == ["building-ai-workflows-js.txt"]
    assert resolve_sets(site, go, known) == []
    assert [s.paths[:1] for s in resolve_sets(site, python, known)] == [
        ["python/docs/reference/plugins/google-genai"]
    ]


def test_write_llms_files(generated: tuple[Path, list[Path]]) -> None:
    output, written = generated

    names = {path.relative_to(output).as_posix() for path in written}

    assert {"llms.txt", "llms-full.txt", "llms-js.txt", "llms-go.txt", "llms-python.txt"} <= names
    assert f"{SETS_DIR}/devtools.txt" in names
    assert f"{SETS_DIR}/building-ai-workflows-js.txt" in names
    assert f"{SETS_DIR}/plugins-python.txt" not in names
    assert f"{SETS_DIR}/observing-ai-workflows-go.txt" not in names
    assert len(written) == 5 + 1 + 1
    assert all(path.is_file() for path in written)


def test_main_index_links_generated_files(generated: tuple[Path, list[Path]]) -> None:
    output, _ = generated

    index = (output / "llms.txt").read_text(encoding="utf-8")

    assert index.startswith("# Genkit\n\n> ")
    assert "- [Go documentation](https://genkit.dev/llms-go.txt)" in index
    assert "(https://genkit.dev/_llms-txt/building-ai-workflows-js.txt)" in index
    assert "plugins-python" not in index
    assert "(https://genkit.dev/_llms-txt/devtools.txt)" in index
    assert "observing-ai-workflows-go" not in index
    assert "(https://genkit.dev/llms-full.txt)" in index


def test_language_file_is_filtered(generated: tuple[Path, list[Path]]) -> None:
    output, _ = generated

    js = (output / "llms-js.txt").read_text(encoding="utf-8")
    go = (output / "llms-go.txt").read_text(encoding="utf-8")

    assert js.startswith("# Genkit Documentation - JavaScript\n\n> Genkit documentation focused on JavaScript.")
    assert "npm install genkit" in js
    assert "pip install" not in js
    assert "Flows wrap your AI logic." in js
    assert "LLMSummary" not in js
    assert "Genkit for Go is in beta." in go
    assert "Flows wrap" not in go


def test_set_and_devtools_files(generated: tuple[Path, list[Path]]) -> None:
    output, _ = generated

    building = (output / SETS_DIR / "building-ai-workflows-js.txt").read_text(encoding="utf-8")
    devtools = (output / SETS_DIR / "devtools.txt").read_text(encoding="utf-8")

    assert building.startswith("# Building AI Workflows - JavaScript\n\n")
    assert "Flows wrap your AI logic." in building
    assert devtools.startswith("# Developer Tools - JavaScript\n\n")
    assert "Use the CLI." in devtools


def test_full_documentation_sorted_with_every_language(generated: tuple[Path, list[Path]]) -> None:
    output, _ = generated

    full = (output / "llms-full.txt").read_text(encoding="utf-8")

    headings = [line for line in full.splitlines() if line.startswith("## ")]
    assert headings[:4] == [
        "## docs/devtools (JS)",
        "## docs/devtools (GO)",
        "## docs/devtools (PYTHON)",
        "## docs/flows (JS)",
    ]
    assert "## go/docs/get-started-go (GO)" in headings
    assert not any(h.startswith("## index ") for h in headings)


def test_no_devtools_file_without_devtools_page(site: SiteConfig) -> None:
    pages = [p for p in load_pages(site.content_dir) if p.slug != "docs/devtools"]

    written = write_llms(site, all_modules(site, pages), pages, site.output_dir)

    assert not (site.output_dir / SETS_DIR / "devtools.txt").exists()
    assert "devtools.txt" not in (site.output_dir / "llms.txt").read_text(encoding="utf-8")
    assert len(written) == 6
