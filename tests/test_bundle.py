from __future__ import annotations

import json
from pathlib import Path

import pytest

from docsite.bundle import BUNDLE_FILENAME, index_language, write_bundle
from docsite.config import SiteConfig
from docsite.modules import all_modules
from tests.conftest import write_tree


def test_index_language(tmp_path: Path) -> None:
    root = write_tree(tmp_path / "go", {
        "flows.md": "---\ntitle: Flows\n---\nGo flows.\n",
        "plugins/ollama.mdx": "---\ntitle: Ollama\n---\n\nRun locally.\n",
        "notes.md": "No front-matter here.\n",
        "readme.txt": "ignored",
    })

    documents = index_language("go", root)

    assert list(documents) == ["go/flows.md", "go/notes.md", "go/plugins/ollama.mdx"]
    assert documents["go/flows.md"] == {"text": "Go flows.\n", "title": "Flows", "lang": "go"}
    assert documents["go/plugins/ollama.mdx"]["text"] == "\nRun locally.\n"
    assert documents["go/notes.md"] == {"text": "", "title": "notes.md", "lang": "go"}


def test_untitled_page_uses_relative_path(tmp_path: Path) -> None:
    root = write_tree(tmp_path / "python", {"a/b.md": "---\ndescription: x\n---\nBody\n"})

    assert index_language("python", root)["python/a/b.md"]["title"] == "a/b.md"


def test_write_bundle(site: SiteConfig) -> None:
    count = write_bundle(all_modules(site), site.output_dir)

    path = site.output_dir / BUNDLE_FILENAME
    bundle = json.loads(path.read_text(encoding="utf-8"))
    assert count == len(bundle) == 5
    assert set(bundle) == {
        "js/devtools.md",
        "js/flows.mdx",
        "js/get-started.mdx",
        "go/get-started-go.md",
        "python/get-started.md",
    }
    assert bundle["go/get-started-go.md"]["title"] == "Get started with Go"
    assert path.read_text(encoding="utf-8").startswith('{\n  "js/')


def test_index_language_skips_undecodable_files(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    root = write_tree(tmp_path / "js", {"ok.md": "---\ntitle: Ok\n---\nFine.\n"})
    (root / "bad.md").write_bytes(b"\xff\xfe not utf-8")

    documents = index_language("js", root)

    assert list(documents) == ["js/ok.md"]
    assert "Warning: skipping" in capsys.readouterr().out
