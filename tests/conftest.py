from __future__ import annotations

from pathlib import Path

import pytest

from docsite.config import SiteConfig
from docsite.core.content import DocPage

CONTENT = {
    "index.mdx": """---
title: Genkit
hero:
  tagline: Build <strong>AI features</strong> fast.
  image:
    dark: /assets/hero-dark.svg
    light: /assets/hero-light.svg
---

Welcome. Start with the [developer tools](/docs/devtools).
""",
    "docs/devtools.md": """---
title: Developer tools
---

Use the CLI. See [Get started](/docs/get-started).
""",
    "docs/get-started.mdx": """---
title: Get started
description: First steps.
---

import LanguageContent from '../components/LanguageContent.astro';
import LanguageSelector from '../components/LanguageSelector.astro';

<div class="language-controls"><LanguageSelector /></div>

Intro for everyone.

<LanguageContent lang="js">
npm install genkit
</LanguageContent>

<LanguageContent lang="go">
go get github.com/firebase/genkit/go
</LanguageContent>

<LanguageContent lang="python">
pip install genkit
</LanguageContent>

Next: [flows](/docs/flows).
""",
    "docs/flows.mdx": """---
title: Creating flows
---

import { Tabs, TabItem } from '@astrojs/starlight/components';

<LLMSummary>
Flows are typed, observable functions.
</LLMSummary>

Flows wrap your AI logic.
""",
    "go/docs/get-started-go.md": """---
title: Get started with Go
---

Genkit for Go is in beta.
""",
    "python/docs/get-started.md": """---
title: Get started with Python
---

Genkit for Python is in alpha.
""",
}


def write_tree(root: Path, files: dict[str, str]) -> Path:
    for relative, text in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    return root


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    return write_tree(tmp_path / "content", CONTENT)


@pytest.fixture
def site(tmp_path: Path, content_dir: Path) -> SiteConfig:
    return SiteConfig(content_dir=content_dir, output_dir=tmp_path / "dist")


@pytest.fixture
def config_file(tmp_path: Path, content_dir: Path) -> Path:
    path = tmp_path / "site.yaml"
    path.write_text(
        "site:\n"
        "  url: https://genkit.dev\n"
        "  title: Genkit\n"
        "content_dir: content\n"
        "output_dir: dist\n",
        encoding="utf-8",
    )
    return path


def make_page(frontmatter: dict, title: str = "Genkit", slug: str = "index") -> DocPage:
    return DocPage(
        slug=slug,
        title=title,
        path=Path(f"{slug}.mdx"),
        raw="",
        body="",
        frontmatter=frontmatter,
    )
