from __future__ import annotations

from pathlib import Path

import pytest

from docsite.tabs import refactor_directory, refactor_tabs

SOURCE = """---
title: Models
---

import { Tabs, TabItem } from '@astrojs/starlight/components';

<Tabs syncKey="language">
  <TabItem label="JavaScript" icon="seti:javascript">
    JS example
  </TabItem>
  <TabItem label="Go" icon="seti:go">
    Go example
  </TabItem>
  <TabItem label="Python">
    Python example
  </TabItem>
</Tabs>
"""


def test_refactor_tabs() -> None:
    updated, changed = refactor_tabs(SOURCE)

    assert changed
    assert "<LangTabs>" in updated and "</LangTabs>" in updated
    assert '<LangTabItem lang="js">' in updated
    assert '<LangTabItem lang="go">' in updated
    assert '<LangTabItem lang="python">' in updated
    assert updated.count("</LangTabItem>") == 3
    assert "TabItem label" not in updated
    assert "@astrojs/starlight/components" not in updated
    assert "import LangTabs from '../../../components/LangTabs.astro';" in updated
    assert "import LangTabItem from '../../../components/LangTabItem.astro';" in updated


def test_refactor_tabs_leaves_other_tabs_alone() -> None:
    source = '<Tabs>\n  <TabItem label="npm">npm i</TabItem>\n</Tabs>\n'

    assert refactor_tabs(source) == (source, False)


def test_refactor_directory(tmp_path: Path) -> None:
    (tmp_path / "docs").mkdir()
    target = tmp_path / "docs" / "models.mdx"
    target.write_text(SOURCE, encoding="utf-8")
    untouched = tmp_path / "docs" / "plain.mdx"
    untouched.write_text("# Plain\n", encoding="utf-8")
    markdown = tmp_path / "docs" / "notes.md"
    markdown.write_text(SOURCE, encoding="utf-8")

    changed = refactor_directory(tmp_path)

    assert changed == [target]
    assert "<LangTabs>" in target.read_text(encoding="utf-8")
    assert untouched.read_text(encoding="utf-8") == "# Plain\n"
    assert markdown.read_text(encoding="utf-8") == SOURCE


def test_refactor_directory_skips_undecodable_files(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "a.mdx").write_bytes(b"\xff\xfe<Tabs>")
    good = tmp_path / "b.mdx"
    good.write_text(SOURCE, encoding="utf-8")

    assert refactor_directory(tmp_path) == [good]
    assert "Warning: skipping" in capsys.readouterr().out
