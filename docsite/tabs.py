"""Migrate language-synced starlight <Tabs> to the site's LangTabs components."""

import re
from pathlib import Path

LANGUAGE_TABS_MARKER = '<Tabs syncKey="language">'

TAB_LABELS = {
    "JavaScript": "js",
    "Go": "go",
    "Python": "python",
}

STARLIGHT_TABS_IMPORT = re.compile(
    r"import \{ Tabs, TabItem \} from '@astrojs/starlight/components';"
)
LANG_TABS_IMPORTS = (
    "import LangTabs from '../../../components/LangTabs.astro';\n"
    "import LangTabItem from '../../../components/LangTabItem.astro';"
)


def refactor_tabs(content: str) -> tuple[str, bool]:
    """
    Rewrite language tabs in one MDX document.

    Only documents containing a language-synced <Tabs> block are touched;
    in those, every Tabs/TabItem element and the starlight import are
    replaced.

    Returns:
        Tuple of (new content, whether anything changed)
    """
    if LANGUAGE_TABS_MARKER not in content:
        return content, False

    content = content.replace(LANGUAGE_TABS_MARKER, "<LangTabs>")
    content = content.replace("</Tabs>", "</LangTabs>")

    for label, lang in TAB_LABELS.items():
        content = re.sub(
            rf'<TabItem label="{label}"[^>]*>',
            f'<LangTabItem lang="{lang}">',
            content,
        )
    content = content.replace("</TabItem>", "</LangTabItem>")

    content = STARLIGHT_TABS_IMPORT.sub(lambda _m: LANG_TABS_IMPORTS, content)

    return content, True


def refactor_directory(root: Path) -> list[Path]:
    """Rewrite every .mdx file under root in place; returns the files changed."""
    changed = []
    for path in sorted(root.rglob("*.mdx")):
        try:
            content = path.read_text(encoding="utf-8")
            updated, was_changed = refactor_tabs(content)
            if was_changed:
                path.write_text(updated, encoding="utf-8")
                changed.append(path)
                print(f"Updated: {path}")
        except (OSError, UnicodeDecodeError) as e:
            print(f"Warning: skipping {path}: {e}")
    return changed
