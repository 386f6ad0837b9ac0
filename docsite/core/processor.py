"""Turn MDX source into clean, language-specific markdown.

The same source page is published several ways: as a plain markdown endpoint
(`slug.md`), as one endpoint per SDK language (`slug.js.md`, `slug.go.md`,
`slug.python.md`), and, for pages carrying an <LLMSummary> block, as a short
summary plus a `.full` variant. Everything here is pure string processing.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from docsite.core.content import DocPage
from docsite.core.frontmatter import strip_frontmatter

LANGUAGES = ("js", "go", "python")
DEFAULT_LANGUAGE = "js"

LANGUAGE_ALIASES = {
    "js": "js",
    "javascript": "js",
    "go": "go",
    "golang": "go",
    "python": "python",
    "py": "python",
}

LANGUAGE_NAMES = {
    "js": "JavaScript",
    "go": "Go",
    "python": "Python",
}

# Page chrome that only makes sense in the browser
LANGUAGE_CONTROLS_PATTERNS = [
    re.compile(r'<div[^>]*language-controls[^>]*>[\s\S]*?</div>'),
    re.compile(r'<div[^>]*style="[^"]*display:\s*flex[^"]*justify-content:\s*space-between[^"]*">[\s\S]*?</div>'),
    re.compile(r'<LanguageSelector[^>]*/>'),
    re.compile(r'<LanguageSelector[^>]*>[\s\S]*?</LanguageSelector>'),
    re.compile(r'<CopyMarkdownButton[^>]*/>'),
    re.compile(r'<CopyMarkdownButton[^>]*>[\s\S]*?</CopyMarkdownButton>'),
]
LANGUAGE_CONTENT_PATTERN = re.compile(
    r'<LanguageContent\s+lang=["\']([^"\']+)["\'][^>]*>([\s\S]*?)</LanguageContent>'
)
LLM_SUMMARY_PATTERN = re.compile(r'<LLMSummary>([\s\S]*?)</LLMSummary>')
EXCESS_BLANK_LINES = re.compile(r'\n{3,}')


@dataclass
class ProcessedDocument:
    """A page with one markdown rendition per SDK language."""
    slug: str
    title: str
    content: dict[str, str]
    file_path: Path


@dataclass(frozen=True)
class MarkdownEndpoint:
    """One `<path>.md` file served next to the HTML page."""
    path: str
    content: str
    language: Optional[str] = None


def normalize_language(lang: str) -> str:
    """Map a language name or alias to js/go/python, defaulting to js."""
    return LANGUAGE_ALIASES.get(lang.lower(), DEFAULT_LANGUAGE)


def collapse_blank_lines(text: str) -> str:
    return EXCESS_BLANK_LINES.sub('\n\n', text)


def filter_content_by_language(content: str, target_lang: str = DEFAULT_LANGUAGE) -> str:
    """
    Keep only the content relevant to one SDK language.

    <LanguageContent lang="..."> blocks for the target language are unwrapped;
    blocks for other languages are removed along with the language picker UI.

    Args:
        content: Markdown/MDX content
        target_lang: Language name or alias

    Returns:
        Filtered, whitespace-normalized markdown
    """
    lang = normalize_language(target_lang)

    for pattern in LANGUAGE_CONTROLS_PATTERNS:
        content = pattern.sub('', content)

    def replace_block(match: re.Match) -> str:
        block_lang, inner = match.groups()
        if normalize_language(block_lang) == lang:
            return inner.strip()
        return ''

    content = LANGUAGE_CONTENT_PATTERN.sub(replace_block, content)
    return collapse_blank_lines(content).strip()


def strip_leading_imports(text: str) -> str:
    """Remove the run of import statements and blank lines at the top of an MDX body."""
    lines = text.split('\n')
    first_content = 0
    for i, line in enumerate(lines):
        stripped = line.strip()
        if stripped.startswith('import ') or stripped == '':
            first_content = i + 1
        else:
            break
    return '\n'.join(lines[first_content:]).strip()


def extract_llm_summary(raw: str) -> Optional[str]:
    """Return the trimmed text of the first <LLMSummary> block, if any."""
    match = LLM_SUMMARY_PATTERN.search(raw)
    if match and match.group(1).strip():
        return match.group(1).strip()
    return None


def strip_page_source(raw: str, title: str) -> str:
    """Front-matter and leading imports removed, H1 title prepended."""
    content = strip_leading_imports(strip_frontmatter(raw))
    return f"# {title}\n\n{content}"


def process_raw_content(raw: str, title: str) -> str:
    """
    Standard processing for a page's markdown rendition.

    Strips front-matter and leading imports, drops <LLMSummary> blocks,
    collapses blank lines and prepends the title as an H1.
    """
    content = strip_leading_imports(strip_frontmatter(raw))
    content = LLM_SUMMARY_PATTERN.sub('', content)
    content = collapse_blank_lines(content).strip()
    return f"# {title}\n\n{content}"


def process_document(page: DocPage) -> ProcessedDocument:
    """Build the per-language renditions of a page."""
    base = process_raw_content(page.raw, page.title)
    return ProcessedDocument(
        slug=page.slug,
        title=page.title,
        content={lang: filter_content_by_language(base, lang) for lang in LANGUAGES},
        file_path=page.path,
    )


def markdown_endpoints(page: DocPage) -> list[MarkdownEndpoint]:
    """
    List the markdown endpoints published for a page.

    Pages with an <LLMSummary> get the summary at `slug` and the full
    content at `slug.full`. Other pages get the unfiltered content at
    `slug` plus one filtered endpoint per language.

    Returns:
        Endpoints with non-empty content, in publication order
    """
    summary = extract_llm_summary(page.raw)
    endpoints = []

    if summary:
        endpoints.append(MarkdownEndpoint(page.slug, f"# {page.title}\n\n{summary}"))
        endpoints.append(MarkdownEndpoint(f"{page.slug}.full", strip_page_source(page.raw, page.title)))
    else:
        content = strip_page_source(page.raw, page.title)
        endpoints.append(MarkdownEndpoint(page.slug, content, DEFAULT_LANGUAGE))
        for lang in LANGUAGES:
            endpoints.append(MarkdownEndpoint(
                f"{page.slug}.{lang}",
                filter_content_by_language(content, lang),
                lang,
            ))

    return [e for e in endpoints if e.content]


def write_endpoints(page: DocPage, output_dir: Path) -> int:
    """Write a page's markdown endpoints under output_dir; returns the count written."""
    count = 0
    for endpoint in markdown_endpoints(page):
        target = output_dir / f"{endpoint.path}.md"
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(endpoint.content, encoding="utf-8")
        count += 1
    return count
