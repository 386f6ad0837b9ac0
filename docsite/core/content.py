"""Content pages and the hero front-matter model."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

from docsite.core.frontmatter import parse_frontmatter
from docsite.errors import ContentError

DOC_SUFFIXES = (".md", ".mdx")


@dataclass(frozen=True)
class Badge:
    """Small label shown inside a hero action button."""
    text: str
    variant: str = "default"

    @classmethod
    def from_value(cls, value) -> Optional["Badge"]:
        """Accept either a bare string or a {text, variant} mapping."""
        if isinstance(value, str):
            return cls(text=value) if value.strip() else None
        if isinstance(value, dict) and value.get("text"):
            return cls(text=str(value["text"]), variant=str(value.get("variant") or "default"))
        return None


@dataclass(frozen=True)
class HeroAction:
    """A call-to-action link rendered beneath the hero tagline."""
    text: str
    link: str
    variant: str = "primary"
    badge: Optional[Badge] = None

    @classmethod
    def from_dict(cls, data) -> Optional["HeroAction"]:
        if not isinstance(data, dict):
            return None
        text = data.get("text")
        link = data.get("link")
        if not text or not link:
            return None
        return cls(
            text=str(text),
            link=str(link),
            variant=str(data.get("variant") or "primary"),
            badge=Badge.from_value(data.get("badge")),
        )


@dataclass(frozen=True)
class HeroImage:
    """Either a single image (file) or a dark/light pair."""
    file: Optional[str] = None
    dark: Optional[str] = None
    light: Optional[str] = None
    alt: str = ""

    @property
    def is_single(self) -> bool:
        return self.file is not None

    @classmethod
    def from_value(cls, value) -> Optional["HeroImage"]:
        if not isinstance(value, dict):
            return None
        alt = str(value.get("alt") or "")
        # A single file wins if both shapes were given
        if value.get("file"):
            return cls(file=str(value["file"]), alt=alt)
        dark = value.get("dark")
        light = value.get("light")
        if dark or light:
            return cls(
                dark=str(dark) if dark else None,
                light=str(light) if light else None,
                alt=alt,
            )
        return None


@dataclass(frozen=True)
class Hero:
    """The hero block of a page's front-matter."""
    title: Optional[str] = None
    tagline: Optional[str] = None
    image: Optional[HeroImage] = None
    actions: Optional[tuple[HeroAction, ...]] = None

    @classmethod
    def from_frontmatter(cls, data) -> Optional["Hero"]:
        """Build a Hero from the `hero` front-matter value, or None if absent."""
        if not isinstance(data, dict):
            return None

        actions = None
        if isinstance(data.get("actions"), list):
            parsed = (HeroAction.from_dict(a) for a in data["actions"])
            actions = tuple(a for a in parsed if a is not None)

        tagline = data.get("tagline")
        return cls(
            title=str(data["title"]) if data.get("title") else None,
            tagline=str(tagline) if tagline else None,
            image=HeroImage.from_value(data.get("image")),
            actions=actions,
        )


@dataclass
class DocPage:
    """A single Markdown/MDX content file."""
    slug: str
    title: str
    path: Path
    raw: str
    body: str
    frontmatter: dict = field(default_factory=dict)
    description: Optional[str] = None

    @property
    def hero(self) -> Optional[Hero]:
        return Hero.from_frontmatter(self.frontmatter.get("hero"))

    @property
    def is_mdx(self) -> bool:
        return self.path.suffix == ".mdx"


def slug_for(path: Path, content_dir: Path) -> str:
    """Content-relative path without the .md/.mdx suffix, using forward slashes."""
    relative = path.relative_to(content_dir).as_posix()
    for suffix in DOC_SUFFIXES:
        if relative.endswith(suffix):
            return relative[: -len(suffix)]
    return relative


def find_doc_files(root: Path) -> list[Path]:
    """Recursively find all .md and .mdx files under root."""
    if not root.is_dir():
        print(f"Warning: content directory not found: {root}")
        return []
    return sorted(
        p for p in root.rglob("*")
        if p.is_file() and p.suffix in DOC_SUFFIXES
    )


def load_page(path: Path, content_dir: Path) -> DocPage:
    """
    Read and parse one content file.

    Args:
        path: Path to the .md/.mdx file
        content_dir: Root of the content tree, used to derive the slug

    Returns:
        DocPage. The title falls back to an empty string when the
        front-matter has none.

    Raises:
        ContentError: If the file cannot be read
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ContentError(f"Cannot read {path}: {e}") from e

    frontmatter, body = parse_frontmatter(raw)
    description = frontmatter.get("description")
    return DocPage(
        slug=slug_for(path, content_dir),
        title=str(frontmatter.get("title") or ""),
        path=path,
        raw=raw,
        body=body,
        frontmatter=frontmatter,
        description=str(description) if description else None,
    )


def load_titled_pages(paths: Iterable[Path], content_dir: Path) -> list[DocPage]:
    """Load the given files, warning about and skipping unreadable or untitled ones."""
    pages = []
    for path in paths:
        try:
            page = load_page(path, content_dir)
        except ContentError as e:
            print(f"Warning: {e}")
            continue
        if not page.title:
            print(f"Warning: skipping file without title: {path}")
            continue
        pages.append(page)
    return pages


def load_pages(content_dir: Path) -> list[DocPage]:
    """Load every titled page under content_dir, skipping untitled ones."""
    pages = load_titled_pages(find_doc_files(content_dir), content_dir)
    print(f"Found {len(pages)} documents")
    return pages
