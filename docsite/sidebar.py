"""Sidebar navigation model shared by all language trees."""

from dataclasses import dataclass, field
from typing import Iterable, Optional

DEVTOOLS_ENTRY = {"label": "Developer tools", "slug": "docs/devtools"}


@dataclass
class SidebarItem:
    """A sidebar entry: an internal page, an external link, or a group."""
    label: str
    slug: Optional[str] = None
    link: Optional[str] = None
    items: list["SidebarItem"] = field(default_factory=list)
    attrs: dict = field(default_factory=dict)
    collapsed: bool = False

    @property
    def is_group(self) -> bool:
        return self.slug is None and self.link is None

    @classmethod
    def from_dict(cls, data: dict) -> "SidebarItem":
        return cls(
            label=data["label"],
            slug=data.get("slug"),
            link=data.get("link"),
            items=[cls.from_dict(child) for child in data.get("items", [])],
            attrs=dict(data.get("attrs", {})),
            collapsed=bool(data.get("collapsed", False)),
        )

    def to_dict(self) -> dict:
        """Serialize in the shape the documentation theme's sidebar config expects."""
        result: dict = {"label": self.label}
        if self.slug is not None:
            result["slug"] = self.slug
        if self.link is not None:
            result["link"] = self.link
        if self.attrs:
            result["attrs"] = dict(self.attrs)
        if self.is_group:
            result["items"] = [child.to_dict() for child in self.items]
        if self.collapsed:
            result["collapsed"] = True
        return result


def load_sidebar(entries: Iterable[dict]) -> list[SidebarItem]:
    return [SidebarItem.from_dict(entry) for entry in entries]


def extract_slugs(items: Iterable[SidebarItem]) -> list[str]:
    """Every internal page slug in the sidebar, depth-first."""
    slugs = []
    for item in items:
        if item.slug:
            slugs.append(item.slug)
        if item.items:
            slugs.extend(extract_slugs(item.items))
    return slugs


def external_links(items: Iterable[SidebarItem]) -> list[SidebarItem]:
    """Every sidebar entry pointing outside the site."""
    found = []
    for item in items:
        if item.link:
            found.append(item)
        if item.items:
            found.extend(external_links(item.items))
    return found


def find_group(items: Iterable[SidebarItem], label: str) -> Optional[SidebarItem]:
    """Find a top-level entry by label."""
    for item in items:
        if item.label == label:
            return item
    return None


def build_sidebar(modules, extra: Iterable[dict] = (DEVTOOLS_ENTRY,)) -> list[SidebarItem]:
    """
    Assemble the site-wide sidebar.

    Args:
        modules: Language modules, in display order
        extra: Top-level entries placed before the language groups

    Returns:
        Top-level entries followed by one collapsed group per language
    """
    sidebar = load_sidebar(extra)
    for module in modules:
        sidebar.append(SidebarItem(
            label=module.label,
            items=module.sidebar,
            collapsed=True,
        ))
    return sidebar
