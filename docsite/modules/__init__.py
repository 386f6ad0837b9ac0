"""Language documentation trees, in sidebar order."""

from typing import Optional

from docsite.config import SiteConfig
from docsite.core.content import DocPage
from docsite.modules.base import BaseModule, DocTreeModule
from docsite.modules.go.module import GoModule
from docsite.modules.js.module import JSModule
from docsite.modules.python.module import PythonModule

MODULES: dict[str, type[DocTreeModule]] = {
    "js": JSModule,
    "go": GoModule,
    "python": PythonModule,
}


def get_module(name: str, site: SiteConfig, pages: Optional[list[DocPage]] = None) -> DocTreeModule:
    """Instantiate one language tree by name."""
    try:
        module_cls = MODULES[name]
    except KeyError:
        raise ValueError(f"Unknown language '{name}'. Available: {', '.join(MODULES)}") from None
    return module_cls(site, pages)


def all_modules(site: SiteConfig, pages: Optional[list[DocPage]] = None) -> list[DocTreeModule]:
    return [module_cls(site, pages) for module_cls in MODULES.values()]


__all__ = ["BaseModule", "DocTreeModule", "MODULES", "all_modules", "get_module"]
