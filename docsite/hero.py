"""Hero section rendering.

The hero is the banner at the top of the landing page: an optional image
(single, or a dark/light pair whose visibility is toggled by theme classes),
the page title, an optional HTML tagline and a row of call-to-action buttons.
"""

from pathlib import Path
from typing import Iterable, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from markupsafe import Markup

from docsite.core.content import DocPage, Hero, HeroAction

TEMPLATES_DIR = Path(__file__).parent / "templates"


def _build_environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        undefined=StrictUndefined,
        autoescape=select_autoescape(enabled_extensions=("html",), default_for_string=True),
        lstrip_blocks=True,
    )


_ENV = _build_environment()


def resolve_actions(hero: Hero, default_actions: Iterable[HeroAction]) -> tuple[HeroAction, ...]:
    """Actions from the page's own front-matter win over the configured defaults."""
    if hero.actions is not None:
        return hero.actions
    return tuple(default_actions)


def render_hero(page: DocPage, actions: Iterable[HeroAction] = ()) -> str:
    """
    Render the hero section for a page.

    Args:
        page: Page whose front-matter may carry a `hero` block
        actions: Configured call-to-action links, used unless the page
                 declares its own `hero.actions`

    Returns:
        HTML fragment. A page without a `hero` block still renders the
        title and actions; missing image and tagline are simply omitted.
    """
    hero = page.hero or Hero()
    tagline: Optional[Markup] = Markup(hero.tagline) if hero.tagline else None

    template = _ENV.get_template("hero.html")
    return template.render(
        title=hero.title or page.title,
        tagline=tagline,
        image=hero.image,
        actions=resolve_actions(hero, actions),
    ).strip() + "\n"
