from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from docsite.config import SiteConfig
from docsite.core.content import Badge, HeroAction
from docsite.hero import render_hero, resolve_actions
from tests.conftest import make_page


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


def _render(hero: dict | None, **kwargs) -> BeautifulSoup:
    frontmatter = {"hero": hero} if hero is not None else {}
    actions = kwargs.pop("actions", SiteConfig().hero_actions)
    return _soup(render_hero(make_page(frontmatter, **kwargs), actions))


def test_single_image_renders_one_img_without_toggle_classes() -> None:
    soup = _render({"image": {"file": "/assets/logo.png", "alt": "Logo"}})

    images = soup.find_all("img")
    assert len(images) == 1
    assert images[0]["src"] == "/assets/logo.png"
    assert images[0]["alt"] == "Logo"
    assert images[0].get("class") is None


def test_dark_light_pair_renders_two_toggled_images() -> None:
    soup = _render({"image": {"dark": "/d.svg", "light": "/l.svg"}})

    images = soup.find_all("img")
    assert len(images) == 2
    by_src = {img["src"]: img["class"] for img in images}
    assert by_src["/d.svg"] == ["light:sl-hidden"]
    assert by_src["/l.svg"] == ["dark:sl-hidden"]


@pytest.mark.parametrize("shape", ["dark", "light"])
def test_half_pair_stays_visible_in_both_modes(shape: str) -> None:
    soup = _render({"image": {shape: f"/{shape}.svg"}})

    images = soup.find_all("img")
    assert len(images) == 1
    assert images[0]["src"] == f"/{shape}.svg"
    assert images[0].get("class") is None


def test_file_wins_when_both_image_shapes_are_present() -> None:
    soup = _render({"image": {"file": "/one.png", "dark": "/d.svg", "light": "/l.svg"}})

    assert [img["src"] for img in soup.find_all("img")] == ["/one.png"]


def test_missing_image_renders_no_img() -> None:
    assert _render({"tagline": "Hello"}).find_all("img") == []
    assert _render(None).find_all("img") == []


def test_default_actions_render_three_badged_links_in_order() -> None:
    soup = _render({})

    links = soup.select(".actions a.sl-link-button")
    assert [a["href"] for a in links] == [
        "/docs/get-started",
        "/go/docs/get-started-go",
        "/python/docs/get-started",
    ]
    assert [a.contents[0].strip() for a in links] == ["Node.js", "Go", "Python"]
    assert [a.select_one(".sl-badge").get_text() for a in links] == ["stable", "beta", "alpha"]


def test_action_variant_becomes_a_class() -> None:
    soup = _render({})

    first = soup.select_one("a.sl-link-button")
    assert "primary" in first["class"]
    assert "not-content" in first["class"]


def test_missing_tagline_omits_container() -> None:
    soup = _render({"image": {"file": "/x.png"}})

    assert soup.select(".tagline") == []


def test_tagline_html_is_not_escaped() -> None:
    soup = _render({"tagline": "Build <strong>fast</strong>"})

    tagline = soup.select_one(".tagline")
    assert tagline.strong.get_text() == "fast"


def test_title_is_escaped_and_falls_back_to_page_title() -> None:
    html = render_hero(make_page({"hero": {}}, title="Tools & <Tricks>"), ())

    assert "Tools &amp; &lt;Tricks&gt;" in html
    assert _soup(html).h1.get_text() == "Tools & <Tricks>"


def test_hero_title_overrides_page_title() -> None:
    soup = _render({"title": "Welcome"})

    assert soup.h1.get_text() == "Welcome"


def test_no_actions_omits_actions_container() -> None:
    soup = _render({}, actions=())

    assert soup.select(".actions") == []


def test_action_without_badge_has_no_badge_span() -> None:
    action = HeroAction(text="Docs", link="/docs")
    soup = _render({}, actions=(action,))

    link = soup.select_one("a.sl-link-button")
    assert link.get_text() == "Docs"
    assert link.select(".sl-badge") == []


def test_frontmatter_actions_override_configured_ones() -> None:
    soup = _render({"actions": [{"text": "Read", "link": "/docs/devtools", "badge": "new"}]})

    links = soup.select("a.sl-link-button")
    assert len(links) == 1
    assert links[0]["href"] == "/docs/devtools"
    assert links[0].select_one(".sl-badge").get_text() == "new"


def test_resolve_actions_prefers_page_actions() -> None:
    configured = (HeroAction(text="A", link="/a", badge=Badge("x")),)
    page = make_page({"hero": {"actions": []}})

    assert resolve_actions(page.hero, configured) == ()
    assert resolve_actions(make_page({"hero": {}}).hero, configured) == configured
