"""Site-wide configuration loaded from site.yaml."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from docsite.core.content import HeroAction
from docsite.errors import ConfigError

PROJECT_ROOT = Path(__file__).parent.parent
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "site.yaml"

SITE_URL = "https://genkit.dev"
SITE_TITLE = "Genkit"
SITE_DESCRIPTION = "Open-source GenAI toolkit for JS, Go, and Python."
CONTENT_DIR = "content"
OUTPUT_DIR = "dist"

# Seconds between requests when checking external links
REQUEST_DELAY = 0.5

DEFAULT_HERO_ACTIONS = [
    {
        "text": "Node.js",
        "link": "/docs/get-started",
        "variant": "primary",
        "badge": {"text": "stable", "variant": "success"},
    },
    {
        "text": "Go",
        "link": "/go/docs/get-started-go",
        "variant": "secondary",
        "badge": {"text": "beta", "variant": "caution"},
    },
    {
        "text": "Python",
        "link": "/python/docs/get-started",
        "variant": "secondary",
        "badge": {"text": "alpha", "variant": "danger"},
    },
]

DEFAULT_LLMS_SETS = [
    {
        "label": "Building AI Workflows",
        "section": "Building AI workflows",
        "description": "Guidance on how to generate content and interact with LLM and image models using Genkit.",
    },
    {
        "label": "Deploying AI Workflows",
        "section": "Deploying AI workflows",
        "description": "Guidance on how to deploy Genkit code to various environments including Firebase and Cloud Run.",
    },
    {
        "label": "Observing AI Workflows",
        "section": "Observing AI workflows",
        "description": "Guidance about Genkit's various observability features and how to use them.",
    },
    {
        "label": "Writing Plugins",
        "section": "Writing plugins",
        "description": "Guidance about how to author plugins for Genkit.",
    },
    {
        "label": "Plugins",
        "section": "Plugins",
        "description": "Provider-specific documentation for model providers, vector stores and integrations.",
    },
]

DEFAULT_DEVTOOLS_SLUGS = ["docs/devtools"]


@dataclass(frozen=True)
class LlmsSet:
    """A thematic llms.txt set built from one sidebar section."""
    label: str
    section: str
    description: str

    @property
    def file_stem(self) -> str:
        return "-".join(self.label.lower().split())


@dataclass(frozen=True)
class SiteConfig:
    """Resolved configuration for one site build."""
    site_url: str = SITE_URL
    title: str = SITE_TITLE
    description: str = SITE_DESCRIPTION
    content_dir: Path = PROJECT_ROOT / CONTENT_DIR
    output_dir: Path = PROJECT_ROOT / OUTPUT_DIR
    hero_actions: tuple[HeroAction, ...] = field(
        default_factory=lambda: _parse_actions(DEFAULT_HERO_ACTIONS)
    )
    llms_sets: tuple[LlmsSet, ...] = field(
        default_factory=lambda: _parse_llms_sets(DEFAULT_LLMS_SETS)
    )
    devtools_slugs: tuple[str, ...] = tuple(DEFAULT_DEVTOOLS_SLUGS)
    request_delay: float = REQUEST_DELAY

    def url_for(self, path: str) -> str:
        """Absolute site URL for a slug or site-relative path."""
        return f"{self.site_url.rstrip('/')}/{path.lstrip('/')}"


def _parse_actions(raw) -> tuple[HeroAction, ...]:
    if not isinstance(raw, list):
        raise ConfigError("hero.actions must be a list")
    actions = []
    for i, item in enumerate(raw):
        action = HeroAction.from_dict(item)
        if action is None:
            raise ConfigError(f"hero.actions[{i}] needs both 'text' and 'link'")
        actions.append(action)
    return tuple(actions)


def _parse_llms_sets(raw) -> tuple[LlmsSet, ...]:
    if not isinstance(raw, list):
        raise ConfigError("llms.sets must be a list")
    sets = []
    for i, item in enumerate(raw):
        if not isinstance(item, dict) or not item.get("label") or not item.get("section"):
            raise ConfigError(f"llms.sets[{i}] needs both 'label' and 'section'")
        sets.append(LlmsSet(
            label=str(item["label"]),
            section=str(item["section"]),
            description=str(item.get("description") or ""),
        ))
    return tuple(sets)


def load_config(path: Optional[Path] = None) -> SiteConfig:
    """
    Load site configuration.

    Args:
        path: Path to a YAML config file. Defaults to site.yaml at the
              project root; a missing default file yields built-in defaults.

    Returns:
        SiteConfig with relative directories resolved against the
        config file's directory.

    Raises:
        ConfigError: If an explicitly given file is missing, or any file
                     is not valid YAML or has malformed entries
    """
    config_path = path or DEFAULT_CONFIG_PATH
    data: dict = {}

    if config_path.exists():
        try:
            loaded = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Cannot read {config_path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
        if loaded is not None and not isinstance(loaded, dict):
            raise ConfigError(f"{config_path} must contain a mapping")
        data = loaded or {}
    elif path is not None:
        raise ConfigError(f"Config file not found: {config_path}")

    base_dir = config_path.parent
    site = _section(data, "site")
    hero = _section(data, "hero")
    llms = _section(data, "llms")

    devtools = llms.get("devtools", DEFAULT_DEVTOOLS_SLUGS)
    if not isinstance(devtools, list):
        raise ConfigError("llms.devtools must be a list of slugs")

    return SiteConfig(
        site_url=str(site.get("url", SITE_URL)),
        title=str(site.get("title", SITE_TITLE)),
        description=str(site.get("description", SITE_DESCRIPTION)),
        content_dir=_directory(base_dir, data, "content_dir", CONTENT_DIR),
        output_dir=_directory(base_dir, data, "output_dir", OUTPUT_DIR),
        hero_actions=_parse_actions(hero.get("actions", DEFAULT_HERO_ACTIONS)),
        llms_sets=_parse_llms_sets(llms.get("sets", DEFAULT_LLMS_SETS)),
        devtools_slugs=tuple(str(s) for s in devtools),
        request_delay=_request_delay(data.get("request_delay", REQUEST_DELAY)),
    )


def _section(data: dict, key: str) -> dict:
    section = data.get(key)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigError(f"'{key}' must be a mapping, got {type(section).__name__}")
    return section


def _directory(base_dir: Path, data: dict, key: str, default: str) -> Path:
    value = data.get(key, default)
    if not isinstance(value, str) or not value:
        raise ConfigError(f"'{key}' must be a non-empty path string")
    return base_dir / value


def _request_delay(value) -> float:
    if isinstance(value, bool):
        raise ConfigError("'request_delay' must be a number of seconds")
    try:
        delay = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"'request_delay' must be a number of seconds: {e}") from e
    if delay < 0:
        raise ConfigError("'request_delay' must not be negative")
    return delay
