"""YAML front-matter parsing for Markdown/MDX content files."""

import re

import yaml

# Matches a leading --- block followed by the body, with any line ending style
FRONTMATTER_AND_BODY_PATTERN = re.compile(
    r'\A---[ \t]*(?:\r\n|\r|\n)([\s\S]*?)(?:\r\n|\r|\n)---[ \t]*(?:\r\n|\r|\n|\Z)([\s\S]*)\Z'
)
# Looser pattern used when we only need the block gone
LEADING_FRONTMATTER_PATTERN = re.compile(r'\A---\s*[\s\S]*?---')


def parse_frontmatter(source: str) -> tuple[dict, str]:
    """
    Split a content file into its front-matter mapping and body.

    Args:
        source: Raw file contents

    Returns:
        Tuple of (front-matter dict, body). When there is no front-matter,
        or it is not a valid YAML mapping, the dict is empty and the body
        is the unmodified source.
    """
    match = FRONTMATTER_AND_BODY_PATTERN.match(source)
    if not match:
        return {}, source

    raw_yaml, body = match.groups()
    try:
        data = yaml.safe_load(raw_yaml)
    except yaml.YAMLError as e:
        print(f"Warning: failed to parse front-matter: {e}")
        return {}, source

    if data is None:
        return {}, body
    if not isinstance(data, dict):
        print(f"Warning: front-matter is a {type(data).__name__}, expected a mapping")
        return {}, source

    return data, body


def strip_frontmatter(source: str) -> str:
    """Remove a leading front-matter block and surrounding whitespace."""
    return LEADING_FRONTMATTER_PATTERN.sub('', source, count=1).strip()
