"""
Mind Parser

Turns MIND.md text into a validated Mind:

    ---
    name: git-commit
    description: Write conventional commit messages
    allowed-tools: Bash Read
    metadata:
      author: someone
    ---

    # Markdown body ...
"""

import re
from pathlib import Path
from typing import Any

import yaml

from .errors import MindParseError, MindValidationError
from .schema import validate_frontmatter
from .types import Mind, MindFrontmatter, MindMetadata

MIND_FILENAME = "MIND.md"

FRONTMATTER_PATTERN = re.compile(
    r"\A---[ \t]*\n(?P<frontmatter>.*?)^---[ \t]*$\n?(?P<body>.*)\Z",
    re.DOTALL | re.MULTILINE,
)


def split_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """
    Split a document into its decoded frontmatter mapping and raw body.

    Raises:
        MindParseError: delimiters missing, YAML invalid, or block not a mapping
    """
    normalized = text.replace("\r\n", "\n")
    match = FRONTMATTER_PATTERN.match(normalized)
    if not match:
        raise MindParseError("missing YAML frontmatter")

    try:
        data = yaml.safe_load(match.group("frontmatter"))
    except yaml.YAMLError as e:
        raise MindParseError(f"malformed YAML frontmatter: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise MindParseError(
            f"frontmatter must be a mapping, got {type(data).__name__}"
        )

    return data, match.group("body")


def parse_mind_md(text: str) -> Mind:
    """
    Parse MIND.md content into a Mind.

    Raises:
        MindParseError: structurally malformed document
        MindValidationError: frontmatter violates the schema (all violations listed)
    """
    data, body = split_frontmatter(text)

    errors = validate_frontmatter(data)
    if errors:
        raise MindValidationError(errors)

    frontmatter = MindFrontmatter.from_dict(data)
    return Mind(
        metadata=MindMetadata(name=frontmatter.name, description=frontmatter.description),
        frontmatter=frontmatter,
        content=body.strip(),
    )


def load_mind_file(path: Path) -> Mind:
    """Read and parse a MIND.md file (or a mind directory containing one)."""
    if path.is_dir():
        path = path / MIND_FILENAME
    return parse_mind_md(path.read_text(encoding="utf-8"))
