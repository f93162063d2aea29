"""Tests for MIND.md parsing."""

import pytest

from minds_mcp.minds import (
    Mind,
    MindParseError,
    MindValidationError,
    load_mind_file,
    parse_mind_md,
    split_frontmatter,
)


VALID_MIND = """---
name: git-commit
description: Write conventional commit messages
license: MIT
compatibility: Requires git
allowed-tools: Bash Read Write
model: fast
metadata:
  author: someone
  version: "1.0"
---

# Git Commit

Use the conventional commits format.
"""


class TestSplitFrontmatter:
    """Test splitting a document into frontmatter and body."""

    def test_splits_mapping_and_body(self):
        """Should decode the YAML block and return the raw body."""
        data, body = split_frontmatter("---\nname: a\n---\nhello\n")
        assert data == {"name": "a"}
        assert body == "hello\n"

    def test_crlf_line_endings(self):
        """Windows line endings should parse the same as LF."""
        data, body = split_frontmatter("---\r\nname: a\r\n---\r\nhello\r\n")
        assert data == {"name": "a"}
        assert body == "hello\n"

    def test_missing_frontmatter(self):
        """A document without the opening delimiter is malformed."""
        with pytest.raises(MindParseError) as exc_info:
            split_frontmatter("# Just markdown\n")
        assert "missing YAML frontmatter" in str(exc_info.value)

    def test_unclosed_frontmatter(self):
        """A document without the closing delimiter is malformed."""
        with pytest.raises(MindParseError):
            split_frontmatter("---\nname: a\n# no closing line\n")

    def test_malformed_yaml(self):
        """Invalid YAML should raise a parse error, not a YAML error."""
        with pytest.raises(MindParseError) as exc_info:
            split_frontmatter("---\nname: [unclosed\n---\nbody\n")
        assert str(exc_info.value).startswith("Invalid MIND.md:")

    def test_non_mapping_frontmatter(self):
        """A YAML list is not a valid frontmatter block."""
        with pytest.raises(MindParseError) as exc_info:
            split_frontmatter("---\n- a\n- b\n---\nbody\n")
        assert "mapping" in str(exc_info.value)

    def test_empty_frontmatter_is_empty_mapping(self):
        """An empty block decodes to an empty mapping."""
        data, body = split_frontmatter("---\n---\nbody\n")
        assert data == {}
        assert body == "body\n"


class TestParseMindMd:
    """Test parsing a full MIND.md document."""

    def test_parses_all_fields(self):
        """Every known frontmatter field should be carried through."""
        mind = parse_mind_md(VALID_MIND)

        assert isinstance(mind, Mind)
        assert mind.metadata.name == "git-commit"
        assert mind.metadata.description == "Write conventional commit messages"
        assert mind.frontmatter.license == "MIT"
        assert mind.frontmatter.compatibility == "Requires git"
        assert mind.frontmatter.allowed_tools == "Bash Read Write"
        assert mind.frontmatter.allowed_tools_list() == ["Bash", "Read", "Write"]
        assert mind.frontmatter.model == "fast"
        assert mind.frontmatter.metadata == {"author": "someone", "version": "1.0"}

    def test_body_is_trimmed(self):
        """Leading and trailing whitespace around the body is removed."""
        mind = parse_mind_md(VALID_MIND)
        assert mind.content.startswith("# Git Commit")
        assert mind.content.endswith("format.")

    def test_unknown_keys_are_ignored(self):
        """Extra frontmatter keys do not fail validation."""
        mind = parse_mind_md("---\nname: a\ndescription: b\ntags: [x]\n---\nbody")
        assert mind.metadata.name == "a"
        assert mind.content == "body"

    def test_empty_body(self):
        """A mind may have no body."""
        mind = parse_mind_md("---\nname: a\ndescription: b\n---\n")
        assert mind.content == ""

    def test_reports_every_violation(self):
        """Validation errors should list all failing fields, not just the first."""
        with pytest.raises(MindValidationError) as exc_info:
            parse_mind_md("---\nname: Bad_Name\ndescription: ''\n---\nbody\n")

        paths = [error.path for error in exc_info.value.errors]
        assert ("name",) in paths
        assert ("description",) in paths
        assert "name: Must be lowercase alphanumeric with hyphens" in str(exc_info.value)

    def test_empty_frontmatter_reports_required_fields(self):
        """An empty block is a validation failure naming both required fields."""
        with pytest.raises(MindValidationError) as exc_info:
            parse_mind_md("---\n---\nbody\n")

        messages = [error.format() for error in exc_info.value.errors]
        assert messages == ["description: Required", "name: Required"]

    def test_frontmatter_round_trips_to_dict(self):
        """to_dict should use document keys and omit absent fields."""
        mind = parse_mind_md("---\nname: a\ndescription: b\nallowed-tools: Bash\n---\n")
        assert mind.frontmatter.to_dict() == {"name": "a", "description": "b", "allowed-tools": "Bash"}


class TestLoadMindFile:
    """Test loading MIND.md from disk."""

    def test_load_from_file(self, tmp_path):
        """Should parse a MIND.md path."""
        path = tmp_path / "MIND.md"
        path.write_text(VALID_MIND, encoding="utf-8")

        mind = load_mind_file(path)
        assert mind.metadata.name == "git-commit"

    def test_load_from_directory(self, tmp_path):
        """A mind directory resolves to its MIND.md."""
        (tmp_path / "MIND.md").write_text(VALID_MIND, encoding="utf-8")

        mind = load_mind_file(tmp_path)
        assert mind.metadata.name == "git-commit"

    def test_missing_file(self, tmp_path):
        """A missing file surfaces as an OSError."""
        with pytest.raises(FileNotFoundError):
            load_mind_file(tmp_path / "nope")
