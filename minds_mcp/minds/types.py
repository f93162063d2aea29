"""
Mind Types

Value records shared by the parser, providers and registry.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

ALLOWED_TOOLS_KEY = "allowed-tools"


class ConflictStrategy(Enum):
    """Which provider wins when two providers declare the same mind name."""
    FIRST = "first"
    LAST = "last"


@dataclass(frozen=True)
class MindMetadata:
    """Identity and summary of a mind, held for every discovered mind."""
    name: str
    description: str


@dataclass(frozen=True)
class MindFrontmatter:
    """Validated frontmatter of a MIND.md document."""
    name: str
    description: str
    license: str | None = None
    compatibility: str | None = None
    allowed_tools: str | None = None  # raw space-separated "allowed-tools" value
    model: str | None = None
    metadata: dict[str, str] | None = field(default=None, hash=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MindFrontmatter":
        """Build from a decoded frontmatter mapping. Unknown keys are dropped."""
        metadata = data.get("metadata")
        return cls(
            name=data["name"],
            description=data["description"],
            license=data.get("license"),
            compatibility=data.get("compatibility"),
            allowed_tools=data.get(ALLOWED_TOOLS_KEY),
            model=data.get("model"),
            metadata=dict(metadata) if metadata is not None else None,
        )

    def to_dict(self) -> dict[str, Any]:
        """Render using document keys, omitting absent fields."""
        result: dict[str, Any] = {"name": self.name, "description": self.description}
        optional = {
            "license": self.license,
            "compatibility": self.compatibility,
            ALLOWED_TOOLS_KEY: self.allowed_tools,
            "model": self.model,
            "metadata": dict(self.metadata) if self.metadata is not None else None,
        }
        result.update({k: v for k, v in optional.items() if v is not None})
        return result

    def allowed_tools_list(self) -> list[str]:
        if not self.allowed_tools:
            return []
        return self.allowed_tools.split()


@dataclass(frozen=True)
class Mind:
    """A fully parsed mind: metadata, frontmatter and the markdown body."""
    metadata: MindMetadata
    frontmatter: MindFrontmatter
    content: str


@dataclass(frozen=True)
class ScriptResult:
    """Outcome of one script invocation."""
    success: bool
    stdout: str
    stderr: str
    exit_code: int

    @classmethod
    def failure(cls, stderr: str, exit_code: int = 1, stdout: str = "") -> "ScriptResult":
        return cls(success=False, stdout=stdout, stderr=stderr, exit_code=exit_code)

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "stdout": self.stdout,
            "stderr": self.stderr,
            "exitCode": self.exit_code,
        }
