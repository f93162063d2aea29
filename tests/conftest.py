"""
Shared pytest fixtures for Minds MCP tests

Provides a mock logger, a tool context, an on-disk minds tree and an in-memory
provider, and resets process-wide state between tests.
"""

import sys
from pathlib import Path
from typing import Optional
from unittest.mock import Mock

import pytest
import pytest_asyncio

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from minds_mcp.minds import Mind, MindMetadata, MindsProvider, parse_mind_md, reset_mind_registry
from minds_mcp.observability import reset_observability


# ============================================================================
# Helpers
# ============================================================================

def mind_md(name: str, description: str = "A test mind", body: str = "# Instructions", **extra) -> str:
    """Render a MIND.md document."""
    lines = ["---", f"name: {name}", f"description: {description}"]
    for key, value in extra.items():
        lines.append(f"{key.replace('_', '-')}: {value}")
    lines.append("---")
    lines.append("")
    lines.append(body)
    return "\n".join(lines) + "\n"


def write_mind(base_dir: Path, name: str, dirname: Optional[str] = None, **kwargs) -> Path:
    """Create {base_dir}/{dirname or name}/MIND.md and return the mind directory."""
    mind_dir = base_dir / (dirname or name)
    mind_dir.mkdir(parents=True, exist_ok=True)
    (mind_dir / "MIND.md").write_text(mind_md(name, **kwargs), encoding="utf-8")
    return mind_dir


class MockProvider(MindsProvider):
    """
    In-memory provider that records calls.

    Usage:
        provider = MockProvider("a", {"git-commit": mind_md("git-commit")})
        await provider.load_mind("git-commit")
        assert provider.load_calls == ["git-commit"]
    """

    def __init__(self, name: str, documents: Optional[dict[str, str]] = None,
                 resources: Optional[dict[tuple[str, str], str]] = None):
        self._name = name
        self.minds = {key: parse_mind_md(text) for key, text in (documents or {}).items()}
        self.resources = resources or {}
        self.discover_calls = 0
        self.load_calls: list[str] = []

    @property
    def name(self) -> str:
        return self._name

    async def discover(self) -> list[MindMetadata]:
        self.discover_calls += 1
        return [mind.metadata for mind in self.minds.values()]

    async def load_mind(self, name: str) -> Optional[Mind]:
        self.load_calls.append(name)
        return self.minds.get(name)

    async def has_mind(self, name: str) -> bool:
        return name in self.minds

    async def read_resource(self, mind_name: str, path: str) -> Optional[str]:
        return self.resources.get((mind_name, path))


# ============================================================================
# Base Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def reset_global_state():
    """Every test starts without a global registry or observability hooks."""
    reset_mind_registry()
    reset_observability()
    yield
    reset_mind_registry()
    reset_observability()


@pytest.fixture
def logger():
    """
    Standard mock logger for all tests.
    """
    from minds_mcp.utils.logger import Logger
    return Mock(spec=Logger)


@pytest.fixture
def mock_context():
    """
    Standard mock ToolContext for all tests.
    """
    from minds_mcp.mcp_types.tools import ToolContext

    return ToolContext(requestId='test_req_123')


@pytest.fixture
def minds_dir(tmp_path):
    """
    A minds directory with two valid minds, one invalid one and a stray folder.

    minds/
    ├── git-commit/      MIND.md, references/guide.md, scripts/{hello.sh,echo.py,...}
    ├── code-review/     MIND.md
    ├── broken/          MIND.md with an invalid name
    └── notes/           no MIND.md
    """
    base = tmp_path / "minds"

    git_commit = write_mind(
        base, "git-commit",
        description="Write conventional commit messages",
        body="# Git Commit\n\nUse the conventional commits format.",
        allowed_tools="Bash Read",
    )
    (git_commit / "references").mkdir()
    (git_commit / "references" / "guide.md").write_text("# Commit guide\n", encoding="utf-8")

    scripts = git_commit / "scripts"
    scripts.mkdir()
    (scripts / "hello.sh").write_text('echo "hello $1"\necho "mind=$MIND_NAME"\n', encoding="utf-8")
    (scripts / "echo.py").write_text(
        "import os, sys\n"
        "print(' '.join(sys.argv[1:]))\n"
        "print(os.getcwd())\n"
        "print(os.environ['MIND_DIR'])\n",
        encoding="utf-8",
    )
    (scripts / "fail.py").write_text(
        "import sys\nprint('partial')\nprint('boom', file=sys.stderr)\nsys.exit(3)\n",
        encoding="utf-8",
    )
    (scripts / "slow.py").write_text("import time\ntime.sleep(30)\n", encoding="utf-8")
    (scripts / "hello.ts").write_text('console.log("hello from ts");\n', encoding="utf-8")
    (scripts / "notes.txt").write_text("not a script\n", encoding="utf-8")

    write_mind(base, "code-review", description="Review code for bugs and style")

    broken = base / "broken"
    broken.mkdir()
    (broken / "MIND.md").write_text(mind_md("Not_Valid"), encoding="utf-8")

    (base / "notes").mkdir()
    (base / "notes" / "README.md").write_text("no mind here\n", encoding="utf-8")

    return base


@pytest_asyncio.fixture
async def registry(minds_dir):
    """Process-wide registry over the minds_dir tree."""
    from minds_mcp.minds import FileSystemProvider, init_mind_registry
    return await init_mind_registry([FileSystemProvider(minds_dir)])
