"""
FileSystem Provider

Loads minds from a local directory:

    base_dir/
    ├── mind-name/
    │   ├── MIND.md
    │   ├── references/
    │   │   └── guide.md
    │   ├── assets/
    │   └── scripts/
    │       └── helper.py
"""

import asyncio
import contextlib
import logging
import os
import re
import signal
import sys
from pathlib import Path

from minds_mcp.minds.errors import MindError
from minds_mcp.minds.parser import MIND_FILENAME, load_mind_file
from minds_mcp.minds.providers.base import ScriptCapableProvider
from minds_mcp.minds.schema import NAME_PATTERN
from minds_mcp.minds.types import Mind, MindMetadata, ScriptResult

logger = logging.getLogger(__name__)

SCRIPTS_DIR = "scripts"
TIMEOUT_EXIT_CODE = 124
DEFAULT_SCRIPT_TIMEOUT = 60.0
KILL_GRACE_SECONDS = 5.0

_NAME_RE = re.compile(NAME_PATTERN)

# Read failures that make a single candidate unusable without aborting a scan
_LOAD_ERRORS = (OSError, UnicodeDecodeError, MindError)


def _strip_traversal(relative_path: str) -> str:
    """Drop every '..' token and any leading separators."""
    return relative_path.replace("..", "").lstrip("/\\")


def _kill_process_group(proc: asyncio.subprocess.Process) -> None:
    """Kill a script and everything it spawned; the script leads its own session."""
    with contextlib.suppress(ProcessLookupError):
        if hasattr(os, "killpg"):
            os.killpg(proc.pid, signal.SIGKILL)
        else:
            proc.kill()


class FileSystemProvider(ScriptCapableProvider):
    """Minds stored as {base_dir}/{mind}/MIND.md."""

    def __init__(
        self,
        base_dir: str | Path,
        js_runtime: str = "bun",
        script_timeout: float | None = DEFAULT_SCRIPT_TIMEOUT,
        name: str = "filesystem",
    ):
        self.base_dir = Path(base_dir).expanduser().resolve()
        self.script_timeout = script_timeout
        self._name = name
        self._mind_dirs: dict[str, Path] = {}  # mind name -> absolute mind directory
        self._interpreters = {
            ".ts": js_runtime,
            ".js": js_runtime,
            ".sh": "bash",
            ".py": sys.executable or "python3",
        }

    @property
    def name(self) -> str:
        return self._name

    # =========================================================================
    # Discovery and loading
    # =========================================================================

    async def discover(self) -> list[MindMetadata]:
        minds: list[MindMetadata] = []
        mind_dirs: dict[str, Path] = {}

        if not self.base_dir.is_dir():
            logger.debug(f"Minds directory does not exist: {self.base_dir}")
            self._mind_dirs = mind_dirs
            return minds

        for mind_file in sorted(self.base_dir.glob(f"*/{MIND_FILENAME}")):
            mind_dir = mind_file.parent
            try:
                mind = load_mind_file(mind_file)
            except _LOAD_ERRORS as e:
                logger.error(f"Failed to load mind from {mind_dir}: {e}")
                continue

            name = mind.metadata.name
            if name in mind_dirs:
                logger.warning(
                    f"Mind '{name}' declared twice in {self.base_dir}; "
                    f"keeping {mind_dirs[name].name}, ignoring {mind_dir.name}"
                )
                continue

            mind_dirs[name] = mind_dir
            minds.append(mind.metadata)

        self._mind_dirs = mind_dirs
        logger.debug(f"Discovered {len(minds)} minds in {self.base_dir}")
        return minds

    async def load_mind(self, name: str) -> Mind | None:
        mind_dir = self._mind_dirs.get(name)
        from_fallback = mind_dir is None
        if from_fallback:
            mind_dir = self._fallback_dir(name)
            if mind_dir is None:
                return None

        try:
            mind = load_mind_file(mind_dir / MIND_FILENAME)
        except _LOAD_ERRORS as e:
            logger.debug(f"Could not load mind '{name}' from {mind_dir}: {e}")
            return None

        if from_fallback:
            self._mind_dirs[name] = mind_dir
        return mind

    async def has_mind(self, name: str) -> bool:
        return name in self._mind_dirs or self._fallback_dir(name) is not None

    def get_mind_dir(self, name: str) -> Path | None:
        return self._mind_dirs.get(name)

    def _fallback_dir(self, name: str) -> Path | None:
        """Directory for a mind not yet discovered, if {base_dir}/{name}/MIND.md exists."""
        if not _NAME_RE.match(name):
            return None
        candidate = self.base_dir / name
        if (candidate / MIND_FILENAME).is_file():
            return candidate
        return None

    # =========================================================================
    # Resources
    # =========================================================================

    def _resolve_within(self, root: Path, relative_path: str) -> Path | None:
        """
        Resolve a caller-supplied relative path under root.

        '..' tokens are stripped first; the resolved path (symlinks included)
        must still lie under root, otherwise None.
        """
        root = root.resolve()
        candidate = (root / _strip_traversal(relative_path)).resolve()
        if not candidate.is_relative_to(root):
            logger.warning(f"Blocked path outside {root}: {relative_path}")
            return None
        return candidate

    async def read_resource(self, mind_name: str, path: str) -> str | None:
        mind_dir = self._mind_dirs.get(mind_name)
        if mind_dir is None:
            return None

        resource = self._resolve_within(mind_dir, path)
        if resource is None or not resource.is_file():
            return None

        try:
            return resource.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Could not read resource {resource}: {e}")
            return None

    # =========================================================================
    # Scripts
    # =========================================================================

    async def execute_script(
        self,
        mind_name: str,
        script_path: str,
        args: list[str] | None = None,
    ) -> ScriptResult:
        mind_dir = self._mind_dirs.get(mind_name)
        if mind_dir is None:
            return ScriptResult.failure(f'Mind "{mind_name}" not found')

        extension = Path(script_path).suffix.lower()
        interpreter = self._interpreters.get(extension)
        if interpreter is None:
            return ScriptResult.failure(
                f"Unsupported script type: {extension or '(none)'}. Use .ts, .js, .sh, or .py"
            )

        full_path = self._resolve_within(mind_dir / SCRIPTS_DIR, script_path)
        if full_path is None or not full_path.is_file():
            return ScriptResult.failure(f"Script not found: {SCRIPTS_DIR}/{script_path}")

        command = [interpreter, str(full_path), *(args or [])]
        env = {**os.environ, "MIND_NAME": mind_name, "MIND_DIR": str(mind_dir)}
        logger.debug(f"Running script for '{mind_name}': {command}")

        try:
            proc = await asyncio.create_subprocess_exec(
                *command,
                cwd=str(mind_dir),
                env=env,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                start_new_session=True,
            )
        except Exception as e:
            logger.warning(f"Failed to spawn {command[0]} for '{mind_name}': {e}")
            return ScriptResult.failure(f"Execution failed: {e}")

        try:
            stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=self.script_timeout)
        except asyncio.TimeoutError:
            _kill_process_group(proc)
            with contextlib.suppress(asyncio.TimeoutError):
                await asyncio.wait_for(proc.wait(), timeout=KILL_GRACE_SECONDS)
            logger.warning(f"Script {script_path} for '{mind_name}' timed out after {self.script_timeout:g}s")
            return ScriptResult.failure(
                f"Script timed out after {self.script_timeout:g}s",
                exit_code=TIMEOUT_EXIT_CODE,
            )
        except Exception as e:
            logger.warning(f"Script {script_path} for '{mind_name}' failed: {e}")
            return ScriptResult.failure(f"Execution failed: {e}")

        exit_code = proc.returncode if proc.returncode is not None else 1
        return ScriptResult(
            success=exit_code == 0,
            stdout=stdout.decode("utf-8", errors="replace").strip(),
            stderr=stderr.decode("utf-8", errors="replace").strip(),
            exit_code=exit_code,
        )
