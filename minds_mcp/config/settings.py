"""
Settings
Configuration management for the Minds MCP server.

Values come from the environment (and a local .env file, if present).
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from minds_mcp.minds.providers import FileSystemProvider
from minds_mcp.minds.providers.filesystem import DEFAULT_SCRIPT_TIMEOUT
from minds_mcp.minds.types import ConflictStrategy

load_dotenv()


def get_minds_home() -> Path:
    """Get the minds user home directory.

    Uses MINDS_HOME env var if set, otherwise ~/.minds/
    """
    env_home = os.environ.get("MINDS_HOME")
    if env_home:
        return Path(os.path.expanduser(env_home))
    return Path.home() / ".minds"


def get_minds_dirs() -> list[Path]:
    """
    Get the provider directories, in priority order.

    Priority:
    1. MINDS_DIRS env var (os.pathsep-separated)
    2. ./minds (project) then ~/.minds/minds (user)
    """
    explicit = os.environ.get("MINDS_DIRS")
    if explicit:
        return [Path(os.path.expanduser(p)) for p in explicit.split(os.pathsep) if p.strip()]
    return [Path.cwd() / "minds", get_minds_home() / "minds"]


def parse_conflict_strategy(value: str) -> ConflictStrategy:
    try:
        return ConflictStrategy(value.strip().lower())
    except ValueError:
        valid = ", ".join(s.value for s in ConflictStrategy)
        raise ValueError(f"Invalid conflict strategy '{value}' (must be one of: {valid})") from None


def parse_script_timeout(value: str) -> Optional[float]:
    """Seconds before a script is killed; zero or negative disables the limit."""
    try:
        seconds = float(value)
    except ValueError:
        raise ValueError(f"Invalid script timeout '{value}' (expected seconds)") from None
    return seconds if seconds > 0 else None


@dataclass
class Config:
    """Server configuration."""
    environment: str = "development"
    log_level: str = "DEBUG"
    http_host: str = "0.0.0.0"
    http_port: int = 8000
    minds_dirs: list[Path] = field(default_factory=list)
    conflict_strategy: ConflictStrategy = ConflictStrategy.FIRST
    js_runtime: str = "bun"
    script_timeout: Optional[float] = DEFAULT_SCRIPT_TIMEOUT

    def __post_init__(self):
        if not self.minds_dirs:
            self.minds_dirs = get_minds_dirs()

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


def config_from_env() -> Config:
    env = os.getenv("ENVIRONMENT", "development")
    return Config(
        environment=env,
        log_level=os.getenv("LOG_LEVEL", "DEBUG" if env != "production" else "INFO"),
        http_host=os.getenv("MCP_HOST", "0.0.0.0"),
        http_port=int(os.getenv("MCP_PORT", "8000")),
        minds_dirs=get_minds_dirs(),
        conflict_strategy=parse_conflict_strategy(os.getenv("MINDS_CONFLICT_STRATEGY", "first")),
        js_runtime=os.getenv("MINDS_JS_RUNTIME", "bun"),
        script_timeout=parse_script_timeout(os.getenv("MINDS_SCRIPT_TIMEOUT", str(DEFAULT_SCRIPT_TIMEOUT))),
    )


def build_providers(config: Config) -> list[FileSystemProvider]:
    """One filesystem provider per configured directory, in priority order."""
    return [
        FileSystemProvider(
            minds_dir,
            js_runtime=config.js_runtime,
            script_timeout=config.script_timeout,
            name=f"filesystem:{minds_dir}",
        )
        for minds_dir in config.minds_dirs
    ]


class ConfigManager:
    """Configuration manager - loads and provides config."""

    _instance: Optional["ConfigManager"] = None

    def __init__(self):
        self._config: Optional[Config] = None

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    async def load(self) -> None:
        """Load configuration from environment."""
        self._config = config_from_env()

    def get(self) -> Config:
        """Get current configuration."""
        if self._config is None:
            # Create default config if not loaded
            self._config = Config()
        return self._config
