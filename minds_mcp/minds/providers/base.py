"""
Provider Base Classes

A provider abstracts where minds live. The registry only talks to providers
through these interfaces.
"""

from abc import ABC, abstractmethod

from minds_mcp.minds.types import Mind, MindMetadata, ScriptResult


class MindsProvider(ABC):
    """Source of minds: discovery, loading and resource reads."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name, used in logs and conflict warnings."""
        pass

    @abstractmethod
    async def discover(self) -> list[MindMetadata]:
        """Return metadata for every valid mind this provider holds."""
        pass

    @abstractmethod
    async def load_mind(self, name: str) -> Mind | None:
        """Load full mind content, or None if the mind is absent or unreadable."""
        pass

    @abstractmethod
    async def has_mind(self, name: str) -> bool:
        pass

    @abstractmethod
    async def read_resource(self, mind_name: str, path: str) -> str | None:
        """Read a file relative to the mind's directory, or None."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class ScriptCapableProvider(MindsProvider):
    """Provider that can also run scripts shipped with a mind."""

    @abstractmethod
    async def execute_script(
        self,
        mind_name: str,
        script_path: str,
        args: list[str] | None = None,
    ) -> ScriptResult:
        """Run scripts/<script_path>. Failures are reported in the result, never raised."""
        pass


def supports_scripts(provider: MindsProvider) -> bool:
    return isinstance(provider, ScriptCapableProvider)
