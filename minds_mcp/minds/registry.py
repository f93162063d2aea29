"""
Mind Registry

Composed view over one or more providers. Ownership of each mind name is
decided once, at init(), by provider order and the conflict strategy; every
later read goes to that owner.

Progressive disclosure: init() holds only metadata; full content is loaded
from the owning provider on first use and cached until the next init().

Concurrency: init() must complete before reads are issued against the same
instance. Concurrent load_mind() calls for the same uncached name share one
provider call.

Provider exceptions after init() are logged, reported to the on_error hook
and surface as None.
"""

import asyncio
import logging
import time
from typing import Sequence

from minds_mcp.minds.errors import MindInitializationError, ProviderError
from minds_mcp.minds.providers.base import MindsProvider, supports_scripts
from minds_mcp.minds.types import ConflictStrategy, Mind, MindMetadata, ScriptResult
from minds_mcp.observability import ObservabilityHooks, elapsed_ms, get_hooks, measure_duration

logger = logging.getLogger(__name__)

NO_MINDS_MESSAGE = "No minds installed."


def resolve_conflict(
    existing: MindsProvider,
    candidate: MindsProvider,
    strategy: ConflictStrategy,
) -> MindsProvider:
    """Pick the owner of a mind name claimed by two providers."""
    if strategy is ConflictStrategy.LAST:
        return candidate
    return existing


class MindRegistry:
    """Discovers minds across providers and serves them with caching."""

    def __init__(
        self,
        providers: Sequence[MindsProvider],
        conflict_strategy: ConflictStrategy | str = ConflictStrategy.FIRST,
        hooks: ObservabilityHooks | None = None,
    ):
        self._providers = list(providers)
        self.conflict_strategy = ConflictStrategy(conflict_strategy)
        self._hooks = hooks

        self._metadata_cache: dict[str, MindMetadata] = {}
        self._mind_cache: dict[str, Mind] = {}
        self._mind_providers: dict[str, MindsProvider] = {}
        self._pending_loads: dict[str, asyncio.Future] = {}

    @property
    def hooks(self) -> ObservabilityHooks:
        return self._hooks if self._hooks is not None else get_hooks()

    # =========================================================================
    # Discovery
    # =========================================================================

    async def init(self) -> None:
        """
        Discover minds from every provider, in order.

        All indices are cleared first and replaced together once every provider
        has answered.

        Raises:
            MindInitializationError: a provider's discover() failed; the
                registry is left empty
        """
        self._metadata_cache = {}
        self._mind_cache = {}
        self._mind_providers = {}
        self._pending_loads = {}

        metadata: dict[str, MindMetadata] = {}
        owners: dict[str, MindsProvider] = {}

        async with measure_duration("mind registry init", logger):
            for provider in self._providers:
                try:
                    discovered = await provider.discover()
                except Exception as e:
                    error = ProviderError(provider.name, f"discovery failed: {e}")
                    raise MindInitializationError(str(error)) from e

                for mind in discovered:
                    self._merge(mind, provider, metadata, owners)

        self._metadata_cache = metadata
        self._mind_providers = owners
        logger.info(
            f"Mind registry initialized with {len(metadata)} minds "
            f"from {len(self._providers)} providers"
        )

    def _merge(
        self,
        mind: MindMetadata,
        provider: MindsProvider,
        metadata: dict[str, MindMetadata],
        owners: dict[str, MindsProvider],
    ) -> None:
        existing = owners.get(mind.name)
        if existing is None:
            metadata[mind.name] = mind
            owners[mind.name] = provider
            return

        winner = resolve_conflict(existing, provider, self.conflict_strategy)
        logger.warning(
            f"Mind '{mind.name}' provided by both '{existing.name}' and '{provider.name}'; "
            f"using '{winner.name}' (strategy: {self.conflict_strategy.value})"
        )
        if winner is provider:
            metadata[mind.name] = mind
            owners[mind.name] = provider

    # =========================================================================
    # Lookups (no I/O)
    # =========================================================================

    def has_mind(self, name: str) -> bool:
        return name in self._mind_providers

    def get_metadata(self, name: str) -> MindMetadata | None:
        return self._metadata_cache.get(name)

    def list_minds(self) -> list[str]:
        return list(self._metadata_cache)

    def get_provider_for_mind(self, name: str) -> MindsProvider | None:
        return self._mind_providers.get(name)

    def get_providers(self) -> list[MindsProvider]:
        return list(self._providers)

    def supports_scripts(self, mind_name: str) -> bool:
        provider = self._mind_providers.get(mind_name)
        return provider is not None and supports_scripts(provider)

    def generate_available_minds(self) -> str:
        """Bullet list of every mind for system prompt injection."""
        if not self._metadata_cache:
            return NO_MINDS_MESSAGE

        lines = [f"- `{m.name}`: {m.description}" for m in self._metadata_cache.values()]
        return "Available minds:\n" + "\n".join(lines)

    # =========================================================================
    # Loading
    # =========================================================================

    async def load_mind(self, name: str) -> Mind | None:
        """Full mind content, loaded from its owner once and then cached."""
        start = time.perf_counter()

        cached = self._mind_cache.get(name)
        if cached is not None:
            logger.debug(f"Mind cache hit: {name}")
            self.hooks.fire("on_mind_load", name, elapsed_ms(start), True)
            return cached

        provider = self._mind_providers.get(name)
        if provider is None:
            return None

        # Bind to the current indices so a load finishing after a re-init
        # cannot write into the new cache.
        pending_loads = self._pending_loads
        pending = pending_loads.get(name)
        if pending is None:
            pending = asyncio.ensure_future(
                self._load_from_provider(name, provider, self._mind_cache)
            )
            pending_loads[name] = pending
            pending.add_done_callback(lambda _: pending_loads.pop(name, None))

        mind = await asyncio.shield(pending)
        if mind is not None:
            self.hooks.fire("on_mind_load", name, elapsed_ms(start), False)
        return mind

    async def _load_from_provider(
        self,
        name: str,
        provider: MindsProvider,
        cache: dict[str, Mind],
    ) -> Mind | None:
        logger.debug(f"Mind cache miss: {name}, loading from '{provider.name}'")
        try:
            mind = await provider.load_mind(name)
        except Exception as e:
            self._provider_failed(e, provider, "load_mind", mind=name)
            return None
        if mind is not None:
            cache[name] = mind
        return mind

    async def read_resource(self, mind_name: str, path: str) -> str | None:
        provider = self._mind_providers.get(mind_name)
        if provider is None:
            return None
        try:
            return await provider.read_resource(mind_name, path)
        except Exception as e:
            self._provider_failed(e, provider, "read_resource", mind=mind_name, path=path)
            return None

    async def execute_script(
        self,
        mind_name: str,
        script_path: str,
        args: list[str] | None = None,
    ) -> ScriptResult | None:
        """
        Run a mind's script through its owning provider.

        Returns:
            The script result, or None if the mind is unknown, its provider
            cannot run scripts, or the provider raised
        """
        provider = self._mind_providers.get(mind_name)
        if provider is None or not supports_scripts(provider):
            return None

        start = time.perf_counter()
        try:
            result = await provider.execute_script(mind_name, script_path, args)
        except Exception as e:
            self._provider_failed(e, provider, "execute_script", mind=mind_name, script=script_path)
            self.hooks.fire("on_script_execute", mind_name, script_path, False, elapsed_ms(start))
            return None
        self.hooks.fire("on_script_execute", mind_name, script_path, result.success, elapsed_ms(start))
        return result

    def _provider_failed(self, error: Exception, provider: MindsProvider, operation: str, **context: str) -> None:
        """Log a provider exception and report it to the on_error hook."""
        logger.error(f"Provider '{provider.name}' failed in {operation}: {error}")
        self.hooks.fire("on_error", error, {"provider": provider.name, "operation": operation, **context})


# =============================================================================
# Process-wide registry
# =============================================================================

_registry_instance: MindRegistry | None = None


async def init_mind_registry(
    providers: Sequence[MindsProvider],
    conflict_strategy: ConflictStrategy | str = ConflictStrategy.FIRST,
    hooks: ObservabilityHooks | None = None,
) -> MindRegistry:
    """Build and initialize a registry, replacing any previous global instance."""
    global _registry_instance
    registry = MindRegistry(providers, conflict_strategy=conflict_strategy, hooks=hooks)
    await registry.init()
    _registry_instance = registry
    return registry


def get_mind_registry() -> MindRegistry:
    if _registry_instance is None:
        raise MindInitializationError(
            "MindRegistry not initialized. Call init_mind_registry first."
        )
    return _registry_instance


def reset_mind_registry() -> None:
    global _registry_instance
    _registry_instance = None
