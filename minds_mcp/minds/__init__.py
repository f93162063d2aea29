"""Mind parsing, providers and the mind registry."""

from .errors import (
    FieldError,
    MindError,
    MindInitializationError,
    MindNotFoundError,
    MindParseError,
    MindResourceNotFoundError,
    MindValidationError,
    ProviderError,
    ScriptExecutionError,
    SecurityError,
    get_error_suggestion,
    is_mind_error,
)
from .parser import load_mind_file, parse_mind_md, split_frontmatter
from .providers import FileSystemProvider, MindsProvider, ScriptCapableProvider
from .registry import (
    MindRegistry,
    get_mind_registry,
    init_mind_registry,
    reset_mind_registry,
    resolve_conflict,
)
from .schema import FRONTMATTER_SCHEMA, validate_frontmatter
from .types import ConflictStrategy, Mind, MindFrontmatter, MindMetadata, ScriptResult

__all__ = [
    # Types
    "ConflictStrategy",
    "Mind",
    "MindFrontmatter",
    "MindMetadata",
    "ScriptResult",
    # Parsing
    "FRONTMATTER_SCHEMA",
    "validate_frontmatter",
    "split_frontmatter",
    "parse_mind_md",
    "load_mind_file",
    # Providers
    "MindsProvider",
    "ScriptCapableProvider",
    "FileSystemProvider",
    # Registry
    "MindRegistry",
    "resolve_conflict",
    "init_mind_registry",
    "get_mind_registry",
    "reset_mind_registry",
    # Errors
    "FieldError",
    "MindError",
    "MindNotFoundError",
    "MindParseError",
    "MindValidationError",
    "MindResourceNotFoundError",
    "ScriptExecutionError",
    "MindInitializationError",
    "ProviderError",
    "SecurityError",
    "is_mind_error",
    "get_error_suggestion",
]
