"""Mind source providers."""

from .base import MindsProvider, ScriptCapableProvider, supports_scripts
from .filesystem import FileSystemProvider

__all__ = [
    "MindsProvider",
    "ScriptCapableProvider",
    "supports_scripts",
    "FileSystemProvider",
]
