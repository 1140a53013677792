"""
Loaders package for the Employee Locator.

Re-exports the loader interfaces and concrete loaders, and owns the selection
policy that maps a source identifier to a loader.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from employee_locator.config import Settings, get_settings
from employee_locator.loaders.abstract import AbstractDataLoader, DataLoader
from employee_locator.loaders.file import FileLoader
from employee_locator.loaders.network import NetworkLoader

NETWORK_PREFIX = "http"


def _loader_factories(settings: Settings) -> Dict[str, Callable[[str], DataLoader]]:
    """Registry of available loaders."""
    return {
        FileLoader.kind: lambda source: FileLoader(source, encoding=settings.file_encoding),
        NetworkLoader.kind: lambda source: NetworkLoader(
            source,
            timeout=settings.request_timeout_seconds,
            retries=settings.network_retries,
        ),
    }


def available_loaders() -> List[str]:
    """List available loader kinds."""
    return sorted(_loader_factories(get_settings()).keys())


def is_network_source(source: str) -> bool:
    """True when the source starts with "http", ignoring case."""
    return source.lower().startswith(NETWORK_PREFIX)


def resolve_loader(source: str, settings: Optional[Settings] = None) -> DataLoader:
    """
    Pick the loader for a source identifier.

    URLs (anything starting with "http", case-insensitively) get a NetworkLoader;
    everything else is treated as a local path.
    """
    settings = settings or get_settings()
    kind = NetworkLoader.kind if is_network_source(source) else FileLoader.kind
    return _loader_factories(settings)[kind](source)


__all__ = [
    # Abstracts
    "AbstractDataLoader",
    "DataLoader",
    # Concrete loaders
    "FileLoader",
    "NetworkLoader",
    # Selection
    "available_loaders",
    "is_network_source",
    "resolve_loader",
]
