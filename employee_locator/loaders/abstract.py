"""
Abstract loader interfaces for the Employee Locator.

Concrete loaders (local file, HTTP) implement the DataLoader protocol so the
pipeline can fetch raw text without knowing where it comes from.
"""

from __future__ import annotations

import abc
from typing import Protocol, runtime_checkable


@runtime_checkable
class DataLoader(Protocol):
    """
    Common interface all loaders must implement.

    Attributes
    ----------
    source : str
        The source identifier (path or URL) the loader reads from.
    kind : str
        A short machine-friendly identifier of the loader variant.
    """

    source: str
    kind: str

    def load(self) -> str:
        """
        Retrieve the full raw text of the source.

        Returns
        -------
        str
            The complete content with its line breaks intact.
        """
        ...


class AbstractDataLoader(abc.ABC):
    """
    Optional ABC helper for class-based implementations.

    Subclasses should set `kind` and implement `load`.
    """

    kind: str

    def __init__(self, source: str) -> None:
        self.source = source

    @abc.abstractmethod
    def load(self) -> str:  # pragma: no cover - interface only
        """Return the raw text of the source."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.source!r})"


__all__ = [
    "AbstractDataLoader",
    "DataLoader",
]
