"""
Local file loader: reads the whole file into memory in one call.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from employee_locator.config import get_settings
from employee_locator.errors import FileLoadError
from employee_locator.loaders.abstract import AbstractDataLoader
from employee_locator.utils.logging import get_logger

log = get_logger(__name__)


class FileLoader(AbstractDataLoader):
    """
    Read an employee file from the local filesystem.

    The handle is opened right before reading and closed on every exit path.
    """

    kind: str = "file"

    def __init__(self, path: str | Path, encoding: Optional[str] = None) -> None:
        super().__init__(str(path))
        self.path = Path(path)
        self.encoding = encoding or get_settings().file_encoding

    def load(self) -> str:
        log.debug("Reading file", extra={"source": self.source, "encoding": self.encoding})
        try:
            with self.path.open("r", encoding=self.encoding, newline="") as f:
                return f.read()
        except OSError as exc:
            raise FileLoadError(self.source, exc.strerror or str(exc)) from exc
        except UnicodeDecodeError as exc:
            raise FileLoadError(self.source, f"not valid {self.encoding} text ({exc.reason})") from exc
        except ValueError as exc:
            raise FileLoadError(self.source, str(exc)) from exc


__all__ = ["FileLoader"]
