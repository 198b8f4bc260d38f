from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional


@dataclass(frozen=True)
class WordpermsError(Exception):
    """Coded failure at the input/output/option boundary.

    The engine itself never raises; these only come from reading words,
    reading the config file, parsing options or writing results. Each
    subclass carries the process exit status the CLI terminates with.
    """

    code: str
    message: str
    file: Optional[str] = None
    path: Optional[str] = None

    exit_code: ClassVar[int] = 1

    def __str__(self) -> str:
        loc = ":".join(p for p in (self.file, self.path) if p) or "wordperms"
        return f"{loc}: {self.code}: {self.message}"


class InputLoadError(WordpermsError):
    """Word list or config file could not be opened, read or decoded."""


class OutputWriteError(WordpermsError):
    """Result file could not be created or written."""


class OptionError(WordpermsError):
    exit_code: ClassVar[int] = 2
