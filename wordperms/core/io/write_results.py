from __future__ import annotations

from pathlib import Path
from typing import Iterable

from wordperms.core.errors import OutputWriteError


def write_results(path: str, lines: Iterable[str]) -> int:
    """Write one result per line (newline-terminated). Returns the line count."""
    p = Path(path)
    count = 0
    try:
        if str(p.parent) not in (".", ""):
            p.parent.mkdir(parents=True, exist_ok=True)
        with p.open("w", encoding="utf-8", newline="\n") as fh:
            for line in lines:
                fh.write(line)
                fh.write("\n")
                count += 1
    except OSError as e:
        raise OutputWriteError(code="E_OUTPUT_WRITE", message=str(e), file=str(p)) from e
    return count
