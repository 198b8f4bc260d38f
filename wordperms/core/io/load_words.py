from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

from wordperms.core.errors import InputLoadError


def parse_words(text: str) -> list[str]:
    """Split text into words, one per line.

    Lines end at "\\n" only (a trailing "\\r" is dropped, a lone "\\r" is kept).
    Blank and whitespace-only lines are dropped. Kept lines are stored
    verbatim apart from the line terminator, so " foo " stays " foo ".
    """
    words: list[str] = []
    for line in text.split("\n"):
        if line.endswith("\r"):
            line = line[:-1]
        if not line.strip():
            continue
        words.append(line)
    return words


def decode_words(raw: bytes, *, source: str) -> list[str]:
    """Decode UTF-8 bytes without newline translation and parse them."""
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InputLoadError(code="E_INPUT_DECODE", message=str(e), file=source) from e
    return parse_words(text)


def load_words(path: str) -> list[str]:
    p = Path(path)
    if not p.exists():
        raise InputLoadError(
            code="E_INPUT_NOT_FOUND",
            message="file does not exist",
            file=str(p),
        )

    try:
        raw = p.read_bytes()
    except OSError as e:
        raise InputLoadError(code="E_INPUT_READ", message=str(e), file=str(p)) from e

    return decode_words(raw, source=str(p))


def read_words_stream(stream: BinaryIO, *, source: str = "<stdin>") -> list[str]:
    try:
        raw = stream.read()
    except OSError as e:
        raise InputLoadError(code="E_INPUT_READ", message=str(e), file=source) from e
    return decode_words(raw, source=source)
