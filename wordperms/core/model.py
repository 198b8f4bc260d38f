from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Capitalization(str, Enum):
    all = "all"
    none = "none"
    first = "first"
    upper = "upper"


CAP_STYLE_CHOICES: tuple[str, ...] = tuple(c.value for c in Capitalization)


def parse_capitalization(value: str) -> Capitalization:
    if isinstance(value, Capitalization):
        return value
    try:
        return Capitalization(str(value).strip().lower())
    except ValueError:
        raise ValueError(
            f"unknown capitalization: {value} (choose one of: {', '.join(CAP_STYLE_CHOICES)})"
        ) from None


@dataclass(frozen=True)
class RunConfig:
    max_len: int = 4
    cap_style: Capitalization = Capitalization.all
    limit: Optional[int] = None
    workers: int = 4
    sort: bool = False
