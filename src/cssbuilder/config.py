from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class JsonConfig:
    separators: tuple[str, str] = (",", ":")
    ensure_ascii: bool = False
    sort_keys: bool = False
    indent: int | None = None
