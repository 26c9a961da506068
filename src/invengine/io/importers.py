"""Input loaders: integer data files and JSON engine configuration."""

from __future__ import annotations

import json
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, List

from invengine.core.config import EngineConfig


def parse_integers(text: str, *, source: str = "<string>") -> List[int]:
    """Parse whitespace/newline separated integers.

    Raises:
        ValueError: If a token is not an integer. The message names the source,
            line number and offending token.
    """

    values: List[int] = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        for token in line.split():
            try:
                values.append(int(token))
            except ValueError:
                raise ValueError(f"{source}:{line_no}: not an integer: {token!r}") from None
    return values


def load_integers(path: Path) -> List[int]:
    """Read an integer data file into a list."""

    path = Path(path)
    return parse_integers(path.read_text(encoding="utf-8"), source=str(path))


def load_json(path: Path) -> Dict[str, Any]:
    """Read a JSON file into a Python dictionary."""

    return json.loads(Path(path).read_text(encoding="utf-8"))


def load_config(path: Path) -> EngineConfig:
    """Load an :class:`EngineConfig` from JSON. Missing keys keep their defaults."""

    data = load_json(path)
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")
    known = {f.name for f in fields(EngineConfig)}
    unknown = set(data).difference(known)
    if unknown:
        raise ValueError(f"Config file has unknown keys: {', '.join(sorted(unknown))}")

    for name in ("check_invariants", "collect_stats"):
        if name in data and not isinstance(data[name], bool):
            raise ValueError(f"{name} must be true or false, got {data[name]!r}")

    config = EngineConfig(**data)
    size = config.window_size
    if isinstance(size, bool) or not isinstance(size, int) or size < 1:
        raise ValueError("window_size must be a positive integer")
    return config
