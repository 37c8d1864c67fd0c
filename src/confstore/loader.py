from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Union

PathLike = Union[str, Path]


def read_text(path: PathLike) -> str:
    """Read the whole configuration file."""
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def dump_json(content: Any, prettify: bool = False) -> str:
    """Serialize ``content`` either indented or as compact JSON."""
    if prettify:
        return json.dumps(content, indent=2, ensure_ascii=False)
    return json.dumps(content, separators=(",", ":"), ensure_ascii=False)


def write_json(text: str, path: PathLike) -> None:
    """Persist serialized configuration to disk, replacing the file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
