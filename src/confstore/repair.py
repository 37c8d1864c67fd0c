"""Best-effort repair of malformed JSON text."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from json_repair import repair_json


@dataclass(frozen=True)
class RepairResult:
    """Decoded structure plus whether the text needed fixing"""
    data: Any
    changed: bool


def fix_json(text: str) -> RepairResult:
    """Decode ``text``, repairing it first when strict parsing fails.

    Valid JSON is returned untouched with ``changed=False``.  Anything else
    goes through :func:`json_repair.repair_json`, which does not raise on
    malformed input; text it cannot make sense of comes back as an empty
    string rather than a mapping.
    """
    try:
        return RepairResult(json.loads(text), False)
    except json.JSONDecodeError:
        pass
    return RepairResult(repair_json(text, return_objects=True), True)
