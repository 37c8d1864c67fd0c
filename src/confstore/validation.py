from __future__ import annotations

import copy
import logging
import math
import re
from jsonschema import Draft7Validator
from typing import Any, Dict, List, Union

from .exceptions import TypeMismatchError

# Root-logger helpers bound at import, as in config_store
log_warning = logging.warning
log_debug = logging.debug

_TYPE_CHECKER = Draft7Validator.TYPE_CHECKER
# ``integer`` is left out: every integer is reported as ``number``.
_JSON_TYPES = ("null", "boolean", "object", "array", "number", "string")
# JSON number syntax, optionally signed, with a leading or trailing dot allowed
_NUMERIC_TEXT = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def json_type(value: Any) -> str:
    """Return the JSON type name of ``value`` (``bool`` is never a number)."""
    for name in _JSON_TYPES:
        if _TYPE_CHECKER.is_type(value, name):
            return name
    return type(value).__name__


def coerce_number(text: str) -> Union[int, float]:
    """Convert numeric text to ``int`` when integral, otherwise ``float``."""
    stripped = text.strip()
    if not _NUMERIC_TEXT.fullmatch(stripped):
        raise ValueError(f"not a number: {text!r}")
    try:
        return int(stripped)
    except ValueError:
        pass
    number = float(stripped)
    if not math.isfinite(number):
        raise ValueError(f"not a finite number: {text!r}")
    return number


def _join(path: str, key: Any) -> str:
    return f"{path}.{key}" if path else str(key)


def check_types(
    candidate: Dict[str, Any],
    base: Dict[str, Any],
    *,
    store_name: str,
    allow_parse_to_number: bool = True,
    ignore_array: bool = False,
    path: str = "",
) -> Dict[str, Any]:
    """Validate ``candidate`` against the shape of ``base``.

    Returns a new dictionary holding the accepted values, with numeric
    strings converted where ``allow_parse_to_number`` permits it.  Keys that
    ``base`` does not define are accepted unchecked and logged.  Raises
    :class:`TypeMismatchError` on the first conflicting key; ``candidate``
    itself is never modified.
    """
    result: Dict[str, Any] = {}
    for key, value in candidate.items():
        result[key] = _check_value(
            key,
            value,
            base,
            store_name=store_name,
            allow_parse_to_number=allow_parse_to_number,
            ignore_array=ignore_array,
            path=path,
        )
    return result


def _check_list(
    candidate: List[Any],
    base: List[Any],
    *,
    store_name: str,
    allow_parse_to_number: bool,
    ignore_array: bool,
    path: str,
) -> List[Any]:
    shape = dict(enumerate(base))
    return [
        _check_value(
            index,
            value,
            shape,
            store_name=store_name,
            allow_parse_to_number=allow_parse_to_number,
            ignore_array=ignore_array,
            path=path,
        )
        for index, value in enumerate(candidate)
    ]


def _check_value(
    key: Any,
    value: Any,
    base: Dict[Any, Any],
    *,
    store_name: str,
    allow_parse_to_number: bool,
    ignore_array: bool,
    path: str,
) -> Any:
    key_path = _join(path, key)
    value_type = json_type(value)

    if ignore_array and value_type == "array":
        log_warning(f"{store_name} key {key_path} is an array and checking will be ignored")
        return copy.deepcopy(value)

    if key not in base:
        log_warning(f"{store_name} key {key_path} is not defined in the {store_name} as a default value")
        return copy.deepcopy(value)

    default = base[key]
    default_type = json_type(default)

    if value_type != default_type:
        if allow_parse_to_number and value_type == "string" and default_type == "number":
            try:
                number = coerce_number(value)
            except ValueError:
                raise TypeMismatchError(store_name, key_path, default_type, value_type) from None
            log_debug(f"{store_name} key {key_path} converted from string to number")
            return number
        raise TypeMismatchError(store_name, key_path, default_type, value_type)

    if value_type == "object":
        return check_types(
            value,
            default,
            store_name=store_name,
            allow_parse_to_number=allow_parse_to_number,
            ignore_array=ignore_array,
            path=key_path,
        )
    if value_type == "array":
        return _check_list(
            value,
            default,
            store_name=store_name,
            allow_parse_to_number=allow_parse_to_number,
            ignore_array=ignore_array,
            path=key_path,
        )
    return value
