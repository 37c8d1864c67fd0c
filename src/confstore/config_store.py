"""
JSON-file backed configuration store with type checking against defaults.
"""
import copy
import json
import logging

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

from .exceptions import ConfigParseError
from .loader import dump_json, read_text, write_json
from .repair import RepairResult, fix_json
from .validation import check_types

# Use standard logging for the store, same as the validation helpers
info = logging.info
debug = logging.debug

PathLike = Union[str, Path]


class ConfigStore:
    """In-memory configuration that is loaded from and saved to a JSON file.

    ``data`` holds the current values and is also the shape every later load
    is checked against: keys already present keep their type, new keys are
    accepted with a warning.
    """

    def __init__(
        self,
        name: str = "config",
        prettify: bool = False,
        allow_parse_to_number: bool = True,
        allow_json_fixer: bool = True,
        ignore_array: bool = False,
        json_fixer: Callable[[str], RepairResult] = fix_json,
    ):
        self.data: Dict[str, Any] = {}
        self.name = name
        self.prettify = prettify
        self.allow_parse_to_number = allow_parse_to_number
        self.allow_json_fixer = allow_json_fixer
        self.ignore_array = ignore_array
        self.json_fixer = json_fixer

        self.file_path = Path(name + ".json")
        # Set once by from_file(path); never cleared
        self._exact_path_known = False

    def __repr__(self) -> str:
        return f"ConfigStore(name={self.name!r}, file_path={str(self.file_path)!r}, keys={len(self.data)})"

    @property
    def exact_path_known(self) -> bool:
        """True once an explicit path has been passed to :meth:`from_file`."""
        return self._exact_path_known

    def validate_types(self, config: Mapping) -> bool:
        """Check ``config`` against the types of the current values.

        Raises :class:`~confstore.exceptions.TypeMismatchError` on the first
        conflicting key, otherwise returns ``True``.  ``config`` is left as is.
        """
        self._validated_copy(config)
        return True

    def _validated_copy(self, config: Mapping) -> Dict[str, Any]:
        return check_types(
            dict(config),
            self.data,
            store_name=self.name,
            allow_parse_to_number=self.allow_parse_to_number,
            ignore_array=self.ignore_array,
        )

    def from_json(self, payload: Union[str, Mapping]) -> Dict[str, Any]:
        """Merge a JSON document (text or mapping) into ``data``.

        The payload is validated completely before any key is merged, so a
        type mismatch leaves ``data`` unchanged.
        """
        if isinstance(payload, str):
            payload = self._decode(payload)
        elif not isinstance(payload, Mapping):
            raise ConfigParseError(
                f"{self.name} expected a JSON object, got {type(payload).__name__}"
            )

        new_config = {key: value for key, value in payload.items()}
        validated = self._validated_copy(new_config)
        self.data.update(validated)
        return self.data

    def _decode(self, text: str) -> Dict[str, Any]:
        if not self.allow_json_fixer:
            try:
                parsed = json.loads(text)
            except json.JSONDecodeError as e:
                raise ConfigParseError(f"{self.name} contains invalid JSON: {e}") from e
            return self._require_object(parsed)

        if len(text) == 0:
            text = "{}"
        result = self.json_fixer(text)
        parsed = self._require_object(result.data)
        if result.changed:
            info(f"fixed json {self.file_path}")
            if self._exact_path_known:
                self.save(self.file_path, parsed)
        return parsed

    def _require_object(self, parsed: Any) -> Dict[str, Any]:
        if not isinstance(parsed, dict):
            raise ConfigParseError(
                f"{self.name} does not contain a JSON object (got {type(parsed).__name__})"
            )
        return parsed

    def from_file(self, file: Optional[PathLike] = None) -> Dict[str, Any]:
        """Load ``file`` (or the current ``file_path``) into the store.

        Passing a path makes it the store's ``file_path`` for good.  A missing
        file is created from the current ``data`` before it is read.
        """
        if file is not None:
            self.file_path = Path(file)
            self._exact_path_known = True
        if not self.file_path.exists():
            debug(f"{self.file_path} not found, writing current {self.name} values")
            self.save(self.file_path)
        return self.from_json(read_text(self.file_path))

    def save(self, file: Optional[PathLike] = None, content: Any = None) -> str:
        """Write ``content`` (``data`` when omitted) to ``file`` and return the JSON text."""
        if file is None:
            file = self.file_path
        json_str = dump_json(self.data if content is None else content, self.prettify)
        write_json(json_str, file)
        debug(f"{self.name} saved to {file}")
        return json_str

    def get(self, path: str, default: Any = None) -> Any:
        """Get configuration value by dot notation path"""
        value: Any = self.data
        try:
            for key in path.split("."):
                value = value[key]
            return value
        except (KeyError, TypeError):
            return default

    def as_dict(self) -> Dict[str, Any]:
        """Return a deep copy of the current values"""
        return copy.deepcopy(self.data)
