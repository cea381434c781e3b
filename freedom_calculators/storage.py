"""Per-calculator input persistence.

Each calculator keeps its last inputs in a small JSON file named after its
storage key (``mortgage-calculator.json`` and so on).  Writes are
last-write-wins.  A missing or unreadable file falls back to the
calculator's defaults, and so does any single field whose stored value
does not have the type of its default.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, List

from .exceptions import InvalidInputError
from .validation import is_valid_number, parse_number

logger = logging.getLogger(__name__)

_KEY_PATTERN = re.compile(r"^[a-z0-9][a-z0-9_-]*$")


def _coerce(name: str, value: Any, default: Any) -> Any:
    """Return ``value`` shaped like ``default`` or raise ``InvalidInputError``."""
    if isinstance(default, bool):
        if isinstance(value, bool):
            return value
    elif isinstance(default, (int, float)):
        if is_valid_number(value):
            return value
        if isinstance(value, str):
            # hand-edited files may hold "40,000" or "$40,000"
            return parse_number(value, name)
    elif isinstance(default, str):
        if isinstance(value, str):
            return value
    else:
        return value
    raise InvalidInputError(name, f"Stored {name} has the wrong type")


class CalculatorStore:
    """JSON file store keyed by calculator."""

    def __init__(self, base_dir: Path) -> None:
        self._base_dir = Path(base_dir)

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def _path(self, key: str) -> Path:
        if not _KEY_PATTERN.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self._base_dir / f"{key}.json"

    def load(self, key: str, defaults: Dict[str, Any]) -> Dict[str, Any]:
        """Stored inputs merged over ``defaults``; unknown keys are dropped."""
        path = self._path(key)
        merged = dict(defaults)
        if not path.exists():
            return merged
        try:
            with open(path, "r", encoding="utf-8") as f:
                stored = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("could not read stored inputs", extra={"key": key, "error": str(exc)})
            return merged
        if not isinstance(stored, dict):
            logger.warning("ignoring malformed stored inputs", extra={"key": key})
            return merged
        for name, default in defaults.items():
            if name not in stored:
                continue
            try:
                merged[name] = _coerce(name, stored[name], default)
            except InvalidInputError:
                logger.warning("ignoring stored value of the wrong type", extra={"key": key, "field": name})
        return merged

    def save(self, key: str, inputs: Dict[str, Any]) -> None:
        path = self._path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(inputs, f, indent=2)
        logger.debug("saved inputs", extra={"key": key})

    def clear(self, key: str) -> None:
        path = self._path(key)
        if path.exists():
            path.unlink()

    def keys(self) -> List[str]:
        if not self._base_dir.exists():
            return []
        return sorted(p.stem for p in self._base_dir.glob("*.json"))
