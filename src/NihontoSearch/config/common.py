"""Typed reads from one section of the YAML config.

Every read raises `TypeError` for a wrong type and `ValueError` for a missing
key, naming the dotted key (`search.min_term_length`) in the message.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

_REQUIRED: Any = object()


@dataclass(frozen=True, slots=True)
class Section:
    """One top-level mapping of the config, e.g. `search`."""

    name: str
    values: Mapping[str, Any]

    @classmethod
    def of(cls, raw: Mapping[str, Any], name: str) -> Section:
        """Return the named section of the root mapping.

        Raises:
            ValueError: If the section is missing.
            TypeError: If the section is not a mapping.
        """
        values = raw.get(name)
        if values is None:
            raise ValueError(f"Missing required config: {name}")
        if not isinstance(values, Mapping):
            raise TypeError(f"{name} must be an object")
        return cls(name=name, values=values)

    def key(self, field: str) -> str:
        return f"{self.name}.{field}"

    def _value(self, field: str, default: Any) -> Any:
        if field in self.values:
            return self.values[field]
        if default is _REQUIRED:
            raise ValueError(f"Missing required config: {self.key(field)}")
        return default

    def flag(self, field: str, default: Any = _REQUIRED) -> bool:
        value = self._value(field, default)
        if not isinstance(value, bool):
            raise TypeError(f"{self.key(field)} must be a boolean")
        return value

    def integer(self, field: str, default: Any = _REQUIRED) -> int:
        """Read an int; YAML `true`/`false` are rejected even though bool is an int."""
        value = self._value(field, default)
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{self.key(field)} must be an integer")
        return value

    def text(self, field: str, default: Any = _REQUIRED) -> str:
        value = self._value(field, default)
        if not isinstance(value, str):
            raise TypeError(f"{self.key(field)} must be a string")
        return value

    def words(self, field: str) -> tuple[str, ...]:
        """Read a list of strings, stripped and lower-cased (format names and such)."""
        return tuple(item.strip().lower() for item in string_list(self._value(field, _REQUIRED), self.key(field)))


def string_list(value: Any, config_key: str) -> tuple[str, ...]:
    """Validate a YAML list whose entries are all strings."""
    if not isinstance(value, list):
        raise TypeError(f"{config_key} must be a list")
    for idx, item in enumerate(value):
        if not isinstance(item, str):
            raise TypeError(f"{config_key}[{idx}] must be a string")
    return tuple(value)
