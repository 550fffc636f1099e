"""Validated identifier for a Docker container."""

from __future__ import annotations

import json

from dockyard.errors import InvalidInput, SerializationError

__all__ = ["ContainerId"]

_MAX_LENGTH = 64
_SHORT_LENGTH = 12
_EXTRA_CHARS = frozenset("-_")


def _is_valid_char(char: str) -> bool:
    return (char.isascii() and char.isalnum()) or char in _EXTRA_CHARS


class ContainerId:
    """An immutable container identifier that compares equal to its text."""

    __slots__ = ("_value",)

    _value: str

    def __init__(self, value: str) -> None:
        if not value:
            raise InvalidInput("Container ID cannot be empty")
        length = len(value.encode("utf-8"))
        if length > _MAX_LENGTH:
            raise InvalidInput(
                f"Container ID too long: {length} characters (max {_MAX_LENGTH})"
            )
        if not all(_is_valid_char(char) for char in value):
            raise InvalidInput(
                "Container ID contains invalid characters. "
                "Only alphanumeric, '-', and '_' are allowed"
            )
        object.__setattr__(self, "_value", value)

    @classmethod
    def from_trusted(cls, value: str) -> ContainerId:
        """Wrap an identifier known to be valid, skipping validation."""
        instance = cls.__new__(cls)
        object.__setattr__(instance, "_value", value)
        return instance

    @property
    def value(self) -> str:
        """The full identifier text."""
        return self._value

    def short(self) -> str:
        """Return the first twelve characters, as shown by the Docker CLI."""
        return self._value[:_SHORT_LENGTH]

    def matches(self, other: str) -> bool:
        """Return True if *other* is this ID, its short form, or a prefix of it."""
        return (
            self._value == other
            or self.short() == other
            or self._value.startswith(other)
        )

    def to_json(self) -> str:
        """Serialize the identifier as a JSON string."""
        return json.dumps(self._value)

    @classmethod
    def from_json(cls, data: str) -> ContainerId:
        """Deserialize an identifier from a JSON string."""
        try:
            value = json.loads(data)
        except json.JSONDecodeError as exc:
            raise SerializationError(exc) from exc
        if not isinstance(value, str):
            raise SerializationError(
                ValueError(f"expected a JSON string, got {type(value).__name__}")
            )
        return cls.from_trusted(value)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ContainerId is immutable")

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"ContainerId({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ContainerId):
            return self._value == other._value
        if isinstance(other, str):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)