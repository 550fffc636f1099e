"""Container lifecycle states and the transitions between them."""

from __future__ import annotations

import enum
import json
import re
from dataclasses import dataclass
from typing import ClassVar

from dockyard.errors import InvalidInput, SerializationError

__all__ = ["StatusKind", "ContainerStatus"]

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_EXIT_CODE = re.compile(r"[+-]?[0-9]+")


class StatusKind(enum.Enum):
    """The kinds of state a container can be in."""

    RUNNING = "Running"
    STOPPED = "Stopped"
    STARTING = "Starting"
    STOPPING = "Stopping"
    EXITED = "Exited"
    PAUSED = "Paused"
    RESTARTING = "Restarting"
    REMOVING = "Removing"
    DEAD = "Dead"
    CREATED = "Created"


K = StatusKind

_TRANSITIONS: dict[StatusKind, frozenset[StatusKind]] = {
    K.RUNNING: frozenset({K.STOPPING, K.PAUSED, K.RESTARTING}),
    K.STOPPED: frozenset({K.STARTING, K.REMOVING}),
    K.CREATED: frozenset({K.STARTING, K.REMOVING}),
    K.EXITED: frozenset({K.STARTING, K.REMOVING}),
    K.STARTING: frozenset({K.RUNNING, K.EXITED, K.DEAD}),
    K.RESTARTING: frozenset({K.RUNNING, K.EXITED, K.DEAD}),
    K.STOPPING: frozenset({K.STOPPED, K.EXITED}),
    K.PAUSED: frozenset({K.RUNNING, K.STOPPING}),
    K.DEAD: frozenset({K.REMOVING}),
    K.REMOVING: frozenset(),
}

_DESCRIPTIONS = {
    K.RUNNING: "Container is running",
    K.STOPPED: "Container is stopped",
    K.STARTING: "Container is starting",
    K.STOPPING: "Container is stopping",
    K.PAUSED: "Container is paused",
    K.RESTARTING: "Container is restarting",
    K.REMOVING: "Container is being removed",
    K.DEAD: "Container is dead",
    K.CREATED: "Container is created",
}

_COLORS = {
    K.RUNNING: "green",
    K.STARTING: "yellow",
    K.RESTARTING: "yellow",
    K.STOPPED: "blue",
    K.CREATED: "blue",
    K.STOPPING: "cyan",
    K.REMOVING: "cyan",
    K.PAUSED: "magenta",
    K.DEAD: "red",
}

_DOCKER_NAMES = {kind.value.lower(): kind for kind in StatusKind if kind is not K.EXITED}


def _parse_exit_code(text: str) -> int:
    if text.startswith("exited (") and text.endswith(")"):
        inner = text[len("exited (") : -1]
        if _EXIT_CODE.fullmatch(inner):
            code = int(inner)
            if _INT32_MIN <= code <= _INT32_MAX:
                return code
    return -1


@dataclass(frozen=True)
class ContainerStatus:
    """A container state; only EXITED carries an exit code."""

    kind: StatusKind
    exit_code: int | None = None

    RUNNING: ClassVar[ContainerStatus]
    STOPPED: ClassVar[ContainerStatus]
    STARTING: ClassVar[ContainerStatus]
    STOPPING: ClassVar[ContainerStatus]
    PAUSED: ClassVar[ContainerStatus]
    RESTARTING: ClassVar[ContainerStatus]
    REMOVING: ClassVar[ContainerStatus]
    DEAD: ClassVar[ContainerStatus]
    CREATED: ClassVar[ContainerStatus]

    def __post_init__(self) -> None:
        if self.kind is K.EXITED and self.exit_code is None:
            raise InvalidInput("Exited status requires an exit code")
        if self.kind is not K.EXITED and self.exit_code is not None:
            raise InvalidInput(f"Status {self.kind.value} does not carry an exit code")

    @classmethod
    def exited(cls, exit_code: int) -> ContainerStatus:
        """Build an EXITED status with the given exit code."""
        return cls(K.EXITED, exit_code)

    def is_active(self) -> bool:
        """True while the container is working or changing state."""
        return self.kind in {K.RUNNING, K.STARTING, K.STOPPING, K.RESTARTING}

    def can_start(self) -> bool:
        return self.kind in {K.STOPPED, K.EXITED, K.CREATED, K.DEAD}

    def can_stop(self) -> bool:
        return self.kind in {K.RUNNING, K.PAUSED, K.RESTARTING}

    def can_pause(self) -> bool:
        return self.kind is K.RUNNING

    def can_unpause(self) -> bool:
        return self.kind is K.PAUSED

    def can_remove(self) -> bool:
        return self.kind not in {K.RUNNING, K.STARTING, K.STOPPING, K.REMOVING}

    def can_restart(self) -> bool:
        return self.kind in {K.RUNNING, K.STOPPED, K.EXITED, K.PAUSED}

    def can_transition_to(self, target: ContainerStatus) -> bool:
        """Return True if moving from this status to *target* is valid."""
        if target.kind in _TRANSITIONS[self.kind]:
            return True
        if self.kind is K.REMOVING:
            return False
        return self == target

    def description(self) -> str:
        """A human-readable sentence describing the status."""
        if self.kind is K.EXITED:
            if self.exit_code == 0:
                return "Container exited successfully"
            return "Container exited with error"
        return _DESCRIPTIONS[self.kind]

    def display_color(self) -> str:
        """The colour name used to render this status in the terminal."""
        if self.kind is K.EXITED:
            return "green" if self.exit_code == 0 else "red"
        return _COLORS[self.kind]

    @classmethod
    def from_docker_string(cls, status: str) -> ContainerStatus:
        """Parse a Docker API status string; unknown values become DEAD."""
        text = status.lower()
        kind = _DOCKER_NAMES.get(text)
        if kind is not None:
            return cls(kind)
        if text.startswith("exited"):
            return cls.exited(_parse_exit_code(text))
        return cls(K.DEAD)

    def to_json(self) -> str:
        """Serialize as JSON: a bare name, or an object for EXITED."""
        if self.kind is K.EXITED:
            return json.dumps({K.EXITED.value: {"exit_code": self.exit_code}})
        return json.dumps(self.kind.value)

    @classmethod
    def from_json(cls, data: str) -> ContainerStatus:
        """Deserialize a status produced by :meth:`to_json`."""
        try:
            value = json.loads(data)
        except json.JSONDecodeError as exc:
            raise SerializationError(exc) from exc
        if isinstance(value, str):
            try:
                kind = StatusKind(value)
            except ValueError as exc:
                raise SerializationError(exc) from exc
            if kind is K.EXITED:
                raise SerializationError(ValueError("Exited requires an exit code"))
            return cls(kind)
        if isinstance(value, dict) and len(value) == 1 and K.EXITED.value in value:
            body = value[K.EXITED.value]
            if isinstance(body, dict):
                code = body.get("exit_code")
                if (
                    isinstance(code, int)
                    and not isinstance(code, bool)
                    and _INT32_MIN <= code <= _INT32_MAX
                ):
                    return cls.exited(code)
        raise SerializationError(ValueError(f"invalid container status: {data}"))

    def __str__(self) -> str:
        if self.kind is K.EXITED:
            return f"Exited ({self.exit_code})"
        return self.kind.value


for _kind in StatusKind:
    if _kind is not K.EXITED:
        setattr(ContainerStatus, _kind.name, ContainerStatus(_kind))
del _kind