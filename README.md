# dockyard

Domain building blocks for tools that manage Docker containers. The package
has no dependencies outside the standard library.

## Modules

### `dockyard.errors`

One exception hierarchy rooted at `DockaError`:

| Class | Recoverable | Carries |
|---|---|---|
| `DockerDaemonNotRunning` | no | — |
| `ContainerNotFound` | yes | `name` |
| `ImageNotFound` | yes | `name` |
| `InvalidInput` | yes | `message` |
| `PermissionDenied` | yes | `operation` |
| `DockerApiError` | yes | `source` (wrapped exception) |
| `DockaIOError` | no | `source` |
| `SerializationError` | no | `source` |
| `CacheError` | yes | `message` |
| `UiRenderingError` | no | `message` |
| `TaskExecutionError` | no | `source` |
| `ConfigurationError` | yes | `message` |
| `FeatureNotImplemented` | no | `feature` |
| `InternalError` | no | `message` |

Every error offers `is_recoverable()` and `user_message()`, a short message
fit for an end user. Errors that wrap another exception set it as their
`__cause__`.

`wrap_exception(exc)` converts an arbitrary exception: a `DockaError` is
returned unchanged, `json.JSONDecodeError` becomes `SerializationError`,
`OSError` becomes `DockaIOError`, `asyncio.CancelledError` becomes
`TaskExecutionError`, and anything else becomes `InternalError`.

### `dockyard.container_id`

`ContainerId` is an immutable, validated identifier. It must be non-empty, at
most 64 characters, and made only of ASCII letters, digits, `-` and `_`;
otherwise `InvalidInput` is raised. `ContainerId.from_trusted()` skips
validation.

- `value` / `str(cid)` — the full identifier
- `short()` — the first 12 characters, as the Docker CLI shows them
- `matches(other)` — true for the full ID, the short ID, or any prefix
- compares equal to, and hashes like, its plain string
- `to_json()` / `ContainerId.from_json()` — a JSON string; bad input raises
  `SerializationError`

### `dockyard.container_status`

`ContainerStatus` is a frozen dataclass of a `StatusKind` and, for
`EXITED` only, an `exit_code`. Constants such as `ContainerStatus.RUNNING`
exist for every kind except exited, which is built with
`ContainerStatus.exited(code)`.

- `is_active()`, `can_start()`, `can_stop()`, `can_pause()`,
  `can_unpause()`, `can_remove()`, `can_restart()`
- `can_transition_to(target)` — whether the state change is valid;
  `REMOVING` is terminal
- `description()` and `display_color()` (`"green"`, `"yellow"`, `"blue"`,
  `"cyan"`, `"magenta"`, `"red"`)
- `ContainerStatus.from_docker_string(text)` — case-insensitive; parses
  `"exited (N)"` (exit code `-1` if unreadable); unknown strings become `DEAD`
- `str(status)` — e.g. `Running`, `Exited (1)`
- `to_json()` / `ContainerStatus.from_json()` — a bare name such as
  `"Running"`, or `{"Exited": {"exit_code": 0}}`

## Example

```python
from dockyard.container_id import ContainerId
from dockyard.container_status import ContainerStatus
from dockyard.errors import InvalidInput

cid = ContainerId("a1b2c3d4e5f67890abcdef")
print(cid.short())            # a1b2c3d4e5f6
print(cid.matches("a1b2"))    # True

status = ContainerStatus.from_docker_string("exited (1)")
print(status)                 # Exited (1)
print(status.can_start())     # True
print(status.display_color()) # red

try:
    ContainerId("container with spaces")
except InvalidInput as err:
    print(err.user_message())
```

## What it does not do

This package holds types and rules only. It does not talk to a Docker
daemon, list or start containers, or provide a terminal interface or a
command-line program.

## Running the tests

```
pip install ".[test]"
pytest
```