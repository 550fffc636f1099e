import pytest

from dockyard.container_status import ContainerStatus, StatusKind
from dockyard.errors import InvalidInput, SerializationError

S = ContainerStatus


def test_status_display():
    assert str(S.RUNNING) == "Running"
    assert str(S.STOPPED) == "Stopped"
    assert str(S.exited(0)) == "Exited (0)"
    assert str(S.exited(1)) == "Exited (1)"


def test_status_properties():
    assert S.RUNNING.is_active()
    assert S.STARTING.is_active()
    assert not S.STOPPED.is_active()
    assert not S.exited(0).is_active()

    assert S.STOPPED.can_start()
    assert not S.RUNNING.can_start()
    assert S.RUNNING.can_stop()
    assert not S.STOPPED.can_stop()
    assert S.RUNNING.can_pause()
    assert not S.STOPPED.can_pause()


def test_other_capabilities():
    assert S.PAUSED.can_unpause()
    assert not S.RUNNING.can_unpause()
    assert S.DEAD.can_remove()
    assert not S.REMOVING.can_remove()
    assert S.exited(3).can_restart()
    assert not S.CREATED.can_restart()


def test_state_transitions():
    assert S.RUNNING.can_transition_to(S.STOPPING)
    assert S.STOPPED.can_transition_to(S.STARTING)
    assert S.STARTING.can_transition_to(S.RUNNING)
    assert not S.STOPPED.can_transition_to(S.PAUSED)
    assert not S.REMOVING.can_transition_to(S.RUNNING)


def test_transition_edge_cases():
    assert S.STOPPING.can_transition_to(S.exited(2))
    assert S.DEAD.can_transition_to(S.REMOVING)
    assert S.PAUSED.can_transition_to(S.PAUSED)
    assert S.exited(1).can_transition_to(S.exited(1))
    assert not S.exited(1).can_transition_to(S.exited(0))
    assert not S.REMOVING.can_transition_to(S.REMOVING)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("running", S.RUNNING),
        ("STOPPED", S.STOPPED),
        ("exited (0)", S.exited(0)),
        ("exited (1)", S.exited(1)),
        ("unknown", S.DEAD),
        ("exited", S.exited(-1)),
        ("exited (abc)", S.exited(-1)),
        ("Created", S.CREATED),
    ],
)
def test_docker_string_parsing(text, expected):
    assert S.from_docker_string(text) == expected


def test_display_properties():
    assert S.RUNNING.display_color() == "green"
    assert S.STARTING.display_color() == "yellow"
    assert S.STOPPED.display_color() == "blue"
    assert S.exited(0).display_color() == "green"
    assert S.exited(1).display_color() == "red"

    assert "running" in S.RUNNING.description()
    assert "successfully" in S.exited(0).description()
    assert "error" in S.exited(1).description()


@pytest.mark.parametrize(
    "status", [S.RUNNING, S.STOPPED, S.exited(0), S.exited(127)]
)
def test_serialization_round_trip(status):
    assert S.from_json(status.to_json()) == status


def test_serialization_format():
    assert S.RUNNING.to_json() == '"Running"'
    assert S.exited(127).to_json() == '{"Exited": {"exit_code": 127}}'


@pytest.mark.parametrize("data", ["nonsense", '"Sleeping"', '"Exited"', '{"Exited": {}}', "5"])
def test_from_json_rejects_bad_input(data):
    with pytest.raises(SerializationError):
        S.from_json(data)


def test_exit_code_consistency_enforced():
    with pytest.raises(InvalidInput):
        ContainerStatus(StatusKind.EXITED)
    with pytest.raises(InvalidInput):
        ContainerStatus(StatusKind.RUNNING, 0)


def test_statuses_hashable_and_equal():
    assert {S.exited(1), S.exited(1), S.RUNNING} == {S.exited(1), S.RUNNING}
    assert ContainerStatus(StatusKind.RUNNING) == S.RUNNING