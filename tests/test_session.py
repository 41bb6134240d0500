import pytest

from planck.session import Mode, ScrollbackBuffer, Session, SessionType, Status


@pytest.mark.parametrize(
    "status, expected",
    [
        (Status.RUNNING, "running"),
        (Status.PAUSED, "paused"),
        (Status.COMPLETED, "completed"),
        (Status.FAILED, "failed"),
        (Status.CANCELED, "canceled"),
    ],
)
def test_status_values(status, expected):
    assert str(status) == expected
    assert Status(expected) is status


@pytest.mark.parametrize(
    "mode, expected",
    [(Mode.FOREGROUND, "foreground"), (Mode.BACKGROUND, "background")],
)
def test_mode_values(mode, expected):
    assert str(mode) == expected


@pytest.mark.parametrize(
    "typ, expected",
    [
        (SessionType.PLANNING, "planning"),
        (SessionType.IMPLEMENTATION, "implementation"),
        (SessionType.EXECUTION, "execution"),
    ],
)
def test_type_values(typ, expected):
    assert str(typ) == expected


def test_session_structure():
    session = Session(
        id="session-1",
        task_id="1.1",
        plan_id="plan-1",
        type=SessionType.IMPLEMENTATION,
        mode=Mode.FOREGROUND,
        status=Status.RUNNING,
        backend="tmux",
        agent_session_id="agent-123",
        backend_handle="planck-1.1",
    )
    assert session.id == "session-1"
    assert session.type == SessionType.IMPLEMENTATION
    assert session.mode == Mode.FOREGROUND
    assert session.status == Status.RUNNING
    assert session.ended_at is None


def test_scrollback_push_and_len():
    buf = ScrollbackBuffer(5)
    buf.push(["a", "b", "c"])
    assert len(buf) == 3
    assert buf.line(0) == "a"
    assert buf.line(2) == "c"


def test_scrollback_wraps_and_keeps_newest():
    buf = ScrollbackBuffer(3)
    buf.push(["1", "2"])
    buf.push(["3", "4", "5"])
    assert len(buf) == 3
    assert buf.lines(0, 10) == ["3", "4", "5"]
    assert buf.line(0) == "3"


def test_scrollback_line_out_of_range():
    buf = ScrollbackBuffer(3)
    buf.push(["x"])
    assert buf.line(-1) == ""
    assert buf.line(1) == ""


def test_scrollback_lines_window():
    buf = ScrollbackBuffer(10)
    buf.push(["a", "b", "c", "d"])
    assert buf.lines(1, 2) == ["b", "c"]
    assert buf.lines(2, 100) == ["c", "d"]
    assert buf.lines(-5, 2) == ["a", "b"]
    assert buf.lines(4, 1) == []
    assert buf.lines(0, -1) == []


def test_scrollback_nonpositive_capacity_uses_default():
    assert ScrollbackBuffer(0).capacity == 1000
    assert ScrollbackBuffer(-3).capacity == 1000


def test_scrollback_empty():
    buf = ScrollbackBuffer()
    assert len(buf) == 0
    assert buf.lines(0, 5) == []