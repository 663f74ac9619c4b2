"""
Tests for live recording through RecordingStore.
"""

import json
import logging
import os
import tempfile

import pytest

from recorder.core.actions import StandardAction
from recorder.core.clock import SteppingClock
from recorder.core.errors import ActionLogError, UnregisteredActionTypeError
from recorder.log.action_log import ActionLog
from recorder.log.entry import RecordedEntry
from recorder.log.file_log import FileActionLog
from recorder.log.memory_log import MemoryActionLog
from recorder.replay.recording_store import RecordingStore
from recorder.tests.helpers import INCREMENT, Add, Reset, counter_reducer


class FailingActionLog(ActionLog):
    def __init__(self):
        self.attempts = 0

    def write(self, entries):
        self.attempts += 1
        raise ActionLogError("storage unavailable")

    def load(self, identifier=None):
        return []


def test_increment_scenario():
    """Three INCREMENTs from 0: snapshots [0,1,2,3] and three log entries."""
    with tempfile.TemporaryDirectory() as tmpdir:
        log = FileActionLog(tmpdir)
        store = RecordingStore(counter_reducer, state=0, action_log=log, clock=SteppingClock())

        for _ in range(3):
            assert store.dispatch(INCREMENT) is INCREMENT

        assert store.state == 3
        assert store.history.computed_states == [0, 1, 2, 3]
        assert store.history.actions == [INCREMENT] * 3

        with open(log.path) as f:
            data = json.load(f)
        assert len(data) == 3
        assert [rec["timestamp"] for rec in data] == [0.0, 1.0, 2.0]
        assert all(rec["action"]["type"] == "INCREMENT" for rec in data)


def test_snapshots_follow_reducer():
    """computed_states[i+1] == reducer(computed_states[i], actions[i])."""
    store = RecordingStore(counter_reducer, action_log=MemoryActionLog())
    actions = [INCREMENT, Add(5), INCREMENT, Add(-2), Add(10)]

    for action in actions:
        store.dispatch(action)

    states = store.history.computed_states
    assert states[0] == store.initial_state == 0
    assert len(states) == len(store.history.actions) + 1
    for i, action in enumerate(actions):
        assert states[i + 1] == counter_reducer(states[i], action)


def test_typed_actions_recorded_in_canonical_form():
    log = MemoryActionLog()
    store = RecordingStore(counter_reducer, action_log=log, clock=SteppingClock(current=50.0))

    store.dispatch(Add(4))

    assert log.entries == [
        RecordedEntry(timestamp=50.0, action=StandardAction("Add", {"amount": 4}, True))
    ]
    assert store.history.actions == [Add(4)]


def test_whole_log_written_on_every_action():
    """Each dispatch rewrites the accumulated log."""
    log = MemoryActionLog()
    store = RecordingStore(counter_reducer, action_log=log)

    for _ in range(4):
        store.dispatch(INCREMENT)

    assert log.writes == 4
    assert len(log.entries) == 4


def test_non_recordable_action_still_applies(caplog):
    """An action without canonical form changes state but is not recorded."""
    log = MemoryActionLog()
    store = RecordingStore(counter_reducer, state=7, action_log=log)

    with caplog.at_level(logging.WARNING):
        store.dispatch(Reset())

    assert store.state == 0
    assert store.history.computed_states == [7, 0]
    assert store.history.actions == []
    assert log.entries == []
    assert "Could not record action" in caplog.text


def test_persistence_failure_is_swallowed():
    """A failing log keeps the session running with in-memory history."""
    log = FailingActionLog()
    store = RecordingStore(counter_reducer, action_log=log)

    store.dispatch(INCREMENT)
    store.dispatch(INCREMENT)

    assert store.state == 2
    assert log.attempts == 2
    assert len(store.history.recorded) == 2
    assert store.history.actions == [INCREMENT, INCREMENT]


def test_subscribe_passthrough():
    store = RecordingStore(counter_reducer, action_log=MemoryActionLog())
    seen = []
    store.subscribe(seen.append)

    store.dispatch(Add(3))

    assert seen == [3]


def test_default_action_log_from_environment(monkeypatch):
    """Without action_log, recordings go to RECORDER_DIR/RECORDER_FILENAME."""
    with tempfile.TemporaryDirectory() as tmpdir:
        monkeypatch.setenv("RECORDER_DIR", tmpdir)
        monkeypatch.setenv("RECORDER_FILENAME", "session.json")

        store = RecordingStore(counter_reducer)
        store.dispatch(INCREMENT)

        assert os.path.exists(os.path.join(tmpdir, "session.json"))


def test_reload_recording_rebuilds_state():
    """A recording written by one store fully rebuilds state in a new one."""
    with tempfile.TemporaryDirectory() as tmpdir:
        first = RecordingStore(counter_reducer, action_log=FileActionLog(tmpdir, "first.json"))
        actions = [Add(2), INCREMENT, Add(7), INCREMENT]
        for action in actions:
            first.dispatch(action)

        second = RecordingStore(
            counter_reducer,
            type_maps=[{"Add": Add}],
            recording="first.json",
            action_log=FileActionLog(tmpdir, "second.json"),
        )

        assert second.state == first.state == 11
        assert second.history.actions == actions
        assert second.history.computed_states == first.history.computed_states
        assert not second.history.replaying
        assert [e.action for e in second.history.recorded] == [e.action for e in first.history.recorded]


def test_reload_null_payload_is_absent():
    """A payload-less action comes back with payload None, not the sentinel."""
    with tempfile.TemporaryDirectory() as tmpdir:
        first = RecordingStore(counter_reducer, action_log=FileActionLog(tmpdir, "first.json"))
        first.dispatch(INCREMENT)

        second = RecordingStore(
            counter_reducer, recording="first.json", action_log=FileActionLog(tmpdir, "second.json")
        )

        assert second.history.actions == [INCREMENT]
        assert second.history.actions[0].payload is None


def test_reload_with_unregistered_type_is_fatal():
    """A typed action missing from the type maps aborts construction."""
    with tempfile.TemporaryDirectory() as tmpdir:
        first = RecordingStore(counter_reducer, action_log=FileActionLog(tmpdir, "first.json"))
        first.dispatch(Add(1))

        with pytest.raises(UnregisteredActionTypeError):
            RecordingStore(
                counter_reducer,
                recording="first.json",
                action_log=FileActionLog(tmpdir, "second.json"),
            )


def test_missing_recording_starts_empty():
    with tempfile.TemporaryDirectory() as tmpdir:
        store = RecordingStore(
            counter_reducer, recording="nope.json", action_log=FileActionLog(tmpdir)
        )

        assert store.state == 0
        assert store.history.actions == []
        assert store.history.computed_states == [0]


def test_persistence_roundtrip_distinct_timestamps():
    """n recorded actions reload as n equal actions with their timestamps."""
    with tempfile.TemporaryDirectory() as tmpdir:
        log = FileActionLog(tmpdir)
        store = RecordingStore(
            counter_reducer, action_log=log, clock=SteppingClock(current=1000.0, step=0.5)
        )
        for i in range(6):
            store.dispatch(Add(i))

        entries = log.load()

        assert [e.timestamp for e in entries] == [1000.0 + 0.5 * i for i in range(6)]
        assert [Add.from_standard_action(e.action) for e in entries] == [Add(i) for i in range(6)]


def test_subscriber_dispatch_recorded_after_outer_action():
    """An action dispatched by a subscriber is cached and recorded after the one that triggered it."""
    log = MemoryActionLog()
    store = RecordingStore(counter_reducer, action_log=log)

    def follow_up(state):
        if state == 1:
            store.dispatch(Add(10))

    unsubscribe = store.subscribe(follow_up)
    store.dispatch(Add(1))
    unsubscribe()

    assert store.state == 11
    assert store.history.actions == [Add(1), Add(10)]
    assert store.history.computed_states == [0, 1, 11]
    assert [e.action.payload["amount"] for e in log.entries] == [1, 10]
    assert store.rewind(1).state == 1


def test_unserializable_payload_does_not_block_later_writes(caplog):
    """An action whose payload cannot be written is skipped; later actions still reach disk."""
    with tempfile.TemporaryDirectory() as tmpdir:
        log = FileActionLog(tmpdir)
        store = RecordingStore(counter_reducer, action_log=log)

        with caplog.at_level(logging.WARNING):
            store.dispatch(StandardAction("X", {"when": object()}))
        for _ in range(3):
            store.dispatch(INCREMENT)

        assert "not JSON-serializable" in caplog.text
        assert store.state == 3
        assert store.history.actions == [INCREMENT] * 3
        assert store.history.computed_states == [0, 0, 1, 2, 3]
        assert [e.action for e in log.load()] == [INCREMENT] * 3
