"""Tests for StateWatcherMixin."""

from liteboard.state import BoardState
from liteboard.ui.watcher import StateWatcherMixin


class FakeWidget(StateWatcherMixin):
    """Minimal stand-in for a Textual widget."""

    def __init__(self):
        self._init_watcher()


def ready_state():
    state = BoardState()
    state.start_blocking()
    return state


def test_watch_fires_callback():
    widget = FakeWidget()
    state = ready_state()
    calls = []
    widget.state_watch(state, lambda old, new: calls.append((old, new)))

    before = state.board
    state.add_column("Later")
    assert calls == [(before, state.board)]


def test_on_unmount_cleans_up():
    widget = FakeWidget()
    state = ready_state()
    calls = []
    widget.state_watch(state, lambda old, new: calls.append(new))

    widget.on_unmount()

    state.add_column("Later")
    assert calls == []


def test_unmount_twice_is_harmless():
    widget = FakeWidget()
    state = ready_state()
    widget.state_watch(state, lambda old, new: None)
    widget.on_unmount()
    widget.on_unmount()
    assert widget._watches == []
