"""
Tests for the transform undo/redo history.

Covers:
- record/undo/redo/reset index semantics
- Redo branch truncation
- Undo then redo restores the exact prior transform
- Listener notifications (and a failing listener)
- Optional max_history cap
"""
import pytest

from models.transform import Transform, Vec3
from utils.history_manager import HistoryManager


def _t(x):
    return Transform(position=Vec3(float(x), 0.0, 0.0))


# ══════════════════════════════════════════════════════════════════════════
# Stack semantics
# ══════════════════════════════════════════════════════════════════════════

class TestHistoryStack:

    @pytest.fixture
    def hm(self):
        return HistoryManager(_t(0))

    def test_initial_entry(self, hm):
        assert len(hm) == 1
        assert hm.current_index == 0
        assert hm.current() == _t(0)
        assert not hm.can_undo()
        assert not hm.can_redo()

    def test_empty_manager(self):
        hm = HistoryManager()
        assert len(hm) == 0
        assert hm.current() is None

    def test_record_advances(self, hm):
        hm.record(_t(1), "move")
        assert hm.current_index == 1
        assert hm.can_undo()
        assert hm.get_current_description() == "move"

    def test_undo_at_start_returns_none(self, hm):
        assert hm.undo() is None
        assert hm.current_index == 0

    def test_redo_at_end_returns_none(self, hm):
        hm.record(_t(1))
        assert hm.redo() is None
        assert hm.current_index == 1

    def test_undo_redo_round_trip(self, hm):
        hm.record(_t(1))
        hm.record(_t(2))
        assert hm.undo() == _t(1)
        assert hm.undo() == _t(0)
        assert hm.redo() == _t(1)
        assert hm.redo() == _t(2)

    def test_record_after_undo_drops_branch(self, hm):
        hm.record(_t(1))
        hm.record(_t(2))
        hm.undo()
        hm.record(_t(5))
        assert len(hm) == 3
        assert not hm.can_redo()
        assert hm.undo() == _t(1)

    def test_reset(self, hm):
        hm.record(_t(1))
        hm.record(_t(2))
        hm.reset(_t(9))
        assert len(hm) == 1
        assert hm.current_index == 0
        assert hm.current() == _t(9)

    def test_descriptions(self, hm):
        hm.record(_t(1), "first")
        hm.record(_t(2), "second")
        hm.undo()
        assert hm.get_undo_description() == "first"
        assert hm.get_redo_description() == "second"

    def test_unbounded_by_default(self, hm):
        for i in range(1, 200):
            hm.record(_t(i))
        assert len(hm) == 200
        assert hm.history[0].transform == _t(0)


# ══════════════════════════════════════════════════════════════════════════
# Listeners and capacity
# ══════════════════════════════════════════════════════════════════════════

class TestHistoryListeners:

    def test_listener_receives_flags(self):
        calls = []
        hm = HistoryManager(_t(0))
        hm.add_listener(lambda can_undo, can_redo: calls.append((can_undo, can_redo)))
        hm.record(_t(1))
        hm.undo()
        hm.redo()
        assert calls == [(True, False), (False, True), (True, False)]

    def test_remove_listener(self):
        calls = []
        listener = lambda u, r: calls.append(1)
        hm = HistoryManager(_t(0))
        hm.add_listener(listener)
        hm.remove_listener(listener)
        hm.record(_t(1))
        assert calls == []

    def test_failing_listener_does_not_break_history(self):
        hm = HistoryManager(_t(0))

        def broken(can_undo, can_redo):
            raise RuntimeError("listener bug")

        hm.add_listener(broken)
        hm.record(_t(1))
        assert hm.current() == _t(1)


class TestHistoryCap:

    def test_oldest_entries_dropped(self):
        hm = HistoryManager(_t(0), max_history=3)
        for i in range(1, 6):
            hm.record(_t(i))
        assert len(hm) == 3
        assert hm.current() == _t(5)
        assert hm.current_index == 2
        assert hm.history[0].transform == _t(3)
