import pytest

from pdfsnip.core.geometry import Point
from pdfsnip.core.selection import SelectionState, SelectionTracker


@pytest.fixture
def tracker():
    return SelectionTracker()


@pytest.fixture
def events(tracker):
    recorded = {"committed": [], "cleared": [], "changed": []}
    tracker.selection_committed.connect(recorded["committed"].append)
    tracker.selection_cleared.connect(lambda: recorded["cleared"].append(True))
    tracker.selection_changed.connect(recorded["changed"].append)
    return recorded


def drag(tracker, start, end):
    tracker.on_pointer_down(Point(*start))
    tracker.on_pointer_move(Point(*end))
    tracker.on_pointer_up()


def test_starts_idle(tracker):
    assert tracker.state == SelectionState.IDLE
    assert tracker.rect is None
    assert tracker.committed_rect is None


@pytest.mark.parametrize("size", [(11, 11), (50, 200), (10.5, 300)])
def test_large_drag_commits_exactly_once(tracker, events, size):
    drag(tracker, (20, 30), (20 + size[0], 30 + size[1]))

    assert len(events["committed"]) == 1
    assert tracker.state == SelectionState.COMMITTED
    assert tracker.committed_rect.as_tuple() == (20, 30, size[0], size[1])


@pytest.mark.parametrize("size", [(10, 10), (10, 50), (50, 10), (0, 0), (3, 100)])
def test_small_drag_is_discarded(tracker, events, size):
    drag(tracker, (20, 30), (20 + size[0], 30 + size[1]))

    assert events["committed"] == []
    assert events["cleared"] == [True]
    assert tracker.state == SelectionState.IDLE
    assert tracker.rect is None


def test_drag_towards_origin_is_normalized(tracker, events):
    drag(tracker, (100, 100), (40, 60))

    assert events["committed"][0].as_tuple() == (40, 60, 60, 40)


def test_move_updates_rect_while_dragging(tracker, events):
    tracker.on_pointer_down(Point(10, 10))
    tracker.on_pointer_move(Point(30, 5))

    assert tracker.state == SelectionState.DRAGGING
    assert tracker.rect.as_tuple() == (10, 5, 20, 5)
    assert len(events["changed"]) == 2


def test_move_without_drag_is_noop(tracker, events):
    tracker.on_pointer_move(Point(30, 30))

    assert tracker.state == SelectionState.IDLE
    assert events["changed"] == []


def test_pointer_up_without_drag_emits_nothing(tracker, events):
    tracker.on_pointer_up()

    assert events["committed"] == []
    assert events["cleared"] == []


def test_second_pointer_up_does_not_commit_again(tracker, events):
    drag(tracker, (0, 0), (50, 50))
    tracker.on_pointer_up()

    assert len(events["committed"]) == 1


def test_new_pointer_down_abandons_previous_selection(tracker, events):
    drag(tracker, (0, 0), (50, 50))
    tracker.on_pointer_down(Point(200, 200))

    assert tracker.state == SelectionState.DRAGGING
    assert tracker.committed_rect is None
    assert tracker.rect.as_tuple() == (200, 200, 0, 0)


def test_reset_clears_committed_selection(tracker, events):
    drag(tracker, (0, 0), (50, 50))
    tracker.reset()

    assert tracker.state == SelectionState.IDLE
    assert tracker.committed_rect is None
    assert events["cleared"] == [True]


def test_custom_threshold():
    tracker = SelectionTracker(min_size=2)
    committed = []
    tracker.selection_committed.connect(committed.append)

    drag(tracker, (0, 0), (3, 3))

    assert len(committed) == 1
