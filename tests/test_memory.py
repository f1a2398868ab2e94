import pytest

from emberframe.memory import MemoryTag, MemoryTracker


def test_fresh_tracker_is_empty():
    tracker = MemoryTracker()
    assert tracker.total_usage() == 0
    assert tracker.usage_by_tag(MemoryTag.ARRAY) == 0


def test_allocate_and_release_balance():
    tracker = MemoryTracker()
    tracker.allocate(40, MemoryTag.ARRAY)
    tracker.allocate(8, MemoryTag.ARRAY)
    assert tracker.usage_by_tag(MemoryTag.ARRAY) == tracker.total_usage()
    tracker.release(40, MemoryTag.ARRAY)
    tracker.release(8, MemoryTag.ARRAY)
    assert tracker.total_usage() == 0


def test_tags_are_counted_separately(capsys):
    tracker = MemoryTracker()
    tracker.allocate(10, MemoryTag.UNKNOWN)
    tracker.allocate(20, MemoryTag.ARRAY)
    capsys.readouterr()
    assert tracker.usage_by_tag(MemoryTag.UNKNOWN) == 10
    assert tracker.usage_by_tag(MemoryTag.ARRAY) == 20
    assert tracker.total_usage() == 30


def test_unknown_tag_warns(capsys):
    tracker = MemoryTracker()
    tracker.allocate(4, MemoryTag.UNKNOWN)
    assert "[WARNING]" in capsys.readouterr().err
    tracker.release(4, MemoryTag.UNKNOWN)
    assert "[WARNING]" in capsys.readouterr().err


def test_array_tag_does_not_warn(capsys):
    tracker = MemoryTracker()
    tracker.allocate(4, MemoryTag.ARRAY)
    assert capsys.readouterr().err == ""


def test_release_more_than_allocated_raises():
    tracker = MemoryTracker()
    tracker.allocate(4, MemoryTag.ARRAY)
    with pytest.raises(ValueError):
        tracker.release(5, MemoryTag.ARRAY)
    assert tracker.total_usage() == 4


def test_negative_size_raises():
    tracker = MemoryTracker()
    with pytest.raises(ValueError):
        tracker.allocate(-1, MemoryTag.ARRAY)


def test_invalid_tag_raises():
    tracker = MemoryTracker()
    with pytest.raises(ValueError):
        tracker.allocate(1, 7)