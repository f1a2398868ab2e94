"""Accounting of allocated bytes, in total and per tag."""

from __future__ import annotations

import enum

from emberframe import log

__all__ = ["MemoryTag", "MemoryTracker", "default_tracker"]


class MemoryTag(enum.IntEnum):
    UNKNOWN = 0
    ARRAY = 1


class MemoryTracker:
    """Counts bytes allocated and released, overall and by tag."""

    def __init__(self):
        self._total = 0
        self._by_tag = {tag: 0 for tag in MemoryTag}

    def allocate(self, size, tag):
        """Record an allocation of ``size`` bytes under ``tag``."""
        tag = MemoryTag(tag)
        if size < 0:
            raise ValueError(f"allocation size must not be negative: {size}")
        if tag is MemoryTag.UNKNOWN:
            log.warning("Allocating memory with an unknown tag\n")
        self._total += size
        self._by_tag[tag] += size

    def release(self, size, tag):
        """Record that ``size`` bytes under ``tag`` were freed."""
        tag = MemoryTag(tag)
        if size < 0:
            raise ValueError(f"release size must not be negative: {size}")
        if tag is MemoryTag.UNKNOWN:
            log.warning("Freeing memory with an unknown tag\n")
        if size > self._by_tag[tag]:
            raise ValueError(
                f"releasing {size} bytes but only {self._by_tag[tag]} are allocated under {tag.name}"
            )
        self._total -= size
        self._by_tag[tag] -= size

    def total_usage(self):
        """Bytes currently allocated across all tags."""
        return self._total

    def usage_by_tag(self, tag):
        """Bytes currently allocated under ``tag``."""
        return self._by_tag[MemoryTag(tag)]


default_tracker = MemoryTracker()