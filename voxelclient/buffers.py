"""Growable element buffers used to pack meshes into shared storage."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")


class DynamicBuffer(Generic[T]):
    """A buffer that grows automatically to hold whatever is uploaded to it."""

    def __init__(self, initial_capacity: int = 0) -> None:
        if initial_capacity < 0:
            raise ValueError("capacity cannot be negative")
        self.capacity = initial_capacity
        self._storage: list[Any] = [None] * initial_capacity
        self._len = 0

    def upload(self, data: Sequence[T]) -> None:
        """Replace the buffer contents with ``data``, growing when needed."""
        data = list(data)
        if not data:
            self._len = 0
            return
        if len(data) > self.capacity:
            self.capacity = len(data)
            self._storage = [None] * self.capacity
        self._storage[: len(data)] = data
        self._len = len(data)

    @property
    def contents(self) -> tuple[T, ...]:
        """The elements that were last uploaded."""
        return tuple(self._storage[: self._len])

    def __len__(self) -> int:
        return self._len


@dataclass
class Segment:
    """A contiguous run of slots in a :class:`MultiBuffer`."""

    free: bool
    pos: int
    length: int

    @property
    def end(self) -> int:
        return self.pos + self.length


class MultiBuffer(Generic[K, T]):
    """Storage holding several objects, each a run of elements found by its key."""

    def __init__(self, initial_capacity: int) -> None:
        if initial_capacity <= 0:
            raise ValueError("a MultiBuffer needs a positive initial capacity")
        self._storage: list[Any] = [None] * initial_capacity
        self._objects: dict[K, int] = {}
        self._segments: list[Segment] = [Segment(free=True, pos=0, length=initial_capacity)]

    @property
    def capacity(self) -> int:
        return len(self._storage)

    @property
    def contents(self) -> tuple[Any, ...]:
        """Every slot of the underlying storage; free slots may hold stale data."""
        return tuple(self._storage)

    @property
    def segments(self) -> tuple[Segment, ...]:
        return tuple(Segment(s.free, s.pos, s.length) for s in self._segments)

    def _segment_index(self, pos: int) -> int:
        for index, segment in enumerate(self._segments):
            if segment.pos == pos:
                return index
        raise RuntimeError(f"no segment starts at position {pos}")

    def remove(self, key: K) -> None:
        """Free the slots of ``key``; unknown keys are ignored."""
        start = self._objects.pop(key, None)
        if start is None:
            return
        index = self._segment_index(start)
        segment = self._segments[index]
        if segment.free:
            raise RuntimeError("removed object points to a free segment")
        segment.free = True
        if index > 0 and self._segments[index - 1].free:
            self._segments[index - 1].length += segment.length
            del self._segments[index]
            index -= 1
        if index < len(self._segments) - 1 and self._segments[index + 1].free:
            self._segments[index].length += self._segments[index + 1].length
            del self._segments[index + 1]

    def update(self, key: K, data: Sequence[T]) -> None:
        """Store ``data`` under ``key``, replacing what was there before."""
        data = list(data)
        if not data:
            raise ValueError("cannot add an empty sequence to a MultiBuffer")
        self.remove(key)
        size = len(data)
        index = next(
            (i for i, s in enumerate(self._segments) if s.free and s.length >= size),
            None,
        )
        if index is None:
            self._reallocate(max(self.capacity + size, 2 * self.capacity))
            index = len(self._segments) - 1
        segment = self._segments[index]
        self._storage[segment.pos : segment.pos + size] = data
        segment.free = False
        extra = segment.length - size
        if extra > 0:
            segment.length = size
            following = self._segments[index + 1] if index + 1 < len(self._segments) else None
            if following is not None and following.free:
                following.pos -= extra
                following.length += extra
            else:
                self._segments.insert(
                    index + 1, Segment(free=True, pos=segment.pos + size, length=extra)
                )
        self._objects[key] = segment.pos

    def _reallocate(self, new_len: int) -> None:
        old_len = self.capacity
        logger.debug("Reallocating MultiBuffer from length %d to length %d", old_len, new_len)
        self._storage.extend([None] * (new_len - old_len))
        last = self._segments[-1]
        if last.free:
            last.length += new_len - old_len
        else:
            self._segments.append(Segment(free=True, pos=old_len, length=new_len - old_len))

    def check_invariants(self) -> None:
        """Raise ``AssertionError`` if the segment bookkeeping is inconsistent."""
        segments = self._segments
        if segments[0].pos != 0:
            raise AssertionError("first segment does not start at 0")
        if segments[-1].end != self.capacity:
            raise AssertionError("last segment does not end at the capacity")
        for current, following in zip(segments, segments[1:]):
            if current.end != following.pos:
                raise AssertionError("segments are not contiguous")
            if current.free and following.free:
                raise AssertionError("two adjacent free segments")
        positions = list(self._objects.values())
        for pos in positions:
            if segments[self._segment_index(pos)].free:
                raise AssertionError("an object points to a free segment")
        for segment in segments:
            count = positions.count(segment.pos)
            if count != (0 if segment.free else 1):
                raise AssertionError("segment ownership is inconsistent")

    def get_pos_len(self, key: K) -> tuple[int, int] | None:
        """Position and length of ``key`` in the storage, or ``None``."""
        pos = self._objects.get(key)
        if pos is None:
            return None
        for segment in self._segments:
            if segment.pos == pos:
                return segment.pos, segment.length
        return None

    def get(self, key: K) -> list[T] | None:
        """The elements stored under ``key``, or ``None``."""
        found = self.get_pos_len(key)
        if found is None:
            return None
        pos, length = found
        return self._storage[pos : pos + length]

    def keys(self) -> list[K]:
        """All stored keys, in no particular order."""
        return list(self._objects)

    def __contains__(self, key: object) -> bool:
        return key in self._objects

    def __len__(self) -> int:
        return len(self._objects)