"""Snake body as an arena of linked segments."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from reverse_snake.direction import Direction, direction_between, opposite
from reverse_snake.grid import Coord


@dataclass
class Segment:
    """One occupied cell of the snake.

    ``next`` is the arena id of the neighbouring segment one step closer to
    the head, or ``None`` for the head itself.
    """

    coord: Coord
    cell: int
    next: int | None = None


class Snake:
    """A snake stored as linked segments in an id-keyed arena.

    Links run from the tail towards the head: advancing links the old head
    to the new one, and dropping the tail follows the tail's ``next``.
    ``cells`` mirrors the chain for O(1) occupancy checks.
    """

    def __init__(self, coord: tuple[int, int], cell: int) -> None:
        self.segments: dict[int, Segment] = {}
        self._next_id = 0
        seg_id = self._allocate(Coord(*coord), cell)
        self.head_id = seg_id
        self.tail_id = seg_id
        self.cells: set[int] = {cell}

    def _allocate(self, coord: Coord, cell: int, next_id: int | None = None) -> int:
        seg_id = self._next_id
        self._next_id += 1
        self.segments[seg_id] = Segment(coord, cell, next_id)
        return seg_id

    @property
    def head(self) -> Segment:
        """Return the head segment."""
        return self.segments[self.head_id]

    @property
    def tail(self) -> Segment:
        """Return the tail segment."""
        return self.segments[self.tail_id]

    def __len__(self) -> int:
        return len(self.segments)

    def __contains__(self, cell: object) -> bool:
        return cell in self.cells

    def iter_from_tail(self) -> Iterator[Segment]:
        """Yield segments by following links from the tail to the head."""
        seg_id: int | None = self.tail_id
        while seg_id is not None:
            segment = self.segments[seg_id]
            yield segment
            seg_id = segment.next

    @property
    def body(self) -> list[Coord]:
        """Return the occupied coordinates ordered head first."""
        return [seg.coord for seg in self.iter_from_tail()][::-1]

    def advance_head(self, coord: tuple[int, int], cell: int) -> None:
        """Link a new head segment in front of the current head."""
        new_id = self._allocate(Coord(*coord), cell)
        self.head.next = new_id
        self.head_id = new_id
        self.cells.add(cell)

    def drop_tail(self) -> int | None:
        """Shrink the snake by its tail segment.

        Returns the vacated cell, or ``None`` when nothing was freed. A
        single-segment snake has no ``next`` to move to, so its tail snaps
        back to the head and keeps its cell.
        """
        old_id = self.tail_id
        old = self.segments[old_id]
        if old.next is None:
            self.tail_id = self.head_id
            return None

        self.tail_id = old.next
        del self.segments[old_id]
        # A head that just moved onto the vacated cell still occupies it.
        if old.cell == self.head.cell:
            return None
        self.cells.discard(old.cell)
        return old.cell

    def advance(self, coord: tuple[int, int], cell: int) -> int | None:
        """Move one step: add a head at *coord*, then drop the tail.

        Returns the vacated cell, if any.
        """
        self.advance_head(coord, cell)
        return self.drop_tail()

    def tail_direction(self, fallback: Direction) -> Direction:
        """Direction from the tail to its neighbour.

        A single-segment snake has no neighbour and reports *fallback*.
        """
        tail = self.tail
        if tail.next is None:
            return fallback
        found = direction_between(tail.coord, self.segments[tail.next].coord)
        return found if found is not None else fallback

    def growth_coord(self, fallback: Direction) -> Coord:
        """Coordinate one step behind the tail, against its forward direction."""
        dr, dc = opposite(self.tail_direction(fallback)).value
        row, col = self.tail.coord
        return Coord(row + dr, col + dc)

    def grow_tail(self, coord: tuple[int, int], cell: int) -> None:
        """Attach a new tail segment behind the current tail.

        Bounds and occupancy of *coord* are the caller's responsibility.
        """
        self.tail_id = self._allocate(Coord(*coord), cell, self.tail_id)
        self.cells.add(cell)

    def reverse(self) -> None:
        """Reverse every link in place and swap head and tail."""
        prev_id: int | None = None
        seg_id: int | None = self.tail_id
        while seg_id is not None:
            segment = self.segments[seg_id]
            next_id = segment.next
            segment.next = prev_id
            prev_id = seg_id
            seg_id = next_id
        self.head_id, self.tail_id = self.tail_id, self.head_id

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(coord) for coord in self.body],
            "cells": sorted(self.cells),
            "length": len(self),
        }
