from typing import Iterable, Iterator, List, Optional

from geometry import Point

NIL = -1


class VertexRing:
    """
    Cyclic sequence of points stored in an arena of slots.

    Every slot carries a point and the indices of its neighbours, so
    inserting or removing next to a known slot is O(1) and walking the
    ring in either direction never needs to rotate anything. Released
    slots go to a free list and are handed out again before the arena
    grows. A slot index (a "node") stays valid until that node is removed.
    """

    def __init__(self, points: Iterable[Point] = ()):
        self._points: List[Optional[Point]] = []
        self._next: List[int] = []
        self._prev: List[int] = []
        self._free: List[int] = []
        self._head = NIL
        self._size = 0
        for point in points:
            self.push(point)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Point]:
        for node in self.nodes():
            yield self._points[node]

    def __repr__(self) -> str:
        return f"VertexRing({list(self)!r})"

    @property
    def head(self) -> int:
        if self._head == NIL:
            raise IndexError("ring is empty")
        return self._head

    @property
    def capacity(self) -> int:
        """Number of slots allocated so far, live or free."""
        return len(self._points)

    def nodes(self) -> Iterator[int]:
        """Yield every live node once, starting at the head."""
        node = self._head
        for _ in range(self._size):
            yield node
            node = self._next[node]

    def point(self, node: int) -> Point:
        self._check(node)
        return self._points[node]

    def next(self, node: int) -> int:
        self._check(node)
        return self._next[node]

    def prev(self, node: int) -> int:
        self._check(node)
        return self._prev[node]

    def push(self, point: Point) -> int:
        """Append ``point`` just before the head, i.e. at the end of one turn."""
        if self._head == NIL:
            node = self._alloc(point)
            self._next[node] = node
            self._prev[node] = node
            self._head = node
            self._size = 1
            return node
        return self.insert_after(self._prev[self._head], point)

    def insert_after(self, node: int, point: Point) -> int:
        self._check(node)
        new = self._alloc(point)
        following = self._next[node]
        self._next[node] = new
        self._prev[new] = node
        self._next[new] = following
        self._prev[following] = new
        self._size += 1
        return new

    def remove(self, node: int) -> Point:
        self._check(node)
        point = self._points[node]
        if self._size == 1:
            self._head = NIL
        else:
            before, after = self._prev[node], self._next[node]
            self._next[before] = after
            self._prev[after] = before
            if node == self._head:
                self._head = after
        self._points[node] = None
        self._free.append(node)
        self._size -= 1
        return point

    def clear(self) -> None:
        self._points.clear()
        self._next.clear()
        self._prev.clear()
        self._free.clear()
        self._head = NIL
        self._size = 0

    def reset(self, points: Iterable[Point]) -> None:
        """Replace the whole ring with ``points`` in the given order."""
        self.clear()
        for point in points:
            self.push(point)

    def _alloc(self, point: Point) -> int:
        if self._free:
            node = self._free.pop()
            self._points[node] = point
            return node
        self._points.append(point)
        self._next.append(NIL)
        self._prev.append(NIL)
        return len(self._points) - 1

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._points) or self._points[node] is None:
            raise IndexError(f"slot {node} is not part of the ring")
