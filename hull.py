"""
Online convex hull of a growing planar point set.

Points arrive one at a time through ``ConvexHull.add_point``. The hull keeps
its vertices counter-clockwise in a ``VertexRing`` and updates perimeter and
area from the edges it removes and adds, never from the whole polygon.
"""

import logging
from enum import Enum
from typing import Iterable, Iterator, List, Tuple

from geometry import EPSILON, Point, Segment, hull_edges
from ring import VertexRing

logger = logging.getLogger(__name__)


class ChangeOutcome(Enum):
    """What a single ``add_point`` call did to the hull."""

    UNCHANGED_INTERIOR = "unchanged-interior"
    UNCHANGED_DUPLICATE = "unchanged-duplicate"
    EXTENDED_DEGENERATE = "extended-degenerate"
    GREW = "grew"

    def __str__(self) -> str:
        return self.value

    @property
    def changed(self) -> bool:
        return self in (ChangeOutcome.EXTENDED_DEGENERATE, ChangeOutcome.GREW)


class PointLocation(Enum):
    INSIDE = "inside"
    ON_BOUNDARY = "on boundary"
    OUTSIDE = "outside"

    def __str__(self) -> str:
        return self.value


class ConvexHull:
    """
    Convex hull that accepts points indefinitely.

    With fewer than three vertices the hull is degenerate: empty, a single
    point, or a segment whose perimeter is counted there and back. From
    three vertices on it is a strictly convex counter-clockwise polygon.

    Not thread-safe; callers sharing an instance must serialise access.
    """

    def __init__(self, epsilon: float = EPSILON):
        self.epsilon = epsilon
        self._ring = VertexRing()
        self._perimeter = 0.0
        self._area = 0.0

    @property
    def perimeter(self) -> float:
        return self._perimeter

    @property
    def area(self) -> float:
        return self._area

    @property
    def vertices(self) -> Tuple[Point, ...]:
        return tuple(self._ring)

    def __len__(self) -> int:
        return len(self._ring)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._ring)

    def __repr__(self) -> str:
        return f"ConvexHull(vertices={len(self._ring)}, perimeter={self._perimeter}, area={self._area})"

    def __str__(self) -> str:
        listing = "; ".join(
            f"{i}: (x={p.x}, y={p.y})" for i, p in enumerate(self._ring, start=1)
        )
        return (
            f"Perimeter: {self._perimeter}\n"
            f"Area: {self._area}\n"
            f"Vertices: {len(self._ring)}\n"
            f"{listing}"
        )

    def add_point(self, point) -> ChangeOutcome:
        """
        Add ``point`` (a ``Point`` or any ``(x, y)`` pair) to the hull.

        Raises NonFiniteCoordinateError for NaN/infinite coordinates before
        the hull is touched. A point that is already covered by the hull is
        reported through the returned outcome, not an exception.
        """
        p = Point.of(point)
        count = len(self._ring)
        if count == 0:
            outcome = self._add_to_empty(p)
        elif count == 1:
            outcome = self._add_to_point(p)
        elif count == 2:
            outcome = self._add_to_segment(p)
        else:
            outcome = self._add_to_polygon(p)
        logger.debug("add_point(%s, %s): %s, %d vertices", p.x, p.y, outcome, len(self._ring))
        return outcome

    def extend(self, points: Iterable) -> List[ChangeOutcome]:
        return [self.add_point(p) for p in points]

    def locate(self, point) -> PointLocation:
        """Classify ``point`` against the current hull without changing it."""
        p = Point.of(point)
        vertices = self.vertices
        if not vertices:
            return PointLocation.OUTSIDE
        if len(vertices) == 1:
            return PointLocation.ON_BOUNDARY if p == vertices[0] else PointLocation.OUTSIDE
        if len(vertices) == 2:
            if Segment(*vertices).contains_bounded(p, self.epsilon):
                return PointLocation.ON_BOUNDARY
            return PointLocation.OUTSIDE

        on_boundary = False
        for a, b in hull_edges(vertices):
            edge = Segment(a, b)
            if edge.is_illuminated_by(p, self.epsilon):
                return PointLocation.OUTSIDE
            if edge.is_collinear_with(p, self.epsilon):
                on_boundary = True
        return PointLocation.ON_BOUNDARY if on_boundary else PointLocation.INSIDE

    # Regimes, keyed on the current vertex count

    def _add_to_empty(self, p: Point) -> ChangeOutcome:
        self._ring.push(p)
        self._perimeter = 0.0
        self._area = 0.0
        return ChangeOutcome.GREW

    def _add_to_point(self, p: Point) -> ChangeOutcome:
        a = self._ring.point(self._ring.head)
        if p == a:
            return ChangeOutcome.UNCHANGED_DUPLICATE
        self._ring.push(p)
        self._perimeter = 2.0 * Segment(a, p).length()
        self._area = 0.0
        return ChangeOutcome.GREW

    def _add_to_segment(self, p: Point) -> ChangeOutcome:
        a, b = self._ring
        ab = Segment(a, b)
        if ab.contains_bounded(p, self.epsilon):
            if p == a or p == b:
                return ChangeOutcome.UNCHANGED_DUPLICATE
            return ChangeOutcome.UNCHANGED_INTERIOR

        if ab.is_collinear_with(p, self.epsilon):
            # the endpoint with the other one between it and p stays extreme
            kept = a if Segment(a, p).contains_bounded(b, self.epsilon) else b
            self._ring.reset((kept, p))
            self._perimeter = 2.0 * Segment(kept, p).length()
            self._area = 0.0
            return ChangeOutcome.EXTENDED_DEGENERATE

        pa, pb = Segment(p, a), Segment(p, b)
        turn = pa.cross(pb)
        self._ring.reset((a, p, b) if turn < 0 else (b, p, a))
        self._perimeter = pa.length() + pb.length() + ab.length()
        self._area = abs(turn) / 2.0
        return ChangeOutcome.GREW

    def _add_to_polygon(self, p: Point) -> ChangeOutcome:
        ring = self._ring
        node = ring.head
        for _ in range(len(ring)):
            following = ring.next(node)
            if self._edge(node, following).is_illuminated_by(p, self.epsilon):
                self._wrap(node, following, p)
                return ChangeOutcome.GREW
            node = following

        if p in ring:
            return ChangeOutcome.UNCHANGED_DUPLICATE
        return ChangeOutcome.UNCHANGED_INTERIOR

    def _wrap(self, start: int, end: int, p: Point) -> None:
        """Drop every edge lit from ``p`` around the seed edge start -> end, then attach ``p``."""
        ring = self._ring
        self._consume(start, end, p)

        while True:
            following = ring.next(end)
            if following == start or not self._edge(end, following).is_illuminated_by(p, self.epsilon):
                break
            self._consume(end, following, p)
            ring.remove(end)
            end = following

        while True:
            preceding = ring.prev(start)
            if preceding == end or not self._edge(preceding, start).is_illuminated_by(p, self.epsilon):
                break
            self._consume(preceding, start, p)
            ring.remove(start)
            start = preceding

        ring.insert_after(start, p)
        self._perimeter += (
            Segment(ring.point(start), p).length() + Segment(p, ring.point(end)).length()
        )

    def _consume(self, start: int, end: int, p: Point) -> None:
        a, b = self._ring.point(start), self._ring.point(end)
        self._perimeter -= Segment(a, b).length()
        self._area += abs(Segment(p, a).cross(Segment(p, b))) / 2.0

    def _edge(self, start: int, end: int) -> Segment:
        return Segment(self._ring.point(start), self._ring.point(end))
