import math
from typing import Iterable, List, NamedTuple, Sequence, Tuple

# Relative tolerance shared by every predicate below. Collinearity compares
# |cross(v, w)| against EPSILON * |v| * |w|, i.e. the sine of the angle
# between the two vectors; bounded containment compares lengths with
# math.isclose(rel_tol=EPSILON).
EPSILON = 1e-9


class NonFiniteCoordinateError(ValueError):
    """Raised when a point is built from NaN or an infinite coordinate."""


class _Coords(NamedTuple):
    x: float
    y: float


class Point(_Coords):
    """Immutable 2-D coordinate; equal only when both coordinates match exactly."""

    __slots__ = ()

    def __new__(cls, x: float, y: float) -> "Point":
        x, y = float(x), float(y)
        if not (math.isfinite(x) and math.isfinite(y)):
            raise NonFiniteCoordinateError(f"point coordinates must be finite, got ({x}, {y})")
        return super().__new__(cls, x, y)

    @classmethod
    def of(cls, pair) -> "Point":
        if isinstance(pair, cls):
            return pair
        try:
            x, y = pair
        except (TypeError, ValueError) as exc:
            raise TypeError(f"expected an (x, y) pair, got {pair!r}") from exc
        return cls(x, y)


Edge = Tuple[Point, Point]


class Segment:
    """Directed vector p -> q, built on demand for a single predicate."""

    __slots__ = ("p", "q", "dx", "dy")

    def __init__(self, p: Point, q: Point):
        self.p = p
        self.q = q
        self.dx = q[0] - p[0]
        self.dy = q[1] - p[1]

    def __repr__(self) -> str:
        return f"Segment({self.p!r}, {self.q!r})"

    def dot(self, other: "Segment") -> float:
        return self.dx * other.dx + self.dy * other.dy

    def cross(self, other: "Segment") -> float:
        return self.dx * other.dy - self.dy * other.dx

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def is_collinear_with(self, point: Point, eps: float = EPSILON) -> bool:
        """True if ``point`` lies on the (infinite) line through this segment."""
        to_point = Segment(self.p, point)
        return abs(self.cross(to_point)) <= eps * self.length() * to_point.length()

    def contains_bounded(self, point: Point, eps: float = EPSILON) -> bool:
        """True if ``point`` lies on the segment between (and including) its endpoints."""
        if not self.is_collinear_with(point, eps):
            return False
        via = Segment(self.p, point).length() + Segment(point, self.q).length()
        return math.isclose(self.length(), via, rel_tol=eps)

    def is_illuminated_by(self, observer: Point, eps: float = EPSILON) -> bool:
        """
        True if this boundary edge is visible from ``observer``.

        Edges are oriented counter-clockwise, so an edge is lit when the
        observer is strictly on its right. An observer on the edge's line
        lights it only from beyond its endpoints; a point sitting on the
        edge itself sees nothing.
        """
        if self.is_collinear_with(observer, eps):
            return not self.contains_bounded(observer, eps)
        return Segment(observer, self.p).cross(Segment(observer, self.q)) < 0


def hull_edges(hull: Sequence[Point]) -> List[Edge]:
    if len(hull) < 2:
        return []
    if len(hull) == 2:
        return [(hull[0], hull[1])]
    return [(hull[i], hull[(i + 1) % len(hull)]) for i in range(len(hull))]


def boundary_length(hull: Sequence[Point]) -> float:
    """Perimeter of a hull; a two-vertex hull is walked there and back."""
    total = sum(Segment(a, b).length() for a, b in hull_edges(hull))
    return 2.0 * total if len(hull) == 2 else total


def polygon_area(polygon: Sequence[Point]) -> float:
    """Shoelace area, independent of the hull's incremental bookkeeping."""
    if len(polygon) < 3:
        return 0.0

    area = 0.0
    for i in range(len(polygon)):
        j = (i + 1) % len(polygon)
        area += polygon[i][0] * polygon[j][1]
        area -= polygon[j][0] * polygon[i][1]

    return abs(area) / 2.0


def _cross(o: Point, a: Point, b: Point) -> float:
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def convex_hull(points: Iterable[Point]) -> List[Point]:
    """Batch monotone-chain hull, counter-clockwise, collinear points dropped."""
    pts = sorted(set(Point.of(p) for p in points))
    if len(pts) <= 1:
        return pts
    lower: List[Point] = []
    for p in pts:
        while len(lower) >= 2 and _cross(lower[-2], lower[-1], p) <= 0:
            lower.pop()
        lower.append(p)
    upper: List[Point] = []
    for p in reversed(pts):
        while len(upper) >= 2 and _cross(upper[-2], upper[-1], p) <= 0:
            upper.pop()
        upper.append(p)
    return lower[:-1] + upper[:-1]
