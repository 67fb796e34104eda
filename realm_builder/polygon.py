"""
Polygon class for 2D polygons
"""
import math
from .point import Point
from .math_utils import cross


class Polygon:
    """2D polygon represented as a list of points"""

    DELTA = 0.000001

    def __init__(self, vertices=None):
        if vertices is None:
            self.vertices = []
        else:
            self.vertices = [Point(v.x, v.y) if isinstance(v, Point) else Point(v[0], v[1]) for v in vertices]

    def __len__(self):
        return len(self.vertices)

    def __iter__(self):
        return iter(self.vertices)

    def __repr__(self):
        return f"Polygon({len(self.vertices)} vertices)"

    def copy(self):
        """Create a copy of the polygon"""
        return Polygon([Point(v.x, v.y) for v in self.vertices])

    @property
    def center(self):
        """Centroid as the arithmetic mean of the vertices"""
        if len(self.vertices) == 0:
            return Point(0, 0)
        c = Point(0, 0)
        for v in self.vertices:
            c.x += v.x
            c.y += v.y
        c.x /= len(self.vertices)
        c.y /= len(self.vertices)
        return c

    def edge(self, index):
        """Edge `index` as (start, end); the last edge closes the loop"""
        length = len(self.vertices)
        return self.vertices[index % length], self.vertices[(index + 1) % length]

    def edges(self):
        """Iterate over (start, end) pairs including the closing edge"""
        for i in range(len(self.vertices)):
            yield self.edge(i)

    def offset(self, point):
        """Offset polygon by point"""
        for v in self.vertices:
            v.x += point.x
            v.y += point.y

    def scaled(self, factor, origin=None):
        """Copy scaled about origin (the vertex mean by default)"""
        if origin is None:
            origin = self.center
        return Polygon([
            Point(origin.x + (v.x - origin.x) * factor, origin.y + (v.y - origin.y) * factor)
            for v in self.vertices
        ])

    def contains_point(self, point):
        """Check if a counter-clockwise convex polygon contains a point (borders included)"""
        if len(self.vertices) < 3:
            return False
        for a, b in self.edges():
            if cross(a, b, point) < -self.DELTA:
                return False
        return True

    def to_dict(self):
        """Convert to list of points for JSON export"""
        return [v.to_dict() for v in self.vertices]

    @staticmethod
    def regular(n=8, r=1.0):
        """Create regular polygon"""
        return Polygon([
            Point(r * math.cos(i * 2 * math.pi / n), r * math.sin(i * 2 * math.pi / n))
            for i in range(n)
        ])

    @staticmethod
    def convex_hull(points):
        """Convex hull of points (Graham scan), counter-clockwise.

        Fewer than 3 points are returned as they are.
        """
        points = list(points)
        if len(points) < 3:
            return Polygon(points)

        lowest_index = 0
        for i in range(1, len(points)):
            p = points[i]
            lowest = points[lowest_index]
            if p.y < lowest.y or (p.y == lowest.y and p.x < lowest.x):
                lowest_index = i
        lowest = points[lowest_index]

        def polar_key(p):
            dx = p.x - lowest.x
            dy = p.y - lowest.y
            return (math.atan2(dy, dx), dx * dx + dy * dy)

        rest = points[:lowest_index] + points[lowest_index + 1:]
        ordered = [lowest] + sorted(rest, key=polar_key)

        hull = [ordered[0], ordered[1]]
        for p in ordered[2:]:
            while len(hull) >= 2 and cross(hull[-2], hull[-1], p) <= 0:
                hull.pop()
            hull.append(p)

        return Polygon(hull)
