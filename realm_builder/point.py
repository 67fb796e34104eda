"""
Point class for 2D coordinates
"""
import math


class Point:
    """2D point with x, y coordinates"""

    def __init__(self, x=0.0, y=0.0):
        self.x = float(x)
        self.y = float(y)

    def __eq__(self, other):
        if not isinstance(other, Point):
            return False
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Point({self.x:.2f}, {self.y:.2f})"

    def clone(self):
        return Point(self.x, self.y)

    def offset(self, dx, dy):
        """Move in place, returns self"""
        self.x += dx
        self.y += dy
        return self

    def polar(self, distance, angle):
        """Point at distance along angle (radians) from this one"""
        return Point(self.x + distance * math.cos(angle), self.y + distance * math.sin(angle))

    def distance(self, other):
        """Distance to another point"""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def to_dict(self):
        """Convert to dictionary for JSON export"""
        return {"x": self.x, "y": self.y}
