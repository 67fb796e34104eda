"""
Mathematical utility functions
"""


def gate(value, min_val, max_val):
    """Clamp value between min and max"""
    return min_val if value < min_val else (value if value < max_val else max_val)


def cross(a, b, c):
    """2D cross product of vectors a->b and a->c.

    Positive for a counter-clockwise (left) turn, negative for a clockwise
    turn, zero when the points are collinear.
    """
    return (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)


def interpolate(p1, p2, ratio):
    """Interpolate between two points"""
    from .point import Point
    return Point(
        p1.x + (p2.x - p1.x) * ratio,
        p1.y + (p2.y - p1.y) * ratio
    )
