"""
Water features: waterfront ribbons with docks, lakes and coastlines
"""
import math

from .config import get_logger
from .entities import Prop
from .point import Point

logger = get_logger(__name__)


class WaterFeatureBuilder:
    """Builds water areas (lists of points) and dock props"""

    WATERFRONT_STEPS = 20
    LAKE_STEPS = 24
    COAST_STEPS = 30

    def __init__(self, random, center, radius):
        self.random = random
        self.center = center
        self.radius = radius

    def waterfront(self):
        """Jittered arc around the city plus docks along it.

        Returns (water_area, docks).
        """
        radius = self.radius * 0.8
        start_angle = self.random.random_float(0, math.pi * 2)
        arc_length = math.pi / 2 + self.random.random_float(0, math.pi / 4)

        points = []
        for i in range(self.WATERFRONT_STEPS + 1):
            angle = start_angle + (i / self.WATERFRONT_STEPS) * arc_length
            variance = self.random.random_float(0.9, 1.1)
            points.append(self.center.polar(radius * variance, angle))

        area = []
        for p in points:
            x = p.x + self.random.random_float(-15, 15)
            y = p.y + self.random.random_float(-15, 15)
            area.append(Point(x, y))

        return area, self.docks(points)

    def docks(self, shore):
        """3-8 dock props sampled along the shore points"""
        result = []
        for _ in range(self.random.random_int(3, 8)):
            t = self.random.random_float(0.1, 0.9)
            point = shore[math.floor(t * (len(shore) - 1))]
            width = 30 + self.random.random_int(0, 20)
            rotation = self.random.random_float(0, math.pi * 2)
            result.append(Prop(point.x, point.y, "dock", width, 10, rotation))
        return result

    def water_body(self, lake=None):
        """Closed lake ring or open coastline arc.

        Without an explicit choice a coin flip decides.
        """
        is_lake = lake or self.random.random() > 0.5
        center = Point(
            self.center.x + self.random.random_float(-100, 100),
            self.center.y + self.random.random_float(-100, 100),
        )
        radius = 80 + self.random.random_int(0, 120)
        steps = self.LAKE_STEPS if is_lake else self.COAST_STEPS

        points = []
        for i in range(steps):
            angle = i * 2 * math.pi / steps
            variance = 0.9 + self.random.random_float(0, 0.2)
            points.append(center.polar(radius * variance, angle))

        if not is_lake:
            points = points[:len(points) // 2]

        logger.debug("%s with %d points", "Lake" if is_lake else "Coastline", len(points))
        return points
