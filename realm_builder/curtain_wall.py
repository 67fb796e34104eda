"""
CurtainWall class for city walls
"""

from .config import WALL_SCALE, get_logger
from .entities import PointOfInterest
from .furnishing import describe_poi
from .math_utils import interpolate
from .polygon import Polygon

logger = get_logger(__name__)


class CurtainWall:
    """City wall: the convex hull of every block, pushed outward"""

    def __init__(self, random, blocks, scale=WALL_SCALE):
        self.random = random
        self.gates = []

        points = [v for block in blocks for v in block.vertices]
        hull = Polygon.convex_hull(points)
        self.shape = hull.scaled(scale)

    def __len__(self):
        return len(self.shape)

    def _point_on_edge(self, low, high):
        index = self.random.random_int(0, len(self.shape) - 1)
        start, end = self.shape.edge(index)
        t = self.random.random_float(low, high)
        return interpolate(start, end, t)

    def build_gates(self):
        """Place 2-4 gates on random wall edges; returns them as POIs"""
        self.gates = []
        if len(self.shape) == 0:
            return self.gates

        gate_count = self.random.random_int(2, 4)
        for i in range(gate_count):
            p = self._point_on_edge(0.3, 0.7)
            label = "Main Gate" if i == 0 else "Secondary Gate"
            self.gates.append(PointOfInterest(
                p.x, p.y, "Gate", label, "gate", describe_poi("Gate", label)
            ))

        logger.debug("Wall with %d vertices, %d gates", len(self.shape), len(self.gates))
        return self.gates

    def secret_entrance(self):
        """Hidden passage on a random wall edge, or None without a wall"""
        if len(self.shape) == 0:
            return None

        p = self._point_on_edge(0.2, 0.8)
        return PointOfInterest(
            p.x, p.y, "Secret Entrance", "Hidden Passage", "secret",
            describe_poi("Secret Entrance", "Hidden Passage"), secret=True
        )

    def encloses(self, point):
        return self.shape.contains_point(point)
