"""
Road network: minimum spanning tree over block centroids plus alleys
"""
import math

from .config import ALLEY_MAX_LENGTH, EXTRA_ROAD_RATIO, MAIN_ROAD_LENGTH, get_logger
from .entities import Road
from .graph import Graph

logger = get_logger(__name__)


class RoadNetworkBuilder:
    """Connects every block; see build()"""

    def __init__(self, random, blocks):
        self.random = random
        self.centers = [block.center for block in blocks]
        self.roads = []

    def build(self):
        """Create the roads and return the spanning tree edges.

        Edges are (from_block, to_block, distance); `self.roads` holds the
        tree roads followed by any alleys.
        """
        self.roads = []
        if len(self.centers) == 0:
            return []

        graph = Graph.complete(self.centers, lambda a, b: a.distance(b))
        edges = graph.minimum_spanning_tree(0)

        for a, b, dist in edges:
            width = 4 + self.random.random_int(0, 3)
            road_type = Road.MAIN if dist < MAIN_ROAD_LENGTH else Road.SECONDARY
            self.roads.append(Road(self.centers[a], self.centers[b], width, road_type))

        alleys = self._add_extra_connections()
        logger.debug("Road network: %d tree edges, %d alleys", len(edges), alleys)
        return edges

    def _add_extra_connections(self):
        # Pairs are drawn independently; duplicates and self pairs are allowed
        count = 0
        n = len(self.centers)
        for _ in range(math.floor(n * EXTRA_ROAD_RATIO)):
            a = self.random.random_int(0, n - 1)
            b = self.random.random_int(0, n - 1)
            if a == b:
                continue

            if self.centers[a].distance(self.centers[b]) < ALLEY_MAX_LENGTH:
                width = 3 + self.random.random_int(0, 2)
                self.roads.append(Road(self.centers[a], self.centers[b], width, Road.ALLEY))
                count += 1
        return count
