"""
In-progress city state shared by the generation stages
"""


class CitySize:
    """Block budget and radius a city is generated with"""

    def __init__(self, blocks, radius):
        self.blocks = blocks
        self.radius = radius

    def __eq__(self, other):
        if not isinstance(other, CitySize):
            return False
        return self.blocks == other.blocks and self.radius == other.radius

    def __repr__(self):
        return f"CitySize(blocks={self.blocks}, radius={self.radius})"

    def to_dict(self):
        return {"blocks": self.blocks, "radius": self.radius}


class CityContext:
    """Mutable collections one generation run builds up"""

    def __init__(self, random, size, tags, center):
        self.random = random
        self.size = size
        self.tags = frozenset(tags)
        self.center = center

        self.blocks = []
        self.roads = []
        self.road_edges = []
        self.water_areas = []
        self.pois = []
        self.wall = None
        self.props = []
        self.trees = []
        self.buildings = []
        self.labels = []

    def has(self, *tags):
        """True if any of the tags was requested"""
        return any(tag in self.tags for tag in tags)

    @property
    def walls(self):
        """Wall loop as a list of points (empty without a wall)"""
        return list(self.wall.shape) if self.wall is not None else []
