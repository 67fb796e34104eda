"""
Block class representing a city district
"""
from .polygon import Polygon


class Block:
    """A polygonal block (district) and its place in the growth tree"""

    CENTRAL = "central"
    DISTRICT = "district"
    NEIGHBORHOOD = "neighborhood"
    CITADEL = "citadel"

    def __init__(self, id, vertices, type, depth=0, parent_id=None):
        if isinstance(vertices, Polygon):
            self.shape = vertices.copy()
        else:
            self.shape = Polygon(vertices)
        self.id = id
        self.type = type
        self.depth = depth
        self.parent_id = parent_id
        self.children = []
        self.elevation = None

    def __repr__(self):
        return f"Block({self.id}, {self.type}, depth={self.depth})"

    @property
    def vertices(self):
        return self.shape.vertices

    @property
    def center(self):
        return self.shape.center

    def add_child(self, child):
        """Link child into the tree"""
        child.parent_id = self.id
        self.children.append(child.id)

    def to_dict(self):
        """Convert to dictionary for JSON export"""
        d = {
            "id": self.id,
            "vertices": self.shape.to_dict(),
            "type": self.type,
            "depth": self.depth,
            "children": list(self.children),
        }
        if self.parent_id is not None:
            d["parentId"] = self.parent_id
        if self.elevation is not None:
            d["elevation"] = self.elevation
        return d
