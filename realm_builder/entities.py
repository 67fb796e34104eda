"""
Entities placed in a city: roads, points of interest, props, trees,
labels and buildings
"""
from .point import Point


class Road:
    """Road between two block centroids (held by value)"""

    MAIN = "main"
    SECONDARY = "secondary"
    ALLEY = "alley"

    def __init__(self, start, end, width, type):
        self.start = start.clone()
        self.end = end.clone()
        self.width = width
        self.type = type

    def __repr__(self):
        return f"Road({self.start} -> {self.end}, {self.type})"

    @property
    def length(self):
        return self.start.distance(self.end)

    def to_dict(self):
        return {
            "from": self.start.to_dict(),
            "to": self.end.to_dict(),
            "width": self.width,
            "type": self.type,
        }


class PointOfInterest:
    """Named landmark"""

    def __init__(self, x, y, type, label, icon, description="", secret=False):
        self.x = float(x)
        self.y = float(y)
        self.type = type
        self.label = label
        self.icon = icon
        self.description = description
        self.secret = secret

    def __repr__(self):
        return f"PointOfInterest({self.label!r} at {self.x:.1f}, {self.y:.1f})"

    @property
    def position(self):
        return Point(self.x, self.y)

    def to_dict(self):
        d = {
            "x": self.x,
            "y": self.y,
            "type": self.type,
            "label": self.label,
            "icon": self.icon,
            "description": self.description,
        }
        if self.secret:
            d["secret"] = True
        return d

    @staticmethod
    def from_dict(d):
        return PointOfInterest(
            d["x"], d["y"], d["type"], d["label"],
            d.get("icon", d["type"].lower()),
            d.get("description", ""),
            d.get("secret", False),
        )


class Prop:
    """Decorative, non-interactive object"""

    def __init__(self, x, y, type, width, height, rotation=0.0):
        self.x = float(x)
        self.y = float(y)
        self.type = type
        self.width = width
        self.height = height
        self.rotation = rotation

    def to_dict(self):
        return {
            "x": self.x,
            "y": self.y,
            "type": self.type,
            "width": self.width,
            "height": self.height,
            "rotation": self.rotation,
        }


class Tree:
    def __init__(self, x, y, size, species):
        self.x = float(x)
        self.y = float(y)
        self.size = size
        self.species = species

    def to_dict(self):
        return {"x": self.x, "y": self.y, "size": self.size, "species": self.species}


class Label:
    """Free-floating text annotation"""

    def __init__(self, x, y, text, size=12):
        self.x = float(x)
        self.y = float(y)
        self.text = text
        self.size = size

    def to_dict(self):
        return {"x": self.x, "y": self.y, "text": self.text, "size": self.size}

    @staticmethod
    def from_dict(d):
        return Label(d["x"], d["y"], d["text"], d.get("size", 12))


class Building:
    def __init__(self, x, y, width, height, rotation, type, floors):
        self.x = float(x)
        self.y = float(y)
        self.width = width
        self.height = height
        self.rotation = rotation
        self.type = type
        self.floors = floors

    def to_dict(self):
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "rotation": self.rotation,
            "type": self.type,
            "floors": self.floors,
        }
