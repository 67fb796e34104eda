"""
CityData - the generated city handed to renderers, exporters and other
consumers
"""
from .entities import Label, PointOfInterest


class CityMeta:
    def __init__(self, seed, generated_at, generator_id):
        self.seed = seed
        self.generated_at = generated_at
        self.generator_id = generator_id

    def to_dict(self):
        return {
            "seed": self.seed,
            "generatedAt": self.generated_at,
            "generatorId": self.generator_id,
        }


class CityStats:
    """Counts taken when the city was generated"""

    def __init__(self, total_blocks, total_roads, total_pois, total_buildings):
        self.total_blocks = total_blocks
        self.total_roads = total_roads
        self.total_pois = total_pois
        self.total_buildings = total_buildings

    def to_dict(self):
        return {
            "totalBlocks": self.total_blocks,
            "totalRoads": self.total_roads,
            "totalPOIs": self.total_pois,
            "totalBuildings": self.total_buildings,
        }


class CityLayout:
    """Everything placed in the city.

    Collections are tuples except `pois` and `labels`, which callers may
    append to after generation.
    """

    def __init__(self, size, tags, center, blocks, roads, water_areas, pois,
                 walls, props, trees, buildings, labels):
        self.size = size
        self.tags = tuple(tags)
        self.center = center
        self.blocks = tuple(blocks)
        self.roads = tuple(roads)
        self.water_areas = tuple(tuple(area) for area in water_areas)
        self.pois = list(pois)
        self.walls = tuple(walls)
        self.props = tuple(props)
        self.trees = tuple(trees)
        self.buildings = tuple(buildings)
        self.labels = list(labels)

    def to_dict(self):
        return {
            "size": self.size.to_dict(),
            "tags": list(self.tags),
            "center": self.center.to_dict(),
            "blocks": [b.to_dict() for b in self.blocks],
            "roads": [r.to_dict() for r in self.roads],
            "waterAreas": [[p.to_dict() for p in area] for area in self.water_areas],
            "pois": [p.to_dict() for p in self.pois],
            "walls": [p.to_dict() for p in self.walls],
            "props": [p.to_dict() for p in self.props],
            "trees": [t.to_dict() for t in self.trees],
            "buildings": [b.to_dict() for b in self.buildings],
            "labels": [label.to_dict() for label in self.labels],
        }


class CityData:
    """Generated city: meta, layout and stats"""

    def __init__(self, meta, city, stats):
        self.meta = meta
        self.city = city
        self.stats = stats

    def __repr__(self):
        return (f"CityData(seed={self.meta.seed}, blocks={self.stats.total_blocks}, "
                f"roads={self.stats.total_roads})")

    def add_poi(self, poi):
        """Append a point of interest (PointOfInterest or dict)"""
        if isinstance(poi, dict):
            poi = PointOfInterest.from_dict(poi)
        self.city.pois.append(poi)
        return poi

    def add_label(self, label):
        """Append a text label (Label or dict)"""
        if isinstance(label, dict):
            label = Label.from_dict(label)
        self.city.labels.append(label)
        return label

    def to_dict(self):
        """Convert to dictionary for JSON export"""
        return {
            "meta": self.meta.to_dict(),
            "city": self.city.to_dict(),
            "stats": self.stats.to_dict(),
        }
