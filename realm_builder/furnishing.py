"""
Site furnishing: buildings inside blocks, scattered terrain props and
points of interest placed by rejection sampling
"""
import math

from .block import Block
from .config import (
    BUILDING_TYPES,
    POI_ADJECTIVES,
    POI_MAX_ATTEMPTS,
    POI_MIN_DISTANCE,
    POI_NOUNS,
    POI_TYPES,
    TERRAIN_PROP_TYPES,
    get_logger,
)
from .entities import Building, PointOfInterest, Prop

logger = get_logger(__name__)

POI_DESCRIPTIONS = {
    "Tavern": "A bustling {name} where locals gather for ale and news",
    "Temple": "Sacred {name} dedicated to the gods, filled with worshippers",
    "Market": "Busy {name} where merchants sell goods from distant lands",
    "Smithy": "The {name} rings with the sound of hammer on anvil",
    "Keep": "Imposing {name} that watches over the city",
    "Gate": "Heavily guarded {name}, main entrance to the city",
}


def describe_poi(poi_type, name):
    """Canned description for a POI type, generic for unknown types"""
    template = POI_DESCRIPTIONS.get(poi_type, "The {name}, an important location in the city")
    return template.format(name=name)


def is_too_close(position, placed, min_distance=POI_MIN_DISTANCE):
    """True if position is nearer than min_distance to any placed point"""
    for p in placed:
        if position.distance(p) < min_distance:
            return True
    return False


class SiteFurnisher:
    """Places buildings, props and POIs around existing blocks"""

    def __init__(self, random, center, radius):
        self.random = random
        self.center = center
        self.radius = radius

    def place_buildings(self, blocks):
        """3-9 buildings around the centroid of every non-citadel block"""
        buildings = []
        for block in blocks:
            if block.type == Block.CITADEL:
                continue

            center = block.center
            count = 3 + self.random.random_int(0, 6)
            max_extra_floors = 2 if block.type == Block.CENTRAL else 1

            for _ in range(count):
                angle = self.random.random_float(0, math.pi * 2)
                distance = self.random.random_float(0, 25)
                position = center.polar(distance, angle)

                width = 12 + self.random.random_int(0, 10)
                height = 8 + self.random.random_int(0, 12)
                rotation = self.random.random_float(-0.3, 0.3)
                building_type = self.random.pick(BUILDING_TYPES)
                floors = 1 + self.random.random_int(0, max_extra_floors)

                buildings.append(Building(
                    position.x, position.y, width, height, rotation, building_type, floors
                ))
        return buildings

    def scatter_props(self):
        """20-50 terrain props between 50 and 0.7 radius from the city center"""
        props = []
        count = 20 + self.random.random_int(0, 30)
        for _ in range(count):
            angle = self.random.random_float(0, math.pi * 2)
            distance = self.random.random_float(50, self.radius * 0.7)
            position = self.center.polar(distance, angle)

            prop_type = self.random.pick(TERRAIN_PROP_TYPES)
            width = 8 + self.random.random_int(0, 8)
            height = 8 + self.random.random_int(0, 8)
            rotation = self.random.random_float(0, math.pi * 2)
            props.append(Prop(position.x, position.y, prop_type, width, height, rotation))
        return props

    def _candidate(self, blocks):
        block = self.random.pick(blocks)
        center = block.center
        angle = self.random.random_float(0, math.pi * 2)
        distance = self.random.random_float(10, 30)
        return center.polar(distance, angle)

    def place_pois(self, blocks, count):
        """Up to `count` named POIs near random block centroids.

        A POI that cannot be kept POI_MIN_DISTANCE away from the ones
        already placed within POI_MAX_ATTEMPTS tries is skipped.
        """
        pois = []
        placed = []
        if len(blocks) == 0:
            return pois

        for _ in range(count):
            position = None
            for _attempt in range(POI_MAX_ATTEMPTS):
                candidate = self._candidate(blocks)
                if not is_too_close(candidate, placed):
                    position = candidate
                    break

            if position is None:
                logger.debug("Skipping POI after %d attempts", POI_MAX_ATTEMPTS)
                continue

            placed.append(position)
            poi_type = self.random.pick(POI_TYPES)
            name = f"{self.random.pick(POI_ADJECTIVES)} {self.random.pick(POI_NOUNS)} {poi_type}"
            pois.append(PointOfInterest(
                position.x, position.y, poi_type, name, poi_type.lower(),
                describe_poi(poi_type, name)
            ))

        return pois
