"""
CityGenerator - runs every generation stage in a fixed order
"""

import math
import random as system_random
from datetime import datetime, timezone

from .city_data import CityData, CityLayout, CityMeta, CityStats
from .config import (
    CENTER_X,
    CENTER_Y,
    DEFAULT_SIZE,
    GENERATOR_ID,
    MAX_BLOCKS,
    MAX_RADIUS,
    RADIUS_PER_BLOCK,
    SIZES,
    PerformanceTimer,
    get_logger,
)
from .context import CitySize, CityContext
from .features import EARLY_STAGES, LATE_STAGES, TagFeatureComposer
from .furnishing import SiteFurnisher
from .math_utils import gate
from .growth import DistrictGrowthEngine
from .point import Point
from .random import SeededRandom
from .roads import RoadNetworkBuilder

logger = get_logger(__name__)


def _coerce_seed(seed):
    if seed is None:
        return 0
    return int(seed)


def _coerce_tags(tags):
    if tags is None:
        return []
    if isinstance(tags, (str, bytes)):
        raise TypeError("Tags must be a collection of strings, not a single string")
    try:
        tags = list(tags)
    except TypeError:
        raise TypeError(f"Tags must be a collection of strings, got {type(tags).__name__}")
    for tag in tags:
        if not isinstance(tag, str):
            raise TypeError(f"Tag {tag!r} is not a string")
    return sorted(set(tags))


class CityGenerator:
    """Deterministic city generator.

    One instance owns one SeededRandom; the same (seed, size, tags) always
    produce the same city. Instances must not be shared between threads.
    """

    def __init__(self, seed=None, size=DEFAULT_SIZE, tags=()):
        seed = _coerce_seed(seed)
        if seed == 0:
            seed = system_random.randint(1, 999999)
        self.seed = seed
        self.tags = _coerce_tags(tags)
        self.requested_size = size
        self.center = Point(CENTER_X, CENTER_Y)
        self.context = None
        self._reset()

    def _reset(self):
        # Fresh random sequence; size draws always come first
        self.random = SeededRandom(self.seed)
        self.size = self.parse_size(self.requested_size)

    def parse_size(self, size):
        """Map a size name or block count to a CitySize.

        All three named ranges are drawn first, whatever was requested, so
        the random sequence after this point does not depend on the size.
        """
        drawn = {
            name: CitySize(self.random.random_int(low, high), radius)
            for name, (low, high, radius) in SIZES.items()
        }

        if isinstance(size, float) and math.isnan(size):
            size = DEFAULT_SIZE

        if isinstance(size, str) and size in drawn:
            return drawn[size]
        if isinstance(size, (int, float)) and not isinstance(size, bool):
            blocks = int(gate(size, 1, MAX_BLOCKS))
            return CitySize(blocks, min(MAX_RADIUS, RADIUS_PER_BLOCK * blocks))

        logger.debug("Unknown size %r, using %s", size, DEFAULT_SIZE)
        return drawn[DEFAULT_SIZE]

    def generate(self):
        """Build the city and return it as CityData"""
        self._reset()
        logger.info("Generating city (seed=%s, size=%s, tags=%s)",
                    self.seed, self.size, self.tags)

        with PerformanceTimer(logger, "City generation"):
            ctx = CityContext(self.random, self.size, self.tags, self.center)
            self.context = ctx

            growth = DistrictGrowthEngine(ctx.random, ctx.tags, ctx.blocks)
            growth.build(ctx.center, ctx.size.blocks)

            TagFeatureComposer(EARLY_STAGES).apply(ctx)

            network = RoadNetworkBuilder(ctx.random, ctx.blocks)
            ctx.road_edges = network.build()
            ctx.roads = network.roads

            furnisher = SiteFurnisher(ctx.random, ctx.center, ctx.size.radius)
            ctx.buildings.extend(furnisher.place_buildings(ctx.blocks))
            ctx.props.extend(furnisher.scatter_props())
            poi_count = 5 + ctx.random.random_int(0, 10)
            ctx.pois.extend(furnisher.place_pois(ctx.blocks, poi_count))

            TagFeatureComposer(LATE_STAGES).apply(ctx)

        city = self._assemble(ctx)
        logger.info("City generated: %d blocks, %d roads, %d POIs, %d buildings",
                    city.stats.total_blocks, city.stats.total_roads,
                    city.stats.total_pois, city.stats.total_buildings)
        return city

    def _assemble(self, ctx):
        meta = CityMeta(
            self.seed,
            datetime.now(timezone.utc).isoformat(),
            GENERATOR_ID,
        )
        layout = CityLayout(
            ctx.size, self.tags, ctx.center.clone(), ctx.blocks, ctx.roads,
            ctx.water_areas, ctx.pois, ctx.walls, ctx.props, ctx.trees,
            ctx.buildings, ctx.labels,
        )
        stats = CityStats(len(ctx.blocks), len(ctx.roads), len(ctx.pois), len(ctx.buildings))
        return CityData(meta, layout, stats)


def generate_city(seed=None, size=DEFAULT_SIZE, tags=()):
    """Shortcut for CityGenerator(seed, size, tags).generate()"""
    return CityGenerator(seed, size, tags).generate()
