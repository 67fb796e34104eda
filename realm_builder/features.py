"""
Tag-driven optional stages, applied in a fixed order
"""
import math

from .block import Block
from .config import TREE_SPECIES, get_logger
from .curtain_wall import CurtainWall
from .entities import Label, PointOfInterest, Prop, Tree
from .furnishing import describe_poi
from .polygon import Polygon
from .water import WaterFeatureBuilder

logger = get_logger(__name__)


def build_walls(ctx):
    ctx.wall = CurtainWall(ctx.random, ctx.blocks)
    ctx.pois.extend(ctx.wall.build_gates())


def build_waterfront(ctx):
    builder = WaterFeatureBuilder(ctx.random, ctx.center, ctx.size.radius)
    area, docks = builder.waterfront()
    ctx.water_areas.append(area)
    ctx.props.extend(docks)


def create_central_plaza(ctx):
    """Fountain and plaza label on the central block"""
    if len(ctx.blocks) == 0:
        return

    center = ctx.blocks[0].center
    plaza_radius = 25 + ctx.random.random_int(0, 15)

    ctx.pois.append(PointOfInterest(
        center.x, center.y, "Fountain", "Central Fountain", "fountain",
        describe_poi("Fountain", "Central Fountain")
    ))
    ctx.labels.append(Label(center.x, center.y + plaza_radius + 10, "Central Plaza", 14))


def create_citadel(ctx):
    """Hexagonal citadel block with a keep; neither gets ordinary buildings"""
    radius = 40 + ctx.random.random_int(0, 20)
    shape = Polygon.regular(6, radius)
    shape.offset(ctx.center)

    ctx.blocks.append(Block(len(ctx.blocks), shape, Block.CITADEL, 0))
    ctx.props.append(Prop(ctx.center.x, ctx.center.y, "keep", 25, 40, 0))


def plant_forest(ctx):
    """50-150 trees in an annulus around the city"""
    forest_radius = ctx.size.radius * 1.2
    count = 50 + ctx.random.random_int(0, 100)

    for _ in range(count):
        angle = ctx.random.random_float(0, math.pi * 2)
        distance = ctx.random.random_float(forest_radius * 0.8, forest_radius)
        position = ctx.center.polar(distance, angle)
        size = ctx.random.random_float(0.8, 1.5)
        ctx.trees.append(Tree(position.x, position.y, size, ctx.random.pick(TREE_SPECIES)))


def build_water_body(ctx):
    builder = WaterFeatureBuilder(ctx.random, ctx.center, ctx.size.radius)
    ctx.water_areas.append(builder.water_body(lake=ctx.has("lake")))


def add_elevation(ctx):
    """Elevation 0-3 on every block and five stair props"""
    for block in ctx.blocks:
        block.elevation = ctx.random.random_int(0, 3)

    for _ in range(5):
        center = ctx.random.pick(ctx.blocks).center
        rotation = ctx.random.random_float(0, math.pi * 2)
        ctx.props.append(Prop(center.x, center.y, "stairs", 15, 8, rotation))


def add_secret_entrance(ctx):
    if ctx.wall is None:
        return
    poi = ctx.wall.secret_entrance()
    if poi is not None:
        ctx.pois.append(poi)


def make_chaotic(ctx):
    """Jitter block outlines and strew rubble"""
    for block in ctx.blocks:
        if block.type == Block.CITADEL:
            continue
        for v in block.vertices:
            dx = ctx.random.random_float(-10, 10)
            dy = ctx.random.random_float(-10, 10)
            v.offset(dx, dy)

    count = 10 + ctx.random.random_int(0, 20)
    for _ in range(count):
        angle = ctx.random.random_float(0, math.pi * 2)
        distance = ctx.random.random_float(30, ctx.size.radius)
        position = ctx.center.polar(distance, angle)
        width = 5 + ctx.random.random_int(0, 10)
        height = 5 + ctx.random.random_int(0, 10)
        rotation = ctx.random.random_float(0, math.pi * 2)
        ctx.props.append(Prop(position.x, position.y, "rubble", width, height, rotation))


def dry_out(ctx):
    ctx.water_areas = []


class Stage:
    """Optional stage that runs when any of its tags is present"""

    def __init__(self, name, tags, apply):
        self.name = name
        self.tags = tuple(tags)
        self.apply = apply

    def __repr__(self):
        return f"Stage({self.name})"

    def applies(self, ctx):
        return ctx.has(*self.tags)


# Before roads and furnishing
EARLY_STAGES = (
    Stage("walls", ["city-walls"], build_walls),
    Stage("waterfront", ["waterfront", "docks"], build_waterfront),
    Stage("central-plaza", ["central-plaza"], create_central_plaza),
    Stage("citadel", ["citadel"], create_citadel),
    Stage("forests", ["forests"], plant_forest),
    Stage("water-body", ["coast", "lake"], build_water_body),
    Stage("multi-level", ["multi-level"], add_elevation),
)

# After roads and furnishing; dry must stay last
LATE_STAGES = (
    Stage("backdoor", ["backdoor"], add_secret_entrance),
    Stage("chaotic", ["chaotic"], make_chaotic),
    Stage("dry", ["dry"], dry_out),
)


class TagFeatureComposer:
    """Runs an ordered list of stages against a city context"""

    def __init__(self, stages):
        self.stages = tuple(stages)

    def apply(self, ctx):
        """Apply every stage whose tags match; returns the names applied"""
        applied = []
        for stage in self.stages:
            if stage.applies(ctx):
                stage.apply(ctx)
                applied.append(stage.name)
                logger.debug("Applied stage %s", stage.name)
        return applied
