"""
District growth - recursive, budgeted block tree
"""
import math

from .block import Block
from .config import MAX_DEPTH, get_logger
from .polygon import Polygon

logger = get_logger(__name__)


class DistrictGrowthEngine:
    """Grows a tree of irregular polygonal blocks around a central block.

    The remaining block budget is passed into grow() and handed back as its
    return value; callers continue with whatever the recursion left over.
    """

    def __init__(self, random, tags=(), blocks=None):
        self.random = random
        self.tags = frozenset(tags)
        self.blocks = blocks if blocks is not None else []

    def _add_block(self, vertices, type, depth, parent=None):
        block = Block(len(self.blocks), vertices, type, depth)
        self.blocks.append(block)
        if parent is not None:
            parent.add_child(block)
        return block

    def create_central_block(self, center):
        """Block 0: a 4-7 sided polygon with jittered angles and radii"""
        sides = 4 + self.random.random_int(0, 3)
        radius = 40 + self.random.random_int(0, 20)

        vertices = []
        for i in range(sides):
            angle = i * 2 * math.pi / sides + self.random.random_float(-0.1, 0.1)
            variance = self.random.random_float(0.8, 1.2)
            vertices.append(center.polar(radius * variance, angle))

        return self._add_block(Polygon(vertices), Block.CENTRAL, 0)

    def _child_shape(self, center):
        sides = 4 + self.random.random_int(0, 2)
        radius = 30 + self.random.random_int(0, 25)
        return Polygon([
            center.polar(radius, j * 2 * math.pi / sides + self.random.random_float(-0.2, 0.2))
            for j in range(sides)
        ])

    def _child_distance(self):
        distance = self.random.random_int(20, 60)
        if "compact" in self.tags:
            distance *= 0.7
        if "large" in self.tags:
            distance *= 1.3
        return 50 + distance

    def grow(self, parent, remaining, depth=0):
        """Grow children under parent, spending at most `remaining` blocks.

        Returns the budget left after this subtree.
        """
        if remaining <= 0 or depth > MAX_DEPTH:
            return remaining

        max_children = 3 if depth < 2 else 2
        child_count = 1 + self.random.random_int(0, max_children - 1)

        for i in range(child_count):
            if remaining <= 0:
                break

            if depth >= 4 and self.random.random() <= 0.4:
                continue

            parent_center = parent.center
            angle = i * (2 * math.pi / child_count) + self.random.random_float(-0.3, 0.3)
            if "chaotic" in self.tags:
                angle += self.random.random_float(-0.5, 0.5)
            distance = self._child_distance()

            child_center = parent_center.polar(distance, angle)
            child = self._add_block(
                self._child_shape(child_center),
                Block.DISTRICT if depth == 0 else Block.NEIGHBORHOOD,
                depth + 1,
                parent,
            )
            remaining -= 1

            growth_probability = max(0.0, 0.7 - depth * 0.1)
            if self.random.random() < growth_probability:
                remaining = self.grow(child, remaining, depth + 1)

        return remaining

    def build(self, center, budget):
        """Central block plus a grown tree; returns the unspent budget"""
        root = self.create_central_block(center)
        remaining = self.grow(root, budget, 0)
        logger.debug("Grew %d blocks (budget %s, %s unspent)", len(self.blocks), budget, remaining)
        return remaining
