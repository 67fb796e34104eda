"""
Configuration constants and logging helpers for the realm builder.

This module provides:
- Generation constants (size table, world center, placement limits)
- Entity type tables used by the builders
- Logging setup and per-module logger access
- A small timing context manager for generation stages
"""

import logging
import sys
import time

# ============================================================================
# GENERATION CONSTANTS
# ============================================================================

GENERATOR_ID = "Arcane Realm Builder v1.0"

# Fixed world-space center every city grows around
CENTER_X = 400.0
CENTER_Y = 300.0

# Size name -> (min blocks, max blocks, radius)
SIZES = {
    "small": (3, 6, 150),
    "medium": (6, 12, 250),
    "large": (12, 25, 400),
}
DEFAULT_SIZE = "medium"
MAX_BLOCKS = 200
MAX_RADIUS = 800
RADIUS_PER_BLOCK = 20

# Growth
MAX_DEPTH = 8

# Walls
WALL_SCALE = 1.15

# Roads
MAIN_ROAD_LENGTH = 80
ALLEY_MAX_LENGTH = 150
EXTRA_ROAD_RATIO = 0.3

# Points of interest
POI_MIN_DISTANCE = 25
POI_MAX_ATTEMPTS = 10

# ============================================================================
# ENTITY TABLES
# ============================================================================

BUILDING_TYPES = ["residential", "commercial", "religious", "military", "governmental"]

POI_TYPES = [
    "Tavern", "Temple", "Market", "Smithy", "Stables",
    "Inn", "Keep", "Gatehouse", "Fountain", "Statue",
]

POI_ADJECTIVES = ["Old", "Golden", "Sleeping", "Red", "Blue", "Silver", "Royal", "Black", "White"]
POI_NOUNS = ["Dragon", "Lion", "Swan", "Bear", "Eagle", "Rose", "Crown", "Sword"]

TERRAIN_PROP_TYPES = ["well", "statue", "fountain", "cart", "bench", "lamp"]
TREE_SPECIES = ["oak", "pine", "maple"]


# ============================================================================
# LOGGING
# ============================================================================

LOG_FORMAT = "[%(asctime)s] - [%(name)s] - [%(levelname)s] - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level=logging.INFO):
    """
    Configure root logging to stderr.

    Only applications (the CLI) call this; library code just asks for
    loggers through get_logger().

    Args:
        level (int): Logging level for the root logger

    Returns:
        logging.Logger: The package logger
    """
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    logger = logging.getLogger("realm_builder")
    logger.debug("Logging initialized at level %s", logging.getLevelName(level))
    return logger


def get_logger(name=None):
    """
    Get a logger instance for a specific module.

    This should be called at the top of each module:
        logger = get_logger(__name__)
    """
    return logging.getLogger(name or "realm_builder")


class PerformanceTimer:
    """
    Context manager for timing and logging operation duration.

    Usage:
        with PerformanceTimer(logger, "Operation name"):
            # ... code to time ...
    """

    def __init__(self, logger, operation_name):
        self.logger = logger
        self.operation_name = operation_name
        self.start_time = None
        self.elapsed = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        self.logger.debug("Starting: %s", self.operation_name)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.elapsed = time.perf_counter() - self.start_time
        self.logger.info("Completed: %s in %.3fs", self.operation_name, self.elapsed)
        return False
