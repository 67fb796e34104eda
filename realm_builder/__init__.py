"""
Arcane Realm Builder - deterministic fantasy city layout generator
Only includes core generation logic and JSON export functionality.
"""

__version__ = "1.0.0"

# Core classes
from .model import CityGenerator, generate_city
from .city_data import CityData
from .context import CityContext, CitySize
from .block import Block
from .polygon import Polygon
from .point import Point
from .random import SeededRandom

# Builders
from .growth import DistrictGrowthEngine
from .curtain_wall import CurtainWall
from .water import WaterFeatureBuilder
from .roads import RoadNetworkBuilder
from .furnishing import SiteFurnisher
from .features import TagFeatureComposer

# Entities
from .entities import (
    Road,
    PointOfInterest,
    Prop,
    Tree,
    Label,
    Building,
)

# Export
from .export import export_to_json, generate_and_export

__all__ = [
    # Core
    'CityGenerator',
    'generate_city',
    'CityData',
    'CityContext',
    'CitySize',
    'Block',
    'Polygon',
    'Point',
    'SeededRandom',
    # Builders
    'DistrictGrowthEngine',
    'CurtainWall',
    'WaterFeatureBuilder',
    'RoadNetworkBuilder',
    'SiteFurnisher',
    'TagFeatureComposer',
    # Entities
    'Road',
    'PointOfInterest',
    'Prop',
    'Tree',
    'Label',
    'Building',
    # Export
    'export_to_json',
    'generate_and_export',
]
