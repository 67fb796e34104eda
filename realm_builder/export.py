"""
JSON export functionality
"""

import json

from .config import DEFAULT_SIZE
from .model import CityGenerator


def export_to_json(city, filename=None, indent=2):
    """
    Export generated city data to JSON

    Args:
        city: CityData instance to export
        filename: Optional filename to save to. If None, returns JSON string
        indent: JSON indentation (default 2)

    Returns:
        JSON string if filename is None, otherwise None
    """
    json_str = json.dumps(city.to_dict(), indent=indent)

    if filename:
        with open(filename, "w", encoding="utf-8") as f:
            f.write(json_str)
        return None
    else:
        return json_str


def generate_and_export(seed=None, size=DEFAULT_SIZE, tags=(), filename=None, indent=2):
    """
    Generate a city and export to JSON

    Args:
        seed: Random seed (None or 0 for a random one)
        size: "small", "medium", "large" or a block count
        tags: Feature tags
        filename: Optional filename to save to
        indent: JSON indentation

    Returns:
        CityData instance and JSON string (if filename is None)
    """
    city = CityGenerator(seed, size, tags).generate()
    json_str = export_to_json(city, filename, indent)

    if filename:
        return city
    else:
        return city, json_str
