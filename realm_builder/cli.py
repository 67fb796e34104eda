"""
Command line interface for the Realm Builder
"""
import argparse
import logging
import sys
from .config import setup_logging
from .model import CityGenerator
from .export import export_to_json


def parse_size(value):
    """Size names pass through, digit strings become block counts"""
    try:
        return int(value)
    except ValueError:
        return value


def build_parser():
    parser = argparse.ArgumentParser(description='Arcane Realm Builder - deterministic city layout generator')
    parser.add_argument('--seed', type=int, default=0,
                       help='Random seed (0 for random)')
    parser.add_argument('-s', '--size', type=parse_size, default='medium',
                       help='City size: small, medium, large or a block count (1-200)')
    parser.add_argument('-t', '--tag', dest='tags', action='append', default=[],
                       help='Feature tag, repeatable (city-walls, waterfront, docks, central-plaza, '
                            'citadel, forests, coast, lake, dry, multi-level, backdoor, chaotic, '
                            'compact, large)')
    parser.add_argument('-o', '--output', type=str, default=None,
                       help='Output JSON file (default: print to stdout)')
    parser.add_argument('--indent', type=int, default=2,
                       help='JSON indentation (default: 2)')
    parser.add_argument('-v', '--verbose', action='store_true',
                       help='Log generation stages')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        print(f"Generating city (size={args.size}, seed={args.seed or 'random'})...",
              file=sys.stderr)

        city = CityGenerator(args.seed, args.size, args.tags).generate()

        print("City generated successfully!", file=sys.stderr)
        print(f"  Blocks: {city.stats.total_blocks}", file=sys.stderr)
        print(f"  Roads: {city.stats.total_roads}", file=sys.stderr)
        print(f"  POIs: {city.stats.total_pois}", file=sys.stderr)
        print(f"  Buildings: {city.stats.total_buildings}", file=sys.stderr)
        print(f"  Seed: {city.meta.seed}", file=sys.stderr)

        json_str = export_to_json(city, args.output, args.indent)

        if args.output:
            print(f"Exported to {args.output}", file=sys.stderr)
        else:
            print(json_str)

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
