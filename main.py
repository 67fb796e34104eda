#!/usr/bin/env python3
"""
Main entry point for the Realm Builder
"""
import sys

from realm_builder.cli import main


if __name__ == '__main__':
    sys.exit(main())
