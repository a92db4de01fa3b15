#!/usr/bin/env python3
"""Validate a match scorer configuration file (default: config.example.yaml)."""

import sys
from pathlib import Path

from jobboard.config import validate_config_file


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    config_file = Path(args[0]) if args else Path("config.example.yaml")

    if not config_file.exists():
        print(f"✗ {config_file} not found")
        return 1

    return 0 if validate_config_file(config_file) else 1


if __name__ == "__main__":
    sys.exit(main())
