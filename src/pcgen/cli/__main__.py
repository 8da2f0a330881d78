#!/usr/bin/env python3

import argparse
import sys
from typing import List, Optional

from pcgen.cli import config, generate
from pcgen.core.config import load_config
from pcgen.core.log import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pcgen", description="Generate pkg-config (.pc) files")
    subparsers = parser.add_subparsers(dest="command")

    # Register subcommands (they accept the merged config)
    generate.register(subparsers)
    config.register(subparsers)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return 1
    try:
        cfg = load_config()
        configure_logging(cfg)
    except ValueError as e:
        print(f"Error loading configuration:\n  {e}")
        return 1
    return args.func(args, cfg)


if __name__ == "__main__":
    sys.exit(main())
