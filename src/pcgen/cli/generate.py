#!/usr/bin/env python3
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

from pydantic import ValidationError

from pcgen.core.capi.config import CApiConfig
from pcgen.core.formatting import format_validation_errors
from pcgen.core.install.paths import InstallOverrides, InstallPaths
from pcgen.core.pkgconfig.document import PkgConfig

logger = logging.getLogger(__name__)


def main(args, config: Dict[str, Any]) -> int:
    try:
        capi_path = Path(args.capi_config).resolve()

        # 1) Load the C-API descriptor
        try:
            capi = CApiConfig.from_file(capi_path)
        except ValidationError as ve:
            print(f"Invalid C-API config {capi_path.name}:")
            for msg in format_validation_errors(ve):
                print(f"  - {msg}")
            return 1

        # 2) Resolve install paths; only explicit dirs override the placeholders
        install_paths = InstallPaths.from_prefix(
            args.prefix or config["prefix"],
            includedir=args.includedir,
            libdir=args.libdir,
        )
        overrides = InstallOverrides.from_args(args)
        name = args.name or capi.header.name

        # 3) Build and customize the document
        pc = PkgConfig.from_install_paths(name, install_paths, overrides, capi)
        if args.description is not None:
            pc.set_description(args.description)
        for lib in args.lib or []:
            pc.add_lib(lib)
        for lib in args.lib_private or []:
            pc.add_lib_private(lib)
        for flag in args.cflag or []:
            pc.add_cflag(flag)
        for pkg in args.requires or []:
            pc.add_requires(pkg)
        for pkg in args.requires_private or []:
            pc.add_requires_private(pkg)
        for pkg in args.conflicts or []:
            pc.add_conflict(pkg)

        # 4) Emit
        if args.stdout:
            print(pc.render(), end="")
            return 0

        output_dir = Path(args.output_dir or config["output_dir"])
        written = pc.write(output_dir)
        print(f"Generated {capi_path.name} → {written}")
        return 0

    except (FileNotFoundError, ValueError, OSError) as e:
        logger.debug("generate failed", exc_info=True)
        print(f"Error generating pkg-config file:\n  {e}")
        return 1


def register(subparser):
    parser = subparser.add_parser(
        "generate",
        help="Generate a .pc file from a C-API config (YAML or JSON)."
    )
    parser.add_argument("capi_config", help="Path to the C-API config file.")
    parser.add_argument("--name", help="Header subdirectory name (defaults to header.name).")
    parser.add_argument("--prefix", help="Installation prefix (defaults to config 'prefix').")
    parser.add_argument("--includedir", help="Explicit include dir; relative paths join the prefix.")
    parser.add_argument("--libdir", help="Explicit lib dir; relative paths join the prefix.")
    parser.add_argument("--output-dir", help="Directory for the .pc file (defaults to config 'output_dir').")
    parser.add_argument("--stdout", action="store_true", help="Print the .pc text instead of writing it.")
    parser.add_argument("--description", help="Override the package description.")
    parser.add_argument("--lib", action="append", help="Extra linker flag, e.g. --lib=-lm (repeatable).")
    parser.add_argument("--lib-private", action="append", help="Extra private linker flag, e.g. --lib-private=-lpthread (repeatable).")
    parser.add_argument("--cflag", action="append", help="Extra compiler flag, e.g. --cflag=-DFOO (repeatable).")
    parser.add_argument("--requires", action="append", help="Required package (repeatable).")
    parser.add_argument("--requires-private", action="append", help="Privately required package (repeatable).")
    parser.add_argument("--conflicts", action="append", help="Conflicting package (repeatable).")
    parser.set_defaults(func=main)
