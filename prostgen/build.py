#!/usr/bin/env python3
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

from prostgen.args import CliArgs
from prostgen.errors import DescriptorSetReadError, ProstGenError
from prostgen.extern_path import ExternPath, load_all
from prostgen.protoc import (
    PROST_PLUGIN,
    TONIC_PLUGIN,
    build_protoc_cmd,
    find_plugin,
    find_protoc,
    run_protoc,
)

logger = logging.getLogger(__name__)


def configure_logging(verbosity: int) -> None:
    if verbosity > 0:
        level = logging.DEBUG
    elif verbosity < 0:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def print_externs(paths: list[ExternPath], out: TextIO | None = None) -> None:
    out = out or sys.stdout
    for p in paths:
        print(f"{p.package}\t{p.path}", file=out)


def run(argv=None):
    args = CliArgs.from_cli(argv)
    configure_logging(args.verbosity)

    try:
        extern_paths = load_all(args.external)
    except ProstGenError as e:
        cause = f": {e.__cause__}" if isinstance(e, DescriptorSetReadError) else ""
        raise SystemExit(f"{e}{cause}")

    if args.print_externs:
        print_externs(extern_paths)
        return

    for proto_file in args.proto_files:
        if not Path(proto_file).exists():
            raise SystemExit(f"--proto-file not found: {proto_file}")

    cmd = build_protoc_cmd(
        protoc=find_protoc(args.protoc),
        includes=args.include,
        proto_files=args.proto_files,
        out_dir=Path(args.out_dir),
        extern_paths=extern_paths,
        prost_plugin=find_plugin(PROST_PLUGIN, args.prost_plugin),
        tonic_plugin=find_plugin(TONIC_PLUGIN, args.tonic_plugin) if args.tonic else None,
    )
    logger.info("%d extern paths from %d sets", len(extern_paths), len(args.external))

    if args.dry_run:
        print(" ".join(map(str, cmd)))
        return

    Path(args.out_dir).mkdir(parents=True, exist_ok=True)
    run_protoc(cmd)


def main():
    run(sys.argv[1:])


if __name__ == "__main__":
    main()
