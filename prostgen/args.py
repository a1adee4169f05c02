# args.py
from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from typing import Sequence

from prostgen.errors import ArgError
from prostgen.extern_path import ExternPathSetArg


def external_arg(value: str) -> ExternPathSetArg:
    """argparse `type=` hook for --external."""
    try:
        return ExternPathSetArg.from_str(value)
    except ArgError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


@dataclass(frozen=True)
class CliArgs:
    proto_files: list[str] = field(default_factory=list)
    external: list[ExternPathSetArg] = field(default_factory=list)
    include: list[str] = field(default_factory=list)
    out_dir: str = "gen"
    protoc: str | None = None
    prost_plugin: str | None = None
    tonic: bool = False
    tonic_plugin: str | None = None
    print_externs: bool = False
    dry_run: bool = False
    verbosity: int = 0

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        p = argparse.ArgumentParser(
            prog="prostgen",
            description="protoc wrapper that reuses types already generated in other crates",
        )
        p.add_argument(
            "--proto-file",
            dest="proto_files",
            action="append",
            default=[],
            help=".proto to generate (can be specified multiple times)",
        )
        p.add_argument(
            "--external",
            action="append",
            default=[],
            type=external_arg,
            metavar="CRATE,DESCRIPTOR_SET",
            help="Crate that already contains the types of a descriptor set "
            "(can be specified multiple times)",
        )
        p.add_argument(
            "-I",
            "--include",
            action="append",
            default=[],
            help="proto include path (can be specified multiple times)",
        )
        p.add_argument("--out-dir", default="gen", help="Directory for generated .rs files")
        p.add_argument(
            "--protoc",
            default=None,
            help="Path to protoc (default: $PROTOC, then PATH)",
        )
        p.add_argument(
            "--prost-plugin",
            default=None,
            help="Path to protoc-gen-prost (default: auto-detect)",
        )
        p.add_argument(
            "--tonic", action="store_true", help="Also generate tonic gRPC services"
        )
        p.add_argument(
            "--tonic-plugin",
            default=None,
            help="Path to protoc-gen-tonic (default: auto-detect)",
        )
        p.add_argument(
            "--print-externs",
            action="store_true",
            help="Print the resolved extern paths and exit",
        )
        p.add_argument(
            "--dry-run", action="store_true", help="Print the protoc command without running it"
        )
        p.add_argument("-v", "--verbose", action="count", default=0)
        p.add_argument("-q", "--quiet", action="count", default=0)
        return p

    @classmethod
    def from_cli(cls, argv: Sequence[str] | None = None) -> "CliArgs":
        parser = cls.build_parser()
        ns = parser.parse_args(argv)
        if not ns.proto_files and not ns.print_externs:
            parser.error("--proto-file is required unless --print-externs is given")
        return cls(
            proto_files=list(ns.proto_files),
            external=list(ns.external),
            include=list(ns.include),
            out_dir=ns.out_dir,
            protoc=ns.protoc,
            prost_plugin=ns.prost_plugin,
            tonic=ns.tonic,
            tonic_plugin=ns.tonic_plugin,
            print_externs=ns.print_externs,
            dry_run=ns.dry_run,
            verbosity=ns.verbose - ns.quiet,
        )
