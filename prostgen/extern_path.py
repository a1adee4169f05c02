# extern_path.py
"""
Compute prost `extern_path` entries for the top-level types of a descriptor set.

Only top-level messages and enums are mapped. Nesting cannot span files, so
prost resolves nested types relative to the top-level path we hand it.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from google.protobuf.descriptor_pb2 import FileDescriptorProto, FileDescriptorSet

from prostgen.desc import load_fds
from prostgen.errors import (
    BadDeclaration,
    BadFileDescriptor,
    DeclarationKind,
    EmptyFilename,
    InvalidArgument,
    InvalidCrate,
    InvalidCrateName,
    LoadError,
    MissingName,
    PackageNameUnset,
)
from prostgen.ident import to_module_name, to_upper_camel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExternPath:
    # fully qualified rust path, ::crate::module::sub::Type
    path: str
    # fully qualified protobuf name, .google.protobuf.FileDescriptorProto
    package: str

    def as_option(self) -> str:
        """protoc-gen-prost / protoc-gen-tonic option string."""
        return f"extern_path={self.package}={self.path}"


def valid_crate(name: str) -> bool:
    """A crate name is an identifier that may also contain '-'."""
    return (
        bool(name)
        and name[0].isalpha()
        and all(c.isascii() and (c.isalnum() or c in "_-") for c in name)
    )


@dataclass(frozen=True)
class CrateName:
    name: str

    @classmethod
    def parse(cls, text: str) -> "CrateName":
        if not valid_crate(text):
            raise InvalidCrateName(text)
        return cls(text)

    def for_source(self) -> str:
        """The identifier used for the crate inside rust source ('-' -> '_')."""
        return self.name.replace("-", "_")

    def __str__(self) -> str:
        return self.name


class HasName(Protocol):
    """
    Optional-name accessor shared by DescriptorProto and EnumDescriptorProto.

    Presence is read through protobuf's `HasField("name")`; nothing else of
    the declaration is used.
    """

    name: str

    def HasField(self, field_name: str) -> bool: ...


def declared_name(declaration: HasName) -> str | None:
    if not declaration.HasField("name"):
        return None
    return declaration.name


@dataclass(frozen=True)
class ExternPathBuilder:
    """Crate and package shared by every declaration of one file."""

    crate_name: CrateName
    package_name: str

    def build(self, declaration: HasName) -> ExternPath:
        name = declared_name(declaration)
        if name is None:
            raise MissingName()
        return ExternPath(
            path="::{}::{}::{}".format(
                self.crate_name.for_source(),
                to_module_name(self.package_name),
                to_upper_camel(name),
            ),
            package=f".{self.package_name}.{name}",
        )


@dataclass(frozen=True)
class ExternPathSetArg:
    """Value of one --external=crate_name,file_descriptor_path option."""

    crate_name: CrateName
    descriptor_set: Path

    @classmethod
    def from_str(cls, s: str) -> "ExternPathSetArg":
        """Only checks the text format; the file itself is not touched."""
        parts = s.split(",")
        if len(parts) != 2:
            raise InvalidArgument(s)

        crate, path = parts
        try:
            crate_name = CrateName.parse(crate)
        except InvalidCrateName:
            raise InvalidCrate(crate, s) from None

        if not path:
            raise EmptyFilename(s)

        return cls(crate_name=crate_name, descriptor_set=Path(path))

    def load(self) -> list[ExternPath]:
        fds = load_fds(self.descriptor_set)
        paths = self.get_all_paths(fds)
        logger.info(
            "%s: %d extern paths for crate %s",
            self.descriptor_set,
            len(paths),
            self.crate_name,
        )
        return paths

    def get_all_paths(self, fds: FileDescriptorSet) -> list[ExternPath]:
        out: list[ExternPath] = []
        for index, file in enumerate(fds.file):
            try:
                out.extend(self.get_paths(file))
            except LoadError as e:
                raise BadFileDescriptor(index, e) from e
        return out

    def get_paths(self, file: FileDescriptorProto) -> list[ExternPath]:
        builder = self.get_builder(file)
        out: list[ExternPath] = []
        for kind, declarations in (
            (DeclarationKind.MESSAGE, file.message_type),
            (DeclarationKind.ENUM, file.enum_type),
        ):
            for index, declaration in enumerate(declarations):
                try:
                    out.append(builder.build(declaration))
                except MissingName as e:
                    raise BadDeclaration(kind, index, str(e)) from e
        return out

    def get_builder(self, file: FileDescriptorProto) -> ExternPathBuilder:
        if not file.HasField("package"):
            raise PackageNameUnset()
        return ExternPathBuilder(crate_name=self.crate_name, package_name=file.package)


def load_all(externals: list[ExternPathSetArg]) -> list[ExternPath]:
    """Load every --external set in command-line order."""
    paths: list[ExternPath] = []
    for ext in externals:
        paths.extend(ext.load())
    return paths
