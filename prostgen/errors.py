# errors.py
from __future__ import annotations

from enum import Enum
from pathlib import Path


class ProstGenError(Exception):
    """Base class for everything prostgen raises on purpose."""


# --- --external argument ---------------------------------------------------


class ArgError(ProstGenError, ValueError):
    pass


class InvalidArgument(ArgError):
    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(
            f"Invalid argument `{argument}`: external arguments must be of the form "
            "--external=crate_name,file_descriptor_path."
        )


class InvalidCrate(ArgError):
    def __init__(self, crate_name: str, argument: str):
        self.crate_name = crate_name
        self.argument = argument
        super().__init__(
            f"crate name {crate_name!r} in argument external={argument!r} is not valid"
        )


class EmptyFilename(ArgError):
    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"An empty filename was provided in argument `{argument}`")


class InvalidCrateName(ProstGenError, ValueError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"not a valid crate name: {name!r}")


# --- descriptor structure --------------------------------------------------


class MissingName(ProstGenError):
    def __init__(self):
        super().__init__("Name was not set")


class DeclarationKind(str, Enum):
    MESSAGE = "message"
    ENUM = "enum"


class LoadError(ProstGenError):
    """A FileDescriptorProto could not be turned into extern paths."""


class PackageNameUnset(LoadError):
    def __init__(self):
        super().__init__("Package name not set")

    def __eq__(self, other):
        return isinstance(other, PackageNameUnset)

    __hash__ = LoadError.__hash__


class BadDeclaration(LoadError):
    def __init__(self, kind: DeclarationKind, index: int, details: str):
        self.kind = kind
        self.index = index
        self.details = details
        proto = "DescriptorProto" if kind is DeclarationKind.MESSAGE else "EnumDescriptorProto"
        super().__init__(f"Unable to load {proto} for {kind.value}[{index}]: {details}")

    def __eq__(self, other):
        if not isinstance(other, BadDeclaration):
            return NotImplemented
        return (self.kind, self.index, self.details) == (other.kind, other.index, other.details)

    __hash__ = LoadError.__hash__


class SetLoadError(ProstGenError):
    pass


class BadFileDescriptor(SetLoadError):
    def __init__(self, index: int, error: LoadError):
        self.index = index
        self.error = error
        super().__init__(f"Unable to load FileDescriptorProto file[{index}]: {error}")


# --- I/O -------------------------------------------------------------------


class DescriptorSetReadError(ProstGenError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Unable to load file {str(path)!r}")
