import pytest
from google.protobuf.descriptor_pb2 import (
    DescriptorProto,
    EnumDescriptorProto,
    FileDescriptorProto,
    FileDescriptorSet,
)


def make_file(package=None, messages=(), enums=()) -> FileDescriptorProto:
    """FileDescriptorProto with top-level declarations; a None name leaves the field unset."""
    fd = FileDescriptorProto(name="test.proto")
    if package is not None:
        fd.package = package
    for name in messages:
        msg = fd.message_type.add()
        if name is not None:
            msg.name = name
    for name in enums:
        enum = fd.enum_type.add()
        if name is not None:
            enum.name = name
    return fd


@pytest.fixture
def valid_file() -> FileDescriptorProto:
    return make_file("google.protobuf", messages=["SomeMessageType"], enums=["SomeEnumType"])


@pytest.fixture
def desc_path(tmp_path, valid_file):
    """A serialized descriptor set on disk, as protoc --descriptor_set_out writes it."""
    path = tmp_path / "types.desc.pb"
    path.write_bytes(FileDescriptorSet(file=[valid_file]).SerializeToString())
    return path


@pytest.fixture
def message() -> DescriptorProto:
    return DescriptorProto(name="SomeMessageType")


@pytest.fixture
def enum() -> EnumDescriptorProto:
    return EnumDescriptorProto(name="SomeEnumType")
