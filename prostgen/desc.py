import logging
from pathlib import Path

from google.protobuf.descriptor_pb2 import FileDescriptorSet
from google.protobuf.message import DecodeError

from prostgen.errors import DescriptorSetReadError

logger = logging.getLogger(__name__)


def load_fds(desc_pb: Path) -> FileDescriptorSet:
    """Read and decode a binary FileDescriptorSet (protoc --descriptor_set_out)."""
    fds = FileDescriptorSet()
    try:
        fds.ParseFromString(Path(desc_pb).read_bytes())
    except (OSError, DecodeError) as e:
        raise DescriptorSetReadError(desc_pb) from e
    logger.debug("loaded %d file descriptors from %s", len(fds.file), desc_pb)
    return fds
