"""Resolve prost extern paths for the types in a protobuf descriptor set."""

__version__ = "0.1.0"
