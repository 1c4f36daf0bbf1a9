from .base import CodecRegistry
from .descriptors import CodecDescriptor
from .table import DESCRIPTORS, default_registry

__all__ = ["CodecDescriptor", "CodecRegistry", "DESCRIPTORS", "default_registry"]
