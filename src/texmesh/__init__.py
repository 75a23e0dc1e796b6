# ABOUTME: Package initialization for texmesh
# ABOUTME: Exports the OBJ parsing entry point, data types and errors

from .config import LoaderConfig
from .errors import (
    FormatError,
    ImageDecodeError,
    IndexOutOfRangeError,
    MeshIOError,
    MeshParseError,
    SampleOutOfRangeError,
)
from .image_sampler import ImageSampler
from .mesh_types import Face, Ngon, Quad, Triangle, Vertex
from .parser import MeshParser, parse_mesh_file

__version__ = "0.1.0"

__all__ = [
    "parse_mesh_file",
    "MeshParser",
    "LoaderConfig",
    "ImageSampler",
    "Vertex",
    "Face",
    "Triangle",
    "Quad",
    "Ngon",
    "MeshParseError",
    "MeshIOError",
    "ImageDecodeError",
    "FormatError",
    "IndexOutOfRangeError",
    "SampleOutOfRangeError",
]
