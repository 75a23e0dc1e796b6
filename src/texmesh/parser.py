# ABOUTME: OBJ mesh parser producing fully resolved, textured faces
# ABOUTME: Scans records in file order and samples vertex colors from the material texture

import logging
import numpy as np
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Union

from .config import LoaderConfig
from .errors import FormatError, MeshParseError
from .faces import assemble_face
from .image_sampler import ImageSampler
from .material import resolve_material
from .mesh_types import Face, Ngon
from .records import iter_records
from .tables import AttributeTable
from .utils.logging_utils import LOGGER_NAME, Timer


def _parse_floats(keyword: str, args: Sequence[str], count: int) -> List[float]:
    """Parse the first `count` arguments of a record as floats; extras are ignored."""
    if len(args) < count:
        raise FormatError(
            f"'{keyword}' record needs {count} values, got {len(args)}"
        )
    values = []
    for text in args[:count]:
        # float() also takes digit separators, which OBJ numbers never contain
        if '_' in text:
            raise FormatError(f"'{keyword}' record has non-numeric value '{text}'")
        try:
            values.append(float(text))
        except ValueError:
            raise FormatError(f"'{keyword}' record has non-numeric value '{text}'") from None
    return values


class MeshParser:
    """Single-use parser for one OBJ file and the material/texture it references."""

    def __init__(self, path: Union[str, Path], config: Optional[LoaderConfig] = None):
        """
        Initialize parser state.

        Args:
            path: Path to the .obj mesh file
            config: Loader options (defaults if None)
        """
        self.path = Path(path)
        self.config = config or LoaderConfig()
        self.logger = logging.getLogger(LOGGER_NAME)

        self.positions = AttributeTable('positions')
        self.normals = AttributeTable('normals')
        self.colors = AttributeTable('colors')
        self.sampler = ImageSampler.empty(self.config)
        self.faces: List[Face] = []

        self._handlers: Dict[str, Callable[[Sequence[str]], None]] = {
            'mtllib': self._handle_mtllib,
            'v': self._handle_position,
            'vn': self._handle_normal,
            'vt': self._handle_texcoord,
            'f': self._handle_face,
        }

    def parse(self) -> List[Face]:
        """
        Scan the mesh file and return its faces in declaration order.

        Raises:
            MeshParseError: On the first failing record, located at its file and line
        """
        for line_number, line, parts in iter_records(self.path, self.config.encoding):
            handler = self._handlers.get(parts[0])
            if handler is None:
                continue

            try:
                handler(parts[1:])
            except MeshParseError as e:
                e.locate(self.path, line_number, line)
                raise

        self._log_summary()
        return self.faces

    def _handle_mtllib(self, args: Sequence[str]) -> None:
        if not args:
            raise FormatError("'mtllib' record has no material filename")
        sampler = resolve_material(self.path, args[0], self.config)
        if sampler is not None:
            self.sampler = sampler

    def _handle_position(self, args: Sequence[str]) -> None:
        self.positions.append(np.array(_parse_floats('v', args, 3), dtype=np.float32))

    def _handle_normal(self, args: Sequence[str]) -> None:
        self.normals.append(np.array(_parse_floats('vn', args, 3), dtype=np.float32))

    def _handle_texcoord(self, args: Sequence[str]) -> None:
        u, v = _parse_floats('vt', args, 2)
        # Texture coordinates are not kept; only the color they point at
        self.colors.append(self.sampler.sample(u, v))

    def _handle_face(self, args: Sequence[str]) -> None:
        face = assemble_face(args, self.positions, self.colors, self.normals)
        if isinstance(face, Ngon) and face.is_degenerate:
            self.logger.warning("Degenerate face with %d vertices in %s", len(face), self.path)
        self.faces.append(face)

    def _log_summary(self) -> None:
        counts = {'triangle': 0, 'quad': 0, 'ngon': 0}
        for face in self.faces:
            counts[face.kind] += 1
        self.logger.debug(
            "Parsed %s: %d positions, %d normals, %d colors, %d faces "
            "(%d triangles, %d quads, %d ngons)",
            self.path, len(self.positions), len(self.normals), len(self.colors),
            len(self.faces), counts['triangle'], counts['quad'], counts['ngon']
        )


def parse_mesh_file(path: Union[str, Path], config: Optional[LoaderConfig] = None) -> List[Face]:
    """
    Parse an OBJ file into faces whose vertices carry position, texture color and normal.

    The material file named by `mtllib` is looked up next to the mesh, and its
    `map_Kd` texture next to the material file. Each `vt` record is sampled
    against the texture loaded at that point in the file.

    Args:
        path: Path to the .obj mesh file
        config: Loader options

    Returns:
        Faces in declaration order

    Raises:
        MeshIOError: Mesh or material file unreadable
        ImageDecodeError: Texture can't be decoded
        FormatError: Malformed record
        IndexOutOfRangeError: Face references an undeclared position/color/normal
        SampleOutOfRangeError: Texture lookup outside the loaded image
    """
    with Timer(f"Parsing {Path(path).name}"):
        return MeshParser(path, config).parse()
