# ABOUTME: Data structures for resolved mesh output
# ABOUTME: Vertices own their position, color and normal; faces are classified by vertex count

import numpy as np
from dataclasses import dataclass, field
from typing import Iterator, List


@dataclass(eq=False)
class Vertex:
    """
    Fully resolved vertex.

    Attributes:
        position: (3,) float32 array, world-space xyz
        color: (4,) uint8 array, RGBA sampled from the texture
        normal: (3,) float32 array, as declared (not normalized)
    """
    position: np.ndarray
    color: np.ndarray
    normal: np.ndarray

    def __post_init__(self):
        """Take private copies of the attribute arrays and validate shapes."""
        self.position = np.array(self.position, dtype=np.float32)
        self.color = np.array(self.color, dtype=np.uint8)
        self.normal = np.array(self.normal, dtype=np.float32)

        if self.position.shape != (3,):
            raise ValueError(f"Position must be (3,), got {self.position.shape}")
        if self.color.shape != (4,):
            raise ValueError(f"Color must be (4,) RGBA, got {self.color.shape}")
        if self.normal.shape != (3,):
            raise ValueError(f"Normal must be (3,), got {self.normal.shape}")


@dataclass(eq=False)
class Face:
    """Polygon with an ordered list of vertices. Use from_vertices() to get the right variant."""
    vertices: List[Vertex] = field(default_factory=list)

    kind = 'face'

    @staticmethod
    def from_vertices(vertices: List[Vertex]) -> 'Face':
        """Classify by vertex count: 3 -> Triangle, 4 -> Quad, anything else -> Ngon."""
        count = len(vertices)
        if count == 3:
            return Triangle(vertices)
        if count == 4:
            return Quad(vertices)
        return Ngon(vertices)

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.vertices)

    @property
    def positions(self) -> np.ndarray:
        """(N, 3) array of vertex positions."""
        return np.array([v.position for v in self.vertices], dtype=np.float32).reshape(-1, 3)

    @property
    def colors(self) -> np.ndarray:
        """(N, 4) array of vertex colors."""
        return np.array([v.color for v in self.vertices], dtype=np.uint8).reshape(-1, 4)

    @property
    def normals(self) -> np.ndarray:
        """(N, 3) array of vertex normals."""
        return np.array([v.normal for v in self.vertices], dtype=np.float32).reshape(-1, 3)

    def __repr__(self):
        return f"{type(self).__name__}({len(self.vertices)} vertices)"


@dataclass(eq=False, repr=False)
class Triangle(Face):
    kind = 'triangle'

    def __post_init__(self):
        if len(self.vertices) != 3:
            raise ValueError(f"Triangle needs exactly 3 vertices, got {len(self.vertices)}")


@dataclass(eq=False, repr=False)
class Quad(Face):
    kind = 'quad'

    def __post_init__(self):
        if len(self.vertices) != 4:
            raise ValueError(f"Quad needs exactly 4 vertices, got {len(self.vertices)}")


@dataclass(eq=False, repr=False)
class Ngon(Face):
    """Any face that is not a triangle or quad, including degenerate ones with < 3 vertices."""
    kind = 'ngon'

    def __post_init__(self):
        if len(self.vertices) in (3, 4):
            raise ValueError(
                f"{len(self.vertices)} vertices is a "
                f"{'Triangle' if len(self.vertices) == 3 else 'Quad'}, not an Ngon"
            )

    @property
    def is_degenerate(self) -> bool:
        """True when the face has fewer than 3 vertices and encloses no area."""
        return len(self.vertices) < 3
