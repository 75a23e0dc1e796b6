# ABOUTME: Configuration dataclass for mesh loading
# ABOUTME: Validates user options and provides defaults

import codecs
from dataclasses import dataclass


# Behaviour when a texture coordinate lands exactly on the far edge (u or v == 1.0)
EDGE_POLICIES = {'clamp', 'strict'}


@dataclass
class LoaderConfig:
    """Options controlling how meshes, materials and textures are read."""

    edge_policy: str = 'clamp'  # 'clamp' to last pixel, or 'strict' to raise
    flip_v: bool = False  # Sample row (1 - v) instead of v
    encoding: str = 'utf-8'  # Text encoding of mesh and material files

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.edge_policy not in EDGE_POLICIES:
            raise ValueError(
                f"Invalid edge policy: {self.edge_policy}\n"
                f"Supported: {sorted(EDGE_POLICIES)}"
            )

        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"Unknown text encoding: {self.encoding}")

        self.flip_v = bool(self.flip_v)
