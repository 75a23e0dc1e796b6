# ABOUTME: Nearest-pixel texture sampler over a decoded RGBA image
# ABOUTME: Converts normalized UV coordinates into RGBA byte colors with explicit bounds checks

import logging
import numpy as np
from pathlib import Path
from typing import Optional, Tuple, Union

from PIL import Image

from .config import LoaderConfig
from .errors import ImageDecodeError, SampleOutOfRangeError
from .utils.logging_utils import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


class ImageSampler:
    """Wraps an (H, W, 4) uint8 RGBA pixel grid and answers nearest-pixel lookups."""

    def __init__(self, pixels: np.ndarray, config: Optional[LoaderConfig] = None):
        """
        Initialize sampler.

        Args:
            pixels: (H, W, 4) uint8 RGBA array, row 0 is the top of the image
            config: Loader options (edge policy, V flip). Defaults if None.
        """
        pixels = np.asarray(pixels)
        if pixels.ndim != 3 or pixels.shape[2] != 4:
            raise ValueError(f"Pixels must be (H, W, 4) RGBA, got {pixels.shape}")
        if pixels.dtype != np.uint8:
            raise ValueError(f"Pixels must be uint8, got {pixels.dtype}")

        self.pixels = pixels
        self.config = config or LoaderConfig()

    @classmethod
    def empty(cls, config: Optional[LoaderConfig] = None) -> 'ImageSampler':
        """0x0 image. Every sample against it fails."""
        return cls(np.zeros((0, 0, 4), dtype=np.uint8), config)

    @classmethod
    def from_file(cls, path: Union[str, Path],
                  config: Optional[LoaderConfig] = None) -> 'ImageSampler':
        """
        Decode an image file into RGBA pixels.

        Args:
            path: Image file path (any format Pillow can read)
            config: Loader options

        Returns:
            Sampler over the decoded image

        Raises:
            ImageDecodeError: If the file is missing, unreadable, or not a decodable image
        """
        path = Path(path)
        try:
            with Image.open(path) as image:
                pixels = np.array(image.convert('RGBA'), dtype=np.uint8)
        except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as e:
            raise ImageDecodeError(f"Failed to decode texture image {path}: {e}", path=path) from e

        logger.debug("Decoded texture %s (%dx%d)", path, pixels.shape[1], pixels.shape[0])
        return cls(pixels, config)

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height), same order as PIL."""
        return self.width, self.height

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def sample(self, u: float, v: float) -> np.ndarray:
        """
        Look up the pixel at (floor(u * W), floor(v * H)).

        Args:
            u: Horizontal coordinate in [0, 1]
            v: Vertical coordinate in [0, 1]

        Returns:
            (4,) uint8 RGBA color (a copy)

        Raises:
            SampleOutOfRangeError: If the image is empty, u or v lies outside [0, 1]
                (or is NaN), or the coordinate hits the far edge under the strict policy
        """
        if self.is_empty:
            raise SampleOutOfRangeError(
                f"Cannot sample ({u}, {v}): no texture loaded (image is {self.width}x{self.height})"
            )

        # Written as a positive range check so NaN fails too
        if not (0.0 <= u <= 1.0 and 0.0 <= v <= 1.0):
            raise SampleOutOfRangeError(
                f"Texture coordinate ({u}, {v}) is outside [0, 1]"
            )

        row = 1.0 - v if self.config.flip_v else v
        x = int(u * self.width)
        y = int(row * self.height)

        # Only u or v == 1.0 exactly can land here
        if x >= self.width or y >= self.height:
            if self.config.edge_policy == 'strict':
                raise SampleOutOfRangeError(
                    f"Texture coordinate ({u}, {v}) maps to pixel ({x}, {y}), "
                    f"outside {self.width}x{self.height} image"
                )
            x = min(x, self.width - 1)
            y = min(y, self.height - 1)

        return self.pixels[y, x].copy()
