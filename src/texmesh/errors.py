# ABOUTME: Exception hierarchy for mesh and material parsing
# ABOUTME: Every error can carry the file path and line that caused it

from pathlib import Path
from typing import Optional, Union


class MeshParseError(Exception):
    """
    Base class for all parse failures.

    Attributes:
        path: File being read when the error occurred (mesh or material)
        line_number: 1-based line number within that file
        line: Raw text of the offending line
    """

    def __init__(self, message: str,
                 path: Optional[Union[str, Path]] = None,
                 line_number: Optional[int] = None,
                 line: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.path = Path(path) if path is not None else None
        self.line_number = line_number
        self.line = line

    @property
    def has_location(self) -> bool:
        return self.path is not None and self.line_number is not None

    def locate(self, path: Union[str, Path], line_number: int, line: str) -> 'MeshParseError':
        """
        Attach a location unless one is already set.

        Errors raised while reading a material file are located there first,
        so the mesh parser must not overwrite them.
        """
        if not self.has_location:
            self.path = Path(path)
            self.line_number = line_number
            self.line = line
        return self

    def __str__(self):
        if self.path is None:
            return self.message
        if self.line_number is None:
            return f"{self.path}: {self.message}"
        return f"{self.path}:{self.line_number}: {self.message}"


class MeshIOError(MeshParseError, OSError):
    """Mesh or material file could not be opened or read."""


class ImageDecodeError(MeshParseError):
    """Texture image could not be decoded."""


class FormatError(MeshParseError, ValueError):
    """Record is missing tokens, has an unparsable number, or a malformed index group."""


class IndexOutOfRangeError(MeshParseError, IndexError):
    """Face references a position, color, or normal that has not been declared (yet)."""


class SampleOutOfRangeError(MeshParseError, IndexError):
    """Texture lookup fell outside the loaded image."""
