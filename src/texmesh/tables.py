# ABOUTME: Append-only attribute tables addressed by 1-based index
# ABOUTME: Holds positions, normals and sampled colors while a mesh file is scanned

import numpy as np
from typing import List

from .errors import IndexOutOfRangeError


class AttributeTable:
    """Ordered list of per-record values, looked up the way OBJ face records count (from 1)."""

    def __init__(self, name: str):
        self.name = name
        self._values: List[np.ndarray] = []

    def append(self, value: np.ndarray) -> None:
        self._values.append(value)

    def lookup(self, index: int) -> np.ndarray:
        """
        Return a copy of the value declared at 1-based position `index`.

        Raises:
            IndexOutOfRangeError: If index is < 1 or past the values declared so far
        """
        if index < 1 or index > len(self._values):
            raise IndexOutOfRangeError(
                f"{self.name} index {index} out of range "
                f"({len(self._values)} {self.name} declared so far)"
            )
        return self._values[index - 1].copy()

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self):
        return f"AttributeTable({self.name!r}, {len(self._values)} entries)"
