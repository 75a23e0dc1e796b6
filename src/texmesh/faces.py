# ABOUTME: Face assembly from OBJ index groups
# ABOUTME: Resolves p/t/n tokens against attribute tables and classifies the result

from typing import Sequence, Tuple

from .errors import FormatError
from .mesh_types import Face, Vertex
from .tables import AttributeTable


def parse_index_group(token: str) -> Tuple[int, int, int]:
    """
    Split a `p/t/n` token into three 1-based indices.

    Every slot is required. Empty slots (`1//3`), missing slots (`1/2`),
    negative and non-integer values are rejected here. Zero parses, and is
    rejected by the table lookup as out of range.

    Raises:
        FormatError: If the token is not exactly three unsigned integers
    """
    fields = token.split('/')
    if len(fields) != 3:
        raise FormatError(
            f"Index group '{token}' must have 3 '/'-separated fields "
            f"(position/texcoord/normal), got {len(fields)}"
        )

    indices = []
    for slot, text in zip(('position', 'texcoord', 'normal'), fields):
        # str.isdigit() accepts non-ASCII digits int() can't always handle
        if not (text.isascii() and text.isdigit()):
            raise FormatError(
                f"Index group '{token}': {slot} index '{text}' is not a positive integer"
            )
        indices.append(int(text))

    return indices[0], indices[1], indices[2]


def assemble_face(tokens: Sequence[str],
                  positions: AttributeTable,
                  colors: AttributeTable,
                  normals: AttributeTable) -> Face:
    """
    Resolve every index group on an `f` record into a Vertex.

    Args:
        tokens: Index-group tokens following the `f` keyword
        positions: Table of declared positions
        colors: Table of colors sampled from `vt` records
        normals: Table of declared normals

    Returns:
        Triangle, Quad or Ngon depending on the number of tokens

    Raises:
        FormatError: If a token is malformed
        IndexOutOfRangeError: If a token references an entry not declared yet
    """
    vertices = []
    for token in tokens:
        p, t, n = parse_index_group(token)
        vertices.append(Vertex(
            position=positions.lookup(p),
            color=colors.lookup(t),
            normal=normals.lookup(n),
        ))

    return Face.from_vertices(vertices)
