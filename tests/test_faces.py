# ABOUTME: Tests for attribute tables, index-group parsing and face classification
# ABOUTME: Validates 1-based lookups and the Triangle/Quad/Ngon rule

import pytest
import numpy as np
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from texmesh.errors import FormatError, IndexOutOfRangeError
from texmesh.faces import assemble_face, parse_index_group
from texmesh.mesh_types import Face, Ngon, Quad, Triangle, Vertex
from texmesh.tables import AttributeTable


@pytest.fixture
def tables():
    """Five positions, two colors, two normals."""
    positions = AttributeTable('positions')
    for i in range(5):
        positions.append(np.array([i, i * 2, i * 3], dtype=np.float32))

    colors = AttributeTable('colors')
    colors.append(np.array([255, 0, 0, 255], dtype=np.uint8))
    colors.append(np.array([0, 255, 0, 128], dtype=np.uint8))

    normals = AttributeTable('normals')
    normals.append(np.array([0, 0, 1], dtype=np.float32))
    normals.append(np.array([0, 3, 0], dtype=np.float32))

    return positions, colors, normals


def make_vertex(x=0.0):
    return Vertex(position=[x, 0, 0], color=[0, 0, 0, 255], normal=[0, 0, 1])


class TestAttributeTable:

    def test_lookup_is_one_based(self):
        table = AttributeTable('positions')
        table.append(np.array([1, 2, 3], dtype=np.float32))
        table.append(np.array([4, 5, 6], dtype=np.float32))

        assert len(table) == 2
        np.testing.assert_array_equal(table.lookup(1), [1, 2, 3])
        np.testing.assert_array_equal(table.lookup(2), [4, 5, 6])

    @pytest.mark.parametrize("index", [0, -1, 3])
    def test_lookup_out_of_range(self, index):
        table = AttributeTable('normals')
        table.append(np.zeros(3, dtype=np.float32))
        table.append(np.zeros(3, dtype=np.float32))

        with pytest.raises(IndexOutOfRangeError, match=f"normals index {index} out of range"):
            table.lookup(index)

    def test_lookup_on_empty_table(self):
        with pytest.raises(IndexOutOfRangeError, match="0 colors declared"):
            AttributeTable('colors').lookup(1)

    def test_lookup_returns_copy(self):
        table = AttributeTable('positions')
        table.append(np.array([1, 2, 3], dtype=np.float32))

        value = table.lookup(1)
        value[0] = 99

        np.testing.assert_array_equal(table.lookup(1), [1, 2, 3])


class TestParseIndexGroup:

    def test_valid(self):
        assert parse_index_group("1/2/3") == (1, 2, 3)
        assert parse_index_group("10/200/3000") == (10, 200, 3000)

    def test_zero_parses(self):
        """Zero is rejected later by the table lookup, not here."""
        assert parse_index_group("0/1/1") == (0, 1, 1)

    @pytest.mark.parametrize("token", [
        "1//1",      # empty texcoord slot
        "1/2",       # missing normal
        "1",         # position only
        "1/2/3/4",   # too many slots
        "-1/2/3",    # relative indices are not supported
        "1/a/3",
        "1.5/2/3",
        "/2/3",
        "+1/2/3",
    ])
    def test_malformed(self, token):
        with pytest.raises(FormatError, match="Index group"):
            parse_index_group(token)


class TestFaceClassification:

    @pytest.mark.parametrize("count, expected", [
        (0, Ngon),
        (1, Ngon),
        (2, Ngon),
        (3, Triangle),
        (4, Quad),
        (5, Ngon),
        (8, Ngon),
    ])
    def test_from_vertices(self, count, expected):
        face = Face.from_vertices([make_vertex(i) for i in range(count)])
        assert type(face) is expected
        assert len(face) == count

    def test_kind(self):
        assert Face.from_vertices([make_vertex() for _ in range(3)]).kind == 'triangle'
        assert Face.from_vertices([make_vertex() for _ in range(4)]).kind == 'quad'
        assert Face.from_vertices([make_vertex() for _ in range(6)]).kind == 'ngon'

    def test_degenerate_ngon(self):
        assert Ngon([make_vertex(), make_vertex()]).is_degenerate
        assert Ngon([]).is_degenerate
        assert not Ngon([make_vertex() for _ in range(5)]).is_degenerate

    def test_variants_enforce_vertex_count(self):
        with pytest.raises(ValueError):
            Triangle([make_vertex() for _ in range(4)])
        with pytest.raises(ValueError):
            Quad([make_vertex() for _ in range(3)])
        with pytest.raises(ValueError):
            Ngon([make_vertex() for _ in range(3)])

    def test_attribute_arrays(self):
        face = Face.from_vertices([make_vertex(i) for i in range(4)])
        assert face.positions.shape == (4, 3)
        assert face.colors.shape == (4, 4)
        assert face.normals.shape == (4, 3)
        np.testing.assert_array_equal(face.positions[:, 0], [0, 1, 2, 3])

    def test_vertex_validates_shapes(self):
        with pytest.raises(ValueError, match="Color"):
            Vertex(position=[0, 0, 0], color=[0, 0, 0], normal=[0, 0, 1])
        with pytest.raises(ValueError, match="Position"):
            Vertex(position=[0, 0], color=[0, 0, 0, 0], normal=[0, 0, 1])


class TestAssembleFace:

    def test_resolves_attributes(self, tables):
        positions, colors, normals = tables

        face = assemble_face(["1/1/1", "3/2/2", "5/1/2"], positions, colors, normals)

        assert isinstance(face, Triangle)
        np.testing.assert_array_equal(face.vertices[0].position, [0, 0, 0])
        np.testing.assert_array_equal(face.vertices[1].position, [2, 4, 6])
        np.testing.assert_array_equal(face.vertices[2].position, [4, 8, 12])
        np.testing.assert_array_equal(face.vertices[1].color, [0, 255, 0, 128])
        np.testing.assert_array_equal(face.vertices[2].normal, [0, 3, 0])

    def test_five_groups_make_ngon(self, tables):
        face = assemble_face(["1/1/1", "2/1/1", "3/1/1", "4/1/1", "5/1/1"], *tables)
        assert isinstance(face, Ngon)
        assert len(face) == 5
        assert not face.is_degenerate

    def test_no_groups_make_degenerate_ngon(self, tables):
        face = assemble_face([], *tables)
        assert isinstance(face, Ngon)
        assert face.is_degenerate

    def test_vertices_do_not_share_arrays(self, tables):
        positions, colors, normals = tables
        face = assemble_face(["1/1/1", "1/1/1", "2/1/1"], positions, colors, normals)

        face.vertices[0].position[0] = 42.0
        face.vertices[0].color[0] = 7

        np.testing.assert_array_equal(face.vertices[1].position, [0, 0, 0])
        np.testing.assert_array_equal(face.vertices[1].color, [255, 0, 0, 255])
        np.testing.assert_array_equal(positions.lookup(1), [0, 0, 0])

    def test_index_beyond_table(self, tables):
        with pytest.raises(IndexOutOfRangeError, match="colors index 3"):
            assemble_face(["1/1/1", "2/3/1", "3/1/1"], *tables)

    def test_zero_index(self, tables):
        with pytest.raises(IndexOutOfRangeError, match="positions index 0"):
            assemble_face(["0/1/1", "2/1/1", "3/1/1"], *tables)
