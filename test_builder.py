# -*- coding: utf-8 -*-
import pytest

from objmesh.errors import (
    InvalidIndexError,
    MissingNormalError,
    MissingTextureCoordError,
    UnsupportedDirectiveError,
)
from objmesh.mesh import DirectiveOutcome, MeshBuilder, OutputVertex
from objmesh.parser import (
    AttributeIndexTriple as T,
    Comment,
    Group,
    Point,
    RawPosition,
    RawTextureCoord,
    SmoothingGroup,
    parse_line,
)


def make_builder(**kw):
    """Три позиции, три UV, три нормали."""
    b = MeshBuilder(**kw)
    for line in ("v 0 0 0", "v 1 0 0", "v 0 1 0",
                 "vt 0 0", "vt 1 0", "vt 0 1",
                 "vn 0 0 1", "vn 0 1 0", "vn 1 0 0"):
        b.process_directive(parse_line(line))
    return b


# ----------------------------------------------------------------------
# resolve
# ----------------------------------------------------------------------
def test_resolve_is_one_based():
    b = make_builder()
    v = b.resolve(T(2, 3, 1))
    assert v.position == (1.0, 0.0, 0.0)
    assert v.texture_coords == (0.0, 1.0)
    assert v.normal == (0.0, 0.0, 1.0)


def test_resolve_absent_attributes_are_zero():
    b = make_builder()
    v = b.resolve(T(1))
    assert v.normal == (0.0, 0.0, 0.0)
    assert v.texture_coords == (0.0, 0.0)


@pytest.mark.parametrize("corner", [T(4, 1, 1), T(0, 1, 1), T(99, 99, 99)])
def test_resolve_position_out_of_range(corner):
    b = make_builder()
    with pytest.raises(InvalidIndexError) as info:
        b.resolve(corner)
    assert info.value.kind == "position"


def test_resolve_attribute_out_of_range():
    b = make_builder()
    with pytest.raises(InvalidIndexError) as info:
        b.resolve(T(1, 4, None))
    assert info.value.kind == "texture coordinate"
    with pytest.raises(InvalidIndexError) as info:
        b.resolve(T(1, None, 7))
    assert info.value.kind == "normal"


def test_raw_pools_are_append_only():
    b = MeshBuilder()
    b.record_position(RawPosition(1.0, 2.0, 3.0))
    first = b.resolve(T(1))
    for i in range(10):
        b.record_position(RawPosition(float(i), 0.0, 0.0))
    assert b.resolve(T(1)) == first


# ----------------------------------------------------------------------
# intern
# ----------------------------------------------------------------------
@pytest.mark.parametrize("dedup", ["scan", "hash"])
def test_intern_same_value_twice(dedup):
    b = MeshBuilder(dedup=dedup)
    v = OutputVertex((1.0, 2.0, 3.0), (0.0, 0.0, 1.0), (0.5, 0.5))
    first = b.intern(v)
    second = b.intern(OutputVertex((1.0, 2.0, 3.0), (0.0, 0.0, 1.0), (0.5, 0.5)))
    assert first == second == 0
    assert len(b.vertices) == 1
    assert b.intern(OutputVertex((1.0, 2.0, 3.0))) == 1
    assert len(b.vertices) == 2


@pytest.mark.parametrize("dedup", ["scan", "hash"])
def test_intern_is_exact(dedup):
    b = MeshBuilder(dedup=dedup)
    assert b.intern(OutputVertex((0.0, 0.0, 0.0))) == 0
    assert b.intern(OutputVertex((-0.0, 0.0, 0.0))) == 1
    assert b.intern(OutputVertex((1e-7, 0.0, 0.0))) == 2


def test_unknown_dedup_mode():
    with pytest.raises(ValueError):
        MeshBuilder(dedup="octree")


# ----------------------------------------------------------------------
# process_face
# ----------------------------------------------------------------------
def test_face_full_corners_appends_three_indices():
    b = make_builder()
    b.process_directive(parse_line("f 1/1/1 2/2/2 3/3/3"))
    assert b.indices == [0, 1, 2]
    assert len(b.vertices) == 3


def test_face_without_texture_coords_resolves_zero_uv():
    b = make_builder()
    b.process_directive(parse_line("f 1//1 2//2 3//3"))
    assert len(b.indices) == 3
    assert all(v.texture_coords == (0.0, 0.0) for v in b.vertices)


def test_face_texture_coord_mismatch():
    b = make_builder()
    with pytest.raises(MissingTextureCoordError):
        b.process_directive(parse_line("f 1/1/1 2//2 3/3/3"))
    assert b.indices == [] and b.vertices == []


def test_face_normal_mismatch():
    b = make_builder()
    with pytest.raises(MissingNormalError):
        b.process_face(T(1, 1, 1), T(2, 2, None), T(3, 3, 3))


def test_failed_face_leaves_buffers_untouched():
    b = make_builder()
    b.process_face(T(1), T(2), T(3))
    with pytest.raises(InvalidIndexError):
        b.process_face(T(1), T(2), T(9))
    assert b.indices == [0, 1, 2]
    assert len(b.vertices) == 3


def test_face_keeps_corner_order():
    b = make_builder()
    b.process_face(T(1), T(2), T(3))
    b.process_face(T(3), T(2), T(1))
    assert b.indices == [0, 1, 2, 2, 1, 0]


# ----------------------------------------------------------------------
# process_directive / process_all
# ----------------------------------------------------------------------
def test_inert_directives_are_ignored():
    b = make_builder()
    for d in (Comment("x"), Group("g"), SmoothingGroup(1), Point(T(1)),
              parse_line("l 1 2"), parse_line("usemtl m"), parse_line("o obj")):
        assert b.process_directive(d) is DirectiveOutcome.UNSUPPORTED
    assert b.points == [T(1)]
    assert b.vertices == [] and b.indices == []


def test_geometry_directives_are_applied():
    b = MeshBuilder()
    assert b.process_directive(parse_line("v 0 0 0")) is DirectiveOutcome.APPLIED
    assert b.process_directive(parse_line("vt 0 0")) is DirectiveOutcome.APPLIED
    assert b.texture_coords == [RawTextureCoord(0.0, 0.0, 1.0)]


def test_strict_mode_rejects_inert_directives():
    b = MeshBuilder(strict=True)
    with pytest.raises(UnsupportedDirectiveError):
        b.process_directive(Group("g"))


def test_process_all_stops_at_first_failure():
    b = MeshBuilder()
    directives = [parse_line(l) for l in ("v 0 0 0", "f 1 1 2", "v 1 1 1")]
    with pytest.raises(InvalidIndexError):
        b.process_all(directives)
    assert len(b.positions) == 1


@pytest.mark.parametrize("dedup", ["scan", "hash"])
def test_cube_mesh(cube_lines, dedup):
    b = MeshBuilder(dedup=dedup)
    mesh = b.process_all(parse_line(l.rstrip("\n")) for l in cube_lines)
    assert mesh.vertex_count <= 24
    assert mesh.vertex_count == 18
    assert mesh.index_count == 18
    assert all(0 <= i < mesh.vertex_count for i in mesh.indices)


def test_position_only_cube_shares_corners(cube_lines):
    lines = [l.rstrip("\n") for l in cube_lines]
    lines = [l.replace("//1", "").replace("//2", "").replace("//3", "")
              .replace("//4", "").replace("//5", "").replace("//6", "")
             if l.startswith("f ") else l for l in lines]
    mesh = MeshBuilder().process_all(parse_line(l) for l in lines)
    assert mesh.vertex_count == 8
    assert mesh.index_count == 18


def test_pool_size_independent_of_face_order(quad_lines):
    lines = [l.rstrip("\n") for l in quad_lines]
    faces = [l for l in lines if l.startswith("f ")]
    other = [l for l in lines if not l.startswith("f ")]

    forward = MeshBuilder().process_all(parse_line(l) for l in other + faces)
    backward = MeshBuilder().process_all(parse_line(l) for l in other + faces[::-1])

    distinct = {c for l in faces for c in parse_line(l).corners}
    assert forward.vertex_count == backward.vertex_count == len(distinct) == 4
    assert forward.index_count == backward.index_count == 6
    assert set(forward.vertices) == set(backward.vertices)
