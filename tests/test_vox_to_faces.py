from voxconv.model import EMPTY_VOXEL, MAX_FACES
from voxconv.parser import GRID_SIZE, ParsedVoxFile
from voxconv.vox_to_faces import (
    FACE_NEIGHBOURS,
    neighbour_mask,
    vertex_ambient,
    vox_to_faces,
)


def make_parsed(voxels):
    parsed = ParsedVoxFile()
    for (x, y, z), v in voxels.items():
        parsed.data[x + y * GRID_SIZE + z * GRID_SIZE * GRID_SIZE] = v
    xs = [p[0] for p in voxels]
    ys = [p[1] for p in voxels]
    zs = [p[2] for p in voxels]
    parsed.min_x, parsed.max_x = min(xs), max(xs)
    parsed.min_y, parsed.max_y = min(ys), max(ys)
    parsed.min_z, parsed.max_z = min(zs), max(zs)
    return parsed


def test_single_voxel_produces_all_faces():
    parsed = make_parsed({(128, 128, 128): 7})
    out = vox_to_faces(parsed)
    assert [f.face_mask for f in out.faces] == list(range(MAX_FACES))
    for face in out.faces:
        assert (face.x, face.y, face.z) == (128, 128, 128)
        assert (face.size_x, face.size_y, face.size_z) == (1, 1, 1)
        assert face.vox == 7
        assert face.ambient_mask == 0x3333
        assert face.anim == 0
    assert (out.min_x, out.max_x) == (128, 128)
    assert (out.delta_x, out.delta_y, out.delta_z) == (0, 0, 0)


def test_adjacent_voxels_hide_shared_faces():
    parsed = make_parsed({(100, 128, 128): 1, (101, 128, 128): 1})
    assert neighbour_mask(parsed, 100, 128, 128) == 1 << 4
    assert neighbour_mask(parsed, 101, 128, 128) == 1 << 5
    out = vox_to_faces(parsed)
    assert len(out.faces) == 2 * MAX_FACES - 2
    assert not any(f.x == 100 and f.face_mask == 4 for f in out.faces)
    assert not any(f.x == 101 and f.face_mask == 5 for f in out.faces)


def test_disabled_faces_are_skipped():
    parsed = make_parsed({(128, 128, 128): 1})
    out = vox_to_faces(parsed, {0, 1}, False)
    assert sorted(f.face_mask for f in out.faces) == [2, 3, 4, 5]


def test_disable_ambient_sets_all_bits():
    parsed = make_parsed({(128, 128, 128): 1})
    out = vox_to_faces(parsed, (), True)
    assert {f.ambient_mask for f in out.faces} == {0xFFFFFFFF}


def test_vertex_ambient_with_diagonal_neighbour():
    parsed = make_parsed({(128, 128, 128): 1, (129, 129, 128): 1})
    assert vertex_ambient(parsed, 1, 128, 128, 128) == 0x2332
    for face in range(MAX_FACES):
        value = vertex_ambient(parsed, face, 128, 128, 128)
        assert all((value >> (4 * v)) & 0xF <= 3 for v in range(4))


def test_last_grid_position_is_never_a_neighbour():
    parsed = make_parsed({(254, 128, 128): 1, (255, 128, 128): 1})
    assert neighbour_mask(parsed, 254, 128, 128) == 0


def test_cube_faces_face_empty_space():
    voxels = {(x, y, z): 3 for x in range(50, 53) for y in range(60, 63) for z in range(70, 73)}
    parsed = make_parsed(voxels)
    out = vox_to_faces(parsed)
    assert len(out.faces) == 9 * MAX_FACES
    for face in out.faces:
        dx, dy, dz = FACE_NEIGHBOURS[face.face_mask]
        assert (face.x + dx, face.y + dy, face.z + dz) not in voxels


def test_bounds_start_from_grid_centre():
    parsed = make_parsed({(130, 140, 150): 1})
    out = vox_to_faces(parsed)
    assert (out.min_x, out.min_y, out.min_z) == (128, 128, 128)
    assert (out.max_x, out.max_y, out.max_z) == (130, 140, 150)
    assert out.delta_z == out.max_z - out.min_z


def test_empty_grid_gives_no_faces():
    parsed = make_parsed({(128, 128, 128): EMPTY_VOXEL})
    out = vox_to_faces(parsed)
    assert out.faces == []