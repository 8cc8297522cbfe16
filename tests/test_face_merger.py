from collections import Counter

from voxconv.face_merger import merge_faces
from voxconv.model import FaceContainer, OutputFaces
from voxconv.parser import GRID_SIZE, ParsedVoxFile
from voxconv.vox_to_faces import vox_to_faces


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


def area(face):
    if face.face_mask in (0, 1):
        return face.size_x * face.size_z
    if face.face_mask in (2, 3):
        return face.size_x * face.size_y
    return face.size_y * face.size_z


def test_slab_merges_into_one_face_per_direction():
    x0, y0, z0, width, depth = 100, 128, 50, 4, 3
    voxels = {(x, y0, z): 5 for x in range(x0, x0 + width) for z in range(z0, z0 + depth)}
    merged = merge_faces(vox_to_faces(make_parsed(voxels)))
    got = {f.face_mask: (f.x, f.y, f.z, f.size_x, f.size_y, f.size_z) for f in merged.faces}
    assert len(merged.faces) == 6
    assert got == {
        0: (x0, y0, z0, width, 0, depth),
        1: (x0, y0 + 1, z0, width, 0, depth),
        2: (x0, y0, z0, width, 1, 0),
        3: (x0, y0, z0 + depth - 1, width, 1, 1),
        4: (x0 + width, y0, z0, 0, 1, depth),
        5: (x0, y0, z0, 0, 1, depth),
    }
    assert {f.vox for f in merged.faces} == {5}


def test_area_is_conserved_per_direction():
    voxels = {}
    for x in range(60, 66):
        for z in range(60, 63):
            voxels[(x, 128, z)] = 1 if x < 63 else 2
    voxels[(60, 129, 60)] = 1
    voxels[(61, 129, 60)] = 1
    voxels[(60, 130, 61)] = 2
    faces = vox_to_faces(make_parsed(voxels), (), True)
    merged = merge_faces(faces)
    expected = Counter(f.face_mask for f in faces.faces)
    got = Counter()
    for face in merged.faces:
        got[face.face_mask] += area(face)
    assert got == expected
    assert len(merged.faces) < len(faces.faces)


def test_different_voxels_do_not_merge():
    voxels = {(100, 128, 128): 1, (101, 128, 128): 2}
    merged = merge_faces(vox_to_faces(make_parsed(voxels)))
    tops = [f for f in merged.faces if f.face_mask == 1]
    assert sorted((f.x, f.vox) for f in tops) == [(100, 1), (101, 2)]
    assert all(f.size_x == 1 for f in tops)


def test_ambient_mask_is_truncated():
    source = OutputFaces(faces=[FaceContainer(10, 20, 30, vox=3, ambient_mask=0xFFFFFFFF, face_mask=2)])
    merged = merge_faces(source)
    assert len(merged.faces) == 1
    assert merged.faces[0].ambient_mask == 0xFFFF


def test_bounds_are_copied():
    source = OutputFaces(
        faces=[FaceContainer(10, 20, 30, vox=3, face_mask=0)],
        min_x=1, min_y=2, min_z=3, max_x=4, max_y=5, max_z=6,
        delta_x=3, delta_y=3, delta_z=3,
    )
    merged = merge_faces(source)
    assert (merged.min_x, merged.min_y, merged.min_z) == (1, 2, 3)
    assert (merged.max_x, merged.max_y, merged.max_z) == (4, 5, 6)
    assert (merged.delta_x, merged.delta_y, merged.delta_z) == (3, 3, 3)


def test_output_grouped_by_face_id():
    voxels = {(x, 128, 128 + (x % 2)): 1 for x in range(90, 96)}
    merged = merge_faces(vox_to_faces(make_parsed(voxels)))
    masks = [f.face_mask for f in merged.faces]
    assert masks == sorted(masks)
    assert set(masks) == set(range(6))


def test_empty_input_gives_empty_output():
    assert merge_faces(OutputFaces()).faces == []