"""Extraction of the visible unit faces of a voxel grid."""

from __future__ import annotations

from collections.abc import Collection

from .model import EMPTY_VOXEL, MAX_FACES, FaceContainer, OutputFaces
from .parser import GRID_SIZE, ParsedVoxFile

# Positions at or beyond this coordinate are never treated as neighbours.
_EDGE = GRID_SIZE - 1
_PLANE = GRID_SIZE * GRID_SIZE
_AMBIENT_DISABLED = 0xFFFFFFFF

# Offset to the neighbouring voxel that hides each face.
FACE_NEIGHBOURS: tuple[tuple[int, int, int], ...] = (
    (0, -1, 0),
    (0, 1, 0),
    (0, 0, -1),
    (0, 0, 1),
    (1, 0, 0),
    (-1, 0, 0),
)

# For each face, for each of its four vertices: the two side voxels and the
# corner voxel that darken that vertex.
VERTEX_BORDERS: tuple[tuple[tuple[tuple[int, int, int], ...], ...], ...] = (
    (
        ((-1, -1, 0), (0, -1, -1), (-1, -1, -1)),
        ((0, -1, -1), (1, -1, 0), (1, -1, -1)),
        ((1, -1, 0), (0, -1, 1), (1, -1, 1)),
        ((0, -1, 1), (-1, -1, 0), (-1, -1, 1)),
    ),
    (
        ((1, 1, 0), (0, 1, -1), (1, 1, -1)),
        ((0, 1, -1), (-1, 1, 0), (-1, 1, -1)),
        ((-1, 1, 0), (0, 1, 1), (-1, 1, 1)),
        ((0, 1, 1), (1, 1, 0), (1, 1, 1)),
    ),
    (
        ((0, -1, -1), (-1, 0, -1), (-1, -1, -1)),
        ((-1, 0, -1), (0, 1, -1), (-1, 1, -1)),
        ((0, 1, -1), (1, 0, -1), (1, 1, -1)),
        ((1, 0, -1), (0, -1, -1), (1, -1, -1)),
    ),
    (
        ((0, -1, 1), (1, 0, 1), (1, -1, 1)),
        ((1, 0, 1), (0, 1, 1), (1, 1, 1)),
        ((0, 1, 1), (-1, 0, 1), (-1, 1, 1)),
        ((-1, 0, 1), (0, -1, 1), (-1, -1, 1)),
    ),
    (
        ((1, -1, 0), (1, 0, -1), (1, -1, -1)),
        ((1, 0, -1), (1, 1, 0), (1, 1, -1)),
        ((1, 1, 0), (1, 0, 1), (1, 1, 1)),
        ((1, 0, 1), (1, -1, 0), (1, -1, 1)),
    ),
    (
        ((-1, 0, -1), (-1, -1, 0), (-1, -1, -1)),
        ((-1, -1, 0), (-1, 0, 1), (-1, -1, 1)),
        ((-1, 0, 1), (-1, 1, 0), (-1, 1, 1)),
        ((-1, 1, 0), (-1, 0, -1), (-1, 1, -1)),
    ),
)


def _read(parsed: ParsedVoxFile, x: int, y: int, z: int) -> int:
    index = x + y * GRID_SIZE + z * _PLANE
    if not 0 <= index < len(parsed.data):
        return EMPTY_VOXEL
    return parsed.data[index]


def _occupied(parsed: ParsedVoxFile, x: int, y: int, z: int, offset: tuple[int, int, int]) -> bool:
    """Whether the voxel at an offset counts as present.

    The x test deliberately checks the origin rather than the shifted
    position, so a neighbour at x - 1 of column 0 reads the neighbouring row.
    """
    dx, dy, dz = offset
    x_pos, y_pos, z_pos = x + dx, y + dy, z + dz
    if x < 0 or x_pos >= _EDGE:
        return False
    if y_pos < 0 or y_pos >= _EDGE:
        return False
    if z_pos < 0 or z_pos >= _EDGE:
        return False
    return _read(parsed, x_pos, y_pos, z_pos) != EMPTY_VOXEL


def neighbour_mask(parsed: ParsedVoxFile, x: int, y: int, z: int) -> int:
    """Bit mask of the faces of a voxel that are covered by a neighbour."""
    mask = 0
    for face_id, offset in enumerate(FACE_NEIGHBOURS):
        if _occupied(parsed, x, y, z, offset):
            mask |= 1 << face_id
    return mask


def vertex_ambient(parsed: ParsedVoxFile, face: int, x: int, y: int, z: int) -> int:
    """Ambient occlusion of a face's four vertices, 0-3 each, one per nibble."""
    result = 0
    for vertex, (side_a, side_b, corner) in enumerate(VERTEX_BORDERS[face]):
        a = _occupied(parsed, x, y, z, side_a)
        b = _occupied(parsed, x, y, z, side_b)
        c = _occupied(parsed, x, y, z, corner)
        value = 0 if a and b else 3 - (a + b + c)
        result |= value << (vertex * 4)
    return result


def _rows(parsed: ParsedVoxFile):
    """Yield (x, y, z, voxel) for every non-empty voxel within the bounds."""
    min_x, max_x = parsed.min_x, parsed.max_x
    fast = 0 <= min_x and max_x < GRID_SIZE
    for z in range(parsed.min_z, parsed.max_z + 1):
        for y in range(parsed.min_y, parsed.max_y + 1):
            if fast and 0 <= y < GRID_SIZE and 0 <= z < GRID_SIZE:
                base = y * GRID_SIZE + z * _PLANE
                row = parsed.data[base + min_x:base + max_x + 1]
                if row.count(EMPTY_VOXEL) == len(row):
                    continue
            else:
                row = [_read(parsed, x, y, z) for x in range(min_x, max_x + 1)]
            for offset, voxel in enumerate(row):
                if voxel != EMPTY_VOXEL:
                    yield min_x + offset, y, z, voxel


def vox_to_faces(
    parsed: ParsedVoxFile,
    disabled_faces: Collection[int] = (),
    disable_ambient: bool = False,
) -> OutputFaces:
    """Produce one unit face for every visible side of every voxel.

    ``disabled_faces`` holds face ids (0-5) that are never emitted. With
    ``disable_ambient`` every face gets an all-ones ambient mask.
    """
    disabled = frozenset(disabled_faces)
    out = OutputFaces()
    min_x = min_y = min_z = 128
    max_x = max_y = max_z = 128

    for x, y, z, voxel in _rows(parsed):
        covered = neighbour_mask(parsed, x, y, z)
        for face_id in range(MAX_FACES):
            if face_id in disabled or covered & (1 << face_id):
                continue
            ambient = (
                _AMBIENT_DISABLED
                if disable_ambient
                else vertex_ambient(parsed, face_id, x, y, z)
            )
            out.faces.append(
                FaceContainer(
                    x=x & 0xFF,
                    y=y & 0xFF,
                    z=z & 0xFF,
                    vox=voxel,
                    ambient_mask=ambient,
                    face_mask=face_id,
                )
            )
        min_x, min_y, min_z = min(min_x, x), min(min_y, y), min(min_z, z)
        max_x, max_y, max_z = max(max_x, x), max(max_y, y), max(max_z, z)

    out.min_x, out.min_y, out.min_z = min_x, min_y, min_z
    out.max_x, out.max_y, out.max_z = max_x, max_y, max_z
    out.delta_x = max_x - min_x
    out.delta_y = max_y - min_y
    out.delta_z = max_z - min_z
    return out