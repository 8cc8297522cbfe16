"""Greedy merging of coplanar unit faces into larger rectangles."""

from __future__ import annotations

from collections import defaultdict

from .model import MAX_FACES, FaceContainer, OutputFaces
from .parser import GRID_SIZE

_Key = tuple[int, int]
_Cell = tuple[int, int]


def _plane_coords(face_id: int, face: FaceContainer) -> tuple[int, int, int]:
    """Return (slice, a, b) for a face in the plane its normal defines."""
    if face_id in (0, 1):
        return face.y, face.x, face.z
    if face_id in (2, 3):
        return face.z, face.x, face.y
    return face.x, face.z, face.y


def _commit(
    face_id: int, grid_slice: int, key: _Key, min_a: int, min_b: int, max_a: int, max_b: int
) -> FaceContainer:
    vox, ambient = key
    span_a = max_a - min_a
    span_b = max_b - min_b
    if face_id in (0, 1):
        x, y, z = min_a, grid_slice + (1 if face_id == 1 else 0), min_b
        size = (span_a, 0, span_b)
    elif face_id in (2, 3):
        x, y, z = min_a, min_b, grid_slice
        size = (span_a, span_b, 1 if face_id == 3 else 0)
    else:
        x, y, z = grid_slice + (1 if face_id == 4 else 0), min_b, min_a
        size = (0, span_b, span_a)
    return FaceContainer(
        x=x & 0xFF,
        y=y & 0xFF,
        z=z & 0xFF,
        size_x=size[0] & 0xFF,
        size_y=size[1] & 0xFF,
        size_z=size[2] & 0xFF,
        vox=vox,
        ambient_mask=ambient,
        face_mask=face_id,
    )


def _merge_slice(face_id: int, grid_slice: int, cells: dict[_Cell, _Key]) -> list[FaceContainer]:
    merged = []
    for start in sorted(cells, key=lambda cell: (cell[1], cell[0])):
        key = cells.get(start)
        if key is None:
            continue
        a, b = start

        max_a = a
        while max_a + 1 < GRID_SIZE and cells.get((max_a + 1, b)) == key:
            max_a += 1

        max_b = b
        while max_b + 1 < GRID_SIZE and all(
            cells.get((col, max_b + 1)) == key for col in range(a, max_a + 1)
        ):
            max_b += 1

        for row in range(b, max_b + 1):
            for col in range(a, max_a + 1):
                del cells[(col, row)]

        merged.append(_commit(face_id, grid_slice, key, a, b, max_a + 1, max_b + 1))
    return merged


def merge_faces(faces: OutputFaces) -> OutputFaces:
    """Merge adjacent faces sharing a direction, voxel and ambient mask.

    Faces are emitted grouped by face id, then slice, scanning each slice row
    by row. Ambient masks are kept to their low 16 bits.
    """
    out = OutputFaces()
    for face_id in range(MAX_FACES):
        slices: dict[int, dict[_Cell, _Key]] = defaultdict(dict)
        for face in faces.faces:
            if face.face_mask != face_id:
                continue
            grid_slice, a, b = _plane_coords(face_id, face)
            vox = face.vox & 0xFFFF
            if vox == 0xFFFF and face.ambient_mask == 0:
                # Indistinguishable from an empty cell in the packed layout.
                slices[grid_slice].pop((a, b), None)
                continue
            slices[grid_slice][(a, b)] = (vox, face.ambient_mask & 0xFFFF)
        for grid_slice in sorted(slices):
            out.faces.extend(_merge_slice(face_id, grid_slice, slices[grid_slice]))

    out.delta_x, out.delta_y, out.delta_z = faces.delta_x, faces.delta_y, faces.delta_z
    out.min_x, out.min_y, out.min_z = faces.min_x, faces.min_y, faces.min_z
    out.max_x, out.max_y, out.max_z = faces.max_x, faces.max_y, faces.max_z
    return out