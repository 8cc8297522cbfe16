"""Serialisation of voxel mesh faces into the binary .voxMesh format."""

from __future__ import annotations

import math
import struct
from os import PathLike

from .mesh_format import FACES_VERTICES, VERTICES_POSITIONS, MeshChunkId
from .model import FaceContainer, OutputFaces

VERSION_STRING = "[VoxMeshSerializer_v0.9.0]"

_ORIGIN = 128
_UINT32 = 0xFFFFFFFF
# A chunk header is a 16-bit id followed by a 32-bit size.
_CHUNK_OVERHEAD = 2 + 4
_BOUNDS_CHUNK_SIZE = _CHUNK_OVERHEAD + 4 * 7


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _chunk_header(chunk_id: int, size: int) -> bytes:
    return struct.pack("<HI", chunk_id, size & _UINT32)


def _file_header() -> bytes:
    return struct.pack("<H", MeshChunkId.HEADER) + VERSION_STRING.encode("ascii") + b"\n"


def _face_words(face: FaceContainer) -> list[int]:
    words = []
    for vertex, corner in enumerate(FACES_VERTICES[face.face_mask]):
        cx, cy, cz = VERTICES_POSITIONS[corner]
        x = cx * face.size_x + face.x
        y = cy * face.size_y + face.y
        z = cz * face.size_z + face.z
        ambient = (face.ambient_mask >> (4 * vertex)) & 0x3
        words.append((x | y << 10 | z << 20 | ambient << 30) & _UINT32)
        words.append((face.face_mask << 29 | face.anim << 8 | face.vox) & _UINT32)
        words.append(0)
    return words


def _bounds(faces: OutputFaces) -> bytes:
    min_x, min_y, min_z = (v - _ORIGIN for v in (faces.min_x, faces.min_y, faces.min_z))
    max_x, max_y, max_z = (v - _ORIGIN for v in (faces.max_x, faces.max_y, faces.max_z))
    if not (min_x <= max_x and min_y <= max_y and min_z <= max_z):
        raise ValueError(
            "The minimum corner of the box must be less than or equal to maximum corner"
        )

    centre = [_f32((hi + lo) * 0.5) for lo, hi in ((min_x, max_x), (min_y, max_y), (min_z, max_z))]
    half = [
        _f32((hi - lo) * 0.5 + 0.5) for lo, hi in ((min_x, max_x), (min_y, max_y), (min_z, max_z))
    ]
    dot = _f32(sum(_f32(h * h) for h in half))
    radius = _f32(math.sqrt(dot))

    return _chunk_header(MeshChunkId.MESH_BOUNDS, _BOUNDS_CHUNK_SIZE) + struct.pack(
        "<7f", *centre, *half, radius
    )


def encode_mesh(faces: OutputFaces) -> bytes:
    """Encode faces as a little-endian .voxMesh byte stream.

    The stream holds the file header, one vertex buffer chunk with three
    32-bit words per vertex and four vertices per face, then a bounds chunk.
    """
    words: list[int] = []
    for face in faces.faces:
        words.extend(_face_words(face))
    parts = [
        _file_header(),
        _chunk_header(MeshChunkId.SUBMESH_M_GEOMETRY_VERTEX_BUFFER, faces.mesh_size_bytes()),
        struct.pack(f"<{len(words)}I", *words),
        _bounds(faces),
    ]
    return b"".join(parts)


def write_mesh(path: str | PathLike[str], faces: OutputFaces) -> None:
    """Write faces to a .voxMesh file."""
    data = encode_mesh(faces)
    with open(path, "wb") as handle:
        handle.write(data)