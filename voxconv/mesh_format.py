"""Constants of the binary voxel mesh format: chunk ids and face geometry."""

from __future__ import annotations

from enum import IntEnum

from .model import MAX_FACES


class MeshChunkId(IntEnum):
    """Identifiers of the chunks that make up a mesh stream."""

    HEADER = 0x1000
    MESH = 0x3000
    HASH_FOR_CACHES = 0x3200
    SUBMESH = 0x4000
    SUBMESH_OPERATION = 0x4010
    SUBMESH_BONE_ASSIGNMENT = 0x4100
    SUBMESH_TEXTURE_ALIAS = 0x4200
    SUBMESH_LOD = 0x4300
    SUBMESH_LOD_OPERATION = 0x4310
    SUBMESH_INDEX_BUFFER = 0x4320
    SUBMESH_M_GEOMETRY = 0x4330
    SUBMESH_M_GEOMETRY_VERTEX_DECLARATION = 0x4331
    SUBMESH_M_GEOMETRY_VERTEX_BUFFER = 0x4332
    SUBMESH_M_GEOMETRY_EXTERNAL_SOURCE = 0x4340
    GEOMETRY = 0x5000
    GEOMETRY_VERTEX_DECLARATION = 0x5100
    GEOMETRY_VERTEX_ELEMENT = 0x5110
    GEOMETRY_VERTEX_BUFFER = 0x5200
    GEOMETRY_VERTEX_BUFFER_DATA = 0x5210
    MESH_SKELETON_LINK = 0x6000
    MESH_BONE_ASSIGNMENT = 0x7000
    MESH_LOD_LEVEL = 0x8000
    MESH_LOD_USAGE = 0x8100
    MESH_LOD_MANUAL = 0x8110
    MESH_LOD_GENERATED = 0x8120
    MESH_BOUNDS = 0x9000
    SUBMESH_NAME_TABLE = 0xA000
    SUBMESH_NAME_TABLE_ELEMENT = 0xA100
    EDGE_LISTS = 0xB000
    EDGE_LIST_LOD = 0xB100
    EDGE_GROUP = 0xB110
    POSES = 0xC000
    POSE = 0xC100
    POSE_VERTEX = 0xC111
    ANIMATIONS = 0xD000
    ANIMATION = 0xD100
    ANIMATION_BASEINFO = 0xD105
    ANIMATION_TRACK = 0xD110
    ANIMATION_MORPH_KEYFRAME = 0xD111
    ANIMATION_POSE_KEYFRAME = 0xD112
    ANIMATION_POSE_REF = 0xD113
    TABLE_EXTREMES = 0xE000


# Corner indices (into VERTICES_POSITIONS) of the four vertices of each face id.
FACES_VERTICES: tuple[tuple[int, int, int, int], ...] = (
    (0, 1, 2, 3),
    (5, 4, 7, 6),
    (0, 4, 5, 1),
    (2, 6, 7, 3),
    (1, 5, 6, 2),
    (0, 3, 7, 4),
)

# The eight corners of a unit cube.
VERTICES_POSITIONS: tuple[tuple[int, int, int], ...] = (
    (0, 0, 0),
    (1, 0, 0),
    (1, 0, 1),
    (0, 0, 1),
    (0, 1, 0),
    (1, 1, 0),
    (1, 1, 1),
    (0, 1, 1),
)


def face_corners(face_id: int) -> tuple[tuple[int, int, int], ...]:
    """Return the unit-cube corners of a face's four vertices, in winding order."""
    if not 0 <= face_id < MAX_FACES:
        raise ValueError(f"face id {face_id} is outside 0-{MAX_FACES - 1}")
    return tuple(VERTICES_POSITIONS[corner] for corner in FACES_VERTICES[face_id])