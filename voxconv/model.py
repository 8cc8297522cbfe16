"""Core data types shared by the voxel conversion pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field

EMPTY_VOXEL = 0x8000
MAX_FACES = 6

_UINT64_MASK = 0xFFFFFFFFFFFFFFFF


@dataclass(frozen=True)
class ParamAnimVoxel:
    """An animation value to be assigned to every face of a voxel type."""

    voxel: int
    value: int


@dataclass
class FaceContainer:
    """A single (possibly merged) face of the voxel mesh."""

    x: int
    y: int
    z: int
    size_x: int = 1
    size_y: int = 1
    size_z: int = 1
    vox: int = 0
    ambient_mask: int = 0
    face_mask: int = 0
    anim: int = 0


@dataclass
class OutputFaces:
    """The faces produced for a mesh along with the bounds of the voxels."""

    faces: list[FaceContainer] = field(default_factory=list)
    min_x: int = 0
    min_y: int = 0
    min_z: int = 0
    max_x: int = 0
    max_y: int = 0
    max_z: int = 0
    delta_x: int = 0
    delta_y: int = 0
    delta_z: int = 0

    def mesh_size_bytes(self) -> int:
        """Size of the vertex data: four vertices of three 32-bit words per face."""
        return len(self.faces) * 4 * 3 * 4


def wrap_face(face: FaceContainer) -> int:
    """Pack a face into a single 64-bit integer."""
    value = (
        face.x
        | face.y << 8
        | face.z << 16
        | face.vox << 24
        | face.face_mask << 32
        | face.ambient_mask << 35
    )
    return value & _UINT64_MASK


def unwrap_face(value: int) -> FaceContainer:
    """Unpack a face produced by :func:`wrap_face`."""
    return FaceContainer(
        x=value & 0xFF,
        y=(value >> 8) & 0xFF,
        z=(value >> 16) & 0xFF,
        vox=(value >> 24) & 0xFF,
        face_mask=(value >> 32) & 0x7,
        ambient_mask=(value >> 35) & 0xFFFF,
    )