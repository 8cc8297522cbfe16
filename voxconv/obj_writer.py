"""Export of voxel mesh faces as a Wavefront .obj file with vertex colours."""

from __future__ import annotations

import struct
from os import PathLike

from .model import FaceContainer, OutputFaces
from .palette import rgb_for_voxel

_ORIGIN = 128

# Normal of each face id.
_FACE_NORMALS: tuple[tuple[float, float, float], ...] = (
    (0.0, -1.0, 0.0),
    (0.0, 1.0, 0.0),
    (0.0, 0.0, -1.0),
    (0.0, 0.0, 1.0),
    (1.0, 0.0, 0.0),
    (-1.0, 0.0, 0.0),
)

# Corner indices (into _CORNER_POSITIONS) of the four vertices of each face.
_FACE_VERTICES: tuple[tuple[int, int, int, int], ...] = (
    (0, 1, 2, 3),
    (5, 4, 7, 6),
    (0, 4, 5, 1),
    (2, 6, 7, 3),
    (1, 5, 6, 2),
    (0, 3, 7, 4),
)

# Unit cube corners.
_CORNER_POSITIONS: tuple[tuple[int, int, int], ...] = (
    (0, 0, 0),
    (1, 0, 0),
    (1, 0, 1),
    (0, 0, 1),
    (0, 1, 0),
    (1, 1, 0),
    (1, 1, 1),
    (0, 1, 1),
)


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _num(value: float) -> str:
    return f"{value:.6f}"


def _face_lines(face: FaceContainer, vertex_index: int, normal_index: int) -> list[str]:
    normal = _FACE_NORMALS[face.face_mask]
    r, g, b = (_f32(c / 255.0) for c in rgb_for_voxel(face.vox))
    colour = f"{_num(r)} {_num(g)} {_num(b)}"

    lines = []
    for corner in _FACE_VERTICES[face.face_mask]:
        cx, cy, cz = _CORNER_POSITIONS[corner]
        x = cx * face.size_x + face.x - _ORIGIN
        y = cy * face.size_y + face.y - _ORIGIN
        z = cz * face.size_z + face.z - _ORIGIN
        lines.append(f"v {_num(x)} {_num(y)} {_num(z)} {colour}\n")

    lines.append(f"vn {_num(normal[0])} {_num(normal[1])} {_num(normal[2])}\n")
    refs = " ".join(f"{vertex_index + i}//{normal_index}" for i in range(4))
    lines.append(f"f {refs}\n")
    return lines


def format_obj(faces: OutputFaces) -> str:
    """Render faces as .obj text: four coloured vertices, a normal and a quad each.

    Positions are shifted so grid coordinate 128 becomes the origin.
    """
    lines: list[str] = []
    for number, face in enumerate(faces.faces):
        lines.extend(_face_lines(face, 1 + number * 4, 1 + number))
    return "".join(lines)


def write_obj(path: str | PathLike[str], faces: OutputFaces) -> None:
    """Write faces to an .obj file."""
    with open(path, "w", encoding="ascii", newline="") as handle:
        handle.write(format_obj(faces))