"""Assignment of per-voxel animation values to faces."""

from __future__ import annotations

from collections.abc import Sequence

from .model import OutputFaces, ParamAnimVoxel


def determine_anim_values(faces: OutputFaces, anim_voxels: Sequence[ParamAnimVoxel]) -> None:
    """Set each face's anim value from the first matching entry, or 0.

    Faces are left untouched when no animation values are given.
    """
    if not anim_voxels:
        return
    for face in faces.faces:
        face.anim = next((p.value for p in anim_voxels if p.voxel == face.vox), 0)