"""Shifting a parsed voxel grid so the model sits over the grid centre."""

from __future__ import annotations

from array import array

from .model import EMPTY_VOXEL
from .parser import GRID_SIZE, ParsedVoxFile

_CENTRE = 128


def centre_parsed_file(parsed: ParsedVoxFile) -> None:
    """Move the voxels in x and z so their midpoint sits at 128, wrapping around.

    The grid and its bounds are updated in place.
    """
    size_x = int((parsed.max_x - parsed.min_x) / 2)
    size_z = int((parsed.max_z - parsed.min_z) / 2)
    shift_x = parsed.max_x - size_x - _CENTRE
    shift_z = parsed.max_z - size_z - _CENTRE

    if shift_x == 0 and shift_z == 0:
        return

    width = GRID_SIZE
    plane = GRID_SIZE * GRID_SIZE
    rotate = shift_x % width
    source = parsed.data
    result = array("H", [EMPTY_VOXEL]) * len(source)

    for z in range(GRID_SIZE):
        new_z = (z - shift_z) % GRID_SIZE
        for y in range(GRID_SIZE):
            src = z * plane + y * width
            dst = new_z * plane + y * width
            row = source[src:src + width]
            result[dst:dst + width] = row[rotate:] + row[:rotate]

    parsed.min_x -= shift_x
    parsed.max_x -= shift_x
    parsed.min_z -= shift_z
    parsed.max_z -= shift_z
    parsed.data = result