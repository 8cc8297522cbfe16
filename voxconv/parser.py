"""Reading of exported text voxel files into a dense 256^3 grid."""

from __future__ import annotations

import re
from array import array
from collections.abc import Iterable
from dataclasses import dataclass, field
from os import PathLike

from .model import EMPTY_VOXEL
from .palette import voxel_for_colour

GRID_SIZE = 256
_INVALID_POS = -100
_LINE_RE = re.compile(r"-?\d+ -?\d+ -?\d+ \w{6}", re.ASCII)
_HEX_RE = re.compile(r"[0-9A-Fa-f]{6}")


class VoxelFileParseError(ValueError):
    """Raised when a voxel file holds a malformed entry."""


def _empty_grid() -> array:
    return array("H", [EMPTY_VOXEL]) * (GRID_SIZE**3)


@dataclass
class ParsedVoxFile:
    """A 256x256x256 voxel grid and the bounds of the voxels placed in it."""

    data: array = field(default_factory=_empty_grid)
    min_x: int = 0
    min_y: int = 0
    min_z: int = 0
    max_x: int = 0
    max_y: int = 0
    max_z: int = 0

    def voxel_at(self, x: int, y: int, z: int) -> int:
        """Return the voxel id stored at a grid position."""
        return self.data[x + y * GRID_SIZE + z * GRID_SIZE * GRID_SIZE]


def _clamp(value: int) -> int:
    if value < 0:
        return 0
    if value >= 0xFF:
        return 0xFF - 1
    return value


def parse_lines(lines: Iterable[str]) -> ParsedVoxFile:
    """Parse voxel file lines of the form ``x y z RRGGBB``.

    Lines starting with ``#`` are comments. The file's y and z axes are
    swapped (with z negated) and every coordinate is offset by 128.
    """
    data = _empty_grid()
    min_x = min_y = min_z = _INVALID_POS
    max_x = max_y = max_z = _INVALID_POS

    for raw in lines:
        line = raw[:-1] if raw.endswith("\n") else raw
        if not line:
            raise VoxelFileParseError("Empty line in voxel file")
        if line.startswith("#"):
            continue
        if not _LINE_RE.fullmatch(line):
            raise VoxelFileParseError(f"Entry in voxel file corrupt: {line!r}")

        x_text, y_text, z_text, colour_text = line.split(" ")
        if not _HEX_RE.fullmatch(colour_text):
            raise VoxelFileParseError(f"Invalid colour in voxel file: {colour_text!r}")
        vox = voxel_for_colour(int(colour_text, 16))

        x, file_y, file_z = int(x_text), int(y_text), int(z_text)
        xx = x + 128
        yy = file_z + 128
        zz = -file_y + 128

        if xx < min_x or min_x == _INVALID_POS:
            min_x = xx
        if yy < min_y or min_y == _INVALID_POS:
            min_y = yy
        if zz < min_z or min_z == _INVALID_POS:
            min_z = zz

        if xx > max_x or min_x == _INVALID_POS:
            max_x = xx
        if yy > max_y or min_y == _INVALID_POS:
            max_y = yy
        if zz > max_z or min_z == _INVALID_POS:
            max_z = zz

        if not (0 <= xx < GRID_SIZE and 0 <= yy < GRID_SIZE and 0 <= zz < GRID_SIZE):
            continue

        data[xx + yy * GRID_SIZE + zz * GRID_SIZE * GRID_SIZE] = vox

    return ParsedVoxFile(
        data=data,
        min_x=_clamp(min_x),
        min_y=_clamp(min_y),
        min_z=_clamp(min_z),
        max_x=_clamp(max_x),
        max_y=_clamp(max_y),
        max_z=_clamp(max_z),
    )


def parse_file(path: str | PathLike[str]) -> ParsedVoxFile:
    """Parse a voxel file from disk."""
    with open(path, encoding="utf-8", newline="") as handle:
        return parse_lines(handle)