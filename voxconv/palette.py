"""The 256-entry colour palette that voxel ids index into."""

from __future__ import annotations

_STEPS = (0xFF, 0xCC, 0x99, 0x66, 0x33, 0x00)
_RAMP = (0xEE, 0xDD, 0xBB, 0xAA, 0x88, 0x77, 0x55, 0x44, 0x22, 0x11)


def _build_palette() -> tuple[int, ...]:
    colours = [
        r << 16 | g << 8 | b
        for r in _STEPS
        for g in _STEPS
        for b in _STEPS
        if (r, g, b) != (0, 0, 0)
    ]
    colours.extend(v << 16 for v in _RAMP)
    colours.extend(v << 8 for v in _RAMP)
    colours.extend(_RAMP)
    colours.extend(v << 16 | v << 8 | v for v in _RAMP)
    colours.append(0x000000)
    return tuple(colours)


PALETTE: tuple[int, ...] = _build_palette()

_COLOUR_TO_VOXEL: dict[int, int] = {colour: i for i, colour in enumerate(PALETTE)}


def rgb_for_voxel(voxel: int) -> tuple[int, int, int]:
    """Return the (r, g, b) components, 0-255, of a voxel id's colour."""
    if not 0 <= voxel < len(PALETTE):
        raise ValueError(f"voxel id {voxel} is outside the palette")
    colour = PALETTE[voxel]
    return (colour >> 16) & 0xFF, (colour >> 8) & 0xFF, colour & 0xFF


def voxel_for_colour(colour: int) -> int:
    """Return the voxel id of a 0xRRGGBB colour; unknown colours map to 0."""
    return _COLOUR_TO_VOXEL.get(colour, 0)