# voxconv

`voxconv` is a library that turns a voxel export into a mesh. The export is
a text file of `x y z RRGGBB` lines. The library can write the mesh as a
binary `.voxMesh` file, which holds packed vertices and a bounds chunk, or
as a Wavefront `.obj` file with a colour on each vertex.

It can:

- work out ambient occlusion for each face corner,
- merge neighbouring faces into larger rectangles (greedy meshing) when
  they share a direction, a voxel and an ambient value,
- move the model so that it sits in the middle of the grid on X and Z,
- leave out whole face directions (face ids 0–5),
- give chosen voxel types an animation value.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Input format

Each line holds three integers and a six-digit hex colour, with a single
space between them. Lines that start with `#` are comments. The colour is
looked up in the 256-entry palette (`voxconv.palette`), and its index there
becomes the voxel id. A colour that is not in the palette maps to 0.

The file's Y and Z axes are swapped, with Z negated, and every coordinate
is offset by 128 into a 256×256×256 grid. A malformed line makes
`voxconv.parser.parse_lines` and `parse_file` raise
`voxconv.parser.VoxelFileParseError`.

## Usage

```python
from voxconv.parser import parse_file
from voxconv.auto_centre import centre_parsed_file
from voxconv.vox_to_faces import vox_to_faces
from voxconv.face_merger import merge_faces
from voxconv.anim_values import determine_anim_values
from voxconv.model import ParamAnimVoxel
from voxconv.mesh_writer import write_mesh

parsed = parse_file("model.txt")
centre_parsed_file(parsed)            # optional, changes parsed in place
faces = vox_to_faces(parsed, disabled_faces={0}, disable_ambient=False)
faces = merge_faces(faces)            # optional greedy meshing
determine_anim_values(faces, [ParamAnimVoxel(voxel=112, value=3)])
write_mesh("model.voxMesh", faces)
```

- `voxconv.mesh_writer.encode_mesh` returns the `.voxMesh` bytes instead
  of writing them to a file. It raises `ValueError` if the minimum corner
  of the bounds is greater than the maximum corner.
- `voxconv.obj_writer.write_obj` writes an `.obj` file.
  `voxconv.obj_writer.format_obj` returns the same text as a string.
- `voxconv.timer.Timer` is a small stopwatch. Call `start()` and `stop()`,
  then `total()` gives the time between them in seconds.

## What it does not do

`voxconv` has no command-line program. To convert a file, call the
functions above from Python.