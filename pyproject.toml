[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voxconv"
version = "0.9.0"
description = "Convert exported voxel text files into compact VoxMesh vertex data or Wavefront OBJ meshes."
requires-python = ">=3.10"
dependencies = []
keywords = ["voxel", "mesh", "greedy-meshing", "obj", "ambient-occlusion", "converter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["voxconv"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
