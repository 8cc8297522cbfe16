"""Voxel text files to VoxMesh and OBJ meshes, with ambient occlusion and greedy face merging."""

__version__ = "0.9.0"