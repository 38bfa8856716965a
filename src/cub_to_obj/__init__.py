"""
CUB to OBJ
==========

Converts .cub voxel grids into Wavefront .obj geometry with a companion
.mtl material library.

A .cub file is a dense grid of RGB cells. Every non-black cell becomes a
unit cube; cubes are grouped into one OBJ object per distinct color, and
every color gets one diffuse material.

Example Usage:
    from cub_to_obj import convert_cub

    result = convert_cub(data, "castle")
    print(result.obj)
    print(result.mtl)
"""

__version__ = "0.0.1"

from .decoder import CubGrid, CubDecodeError, decode_cub, encode_cub, xyz_to_index
from .color import ColorRegistry, isolate_colors, TRANSPARENT, TRANSPARENT_INDEX
from .cube_mesh import CubeMesh, point_to_cube, cubes_for_points, CUBE_FACES
from .exporters import OBJExporter, MTLExporter, ObjectGroup
from .converter import (
    ConversionResult,
    CubConverter,
    BatchConverter,
    convert_cub,
    convert_file,
)

__all__ = [
    "CubGrid",
    "CubDecodeError",
    "decode_cub",
    "encode_cub",
    "xyz_to_index",
    "ColorRegistry",
    "isolate_colors",
    "TRANSPARENT",
    "TRANSPARENT_INDEX",
    "CubeMesh",
    "point_to_cube",
    "cubes_for_points",
    "CUBE_FACES",
    "OBJExporter",
    "MTLExporter",
    "ObjectGroup",
    "ConversionResult",
    "CubConverter",
    "BatchConverter",
    "convert_cub",
    "convert_file",
]
