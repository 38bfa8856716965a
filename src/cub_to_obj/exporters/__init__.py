"""
Export modules for the Wavefront text formats.

Supported formats:
- Wavefront (.obj) - One object per color, one cube per voxel
- Wavefront material (.mtl) - One diffuse material per color
"""

from .obj_exporter import OBJExporter, ObjectGroup
from .mtl_exporter import MTLExporter

__all__ = ["OBJExporter", "ObjectGroup", "MTLExporter"]
