#!/usr/bin/env python3
"""
CUB to OBJ Demo Script

This script demonstrates the conversion pipeline by:
1. Building a small synthetic voxel model (no input files needed)
2. Encoding it as a .cub file
3. Converting it to .obj/.mtl
4. Printing statistics

Run with: python examples/demo.py
"""

import sys
from pathlib import Path
import numpy as np

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from cub_to_obj import CubConverter, encode_cub
from cub_to_obj.decoder import grid_from_array


def create_test_tree(size: int = 9) -> np.ndarray:
    """
    Create a small voxel tree.

    Returns:
        (X, Y, Z, 3) uint8 color array
    """
    voxels = np.zeros((size, size, size, 3), dtype=np.uint8)
    center = size // 2

    # Trunk
    voxels[center, center, :size // 2] = [101, 67, 33]

    # Foliage
    for x in range(size):
        for y in range(size):
            for z in range(size // 2, size):
                dist = np.sqrt((x - center) ** 2 + (y - center) ** 2 + (z - 2 * size // 3) ** 2)
                if dist < size / 3:
                    voxels[x, y, z] = [34, 139, 34]

    return voxels


def main():
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    cub_path = output_dir / "tree.cub"
    cub_path.write_bytes(encode_cub(grid_from_array(create_test_tree())))
    print(f"Wrote {cub_path}")

    converter = CubConverter()
    converter.load_file(cub_path)
    obj_path, mtl_path = converter.export(output_dir)

    stats = converter.get_stats()
    print(f"Grid size: {stats['grid_size']}")
    print(f"Voxels:    {stats['voxel_count']}")
    print(f"Colors:    {stats['color_count']}")
    print(f"Vertices:  {stats['vertex_count']}")
    print(f"Faces:     {stats['face_count']}")
    print(f"Exported:  {obj_path}, {mtl_path}")


if __name__ == "__main__":
    main()
