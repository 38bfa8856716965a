"""
CUB Binary Format Decoder

The .cub format is a flat, uncompressed dump of a dense voxel grid.

File Structure:
- Header: width, depth, height (3 x uint32, little endian, 12 bytes)
- Body: width * depth * height RGB triples (3 bytes each)

Cells are stored row-major with X varying fastest, then Y, then Z:

    index = x + width * (y + depth * z)

A cell colored (0, 0, 0) is empty space.
"""

from dataclasses import dataclass
from typing import Tuple
import struct
import numpy as np


# CUB format constants
CUB_HEADER_FORMAT = '<III'
CUB_HEADER_SIZE = struct.calcsize(CUB_HEADER_FORMAT)  # 12 bytes
CUB_CELL_SIZE = 3  # RGB


class CubDecodeError(ValueError):
    """Raised when a buffer cannot be decoded as a CUB grid."""


@dataclass
class CubGrid:
    """
    Decoded CUB voxel grid.

    Attributes:
        width: Size along X
        depth: Size along Y
        height: Size along Z
        colors: (N, 3) uint8 array of cell colors in file order
    """

    width: int
    depth: int
    height: int
    colors: np.ndarray

    @property
    def shape(self) -> Tuple[int, int, int]:
        """Get grid dimensions (width, depth, height)."""
        return (self.width, self.depth, self.height)

    @property
    def expected_cell_count(self) -> int:
        """Number of cells declared by the header."""
        return self.width * self.depth * self.height

    @property
    def cell_count(self) -> int:
        """Number of cells actually decoded from the body."""
        return len(self.colors)

    def color_at(self, x: int, y: int, z: int) -> Tuple[int, int, int]:
        """Get the RGB color stored at grid coordinates."""
        r, g, b = self.colors[xyz_to_index(x, y, z, self.width, self.depth)]
        return (int(r), int(g), int(b))


def xyz_to_index(x: int, y: int, z: int, width: int, depth: int) -> int:
    """Turn a 3D grid coordinate into a flat cell index."""
    return x + width * (y + depth * z)


def decode_cub(data: bytes, strict: bool = True) -> CubGrid:
    """
    Decode CUB binary data.

    Args:
        data: Raw file contents
        strict: If True, raise when the decoded cell count differs from
            width * depth * height. If False the grid is returned as-is and
            consumers treat missing cells as empty.

    Returns:
        CubGrid with the header dimensions and per-cell colors

    Raises:
        CubDecodeError: If the header is truncated, or on a cell count
            mismatch in strict mode
    """
    try:
        width, depth, height = struct.unpack_from(CUB_HEADER_FORMAT, data, 0)
    except struct.error as e:
        raise CubDecodeError(
            f"CUB header needs {CUB_HEADER_SIZE} bytes, got {len(data)}"
        ) from e

    body = memoryview(data)[CUB_HEADER_SIZE:]

    # A trailing partial triple is dropped
    num_cells = len(body) // CUB_CELL_SIZE
    colors = np.frombuffer(
        body[:num_cells * CUB_CELL_SIZE], dtype=np.uint8
    ).reshape(num_cells, CUB_CELL_SIZE)

    grid = CubGrid(width, depth, height, colors)

    if strict and grid.cell_count != grid.expected_cell_count:
        raise CubDecodeError(
            f"CUB header declares {width}x{depth}x{height} = "
            f"{grid.expected_cell_count} cells, but body holds {grid.cell_count}"
        )

    return grid


def encode_cub(grid: CubGrid) -> bytes:
    """
    Encode a grid to CUB binary data.

    Args:
        grid: Grid to encode. Colors are written in their stored order.

    Returns:
        CUB file contents
    """
    colors = np.ascontiguousarray(grid.colors, dtype=np.uint8)
    return struct.pack(
        CUB_HEADER_FORMAT, grid.width, grid.depth, grid.height
    ) + colors.tobytes()


def grid_from_array(voxels: np.ndarray) -> CubGrid:
    """
    Build a CubGrid from a dense (X, Y, Z, 3) color array.

    Args:
        voxels: uint8 array indexed [x, y, z] with RGB in the last axis

    Returns:
        CubGrid in file cell order
    """
    if voxels.ndim != 4 or voxels.shape[3] != CUB_CELL_SIZE:
        raise ValueError(f"Expected (X, Y, Z, 3) array, got {voxels.shape}")

    width, depth, height = voxels.shape[:3]
    # File order has X fastest, so flatten the [z, y, x] view
    colors = voxels.astype(np.uint8).transpose(2, 1, 0, 3).reshape(-1, CUB_CELL_SIZE)
    return CubGrid(int(width), int(depth), int(height), colors)
