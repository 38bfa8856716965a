"""
Unit Cube Mesh Generation

Every solid voxel becomes one axis-aligned unit cube: 8 corner vertices and
6 quad faces. No faces are culled between neighbors, so the output is a
direct 1:1 mapping from voxels to cubes.

Corner order (local, 1-based):

    1: (x,   y,   z)      5: (x,   y,   z+1)
    2: (x+1, y,   z)      6: (x+1, y,   z+1)
    3: (x,   y+1, z)      7: (x,   y+1, z+1)
    4: (x+1, y+1, z)      8: (x+1, y+1, z+1)

Face indices are offset by 8 * cube_index so that many cubes can share a
single OBJ vertex pool.
"""

from typing import NamedTuple, Sequence
import numpy as np
from numba import njit


VERTICES_PER_CUBE = 8
FACES_PER_CUBE = 6

# Corner offsets in local vertex order
CUBE_CORNERS = np.array([
    [0, 0, 0],
    [1, 0, 0],
    [0, 1, 0],
    [1, 1, 0],
    [0, 0, 1],
    [1, 0, 1],
    [0, 1, 1],
    [1, 1, 1],
], dtype=np.int64)

# Quad faces as 1-based local vertex indices
CUBE_FACES = np.array([
    [1, 2, 4, 3],  # bottom (-Z)
    [3, 4, 8, 7],  # north (+Y)
    [7, 8, 6, 5],  # top (+Z)
    [5, 6, 2, 1],  # south (-Y)
    [3, 7, 5, 1],  # west (-X)
    [8, 4, 2, 6],  # east (+X)
], dtype=np.int64)


class CubeMesh(NamedTuple):
    """Vertices and faces for one or more cubes."""
    vertices: np.ndarray  # (8N, 3) int64 positions
    faces: np.ndarray     # (6N, 4) int64 1-based vertex indices


@njit(cache=True)
def _cube_vertices(points: np.ndarray, corners: np.ndarray) -> np.ndarray:
    """
    Expand anchor points into cube corners.

    Args:
        points: (N, 3) int64 anchor coordinates
        corners: (8, 3) int64 corner offsets

    Returns:
        (8N, 3) int64 vertex positions, 8 consecutive rows per cube
    """
    n = points.shape[0]
    k = corners.shape[0]
    result = np.empty((n * k, 3), dtype=np.int64)

    for i in range(n):
        for c in range(k):
            row = i * k + c
            result[row, 0] = points[i, 0] + corners[c, 0]
            result[row, 1] = points[i, 1] + corners[c, 1]
            result[row, 2] = points[i, 2] + corners[c, 2]

    return result


def cube_faces(first_cube_index: int, count: int) -> np.ndarray:
    """
    Face index table for a run of consecutive cubes.

    Args:
        first_cube_index: Global index of the first cube (0-based)
        count: Number of cubes

    Returns:
        (6 * count, 4) int64 array of 1-based global vertex indices
    """
    offsets = (first_cube_index + np.arange(count, dtype=np.int64)) * VERTICES_PER_CUBE
    faces = CUBE_FACES[np.newaxis, :, :] + offsets[:, np.newaxis, np.newaxis]
    return faces.reshape(-1, 4)


def point_to_cube(point: Sequence[int], cube_index: int) -> CubeMesh:
    """
    Build the cube anchored at a grid point.

    Args:
        point: (x, y, z) grid coordinate
        cube_index: Global 0-based cube counter

    Returns:
        CubeMesh with 8 vertices and 6 faces
    """
    anchor = np.asarray(point, dtype=np.int64).reshape(1, 3)
    return CubeMesh(anchor + CUBE_CORNERS, cube_faces(cube_index, 1))


def cubes_for_points(points: np.ndarray, first_cube_index: int = 0) -> CubeMesh:
    """
    Build and concatenate cubes for a run of points.

    The i-th point gets cube index first_cube_index + i.

    Args:
        points: (N, 3) integer grid coordinates
        first_cube_index: Global index of the first cube

    Returns:
        CubeMesh with 8N vertices and 6N faces
    """
    points = np.ascontiguousarray(points, dtype=np.int64).reshape(-1, 3)
    vertices = _cube_vertices(points, CUBE_CORNERS)
    faces = cube_faces(first_cube_index, len(points))
    return CubeMesh(vertices, faces)
