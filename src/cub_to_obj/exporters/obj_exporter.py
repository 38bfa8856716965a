"""
Wavefront OBJ Format Exporter

Writes one OBJ object per palette color. Each object holds a unit cube for
every voxel of that color and references a material of the same index from
the companion MTL file.

OBJ vertex indices are global to the file, so a single cube counter runs
across all objects and is used to offset face indices.

Layout:
    # CUB to OBJ v<version>
    mtllib <name>.mtl
    o <name>-obj-<i>
    v x y z
    usemtl <name>-mat-<i>
    s off
    f a b c d
"""

from pathlib import Path
from typing import List, NamedTuple, Union
import numpy as np

from .. import __version__
from ..color import TRANSPARENT_INDEX
from ..cube_mesh import CubeMesh, cubes_for_points


HEADER = f"# CUB to OBJ v{__version__}\n"


def obj_name(index: int, name: str) -> str:
    """Name of the OBJ object holding color `index`."""
    return f"{name}-obj-{index}"


def mat_name(index: int, name: str) -> str:
    """Name of the material for color `index`."""
    return f"{name}-mat-{index}"


class ObjectGroup(NamedTuple):
    """All cubes sharing one palette color."""
    color_index: int
    points: np.ndarray  # (N, 3) int64 grid coordinates in scan order
    mesh: CubeMesh


class OBJExporter:
    """
    Assemble voxel cubes into a Wavefront OBJ scene.

    Cubes are grouped by color index. Groups are emitted in ascending color
    index, and within a group points follow the X-outer, Z-inner scan of
    the grid.
    """

    def __init__(self, name: str):
        """
        Initialize the exporter.

        Args:
            name: Base name used for objects, materials and the mtllib reference
        """
        self.name = name

    def group_points(
        self,
        width: int,
        depth: int,
        height: int,
        indices: np.ndarray
    ) -> List[ObjectGroup]:
        """
        Group solid voxels by color index and build their cubes.

        Args:
            width, depth, height: Grid dimensions
            indices: Per-cell color index in file order, TRANSPARENT_INDEX
                for empty cells. Cells past the end of the array are
                treated as empty, extra entries are ignored.

        Returns:
            List of ObjectGroup, ordered by color index
        """
        available = min(width * depth * height, len(indices))
        cells = np.asarray(indices[:available], dtype=np.int64)

        solid = np.flatnonzero(cells != TRANSPARENT_INDEX)
        if len(solid) == 0:
            return []

        # File order is [z, y, x]
        z, y, x = np.unravel_index(solid, (height, depth, width))
        colors = cells[solid]

        # By color, then scan order: x outermost, z innermost
        order = np.lexsort((z, y, x, colors))
        color_of = colors[order]

        points = np.stack((x[order], y[order], z[order]), axis=1).astype(np.int64)

        color_indices, starts, counts = np.unique(
            color_of, return_index=True, return_counts=True
        )

        groups = []
        for color_index, start, count in zip(color_indices, starts, counts):
            group_points = points[start:start + count]
            # The cube counter is the position in the sorted run
            mesh = cubes_for_points(group_points, int(start))
            groups.append(ObjectGroup(int(color_index), group_points, mesh))

        return groups

    def render_group(self, group: ObjectGroup) -> str:
        """Render a single object block."""
        lines = [f"o {obj_name(group.color_index, self.name)}"]
        lines.extend(
            "v " + " ".join(map(str, vertex))
            for vertex in group.mesh.vertices.tolist()
        )
        lines.append(f"usemtl {mat_name(group.color_index, self.name)}")
        lines.append("s off")
        lines.extend(
            "f " + " ".join(map(str, face))
            for face in group.mesh.faces.tolist()
        )
        return "\n".join(lines) + "\n"

    def render(self, groups: List[ObjectGroup]) -> str:
        """
        Render groups into OBJ text.

        Args:
            groups: Output of group_points

        Returns:
            Complete OBJ file contents
        """
        return (
            HEADER +
            f"mtllib {self.name}.mtl\n" +
            "\n".join(self.render_group(group) for group in groups)
        )

    def export_string(
        self,
        width: int,
        depth: int,
        height: int,
        indices: np.ndarray
    ) -> str:
        """Group, mesh and render in one call."""
        return self.render(self.group_points(width, depth, height, indices))

    def export(
        self,
        output_path: Union[str, Path],
        width: int,
        depth: int,
        height: int,
        indices: np.ndarray
    ) -> Path:
        """
        Export the scene to an OBJ file.

        Args:
            output_path: Output file path (.obj)
            width, depth, height: Grid dimensions
            indices: Per-cell color index in file order

        Returns:
            The written path
        """
        output_path = Path(output_path)
        output_path.write_text(
            self.export_string(width, depth, height, indices), encoding="utf-8"
        )
        return output_path
