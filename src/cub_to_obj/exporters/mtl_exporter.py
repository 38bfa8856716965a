"""
Wavefront MTL Material Exporter

One diffuse-only material per palette color, named to match the usemtl
directives written by OBJExporter.

See https://en.wikipedia.org/wiki/Wavefront_.obj_file#Basic_materials
"""

from pathlib import Path
from typing import Union
import numpy as np

from .obj_exporter import HEADER, mat_name


# Decimal places for Kd components
PRECISION = 6


def format_component(value: int, precision: int = PRECISION) -> str:
    """
    Normalize a color byte to [0, 1] text.

    A zero byte is written as a bare "0".
    """
    value = int(value)
    if value == 0:
        return "0"
    return f"{value / 255:.{precision}f}"


class MTLExporter:
    """Render the color palette as Wavefront materials."""

    def __init__(self, name: str, precision: int = PRECISION):
        """
        Initialize the exporter.

        Args:
            name: Base name used for material names
            precision: Decimal places for color components
        """
        self.name = name
        self.precision = precision

    def render_material(self, index: int, color) -> str:
        """Render one newmtl block."""
        kd = " ".join(format_component(c, self.precision) for c in color)
        return f"newmtl {mat_name(index, self.name)}\nKd {kd}\n"

    def render(self, unique_colors: np.ndarray) -> str:
        """
        Render materials for the palette.

        Args:
            unique_colors: (K, 3) uint8 palette in registry order

        Returns:
            Complete MTL file contents
        """
        return HEADER + "\n".join(
            self.render_material(i, color)
            for i, color in enumerate(np.asarray(unique_colors).tolist())
        )

    def export(self, output_path: Union[str, Path], unique_colors: np.ndarray) -> Path:
        """Write the MTL file and return its path."""
        output_path = Path(output_path)
        output_path.write_text(self.render(unique_colors), encoding="utf-8")
        return output_path
