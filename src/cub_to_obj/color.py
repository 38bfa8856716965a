"""
Color Registry Module

Handles:
- Detection of the transparent sentinel color (0, 0, 0)
- Deduplication of cell colors into an ordered palette
- Mapping of every cell to its palette index

Colors are compared by exact byte identity. Each RGB triple is packed into
a single 24-bit integer key so the whole pass stays vectorized.
"""

from typing import NamedTuple
import numpy as np


# Cells with this color are empty and never reach the output
TRANSPARENT = (0, 0, 0)

# Index assigned to transparent cells
TRANSPARENT_INDEX = -1


class ColorRegistry(NamedTuple):
    """Unique colors and the per-cell index map into them."""
    unique_colors: np.ndarray  # (K, 3) uint8, first-appearance order
    indices: np.ndarray        # (N,) int64, -1 for transparent cells

    @property
    def color_count(self) -> int:
        return len(self.unique_colors)


def pack_rgb(colors: np.ndarray) -> np.ndarray:
    """
    Pack RGB triples into 24-bit integer keys.

    Args:
        colors: Array of shape (N, 3) with uint8 values

    Returns:
        (N,) uint32 array of 0xRRGGBB keys
    """
    colors = colors.astype(np.uint32)
    return (colors[:, 0] << 16) | (colors[:, 1] << 8) | colors[:, 2]


def isolate_colors(colors: np.ndarray) -> ColorRegistry:
    """
    Isolate unique colors and index every cell into them.

    Indices are assigned in order of first appearance over the cell
    sequence. Transparent cells get TRANSPARENT_INDEX.

    Args:
        colors: (N, 3) uint8 array of cell colors

    Returns:
        ColorRegistry
    """
    colors = np.asarray(colors, dtype=np.uint8).reshape(-1, 3)
    keys = pack_rgb(colors)
    solid = keys != 0  # TRANSPARENT packs to 0

    solid_colors = colors[solid]
    _, first_seen, inverse = np.unique(
        keys[solid], return_index=True, return_inverse=True
    )

    # np.unique sorts by key; re-rank by first appearance
    order = np.argsort(first_seen, kind='stable')
    rank = np.empty(len(order), dtype=np.int64)
    rank[order] = np.arange(len(order), dtype=np.int64)

    indices = np.full(len(colors), TRANSPARENT_INDEX, dtype=np.int64)
    indices[solid] = rank[inverse.reshape(-1)]

    unique_colors = solid_colors[first_seen[order]]

    return ColorRegistry(unique_colors, indices)
