"""
Main CUB Conversion Interface

This is the primary interface for the conversion pipeline.
It orchestrates:
1. Decoding the CUB header and cell colors
2. Color deduplication into a palette
3. Cube generation grouped by color
4. Rendering of the OBJ and MTL text

Example Usage:
    result = convert_cub(Path("model.cub").read_bytes(), "model")
    Path("model.obj").write_text(result.obj)
    Path("model.mtl").write_text(result.mtl)

    # Or step by step
    converter = CubConverter()
    converter.load_file("model.cub")
    converter.export("out/")
"""

from pathlib import Path
from typing import NamedTuple, Optional, Tuple, Union

from .decoder import CubGrid, decode_cub
from .color import ColorRegistry, isolate_colors
from .exporters import OBJExporter, MTLExporter
from .exporters.mtl_exporter import PRECISION


class ConversionResult(NamedTuple):
    """Rendered OBJ and MTL text for one CUB file."""
    obj: str
    mtl: str
    stats: dict


def convert_cub(data: bytes, name: str, strict: bool = True) -> ConversionResult:
    """
    Convert CUB binary data to OBJ and MTL strings.

    Args:
        data: The CUB file contents
        name: Base name for objects, materials and the mtllib reference
        strict: Reject grids whose cell count differs from the header

    Returns:
        ConversionResult with obj, mtl and stats

    Raises:
        CubDecodeError: If the data cannot be decoded
    """
    converter = CubConverter(strict=strict)
    converter.load_bytes(data, name)
    return ConversionResult(converter.to_obj(), converter.to_mtl(), converter.get_stats())


class CubConverter:
    """
    Step-wise interface for CUB to OBJ conversion.

    Attributes:
        grid: The decoded voxel grid
        registry: The color palette and per-cell index map
        name: Base name of the output files
    """

    def __init__(self, strict: bool = True, precision: int = PRECISION):
        """
        Initialize the CubConverter.

        Args:
            strict: Reject grids whose cell count differs from the header
            precision: Decimal places for material colors
        """
        self.strict = strict
        self.precision = precision

        self.name: Optional[str] = None
        self._grid: Optional[CubGrid] = None
        self._registry: Optional[ColorRegistry] = None
        self._groups = None

    def load_bytes(self, data: bytes, name: str) -> "CubConverter":
        """
        Decode CUB data held in memory.

        Args:
            data: The CUB file contents
            name: Base name for the outputs

        Returns:
            self for method chaining
        """
        self._grid = decode_cub(data, strict=self.strict)
        self.name = name
        self._registry = None
        self._groups = None
        return self

    def load_file(self, input_path: Union[str, Path]) -> "CubConverter":
        """
        Read and decode a .cub file.

        The base name is the file name without its extension.

        Returns:
            self for method chaining
        """
        input_path = Path(input_path)
        if not input_path.is_file():
            raise FileNotFoundError(f"CUB file not found: {input_path}")

        return self.load_bytes(input_path.read_bytes(), input_path.stem)

    def deduplicate(self) -> "CubConverter":
        """
        Build the color palette.

        Returns:
            self for method chaining
        """
        if self._grid is None:
            raise RuntimeError("No CUB data loaded. Call load_bytes() or load_file() first.")

        self._registry = isolate_colors(self._grid.colors)
        return self

    def _ensure_groups(self):
        if self._registry is None:
            self.deduplicate()
        if self._groups is None:
            grid = self._grid
            self._groups = OBJExporter(self.name).group_points(
                grid.width, grid.depth, grid.height, self._registry.indices
            )
        return self._groups

    def to_obj(self) -> str:
        """Render the OBJ text."""
        groups = self._ensure_groups()
        return OBJExporter(self.name).render(groups)

    def to_mtl(self) -> str:
        """Render the MTL text."""
        if self._registry is None:
            self.deduplicate()
        return MTLExporter(self.name, self.precision).render(self._registry.unique_colors)

    def export(self, output_dir: Union[str, Path]) -> Tuple[Path, Path]:
        """
        Write <name>.obj and <name>.mtl to a directory.

        Args:
            output_dir: Existing output directory

        Returns:
            Tuple of (obj_path, mtl_path)
        """
        output_dir = Path(output_dir)
        if not output_dir.is_dir():
            raise NotADirectoryError(f"Output directory not found: {output_dir}")

        obj_path = output_dir / f"{self.name}.obj"
        mtl_path = output_dir / f"{self.name}.mtl"

        obj_path.write_text(self.to_obj(), encoding="utf-8")
        mtl_path.write_text(self.to_mtl(), encoding="utf-8")

        return obj_path, mtl_path

    @property
    def grid(self) -> Optional[CubGrid]:
        """Get the decoded grid."""
        return self._grid

    @property
    def registry(self) -> Optional[ColorRegistry]:
        """Get the color registry."""
        return self._registry

    @property
    def voxel_count(self) -> int:
        """Get the number of solid voxels that become cubes."""
        if self._grid is None:
            return 0
        return sum(len(group.points) for group in self._ensure_groups())

    def get_stats(self) -> dict:
        """
        Get conversion statistics.

        Returns:
            Dictionary with conversion statistics
        """
        if self._grid is None:
            return {"error": "No CUB data"}

        groups = self._ensure_groups()
        return {
            "grid_size": self._grid.shape,
            "cell_count": self._grid.cell_count,
            "voxel_count": self.voxel_count,
            "color_count": self._registry.color_count,
            "object_count": len(groups),
            "vertex_count": sum(len(g.mesh.vertices) for g in groups),
            "face_count": sum(len(g.mesh.faces) for g in groups),
        }


def convert_file(
    input_path: Union[str, Path],
    output_dir: Optional[Union[str, Path]] = None,
    strict: bool = True
) -> Tuple[Path, Path]:
    """
    Convert a .cub file and write the .obj and .mtl next to it.

    Args:
        input_path: Path to the .cub file
        output_dir: Output directory (default: the input's directory)
        strict: Reject grids whose cell count differs from the header

    Returns:
        Tuple of (obj_path, mtl_path)
    """
    input_path = Path(input_path)
    if not input_path.is_file():
        raise FileNotFoundError(f"CUB file not found: {input_path}")

    output_dir = Path(output_dir) if output_dir is not None else input_path.parent
    if not output_dir.is_dir():
        raise NotADirectoryError(f"Output directory not found: {output_dir}")

    converter = CubConverter(strict=strict)
    converter.load_file(input_path)
    return converter.export(output_dir)


class BatchConverter:
    """
    Batch conversion for a directory of .cub files.

    Use this for converting many models with consistent settings.
    """

    def __init__(self, **converter_kwargs):
        """
        Initialize the batch converter.

        Args:
            **converter_kwargs: Arguments passed to CubConverter
        """
        self.converter_kwargs = converter_kwargs

    def process_directory(
        self,
        input_dir: Union[str, Path],
        output_dir: Union[str, Path],
        pattern: str = "*.cub"
    ) -> list:
        """
        Convert all CUB files in a directory.

        Args:
            input_dir: Input directory
            output_dir: Output directory, created if missing
            pattern: Glob pattern for input files

        Returns:
            List of (obj_path, mtl_path) tuples
        """
        input_dir = Path(input_dir)
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        outputs = []

        for cub_path in sorted(input_dir.glob(pattern)):
            converter = CubConverter(**self.converter_kwargs)
            converter.load_file(cub_path)
            outputs.append(converter.export(output_dir))

        return outputs
