"""
Command-Line Interface for CUB to OBJ

Usage:
    cub2obj model.cub
    cub2obj model.cub out/
    cub2obj --batch models/ --output-dir exported/

"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional
import time

from . import __version__
from .converter import CubConverter, BatchConverter


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="cub2obj",
        description="CUB to OBJ - Convert .cub voxel grids to Wavefront .obj/.mtl",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  cub2obj castle.cub
      Write castle.obj and castle.mtl next to castle.cub

  cub2obj castle.cub exported/
      Write the files to the exported/ directory

  cub2obj --batch models/ --output-dir exported/
      Convert every .cub in models/

Colors:
  Cells colored (0, 0, 0) are empty and produce no geometry.
        """
    )

    parser.add_argument(
        "input",
        nargs="?",
        help="The .cub file to process"
    )

    parser.add_argument(
        "output",
        nargs="?",
        help="Optional output folder (default: the directory of the .cub file)"
    )

    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Accept files whose cell count does not match the header"
    )

    # Batch processing
    parser.add_argument(
        "--batch",
        help="Batch process a directory of .cub files"
    )

    parser.add_argument(
        "--output-dir",
        help="Output directory for batch processing"
    )

    parser.add_argument(
        "--pattern",
        default="*.cub",
        help="File pattern for batch processing (default: *.cub)"
    )

    # Misc
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output with statistics"
    )

    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print conversion statistics"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    return parser


def print_stats(stats: dict):
    """Print conversion statistics."""
    print("\nConversion Statistics:")
    print(f"  Grid size: {stats['grid_size']}")
    print(f"  Voxels: {stats['voxel_count']}")
    print(f"  Colors: {stats['color_count']}")
    print(f"  Vertices: {stats['vertex_count']}")
    print(f"  Faces: {stats['face_count']}")


def process_single(args) -> int:
    """Process a single .cub file."""
    if not args.input:
        print("Error: No file provided", file=sys.stderr)
        create_parser().print_usage(sys.stderr)
        return 1

    input_path = Path(args.input)
    if not input_path.is_file():
        print(f"Error: The provided file is invalid: {input_path}", file=sys.stderr)
        return 1

    output_dir = Path(args.output) if args.output else input_path.parent
    if not output_dir.is_dir():
        print(f"Error: The provided output directory is invalid: {output_dir}",
              file=sys.stderr)
        return 1

    print(f"Output folder is {output_dir.resolve()}")

    start_time = time.time()

    try:
        converter = CubConverter(strict=not args.lenient)

        if args.verbose:
            print(f"Loading: {input_path}")

        converter.load_file(input_path)
        obj_path, mtl_path = converter.export(output_dir)

        if args.stats or args.verbose:
            print_stats(converter.get_stats())

        if args.verbose:
            print(f"Exported: {obj_path}")
            print(f"Exported: {mtl_path}")
            print(f"\nCompleted in {time.time() - start_time:.2f}s")

        print("Done!")
        return 0

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


def process_batch(args) -> int:
    """Process a directory of .cub files."""
    batch_dir = Path(args.batch)
    if not batch_dir.is_dir():
        print(f"Error: Batch directory not found: {batch_dir}", file=sys.stderr)
        return 1

    output_dir = Path(args.output_dir) if args.output_dir else batch_dir

    start_time = time.time()

    try:
        processor = BatchConverter(strict=not args.lenient)
        outputs = processor.process_directory(batch_dir, output_dir, pattern=args.pattern)

        elapsed = time.time() - start_time
        print(f"Processed {len(outputs)} files in {elapsed:.2f}s")
        print(f"Output directory: {output_dir}")

        return 0

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.batch:
        return process_batch(args)
    return process_single(args)


if __name__ == "__main__":
    sys.exit(main())
