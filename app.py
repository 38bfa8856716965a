#!/usr/bin/env python3
"""
CUB to OBJ Web Interface

A simple Gradio-based web UI for converting .cub voxel grids to Wavefront
.obj/.mtl files.

Run with: python app.py
Then open http://localhost:7860 in your browser
"""

import sys
from pathlib import Path
import tempfile

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

import gradio as gr
from cub_to_obj import CubConverter


def process_cub(cub_file, lenient: bool):
    """
    Convert an uploaded .cub file.

    Returns preview path, stats text, and file paths for downloads.
    """
    if cub_file is None:
        return None, "Please upload a .cub file first.", None, None

    converter = CubConverter(strict=not lenient)

    try:
        converter.load_file(cub_file)
        stats = converter.get_stats()
        export_dir = tempfile.mkdtemp(prefix="cub_")
        obj_path, mtl_path = converter.export(export_dir)
    except (ValueError, OSError) as e:
        return None, f"**Conversion failed:** {e}", None, None

    stats_text = f"""## Conversion Complete!

| Metric | Value |
|--------|-------|
| Grid Size | {stats['grid_size'][0]} x {stats['grid_size'][1]} x {stats['grid_size'][2]} |
| Voxel Count | {stats['voxel_count']:,} |
| Colors | {stats['color_count']:,} |
| Vertices | {stats['vertex_count']:,} |
| Faces | {stats['face_count']:,} |
"""

    return str(obj_path), stats_text, str(obj_path), str(mtl_path)


# Build the Gradio interface
with gr.Blocks(title="CUB to OBJ") as app:

    gr.Markdown("""
    # CUB to OBJ
    ### Convert .cub voxel grids to Wavefront models

    Upload a .cub file and download the .obj and .mtl files.
    Black cells (0, 0, 0) are treated as empty space.
    """)

    with gr.Row():
        with gr.Column(scale=1):
            gr.Markdown("### Input")

            cub_input = gr.File(
                label="Upload .cub file",
                file_types=[".cub"],
                type="filepath"
            )

            lenient = gr.Checkbox(
                value=False,
                label="Accept size mismatches"
            )

            convert_btn = gr.Button("Convert", variant="primary")

        with gr.Column(scale=2):
            gr.Markdown("### 3D Preview")
            gr.Markdown("*Click and drag to rotate, scroll to zoom*")

            model_preview = gr.Model3D(
                label="3D Model Preview",
                clear_color=[0.1, 0.1, 0.1, 1.0]
            )

            stats_output = gr.Markdown(
                value="Upload a file and click 'Convert' to see results."
            )

        with gr.Column(scale=1):
            gr.Markdown("### Downloads")

            obj_output = gr.File(label="OBJ")
            mtl_output = gr.File(label="MTL")

    convert_btn.click(
        fn=process_cub,
        inputs=[cub_input, lenient],
        outputs=[model_preview, stats_output, obj_output, mtl_output]
    )


if __name__ == "__main__":
    print("\n" + "="*60)
    print("CUB to OBJ Web Interface")
    print("="*60)
    print("\nStarting server...")
    print("Open http://localhost:7860 in your browser\n")

    app.launch(
        server_name="0.0.0.0",
        server_port=7860,
        share=False
    )
