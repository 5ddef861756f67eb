"""Halftone generator - command line entry point."""

import argparse
import sys
from pathlib import Path

from config_manager import ConfigManager
from halftone import HalftoneProcessor
from halftone.errors import HalftoneError
from halftone.preview import scale_to_width
from models import CONFIG_FILE, MAX_CELL_SIZE, MIN_CELL_SIZE, RenderStyle


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Render an image as halftone cells.")
    p.add_argument("input", type=Path, help="Source image (png, jpeg, tiff, webp).")
    p.add_argument("-o", "--output", type=Path, default=None,
                   help="Where to save the full size result (default: <input>_halftone.png).")
    p.add_argument("-c", "--cell-size", type=int, default=None,
                   help=f"Output pixels per source pixel ({MIN_CELL_SIZE}-{MAX_CELL_SIZE}).")
    p.add_argument("-s", "--style", choices=[s.value for s in RenderStyle], default=None,
                   help="Cell pattern style.")
    p.add_argument("--seed", type=int, default=None, help="RNG seed for reproducible output.")
    p.add_argument("--preview", type=Path, default=None,
                   help="Also save a preview scaled to the configured preview width.")
    p.add_argument("--config", type=Path, default=CONFIG_FILE,
                   help="Settings file holding the defaults (default: ~/.halftone_config.json).")
    p.add_argument("--save-config", action="store_true",
                   help="Remember the cell size, style and seed as defaults.")
    return p


def main(argv=None) -> int:
    """Load, render and save one image."""
    args = build_parser().parse_args(argv)

    config_manager = ConfigManager(args.config)
    config = config_manager.load()
    if args.cell_size is not None:
        config.cell_size = args.cell_size
    if args.style is not None:
        config.render_style = RenderStyle(args.style)
    if args.seed is not None:
        config.seed = args.seed

    if not MIN_CELL_SIZE <= config.cell_size <= MAX_CELL_SIZE:
        print(f"Error: cell size must be between {MIN_CELL_SIZE} and {MAX_CELL_SIZE}")
        return 1

    processor = HalftoneProcessor(config)

    print("Loading image...")
    _, error = processor.open_image(args.input)
    if error:
        print(f"Error: {error}")
        return 1

    output = args.output or args.input.with_name(f"{args.input.stem}_halftone.png")
    print(
        f"Rendering {config.render_style.value} style "
        f"with {config.cell_size}px cells..."
    )
    try:
        result = processor.generate()
        processor.write_image(result, output)
        print(f"Saved {result.size[0]}x{result.size[1]} image to {output}")
        if args.preview is not None:
            processor.write_image(
                scale_to_width(result, config.preview_width), args.preview
            )
            print(f"Saved preview to {args.preview}")
    except HalftoneError as e:
        print(f"Error: {e}")
        return 1

    if args.save_config:
        saved, error = config_manager.save(config)
        if saved:
            print(f"✓ Saved configuration to {config_manager.config_path}")
        else:
            print(f"Warning: Could not save config file: {error}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
