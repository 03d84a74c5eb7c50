"""
ASCII SVG — turn an image into an SVG made of text glyphs.

Usage:
  ascii-svg input.svg                         # writes ascii-art.svg
  ascii-svg photo.png -o out.svg -s 6 -t 40   # denser grid, higher threshold
  ascii-svg logo.svg --invert --opacity       # map alpha instead of luminance
  ascii-svg folder/ -o output_folder/         # batch process folder
"""

import argparse
import asyncio
import os
import random
import sys

from pydantic import ValidationError

from asciisvg.engine import AsciiSvgError, MapStrategy, generate_ascii_svg
from asciisvg.models.settings import AsciiSettingsModel
from asciisvg.svg.serializer import DOWNLOAD_FILENAME

IMAGE_EXTS = (".svg", ".png", ".jpg", ".jpeg", ".gif", ".bmp", ".webp")


def read_source(input_path):
    """Raw bytes plus whether they are SVG markup; the XML parser honors the declared encoding."""
    with open(input_path, "rb") as f:
        return f.read(), input_path.lower().endswith(".svg")


def process_file(input_path, output_path, settings, rng):
    """Process a single image file."""
    source, is_svg_code = read_source(input_path)

    try:
        result = asyncio.run(generate_ascii_svg(source, settings, is_svg_code, rng=rng))
    except AsciiSvgError as e:
        print(f"  ERROR: {e}")
        return False

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(result.svg_content)
    print(f"  {result.width}x{result.height} → Saved: {output_path}")
    return True


def build_settings(args):
    model = AsciiSettingsModel(
        color=args.color,
        background_color=args.background,
        font_size=args.font_size,
        grid_spacing=args.spacing,
        characters=args.chars,
        invert=args.invert,
        threshold=args.threshold,
        map_strategy=MapStrategy.OPACITY if args.opacity else MapStrategy.LUMINANCE,
        variable_size=not args.fixed_size,
    )
    return model.to_settings()


def main():
    defaults = AsciiSettingsModel()

    parser = argparse.ArgumentParser(description="ASCII SVG — image to text-glyph SVG")
    parser.add_argument("input", help="Image file or folder of images")
    parser.add_argument("-o", "--output", help="Output file or folder")
    parser.add_argument("--color", default=defaults.color, help="Glyph color")
    parser.add_argument("--background", default=defaults.background_color, help="Background color")
    parser.add_argument("-f", "--font-size", type=float, default=defaults.font_size, help="Base font size")
    parser.add_argument("-s", "--spacing", type=int, default=defaults.grid_spacing, help="Grid spacing in pixels")
    parser.add_argument("-c", "--chars", default=defaults.characters, help="Character palette")
    parser.add_argument("-t", "--threshold", type=int, default=defaults.threshold, help="Minimum value 0-255")
    parser.add_argument("--invert", action="store_true", help="Invert sample values")
    parser.add_argument("--opacity", action="store_true", help="Map alpha instead of luminance")
    parser.add_argument("--fixed-size", action="store_true", help="Constant glyph size")
    parser.add_argument("--seed", type=int, help="Seed for glyph choice (reproducible output)")
    args = parser.parse_args()

    try:
        settings = build_settings(args)
    except ValidationError as e:
        print(f"Invalid settings:\n{e}")
        sys.exit(2)

    rng = random.Random(args.seed) if args.seed is not None else None

    if os.path.isdir(args.input):
        # Batch mode
        files = [f for f in os.listdir(args.input) if f.lower().endswith(IMAGE_EXTS)]
        if not files:
            print("No image files found in folder.")
            sys.exit(1)

        out_dir = args.output or args.input + "_ascii"
        os.makedirs(out_dir, exist_ok=True)

        print(f"Processing {len(files)} files...\n")
        success = 0
        for fname in sorted(files):
            print(f"[{fname}]")
            out_path = os.path.join(out_dir, os.path.splitext(fname)[0] + "_ascii.svg")
            if process_file(os.path.join(args.input, fname), out_path, settings, rng):
                success += 1
            print()

        print(f"Done: {success}/{len(files)} processed → {out_dir}")

    else:
        # Single file
        if not os.path.exists(args.input):
            print(f"File not found: {args.input}")
            sys.exit(1)

        print(f"[{os.path.basename(args.input)}]")
        if not process_file(args.input, args.output or DOWNLOAD_FILENAME, settings, rng):
            sys.exit(1)


if __name__ == "__main__":
    main()
