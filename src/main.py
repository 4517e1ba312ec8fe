# main.py
import argparse
import sys
from typing import List, Optional

from renderer.gradient import IMAGE_HEIGHT, IMAGE_WIDTH, gradient_image, render_gradient
from renderer.ppm import save_png, write_ppm

DEFAULT_OUTPUT = "-"


def _report_progress(rows_remaining: int) -> None:
    print(f"\rScanlines remaining: {rows_remaining} ", end="", file=sys.stderr, flush=True)


def render(out, width: int, height: int, quiet: bool = False) -> None:
    """
    Render the gradient test image as P3 into an already-open text sink.
    """
    pixels = render_gradient(width, height)
    write_ppm(out, pixels, progress=None if quiet else _report_progress)
    if not quiet:
        print("\rDone.                 ", file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="raytrace", description="Render the gradient test image as a plain PPM (P3).")
    parser.add_argument("--width", type=int, default=IMAGE_WIDTH)
    parser.add_argument("--height", type=int, default=IMAGE_HEIGHT)
    parser.add_argument("-o", "--output", type=str, default=DEFAULT_OUTPUT,
                        help="PPM output path ('-' writes to stdout).")
    parser.add_argument("--png", type=str, default=None, help="Also save a PNG preview to this path.")
    parser.add_argument("--quiet", action="store_true", help="Do not print progress to stderr.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.width < 2 or args.height < 2:
        parser.error(f"image must be at least 2x2, got {args.width}x{args.height}")

    if not args.quiet:
        print(f"Rendering {args.width}x{args.height} image", file=sys.stderr)

    try:
        if args.output == DEFAULT_OUTPUT:
            render(sys.stdout, args.width, args.height, args.quiet)
            sys.stdout.flush()
        else:
            with open(args.output, "w", encoding="ascii", newline="\n") as f:
                render(f, args.width, args.height, args.quiet)
            if not args.quiet:
                print(f"Image written to {args.output}", file=sys.stderr)

        if args.png:
            save_png(args.png, gradient_image(args.width, args.height))
            if not args.quiet:
                print(f"PNG preview written to {args.png}", file=sys.stderr)
    except OSError as e:
        print(f"Error writing image: {e}", file=sys.stderr)
        return 1

    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
