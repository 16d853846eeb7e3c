#!/usr/bin/env python3
"""
Shape Editor command line driver.
Loads the demo scene, replays pointer-down events and writes the painted
scene as SVG, optionally with a PNG and a matplotlib preview.
"""

import os
import sys
import json
import argparse
from typing import Any, Dict, List, Optional, Tuple

from shape_editor.core import CONFIG, configure
from shape_editor.demo import build_demo_shapes
from shape_editor.models.scene import ImageEditor
from shape_editor.rendering.mpl_surface import MatplotlibSurface
from shape_editor.rendering.primitives import RenderError
from shape_editor.rendering.svg_surface import render_png
from shape_editor.utils.logger import setup_logger, get_logger, log_exception

logger = get_logger(__name__)


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration overrides from a JSON file; empty if unavailable."""
    if not config_path:
        return {}

    if not os.path.exists(config_path):
        logger.warning(f"Config file not found: {config_path}")
        return {}

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            settings = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Error loading config from {config_path}: {str(e)}")
        return {}

    if not isinstance(settings, dict):
        logger.error(f"Config file {config_path} must contain a JSON object")
        return {}

    logger.info(f"Loaded configuration from {config_path}")
    return settings


def parse_point(value: str) -> Tuple[int, int]:
    """Parse an "X,Y" pointer position."""
    try:
        x_str, y_str = value.split(",")
        return int(x_str), int(y_str)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected X,Y integers, got {value!r}")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Composite shape editor demo")
    parser.add_argument("--click", "-k", type=parse_point, action="append", default=[],
                        metavar="X,Y", help="Pointer-down position (repeatable, applied in order)")
    parser.add_argument("--output", "-o", default=None,
                        help="SVG output path (default: <output_dir>/scene.svg)")
    parser.add_argument("--png", "-p", default=None, help="Also rasterise to this PNG path")
    parser.add_argument("--preview", default=None,
                        help="Also draw a matplotlib preview to this image path")
    parser.add_argument("--config", "-c", help="Path to JSON configuration file")

    log_group = parser.add_argument_group("Logging")
    log_group.add_argument("--log-level", "-l", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                           default=None, help="Logging level (defaults to LOG_LEVEL or INFO)")
    log_group.add_argument("--log-file", default=None, help="Also log to this rotating file")
    log_group.add_argument("--log-json", action="store_true", help="Emit JSON log records")
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Build the demo scene, replay clicks and write outputs.

    Returns:
        Summary with the selection per click and output paths
    """
    editor = ImageEditor()
    editor.load(*build_demo_shapes())

    selections = []
    for px, py in args.click:
        selected = editor.pointer_down(px, py)
        label = "nothing" if selected is None else repr(selected)
        logger.info(f"Click at ({px}, {py}) selected {label}")
        selections.append({"point": [px, py], "selected": None if selected is None else repr(selected)})

    output = args.output or os.path.join(CONFIG["output_dir"], "scene.svg")
    surface = editor.svg_surface()
    summary = {"selections": selections, "svg": surface.save(output)}

    if args.png:
        render_png(surface.to_svg_string(), output_path=args.png)
        summary["png"] = args.png

    if args.preview:
        width, height = editor.preferred_size()
        preview = MatplotlibSurface(width, height, background=CONFIG["background"])
        try:
            editor.paint(preview)
            summary["preview"] = preview.save(args.preview)
        finally:
            preview.close()

    return summary


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        Process exit code
    """
    args = parse_args(argv)

    setup_logger(
        args.log_level or os.environ.get("LOG_LEVEL", "INFO"),
        log_file=args.log_file,
        use_json=args.log_json
    )
    configure(load_config(args.config))

    try:
        run(args)
    except KeyboardInterrupt:
        logger.info("Process interrupted by user")
        return 130
    except (OSError, RenderError) as e:
        log_exception(logger, e, context={"output": args.output, "png": args.png, "preview": args.preview})
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
