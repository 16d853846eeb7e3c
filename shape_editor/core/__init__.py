"""
Core configuration for the shape editor.
Holds the shared settings used by shapes, surfaces and the CLI, plus a
lightweight profiler for timing paint passes.
"""

import os
import time
import logging
from typing import Dict, Any

# Configure logging with reasonable defaults
logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO"),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Global configuration settings
CONFIG: Dict[str, Any] = {
    # Selection outline
    "selection_padding": 1,
    "selection_color": "lightgray",
    "selection_dash": (2, 2),

    # Canvas
    "canvas_padding": 10,
    "background": "lightgray",
    "dot_size": 3,

    # Output
    "output_dir": "output",
    "png_size": None,  # None = use the SVG's own size

    # Diagnostics
    "enable_profiling": False,
}


class Profiler:
    """Simple context manager for timing code blocks."""
    def __init__(self, name: str, enabled: bool = None):
        self.name = name
        self.enabled = CONFIG["enable_profiling"] if enabled is None else enabled
        self.start_time = None
        self.duration = None

    def __enter__(self):
        if not self.enabled:
            return self

        self.start_time = time.perf_counter()
        logger.debug(f"Profiling started: {self.name}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if not self.enabled or self.start_time is None:
            return

        self.duration = time.perf_counter() - self.start_time
        logger.debug(f"Profiling completed: {self.name} - {self.duration:.6f}s")


def configure(settings: Dict[str, Any]) -> None:
    """
    Update the configuration with custom settings.

    Args:
        settings: Dictionary of configuration settings to update
    """
    unknown = [key for key in settings if key not in CONFIG]
    if unknown:
        logger.warning(f"Ignoring unknown configuration keys: {', '.join(unknown)}")

    known = {key: value for key, value in settings.items() if key in CONFIG}
    CONFIG.update(known)
    if known:
        logger.info(f"Configuration updated: {', '.join(known.keys())}")


__all__ = [
    "CONFIG",
    "Profiler",
    "configure",
]
