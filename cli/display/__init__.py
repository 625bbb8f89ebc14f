"""
CLI display modules.
"""

from cli.display.tables import (
    display_pattern_info,
    display_tracks_table,
)
from cli.display.hex_view import build_regions, display_hex_dump, display_region_dump

__all__ = [
    "display_pattern_info",
    "display_tracks_table",
    "build_regions",
    "display_hex_dump",
    "display_region_dump",
]
