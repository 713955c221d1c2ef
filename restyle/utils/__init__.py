"""Utility modules."""

from .color_palette import (
    describe_hex_color,
    hex_to_rgb,
    normalize_hex,
)

__all__ = [
    "describe_hex_color",
    "hex_to_rgb",
    "normalize_hex",
]
