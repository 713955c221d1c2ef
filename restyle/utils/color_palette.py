"""
Color helpers for repaint prompts.
Turns palette hex codes into the loose color-family phrases the image
model responds to better than raw hex values.
"""

import re
from typing import Optional, Tuple

_HEX_PATTERN = re.compile(r"^[0-9a-fA-F]{6}$")


def normalize_hex(hex_color: Optional[str]) -> Optional[str]:
    """
    Normalize a hex color to the '#RRGGBB' upper-case form.

    Accepts values with or without the leading '#', and the 3-digit
    shorthand. Returns None for anything else.
    """
    if not hex_color:
        return None
    value = hex_color.strip().lstrip('#')
    if len(value) == 3:
        value = ''.join(ch * 2 for ch in value)
    if not _HEX_PATTERN.match(value):
        return None
    return f"#{value.upper()}"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple."""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


def describe_hex_color(hex_color: Optional[str], fallback_name: str = "color") -> str:
    """
    Describe a hex color as a coarse color family.

    Args:
        hex_color: Hex code such as '#4A90E2'
        fallback_name: Returned when the hex is missing, malformed, or
            doesn't fall clearly into one family

    Returns:
        A phrase like 'bright blue or sky blue'
    """
    normalized = normalize_hex(hex_color)
    if normalized is None:
        return fallback_name

    r, g, b = hex_to_rgb(normalized)

    if r > 200 and g > 200 and b > 200:
        return "bright white or very light"
    if r + g + b < 100:
        return "very dark or black"

    max_c = max(r, g, b)
    min_c = min(r, g, b)

    # Near-neutral colors read as grays before any channel dominates
    if max_c - min_c < 30:
        if r > 200:
            return "light gray or silver"
        if r > 100:
            return "medium gray"
        return "dark gray or charcoal"

    if r > g and r > b:
        if r > 200:
            return "red or coral"
        if r > 150:
            return "bright red or crimson"
        return "burgundy or dark red"

    if g > r and g > b:
        if g > 200:
            return "bright green or lime"
        if g > 150:
            return "green or emerald"
        return "dark green or forest green"

    if b > r and b > g:
        if b > 200:
            return "bright blue or sky blue"
        if b > 150:
            return "blue or navy blue"
        return "dark blue or navy"

    return fallback_name
