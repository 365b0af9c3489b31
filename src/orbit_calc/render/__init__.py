"""Rendering helpers for the orbit calculator window."""

from .camera import Camera
from .assets import get_text_surface, load_font
from .draw import (
    downsample_points,
    draw_earth,
    draw_marker,
    draw_orbit_line,
    draw_radius_line,
)
from .ui import Button, ButtonVisualStyle, TextInput, build_text_panel

__all__ = [
    "Button",
    "ButtonVisualStyle",
    "Camera",
    "TextInput",
    "build_text_panel",
    "downsample_points",
    "draw_earth",
    "draw_marker",
    "draw_orbit_line",
    "draw_radius_line",
    "get_text_surface",
    "load_font",
]
