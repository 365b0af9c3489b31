"""Configuration dataclasses for the orbital calculator."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PhysicsCfg:
    mu: float = 3.986004418e14
    earth_radius: float = 6_371_000.0
    default_sample_count: int = 180
    sweep_min_altitude_km: float = 200.0
    sweep_max_altitude_km: float = 40_000.0
    sweep_points: int = 200

    @property
    def earth_radius_km(self) -> float:
        return self.earth_radius / 1000.0


@dataclass(frozen=True)
class RenderCfg:
    width: int = 1100
    height: int = 680
    fps: int = 60
    panel_width: int = 430
    panel_margin: int = 24
    background_color: tuple[int, int, int] = (0, 34, 72)
    panel_color: tuple[int, int, int, int] = (8, 32, 64, int(255 * 0.78))
    planet_color: tuple[int, int, int] = (74, 134, 247)
    orbit_color: tuple[int, int, int, int] = (255, 255, 255, 180)
    orbit_line_width: int = 2
    hover_marker_color: tuple[int, int, int] = (46, 209, 195)
    hover_marker_radius: int = 6
    hover_radius_pixels: float = 22.0
    text_color: tuple[int, int, int] = (234, 241, 255)
    muted_text_color: tuple[int, int, int] = (180, 198, 228)
    error_text_color: tuple[int, int, int] = (255, 176, 120)
    error_background_color: tuple[int, int, int, int] = (90, 20, 20, int(255 * 0.6))
    label_background_color: tuple[int, int, int, int] = (12, 18, 30, int(255 * 0.55))
    button_color: tuple[int, int, int, int] = (8, 32, 64, int(255 * 0.78))
    button_hover_color: tuple[int, int, int, int] = (18, 52, 94, int(255 * 0.88))
    button_active_color: tuple[int, int, int, int] = (37, 99, 235, 235)
    button_text_color: tuple[int, int, int] = (234, 241, 255)
    button_border_color: tuple[int, int, int, int] = (88, 140, 255, int(255 * 0.55))
    button_radius: int = 14
    input_color: tuple[int, int, int, int] = (12, 18, 30, 220)
    input_focus_border_color: tuple[int, int, int, int] = (118, 180, 255, 230)
    font_names: tuple[str, ...] = ("consolas", "dejavusansmono", "couriernew")
    font_size: int = 18
    small_font_size: int = 14
    title_font_size: int = 26
    view_fill_fraction: float = 0.8
    zoom_smoothing: float = 0.15
    min_pixels_per_km: float = 1e-4
    max_pixels_per_km: float = 1.0
    max_rendered_orbit_points: int = 400


PHYSICS_CFG = PhysicsCfg()
RENDER_CFG = RenderCfg()


__all__ = ["PHYSICS_CFG", "RENDER_CFG", "PhysicsCfg", "RenderCfg"]
