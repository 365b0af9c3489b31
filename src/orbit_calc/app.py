"""
Interactive orbit calculator window.

The left panel holds the input controls and the results; the right side draws
Earth with the current circular orbit. Hovering the orbit shows the details
of the nearest sampled point.

Keys: M switches input mode, U switches unit, Enter recalculates, Esc quits.
"""
from __future__ import annotations

import logging

import pygame
from pygame.locals import DOUBLEBUF, RESIZABLE

from .core.calculator import CalculatorState
from .core.config import PHYSICS_CFG, RENDER_CFG, PhysicsCfg, RenderCfg
from .core.formatting import detail_lines
from .core.model import InputMode, OrbitalDetailPoint, Unit
from .core.sampling import nearest_point
from .render import (
    Button,
    ButtonVisualStyle,
    Camera,
    TextInput,
    build_text_panel,
    downsample_points,
    draw_earth,
    draw_marker,
    draw_orbit_line,
    draw_radius_line,
    get_text_surface,
    load_font,
)

logger = logging.getLogger(__name__)


def _viewport_for(size: tuple[int, int], cfg: RenderCfg) -> tuple[int, int, int, int]:
    width, height = size
    left = cfg.panel_width + 2 * cfg.panel_margin
    top = cfg.panel_margin
    return (
        left,
        top,
        max(1, width - left - cfg.panel_margin),
        max(1, height - 2 * cfg.panel_margin),
    )


def run_app(
    initial_value: str = "400",
    unit: Unit = Unit.KM,
    mode: InputMode = InputMode.ALTITUDE,
    *,
    physics_cfg: PhysicsCfg = PHYSICS_CFG,
    render_cfg: RenderCfg = RENDER_CFG,
) -> None:
    pygame.init()
    pygame.display.set_caption("Orbital Calculator (Earth)")
    screen = pygame.display.set_mode((render_cfg.width, render_cfg.height), RESIZABLE | DOUBLEBUF)
    clock = pygame.time.Clock()

    font = load_font(render_cfg.font_names, render_cfg.font_size)
    small_font = load_font(render_cfg.font_names, render_cfg.small_font_size)
    title_font = load_font(render_cfg.font_names, render_cfg.title_font_size, bold=True)

    state = CalculatorState(
        raw_value=initial_value,
        unit=unit,
        mode=mode,
        sample_count=physics_cfg.default_sample_count,
        cfg=physics_cfg,
    )
    camera = Camera(
        _viewport_for(screen.get_size(), render_cfg),
        render_cfg.max_pixels_per_km,
        min_ppk=render_cfg.min_pixels_per_km,
        max_ppk=render_cfg.max_pixels_per_km,
    )
    if state.result is not None:
        camera.fit_radius(state.result.radius_km, render_cfg.view_fill_fraction, animate=False)
    fitted_radius: float | None = state.result.radius_km if state.result else None

    button_style = ButtonVisualStyle(
        base_color=render_cfg.button_color,
        hover_color=render_cfg.button_hover_color,
        text_color=render_cfg.button_text_color,
        radius=render_cfg.button_radius,
        active_color=render_cfg.button_active_color,
        border_color=render_cfg.button_border_color,
        border_width=1,
    )

    margin = render_cfg.panel_margin
    panel_width = render_cfg.panel_width
    half = (panel_width - 12) // 2
    row_y = margin + 56
    buttons = [
        Button(
            (margin, row_y, half, 40),
            "Altitude",
            lambda: state.set_mode(InputMode.ALTITUDE),
            style=button_style,
            is_active=lambda: state.mode is InputMode.ALTITUDE,
        ),
        Button(
            (margin + half + 12, row_y, half, 40),
            "Distance",
            lambda: state.set_mode(InputMode.DISTANCE_FROM_CENTER),
            style=button_style,
            is_active=lambda: state.mode is InputMode.DISTANCE_FROM_CENTER,
        ),
        Button(
            (margin + panel_width - 96, row_y + 84, 96, 44),
            "",
            state.toggle_unit,
            text_getter=lambda: state.unit.value,
            style=button_style,
        ),
    ]
    text_input = TextInput(
        (margin, row_y + 84, panel_width - 108, 44),
        lambda: state.raw_value,
        state.set_value,
        placeholder_getter=lambda: state.placeholder,
    )

    logger.info("Window opened with %s %s %s", state.raw_value, state.unit.value, state.mode.value)
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                camera.update_viewport(_viewport_for(event.size, render_cfg))
                fitted_radius = None
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            elif event.type == pygame.KEYDOWN and event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                state.recalculate()
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_m:
                state.set_mode(
                    InputMode.DISTANCE_FROM_CENTER
                    if state.mode is InputMode.ALTITUDE
                    else InputMode.ALTITUDE
                )
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_u:
                state.toggle_unit()
            else:
                if any(button.handle_event(event) for button in buttons):
                    continue
                text_input.handle_event(event)

        if state.result is not None and state.result.radius_km != fitted_radius:
            camera.fit_radius(state.result.radius_km, render_cfg.view_fill_fraction)
            fitted_radius = state.result.radius_km
        camera.update(render_cfg.zoom_smoothing)

        mouse_pos = pygame.mouse.get_pos()
        hovered: OrbitalDetailPoint | None = None
        if state.points and camera.contains(*mouse_pos):
            hovered = nearest_point(
                state.points,
                camera.screen_to_world(*mouse_pos),
                max_distance=camera.pixels_to_world(render_cfg.hover_radius_pixels),
            )

        screen = pygame.display.get_surface()
        screen.fill(render_cfg.background_color)
        _draw_panel(screen, state, buttons, text_input, mouse_pos, font, small_font, title_font, render_cfg)
        _draw_orbit_view(screen, state, camera, hovered, font, small_font, physics_cfg, render_cfg)

        pygame.display.flip()
        clock.tick(render_cfg.fps)

    pygame.quit()


def _draw_panel(
    screen: pygame.Surface,
    state: CalculatorState,
    buttons: list[Button],
    text_input: TextInput,
    mouse_pos: tuple[int, int],
    font: pygame.font.Font,
    small_font: pygame.font.Font,
    title_font: pygame.font.Font,
    cfg: RenderCfg,
) -> None:
    margin = cfg.panel_margin
    title = get_text_surface(title_font, "Orbital Calculator (Earth)", cfg.text_color)
    screen.blit(title, (margin, margin))

    for button in buttons:
        button.draw(screen, font, mouse_pos)

    label = get_text_surface(small_font, state.input_label, cfg.muted_text_color)
    screen.blit(label, (margin, text_input.rect.top - label.get_height() - 6))
    text_input.draw(
        screen,
        font,
        background_color=cfg.input_color,
        text_color=cfg.text_color,
        placeholder_color=cfg.muted_text_color,
        focus_border_color=cfg.input_focus_border_color,
    )

    top = text_input.rect.bottom + 24
    if state.error is not None:
        panel = build_text_panel(
            font,
            [("Error:", cfg.error_text_color), *_wrap(state.error, small_font, cfg.panel_width - 28, cfg.text_color)],
            background_color=cfg.error_background_color,
            min_width=cfg.panel_width,
        )
        screen.blit(panel, (margin, top))
    elif state.formatted is not None:
        formatted = state.formatted
        lines = [
            ("Results:", cfg.text_color),
            ("", cfg.text_color),
            ("Altitude", cfg.muted_text_color),
            (f"  {formatted.altitude_km} km / {formatted.altitude_mi} mi", cfg.text_color),
            ("Orbital Velocity", cfg.muted_text_color),
            (f"  {formatted.velocity_kms} km/s / {formatted.velocity_mis} mi/s", cfg.text_color),
            (f"  ({formatted.velocity_ms} m/s)", cfg.muted_text_color),
            ("Orbital Period", cfg.muted_text_color),
            (f"  {formatted.period_formatted}", cfg.text_color),
            (f"  ({formatted.period_s} s)", cfg.muted_text_color),
        ]
        panel = build_text_panel(font, lines, background_color=cfg.panel_color, min_width=cfg.panel_width)
        screen.blit(panel, (margin, top))

    hint = get_text_surface(small_font, "M: mode   U: unit   Esc: quit", cfg.muted_text_color)
    screen.blit(hint, (margin, screen.get_height() - margin - hint.get_height()))


def _draw_orbit_view(
    screen: pygame.Surface,
    state: CalculatorState,
    camera: Camera,
    hovered: OrbitalDetailPoint | None,
    font: pygame.font.Font,
    small_font: pygame.font.Font,
    physics_cfg: PhysicsCfg,
    cfg: RenderCfg,
) -> None:
    left, top, width, height = camera.viewport
    view_rect = pygame.Rect(left, top, width, height)
    view = pygame.Surface(view_rect.size, pygame.SRCALPHA)
    pygame.draw.rect(view, cfg.label_background_color, view.get_rect(), border_radius=12)
    screen.blit(view, view_rect.topleft)

    # No orbit data is shown while the input is invalid.
    if state.result is None:
        message = get_text_surface(font, "No valid orbit", cfg.muted_text_color)
        screen.blit(message, message.get_rect(center=view_rect.center))
        return

    previous_clip = screen.get_clip()
    screen.set_clip(view_rect)
    center = camera.world_to_screen(0.0, 0.0)
    earth_px = int(physics_cfg.earth_radius_km * camera.ppk)
    draw_earth(screen, center, earth_px, color=cfg.planet_color)

    world_points = [point.position for point in state.points]
    world_points = downsample_points(world_points, cfg.max_rendered_orbit_points)
    screen_points = [camera.world_to_screen(x, y) for x, y in world_points]
    orbit_layer = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
    draw_orbit_line(orbit_layer, cfg.orbit_color, screen_points, cfg.orbit_line_width)
    screen.blit(orbit_layer, (0, 0))

    if hovered is not None:
        marker_pos = camera.world_to_screen(hovered.x_km, hovered.y_km)
        draw_radius_line(screen, center, marker_pos, color=cfg.muted_text_color)
        draw_marker(screen, marker_pos, cfg.hover_marker_radius, color=cfg.hover_marker_color)
    screen.set_clip(previous_clip)

    if hovered is not None:
        lines = [("Orbit point", cfg.hover_marker_color)]
        lines.extend((line, cfg.text_color) for line in detail_lines(hovered))
        panel = build_text_panel(small_font, lines, background_color=cfg.panel_color)
        screen.blit(panel, (left + 12, top + height - panel.get_height() - 12))
    else:
        hint = get_text_surface(small_font, "Hover the orbit for details", cfg.muted_text_color)
        screen.blit(hint, (left + 12, top + height - hint.get_height() - 12))


def _wrap(
    text: str,
    font: pygame.font.Font,
    max_width: int,
    color: tuple[int, int, int],
) -> list[tuple[str, tuple[int, int, int]]]:
    lines: list[tuple[str, tuple[int, int, int]]] = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}".strip()
        if current and font.size(candidate)[0] > max_width:
            lines.append((current, color))
            current = word
        else:
            current = candidate
    if current:
        lines.append((current, color))
    return lines


__all__ = ["run_app"]
