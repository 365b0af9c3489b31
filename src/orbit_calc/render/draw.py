from __future__ import annotations

import math
from typing import Sequence

import pygame

from .assets import Color


def draw_earth(
    surface: pygame.Surface,
    position: tuple[int, int],
    radius: int,
    *,
    color: tuple[int, int, int],
) -> None:
    if radius <= 0:
        return
    pygame.draw.circle(surface, color, position, radius)
    # Thin limb highlight
    highlight = tuple(min(255, c + 60) for c in color)
    pygame.draw.circle(surface, highlight, position, radius, max(1, radius // 30))


def draw_marker(
    surface: pygame.Surface,
    position: tuple[int, int],
    radius: int,
    *,
    color: tuple[int, int, int],
) -> None:
    if radius <= 0:
        return
    pygame.draw.circle(surface, color, position, radius)
    pygame.draw.circle(surface, (255, 255, 255), position, radius + 3, 1)


def draw_radius_line(
    surface: pygame.Surface,
    start: tuple[int, int],
    end: tuple[int, int],
    *,
    color: Color,
) -> None:
    length = math.hypot(end[0] - start[0], end[1] - start[1])
    if length < 1.0:
        return
    pygame.draw.aaline(surface, color, start, end)


def draw_orbit_line(
    surface: pygame.Surface,
    color: Color,
    points: Sequence[tuple[int, int]],
    width: int,
    *,
    closed: bool = True,
) -> None:
    if len(points) < 2:
        return
    if width <= 1:
        pygame.draw.aalines(surface, color, closed, points)
    else:
        pygame.draw.lines(surface, color, closed, points, width)
        pygame.draw.aalines(surface, color, closed, points)


def downsample_points(
    points: Sequence[tuple[float, float]], max_points: int
) -> list[tuple[float, float]]:
    if len(points) <= max_points:
        return list(points)
    step = max(1, math.ceil(len(points) / max_points))
    sampled = list(points[::step])
    if sampled[-1] != points[-1]:
        sampled.append(points[-1])
    return sampled
