from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

import pygame

from .assets import Color, get_text_surface


@dataclass(frozen=True)
class ButtonVisualStyle:
    base_color: Color
    hover_color: Color
    text_color: tuple[int, int, int]
    radius: int
    active_color: Color | None = None
    border_color: Color | None = None
    border_width: int = 0


def _draw_rounded_box(
    surface: pygame.Surface,
    rect: pygame.Rect,
    color: Color,
    radius: int,
    border_color: Color | None = None,
    border_width: int = 0,
) -> None:
    box = pygame.Surface(rect.size, pygame.SRCALPHA)
    pygame.draw.rect(box, color, box.get_rect(), border_radius=radius)
    if border_color is not None and border_width > 0:
        pygame.draw.rect(box, border_color, box.get_rect(), border_width, border_radius=radius)
    surface.blit(box, rect.topleft)


class Button:
    """Rounded button with hover feedback, an optional active state and a callback."""

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        callback: Callable[[], None],
        text_getter: Callable[[], str] | None = None,
        *,
        style: ButtonVisualStyle,
        is_active: Callable[[], bool] | None = None,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self._text = text
        self._callback = callback
        self._text_getter = text_getter
        self._style = style
        self._is_active = is_active

    def get_text(self) -> str:
        if self._text_getter is not None:
            return self._text_getter()
        return self._text

    def draw(
        self,
        surface: pygame.Surface,
        font: pygame.font.Font,
        mouse_pos: tuple[int, int],
    ) -> None:
        style = self._style
        if self._is_active is not None and self._is_active() and style.active_color is not None:
            color = style.active_color
        elif self.rect.collidepoint(mouse_pos):
            color = style.hover_color
        else:
            color = style.base_color
        _draw_rounded_box(surface, self.rect, color, style.radius, style.border_color, style.border_width)
        text_surf = get_text_surface(font, self.get_text(), style.text_color)
        surface.blit(text_surf, text_surf.get_rect(center=self.rect.center))

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self._callback()
                return True
        return False


class TextInput:
    """Single-line numeric text field.

    ``on_change`` is called with the new text after every edit.
    """

    ALLOWED_CHARACTERS = "0123456789.-eE+"

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text_getter: Callable[[], str],
        on_change: Callable[[str], None],
        *,
        placeholder_getter: Callable[[], str] | None = None,
        max_length: int = 16,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self._text_getter = text_getter
        self._on_change = on_change
        self._placeholder_getter = placeholder_getter
        self._max_length = max_length
        self.focused = True

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.focused = self.rect.collidepoint(event.pos)
            return self.focused
        if event.type != pygame.KEYDOWN or not self.focused:
            return False

        text = self._text_getter()
        if event.key == pygame.K_BACKSPACE:
            new_text = text[:-1]
        elif event.key == pygame.K_DELETE:
            new_text = ""
        elif event.unicode and event.unicode in self.ALLOWED_CHARACTERS:
            if len(text) >= self._max_length:
                return True
            new_text = text + event.unicode
        else:
            return False
        if new_text != text:
            self._on_change(new_text)
        return True

    def draw(
        self,
        surface: pygame.Surface,
        font: pygame.font.Font,
        *,
        background_color: Color,
        text_color: tuple[int, int, int],
        placeholder_color: tuple[int, int, int],
        focus_border_color: Color,
        radius: int = 10,
    ) -> None:
        border = focus_border_color if self.focused else None
        _draw_rounded_box(surface, self.rect, background_color, radius, border, 2)
        text = self._text_getter()
        if text:
            label = get_text_surface(font, text, text_color)
        elif self._placeholder_getter is not None:
            label = get_text_surface(font, self._placeholder_getter(), placeholder_color)
        else:
            return
        rect = label.get_rect(midleft=(self.rect.left + 12, self.rect.centery))
        surface.blit(label, rect)
        if self.focused and text:
            caret_x = rect.right + 2
            pygame.draw.line(
                surface,
                text_color,
                (caret_x, self.rect.top + 8),
                (caret_x, self.rect.bottom - 8),
                2,
            )


def build_text_panel(
    font: pygame.font.Font,
    lines: Sequence[tuple[str, tuple[int, int, int]]],
    *,
    background_color: Color,
    padding: tuple[int, int] = (14, 14),
    min_width: int = 0,
) -> pygame.Surface:
    if not lines:
        raise ValueError("lines must not be empty")
    padding_x, padding_y = padding
    line_height = font.get_linesize()
    width = max(min_width, max(font.size(text)[0] for text, _ in lines) + padding_x * 2)
    height = line_height * len(lines) + padding_y * 2
    panel_surface = pygame.Surface((width, height), pygame.SRCALPHA)
    pygame.draw.rect(
        panel_surface,
        background_color,
        panel_surface.get_rect(),
        border_radius=12,
    )
    for idx, (text, color) in enumerate(lines):
        if not text:
            continue
        text_surf = get_text_surface(font, text, color)
        panel_surface.blit(text_surf, (padding_x, padding_y + idx * line_height))
    return panel_surface
