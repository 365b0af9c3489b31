from __future__ import annotations

from dataclasses import dataclass

import numpy as np


def _clamp(value: float, minimum: float, maximum: float) -> float:
    return max(minimum, min(maximum, value))


@dataclass
class CameraState:
    center: np.ndarray
    ppk: float
    ppk_target: float


class Camera:
    """Maps world kilometers to pixels inside a rectangular viewport.

    ``ppk`` is pixels per kilometer. Zoom changes are eased towards
    ``ppk_target`` by :meth:`update`.
    """

    def __init__(
        self,
        viewport: tuple[int, int, int, int],
        ppk: float,
        *,
        min_ppk: float,
        max_ppk: float,
    ) -> None:
        self._viewport = viewport
        self._min_ppk = min_ppk
        self._max_ppk = max_ppk
        ppk = _clamp(ppk, min_ppk, max_ppk)
        self._state = CameraState(
            center=np.array([0.0, 0.0], dtype=float),
            ppk=ppk,
            ppk_target=ppk,
        )

    @property
    def viewport(self) -> tuple[int, int, int, int]:
        return self._viewport

    def update_viewport(self, viewport: tuple[int, int, int, int]) -> None:
        self._viewport = viewport

    @property
    def ppk(self) -> float:
        return self._state.ppk

    @property
    def ppk_target(self) -> float:
        return self._state.ppk_target

    @property
    def center(self) -> np.ndarray:
        return self._state.center

    def set_zoom(self, ppk: float) -> None:
        clamped = _clamp(ppk, self._min_ppk, self._max_ppk)
        self._state.ppk = clamped
        self._state.ppk_target = clamped

    def set_zoom_target(self, ppk: float) -> None:
        self._state.ppk_target = _clamp(ppk, self._min_ppk, self._max_ppk)

    def fit_radius(self, radius_km: float, fill_fraction: float, *, animate: bool = True) -> None:
        """Zoom so a circle of ``radius_km`` fills ``fill_fraction`` of the viewport."""

        if radius_km <= 0.0:
            return
        _, _, width, height = self._viewport
        ppk = fill_fraction * min(width, height) / (2.0 * radius_km)
        if animate:
            self.set_zoom_target(ppk)
        else:
            self.set_zoom(ppk)

    def update(self, smoothing: float = 0.1) -> None:
        state = self._state
        state.ppk += (state.ppk_target - state.ppk) * smoothing
        state.ppk = _clamp(state.ppk, self._min_ppk, self._max_ppk)

    def contains(self, sx: float, sy: float) -> bool:
        left, top, width, height = self._viewport
        return left <= sx < left + width and top <= sy < top + height

    def world_to_screen(self, x: float, y: float) -> tuple[int, int]:
        left, top, width, height = self._viewport
        cx, cy = self._state.center
        sx = left + width // 2 + int(round((x - cx) * self._state.ppk))
        sy = top + height // 2 - int(round((y - cy) * self._state.ppk))
        return sx, sy

    def screen_to_world(self, sx: float, sy: float) -> tuple[float, float]:
        left, top, width, height = self._viewport
        cx, cy = self._state.center
        ppk = max(self._state.ppk, 1e-12)
        x = (sx - left - width // 2) / ppk + cx
        y = (top + height // 2 - sy) / ppk + cy
        return x, y

    def pixels_to_world(self, pixels: float) -> float:
        return pixels / max(self._state.ppk, 1e-12)
