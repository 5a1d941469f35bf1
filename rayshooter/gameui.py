"""Head-up display layout: health bar and weapon ammunition."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

FColor = tuple[float, float, float, float]
Vec2 = tuple[float, float]

BLACK: FColor = (0.0, 0.0, 0.0, 1.0)
WHITE: FColor = (1.0, 1.0, 1.0, 1.0)
RED: FColor = (1.0, 0.0, 0.0, 1.0)
GREEN: FColor = (0.0, 1.0, 0.0, 1.0)
YELLOW: FColor = (1.0, 1.0, 0.0, 1.0)
ORANGE: FColor = (1.0, 0.647, 0.0, 1.0)
GRAY: FColor = (0.5, 0.5, 0.5, 1.0)
TRANSPARENT: FColor = (0.0, 0.0, 0.0, 0.0)

LOWER_SHADE: FColor = (0.22, 0.22, 0.22, 0.2)
UPPER_SHADE: FColor = (1.0, 1.0, 1.0, 0.2)


def health_to_color_gradient(proc: float, start_color: FColor, into_color: FColor) -> FColor:
    """Blend the RGB of two colours by ``proc``; the result is opaque."""
    r, g, b = (s + proc * (e - s) for s, e in zip(start_color[:3], into_color[:3]))
    return (r, g, b, 1.0)


@dataclass
class GameUiState:
    """The player values the HUD shows."""

    player_hp_max: float
    player_hp: float
    weapon_name: str
    max_ammo: int
    ammo: int


@dataclass(frozen=True)
class Rect:
    """A rectangle to draw, with fill and optional outline."""

    x: float
    y: float
    width: float
    height: float
    fill: FColor
    stroke: Optional[FColor] = None
    stroke_width: float = 0.0
    corner_radius: float = 0.0


@dataclass
class GameUI:
    """Lays out the HUD for a given screen size."""

    game_state: GameUiState
    scale: Vec2 = (2.0, 2.0)
    padding: Vec2 = (10.0, 10.0)
    size: Vec2 = (150.0, 10.0)
    border_size: Vec2 = field(default=(4.0, 4.0))

    def _proc(self) -> float:
        return self.game_state.player_hp / self.game_state.player_hp_max

    def health_color(self) -> FColor:
        """Green at full health through yellow to red at none."""
        proc = self._proc()
        if proc > 0.5:
            return health_to_color_gradient((proc - 0.5) / 0.5, YELLOW, GREEN)
        return health_to_color_gradient(proc / 0.5, RED, YELLOW)

    def health_rects(self, height: int) -> list[Rect]:
        """The health bar, its shading and its border, in drawing order."""
        proc = self._proc()
        sx, sy = self.scale
        px, py = self.padding
        w, h = self.size
        bx, by = self.border_size

        x = (px + bx) * sx
        y = height - (py + h + by) * sy
        bar_w = w * proc * sx
        bar_h = h * sy

        return [
            Rect(x, y, bar_w, bar_h, self.health_color()),
            Rect(x, y + h * sy * 0.7, bar_w, bar_h / 3.0, LOWER_SHADE),
            Rect(x, y, bar_w, bar_h / 3.0, UPPER_SHADE),
            Rect(x - bx / 2.0, y - by / 2.0, w * sx + bx, h * sy + by,
                 TRANSPARENT, stroke=BLACK, stroke_width=bx, corner_radius=2.0),
        ]

    def ammo_text(self) -> str:
        """The ammunition counter; infinite weapons show a sign instead."""
        if self.game_state.max_ammo == 0:
            return "∞"
        return f"{self.game_state.ammo:0>3} / {self.game_state.max_ammo:0>3}"

    def ammo_bars(self, width: int, height: int) -> list[Rect]:
        """One small bar per round; spent rounds are grey, low ammo is tinted."""
        max_ammo = self.game_state.max_ammo
        ammo = self.game_state.ammo
        if max_ammo == 0:
            return []
        x0 = width - 200.0
        y0 = height - 50.0
        padding = 10.0 / max_ammo
        bar_w = 170.0 / max_ammo

        if ammo <= max_ammo * 0.25:
            loaded = RED
        elif ammo <= max_ammo * 0.6:
            loaded = ORANGE
        else:
            loaded = WHITE

        return [
            Rect(x0 + (bar_w + padding) * i, y0 + 20.0, bar_w, 5.0,
                 GRAY if max_ammo - i > ammo else loaded, corner_radius=2.0)
            for i in range(max_ammo)
        ]