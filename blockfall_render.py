"""
Rendering helpers for Blockfall.

- Pre-render the static background (grid) once per Dims.
- Pre-render one cell Surface per color tag and blit it.
- Cache the score text surface; re-render only when the score changes.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Tuple, Optional, Sequence
from blockfall_layout import Dims
from blockfall_config import COLS, ROWS

# RGB per color tag
COLORS: Dict[str, Tuple[int,int,int]] = {
    "cyan":   (102,224,255),
    "yellow": (255,224,102),
    "purple": (200,119,255),
    "green":  (94,224,142),
    "red":    (255,102,119),
    "blue":   (106,119,255),
    "orange": (255,158,94),
}

@dataclass
class HudCache:
    score: int = -1
    score_s: Optional[pygame.Surface] = None

class RenderAssets:
    """Holds pre-rendered assets and draws session snapshots."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()
        self.game_over_s = big_font.render("Game Over", True, (255,80,80))

    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((0,0,0))
        self.board_rect = pygame.Rect(d.board_x, d.board_y, d.board_w, d.board_h)
        pygame.draw.rect(self.bg, (128,128,128), self.board_rect)
        grid_col = (40,40,40)
        for x in range(COLS+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(ROWS+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))

    def _make_cells(self):
        self.cell_surf: Dict[str, pygame.Surface] = {}
        c = self.dims.cell
        for tag, col in COLORS.items():
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            self.cell_surf[tag] = s
        empty = pygame.Surface((c-2, c-2))
        empty.fill((255,255,255))
        self.empty_surf = empty

    def cell_pos(self, bx: int, by: int) -> Tuple[int,int]:
        return (self.dims.board_x + bx*self.dims.cell + 1,
                self.dims.board_y + by*self.dims.cell + 1)

    def draw_grid(self, screen: pygame.Surface, grid: Sequence[Sequence[Optional[str]]]):
        for y, row in enumerate(grid):
            for x, tag in enumerate(row):
                surf = self.cell_surf[tag] if tag else self.empty_surf
                screen.blit(surf, self.cell_pos(x, y))

    def draw_score(self, screen: pygame.Surface, score: int):
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = self.font.render(f"Score: {score}", True, (255,255,255))
        screen.blit(self.hud.score_s, (self.dims.board_x, self.dims.margin))

    def draw(self, screen: pygame.Surface, session):
        """Full frame: background, score, then the grid or the game-over message."""
        screen.blit(self.bg, (0,0))
        self.draw_score(screen, session.score)
        if session.is_over:
            pygame.draw.rect(screen, (0,0,0), self.board_rect)
            screen.blit(self.game_over_s, self.game_over_s.get_rect(center=self.board_rect.center))
        else:
            self.draw_grid(screen, session.snapshot())
