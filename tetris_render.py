"""
Rendering helpers for the Tetris client.

- Pre-render block cell Surfaces per piece color (solid + translucent ghost).
- Pre-render the static background (grid + panel frame + preview frames).
- Cache HUD text surfaces; re-render only when values change.

Everything here reads a GameSession and draws; nothing mutates game state.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence
from tetris_layout import Dims
from tetris_piece import COLS, ROWS, COLORS, Piece
from tetris_board import piece_cells
from tetris_game import GameSession

TEXT = (200,210,240)
DIM = (165,175,215)
MEDALS = {0: (255,215,0), 1: (192,192,192), 2: (205,127,50)}

def rgb(color: str) -> pygame.Color:
    return pygame.Color(color)

@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    lines: int = -1
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    ranking_key: Any = None
    ranking: List[pygame.Surface] = field(default_factory=list)
    controls: Optional[list] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: Optional[pygame.font.Font] = None):
        self.dims = dims
        self.font = font
        self.big_font = big_font or font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        pygame.draw.rect(self.bg, (10,10,10), (d.board_x, d.board_y, d.board_w, d.board_h))
        grid_col = (26,26,26)
        for x in range(COLS+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(ROWS+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        self.panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), self.panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), self.panel_rect, 1)
        for px in (d.hold_x, d.next_x):
            frame = pygame.Rect(px-6, d.preview_y-6, d.pv_cell*4+12, d.pv_cell*4+12)
            pygame.draw.rect(self.bg, (15,18,40), frame)
            pygame.draw.rect(self.bg, (55,65,110), frame, 1)
        self.board_rect = pygame.Rect(d.board_x, d.board_y, d.board_w, d.board_h)

    # ---------- Small cell sprites (solid + ghost) ----------
    def _block(self, color: str, size: int) -> pygame.Surface:
        s = pygame.Surface((size, size))
        s.fill(rgb(color))
        pygame.draw.rect(s, (0,0,0), (0,0,size,size), 2)
        hl = pygame.Surface((size//3, size//3), pygame.SRCALPHA)
        hl.fill((255,255,255,77))
        s.blit(hl, (2,2))
        return s

    def _make_cells(self):
        self.cell_surf: Dict[str, pygame.Surface] = {}
        self.ghost_surf: Dict[str, pygame.Surface] = {}
        self.preview_surf: Dict[str, pygame.Surface] = {}
        c = self.dims.cell
        for col in COLORS.values():
            self.cell_surf[col] = self._block(col, c)
            self.preview_surf[col] = self._block(col, self.dims.pv_cell)
            base = rgb(col)
            g = pygame.Surface((c, c), pygame.SRCALPHA)
            g.fill((base.r, base.g, base.b, 51))
            pygame.draw.rect(g, (base.r, base.g, base.b, 128), (0,0,c,c), 2)
            self.ghost_surf[col] = g

    def cell_rect(self, bx: int, by: int) -> pygame.Rect:
        c = self.dims.cell
        return pygame.Rect(self.dims.board_x + bx*c, self.dims.board_y + by*c, c, c)

    def _sprite(self, cache: Dict[str, pygame.Surface], color: str, size: int) -> pygame.Surface:
        if color not in cache:
            cache[color] = self._block(color, size)
        return cache[color]

    # ---------- Board ----------
    def draw_board(self, screen: pygame.Surface, game: GameSession):
        screen.blit(self.bg, (0,0))
        for y, row in enumerate(game.board):
            for x, col in enumerate(row):
                if col:
                    screen.blit(self._sprite(self.cell_surf, col, self.dims.cell), self.cell_rect(x, y))
        p = game.current
        if p is None or game.paused:
            return
        gy = game.landing_y()
        if gy > game.y:
            for cx, cy in piece_cells(p, game.x, gy):
                screen.blit(self.ghost_surf[p.color], self.cell_rect(cx, cy))
        for cx, cy in piece_cells(p, game.x, game.y):
            screen.blit(self._sprite(self.cell_surf, p.color, self.dims.cell), self.cell_rect(cx, cy))

    def draw_preview(self, screen: pygame.Surface, piece: Optional[Piece], px: int, py: int):
        if piece is None:
            return
        pv = self.dims.pv_cell
        offx = (4*pv - len(piece.shape[0])*pv) // 2
        offy = (4*pv - len(piece.shape)*pv) // 2
        block = self._sprite(self.preview_surf, piece.color, pv)
        for r, row in enumerate(piece.shape):
            for c, v in enumerate(row):
                if v:
                    screen.blit(block, (px + offx + c*pv, py + offy + r*pv))

    # ---------- HUD / Panel ----------
    def _ranking_surfaces(self, ranking: Sequence[dict]) -> List[pygame.Surface]:
        key = tuple((s.get("id"), s.get("score")) for s in ranking)
        if key == self.hud.ranking_key:
            return self.hud.ranking
        f = self.font
        out = []
        if not ranking:
            out.append(f.render("No rankings yet.", True, DIM))
        for i, item in enumerate(ranking[:10]):
            col = MEDALS.get(i, TEXT)
            txt = f"{i+1:>2}. {str(item.get('nickname',''))[:12]:<12} {item.get('score',0):>7,}"
            out.append(f.render(txt, True, col))
        self.hud.ranking_key = key
        self.hud.ranking = out
        return out

    def draw_panel_hud(self, screen: pygame.Surface, game: GameSession, ranking: Sequence[dict], status: str = ""):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Retro Tetris Connect", True, (197,202,233))
        if game.score != self.hud.score:
            self.hud.score = game.score
            self.hud.score_s = f.render(f"Score: {game.score}", True, TEXT)
        if game.level != self.hud.level:
            self.hud.level = game.level
            self.hud.level_s = f.render(f"Level: {game.level}", True, TEXT)
        if game.lines != self.hud.lines:
            self.hud.lines = game.lines
            self.hud.lines_s = f.render(f"Lines: {game.lines}", True, TEXT)
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.score_s, (d.panel_x + 12, d.panel_y + 44))
        screen.blit(self.hud.level_s, (d.panel_x + 12, d.panel_y + 68))
        screen.blit(self.hud.lines_s, (d.panel_x + 12, d.panel_y + 92))
        screen.blit(f.render("Hold:", True, TEXT), (d.hold_x, d.panel_y + 126))
        screen.blit(f.render("Next:", True, TEXT), (d.next_x, d.panel_y + 126))
        self.draw_preview(screen, game.held, d.hold_x, d.preview_y)
        self.draw_preview(screen, game.next, d.next_x, d.preview_y)

        y = d.preview_y + d.pv_cell*4 + 16
        screen.blit(f.render("Ranking:", True, TEXT), (d.panel_x + 12, y)); y += 22
        for surf in self._ranking_surfaces(ranking):
            screen.blit(surf, (d.panel_x + 12, y)); y += 18

        if not self.hud.controls:
            self.hud.controls = [
                f.render("←/→ Move  ↓ Soft  ↑ Rotate", True, DIM),
                f.render("S Hard drop  C Hold", True, DIM),
                f.render("Space Pause  Enter Start", True, DIM),
            ]
        y = d.panel_y + d.board_h - 20*len(self.hud.controls) - 24
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20
        if status:
            screen.blit(f.render(status, True, (255,220,160)), (d.panel_x + 12, d.panel_y + d.board_h - 20))

    def draw_banner(self, screen: pygame.Surface, text: str, color=(220,240,255)):
        msg = self.big_font.render(text, True, color)
        screen.blit(msg, msg.get_rect(center=self.board_rect.center))

    def draw(self, screen: pygame.Surface, game: GameSession, ranking: Sequence[dict], status: str = ""):
        self.draw_board(screen, game)
        self.draw_panel_hud(screen, game, ranking, status)
        if game.paused:
            self.draw_banner(screen, "PAUSED")
        elif not game.running and not game.over:
            self.draw_banner(screen, "Press Enter")
