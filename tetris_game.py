"""Game session: the single owner of board, pieces and progress.

Every input and timer event goes through a GameSession method. The main
loop owns one session; rendering only reads it.
"""
from __future__ import annotations
import logging
from typing import Optional

from tetris_board import Board, new_board, is_valid_move, place_piece, clear_lines, ghost_y
from tetris_config import CONFIG
from tetris_piece import Piece, spawn_x
from tetris_rng import PieceRandom

logger = logging.getLogger(__name__)


def drop_interval(level: int) -> int:
    base, step = CONFIG["BASE_DROP_MS"], CONFIG["DROP_STEP_MS"]
    return max(CONFIG["MIN_DROP_MS"], base - (level - 1) * step)


def level_for_lines(lines: int) -> int:
    return lines // CONFIG["LINES_PER_LEVEL"] + 1


class GameSession:
    def __init__(self, rng: Optional[PieceRandom] = None):
        self.rng = rng or PieceRandom(CONFIG["SEED"])
        self.board: Board = new_board()
        self.current: Optional[Piece] = None
        self.x = 0
        self.y = 0
        self.next: Optional[Piece] = None
        self.held: Optional[Piece] = None
        self.can_hold = True
        self.score = 0
        self.level = 1
        self.lines = 0
        self.running = False
        self.paused = False
        self.over = False
        self.drop_time = 0.0
        self.drop_interval = CONFIG["BASE_DROP_MS"]

    @property
    def active(self) -> bool:
        return self.running and not self.paused and self.current is not None

    # ---------- lifecycle ----------
    def reset(self):
        self.board = new_board()
        self.score = 0
        self.level = 1
        self.lines = 0
        self.drop_interval = drop_interval(1)
        self.current = None
        self.next = None
        self.held = None
        self.can_hold = True
        self.over = False
        self.drop_time = 0.0
        self.spawn()

    def start(self):
        if self.running:
            return
        self.reset()
        self.running = True
        self.paused = False
        self.drop_time = 0.0
        logger.debug("game started")

    def toggle_pause(self):
        if not self.running:
            return
        self.paused = not self.paused
        if not self.paused:
            self.drop_time = 0.0

    def game_over(self):
        self.running = False
        self.paused = False
        self.over = True
        logger.info("game over: score=%d level=%d lines=%d", self.score, self.level, self.lines)

    # ---------- pieces ----------
    def _put_at_spawn(self):
        self.x = spawn_x(self.current)
        self.y = 0

    def spawn(self):
        self.current = self.next or self.rng.next_piece()
        self.next = self.rng.next_piece()
        self._put_at_spawn()
        self.can_hold = True
        if not is_valid_move(self.board, self.current, self.x, self.y):
            self.game_over()

    def hold(self):
        if not self.active or not self.can_hold:
            return
        if self.held is None:
            self.held = self.current.copy()
            self.current = self.next or self.rng.next_piece()
            self.next = self.rng.next_piece()
        else:
            self.held, self.current = self.current.copy(), self.held.copy()
        self._put_at_spawn()
        if not is_valid_move(self.board, self.current, self.x, self.y):
            self.game_over()
            return
        self.can_hold = False

    def move(self, dx: int):
        if not self.active:
            return
        if is_valid_move(self.board, self.current, self.x + dx, self.y):
            self.x += dx

    def rotate(self):
        if not self.active:
            return
        # no kicks: a blocked rotation is simply dropped
        turned = self.current.rotated()
        if is_valid_move(self.board, turned, self.x, self.y):
            self.current = turned

    def _lock(self):
        place_piece(self.board, self.current, self.x, self.y)
        self._score_lines(clear_lines(self.board))
        self.spawn()

    def _score_lines(self, cleared: int):
        if not cleared:
            return
        self.lines += cleared
        self.score += cleared * CONFIG["LINE_SCORE"] * self.level
        self.level = level_for_lines(self.lines)
        self.drop_interval = drop_interval(self.level)

    def step_down(self) -> bool:
        """One gravity step. Returns True if the piece moved, False if it locked."""
        if not self.active:
            return False
        if is_valid_move(self.board, self.current, self.x, self.y + 1):
            self.y += 1
            return True
        self._lock()
        return False

    def soft_drop(self):
        if self.step_down():
            self.score += CONFIG["SOFT_DROP_BONUS"]

    def hard_drop(self):
        if not self.active:
            return
        target = ghost_y(self.board, self.current, self.x, self.y)
        self.score += (target - self.y) * CONFIG["HARD_DROP_BONUS"]
        self.y = target
        self._lock()

    def landing_y(self) -> int:
        if self.current is None:
            return self.y
        return ghost_y(self.board, self.current, self.x, self.y)

    # ---------- timer ----------
    def tick(self, dt_ms: float):
        if not self.active:
            return
        self.drop_time += dt_ms
        if self.drop_time > self.drop_interval:
            self.step_down()
            self.drop_time = 0.0
