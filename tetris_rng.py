"""Piece randomizer module"""
import random
from typing import Optional
from tetris_piece import KINDS, Piece

class PieceRandom:
    """Uniform pick over the seven kinds; pass a seed for repeatable games."""
    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def next_kind(self) -> str:
        return self.rng.choice(KINDS)

    def next_piece(self) -> Piece:
        return Piece.create(self.next_kind())
