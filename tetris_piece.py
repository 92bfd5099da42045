"""Piece model, shapes, rotation"""
from dataclasses import dataclass
from typing import List

COLS, ROWS = 10, 20

SHAPES = {
    "I": [[1,1,1,1]],
    "O": [[1,1],[1,1]],
    "T": [[0,1,0],[1,1,1]],
    "S": [[0,1,1],[1,1,0]],
    "Z": [[1,1,0],[0,1,1]],
    "J": [[1,0,0],[1,1,1]],
    "L": [[0,0,1],[1,1,1]],
}

COLORS = {
    "I": "#00f0f0",
    "O": "#f0f000",
    "T": "#a000f0",
    "S": "#00f000",
    "Z": "#f00000",
    "J": "#0000f0",
    "L": "#f0a000",
}

KINDS = list(SHAPES)

def rotate_cw(m):
    rows, cols = len(m), len(m[0])
    out = [[0]*rows for _ in range(cols)]
    for r in range(rows):
        for c in range(cols):
            out[c][rows-1-r] = m[r][c]
    return out

@dataclass
class Piece:
    kind: str
    shape: List[List[int]]
    color: str
    @staticmethod
    def create(kind: str) -> "Piece":
        return Piece(kind, [r[:] for r in SHAPES[kind]], COLORS[kind])
    @property
    def width(self) -> int:
        return len(self.shape[0])
    def copy(self) -> "Piece":
        return Piece(self.kind, [r[:] for r in self.shape], self.color)
    def rotated(self) -> "Piece":
        return Piece(self.kind, rotate_cw(self.shape), self.color)

def spawn_x(piece: Piece) -> int:
    return COLS//2 - piece.width//2
