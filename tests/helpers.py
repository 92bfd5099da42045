from tetris_game import GameSession
from tetris_rng import PieceRandom


class FixedRandom(PieceRandom):
    """Deals kinds from a list, repeating the last one when it runs out."""
    def __init__(self, kinds):
        super().__init__(0)
        self.kinds = list(kinds)

    def next_kind(self):
        if len(self.kinds) > 1:
            return self.kinds.pop(0)
        return self.kinds[0]


def make_session(*kinds):
    return GameSession(FixedRandom(kinds or ["O"]))


def fill_row(board, y, color="#888888", gap=None):
    for x in range(len(board[y])):
        board[y][x] = None if x == gap else color
