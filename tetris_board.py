"""Board helpers: is_valid_move, place_piece, clear_lines, ghost"""
from typing import Optional, List, Tuple
from tetris_piece import Piece, COLS, ROWS

Board = List[List[Optional[str]]]

def new_board() -> Board:
    return [[None]*COLS for _ in range(ROWS)]

def is_valid_move(board: Board, piece: Piece, x: int, y: int) -> bool:
    for r,row in enumerate(piece.shape):
        for c,v in enumerate(row):
            if not v: continue
            bx,by = x+c, y+r
            if bx<0 or bx>=COLS or by>=ROWS: return False
            # rows above the top are open so pieces can spawn partly hidden
            if by>=0 and board[by][bx]: return False
    return True

def place_piece(board: Board, piece: Piece, x: int, y: int):
    for r,row in enumerate(piece.shape):
        for c,v in enumerate(row):
            if v:
                by = y+r
                if by>=0: board[by][x+c] = piece.color

def clear_lines(board: Board) -> int:
    """Remove full rows bottom-up and return how many were cleared."""
    c=0; y=ROWS-1
    while y>=0:
        if all(board[y][x] for x in range(COLS)):
            del board[y]; board.insert(0,[None]*COLS); c+=1
        else: y-=1
    return c

def ghost_y(board: Board, piece: Piece, x: int, y: int) -> int:
    while is_valid_move(board, piece, x, y+1):
        y+=1
    return y

def piece_cells(piece: Piece, x: int, y: int) -> List[Tuple[int,int]]:
    cells = []
    for r,row in enumerate(piece.shape):
        for c,v in enumerate(row):
            if v and y+r>=0:
                cells.append((x+c, y+r))
    return cells
