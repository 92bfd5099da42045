# tetris_layout.py
from dataclasses import dataclass
from tetris_config import CONFIG
from tetris_piece import COLS, ROWS

@dataclass
class Dims:
    cell: int
    pv_cell: int
    margin: int
    panel_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int
    hold_x: int
    next_x: int
    preview_y: int

def compute_dims() -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    pv_cell = int(CONFIG["PREVIEW_CELL"])
    margin = 16
    panel_w = 260

    board_w = COLS * cell
    board_h = ROWS * cell

    total_w = margin + board_w + margin + panel_w + margin
    total_h = margin + board_h + margin

    board_x = margin
    board_y = margin
    panel_x = board_x + board_w + margin
    panel_y = margin

    # hold and next previews sit side by side, 4x4 cells each
    hold_x = panel_x + 12
    next_x = hold_x + pv_cell * 4 + 24
    preview_y = panel_y + 150

    return Dims(
        cell=cell, pv_cell=pv_cell, margin=margin, panel_w=panel_w,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=board_x, board_y=board_y,
        panel_x=panel_x, panel_y=panel_y,
        hold_x=hold_x, next_x=next_x, preview_y=preview_y,
    )
