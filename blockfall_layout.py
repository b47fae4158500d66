# blockfall_layout.py
from dataclasses import dataclass
from blockfall_config import CONFIG, COLS, ROWS

@dataclass
class Dims:
    cell: int
    margin: int
    header_h: int
    buttons_h: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    buttons_x: int
    buttons_y: int

def compute_dims() -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    margin = 16
    header_h = 32
    buttons_h = 40

    board_w = COLS * cell
    board_h = ROWS * cell

    total_w = margin + board_w + margin
    total_h = margin + header_h + board_h + margin + buttons_h + margin

    board_x = margin
    board_y = margin + header_h
    buttons_x = margin
    buttons_y = board_y + board_h + margin

    return Dims(
        cell=cell, margin=margin, header_h=header_h, buttons_h=buttons_h,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=board_x, board_y=board_y,
        buttons_x=buttons_x, buttons_y=buttons_y
    )
