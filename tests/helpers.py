from blockfall_board import Board


class SequenceRandom:
    """Hands out piece kinds from a fixed list, repeating the last one."""
    def __init__(self, *kinds):
        self.kinds = list(kinds)

    def next_piece(self):
        if len(self.kinds) > 1:
            return self.kinds.pop(0)
        return self.kinds[0]


def fill_row(board: Board, y: int, color="red", skip=()):
    for x in range(board.width):
        if x not in skip:
            board.set(x, y, color)


def occupied(shape):
    return {(r, c) for r, row in enumerate(shape) for c, v in enumerate(row) if v}
