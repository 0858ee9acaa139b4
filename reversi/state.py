from collections import namedtuple
from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np

from .errors import InvalidChoice

SIZE = 8
EMPTY, BLACK, WHITE, MARKED = 0, 1, 2, 3   # MARKED = найденный, но ещё не выбранный ход
COLOR_NAMES = {BLACK: "Black", WHITE: "White"}

# row-major order of the 8 neighbours; legal_moves() relies on it being fixed
DIRECTIONS = tuple((dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0))

class Position(namedtuple("Position", "row col")):
    __slots__ = ()

    def __str__(self):
        # (0, 0) -> a8, (7, 7) -> h1
        return f"{chr(ord('a') + self.col)}{SIZE - self.row}"

    @classmethod
    def parse(cls, text: str) -> "Position":
        s = text.strip().lower()
        if len(s) != 2 or not ("a" <= s[0] <= "h") or not ("1" <= s[1] <= "8"):
            raise InvalidChoice(f"not a board square: {text!r}")
        return cls(SIZE - int(s[1]), ord(s[0]) - ord("a"))

# origins: same-colour cells, in discovery order, each closing a line to destination
Move = namedtuple("Move", "destination origins")

def initial_board() -> np.ndarray:
    board = np.full((SIZE, SIZE), EMPTY, dtype=np.int8)
    board[3, 3], board[3, 4] = WHITE, BLACK
    board[4, 3], board[4, 4] = BLACK, WHITE
    return board

@dataclass
class GameState:
    board: np.ndarray = field(default_factory=initial_board)
    black_score: int = 2
    white_score: int = 2
    history: List[Move] = field(default_factory=list)   # undo log, LIFO

    def score(self, color: int) -> int:
        return self.black_score if color == BLACK else self.white_score

    def scores(self) -> Tuple[int, int]:
        return self.black_score, self.white_score

    def snapshot(self) -> np.ndarray:
        return self.board.copy()
