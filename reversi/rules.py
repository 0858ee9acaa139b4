import logging
from typing import Dict, Iterator, Optional, Sequence, Tuple

import numpy as np

from .state import *
from .errors import EmptyHistory

logger = logging.getLogger(__name__)

Moves = Dict[Position, Tuple[Position, ...]]

def opponent(color: int) -> int:
    return WHITE if color == BLACK else BLACK

def is_on_board(row: int, col: int) -> bool:
    return 0 <= row < SIZE and 0 <= col < SIZE

def count_cells(state: GameState, color: int) -> int:
    return int(np.count_nonzero(state.board == color))

def reset(state: GameState):
    state.board[:, :] = initial_board()
    state.black_score = 2; state.white_score = 2
    state.history.clear()

def clear_marks(state: GameState):
    state.board[state.board == MARKED] = EMPTY

def legal_moves(state: GameState, color: int) -> Moves:
    """
    Every empty cell `color` may play to, mapped to the origins that justify it.
    Destinations are marked MARKED on the board; insertion order of the result
    is the discovery order (row-major over cells, DIRECTIONS over neighbours).
    """
    clear_marks(state)
    board = state.board
    opp = opponent(color)
    found: Dict[Position, list] = {}

    for i in range(SIZE):
        for j in range(SIZE):
            if board[i, j] != color:
                continue
            for dr, dc in DIRECTIONS:
                k, l = i + dr, j + dc
                if not is_on_board(k, l) or board[k, l] != opp:
                    continue
                m, n = k + dr, l + dc
                while is_on_board(m, n):
                    cell = board[m, n]
                    if cell == EMPTY:
                        board[m, n] = MARKED
                        found[Position(m, n)] = [Position(i, j)]
                        break
                    if cell == MARKED:
                        found[Position(m, n)].append(Position(i, j))
                        break
                    if cell == color:
                        break
                    m += dr; n += dc

    return {to: tuple(origins) for to, origins in found.items()}

def flipped_cells(destination: Position, origins: Sequence[Position]) -> Iterator[Position]:
    """Cells strictly between each origin and the destination, origin by origin."""
    for o in origins:
        dr = (destination.row > o.row) - (destination.row < o.row)
        dc = (destination.col > o.col) - (destination.col < o.col)
        r, c = o.row + dr, o.col + dc
        while (r, c) != (destination.row, destination.col):
            yield Position(r, c)
            r += dr; c += dc

def _add_score(state: GameState, color: int, n: int):
    if color == BLACK: state.black_score += n
    else: state.white_score += n

def apply_capture(state: GameState, destination: Position, origins: Sequence[Position], color: int) -> int:
    """Paint every captured cell `color`; shared by commit and undo. Returns the number flipped."""
    n = 0
    for r, c in flipped_cells(destination, origins):
        state.board[r, c] = color
        n += 1
    _add_score(state, color, n)
    _add_score(state, opponent(color), -n)
    return n

def commit_move(state: GameState, move: Move, color: int):
    to, origins = move
    flipped = apply_capture(state, to, origins, color)
    state.board[to.row, to.col] = color
    _add_score(state, color, 1)
    state.history.append(Move(to, tuple(origins)))
    logger.debug("%s -> %s, flipped %d, score %d:%d",
                 COLOR_NAMES[color], to, flipped, state.black_score, state.white_score)

def undo_last_move(state: GameState) -> Move:
    if not state.history:
        raise EmptyHistory("no move to undo since the last reset")
    move = state.history.pop()
    to, origins = move
    color = int(state.board[to.row, to.col])
    apply_capture(state, to, origins, opponent(color))
    state.board[to.row, to.col] = EMPTY
    _add_score(state, color, -1)
    logger.debug("undo %s %s, score %d:%d",
                 COLOR_NAMES[color], to, state.black_score, state.white_score)
    return move

def check_winner(state: GameState) -> Optional[int]:
    """Winner by score, None on a draw."""
    if state.black_score > state.white_score: return BLACK
    if state.white_score > state.black_score: return WHITE
    return None
