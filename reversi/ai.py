import logging
from typing import Mapping, Sequence

from .state import *
from .rules import legal_moves, commit_move, undo_last_move, clear_marks, opponent
from .eval import base_value
from .errors import NoLegalMove

logger = logging.getLogger(__name__)

# value of the opponent's best reply when it has none
OPPONENT_STUCK = -999999999.0

def move_value(state: GameState, move: Move, color: int, advanced: bool) -> float:
    """
    Heuristic value of `move` for `color`.
    advanced=True subtracts the opponent's best immediate reply (one ply, never deeper).
    """
    to, origins = move
    value = base_value(to, origins)
    if not advanced:
        return value

    commit_move(state, move, color)
    replies = legal_moves(state, opponent(color))
    undo_last_move(state)
    clear_marks(state)

    best_reply = OPPONENT_STUCK
    for reply in replies.items():
        v = move_value(state, Move(*reply), opponent(color), False)
        if v > best_reply: best_reply = v
    return value - best_reply

def choose_best_move(state: GameState, moves: Mapping[Position, Sequence[Position]],
                     color: int, advanced: bool) -> Move:
    """First move with the strictly greatest value, in generator order."""
    if not moves:
        raise NoLegalMove(f"{COLOR_NAMES[color]} has no legal move to choose from")
    best, best_val = None, None
    for to, origins in moves.items():
        mv = Move(to, tuple(origins))
        val = move_value(state, mv, color, advanced)
        logger.debug("%s %s: %.2f", COLOR_NAMES[color], to, val)
        if best_val is None or val > best_val:
            best, best_val = mv, val
    logger.debug("%s picks %s (%.2f, advanced=%s)", COLOR_NAMES[color], best.destination, best_val, advanced)
    return best
