import numpy as np
import pytest

from reversi.state import GameState, SIZE, EMPTY, BLACK, WHITE
from reversi.game import GameUI


def make_state(black=(), white=()):
    """GameState holding only the given discs, with matching scores."""
    board = np.full((SIZE, SIZE), EMPTY, dtype=np.int8)
    for r, c in black:
        board[r, c] = BLACK
    for r, c in white:
        board[r, c] = WHITE
    return GameState(board=board, black_score=len(black), white_score=len(white))


class ScriptedUI(GameUI):
    """Answers move requests from a list (or a callable) and records every hook call."""

    def __init__(self, answers=()):
        self.answers = list(answers) if not callable(answers) else answers
        self.turns = []
        self.requests = []
        self.computer_moves = []
        self.results = []
        self.records = 0
        self.invalid = 0

    def notify_turn(self, color, board, scores):
        self.turns.append((color, board, scores))

    def request_move_choice(self, color, destinations, undo_available):
        self.requests.append((color, list(destinations), undo_available))
        if callable(self.answers):
            return self.answers(color, destinations, undo_available)
        return self.answers.pop(0)

    def notify_computer_move(self, destination):
        self.computer_moves.append(destination)

    def notify_game_result(self, winner):
        self.results.append(winner)

    def notify_new_high_score(self):
        self.records += 1

    def notify_invalid_choice(self):
        self.invalid += 1


@pytest.fixture
def state():
    return GameState()
