"""
Game-mode orchestration: turn alternation, skips, undo/abort handling and high scores.

The engine never talks to the user directly; everything goes through a GameUI
passed to Reversi.  Abort is an ordinary return value (Choice.ABORT), not an
exception, and travels up to the menu loop.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple, Union

import numpy as np

from .state import *
from .rules import legal_moves, commit_move, undo_last_move, clear_marks, reset, check_winner
from .ai import choose_best_move
from .errors import InvalidChoice

logger = logging.getLogger(__name__)

UNDO_MIN_HISTORY = 2   # undo always takes back two plies

class Choice(Enum):
    UNDO = "undo"
    ABORT = "abort"

UNDO, ABORT = Choice.UNDO, Choice.ABORT

class GameMode(Enum):
    QUIT = 0
    VS_AI_EASY = 1
    VS_AI_HARD = 2
    VS_HUMAN = 3

class Outcome(Enum):
    FINISHED = "finished"
    ABORTED = "aborted"

@dataclass
class HighScores:
    scores: Dict[GameMode, int] = field(default_factory=lambda: {
        GameMode.VS_AI_EASY: 0, GameMode.VS_AI_HARD: 0, GameMode.VS_HUMAN: 0})

    def get(self, mode: GameMode) -> int:
        return self.scores[mode]

    def submit(self, mode: GameMode, score: int) -> bool:
        """Record `score` if it beats the mode's best; True on a new record."""
        if score > self.scores[mode]:
            self.scores[mode] = score
            return True
        return False

@dataclass
class GameResult:
    outcome: Outcome
    winner: Optional[int] = None          # BLACK, WHITE or None (draw / aborted)
    black_score: int = 0
    white_score: int = 0
    new_high_score: bool = False

class GameUI(ABC):
    """Presentation hooks the engine calls out to."""

    @abstractmethod
    def notify_turn(self, color: int, board: np.ndarray, scores: Tuple[int, int]): ...

    @abstractmethod
    def request_move_choice(self, color: int, destinations: List[Position],
                            undo_available: bool) -> Union[int, Choice]:
        """Index into `destinations`, UNDO or ABORT. Blocks until the player answers."""

    @abstractmethod
    def notify_computer_move(self, destination: Position): ...

    @abstractmethod
    def notify_game_result(self, winner: Optional[int]): ...

    @abstractmethod
    def notify_new_high_score(self): ...

    def notify_invalid_choice(self):
        pass

# turn handlers return True (moved), False (no legal move, skipped) or ABORT
TurnResult = Union[bool, Choice]

class Reversi:
    def __init__(self, ui: GameUI, state: Optional[GameState] = None,
                 high_scores: Optional[HighScores] = None):
        self.ui = ui
        self.state = state or GameState()
        self.high_scores = high_scores or HighScores()

    def undo_available(self) -> bool:
        return len(self.state.history) >= UNDO_MIN_HISTORY

    def _validate(self, choice, n: int, undo_ok: bool) -> Union[int, Choice]:
        if choice is ABORT:
            return choice
        if choice is UNDO:
            if undo_ok: return choice
            raise InvalidChoice("undo is not available")
        if isinstance(choice, (int, np.integer)) and not isinstance(choice, bool) and 0 <= choice < n:
            return int(choice)
        raise InvalidChoice(f"no option {choice!r} among {n} moves")

    def _request_choice(self, color: int, destinations: List[Position]) -> Union[int, Choice]:
        undo_ok = self.undo_available()
        while True:
            choice = self.ui.request_move_choice(color, destinations, undo_ok)
            try:
                return self._validate(choice, len(destinations), undo_ok)
            except InvalidChoice as e:
                logger.info("%s: %s", COLOR_NAMES[color], e)
                self.ui.notify_invalid_choice()

    def player_turn(self, color: int) -> TurnResult:
        while True:
            moves = legal_moves(self.state, color)
            if not moves:
                return False
            self.ui.notify_turn(color, self.state.snapshot(), self.state.scores())
            destinations = list(moves)
            choice = self._request_choice(color, destinations)
            clear_marks(self.state)
            if choice is ABORT:
                return ABORT
            if choice is UNDO:
                undo_last_move(self.state)
                undo_last_move(self.state)
                continue   # legal moves may differ now
            to = destinations[choice]
            commit_move(self.state, Move(to, moves[to]), color)
            return True

    def computer_turn(self, color: int, hard: bool) -> TurnResult:
        moves = legal_moves(self.state, color)
        if not moves:
            return False
        self.ui.notify_turn(color, self.state.snapshot(), self.state.scores())
        mv = choose_best_move(self.state, moves, color, hard)
        clear_marks(self.state)
        self.ui.notify_computer_move(mv.destination)
        commit_move(self.state, mv, color)
        return True

    def _run(self, mode: GameMode, black: Callable[[int], TurnResult],
             white: Callable[[int], TurnResult]) -> GameResult:
        reset(self.state)
        skips = 0
        while skips < 2:
            for color, turn in ((BLACK, black), (WHITE, white)):
                moved = turn(color)
                if moved is ABORT:
                    logger.debug("%s: aborted by %s", mode.name, COLOR_NAMES[color])
                    return GameResult(Outcome.ABORTED, None, *self.state.scores())
                if moved:
                    skips = 0
                else:
                    skips += 1
                    logger.debug("%s has no legal move, skipped", COLOR_NAMES[color])
                    if skips == 2: break
        return self._finish(mode)

    def _finish(self, mode: GameMode) -> GameResult:
        winner = check_winner(self.state)
        self.ui.notify_game_result(winner)
        record = False
        if winner is not None:
            record = self.high_scores.submit(mode, self.state.score(winner))
            if record:
                self.ui.notify_new_high_score()
        logger.debug("%s finished %d:%d, winner %s, record=%s", mode.name,
                     self.state.black_score, self.state.white_score,
                     COLOR_NAMES.get(winner, "none"), record)
        return GameResult(Outcome.FINISHED, winner, *self.state.scores(), record)

    def play_versus_player(self) -> GameResult:
        return self._run(GameMode.VS_HUMAN, self.player_turn, self.player_turn)

    def play_versus_computer(self, hard: bool) -> GameResult:
        # человек играет чёрными и ходит первым
        mode = GameMode.VS_AI_HARD if hard else GameMode.VS_AI_EASY
        return self._run(mode, self.player_turn, lambda color: self.computer_turn(color, hard))

    def play(self, mode: GameMode) -> Optional[GameResult]:
        if mode is GameMode.QUIT: return None
        if mode is GameMode.VS_HUMAN: return self.play_versus_player()
        return self.play_versus_computer(hard=(mode is GameMode.VS_AI_HARD))
