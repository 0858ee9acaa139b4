from .state import *
from .errors import ReversiError, InvalidChoice, EmptyHistory, NoLegalMove
from .rules import *
from .eval import corner_weight, edge_bonus, base_value
from .ai import move_value, choose_best_move, OPPONENT_STUCK
from .game import Reversi, GameUI, GameMode, GameResult, HighScores, Outcome, Choice, UNDO, ABORT
from .cli import main, main_menu, ConsoleUI, render_board
