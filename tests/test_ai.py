import numpy as np
import pytest

from reversi.state import GameState, Position, Move, BLACK, WHITE, MARKED
from reversi.rules import legal_moves, commit_move
from reversi.eval import corner_weight, edge_bonus, base_value, CORNER_WEIGHTS, EDGE_BONUS
from reversi.ai import move_value, choose_best_move, OPPONENT_STUCK
from reversi.errors import NoLegalMove

from conftest import make_state


class TestWeights:
    @pytest.mark.parametrize("p, w", [((0, 0), 2), ((0, 3), 2), ((7, 4), 2), ((4, 0), 2),
                                      ((3, 3), 1), ((1, 6), 1)])
    def test_corner_weight(self, p, w):
        assert corner_weight(Position(*p)) == w

    @pytest.mark.parametrize("p, b", [((0, 0), 0.8), ((7, 7), 0.8), ((0, 7), 0.8), ((7, 0), 0.8),
                                      ((0, 3), 0.4), ((5, 7), 0.4), ((1, 1), 0.0), ((3, 4), 0.0)])
    def test_edge_bonus(self, p, b):
        assert edge_bonus(Position(*p)) == pytest.approx(b)

    def test_tables(self):
        assert CORNER_WEIGHTS.sum() == 28 * 2 + 36
        assert EDGE_BONUS.sum() == pytest.approx(4 * 0.8 + 24 * 0.4)

    def test_base_value(self):
        # two flipped edge cells plus an edge destination
        assert base_value(Position(0, 2), [Position(0, 0), Position(0, 4)]) == pytest.approx(4.4)
        assert base_value(Position(3, 2), [Position(3, 4)]) == pytest.approx(1.0)


class TestMoveValue:
    def test_easy_opening(self, state):
        moves = legal_moves(state, BLACK)
        for to, origins in moves.items():
            assert move_value(state, Move(to, origins), BLACK, False) == pytest.approx(1.0)

    def test_hard_opening(self, state):
        # every white reply to an opening move flips one interior disc
        mv = Move(Position(3, 2), (Position(3, 4),))
        assert move_value(state, mv, BLACK, True) == pytest.approx(0.0)

    def test_hard_opponent_stuck(self):
        s = make_state(black=[(0, 0), (0, 4)], white=[(0, 1), (0, 3)])
        mv = Move(Position(0, 2), (Position(0, 0), Position(0, 4)))
        easy = move_value(s, mv, BLACK, False)
        hard = move_value(s, mv, BLACK, True)
        assert easy == pytest.approx(4.4)
        assert hard == pytest.approx(easy - OPPONENT_STUCK)
        assert hard - easy == pytest.approx(999999999)

    def test_hard_leaves_state_untouched(self, state):
        commit_move(state, Move(Position(3, 2), (Position(3, 4),)), BLACK)
        board, scores, history = state.snapshot(), state.scores(), list(state.history)
        moves = legal_moves(state, WHITE)
        marked = state.snapshot()
        for to, origins in moves.items():
            move_value(state, Move(to, origins), WHITE, True)
        assert state.scores() == scores
        assert state.history == history
        assert np.count_nonzero(state.board == MARKED) == 0
        assert np.array_equal(state.board, board)
        assert np.count_nonzero(marked == MARKED) == len(moves)


class TestChooseBestMove:
    def test_empty_moves(self, state):
        with pytest.raises(NoLegalMove):
            choose_best_move(state, {}, WHITE, False)

    @pytest.mark.parametrize("advanced", [False, True])
    def test_ties_keep_first(self, state, advanced):
        moves = legal_moves(state, BLACK)
        best = choose_best_move(state, moves, BLACK, advanced)
        assert best.destination == Position(3, 2)
        assert best.origins == (Position(3, 4),)

    @pytest.mark.parametrize("advanced", [False, True])
    def test_deterministic(self, advanced):
        s = GameState()
        commit_move(s, Move(Position(2, 3), (Position(4, 3),)), BLACK)
        picks = {choose_best_move(s, legal_moves(s, WHITE), WHITE, advanced) for _ in range(5)}
        assert len(picks) == 1

    def test_prefers_higher_value(self):
        # (0,2) flips an edge disc next to an edge destination; (5,5) flips one interior disc
        s = make_state(black=[(0, 0), (7, 7)], white=[(0, 1), (6, 6)])
        moves = legal_moves(s, BLACK)
        assert set(moves) == {Position(0, 2), Position(5, 5)}
        assert choose_best_move(s, moves, BLACK, False).destination == Position(0, 2)
        assert choose_best_move(s, moves, BLACK, True).destination == Position(0, 2)
