import numpy as np

from .state import *
from .rules import flipped_cells

def _ring_mask() -> np.ndarray:
    ring = np.zeros((SIZE, SIZE), dtype=bool)
    ring[0, :] = ring[-1, :] = ring[:, 0] = ring[:, -1] = True
    return ring

# captured cells on the outer ring count double
CORNER_WEIGHTS = np.where(_ring_mask(), 2, 1).astype(np.int64)

# destination bonus: 0.8 in a corner, 0.4 on one edge
_edge_rows = np.zeros(SIZE, dtype=int); _edge_rows[[0, -1]] = 1
EDGE_COUNT = _edge_rows[:, None] + _edge_rows[None, :]
EDGE_BONUS = np.select([EDGE_COUNT == 2, EDGE_COUNT == 1], [0.8, 0.4], 0.0)

def corner_weight(p: Position) -> int:
    return int(CORNER_WEIGHTS[p.row, p.col])

def edge_bonus(p: Position) -> float:
    return float(EDGE_BONUS[p.row, p.col])

def base_value(destination: Position, origins) -> float:
    """Static value of a move: edge bonus of the destination plus weighted captures."""
    value = edge_bonus(destination)
    for cell in flipped_cells(destination, origins):
        value += corner_weight(cell)
    return value
