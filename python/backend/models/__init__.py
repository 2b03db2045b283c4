from backend.models.adjacency import GRID, AdjacencyGraph
from backend.models.board import EMPTY, GOAL, INITIAL, Board, Direction

__all__ = ["AdjacencyGraph", "Board", "Direction", "EMPTY", "GOAL", "GRID", "INITIAL"]
