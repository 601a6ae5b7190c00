"""Core engine components: board, evaluator and minimax search."""

from .board import Player, TicTacToeBoard
from .evaluator import Evaluator, GameStatus
from .search import Move, SearchEngine
