from typing import Optional

from blitztoe.core.board import Player, TicTacToeBoard
from blitztoe.core.evaluator import Evaluator, GameStatus
from blitztoe.core.search import Move, SearchEngine


class Engine:
    def __init__(self, board: Optional[TicTacToeBoard] = None):
        self.board = board or TicTacToeBoard()
        self.evaluator = Evaluator()
        self.search = SearchEngine(self.evaluator)

    def get_best_move(self, player: Player) -> Move:
        return self.search.find_best_move(self.board, player)

    def make_move(self, position: int, player: Player) -> bool:
        return self.board.make_move(position, player)

    def status(self) -> GameStatus:
        return self.evaluator.status(self.board)

    def print_board(self):
        self.board.print_board()
