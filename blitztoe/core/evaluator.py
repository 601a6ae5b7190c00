from enum import Enum
from typing import List

from blitztoe.core.board import Player, TicTacToeBoard

WIN_LINES = [
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),             # diagonals
]


class GameStatus(Enum):
    HUMAN_WON = "human_won"
    AI_WON = "ai_won"
    TIE = "tie"
    IN_PROGRESS = "in_progress"


class Evaluator:
    def is_winner(self, board: TicTacToeBoard, player: Player) -> bool:
        cells = board.cells
        return any(cells[a] is player and cells[b] is player and cells[c] is player
                   for a, b, c in WIN_LINES)

    def status(self, board: TicTacToeBoard) -> GameStatus:
        """
        Classify the board. A completed line wins; a full board with no line
        is a tie. Boards where both sides own a line are unreachable and
        report the human win.
        """
        if self.is_winner(board, Player.HUMAN):
            return GameStatus.HUMAN_WON
        if self.is_winner(board, Player.AI):
            return GameStatus.AI_WON
        if board.is_full():
            return GameStatus.TIE

        return GameStatus.IN_PROGRESS

    def available_positions(self, board: TicTacToeBoard) -> List[int]:
        """Empty cell indices in ascending order."""
        return [i for i, c in enumerate(board.cells) if c is None]
