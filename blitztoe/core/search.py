import logging
import time
from dataclasses import dataclass
from typing import List, Optional

from blitztoe.core.board import Player, TicTacToeBoard
from blitztoe.core.evaluator import Evaluator, GameStatus

WIN_SCORE = 10
LOSS_SCORE = -10
TIE_SCORE = 0

# Scores are from the AI's (maximizing) point of view and ignore depth.
TERMINAL_SCORES = {
    GameStatus.AI_WON: WIN_SCORE,
    GameStatus.HUMAN_WON: LOSS_SCORE,
    GameStatus.TIE: TIE_SCORE,
}

logger = logging.getLogger(__name__)


@dataclass
class Move:
    position: Optional[int] = None  # None on terminal leaves
    score: int = 0

    def __str__(self) -> str:
        return f"Position: {self.position}, Score: {self.score}"


class SearchEngine:
    def __init__(self, evaluator: Optional[Evaluator] = None):
        """
        Exhaustive minimax over the remaining game tree.
        nodes counts minimax calls made by the last find_best_move.
        """
        self.evaluator = evaluator or Evaluator()
        self.nodes = 0

    def find_best_move(self, board: TicTacToeBoard, player: Player) -> Move:
        """
        Returns the optimal Move for player against an optimal opponent.
        The board is marked and unmarked during the search and is left
        exactly as it was passed in.
        """
        self.nodes = 0
        start_time = time.time()

        best = self._minimax(board, player)

        elapsed = time.time() - start_time
        logger.debug("%s to move: %s (%d nodes, %.3fs)", player.name, best, self.nodes, elapsed)
        return best

    def _minimax(self, board: TicTacToeBoard, player: Player) -> Move:
        self.nodes += 1

        status = self.evaluator.status(board)
        if status is not GameStatus.IN_PROGRESS:
            return Move(score=TERMINAL_SCORES[status])

        moves = []
        for pos in self.evaluator.available_positions(board):
            board.push(pos, player)
            try:
                score = self._minimax(board, player.opponent).score
            finally:
                board.pop()
            moves.append(Move(position=pos, score=score))

        return self._select_best(moves, player)

    def _select_best(self, moves: List[Move], player: Player) -> Move:
        """First move with the highest score for the AI, lowest for the human."""
        best = moves[0]
        for move in moves[1:]:
            if player is Player.AI and move.score > best.score:
                best = move
            elif player is Player.HUMAN and move.score < best.score:
                best = move
        return best
