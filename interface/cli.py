import argparse
import logging
import sys
from typing import Optional

from blitztoe.config import CONFIG, Config, FIRST_PLAYERS
from blitztoe.core.board import Player, TicTacToeBoard
from blitztoe.core.evaluator import GameStatus
from blitztoe.core.utils import print_board, print_info
from blitztoe.main import Engine

logger = logging.getLogger(__name__)

RESULTS = {
    GameStatus.HUMAN_WON: "Human won!",
    GameStatus.AI_WON: "AI won!",
    GameStatus.TIE: "Tie game.",
}


def read_human_move(board: TicTacToeBoard) -> int:
    while True:
        text = input("Enter your move (0-8): ")
        try:
            position = int(text)
        except ValueError:
            print("Please type a number 0..8.")
            continue
        if position in board.get_legal_moves():
            return position
        print("Illegal move, try again.")


def play_game(engine: Optional[Engine] = None, first_player: Optional[Player] = None,
              human: bool = False, cfg: Optional[Config] = None) -> GameStatus:
    """
    Alternate turns until the game ends. Both sides are searched unless
    human is set, in which case the HUMAN side reads moves from stdin.
    """
    cfg = cfg or CONFIG
    engine = engine or Engine()
    turn = first_player or cfg.game.starting_player
    status = engine.status()

    while status is GameStatus.IN_PROGRESS:
        if human and turn is Player.HUMAN:
            position = read_human_move(engine.board)
        else:
            move = engine.get_best_move(turn)
            print_info(move, engine.search.nodes, cfg.ui.show_nodes)
            position = move.position

        engine.make_move(position, turn)
        print_board(engine.board, cfg.game.marks)

        status = engine.status()
        turn = turn.opponent

    logger.info("game over after %d moves: %s", len(engine.board.move_history), status.name)
    print(RESULTS[status])
    return status


def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="blitztoe", description=f"{CONFIG.ui.engine_name} tic-tac-toe")
    p.add_argument("--human", action="store_true", help="play the human side from the keyboard")
    p.add_argument("--first", choices=sorted(FIRST_PLAYERS), default=None, help="who moves first")
    p.add_argument("--board", default=None,
                   help="starting board as 9 row-major marks, e.g. 'XX.OO....'")
    args = p.parse_args(argv)

    args.start = TicTacToeBoard()
    if args.board is not None:
        try:
            args.start = TicTacToeBoard.from_string(args.board, *CONFIG.game.marks)
        except ValueError as e:
            p.error(str(e))
    return args


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=CONFIG.log_level, format="%(levelname)s %(name)s: %(message)s")

    first = FIRST_PLAYERS[args.first] if args.first else None
    play_game(Engine(args.start), first_player=first, human=args.human)
    return 0


if __name__ == "__main__":
    sys.exit(main())
