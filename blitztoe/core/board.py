"""3x3 board with move history tracking."""

from enum import Enum
from typing import List, Optional

BOARD_SIZE = 9


class Player(Enum):
    AI = "ai"
    HUMAN = "human"

    @property
    def opponent(self) -> "Player":
        return Player.HUMAN if self is Player.AI else Player.AI


class TicTacToeBoard:
    def __init__(self, cells: Optional[List[Optional[Player]]] = None):
        """Initialize from a list of 9 cells or an empty board. None is an empty cell."""
        self.cells: List[Optional[Player]] = list(cells) if cells else [None] * BOARD_SIZE
        self.move_history: List[int] = []

    @classmethod
    def from_string(cls, text: str, ai_mark: str = "X", human_mark: str = "O",
                    empty_mark: str = ".") -> "TicTacToeBoard":
        """Parse a 9 character row-major string like 'XX.OO....'."""
        if len(text) != BOARD_SIZE:
            raise ValueError(f"Board string must have {BOARD_SIZE} cells, got {len(text)}")
        marks = {ai_mark: Player.AI, human_mark: Player.HUMAN, empty_mark: None}
        cells = []
        for ch in text:
            if ch not in marks:
                raise ValueError(f"Unknown mark {ch!r} in board string {text!r}")
            cells.append(marks[ch])
        return cls(cells)

    def to_string(self, ai_mark: str = "X", human_mark: str = "O", empty_mark: str = ".") -> str:
        marks = {Player.AI: ai_mark, Player.HUMAN: human_mark, None: empty_mark}
        return "".join(marks[c] for c in self.cells)

    def copy(self) -> "TicTacToeBoard":
        b = TicTacToeBoard(self.cells)
        b.move_history = list(self.move_history)
        return b

    def reset(self):
        """Reset to the empty board."""
        self.cells = [None] * BOARD_SIZE
        self.move_history.clear()

    def push(self, position: int, player: Player):
        """Mark a cell without validation. Used by the search."""
        self.cells[position] = player
        self.move_history.append(position)

    def pop(self) -> int:
        """Clear the most recently marked cell and return its position."""
        position = self.move_history.pop()
        self.cells[position] = None
        return position

    def make_move(self, position: int, player: Player) -> bool:
        """Mark an empty cell. Returns True if legal."""
        if not isinstance(position, int) or not 0 <= position < BOARD_SIZE:
            return False
        if self.cells[position] is not None:
            return False
        self.push(position, player)
        return True

    def undo_move(self):
        """Pop the last move."""
        if self.move_history:
            self.pop()

    def get_legal_moves(self) -> List[int]:
        return [i for i, c in enumerate(self.cells) if c is None]

    def is_full(self) -> bool:
        return all(c is not None for c in self.cells)

    def rows(self, ai_mark: str = "X", human_mark: str = "O", empty_mark: str = ".") -> List[str]:
        s = self.to_string(ai_mark, human_mark, empty_mark)
        return [s[0:3], s[3:6], s[6:9]]

    def print_board(self):
        """Print ASCII representation."""
        print(self)

    def __getitem__(self, position: int) -> Optional[Player]:
        return self.cells[position]

    def __eq__(self, other) -> bool:
        if not isinstance(other, TicTacToeBoard):
            return NotImplemented
        return self.cells == other.cells

    def __str__(self) -> str:
        return "\n".join(self.rows())

    def __repr__(self) -> str:
        return f"TicTacToeBoard({self.to_string()!r})"
