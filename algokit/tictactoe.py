"""Two-player tic-tac-toe on a 3x3 board."""

from __future__ import annotations

PLAYERS = ("X", "O")
EMPTY = " "
SIZE = 3


class Board:
    """A 3x3 tic-tac-toe board."""

    def __init__(self) -> None:
        self._cells = [[EMPTY] * SIZE for _ in range(SIZE)]

    def __getitem__(self, position: tuple[int, int]) -> str:
        row, column = position
        return self._cells[row][column]

    def play(self, row: int, column: int, player: str) -> None:
        """Put *player*'s mark on an empty cell."""
        if player not in PLAYERS:
            raise ValueError(f"unknown player {player!r}")
        if not (0 <= row < SIZE and 0 <= column < SIZE):
            raise ValueError(f"cell ({row}, {column}) is off the board")
        if self._cells[row][column] != EMPTY:
            raise ValueError(f"cell ({row}, {column}) is taken")
        self._cells[row][column] = player

    def has_won(self, player: str) -> bool:
        """Tell whether *player* holds a full row, column or diagonal."""
        lines = [list(row) for row in self._cells]
        lines += [[self._cells[r][c] for r in range(SIZE)] for c in range(SIZE)]
        lines.append([self._cells[i][i] for i in range(SIZE)])
        lines.append([self._cells[i][SIZE - 1 - i] for i in range(SIZE)])
        return any(all(cell == player for cell in line) for line in lines)

    def is_full(self) -> bool:
        """Tell whether no cell is empty."""
        return all(cell != EMPTY for row in self._cells for cell in row)

    def render(self) -> str:
        """The board as text, rows separated by dashes."""
        separator = "\n" + "-" * 9 + "\n"
        return separator.join(" | ".join(row) for row in self._cells)


def _read_move(text: str) -> tuple[int, int] | None:
    parts = text.split()
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def main(argv: list[str] | None = None) -> int:
    """Play a game on standard input and output."""
    board = Board()
    print("Tic Tac Toe Game")
    print(board.render() + "\n")
    player = PLAYERS[0]
    while True:
        try:
            line = input(f"Player {player}, enter row (0-2) and column (0-2): ")
        except EOFError:
            return 0
        move = _read_move(line)
        try:
            if move is None:
                raise ValueError("unreadable move")
            board.play(move[0], move[1], player)
        except ValueError:
            print("Invalid move. Try again.")
            continue
        print(board.render() + "\n")
        if board.has_won(player):
            print(f"Player {player} wins!")
            return 0
        if board.is_full():
            print("It's a draw!")
            return 0
        player = PLAYERS[1] if player == PLAYERS[0] else PLAYERS[0]