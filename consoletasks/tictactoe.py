"""Two-player tic-tac-toe on a numbered 3x3 board."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

PLAYERS = ("X", "O")

_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class MoveError(ValueError):
    """Raised for a cell number out of range or a cell already taken."""


class Board:
    """A 3x3 board whose free cells show their numbers 1 to 9."""

    def __init__(self) -> None:
        self.cells = [str(number) for number in range(1, 10)]

    def place(self, cell: int, player: str) -> None:
        """Put *player*'s mark on cell number *cell* (1 to 9)."""
        if not 1 <= cell <= 9:
            raise MoveError("Invalid input. Try again!")
        if self.cells[cell - 1] in PLAYERS:
            raise MoveError("Cell already taken. Try another.")
        self.cells[cell - 1] = player

    def has_won(self, player: str) -> bool:
        """Tell whether *player* holds a full row, column or diagonal."""
        return any(all(self.cells[i] == player for i in line) for line in _LINES)

    def is_full(self) -> bool:
        """Tell whether every cell carries a mark."""
        return all(cell in PLAYERS for cell in self.cells)

    def render(self) -> str:
        """Return the board as text, framed by blank lines."""
        rows = (" " + " | ".join(self.cells[start:start + 3]) for start in range(0, 9, 3))
        return "\n" + "\n---|---|---\n".join(rows) + "\n\n"


def other_player(player: str) -> str:
    """Return the player whose turn follows *player*.

    "X" is followed by "O"; any other mark is followed by "X".
    """
    first, second = PLAYERS
    if player == first:
        return second
    return first


def _next_token(stream: TextIO) -> str | None:
    while line := stream.readline():
        words = line.split()
        if words:
            return words[0]
    return None


def _play_game(stdin: TextIO, stdout: TextIO) -> None:
    board = Board()
    player = "X"
    while True:
        stdout.write(board.render())
        stdout.write(f"Player {player}, enter your choice (1-9): ")
        stdout.flush()
        token = _next_token(stdin)
        if token is None:
            raise EOFError("input ended during the game")
        try:
            cell = int(token)
        except ValueError:
            cell = 0
        try:
            board.place(cell, player)
        except MoveError as error:
            stdout.write(f"{error}\n")
            continue
        if board.has_won(player):
            stdout.write(board.render())
            stdout.write(f"Player {player} wins\n")
            return
        if board.is_full():
            stdout.write(board.render())
            stdout.write("It's a draw.\n")
            return
        player = other_player(player)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="tictactoe", description="Play tic-tac-toe.")
    parser.parse_args(argv)

    stdin, stdout = sys.stdin, sys.stdout
    try:
        while True:
            _play_game(stdin, stdout)
            stdout.write("Play again (y/n): ")
            stdout.flush()
            answer = _next_token(stdin) or ""
            if answer[:1] not in ("y", "Y"):
                break
    except EOFError:
        stdout.write("\n")
        return 1
    stdout.write("Thanks for playing!\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())