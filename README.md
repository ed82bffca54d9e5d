# consoletasks

Five small interactive programs that run in the terminal:

| Command         | Module                    | What it does                                                        |
|-----------------|---------------------------|---------------------------------------------------------------------|
| `guessing-game` | `consoletasks.guessing`   | Guess a secret number from 1 to 100, with "too high/too low" hints  |
| `calculator`    | `consoletasks.calculator` | Apply `+`, `-`, `*` or `/` to two whole numbers                     |
| `tictactoe`     | `consoletasks.tictactoe`  | Two-player tic-tac-toe on a 3×3 board, cells numbered 1–9           |
| `todo`          | `consoletasks.todo`       | Menu-driven to-do list: add, view, mark done, remove                |
| `library`       | `consoletasks.library`    | Library manager: books, searches, issuing and returning with fines  |

The package needs nothing beyond the Python standard library (Python 3.10 or later).

## Installation

```
pip install .
```

## Usage

Start any of the programs by name and follow the prompts:

```
guessing-game
calculator
tictactoe
todo
library
```

`guessing-game` also takes `--seed N` to make the secret numbers repeatable.
After each round it asks whether to play again; `YES` or `yes` starts a new round.

`calculator` reads two integers and an operator. Division truncates toward
zero; dividing by zero or giving an unknown operator prints an error and
exits with status 1.

`tictactoe` asks players `X` and `O` in turn for a cell number. A number
outside 1–9, or a cell already taken, is refused and the same player asks again.

### Library rules

Books are issued for 14 days. A book returned late costs 5 per day past
its due date. Dates are shown as `YYYY-MM-DD`. A borrower who already has
an ID on record keeps the name first given for it.

## Using the modules directly

The logic behind each program can also be used from Python:

```python
from consoletasks.calculator import calculate, CalculatorError
from consoletasks.guessing import GuessingGame, Verdict
from consoletasks.tictactoe import Board, MoveError, other_player
from consoletasks.todo import TodoList
from consoletasks.library import Library, LibraryError

calculate(7, 2, "/")         # 3
calculate(-7, 2, "/")        # -3 (truncates toward zero)

game = GuessingGame(42)
game.guess(50)               # Verdict.TOO_HIGH
game.guess(42)               # Verdict.CORRECT
game.attempts                # 2

board = Board()
board.place(5, "X")
board.has_won("X")           # False
other_player("X")            # "O"
print(board.render())

todo = TodoList()
todo.add("Buy milk")
todo.mark_completed(1)
print(todo.render())

library = Library()
library.add_book("Dune", "Frank Herbert", "978-0")
library.issue("978-0", "B1", "Ada", today="2024-01-01")   # due 2024-01-15
receipt = library.return_book("978-0", "B1", today="2024-01-18")
receipt.days_late            # 3
receipt.fine                 # 15
```

Errors are raised as exceptions: `CalculatorError` for a bad operator or
division by zero, `MoveError` for an invalid or taken cell, `IndexError` for
a task number out of range, and `LibraryError` for a missing book or
borrower, a book already issued, or a return that does not match a loan.

## What this package does not do

Everything is held in memory only. The to-do list and the library's books
and borrowers are not saved anywhere and are lost when the program exits.

## Running the tests

```
pip install .[test]
pytest
```