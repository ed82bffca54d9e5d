"""A to-do list kept in memory and driven from a text menu."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterator, TextIO

_MENU = (
    "\n===TO-DO-LIST MENU===\n"
    "1. Add task.\n"
    "2. Veiw tasks.\n"
    "3. Mark task as completed.\n"
    "4. Remove task.\n"
    "5. Exit.\n"
    "Enter your choice (1-5): "
)


@dataclass
class Task:
    description: str
    completed: bool = False


class TodoList:
    """Tasks in the order they were added, numbered from 1."""

    def __init__(self) -> None:
        self.tasks: list[Task] = []

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def _position(self, number: int) -> int:
        if not 1 <= number <= len(self.tasks):
            raise IndexError("Invalid task number")
        return number - 1

    def add(self, description: str) -> Task:
        task = Task(description)
        self.tasks.append(task)
        return task

    def mark_completed(self, number: int) -> Task:
        """Mark task *number* as done and return it."""
        task = self.tasks[self._position(number)]
        task.completed = True
        return task

    def remove(self, number: int) -> Task:
        """Remove task *number* and return it."""
        return self.tasks.pop(self._position(number))

    def render(self) -> str:
        if not self.tasks:
            return "No tasks found.\n"
        lines = "".join(
            f"{number}. [{'Done' if task.completed else 'Not Done'}] {task.description}\n"
            for number, task in enumerate(self.tasks, start=1)
        )
        return "\n To-Do List: \n" + lines + "\n"


def _next_token(stream: TextIO) -> str | None:
    while line := stream.readline():
        words = line.split()
        if words:
            return words[0]
    return None


def _read_number(stream: TextIO) -> int | None:
    token = _next_token(stream)
    try:
        return int(token) if token is not None else None
    except ValueError:
        return None


def _add(todo: TodoList, stdin: TextIO, stdout: TextIO) -> None:
    stdout.write("Enter the task descprition: ")
    stdout.flush()
    todo.add(stdin.readline().rstrip("\r\n"))
    stdout.write("Task added succesfully\n")


def _mark(todo: TodoList, stdin: TextIO, stdout: TextIO) -> None:
    stdout.write(todo.render())
    if not todo:
        return
    stdout.write("Enter the task number you want to mark as completed: ")
    stdout.flush()
    number = _read_number(stdin)
    try:
        todo.mark_completed(number if number is not None else 0)
    except IndexError:
        stdout.write("Invalid task number\n")
    else:
        stdout.write("Task marked as completed.\n")


def _remove(todo: TodoList, stdin: TextIO, stdout: TextIO) -> None:
    if not todo:
        return
    stdout.write(todo.render())
    stdout.write("Enter the task number you want to remove: ")
    stdout.flush()
    number = _read_number(stdin)
    try:
        todo.remove(number if number is not None else 0)
    except IndexError:
        stdout.write("Invalid task number.\n")
    else:
        stdout.write("Tasks removed succesfully.\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="todo", description="Manage a to-do list.")
    parser.parse_args(argv)

    stdin, stdout = sys.stdin, sys.stdout
    todo = TodoList()
    while True:
        stdout.write(_MENU)
        stdout.flush()
        token = _next_token(stdin)
        if token is None:
            stdout.write("\n")
            return 0
        try:
            choice = int(token)
        except ValueError:
            choice = None
        if choice == 1:
            _add(todo, stdin, stdout)
        elif choice == 2:
            stdout.write(todo.render())
        elif choice == 3:
            _mark(todo, stdin, stdout)
        elif choice == 4:
            _remove(todo, stdin, stdout)
        elif choice == 5:
            stdout.write("Thank you!\n")
            return 0
        else:
            stdout.write("Invalid choice. Try again.\n")


if __name__ == "__main__":
    raise SystemExit(main())