"""A small lending library: books, borrowers, loans and late fines."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import TextIO

LOAN_DAYS = 14
FINE_PER_DAY = 5

_MENU = (
    "\n===Library Management System Menu===\n"
    "1. Add a new book.\n"
    "2. Veiw all books.\n"
    "3. Search the book by Title.\n"
    "4. Search the book by Author Name.\n"
    "5. Search the book by ISBN.\n"
    "6. Issue a book.\n"
    "7. View all borrowers.\n"
    "8. Return a book.\n"
    "9. Exit.\n"
    "Enter your choice (1-9): "
)


class LibraryError(Exception):
    """Raised when a book or borrower is missing or a loan is not possible."""


@dataclass
class Book:
    title: str
    author: str
    isbn: str
    is_issued: bool = False


@dataclass
class BorrowedBook:
    isbn: str
    due_date: date


@dataclass
class Borrower:
    id: str
    name: str
    borrowed_books: list[BorrowedBook] = field(default_factory=list)


@dataclass(frozen=True)
class ReturnReceipt:
    """What came of returning a book: who returned it, how late, and the fine."""

    book: Book
    borrower: Borrower
    days_late: int

    @property
    def fine(self) -> int:
        return self.days_late * FINE_PER_DAY if self.days_late > 0 else 0


def _as_date(value: date | str) -> date:
    return value if isinstance(value, date) else date.fromisoformat(value)


def due_date_for(today: date | str | None = None) -> date:
    """Return the due date of a loan made on *today* (default: the current date)."""
    start = date.today() if today is None else _as_date(today)
    return start + timedelta(days=LOAN_DAYS)


def days_late(due_date: date | str, current_date: date | str) -> int:
    """Days from *due_date* to *current_date*; negative when returned early."""
    return (_as_date(current_date) - _as_date(due_date)).days


def format_book(book: Book) -> str:
    status = "ISSUED" if book.is_issued else "AVAILABLE"
    return (
        f"Title: {book.title}\n"
        f"Author: {book.author}\n"
        f"ISBN: {book.isbn}\n"
        f"Status: [{status}]\n"
    )


class Library:
    """Books in the order added, and the borrowers who have taken loans."""

    def __init__(self) -> None:
        self.books: list[Book] = []
        self.borrowers: list[Borrower] = []

    def add_book(self, title: str, author: str, isbn: str) -> Book:
        book = Book(title, author, isbn)
        self.books.append(book)
        return book

    def find_by_title(self, title: str) -> list[Book]:
        return [book for book in self.books if book.title == title]

    def find_by_author(self, author: str) -> list[Book]:
        return [book for book in self.books if book.author == author]

    def find_by_isbn(self, isbn: str) -> list[Book]:
        return [book for book in self.books if book.isbn == isbn]

    def _book(self, isbn: str) -> Book:
        for book in self.books:
            if book.isbn == isbn:
                return book
        raise LibraryError(f"Book with ISBN: {isbn} not found.")

    def _borrower(self, borrower_id: str) -> Borrower | None:
        return next((b for b in self.borrowers if b.id == borrower_id), None)

    def _issuable(self, isbn: str) -> Book:
        book = self._book(isbn)
        if book.is_issued:
            raise LibraryError("This book is already issued.")
        return book

    def issue(
        self,
        isbn: str,
        borrower_id: str,
        name: str,
        today: date | str | None = None,
    ) -> Borrower:
        """Lend book *isbn* for 14 days; a known borrower keeps their first name."""
        book = self._issuable(isbn)
        borrower = self._borrower(borrower_id)
        if borrower is None:
            borrower = Borrower(borrower_id, name)
            self.borrowers.append(borrower)
        borrower.borrowed_books.append(BorrowedBook(book.isbn, due_date_for(today)))
        book.is_issued = True
        return borrower

    def return_book(
        self, isbn: str, borrower_id: str, today: date | str | None = None
    ) -> ReturnReceipt:
        """Take back book *isbn* from *borrower_id* and work out any fine."""
        book = self._book(isbn)
        if not book.is_issued:
            raise LibraryError("This is book is not currently issued.")
        borrower = self._borrower(borrower_id)
        if borrower is None:
            raise LibraryError(f"Borrower with ID: {borrower_id} not found.")
        loan = next((b for b in borrower.borrowed_books if b.isbn == isbn), None)
        if loan is None:
            raise LibraryError("This borrower didn't borrowed the specified book.")
        current = date.today() if today is None else _as_date(today)
        late = days_late(loan.due_date, current)
        borrower.borrowed_books.remove(loan)
        book.is_issued = False
        return ReturnReceipt(book, borrower, late)

    def render_borrowers(self) -> str:
        parts = ["\n====List of Borrowers====\n"]
        if not self.borrowers:
            parts.append("No Borrowers found!\n")
            return "".join(parts)
        for borrower in self.borrowers:
            parts.append(f"\n ID: {borrower.id}\n Name: {borrower.name}")
            if borrower.borrowed_books:
                parts.append("Borrowed books: \n")
                parts.extend(
                    f" ISBN- {loan.isbn}, Due Date- {loan.due_date.isoformat()}\n"
                    for loan in borrower.borrowed_books
                )
            else:
                parts.append("\n Borrowed books: NONE\n")
            parts.append("------------------------------\n")
        return "".join(parts)


def _read_line(stream: TextIO) -> str:
    """Skip leading whitespace, blank lines included, and return the rest of a line."""
    while line := stream.readline():
        text = line.strip()
        if text:
            return text
    raise EOFError("input ended")


def _ask(prompt: str, stdin: TextIO, stdout: TextIO) -> str:
    stdout.write(prompt)
    stdout.flush()
    return _read_line(stdin)


def _search(found: list[Book], label: str, value: str, stdout: TextIO) -> None:
    for book in found:
        stdout.write("\nBook found.\n" + format_book(book))
    if not found:
        stdout.write(f"\nBook with {label}: {value} not found.\n")


def _issue(library: Library, stdin: TextIO, stdout: TextIO) -> None:
    isbn = _ask("Enter the ISBN of book you want to issue: ", stdin, stdout)
    try:
        library._issuable(isbn)
    except LibraryError as error:
        stdout.write(f"\n{error}\n")
        return
    borrower_id = _ask("Enter the Borrower ID: ", stdin, stdout)
    name = _ask("Enter the Borrower name: ", stdin, stdout)
    borrower = library.issue(isbn, borrower_id, name)
    stdout.write(f"\nBook successfull issued to {borrower.name} with ID: {borrower.id} .\n")


def _return(library: Library, stdin: TextIO, stdout: TextIO) -> None:
    isbn = _ask("\nEnter the ISBN of book to return: ", stdin, stdout)
    borrower_id = _ask("\nEnter Borrower ID: ", stdin, stdout)
    try:
        receipt = library.return_book(isbn, borrower_id)
    except LibraryError as error:
        stdout.write(f"{error}\n")
        return
    if receipt.days_late > 0:
        stdout.write(f"Returned {receipt.days_late} days late. Fine: {receipt.fine}\n")
    else:
        stdout.write("Returned on time.\n")
    stdout.write(
        f"Book: {receipt.book.title} returned successfully by {receipt.borrower.name} .\n"
    )


def _view_books(library: Library, stdout: TextIO) -> None:
    if not library.books:
        stdout.write("\nNo book found\n")
        return
    for number, book in enumerate(library.books, start=1):
        stdout.write(f"\nBook {number}:\n" + format_book(book))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="library", description="Run a small lending library.")
    parser.parse_args(argv)

    stdin, stdout = sys.stdin, sys.stdout
    library = Library()
    try:
        while True:
            words = _ask(_MENU, stdin, stdout).split()
            try:
                choice = int(words[0])
            except ValueError:
                choice = None
            if choice == 1:
                title = _ask("Enter the title of book: ", stdin, stdout)
                author = _ask("Enter the author of book: ", stdin, stdout)
                isbn = _ask("Enter the ISBN of book: ", stdin, stdout)
                library.add_book(title, author, isbn)
                stdout.write("\nBook added successfully\n")
            elif choice == 2:
                _view_books(library, stdout)
            elif choice == 3:
                title = _ask("Enter the title of book you want to search:  ", stdin, stdout)
                _search(library.find_by_title(title), "title", title, stdout)
            elif choice == 4:
                author = _ask(
                    "Enter the name of the author of book you want to search:  ",
                    stdin,
                    stdout,
                )
                _search(library.find_by_author(author), "author", author, stdout)
            elif choice == 5:
                isbn = _ask("Enter the ISBN of book you want to search:  ", stdin, stdout)
                _search(library.find_by_isbn(isbn), "ISBN", isbn, stdout)
            elif choice == 6:
                _issue(library, stdin, stdout)
            elif choice == 7:
                stdout.write(library.render_borrowers())
            elif choice == 8:
                _return(library, stdin, stdout)
            elif choice == 9:
                stdout.write("\nGOOD BYE!\n")
                return 0
            else:
                stdout.write("Invalid choice. Try again!\n")
    except EOFError:
        stdout.write("\n")
        return 0


if __name__ == "__main__":
    raise SystemExit(main())