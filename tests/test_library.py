import io
from datetime import date

import pytest

from consoletasks.library import (
    Book,
    Library,
    LibraryError,
    ReturnReceipt,
    Borrower,
    days_late,
    due_date_for,
    format_book,
    main,
)

START = date(2024, 3, 1)


@pytest.fixture
def library():
    lib = Library()
    lib.add_book("Dune", "Herbert", "111")
    lib.add_book("Emma", "Austen", "222")
    lib.add_book("Persuasion", "Austen", "333")
    return lib


def test_find_by_title(library):
    found = library.find_by_title("Dune")
    assert [book.isbn for book in found] == ["111"]


def test_find_by_author_returns_all_in_order(library):
    assert [book.title for book in library.find_by_author("Austen")] == ["Emma", "Persuasion"]


def test_find_by_isbn_missing(library):
    assert library.find_by_isbn("999") == []


def test_days_late_accepts_strings():
    assert days_late("2024-03-01", "2024-03-01") == 0
    assert days_late(date(2024, 3, 1), "2024-03-04") == days_late("2024-03-01", date(2024, 3, 4))


def test_format_book_status():
    book = Book("Dune", "Herbert", "111")
    assert format_book(book) == "Title: Dune\nAuthor: Herbert\nISBN: 111\nStatus: [AVAILABLE]\n"
    book.is_issued = True
    assert format_book(book).endswith("Status: [ISSUED]\n")


def test_issue_new_borrower(library):
    borrower = library.issue("111", "B1", "Ann", today=START)
    assert borrower.id == "B1"
    assert borrower.name == "Ann"
    assert library.borrowers == [borrower]
    assert library.find_by_isbn("111")[0].is_issued
    assert [loan.isbn for loan in borrower.borrowed_books] == ["111"]
    assert borrower.borrowed_books[0].due_date == due_date_for(START)


def test_issue_existing_borrower_keeps_name(library):
    library.issue("111", "B1", "Ann", today=START)
    borrower = library.issue("222", "B1", "Other", today=START)
    assert borrower.name == "Ann"
    assert len(library.borrowers) == 1
    assert [loan.isbn for loan in borrower.borrowed_books] == ["111", "222"]


def test_issue_already_issued(library):
    library.issue("111", "B1", "Ann", today=START)
    with pytest.raises(LibraryError, match="already issued"):
        library.issue("111", "B2", "Bob", today=START)


def test_issue_unknown_book(library):
    with pytest.raises(LibraryError, match="Book with ISBN: 999 not found."):
        library.issue("999", "B1", "Ann")
    assert library.borrowers == []


def test_return_on_time(library):
    library.issue("111", "B1", "Ann", today=START)
    receipt = library.return_book("111", "B1", today=START)
    assert receipt.days_late == -14
    assert receipt.fine == 0
    assert not receipt.book.is_issued
    assert receipt.borrower.borrowed_books == []


def test_return_late_fine_is_five_per_day(library):
    library.issue("111", "B1", "Ann", today=START)
    due = due_date_for(START)
    receipt = library.return_book("111", "B1", today=due_date_for(due))
    assert receipt.days_late == 14
    assert receipt.fine == receipt.days_late * 5


def test_receipt_fine_zero_when_not_late():
    receipt = ReturnReceipt(Book("a", "b", "c"), Borrower("B1", "Ann"), 0)
    assert receipt.fine == 0


def test_return_not_issued(library):
    with pytest.raises(LibraryError, match="not currently issued"):
        library.return_book("111", "B1")


def test_return_unknown_borrower(library):
    library.issue("111", "B1", "Ann", today=START)
    with pytest.raises(LibraryError, match="Borrower with ID: B9 not found."):
        library.return_book("111", "B9")
    assert library.find_by_isbn("111")[0].is_issued


def test_return_book_not_borrowed_by_borrower(library):
    library.issue("111", "B1", "Ann", today=START)
    library.issue("222", "B2", "Bob", today=START)
    with pytest.raises(LibraryError, match="didn't borrowed"):
        library.return_book("111", "B2")


def test_render_borrowers_empty():
    assert Library().render_borrowers().endswith("No Borrowers found!\n")


def test_render_borrowers_lists_loans(library):
    library.issue("111", "B1", "Ann", today=START)
    text = library.render_borrowers()
    assert f" ISBN- 111, Due Date- {due_date_for(START).isoformat()}\n" in text
    assert " ID: B1" in text


def run_main(monkeypatch, text):
    out = io.StringIO()
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    monkeypatch.setattr("sys.stdout", out)
    code = main([])
    return code, out.getvalue()


def test_main_add_and_search(monkeypatch):
    code, output = run_main(monkeypatch, "1\nDune\nHerbert\n111\n3\nDune\n5\n999\n9\n")
    assert code == 0
    assert "Book added successfully" in output
    assert "\nBook found.\nTitle: Dune\n" in output
    assert "Book with ISBN: 999 not found." in output
    assert output.endswith("\nGOOD BYE!\n")


def test_main_issue_and_return(monkeypatch):
    code, output = run_main(monkeypatch, "1\nDune\nHerbert\n111\n6\n111\nB1\nAnn\n8\n111\nB1\n9\n")
    assert code == 0
    assert "Book successfull issued to Ann with ID: B1 ." in output
    assert "Returned on time." in output
    assert "Book: Dune returned successfully by Ann ." in output


def test_main_invalid_choice(monkeypatch):
    _, output = run_main(monkeypatch, "42\n9\n")
    assert "Invalid choice. Try again!" in output