from core.storage import ContactBook
from main import run_menu, seed_book


def drive(book, answers):
    """Run the menu against scripted answers and return everything it printed."""
    feed = iter(answers)
    printed = []

    def fake_input(prompt):
        try:
            return next(feed)
        except StopIteration:
            raise EOFError

    run_menu(book, fake_input, printed.append)
    return "\n".join(printed)


def test_add_search_and_remove():
    book = ContactBook()
    out = drive(book, [
        "2", "Ada", "Lovelace", "email: ada@engine.org",
        "1", "Ada", "Lovelace",
        "3", "Ada", "Lovelace",
        "1", "Ada", "Lovelace",
        "7",
    ])
    assert "Added: Lovelace, Ada: email: ada@engine.org" in out
    assert "Lovelace, Ada: email: ada@engine.org" in out
    assert "Removed contact: Lovelace, Ada" in out
    assert "No contact entry found for 'Lovelace, Ada'." in out
    assert len(book) == 0


def test_rejected_operations_are_reported():
    book = ContactBook()
    out = drive(book, [
        "2", "Ada", "",
        "2", "Ada", "Lovelace", "fax: 1",
        "3", "No", "Body",
        "9",
        "x",
    ])
    assert "A first and last name are both required." in out
    assert "not recognized" in out
    assert "No contact entry found for 'Body, No'." in out
    assert "Select a menu choice from 1 to 7." in out
    assert len(book) == 0


def test_listings():
    book = ContactBook()
    book.add_contact("Turing, Alan", "email: alan@bletchley.uk")
    book.add_contact("Hopper, Grace", "github: grace")
    out = drive(book, ["4", "5", "6", "7"])
    assert "All Contacts" in out
    assert out.index("Hopper, Grace: github: grace") < out.index("Turing, Alan: email: alan@bletchley.uk")
    assert "All Names" in out
    assert "All Communications" in out


def test_seed_book_reports_rejected_seed():
    book = ContactBook()
    printed = []
    seed_book(book, "Turing, Alan = email: a@b; Hopper, Grace = fax: 1", printed.append)
    assert len(book) == 0
    assert printed[0].startswith("[main] Seed rejected:")


def test_seed_book_loads_valid_seed():
    book = ContactBook()
    printed = []
    seed_book(book, "Turing, Alan = email: a@b; Hopper, Grace = g: grace", printed.append)
    assert len(book) == 2
    assert printed == ["[main] Seeded 2 contacts"]
