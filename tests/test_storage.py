import pytest

from core.storage import (
    Communications,
    ContactBook,
    format_communications,
    full_name,
    parse_communications,
)


def test_parse_communications_by_first_letter():
    comms = parse_communications("email: me@trinity.edu, m: 805-899-8899, snap: @me")
    assert comms == {
        Communications.EMAIL: "me@trinity.edu",
        Communications.MOBILE: "805-899-8899",
        Communications.SNAPCHAT: "@me",
    }


def test_parse_communications_keeps_colons_in_values():
    comms = parse_communications("website: https://www.oceanfutures.org")
    assert comms == {Communications.WEBSITE: "https://www.oceanfutures.org"}


def test_parse_communications_skips_pieces_without_colon():
    assert parse_communications("just text, github: octo") == {Communications.GITHUB: "octo"}
    assert parse_communications("") == {}


@pytest.mark.parametrize("raw", ["fax: 555", ": nothing"])
def test_parse_communications_rejects_unknown(raw):
    with pytest.raises(ValueError):
        parse_communications(raw)


def test_format_communications_in_enum_order():
    comms = {Communications.WEBSITE: "x.org", Communications.EMAIL: "a@b"}
    assert format_communications(comms) == "email: a@b, website: x.org"


def test_full_name():
    assert full_name(" Ada ", "Lovelace") == "Lovelace, Ada"
    assert full_name("Ada", " ") == ""
    assert full_name("", "Lovelace") == ""


@pytest.fixture
def book():
    b = ContactBook()
    b.add_contact("Turing, Alan", "email: alan@bletchley.uk")
    b.add_contact("Hopper, Grace", "github: grace, m: 555-0100")
    b.add_contact("Lovelace, Ada", "linkedin: ada")
    return b


def test_add_and_find(book):
    assert len(book) == 3
    assert book.find_contact("Hopper, Grace") == {
        Communications.GITHUB: "grace",
        Communications.MOBILE: "555-0100",
    }
    assert book.find_contact("Nobody, Here") is None
    assert book.find_contact("") is None


def test_add_replaces_existing(book):
    previous = book.add_contact("Lovelace, Ada", "email: ada@engine.org")
    assert previous == {Communications.LINKEDIN: "ada"}
    assert book.find_contact("Lovelace, Ada") == {Communications.EMAIL: "ada@engine.org"}
    assert len(book) == 3


def test_add_rejects_bad_input(book):
    with pytest.raises(ValueError):
        book.add_contact("", "email: x")
    with pytest.raises(ValueError):
        book.add_contact("Doe, Jane", "fax: 1")
    assert book.find_contact("Doe, Jane") is None
    assert len(book) == 3


def test_contact_without_communications_is_present():
    b = ContactBook()
    b.add_contact("Doe, Jane", "")
    assert b.find_contact("Doe, Jane") == {}
    assert b.remove_contact("Doe, Jane")


def test_remove_contact(book):
    assert book.remove_contact("Turing, Alan")
    assert not book.remove_contact("Turing, Alan")
    assert not book.remove_contact("")
    assert book.contacts.key_set() == ["Hopper, Grace", "Lovelace, Ada"]


def test_contacts_in_range(book):
    assert book.contacts_in_range("H", "M") == ["Hopper, Grace", "Lovelace, Ada"]
    assert book.contacts_in_range("A", "H") == []


def test_listings_are_sorted(book):
    assert book.list_all_contacts() == (
        "\nAll Contacts\n------------\n"
        "Hopper, Grace: mobile: 555-0100, github: grace\n"
        "Lovelace, Ada: linkedin: ada\n"
        "Turing, Alan: email: alan@bletchley.uk\n"
    )
    assert book.list_all_contact_names() == (
        "\nAll Names\n------------\nHopper, Grace\nLovelace, Ada\nTuring, Alan\n"
    )
    assert book.list_all_contact_communications() == (
        "\nAll Communications\n------------\n"
        "mobile: 555-0100, github: grace\nlinkedin: ada\nemail: alan@bletchley.uk\n"
    )


def test_load_seed():
    b = ContactBook()
    loaded = b.load_seed("Turing, Alan = email: a@b; Hopper, Grace = g: grace; junk")
    assert loaded == 2
    assert b.contacts.key_set() == ["Hopper, Grace", "Turing, Alan"]


def test_rejected_seed_loads_nothing():
    b = ContactBook()
    with pytest.raises(ValueError):
        b.load_seed("Turing, Alan = email: a@b; Hopper, Grace = fax: 1")
    assert len(b) == 0
    with pytest.raises(ValueError):
        b.load_seed("Turing, Alan = email: a@b;  = g: octo")
    assert len(b) == 0
