import os
from typing import Callable

from core.storage import ContactBook, format_communications, full_name

SEED = os.environ.get("CONTACTS_SEED", "")

MENU = """
Contact Manager Menu
--------------------
1 - Search for a contact
2 - Add a new contact
3 - Remove contact
4 - List all information for all contacts
5 - List all contact names
6 - List all contact communications
---
7 - End this contact manager session.
"""


def prompt_full_name(input_fn: Callable[[str], str]) -> str:
    first = input_fn("  First name: ")
    last = input_fn("  Last name: ")
    return full_name(first, last)


def search_for_contact(book: ContactBook, input_fn, output_fn) -> None:
    output_fn("Search for contact:")
    name = prompt_full_name(input_fn)
    comms = book.find_contact(name)
    if comms is None:
        output_fn(f"No contact entry found for '{name}'.")
    else:
        output_fn(f"{name}: {format_communications(comms)}")


def add_contact(book: ContactBook, input_fn, output_fn) -> None:
    output_fn("Add contact:")
    name = prompt_full_name(input_fn)
    if not name:
        output_fn("A first and last name are both required.")
        return

    output_fn("  Communication options example: website: www.oceanfutures.org, m: 805-899-8899")
    coms = input_fn("  Communication options: ").strip()
    try:
        book.add_contact(name, coms)
    except ValueError as e:
        output_fn(f"{e}.")
        return
    output_fn(f"Added: {name}: {format_communications(book.find_contact(name))}")


def remove_contact(book: ContactBook, input_fn, output_fn) -> None:
    output_fn("Remove contact:")
    name = prompt_full_name(input_fn)
    if book.remove_contact(name):
        output_fn(f"Removed contact: {name}")
    else:
        output_fn(f"No contact entry found for '{name}'.")


def seed_book(book: ContactBook, seed: str, output_fn: Callable[[str], None] = print) -> None:
    """Load the optional startup seed; a rejected seed leaves the book empty."""
    if not seed:
        return
    try:
        output_fn(f"[main] Seeded {book.load_seed(seed)} contacts")
    except ValueError as e:
        output_fn(f"[main] Seed rejected: {e}")


def run_menu(book: ContactBook, input_fn: Callable[[str], str] = input, output_fn: Callable[[str], None] = print) -> None:
    """Present the menu and respond to selections until 7 or end of input."""
    while True:
        output_fn(MENU)
        try:
            raw = input_fn("Menu choice: ").strip()
        except EOFError:
            return

        try:
            selection = int(raw)
        except ValueError:
            selection = 0

        try:
            if selection == 1:
                search_for_contact(book, input_fn, output_fn)
            elif selection == 2:
                add_contact(book, input_fn, output_fn)
            elif selection == 3:
                remove_contact(book, input_fn, output_fn)
            elif selection == 4:
                output_fn(book.list_all_contacts())
            elif selection == 5:
                output_fn(book.list_all_contact_names())
            elif selection == 6:
                output_fn(book.list_all_contact_communications())
            elif selection == 7:
                return
            else:
                output_fn("Select a menu choice from 1 to 7.")
        except EOFError:
            return


if __name__ == "__main__":
    book = ContactBook()
    seed_book(book, SEED)
    run_menu(book)
