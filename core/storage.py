
from enum import Enum
from typing import Dict, List, Optional
from core.indexing import BinarySearchTreeMap  # Import our binary search tree map


class Communications(Enum):
    """Communication platforms a contact may be reached on."""
    EMAIL = "email"
    MOBILE = "mobile"
    GITHUB = "github"
    INSTAGRAM = "instagram"
    LINKEDIN = "linkedin"
    WEBSITE = "website"
    SNAPCHAT = "snapchat"


# ------------------ Parsing / formatting ------------------
def parse_communications(platforms: str) -> Dict[Communications, str]:
    """
    Convert "email: me@trinity.edu, m: 805-899-8899" into a platform -> id mapping.
    A platform is matched by the first letter of its label; pieces without a ':' are skipped.
    """
    communications: Dict[Communications, str] = {}
    for platform in (platforms or "").split(","):
        if ":" not in platform:
            continue
        label, value = platform.split(":", 1)
        label = label.strip().upper()
        if not label:
            raise ValueError(f"Missing platform name in '{platform.strip()}'")
        com = next((c for c in Communications if c.name.startswith(label[0])), None)
        if com is None:
            raise ValueError(f"Media option in '{platform.strip()}' not recognized")
        communications[com] = value.strip()
    return communications


def format_communications(communications: Dict[Communications, str]) -> str:
    """Render communications in enum order as 'email: x, mobile: y'."""
    return ", ".join(f"{c.value}: {communications[c]}" for c in Communications if c in communications)


def full_name(first: str, last: str) -> str:
    """Return 'Last, First', or '' when either part is blank."""
    first = (first or "").strip()
    last = (last or "").strip()
    if not first or not last:
        return ""
    return f"{last}, {first}"


class ContactBook:
    # ------------------ Initialization ------------------

    def __init__(self):
        """Initializes the book with an empty name-keyed index."""
        self.contacts: BinarySearchTreeMap = BinarySearchTreeMap()

    # ------------------ Accessors ------------------
    def __len__(self) -> int:
        """Return the number of contacts in the book."""
        return len(self.contacts)

    def find_contact(self, name: str) -> Optional[Dict[Communications, str]]:
        """Return the communications stored for name, or None."""
        if not name:
            return None
        return self.contacts.get(name)

    def contacts_in_range(self, start: str, end: str) -> List[str]:
        """Return contact names n such that start <= n < end."""
        return [e.get_key() for e in self.contacts.sub_map(start, end)]

    # ------------------ Core mutations ------------------
    def add_contact(self, name: str, platforms: str) -> Optional[Dict[Communications, str]]:
        """Add or replace a contact; returns the communications it replaced, if any."""
        if not name or not name.strip():
            raise ValueError("Contact name must not be blank")
        communications = parse_communications(platforms)
        return self.contacts.put(name, communications)

    def remove_contact(self, name: str) -> bool:
        """Remove a contact by name. Returns False if there was no such contact."""
        if not name or name not in self.contacts:
            return False
        self.contacts.remove(name)
        return True

    # ------------------ Listings ------------------
    @staticmethod
    def _listing(title: str, lines: List[str]) -> str:
        return "\n" + title + "\n" + "------------" + "\n" + "\n".join(lines) + "\n"

    def list_all_contacts(self) -> str:
        """Names in order with their communication options."""
        lines = [f"{name}: {format_communications(comms)}" for name, comms in self.contacts.items()]
        return self._listing("All Contacts", lines)

    def list_all_contact_names(self) -> str:
        """Names in order."""
        return self._listing("All Names", self.contacts.key_set())

    def list_all_contact_communications(self) -> str:
        """Communication options of every contact, in name order."""
        return self._listing("All Communications", [format_communications(c) for c in self.contacts.values()])

    # ------------------ Data ingestion ------------------
    def load_seed(self, seed: str) -> int:
        """
        Load contacts from a seed string of the form
        "Last, First = email: a@b, m: 555; Other, Name = g: octo".
        Returns the number of contacts loaded. Nothing is loaded if any chunk is rejected.
        """
        parsed = []
        for chunk in (seed or "").split(";"):
            if "=" not in chunk:
                continue
            name, platforms = chunk.split("=", 1)
            name = name.strip()
            if not name:
                raise ValueError(f"Contact name must not be blank in '{chunk.strip()}'")
            parsed.append((name, parse_communications(platforms)))

        for name, communications in parsed:
            self.contacts.put(name, communications)
        return len(parsed)
