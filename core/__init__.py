from core.indexing import BinarySearchTreeMap, DefaultComparator, LinkedBinaryTree, Map
from core.storage import (
    Communications,
    ContactBook,
    format_communications,
    full_name,
    parse_communications,
)

__all__ = [
    "BinarySearchTreeMap",
    "Communications",
    "ContactBook",
    "DefaultComparator",
    "LinkedBinaryTree",
    "Map",
    "format_communications",
    "full_name",
    "parse_communications",
]
