
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, List, Optional, Tuple


class LinkedBinaryTree:
    """Concrete implementation of a binary tree using a node-based, linked structure."""

    class _Node:
        """Nested Node class that acts as a Position."""
        __slots__ = '_element', '_parent', '_left', '_right', '_owner'

        def __init__(self, e, owner, parent=None, left=None, right=None):
            self._element = e
            self._owner = owner
            self._parent = parent
            self._left = left
            self._right = right

        def get_element(self):
            if self._parent is self:  # convention for defunct node
                raise ValueError("Position no longer valid")
            return self._element

        def get_parent(self): return self._parent
        def get_left(self): return self._left
        def get_right(self): return self._right
        def set_element(self, e): self._element = e
        def set_parent(self, parent): self._parent = parent
        def set_left(self, left): self._left = left
        def set_right(self, right): self._right = right

        def __repr__(self):
            return f"Position({self._element!r})"

    def __init__(self):
        self._root = None
        self._size = 0

    def _validate(self, p):
        """Validates the position and returns it as a node."""
        if not isinstance(p, self._Node):
            raise TypeError("Not valid position type")
        if p.get_parent() is p:
            raise ValueError("p is no longer in the tree")
        if p._owner is not self:
            raise ValueError("p does not belong to this tree")
        return p

    def _make_node(self, e, parent=None, left=None, right=None):
        """Factory function to create a new node storing element e."""
        return self._Node(e, self, parent, left, right)

    # ------------------ Accessors ------------------
    def __len__(self) -> int: return self._size
    def root(self) -> Optional[_Node]: return self._root
    def parent(self, p) -> Optional[_Node]: return self._validate(p).get_parent()
    def left(self, p) -> Optional[_Node]: return self._validate(p).get_left()
    def right(self, p) -> Optional[_Node]: return self._validate(p).get_right()

    def is_empty(self) -> bool:
        """Return True if the tree holds no nodes."""
        return len(self) == 0

    def num_children(self, p) -> int:
        """Return the number of children of Position p."""
        node = self._validate(p)
        return (node.get_left() is not None) + (node.get_right() is not None)

    def children(self, p) -> Iterable[_Node]:
        """Generate an iteration of Positions representing p's children."""
        node = self._validate(p)
        if node.get_left() is not None:
            yield node.get_left()
        if node.get_right() is not None:
            yield node.get_right()

    def sibling(self, p) -> Optional[_Node]:
        """Return the Position of p's sibling (or None if no sibling exists)."""
        parent = self.parent(p)
        if parent is None:
            return None
        if p is parent.get_left():
            return parent.get_right()
        return parent.get_left()

    def is_internal(self, p) -> bool: return self.num_children(p) > 0
    def is_external(self, p) -> bool: return self.num_children(p) == 0
    def is_root(self, p) -> bool: return self._validate(p) is self._root

    def depth(self, p) -> int:
        """Return the number of levels separating Position p from the root."""
        node = self._validate(p)
        d = 0
        while node.get_parent() is not None:
            node = node.get_parent()
            d += 1
        return d

    def height(self, p=None) -> int:
        """Return the height of the subtree rooted at p (the whole tree by default)."""
        if p is None:
            if self._root is None:
                return 0
            p = self._root
        level = [self._validate(p)]
        h = -1
        while level:
            h += 1
            level = [c for n in level for c in (n.get_left(), n.get_right()) if c is not None]
        return h

    # ------------------ Traversals ------------------
    def __iter__(self) -> Iterable[Any]:
        """Generate an iteration of the tree's elements in inorder."""
        for p in self.inorder():
            yield p.get_element()

    def positions(self) -> Iterable[_Node]:
        """Generate an iteration of the tree's positions (using inorder traversal)."""
        yield from self.inorder()

    def inorder(self) -> Iterable[_Node]:
        """Generate an inorder iteration of positions (nodes) in the tree."""
        stack: List[LinkedBinaryTree._Node] = []
        walk = self._root
        while stack or walk is not None:
            if walk is not None:
                stack.append(walk)
                walk = walk.get_left()
            else:
                node = stack.pop()
                yield node
                walk = node.get_right()

    def preorder(self) -> Iterable[_Node]:
        """Generate a preorder iteration of positions in the tree."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node
            # right pushed first so left is visited first
            if node.get_right() is not None:
                stack.append(node.get_right())
            if node.get_left() is not None:
                stack.append(node.get_left())

    def postorder(self) -> Iterable[_Node]:
        """Generate a postorder iteration of positions in the tree."""
        stack: List[Tuple[LinkedBinaryTree._Node, bool]] = []
        if self._root is not None:
            stack.append((self._root, False))
        while stack:
            node, expanded = stack.pop()
            if expanded:
                yield node
                continue
            stack.append((node, True))
            if node.get_right() is not None:
                stack.append((node.get_right(), False))
            if node.get_left() is not None:
                stack.append((node.get_left(), False))

    def preorder_elements(self) -> List[Any]:
        return [p.get_element() for p in self.preorder()]

    def inorder_elements(self) -> List[Any]:
        return [p.get_element() for p in self.inorder()]

    def postorder_elements(self) -> List[Any]:
        return [p.get_element() for p in self.postorder()]

    # ------------------ Mutators ------------------
    def add_root(self, e):
        if self._root is not None: raise RuntimeError("Tree is not empty")
        self._root = self._make_node(e, None, None, None)
        self._size = 1
        return self._root

    def add_left(self, p, e):
        parent = self._validate(p)
        if parent.get_left() is not None: raise ValueError("p already has a left child")
        child = self._make_node(e, parent, None, None)
        parent.set_left(child)
        self._size += 1
        return child

    def add_right(self, p, e):
        parent = self._validate(p)
        if parent.get_right() is not None: raise ValueError("p already has a right child")
        child = self._make_node(e, parent, None, None)
        parent.set_right(child)
        self._size += 1
        return child

    def set(self, p, e):
        """Replaces the element at Position p with e and returns the replaced element."""
        node = self._validate(p)
        temp = node.get_element()
        node.set_element(e)
        return temp

    def attach(self, p, t1: 'LinkedBinaryTree', t2: 'LinkedBinaryTree') -> None:
        """Attach trees t1 and t2 as left and right subtrees of leaf p; t1 and t2 are left empty."""
        node = self._validate(p)
        if not type(self) is type(t1) is type(t2):
            raise TypeError("Tree types must match")
        if t1 is t2 or t1 is self or t2 is self:
            raise ValueError("Attached trees must be distinct from each other and from this tree")
        if self.is_internal(p):
            raise RuntimeError("position must be a leaf")
        if not t1.is_empty():
            self._size += len(t1)
            t1._root.set_parent(node)
            node.set_left(t1._root)
            self._adopt(t1._root)
            t1._root = None
            t1._size = 0
        if not t2.is_empty():
            self._size += len(t2)
            t2._root.set_parent(node)
            node.set_right(t2._root)
            self._adopt(t2._root)
            t2._root = None
            t2._size = 0

    def _adopt(self, top) -> None:
        """Mark every node under top as owned by this tree."""
        stack = [top]
        while stack:
            node = stack.pop()
            node._owner = self
            stack.extend(c for c in (node.get_left(), node.get_right()) if c is not None)

    def remove(self, p):
        """Removes the node at Position p and replaces it with its child, if any."""
        node = self._validate(p)
        if self.num_children(p) == 2:
            raise RuntimeError("p has two children")
        child = node.get_left() if node.get_left() is not None else node.get_right()
        if child is not None:
            child.set_parent(node.get_parent())
        if node is self._root:
            self._root = child
        else:
            parent = node.get_parent()
            if node is parent.get_left():
                parent.set_left(child)
            else:
                parent.set_right(child)
        self._size -= 1
        temp = node.get_element()
        node.set_element(None)
        node.set_left(None)
        node.set_right(None)
        node.set_parent(node)  # convention for defunct node
        return temp


class DefaultComparator:
    """Comparator based on the natural ordering (<) of the keys."""

    def compare(self, a: Any, b: Any) -> int:
        if a < b:
            return -1
        if b < a:
            return 1
        return 0

    def __call__(self, a: Any, b: Any) -> int:
        return self.compare(a, b)


class Map(ABC):
    """Abstract ordered map surface; dict-style sugar is built on get/put/remove."""

    class _MapEntry:
        """Lightweight composite to store key-value pairs."""
        __slots__ = '_key', '_value'

        def __init__(self, key, value):
            self._key = key
            self._value = value

        def get_key(self): return self._key
        def get_value(self): return self._value

        def __repr__(self): return f"({self._key!r}, {self._value!r})"

    @abstractmethod
    def __len__(self) -> int: ...

    @abstractmethod
    def get(self, k: Any, default: Any = None) -> Any: ...

    @abstractmethod
    def put(self, k: Any, v: Any) -> Optional[Any]: ...

    @abstractmethod
    def remove(self, k: Any) -> Optional[Any]: ...

    @abstractmethod
    def find_entry(self, k: Any) -> Optional['Map._MapEntry']: ...

    @abstractmethod
    def entry_set(self) -> List['Map._MapEntry']: ...

    def is_empty(self) -> bool:
        return len(self) == 0

    def key_set(self) -> List[Any]:
        """Return a list of the map's keys in order."""
        return [e.get_key() for e in self.entry_set()]

    def values(self) -> List[Any]:
        """Return a list of the map's values in key order."""
        return [e.get_value() for e in self.entry_set()]

    def items(self) -> List[Tuple[Any, Any]]:
        return [(e.get_key(), e.get_value()) for e in self.entry_set()]

    def __iter__(self) -> Iterable[Any]:
        """Generate an iteration of the map's keys in order."""
        yield from self.key_set()

    def __contains__(self, k: Any) -> bool:
        return self.find_entry(k) is not None

    def __getitem__(self, k: Any) -> Any:
        entry = self.find_entry(k)
        if entry is None:
            raise KeyError(k)
        return entry.get_value()

    def __setitem__(self, k: Any, v: Any) -> None:
        self.put(k, v)

    def __delitem__(self, k: Any) -> None:
        if self.find_entry(k) is None:
            raise KeyError(k)
        self.remove(k)


class BinarySearchTreeMap(Map):
    """Map realised as an unbalanced binary search tree whose leaves are empty sentinels.

    Every internal node of the backing tree holds exactly one entry and every
    external node holds None, so a map of n entries uses 2n + 1 nodes.
    """

    class _BSTEntry(Map._MapEntry):
        """Entry that knows the position currently holding it."""
        __slots__ = '_position',

        def __init__(self, key, value, position=None):
            super().__init__(key, value)
            self._position = position

        def get_position(self): return self._position

    def __init__(self, comparator: Optional[Callable[[Any, Any], int]] = None):
        self._compare = comparator if comparator is not None else DefaultComparator()
        self._tree = LinkedBinaryTree()
        self._tree.add_root(None)

    def __len__(self) -> int:
        # only internal nodes carry entries
        return (len(self._tree) - 1) // 2

    def __repr__(self) -> str:
        return "{" + ", ".join(repr(e) for e in self.entry_set()) + "}"

    # ------------------ Helpers ------------------
    @staticmethod
    def _check_key(k: Any) -> None:
        if k is None:
            raise ValueError("Key is None")

    def _key(self, p) -> Any:
        return p.get_element().get_key()

    def _replace_entry(self, p, entry: '_BSTEntry') -> Optional['_BSTEntry']:
        """Store entry at p, relocating its back-reference, and return the entry it displaced."""
        entry._position = p
        return self._tree.set(p, entry)

    def _insert_at_external(self, p, entry: '_BSTEntry') -> '_BSTEntry':
        """Expand external p into an internal node holding entry with two sentinel children."""
        self._replace_entry(p, entry)
        self._tree.add_left(p, None)
        self._tree.add_right(p, None)
        return entry

    def _remove_external(self, p) -> None:
        """Remove external p together with its parent, promoting p's sibling."""
        if not self._tree.is_external(p):
            raise RuntimeError("Given position is not external")
        if self._tree.is_root(p):
            self._tree.remove(p)
            self._tree.add_root(None)
        else:
            parent = self._tree.parent(p)
            self._tree.remove(p)
            self._tree.remove(parent)

    def _tree_search(self, k: Any, p=None):
        """Return the internal position holding k, or the external position where k would go."""
        walk = self._tree.root() if p is None else p
        while self._tree.is_internal(walk):
            comp = self._compare(k, self._key(walk))
            if comp < 0:
                walk = self._tree.left(walk)
            elif comp > 0:
                walk = self._tree.right(walk)
            else:
                return walk
        return walk

    def _subtree_first_position(self, p):
        """Return the internal position with the smallest key under p, or None."""
        if self._tree.is_external(p):
            return None
        while self._tree.is_internal(self._tree.left(p)):
            p = self._tree.left(p)
        return p

    def _subtree_last_position(self, p):
        if self._tree.is_external(p):
            return None
        while self._tree.is_internal(self._tree.right(p)):
            p = self._tree.right(p)
        return p

    # ------------------ Map operations ------------------
    def find_entry(self, k: Any) -> Optional['_BSTEntry']:
        """Return the entry stored under k, or None if k is absent."""
        self._check_key(k)
        p = self._tree_search(k)
        if self._tree.is_external(p):
            return None
        return p.get_element()

    def get(self, k: Any, default: Any = None) -> Any:
        """Return the value associated with key k, or default."""
        entry = self.find_entry(k)
        return default if entry is None else entry.get_value()

    def put(self, k: Any, v: Any) -> Optional[Any]:
        """Insert or replace entry (k, v) and return old value, or None."""
        self._check_key(k)
        p = self._tree_search(k)
        entry = self._BSTEntry(k, v)
        if self._tree.is_external(p):
            self._insert_at_external(p, entry)
            return None
        return self._replace_entry(p, entry).get_value()

    def remove(self, k: Any) -> Optional[Any]:
        """Remove entry with key k and return its value, or None."""
        self._check_key(k)
        p = self._tree_search(k)
        if self._tree.is_external(p):
            return None
        removed = p.get_element()
        left, right = self._tree.left(p), self._tree.right(p)
        if self._tree.is_external(left):
            to_splice = left
        elif self._tree.is_external(right):
            to_splice = right
        else:
            # predecessor promotion: the rightmost sentinel of the left subtree
            # hangs off the node holding the largest smaller key
            to_splice = left
            while self._tree.is_internal(to_splice):
                to_splice = self._tree.right(to_splice)
            self._replace_entry(p, self._tree.parent(to_splice).get_element())
        self._remove_external(to_splice)
        return removed.get_value()

    def entry_set(self) -> List['_BSTEntry']:
        """Return the entries in ascending key order; sentinels are skipped."""
        return [p.get_element() for p in self._tree.inorder() if p.get_element() is not None]

    def first_entry(self) -> Optional['_BSTEntry']:
        p = self._subtree_first_position(self._tree.root())
        return None if p is None else p.get_element()

    def last_entry(self) -> Optional['_BSTEntry']:
        p = self._subtree_last_position(self._tree.root())
        return None if p is None else p.get_element()

    def sub_map(self, k1: Any, k2: Any) -> List['_BSTEntry']:
        """Return entries with keys k such that k1 <= k < k2, in order."""
        self._check_key(k1)
        self._check_key(k2)
        stack = []
        walk = self._tree.root()
        # descend to the first key >= k1, remembering the ancestors still to visit
        while self._tree.is_internal(walk):
            if self._compare(self._key(walk), k1) >= 0:
                stack.append(walk)
                walk = self._tree.left(walk)
            else:
                walk = self._tree.right(walk)

        result = []
        while stack:
            p = stack.pop()
            if self._compare(self._key(p), k2) >= 0:
                break
            result.append(p.get_element())
            walk = self._tree.right(p)
            while self._tree.is_internal(walk):
                stack.append(walk)
                walk = self._tree.left(walk)
        return result
