from functools import total_ordering


@total_ordering
class OrderedSet:
    """
    A set whose iteration order is canonical (ascending) and whose identity
    only depends on its elements, so it can be compared, hashed and used as
    a dict key or as an element of another OrderedSet.

    Elements must be hashable and totally ordered. Once a set is used as a
    key it must not be mutated anymore.
    """

    __slots__ = ("_items",)

    def __init__(self, items=()):
        self._items = set(items)

    @classmethod
    def from_sequence(cls, items):
        return cls(items)

    def insert(self, value) -> bool:
        if value in self._items:
            return False
        self._items.add(value)
        return True

    def insert_all(self, other) -> bool:
        self._items.update(other)
        return True

    def contains(self, value) -> bool:
        return value in self._items

    def difference(self, other) -> "OrderedSet":
        """Elements of self that are not in other (not symmetric)."""
        return OrderedSet(v for v in self._items if v not in other)

    def intersects(self, other) -> bool:
        return any(v in self._items for v in other)

    def is_empty(self) -> bool:
        return not self._items

    def len(self) -> int:
        return len(self._items)

    def copy(self) -> "OrderedSet":
        return OrderedSet(self._items)

    def _key(self):
        return tuple(sorted(self._items))

    def __contains__(self, value) -> bool:
        return value in self._items

    def __iter__(self):
        return iter(sorted(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __eq__(self, value: object) -> bool:
        if not isinstance(value, OrderedSet):
            return False
        return self._items == value._items

    def __lt__(self, value: object) -> bool:
        if not isinstance(value, OrderedSet):
            return NotImplemented
        return self._key() < value._key()

    def __hash__(self) -> int:
        return hash(frozenset(self._items))

    def __str__(self) -> str:
        if self._items:
            return f"{{{','.join(str(v) for v in self)}}}"
        return "Ø"

    def __repr__(self) -> str:
        return f"OrderedSet([{', '.join(repr(v) for v in self)}])"
