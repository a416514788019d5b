"""
Queryable collection classes for fluent, composable queries.

Chainable filtering and ordering over an in-memory list. Every operation
returns a new collection; the list a collection wraps is never modified.
"""

from typing import TypeVar, Generic, Callable, List, Optional, Any, Union
from collections.abc import Iterable

T = TypeVar('T')


class QueryableCollection(Generic[T]):
    """
    A lightweight, chainable collection for filtering and querying in-memory data.

    Examples:
        # Basic filtering
        collection.filter(lambda f: f.terminal == "B").all()

        # Attribute matching
        collection.where(airline='MAU', destination='London').all()

        # Sorting (stable: equal keys keep their input order)
        collection.order_by(lambda f: f.departure_time).take(10).all()
    """

    def __init__(self, items: Union[List[T], Iterable[T]]):
        """
        Initialize a queryable collection.

        Args:
            items: List or iterable of items to wrap
        """
        self._items: List[T] = list(items) if not isinstance(items, list) else items

    def _new_collection(self, items: List[T]) -> 'QueryableCollection[T]':
        """Create a collection of the same type over new items."""
        return self.__class__(items)

    def filter(self, predicate: Callable[[T], bool]) -> 'QueryableCollection[T]':
        """
        Filter items using a predicate function.

        Args:
            predicate: Function that takes an item and returns True to include it

        Returns:
            New collection with filtered items, in the original order
        """
        return self._new_collection([item for item in self._items if predicate(item)])

    def where(self, **kwargs) -> 'QueryableCollection[T]':
        """
        Filter items using keyword arguments (attribute matching).
        All conditions must match (AND logic), using equality.

        Examples:
            flights.where(flight_number='AB123')
        """
        def matches(item: T) -> bool:
            return all(
                getattr(item, key, None) == value
                for key, value in kwargs.items()
            )
        return self.filter(matches)

    def order_by(self, key_func: Callable[[T], Any], reverse: bool = False) -> 'QueryableCollection[T]':
        """
        Sort items by a key function.

        The sort is stable, so items with equal keys keep their relative
        order, also when reverse is True.

        Args:
            key_func: Function that returns a sort key for each item
            reverse: If True, sort in descending order

        Returns:
            New collection with sorted items
        """
        return self._new_collection(sorted(self._items, key=key_func, reverse=reverse))

    def take(self, n: int) -> 'QueryableCollection[T]':
        """Take the first n items."""
        return self._new_collection(self._items[:n])

    def first(self) -> Optional[T]:
        """Return the first item or None if collection is empty."""
        return self._items[0] if self._items else None

    def last(self) -> Optional[T]:
        """Return the last item or None if collection is empty."""
        return self._items[-1] if self._items else None

    def all(self) -> List[T]:
        """
        Return all items as a list.

        The returned list is a new list; appending to or removing from it
        does not change the collection.
        """
        return list(self._items)

    def count(self) -> int:
        return len(self._items)

    def exists(self) -> bool:
        return len(self._items) > 0

    def __iter__(self):
        return iter(self._items)

    def __len__(self):
        return len(self._items)

    def __getitem__(self, index):
        """Allow indexing and slicing."""
        if isinstance(index, slice):
            return self._new_collection(self._items[index])
        return self._items[index]

    def __bool__(self):
        return len(self._items) > 0

    def __repr__(self):
        """
        Return string representation with preview of items.

        Shows class name, up to three item identifiers and total count.
        """
        class_name = self.__class__.__name__
        count = len(self._items)

        if count == 0:
            return f"{class_name}([])"

        preview_items = []
        for item in self._items[:3]:
            if hasattr(item, 'flight_number'):
                preview_items.append(repr(item.flight_number))
            else:
                preview_items.append(f"<{type(item).__name__}>")

        if count > 3:
            preview_items.append('...')

        preview = '[' + ', '.join(preview_items) + ']'
        return f"{class_name}({preview}, count={count})"
