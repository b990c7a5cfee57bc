"""List helpers."""

from typing import Callable, List, Sequence, TypeVar

T = TypeVar("T")


def drop_last_until(items: Sequence[T], predicate: Callable[[T], bool]) -> List[T]:
    """
    Drop elements from the end up to and including the last one matching ``predicate``.

    Example:
        >>> drop_last_until([1, 2, 3, 2, 5], lambda x: x == 2)
        [1, 2, 3]
        >>> drop_last_until([1, 3], lambda x: x == 2)
        []
    """
    for index in range(len(items) - 1, -1, -1):
        if predicate(items[index]):
            return list(items[:index])
    return []
