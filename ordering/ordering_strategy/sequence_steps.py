from typing import Sequence

from .strategy_interface import T


def sort_by_comparison(sequence: Sequence[T]) -> list[T]:
    """
    Sort elements into non-decreasing order using their natural comparison

    Args:
        sequence (Sequence[T]): Elements to sort

    Returns:
        list[T]: A new sorted list, the input is left untouched

    Examples:
        >>> sort_by_comparison(("c", "a", "b"))
        ['a', 'b', 'c']
    """
    return sorted(sequence)


def reverse_sequence(sequence: Sequence[T]) -> list[T]:
    """
    Reverse the order of the elements

    Args:
        sequence (Sequence[T]): Elements to reverse

    Returns:
        list[T]: A new list with the elements in reverse order

    Examples:
        >>> reverse_sequence([1, 2, 3])
        [3, 2, 1]
    """
    return list(reversed(sequence))
