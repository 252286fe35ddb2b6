from typing import Sequence

from .sequence_steps import sort_by_comparison
from .strategy_interface import OrderingStrategy, T


class AscendingOrder(OrderingStrategy[T]):
    """
    AscendingOrder puts elements into non-decreasing order
    Always works on a copy, the caller's sequence is never modified
    """

    def apply_ordering(self, sequence: Sequence[T]) -> list[T]:
        return sort_by_comparison(sequence)
