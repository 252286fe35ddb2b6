from typing import Sequence

from .sequence_steps import reverse_sequence, sort_by_comparison
from .strategy_interface import OrderingStrategy, T


class DescendingOrder(OrderingStrategy[T]):
    """
    DescendingOrder puts elements into non-increasing order by sorting the reversed input
    and reversing the sorted result, so elements that compare equal keep their input order
    Always works on a copy, the caller's sequence is never modified
    """

    def apply_ordering(self, sequence: Sequence[T]) -> list[T]:
        return reverse_sequence(sort_by_comparison(reverse_sequence(sequence)))
