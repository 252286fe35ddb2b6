from abc import ABC, abstractmethod
from typing import Any, Generic, Protocol, Sequence, TypeVar


class Comparable(Protocol):
    def __lt__(self, other: Any) -> bool:
        ...


T = TypeVar("T", bound=Comparable)


class OrderingStrategy(ABC, Generic[T]):
    """
    OrderingStrategy is the contract for reordering a sequence of comparable elements

    Responsibilities:
    - Accept any sequence of mutually comparable elements, mutable or not
    - Return the ordered elements as a list; whether the input is copied or reused is
      up to each implementation and is documented there
    """

    @abstractmethod
    def apply_ordering(self, sequence: Sequence[T]) -> list[T]:
        """
        Order the given sequence

        Args:
            sequence (Sequence[T]): Elements to order, may be empty

        Returns:
            list[T]: The ordered elements
        """
        pass
