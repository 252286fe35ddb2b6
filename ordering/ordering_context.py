from typing import Sequence

from delegation.host import EffectSink, Host

from .ordering_strategy.strategy_interface import OrderingStrategy, T

STRATEGY_SLOT = "strategy"


class OrderingContext(Host):
    """
    OrderingContext delegates ordering of its data to whichever OrderingStrategy is set,
    without knowing how the strategy orders it

    Attributes:
        slot_contracts (dict[str, type]): A single 'strategy' slot bound to OrderingStrategy
    """

    slot_contracts = {STRATEGY_SLOT: OrderingStrategy}

    def __init__(self, strategy: OrderingStrategy | None = None, sink: EffectSink | None = None):
        """
        Initialize the context, usually with a strategy, which can be replaced later on

        Args:
            strategy (OrderingStrategy | None): The initial ordering strategy, unbound when None
            sink (EffectSink | None): Receiver for the effects of order_sample_data
        """
        super().__init__(sink=sink, **{STRATEGY_SLOT: strategy})

    def set_strategy(self, strategy: OrderingStrategy) -> None:
        self.bind(STRATEGY_SLOT, strategy)

    def apply_ordering(self, sequence: Sequence[T]) -> list[T]:
        """
        Order the sequence with the current strategy

        Args:
            sequence (Sequence[T]): Elements to order

        Returns:
            list[T]: The strategy's result

        Raises:
            UnboundSlotError: If no strategy has been set
        """
        return self._delegate(STRATEGY_SLOT).apply_ordering(sequence)

    def order_sample_data(self, sample_data: Sequence[T]) -> list[T]:
        """
        Announce the sort, order the sample with the current strategy and report the result
        as a comma separated line

        Args:
            sample_data (Sequence[T]): The data to order

        Returns:
            list[T]: The ordered data

        Raises:
            UnboundSlotError: If no strategy has been set, before anything is reported
        """
        strategy = self._delegate(STRATEGY_SLOT)

        self._emit("Context: Sorting data using the strategy (not sure how it'll do it)")
        result = strategy.apply_ordering(sample_data)
        self._emit(",".join(str(element) for element in result))
        return result
