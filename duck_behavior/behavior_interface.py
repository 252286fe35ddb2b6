from abc import ABC, abstractmethod


class FlightBehavior(ABC):
    """
    FlightBehavior is the contract for how a duck flies, or fails to
    Each variant is stateless and returns the text of the effect it produces

    Responsibilities:
    - Give ducks a single 'fly' operation to delegate to
    - Let any duck be retrofitted with a different way of flying at runtime
    """

    @abstractmethod
    def fly(self) -> str:
        """
        Perform the flight behavior

        Returns:
            str: The observable effect of flying
        """
        pass


class VocalizationBehavior(ABC):
    """
    VocalizationBehavior is the contract for the sound a duck makes
    Independent of FlightBehavior, so both axes can be swapped separately
    """

    @abstractmethod
    def quack(self) -> str:
        """
        Perform the vocalization

        Returns:
            str: The observable effect of the call
        """
        pass
