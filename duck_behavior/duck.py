from abc import ABC, abstractmethod

from delegation.host import EffectSink, Host

from .behavior_interface import FlightBehavior, VocalizationBehavior
from .flight_behavior import FlyNoWay, FlyWithWings
from .vocal_behavior import MuteQuack, Quack, Squeak

FLIGHT_SLOT = "flight"
VOCALIZATION_SLOT = "vocalization"


class Duck(Host, ABC):
    """
    Duck delegates flying and quacking to behavior variants held in two independent slots,
    while swimming and the display description stay fixed per kind of duck

    Attributes:
        description (str): Fixed description reported by display(), set per specialization
    """

    slot_contracts = {
        FLIGHT_SLOT: FlightBehavior,
        VOCALIZATION_SLOT: VocalizationBehavior,
    }

    description: str = ""

    def __init__(
            self,
            flight: FlightBehavior | None = None,
            vocalization: VocalizationBehavior | None = None,
            sink: EffectSink | None = None
    ):
        """
        Initialize the duck with optional flight and vocalization behaviors

        Args:
            flight (FlightBehavior | None): Initial flight behavior, unbound when None
            vocalization (VocalizationBehavior | None): Initial vocalization, unbound when None
            sink (EffectSink | None): Receiver for the effects produced by the duck
        """
        super().__init__(sink=sink, **{FLIGHT_SLOT: flight, VOCALIZATION_SLOT: vocalization})

    @abstractmethod
    def display(self) -> None:
        """
        Report what kind of duck this is, independent of the bound behaviors
        """
        pass

    def perform_fly(self) -> None:
        self._emit(self._delegate(FLIGHT_SLOT).fly())

    def perform_quack(self) -> None:
        self._emit(self._delegate(VOCALIZATION_SLOT).quack())

    def swim(self) -> None:
        self._emit("All ducks float, even decoys!")

    def set_fly_behavior(self, flight: FlightBehavior) -> None:
        self.bind(FLIGHT_SLOT, flight)

    def set_quack_behavior(self, vocalization: VocalizationBehavior) -> None:
        self.bind(VOCALIZATION_SLOT, vocalization)


class MallardDuck(Duck):
    description = "I'm a real Mallard duck"

    def __init__(self, flight=None, vocalization=None, sink=None):
        super().__init__(
            FlyWithWings() if flight is None else flight,
            Quack() if vocalization is None else vocalization,
            sink)

    def display(self) -> None:
        self._emit(self.description)


class ModelDuck(Duck):
    description = "I'm a model duck"

    def __init__(self, flight=None, vocalization=None, sink=None):
        super().__init__(
            FlyNoWay() if flight is None else flight,
            Quack() if vocalization is None else vocalization,
            sink)

    def display(self) -> None:
        self._emit(self.description)


class RubberDuck(Duck):
    description = "I'm a rubber duckie"

    def __init__(self, flight=None, vocalization=None, sink=None):
        super().__init__(
            FlyNoWay() if flight is None else flight,
            Squeak() if vocalization is None else vocalization,
            sink)

    def display(self) -> None:
        self._emit(self.description)


class DecoyDuck(Duck):
    description = "I'm a duck decoy"

    def __init__(self, flight=None, vocalization=None, sink=None):
        super().__init__(
            FlyNoWay() if flight is None else flight,
            MuteQuack() if vocalization is None else vocalization,
            sink)

    def display(self) -> None:
        self._emit(self.description)
