from .behavior_interface import FlightBehavior


class FlyWithWings(FlightBehavior):
    """
    Flight for ducks that can fly unaided
    """

    def fly(self) -> str:
        return "I'm flying!"


class FlyNoWay(FlightBehavior):
    """
    Flight for ducks that cannot fly at all
    """

    def fly(self) -> str:
        return "I can't fly"


class FlyRocketPowered(FlightBehavior):
    """
    Flight with added propulsion, can be fitted to any duck, including ones that cannot fly
    """

    def fly(self) -> str:
        return "I'm flying with a rocket!"
