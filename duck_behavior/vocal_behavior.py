from .behavior_interface import VocalizationBehavior


class Quack(VocalizationBehavior):

    def quack(self) -> str:
        return "Quack"


class MuteQuack(VocalizationBehavior):

    def quack(self) -> str:
        return "<< Silence >>"


class Squeak(VocalizationBehavior):

    def quack(self) -> str:
        return "Squeak"
