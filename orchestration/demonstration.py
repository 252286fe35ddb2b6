from typing import Sequence

from delegation.host import EffectSink
from duck_behavior.duck import MallardDuck, ModelDuck
from duck_behavior.flight_behavior import FlyRocketPowered
from ordering.ordering_context import OrderingContext
from ordering.ordering_strategy.ascending_strategy import AscendingOrder
from ordering.ordering_strategy.descending_strategy import DescendingOrder
from payment_processing.payment_methods import (BitcoinPayment,
                                                CreditCardPayment,
                                                PayPalPayment)
from payment_processing.payment_processor import PaymentProcessor
from utils.framework.custom_logger_util import get_logger

LOGGER = get_logger(__name__)

DEFAULT_SAMPLE_DATA = ["a", "b", "c", "d", "e"]


def run_duck_demo(sink: EffectSink) -> None:
    """
    A mallard quacks and flies with its default behaviors, then a model duck that cannot
    fly is fitted with a rocket at runtime
    """
    LOGGER.info("Running duck behavior demonstration")

    mallard = MallardDuck(sink=sink)
    mallard.perform_quack()
    mallard.perform_fly()

    model = ModelDuck(sink=sink)
    model.perform_fly()
    model.set_fly_behavior(FlyRocketPowered())
    model.perform_fly()


def run_payment_demo(sink: EffectSink) -> None:
    """
    One processor takes a payment through each payment rail in turn
    """
    LOGGER.info("Running payment processing demonstration")

    processor = PaymentProcessor(sink=sink)

    for payment_method in (PayPalPayment(), CreditCardPayment(), BitcoinPayment()):
        processor.set_payment_method(payment_method)
        processor.process_payment()


def run_ordering_demo(sink: EffectSink, sample_data: Sequence | None = None) -> None:
    """
    The client picks a concrete ordering strategy and hands it to the context, first
    normal sorting and then reverse sorting

    Args:
        sink (EffectSink): Receiver for every effect and client message
        sample_data (Sequence | None): Data to order, the letters a to e by default
    """
    LOGGER.info("Running ordering strategy demonstration")
    data = list(DEFAULT_SAMPLE_DATA if sample_data is None else sample_data)

    context = OrderingContext(sink=sink)

    sink("Client: Strategy is set to normal sorting.")
    context.set_strategy(AscendingOrder())
    context.order_sample_data(data)

    sink("")

    sink("Client: Strategy is set to reverse sorting.")
    context.set_strategy(DescendingOrder())
    context.order_sample_data(data)


def run_demonstration(sink: EffectSink, sample_data: Sequence | None = None) -> None:
    """
    Run every demonstration once, in order
    """
    run_duck_demo(sink)
    run_payment_demo(sink)
    run_ordering_demo(sink, sample_data)
    LOGGER.info("Demonstration finished")
