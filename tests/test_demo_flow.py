import pytest

from delegation.delegation_errors import UnboundSlotError
from duck_behavior.duck import MallardDuck, ModelDuck
from duck_behavior.flight_behavior import FlyRocketPowered
from orchestration.demonstration import (run_demonstration, run_duck_demo,
                                         run_ordering_demo, run_payment_demo)
from ordering.ordering_context import OrderingContext
from utils.framework.custom_logger_util import get_logger

LOGGER = get_logger()


def test_mallard_then_model_duck_scenario(recording_sink):
    """
    A mallard quacks then flies with its defaults, a model duck cannot fly until it
    is fitted with a rocket
    """
    mallard = MallardDuck(sink=recording_sink)
    mallard.perform_quack()
    mallard.perform_fly()
    assert recording_sink.effects == ["Quack", "I'm flying!"]

    recording_sink.clear()
    model = ModelDuck(sink=recording_sink)
    model.perform_fly()
    model.set_fly_behavior(FlyRocketPowered())
    model.perform_fly()

    first, second = recording_sink.effects
    assert first == "I can't fly"
    assert second == "I'm flying with a rocket!"
    assert first != second


def test_duck_demo_sequence(recording_sink):
    run_duck_demo(recording_sink)
    assert recording_sink.effects == [
        "Quack", "I'm flying!", "I can't fly", "I'm flying with a rocket!",
    ]


def test_payment_demo_sequence(recording_sink):
    run_payment_demo(recording_sink)
    assert recording_sink.effects == [
        "PayPal Authentication", "PayPal Transaction",
        "Credit card Authentication", "Credit card Transaction",
        "Bitcoin Authentication", "Bitcoin Transaction",
    ]


def test_ordering_demo_with_configured_sample(recording_sink, config_fixture):
    sample_data = config_fixture.get_settings("ordering_sample_data")
    LOGGER.debug(f"Ordering sample data: {sample_data}")

    run_ordering_demo(recording_sink, sample_data)

    assert recording_sink.effects == [
        "Client: Strategy is set to normal sorting.",
        "Context: Sorting data using the strategy (not sure how it'll do it)",
        "a,b,c,d,e",
        "",
        "Client: Strategy is set to reverse sorting.",
        "Context: Sorting data using the strategy (not sure how it'll do it)",
        "e,d,c,b,a",
    ]


def test_ordering_demo_defaults_to_letters(recording_sink):
    run_ordering_demo(recording_sink)
    assert "a,b,c,d,e" in recording_sink.effects
    assert "e,d,c,b,a" in recording_sink.effects


def test_full_demonstration(recording_sink):
    run_demonstration(recording_sink)
    effects = recording_sink.effects

    assert effects[:4] == ["Quack", "I'm flying!", "I can't fly", "I'm flying with a rocket!"]
    assert effects.index("PayPal Authentication") < effects.index("PayPal Transaction")
    assert effects[-1] == "e,d,c,b,a"


@pytest.mark.parametrize("sample, expected_last", [
    ([], ""),
    ([5, 3, 9], "9,5,3"),
    (("b", "a"), "b,a"),
])
def test_ordering_demo_edge_samples(recording_sink, sample, expected_last):
    run_ordering_demo(recording_sink, sample)
    assert recording_sink.effects[-1] == expected_last


def test_unbound_context_fails_fast(recording_sink):
    with pytest.raises(UnboundSlotError):
        OrderingContext(sink=recording_sink).order_sample_data(["a"])
    assert recording_sink.effects == []
