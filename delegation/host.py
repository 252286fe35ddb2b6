from typing import Any, Callable

from delegation.delegation_errors import UnboundSlotError, UnknownSlotError
from helpers.help_delegation.help_binding_slot import BindingSlotHelper
from utils.framework.custom_logger_util import get_logger

LOGGER = get_logger(__name__)

EffectSink = Callable[[str], None]


def log_effect(effect: str) -> None:
    """
    Default effect sink, writes every observable effect to the log
    """
    LOGGER.info(effect)


class Host:
    """
    Host holds one binding slot per contract it delegates to and forwards its operations
    to whichever variant is currently bound in the relevant slot

    Subclasses declare their slots in 'slot_contracts', mapping each slot name to the
    contract class a variant must satisfy to be bound there

    Attributes:
        slot_contracts (dict[str, type]): Slot name to contract mapping, declared per subclass
        _slots (dict[str, Any]): Current binding for each slot, None while unbound
        _sink (EffectSink): Where the observable effects of delegated operations are sent
    """

    slot_contracts: dict[str, type] = {}

    RESERVED_SLOT_NAMES = frozenset({"sink"})

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)

        # slot names share the constructor keywords with 'sink'
        reserved = cls.RESERVED_SLOT_NAMES.intersection(cls.slot_contracts)
        if reserved:
            raise TypeError(f"{cls.__name__} declares reserved slot name(s): {', '.join(sorted(reserved))}")

    def __init__(self, *, sink: EffectSink | None = None, **bindings: Any):
        """
        Initialize the host with every declared slot unbound, then bind the given variants

        Args:
            sink (EffectSink | None): Receiver of effect texts, logs them when not provided.
                Keyword only, 'sink' is therefore reserved and cannot be used as a slot name
            **bindings: Initial variants keyed by slot name, None leaves a slot unbound
        """
        self._slots: dict[str, Any] = {slot: None for slot in self.slot_contracts}
        self._sink = sink if sink is not None else log_effect

        for slot, variant in bindings.items():
            if variant is not None:
                self.bind(slot, variant)

    def bind(self, slot: str, variant: Any) -> None:
        """
        Replace the variant referenced by the named slot

        Args:
            slot (str): Name of the slot to rebind
            variant (Any): A variant satisfying the slot's contract

        Raises:
            UnknownSlotError: If the host does not declare the slot
            ContractViolationError: If the variant does not satisfy the slot's contract
        """
        contract = self._get_contract(slot)
        BindingSlotHelper.validate_variant(slot, contract, variant)

        previous = self._slots[slot]
        self._slots[slot] = variant
        LOGGER.debug(
            f"{type(self).__name__}.{slot}: {'unbound' if previous is None else type(previous).__name__}"
            f" -> {type(variant).__name__}")

    def get_binding(self, slot: str) -> Any:
        """
        Return the variant bound to the slot, or None when it is unbound
        """
        self._get_contract(slot)
        return self._slots[slot]

    def is_bound(self, slot: str) -> bool:
        return self.get_binding(slot) is not None

    def bound_slots(self) -> dict[str, Any]:
        """
        Snapshot of the bound slots and their variants
        """
        return {slot: variant for slot, variant in self._slots.items() if variant is not None}

    def _get_contract(self, slot: str) -> type:
        try:
            return self.slot_contracts[slot]
        except KeyError:
            raise UnknownSlotError(type(self).__name__, slot, self.slot_contracts) from None

    def _delegate(self, slot: str) -> Any:
        """
        Fetch the variant currently bound to the slot for an invocation

        Raises:
            UnboundSlotError: If nothing has been bound to the slot yet
        """
        variant = self.get_binding(slot)
        if variant is None:
            LOGGER.error(f"{type(self).__name__} invoked slot '{slot}' before binding a variant")
            raise UnboundSlotError(type(self).__name__, slot)
        return variant

    def _emit(self, effect: str) -> None:
        self._sink(effect)
