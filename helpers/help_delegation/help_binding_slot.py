from delegation.delegation_errors import ContractViolationError
from utils.framework.custom_logger_util import get_logger

LOGGER = get_logger()


class BindingSlotHelper:
    def __init__(self):
        """
        Initialization can take place in future developments
        """

    @staticmethod
    def get_contract_operations(contract: type) -> list[str]:
        """
        Collect the operation names a contract requires

        Args:
            contract (type): An abstract contract class

        Returns:
            list[str]: Sorted names of the contract's abstract methods
        """
        return sorted(getattr(contract, "__abstractmethods__", ()))

    @staticmethod
    def find_missing_operations(contract: type, variant: object) -> list[str]:
        """
        List the contract operations the variant does not provide as callables

        Args:
            contract (type): The contract the slot is declared with
            variant (object): The candidate variant

        Returns:
            list[str]: Operation names that are absent or not callable on the variant
        """
        return [
            operation for operation in BindingSlotHelper.get_contract_operations(contract)
            if not callable(getattr(variant, operation, None))
        ]

    @staticmethod
    def validate_variant(slot: str, contract: type, variant: object) -> None:
        """
        Make sure a variant fully satisfies the contract of the slot it is bound to
        Nominal subclasses and structurally matching objects are both accepted

        Args:
            slot (str): Name of the slot being bound
            contract (type): The contract declared for the slot
            variant (object): The candidate variant

        Raises:
            ContractViolationError: If the variant is missing, is a class, or lacks any contract operation
        """
        if variant is None:
            reason = "a variant is required, slots cannot be reset to unbound"
        elif isinstance(variant, type):
            reason = f"expected an instance, got the class {variant.__name__}"
        else:
            missing = BindingSlotHelper.find_missing_operations(contract, variant)
            if not missing:
                return
            reason = f"{type(variant).__name__} is missing operation(s): {', '.join(missing)}"

        LOGGER.error(f"Contract violation on slot '{slot}': {reason}")
        raise ContractViolationError(slot, contract, reason)
