class DelegationError(Exception):
    """
    Base class for every error raised while binding or invoking a delegated behavior
    """


class UnboundSlotError(DelegationError):
    """
    Raised when a host operation is invoked through a slot that has no variant bound

    Attributes:
        host_name (str): Class name of the host that owns the slot
        slot (str): Name of the empty slot
    """

    def __init__(self, host_name: str, slot: str):
        # args mirrors the constructor signature
        super().__init__(host_name, slot)
        self.host_name = host_name
        self.slot = slot

    def __str__(self):
        return f"{self.host_name} has no variant bound to slot '{self.slot}'"


class ContractViolationError(DelegationError, TypeError):
    """
    Raised when an object that does not satisfy a slot's contract is bound into that slot
    """

    def __init__(self, slot: str, contract: type, reason: str):
        super().__init__(slot, contract, reason)
        self.slot = slot
        self.contract = contract
        self.reason = reason

    def __str__(self):
        return f"Cannot bind to slot '{self.slot}' ({self.contract.__name__}): {self.reason}"


class UnknownSlotError(DelegationError, KeyError):
    """
    Raised when a slot name is not declared by the host
    """

    def __init__(self, host_name: str, slot: str, known_slots):
        self.known_slots = tuple(known_slots)
        super().__init__(host_name, slot, self.known_slots)
        self.host_name = host_name
        self.slot = slot

    def __str__(self):
        return f"{self.host_name} has no slot '{self.slot}', known slots: {', '.join(self.known_slots)}"
