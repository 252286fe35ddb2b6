from delegation.host import EffectSink, Host
from utils.framework.custom_logger_util import get_logger

from .payment_interface import PaymentMethod

LOGGER = get_logger(__name__)

PAYMENT_METHOD_SLOT = "payment_method"


class PaymentProcessor(Host):
    """
    PaymentProcessor takes payments through whichever payment method is currently set,
    without knowing which rail it is talking to

    Attributes:
        slot_contracts (dict[str, type]): A single 'payment_method' slot bound to PaymentMethod
    """

    slot_contracts = {PAYMENT_METHOD_SLOT: PaymentMethod}

    def __init__(self, payment_method: PaymentMethod | None = None, sink: EffectSink | None = None):
        """
        Initialize the processor, optionally with a payment method already set

        Args:
            payment_method (PaymentMethod | None): Initial payment method, unbound when None
            sink (EffectSink | None): Receiver for authentication and transaction effects
        """
        super().__init__(sink=sink, **{PAYMENT_METHOD_SLOT: payment_method})

    def set_payment_method(self, payment_method: PaymentMethod) -> None:
        self.bind(PAYMENT_METHOD_SLOT, payment_method)

    def process_payment(self) -> None:
        """
        Authenticate with the current payment method, then process the transaction

        Raises:
            UnboundSlotError: If no payment method has been set
        """
        payment_method = self._delegate(PAYMENT_METHOD_SLOT)
        LOGGER.debug(f"Processing payment with {type(payment_method).__name__}")

        self._emit(payment_method.authenticate())
        self._emit(payment_method.process_transaction())
