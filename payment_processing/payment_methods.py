from .payment_interface import PaymentMethod


class PayPalPayment(PaymentMethod):

    def authenticate(self) -> str:
        return "PayPal Authentication"

    def process_transaction(self) -> str:
        return "PayPal Transaction"


class CreditCardPayment(PaymentMethod):

    def authenticate(self) -> str:
        return "Credit card Authentication"

    def process_transaction(self) -> str:
        return "Credit card Transaction"


class BitcoinPayment(PaymentMethod):

    def authenticate(self) -> str:
        return "Bitcoin Authentication"

    def process_transaction(self) -> str:
        return "Bitcoin Transaction"
